# pipechain

`pipechain` feeds an input file through a chain of commands and writes the
result to an output file:

```
pipechain infile "cmd1" "cmd2" ... "cmdN" outfile
```

gives the same result as the shell line

```
< infile cmd1 | cmd2 | ... | cmdN > outfile
```

## Installation

```
pip install .
```

## Command line

```
pipechain input.txt "grep hello" "wc -l" output.txt
```

- There must be at least three arguments (input file, one command, output
  file). With fewer, the program does nothing and exits with status 1.
  Otherwise it exits with status 0, whatever the commands return.
- If the input file cannot be opened, the error is printed to standard
  error and the first command is not run. The later commands still run, on
  empty input, and the output file is still created.
- The output file is created if needed, truncated, and given mode `0644`.
  If it cannot be opened, the error is printed and the last command is not
  run.
- Each command line is split on spaces. A word that follows a single quote
  runs up to the next single quote, so `"awk '{print $1}'"` passes
  `{print $1}` as one argument. Quote characters are never passed on.
- The command name is looked up on `PATH`. If it is not found there, it is
  run as given: a name containing `/` as that path, a bare name from the
  current directory. If it cannot be started, the error is printed.
- Each command runs with an empty environment.
- An empty command line is skipped. One made only of spaces or quotes
  prints `Command not found`.

## Library use

```python
from pipechain.cli import resolve_command, run_command, run_pipeline
from pipechain.split import split_command

split_command("awk '{print $1}'", " ")   # ['awk', '{print $1}']
resolve_command("ls")                    # e.g. '/usr/bin/ls'
run_pipeline("input.txt", ["grep hello", "wc -l"], "output.txt")
```

- `run_pipeline(infile, commands, outfile)` returns the exit status of each
  command, `None` for one that was not run. It raises `ValueError` when
  `commands` is empty.
- `run_command(command_line, stdin, stdout)` runs one command line with the
  given open files and returns its exit status. It returns `None` when
  `stdin` is `None` or the command line is empty.
- `resolve_command(name)` returns the full path of `name` on `PATH`, or
  `name` itself.
- `main(argv=None)` is the command-line entry point.

Helper modules:

- `pipechain.split`: `split_words` (split on one character, empty fields
  dropped) and `split_command` (the same, with single-quote grouping).
- `pipechain.linereader`: `LineReader`, which reads a text or binary stream
  one line at a time through a fixed-size buffer (42 by default).
  `read_line()` returns `None` at the end of the stream, and the reader can
  be iterated over.
- `pipechain.printf`: `format_text` and `print_formatted` for the small
  `%c %s %p %d %i %u %x %X %%` format language, and `to_base` for writing a
  number with any digit alphabet.
- `pipechain.textutil`: ASCII character classes (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`), `to_lower`, `to_upper`, `atoi`,
  `itoa`, `trim`, `substring`, `find_within` and `compare_prefix`.
- `pipechain.utils`: `last_string` and `is_empty`.

## What it does not do

The commands do not run at the same time. Each one runs to completion and
its output is kept in a temporary file, which then becomes the input of the
next. A command that waits for endless input, or produces endless output,
never hands over to the next. There is no here-document mode, no appending
to the output file, and no shell syntax beyond single-quote grouping:
double quotes, backslashes, variables and globs are passed on as they are.