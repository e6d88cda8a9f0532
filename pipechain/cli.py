"""Run a chain of commands from an input file to an output file."""

from __future__ import annotations

import os
import shutil
import subprocess
import sys
import tempfile
from collections.abc import Iterable, Sequence
from contextlib import ExitStack
from typing import IO, Any

from pipechain.split import split_command
from pipechain.utils import is_empty

_OUTPUT_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
_OUTPUT_MODE = 0o644


def _report(subject: str, error: OSError | None = None) -> None:
    if error is None:
        print(subject, file=sys.stderr)
    else:
        print(f"{subject}: {error.strerror}", file=sys.stderr)


def resolve_command(name: str) -> str:
    """Return the full path of *name* found on PATH, or *name* itself."""
    found = shutil.which(name)
    return found if found else name


def run_command(command_line: str, stdin: IO[Any] | None, stdout: IO[Any] | None) -> int | None:
    """Run one command line with the given input and output.

    Returns None when there is no input or the command line is empty,
    otherwise the exit status. The command runs with an empty environment.
    """
    if stdin is None or is_empty(command_line):
        return None
    words = split_command(command_line, " ")
    if not words:
        _report("Command not found")
        return 1
    command = resolve_command(words[0])
    executable = command if os.sep in command else os.path.join(os.curdir, command)
    try:
        completed = subprocess.run(
            words,
            executable=executable,
            stdin=stdin,
            stdout=stdout,
            env={},
            check=False,
        )
    except OSError as exc:
        _report(command, exc)
        return 1
    return completed.returncode


def run_pipeline(infile: str, commands: Iterable[str], outfile: str) -> list[int | None]:
    """Feed *infile* through *commands* in turn and write the result to *outfile*.

    Commands run one after another. Returns the status of each command,
    None for one that was not run.
    """
    commands = list(commands)
    if not commands:
        raise ValueError("at least one command is required")
    statuses: list[int | None] = []
    with ExitStack() as stack:
        source: IO[Any] | None
        try:
            source = stack.enter_context(open(infile, "rb"))
        except OSError as exc:
            _report(infile, exc)
            source = None
        for command in commands[:-1]:
            stage = stack.enter_context(tempfile.TemporaryFile())
            statuses.append(run_command(command, source, stage))
            stage.seek(0)
            source = stage
        try:
            descriptor = os.open(outfile, _OUTPUT_FLAGS, _OUTPUT_MODE)
        except OSError as exc:
            _report(outfile, exc)
            statuses.append(None)
            return statuses
        sink = stack.enter_context(os.fdopen(descriptor, "wb"))
        statuses.append(run_command(commands[-1], source, sink))
    return statuses


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: ``infile cmd1 [cmd2 ...] outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 3:
        return 1
    run_pipeline(args[0], args[1:-1], args[-1])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())