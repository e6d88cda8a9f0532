"""Feed an input file through a chain of commands into an output file."""

__version__ = "0.1.0"