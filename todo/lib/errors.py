import sys

__all__ = ["echo"]


def echo(message: str) -> None:
    """Write a line to stderr."""
    sys.stderr.write(message + "\n")
