"""Core utility functions: console logging and path helpers."""

import os

from rich.console import Console

console = Console()


def printable(text: str) -> str:
    """Replace surrogate-escaped bytes (undecodable argv or filenames) with U+FFFD.

    Pure function: valid text is returned unchanged.
    """
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def log(message: str, style: str = "", log_file: str | None = None) -> None:
    """Write a message to the console (with optional style) and, if given, a log file.

    Messages are plain text: module references are user input and may contain
    square brackets, so rich markup is off. Soft wrap keeps long paths on one line.
    """
    message = printable(message)
    if style:
        console.print(message, style=style, markup=False, highlight=False, soft_wrap=True)
    else:
        console.print(message, markup=False, highlight=False, soft_wrap=True)

    if not log_file:
        return
    try:
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(message + "\n")
    except Exception:
        pass  # Never break the run over logging


def resolve_path(path: str, base: str | None = None) -> str:
    """Expand ~ and return an absolute, normalized path.

    Relative paths are resolved against *base* when given, otherwise
    against the current working directory. The path need not exist.
    """
    expanded = os.path.expanduser(path)
    if base and not os.path.isabs(expanded):
        expanded = os.path.join(base, expanded)
    return os.path.abspath(expanded)


def count_lines(content: str) -> int:
    """Count newline characters, the same figure `wc -l` reports.

    Pure function: a final line without a trailing newline is not counted.
    """
    return content.count("\n")
