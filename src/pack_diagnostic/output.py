"""Console output helpers.

Status lines go to stderr so that stdout only carries reports (or the
JSON document of `scan --json`).
"""

import sys
from typing import TextIO

DASH = "-"


def divider(message: str, file: TextIO | None = None) -> None:
    print(f"[ ] : {message}", file=file or sys.stderr)


def info(message: str, file: TextIO | None = None) -> None:
    print(f"[i] : {message}", file=file or sys.stderr)


def warn(message: str, file: TextIO | None = None) -> None:
    print(f"[!] : {message}", file=file or sys.stderr)


def announce(message: str, item: object, file: TextIO | None = None) -> None:
    divider(f"{message} {item}...", file=file)


def update_progress(of_what: str, count: int, file: TextIO | None = None) -> None:
    """Rewrite the current console line with a running count."""
    stream = file or sys.stderr
    stream.write(f"\rFound {count} {of_what}...")
    stream.flush()


def end_progress(file: TextIO | None = None) -> None:
    print(file=file or sys.stderr)
