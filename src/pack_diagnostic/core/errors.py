"""Exceptions raised by the reference and validation engine.

Everything deriving from PackDiagnosticError is a setup problem that stops
the current operation. InvalidEntryError is the exception: it describes a
single asset that failed validation and is always turned into an invalid
item by the caller.
"""

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import InvalidItem


class PackDiagnosticError(Exception):
    """Base class for fatal errors."""


class SlopParseError(PackDiagnosticError, ValueError):
    """A line of a SLOP document matches neither a scalar nor a list block."""

    def __init__(self, line_no: int, line: str):
        self.line_no = line_no
        self.line = line
        super().__init__(f"Malformed SLOP: Line {line_no} is invalid: `{line}`")


class ReferenceFormatError(PackDiagnosticError, ValueError):
    """A reference file parsed but does not hold the expected values."""


class VersionMismatchError(PackDiagnosticError):
    """A reference file was written by an incompatible version of the tool."""

    def __init__(self, expected: int, got: int):
        self.expected = expected
        self.got = got
        super().__init__(f"Expected file version {expected}, but got {got}")


class MissingReferenceError(PackDiagnosticError):
    """A reference file does not exist (`gen` has not been run)."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(
            f"Reference file not found: {path} (run `gen` first or check `-r`)"
        )


class MissingDirectoryError(PackDiagnosticError):
    """A required input or output directory does not exist."""

    def __init__(self, path: Path, role: str = "directory"):
        self.path = path
        super().__init__(f"Expected {role} to be an existing directory: {path}")


class NonUtf8PathError(PackDiagnosticError):
    """A walked path cannot be represented as UTF-8."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Expected path to be a valid utf-8 string: {path!r}")


class EntryFormatError(ValueError):
    """A stored reference entry string is malformed."""


class InvalidEntryError(Exception):
    """A discovered file cannot become a reference entry."""

    def __init__(self, reason: "InvalidItem"):
        self.reason = reason
        super().__init__(str(reason))


class RecordReadError(PackDiagnosticError):
    """A CSV file is not valid UTF-8 or not valid CSV."""

    def __init__(self, path: Path, detail: str):
        self.path = path
        super().__init__(f"Couldn't read records of {path}: {detail}")


class ReportSchemaError(PackDiagnosticError):
    """A scan document does not conform to the bundled report schema."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__("Scan report failed schema validation:\n" + "\n".join(problems))
