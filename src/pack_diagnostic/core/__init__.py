"""Core utilities for reference generation and validation.

This package contains the SLOP codec, error types, path handling,
metadata readers and report schema validation used by every domain.
"""

from .errors import (
    InvalidEntryError,
    MissingDirectoryError,
    MissingReferenceError,
    NonUtf8PathError,
    PackDiagnosticError,
    RecordReadError,
    ReferenceFormatError,
    ReportSchemaError,
    SlopParseError,
    VersionMismatchError,
)
from .metadata import read_image_size, read_records
from .patterns import Patterns
from .slop import Slop, parse, serialize
from .types import IGNORED, VALID, ImageSize, InvalidItem, ItemStatus, Status
from .validator import report_problems, validate_report

__all__ = [
    "IGNORED",
    "VALID",
    "ImageSize",
    "InvalidEntryError",
    "InvalidItem",
    "ItemStatus",
    "MissingDirectoryError",
    "MissingReferenceError",
    "NonUtf8PathError",
    "PackDiagnosticError",
    "Patterns",
    "RecordReadError",
    "ReferenceFormatError",
    "ReportSchemaError",
    "Slop",
    "SlopParseError",
    "Status",
    "VersionMismatchError",
    "parse",
    "read_image_size",
    "read_records",
    "serialize",
    "report_problems",
    "validate_report",
]
