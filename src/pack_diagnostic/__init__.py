"""Resource pack diagnostics.

This package generates reference files from extracted game assets and
validates resource packs (images, sounds, music and localization)
against them, reporting renamed, resized or unknown assets.
"""

# Core library interface
from .builder import BuildData, ReferenceBuilder, generate_reference
from .registry import DomainRegistry
from .report import BuildSummary, ScanReport
from .scanner import Scanner, scan_domain
from .domains.base import Domain, FileValidator, Validator

# Core utilities
from .core import (
    IGNORED,
    VALID,
    ImageSize,
    InvalidItem,
    ItemStatus,
    PackDiagnosticError,
    Patterns,
    Slop,
    SlopParseError,
    Status,
    VersionMismatchError,
    parse,
    serialize,
)

# CLI and actions
from .build import build_resource_pack, copy_files_if
from .cli import generate_references, main, scan_pack

__version__ = "0.1.0"

# Auto-discover and register all domains
DomainRegistry.discover_domains()

__all__ = [
    # Primary library interface
    "BuildData",
    "BuildSummary",
    "Domain",
    "DomainRegistry",
    "FileValidator",
    "ReferenceBuilder",
    "ScanReport",
    "Scanner",
    "Validator",
    "generate_reference",
    "scan_domain",
    # Core utilities
    "IGNORED",
    "VALID",
    "ImageSize",
    "InvalidItem",
    "ItemStatus",
    "PackDiagnosticError",
    "Patterns",
    "Slop",
    "SlopParseError",
    "Status",
    "VersionMismatchError",
    "parse",
    "serialize",
    # Actions
    "build_resource_pack",
    "copy_files_if",
    "generate_references",
    "main",
    "scan_pack",
]
