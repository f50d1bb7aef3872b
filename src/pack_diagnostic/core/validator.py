"""Schema checks for `scan --json` documents.

The schema ships inside the package (schemas/report.schema.json) and is
compiled into a validator on first use. Problems are described per
domain report, e.g. ``images report: valid_count: -1 is less than the
minimum of 0``.
"""

import json
from collections.abc import Iterable
from functools import lru_cache
from importlib import resources
from typing import Any

from jsonschema import Draft202012Validator, ValidationError

from .errors import ReportSchemaError
from .types import ScanDocument

SCHEMA_NAME = "report.schema.json"


@lru_cache(maxsize=1)
def load_schema() -> dict[str, Any]:
    """Load the bundled report schema."""
    text = resources.files("pack_diagnostic").joinpath("schemas", SCHEMA_NAME).read_text(
        encoding="utf-8"
    )
    return json.loads(text)  # type: ignore[no-any-return]


@lru_cache(maxsize=1)
def report_validator() -> Draft202012Validator:
    schema = load_schema()
    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


def _where(document: ScanDocument, path: Iterable[Any]) -> str:
    """Name the place of an error: the domain report and the field in it."""
    parts = list(path)
    if len(parts) >= 2 and parts[0] == "reports" and isinstance(parts[1], int):
        report = document["reports"][parts[1]]
        domain = report.get("domain") if isinstance(report, dict) else None
        owner = f"{domain} report" if isinstance(domain, str) else f"report #{parts[1]}"
        fields = ".".join(str(p) for p in parts[2:])
        return f"{owner}: {fields}" if fields else owner
    return ".".join(str(p) for p in parts) or "document"


def describe_error(document: ScanDocument, error: ValidationError) -> str:
    return f"{_where(document, error.absolute_path)}: {error.message}"


def report_problems(document: ScanDocument) -> list[str]:
    """Return every schema violation of a scan document, in document order."""
    errors = sorted(
        report_validator().iter_errors(document),
        key=lambda e: [str(p) for p in e.absolute_path],
    )
    return [describe_error(document, error) for error in errors]


def validate_report(document: ScanDocument) -> None:
    """Check a scan document against the report schema.

    Raises:
        ReportSchemaError: Listing every violation
    """
    problems = report_problems(document)
    if problems:
        raise ReportSchemaError(problems)
