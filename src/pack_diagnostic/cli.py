"""Command-line interface for the resource pack diagnostic tool.

Actions:
    gen:   generate reference files from extracted game files
    scan:  validate a resource pack against the reference files
    build: copy a resource pack, keeping only files the references accept
"""

import argparse
import json
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from . import output
from .build import build_resource_pack
from .builder import generate_reference
from .core.errors import PackDiagnosticError
from .core.paths import require_dir
from .core.patterns import Patterns
from .core.types import ScanDocument
from .core.validator import validate_report
from .domains.base import Domain
from .registry import DomainRegistry
from .report import BuildSummary, ScanReport
from .scanner import scan_domain

T = TypeVar("T")

ACTIONS = ("gen", "scan", "build")


class DomainFailures(PackDiagnosticError):
    """One or more domains failed while --keep-going was set."""

    def __init__(self, failed: list[str], results: list):
        self.failed = failed
        self.results = results
        super().__init__(f"Failed domains: {', '.join(failed)}")


def _run_domains(
    domains: list[Domain],
    action: Callable[[Domain], T | None],
    keep_going: bool,
) -> list[T]:
    """Run action for every domain.

    Without keep_going the first fatal error propagates. With it, the
    failing domain is reported and skipped, and DomainFailures is raised
    once every domain has run; it carries the results of the others.
    """
    results: list[T] = []
    failed: list[str] = []

    for domain in domains:
        try:
            result = action(domain)
        except (PackDiagnosticError, OSError) as e:
            if not keep_going:
                raise
            output.warn(f"{domain.name}: {e}")
            failed.append(domain.name)
            continue

        if result is not None:
            results.append(result)

    if failed:
        raise DomainFailures(failed, results)
    return results


def generate_references(
    extracted_root: Path,
    refs_dir: Path,
    domains: list[Domain],
    keep_going: bool = False,
    show_progress: bool = True,
) -> list[BuildSummary]:
    """Generate the reference files of every domain found in extracted_root.

    Raises:
        MissingDirectoryError: If either directory does not exist
        PackDiagnosticError: If a domain fails (see keep_going)
    """
    output.info("ACTION - Generate References")
    require_dir(extracted_root, "`-i`")
    require_dir(refs_dir, "`-o`")

    def generate(domain: Domain) -> BuildSummary | None:
        source = domain.source_path(extracted_root)
        if not source.exists():
            output.warn(f"{source} not found, skipping {domain.name}.")
            return None

        summary = generate_reference(domain, source, refs_dir, show_progress)
        print("\n".join(summary.render()))
        return summary

    return _run_domains(domains, generate, keep_going)


def scan_pack(
    pack_root: Path,
    refs_dir: Path,
    domains: list[Domain],
    keep_going: bool = False,
    show_progress: bool = True,
    print_reports: bool = True,
) -> list[ScanReport]:
    """Validate every domain present in pack_root.

    Raises:
        MissingDirectoryError: If either directory does not exist
        PackDiagnosticError: If a domain fails (see keep_going)
    """
    output.info("ACTION - Scan Directory")
    require_dir(pack_root, "`-i`")
    require_dir(refs_dir, "`-r` (run `gen` first)")

    def scan(domain: Domain) -> ScanReport | None:
        root = domain.content_path(pack_root)
        if not root.is_dir():
            output.divider(f"No {domain.name} in this pack, skipping.")
            return None

        report = scan_domain(domain, root, refs_dir, show_progress)
        if print_reports:
            print(f"[{domain.name}]")
            print("\n".join(report.render()))
        return report

    return _run_domains(domains, scan, keep_going)


def build_document(pack_root: Path, reports: list[ScanReport]) -> ScanDocument:
    return {
        "pack_root": str(pack_root.resolve()),
        "reports": [report.to_dict() for report in reports],
    }


def print_document(pack_root: Path, reports: list[ScanReport]) -> None:
    """Validate the JSON document against the schema and print it."""
    document = build_document(pack_root, reports)
    validate_report(document)

    json.dump(document, sys.stdout, indent=2)
    print()  # Add newline at end


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the diagnostic tool."""
    DomainRegistry.discover_domains()

    parser = argparse.ArgumentParser(
        description="Tool for diagnosing resource packs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate references from extracted game files
  pack-diagnostic gen -i /path/to/extracted -o /path/to/refs

  # Scan a pack
  pack-diagnostic scan -i /path/to/pack -r /path/to/refs

  # Scan only images and sounds, as JSON
  pack-diagnostic scan -i /path/to/pack -r /path/to/refs --domain images sounds --json

  # Copy the valid parts of a pack
  pack-diagnostic build -i /path/to/pack -o /path/to/copy -r /path/to/refs
        """,
    )

    parser.add_argument("action", choices=ACTIONS, help="The action to be performed")

    parser.add_argument(
        "-i", "--input", type=Path, default=Path("."), help="Input path directory"
    )

    parser.add_argument(
        "-o", "--output", type=Path, default=Path("."), help="Output path directory"
    )

    parser.add_argument(
        "-r", "--reference", type=Path, default=Path("."), help="Reference path directory"
    )

    parser.add_argument(
        "--domain",
        nargs="+",
        choices=DomainRegistry.list_domains(),
        default=None,
        help="Only process these domains (default: all)",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="scan: print the reports as a JSON document",
    )

    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Skip a domain whose reference is missing or broken instead of stopping",
    )

    parser.add_argument(
        "--no-progress", action="store_true", help="Do not print progress lines"
    )

    args = parser.parse_args(argv)

    # Compiled once, shared by every domain
    patterns = Patterns.compile()
    domains = DomainRegistry.create_all(patterns, args.domain)
    show_progress = not args.no_progress

    output.info("Started diagnostic.")

    try:
        if args.action == "gen":
            generate_references(
                args.input, args.output, domains, args.keep_going, show_progress
            )

        elif args.action == "scan":
            reports = scan_pack(
                args.input,
                args.reference,
                domains,
                args.keep_going,
                show_progress,
                print_reports=not args.json,
            )

            if args.json:
                print_document(args.input, reports)

        else:
            build_resource_pack(args.input, args.output, args.reference, domains)

    except DomainFailures as e:
        if args.action == "scan" and args.json:
            try:
                print_document(args.input, e.results)
            except PackDiagnosticError as schema_error:
                print(f"Error: {schema_error}", file=sys.stderr)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    output.info("Diagnostic complete!")


if __name__ == "__main__":
    main()
