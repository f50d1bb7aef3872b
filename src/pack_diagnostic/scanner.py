"""Pack validation.

The scanner walks whatever a domain's validator yields, classifies
each item once and keeps the counts needed for the report. It knows
nothing about the domains themselves.
"""

from pathlib import Path

from . import output
from .core.constants import PROGRESS_INTERVAL
from .core.types import InvalidItem, Status
from .domains.base import Domain, Validator
from .report import ScanReport


class Scanner:
    """Accumulates classification results for one domain.

    Attributes:
        item_name: Plural noun used in progress output
        valid_count: Items classified as valid
        invalid_items: Every item classified as invalid, in order
    """

    def __init__(
        self,
        item_name: str = "items",
        progress_interval: int = PROGRESS_INTERVAL,
        show_progress: bool = True,
    ):
        self.item_name = item_name
        self.progress_interval = progress_interval
        self.show_progress = show_progress
        self.valid_count = 0
        self.invalid_items: list[InvalidItem] = []

    @property
    def joined_count(self) -> int:
        return self.valid_count + len(self.invalid_items)

    def scan(self, validator: Validator) -> None:
        """Classify every item of the validator.

        Raises:
            OSError: If walking the validated tree fails
            PackDiagnosticError: On fatal problems such as non-UTF-8 paths
        """
        for item in validator.items():
            status = validator.classify(item)

            if status.status is Status.IGNORED:
                continue
            if status.status is Status.VALID:
                self.valid_count += 1
            else:
                self.invalid_items.append(status.reason)  # type: ignore[arg-type]

            if self.show_progress and self.joined_count % self.progress_interval == 0:
                output.update_progress(self.item_name, self.joined_count)

        if self.show_progress:
            output.update_progress(self.item_name, self.joined_count)
            output.end_progress()

    def report(self, domain: str, total_count: int) -> ScanReport:
        return ScanReport(
            domain=domain,
            valid_count=self.valid_count,
            total_count=total_count,
            invalid_items=list(self.invalid_items),
        )


def scan_domain(
    domain: Domain,
    root: Path,
    refs_dir: Path,
    show_progress: bool = True,
) -> ScanReport:
    """Validate one domain's directory against its reference.

    Args:
        domain: Domain to validate
        root: The domain's directory inside the pack
        refs_dir: Directory holding the reference files

    Returns:
        The domain's scan report

    Raises:
        PackDiagnosticError: If the reference is missing or incompatible
    """
    validator = domain.open_validator(refs_dir, root)

    output.announce("Scanning", root)
    scanner = Scanner(domain.item_name, domain.progress_interval, show_progress)
    scanner.scan(validator)
    output.divider("Scan complete.")

    return scanner.report(domain.name, validator.total_count)
