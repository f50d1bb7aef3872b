"""Scan and build summaries.

Both summaries list at most MAX_LIST_SIZE invalid items and state how
many more were left out.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from .core.constants import MAX_LIST_SIZE
from .core.types import InvalidItem, ScanReportDict
from .output import DASH


def capped_listing(items: Sequence[object], bullet: str, limit: int = MAX_LIST_SIZE) -> list[str]:
    """Render up to `limit` items, plus a remainder line if needed."""
    lines = [f"{bullet} {item}" for item in items[:limit]]
    if len(items) > limit:
        lines.append(f"{bullet} ... and {len(items) - limit} more.")
    return lines


def _plural(count: int, noun: str) -> str:
    return noun if count == 1 else f"{noun}s"


@dataclass
class ScanReport:
    """Results of validating one domain of a resource pack.

    Attributes:
        domain: Domain name (e.g., 'images')
        valid_count: Items that passed validation
        total_count: Number of items in the reference
        invalid_items: Every invalid item, in discovery order
    """

    domain: str
    valid_count: int
    total_count: int
    invalid_items: list[InvalidItem] = field(default_factory=list)

    @property
    def invalid_count(self) -> int:
        return len(self.invalid_items)

    @property
    def percent(self) -> float:
        """Share of the reference that was found, in percent."""
        if self.total_count == 0:
            return 0.0
        return self.valid_count / self.total_count * 100.0

    @property
    def milestone_percent(self) -> float:
        """Progress towards the next multiple of 1000 valid items."""
        return (self.valid_count % 1000) * 0.1

    @property
    def remaining_invalid(self) -> int:
        return max(self.invalid_count - MAX_LIST_SIZE, 0)

    def render(self) -> list[str]:
        lines = [
            f"Found {self.valid_count}/{self.total_count} items. "
            f"({self.percent:.2f}% of the way!)",
            f"{DASH} {self.milestone_percent:.1f}% of the way to the next 1000!",
        ]

        count = self.invalid_count
        if count == 0:
            lines.append(f"{DASH} No invalid items found!")
            return lines

        lines.append(f"{DASH} Found {count} invalid {_plural(count, 'item')}.")
        lines.extend(capped_listing(self.invalid_items, f"  {DASH}"))
        return lines

    def to_dict(self) -> ScanReportDict:
        return {
            "domain": self.domain,
            "valid_count": self.valid_count,
            "total_count": self.total_count,
            "invalid_count": self.invalid_count,
            "percent": round(self.percent, 2),
            "milestone_percent": round(self.milestone_percent, 1),
            "invalid_items": [str(item) for item in self.invalid_items[:MAX_LIST_SIZE]],
            "remaining_invalid": self.remaining_invalid,
        }


@dataclass
class BuildSummary:
    """Results of generating one domain's reference.

    Attributes:
        item_name: Plural noun for the domain's items (e.g., 'images')
        valid_count: Items written to the reference
        invalid_items: Items left out of the reference
    """

    item_name: str
    valid_count: int
    invalid_items: list[InvalidItem] = field(default_factory=list)

    @property
    def invalid_count(self) -> int:
        return len(self.invalid_items)

    def render(self) -> list[str]:
        lines = [f"Found {self.valid_count} valid {self.item_name}."]

        count = self.invalid_count
        if count == 0:
            lines.append(f"{DASH} No invalid items found!")
            return lines

        if count == 1:
            lines.append(
                f"{DASH} Found {count} invalid item:\n"
                "  It will not be included in the reference file."
            )
        else:
            lines.append(
                f"{DASH} Found {count} invalid items:\n"
                "  They will not be included in the reference file."
            )
        lines.extend(capped_listing(self.invalid_items, f"  {DASH}"))
        return lines
