"""Reference generation.

The builder is domain-agnostic: it asks the domain for candidates,
turns each into a reference entry, groups the entries by directory
key and lets the domain write the result.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from . import output
from .core.constants import COUNT_KEY, VERSION_KEY, Version
from .core.errors import InvalidEntryError
from .core.slop import Slop
from .core.types import InvalidItem
from .domains.base import Domain, ReferenceEntry
from .report import BuildSummary


@dataclass
class BuildData:
    """Entries collected while walking a source tree.

    Attributes:
        item_name: Plural noun for the collected items
        valid_entries: Entries grouped by directory key, in discovery order
        invalid_entries: Reasons for rejected items, keyed by item; never
            written to the reference
    """

    item_name: str
    valid_entries: dict[str, list[ReferenceEntry]] = field(default_factory=dict)
    invalid_entries: dict[str, InvalidItem] = field(default_factory=dict)
    valid_count: int = 0

    def push_valid(self, key: str, entry: ReferenceEntry) -> None:
        self.valid_count += 1
        self.valid_entries.setdefault(key, []).append(entry)

    def push_invalid(self, reason: InvalidItem) -> None:
        self.invalid_entries[reason.key] = reason

    @property
    def invalid_count(self) -> int:
        return len(self.invalid_entries)

    @property
    def joined_count(self) -> int:
        return self.valid_count + self.invalid_count

    def entries(self) -> Iterator[ReferenceEntry]:
        """Iterate over every valid entry, group by group."""
        for group in self.valid_entries.values():
            yield from group

    def to_slop(self, version: Version) -> Slop:
        """Convert to a SLOP reference with `!version` and `!count`."""
        slop = Slop()
        slop.insert(VERSION_KEY, str(version))
        slop.insert(COUNT_KEY, str(self.joined_count))

        for key, group in self.valid_entries.items():
            slop.insert(key, [str(entry) for entry in group])

        return slop

    def summary(self) -> BuildSummary:
        return BuildSummary(
            item_name=self.item_name,
            valid_count=self.valid_count,
            invalid_items=list(self.invalid_entries.values()),
        )


class ReferenceBuilder:
    """Builds reference data for a single domain.

    Example:
        >>> builder = ReferenceBuilder(ImagesDomain(Patterns.compile()))
        >>> data = builder.build(Path('/extracted/Images'))
        >>> builder.domain.write_reference(data, Path('/refs'))
    """

    def __init__(self, domain: Domain, show_progress: bool = True):
        self.domain = domain
        self.show_progress = show_progress

    def build(self, source: Path) -> BuildData:
        """Walk source and collect the domain's entries.

        Raises:
            OSError: If the walk fails
            NonUtf8PathError: If a path is not valid UTF-8
        """
        data = BuildData(self.domain.item_name)
        interval = self.domain.progress_interval

        for key, candidate in self.domain.discover(source):
            try:
                data.push_valid(key, self.domain.open_entry(candidate))
            except InvalidEntryError as e:
                data.push_invalid(e.reason)

            if self.show_progress and data.joined_count % interval == 0:
                output.update_progress(data.item_name, data.joined_count)

        if self.show_progress:
            output.update_progress(data.item_name, data.joined_count)
            output.end_progress()

        return data


def generate_reference(
    domain: Domain,
    source: Path,
    refs_dir: Path,
    show_progress: bool = True,
) -> BuildSummary:
    """Generate and write the reference of one domain.

    Args:
        domain: Domain to generate
        source: Extracted source file or directory of the domain
        refs_dir: Directory receiving the reference file

    Returns:
        Summary of valid and invalid items
    """
    output.divider(f"Generating {domain.name} reference...")
    output.announce("Scanning", source)

    data = ReferenceBuilder(domain, show_progress).build(source)
    output.divider("Scan complete.")

    output.divider("Writing reference file to disk...")
    path = domain.write_reference(data, refs_dir)
    output.announce("Wrote", path)

    return data.summary()
