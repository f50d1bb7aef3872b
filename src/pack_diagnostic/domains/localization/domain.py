"""Localization domain.

The reference is the flat set of translation keys found in the
extracted `Loc.csv`. A pack's `Content/Localization` may only hold
files named `<locale>-<anything>.csv|json`; every record of a CSV file
must use a known key (or be a `#` comment). JSON files are accepted as
they are; their contents are not checked.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ... import output
from ...core.constants import ALL_LOC_CSV_NAME, LOC_REF_NAME
from ...core.errors import InvalidEntryError
from ...core.metadata import read_records
from ...core.paths import display_path, ensure_utf8, file_name, is_ignored_file, walk_files
from ...core.reference import read_flat_reference, write_flat_reference
from ...core.types import IGNORED, VALID, ItemStatus, MissingKey, UnrecognizedFileName
from ..base import Domain, Validator
from .model import LocalizationKey

if TYPE_CHECKING:
    from ...builder import BuildData


@dataclass(frozen=True)
class LocalizationRow:
    """One record of a pack's localization CSV file."""

    path: str
    row: int
    record: list[str]


class LocalizationValidator(Validator):
    """Checks localization file names and the keys of CSV records."""

    item_name = "entries"

    def __init__(self, root: Path, keys: set[str], domain: "LocalizationDomain"):
        super().__init__(root, len(keys))
        self.keys = keys
        self.domain = domain

    def items(self) -> Iterator[Any]:
        for path in walk_files(self.root, max_depth=1):
            if self.domain.file_type(path) == "csv":
                shown_path = display_path(path, self.root)
                for row, record in read_records(path):
                    yield LocalizationRow(shown_path, row, record)
            else:
                yield path

    def classify(self, item: Any) -> ItemStatus:
        if isinstance(item, LocalizationRow):
            return self.classify_row(item)
        return self.classify_file(item)

    def classify_row(self, item: LocalizationRow) -> ItemStatus:
        try:
            key = LocalizationKey.from_record(item.record, item.path, item.row)
        except InvalidEntryError as e:
            return ItemStatus.invalid(e.reason)

        if key.is_comment:
            return IGNORED
        if key.key in self.keys:
            return VALID
        return ItemStatus.invalid(MissingKey(item.path, key.key))

    def classify_file(self, path: Path) -> ItemStatus:
        """Classify a file whose records are not scanned.

        CSV files only reach this through is_copy_eligible; their
        records are classified individually during a scan.
        """
        if is_ignored_file(path):
            return IGNORED

        file_type = self.domain.file_type(path)
        if file_type is None:
            return ItemStatus.invalid(UnrecognizedFileName(display_path(path, self.root)))

        if file_type == "json":
            output.warn(f"{display_path(path, self.root)}: JSON files aren't validated yet.")
        return IGNORED

    def is_copy_eligible(self, path: Path) -> bool:
        return self.domain.file_type(path) is not None


class LocalizationDomain(Domain):
    """Domain for `Loc.csv` (extracted) and `Content/Localization` (packs)."""

    name = "localization"
    item_name = "entries"
    source_name = ALL_LOC_CSV_NAME
    content_name = "Localization"
    reference_name = LOC_REF_NAME
    max_depth = 1

    def file_type(self, path: Path) -> str | None:
        """Return "csv" or "json" for well-named files, None otherwise."""
        match = self.patterns.loc_file_name.match(file_name(path))
        if match is None:
            return None
        return match.group(2)

    def discover(self, source: Path) -> Iterator[tuple[str, Any]]:
        """Yield the records of the aggregate CSV file, all under `/`.

        The header row is not a key.
        """
        shown_path = ensure_utf8(source.as_posix())
        for row, record in read_records(source):
            yield "/", (shown_path, row, record)

    def open_entry(self, candidate: tuple[str, int, list[str]]) -> LocalizationKey:
        path, row, record = candidate
        return LocalizationKey.from_record(record, path, row)

    def write_reference(self, data: "BuildData", refs_dir: Path) -> Path:
        path = self.reference_path(refs_dir)
        write_flat_reference(path, (str(entry) for entry in data.entries()))
        return path

    def open_validator(self, refs_dir: Path, root: Path) -> LocalizationValidator:
        tokens = read_flat_reference(self.reference_path(refs_dir))
        keys = {LocalizationKey.parse(token).key for token in tokens}
        return LocalizationValidator(root, keys, self)
