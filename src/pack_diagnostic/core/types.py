"""Type definitions shared by the builders, validators and reports.

The TypedDict classes mirror the JSON schema in
schemas/report.schema.json. The dataclasses describe scan outcomes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TypedDict


class ScanReportDict(TypedDict):
    """JSON form of a single domain's scan report."""

    domain: str  # Domain name (e.g., 'images')
    valid_count: int  # Items that passed validation
    total_count: int  # Denominator taken from the reference
    invalid_count: int  # Items that failed validation
    percent: float  # valid_count / total_count * 100
    milestone_percent: float  # Progress towards the next multiple of 1000
    invalid_items: list[str]  # At most MAX_LIST_SIZE rendered invalid items
    remaining_invalid: int  # Invalid items left out of invalid_items


class ScanDocument(TypedDict):
    """JSON document printed by `scan --json`."""

    pack_root: str  # Absolute path of the scanned pack
    reports: list[ScanReportDict]  # One report per scanned domain


@dataclass(frozen=True)
class ImageSize:
    """Pixel dimensions of an image."""

    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


class InvalidItem:
    """Base class for the reasons an item failed validation.

    Attributes:
        path: Forward-slash path of the item, as displayed
    """

    def __init__(self, path: str):
        self.path = path

    @property
    def file_name(self) -> str:
        return self.path.rsplit("/", 1)[-1]

    @property
    def key(self) -> str:
        """Identifies the item among the invalid items of one run."""
        return self.path

    def describe(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return f'"{self.path}"\t: {self.describe()}'

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvalidItem):
            return NotImplemented
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self) -> int:
        return hash((type(self), self.key))


class BadName(InvalidItem):
    """The item's name is not present in the reference."""

    def __init__(self, path: str, reference: str = "the reference"):
        super().__init__(path)
        self.reference = reference

    def describe(self) -> str:
        return f"The name `{self.file_name}` was not found in {self.reference}."


class BadSize(InvalidItem):
    """An image has the expected name but the wrong dimensions."""

    def __init__(self, path: str, got: ImageSize, expected: ImageSize):
        super().__init__(path)
        self.got = got
        self.expected = expected

    def describe(self) -> str:
        return f"Wrong image size {self.got}. (expected {self.expected})"


class BadExtension(InvalidItem):
    """The item's file format is not accepted."""

    def __init__(self, path: str, accepted: tuple[str, ...]):
        super().__init__(path)
        self.accepted = accepted

    def describe(self) -> str:
        return f"Invalid file format. Accepted: {', '.join(self.accepted)}"


class EmptyRecord(InvalidItem):
    """A CSV record has no first column."""

    def __init__(self, path: str, row: int):
        super().__init__(path)
        self.row = row

    @property
    def key(self) -> str:
        return f"{self.path}:{self.row}"

    def describe(self) -> str:
        return f"Row {self.row} is an empty record."


class MissingKey(InvalidItem):
    """A CSV record's key is not present in the localization reference."""

    def __init__(self, path: str, key: str):
        super().__init__(path)
        self.translation_key = key

    @property
    def key(self) -> str:
        return f"{self.path}:{self.translation_key}"

    def describe(self) -> str:
        return f"The key `{self.translation_key}` was not found in the localization reference."


class UnrecognizedFileName(InvalidItem):
    """The file name does not follow the expected pattern."""

    def describe(self) -> str:
        return "Unrecognized file name; it will be skipped."


class UnreadableFile(InvalidItem):
    """The file could not be read as the domain's asset type."""

    def __init__(self, path: str, kind: str = "file"):
        super().__init__(path)
        self.kind = kind

    def describe(self) -> str:
        return f"Couldn't read as {self.kind}."


class Status(Enum):
    """Terminal states of a scanned item."""

    IGNORED = "ignored"
    VALID = "valid"
    INVALID = "invalid"


@dataclass(frozen=True)
class ItemStatus:
    """Outcome of classifying one item.

    Use the IGNORED and VALID constants or ItemStatus.invalid(reason).
    """

    status: Status
    reason: InvalidItem | None = None

    @classmethod
    def invalid(cls, reason: InvalidItem) -> "ItemStatus":
        return cls(Status.INVALID, reason)

    @property
    def is_valid(self) -> bool:
        return self.status is Status.VALID

    @property
    def is_ignored(self) -> bool:
        return self.status is Status.IGNORED


IGNORED = ItemStatus(Status.IGNORED)
VALID = ItemStatus(Status.VALID)
