"""Localization reference entries.

A translation key is the first column of a CSV record. Keys starting
with `#` are comments.
"""

from dataclasses import dataclass

from ...core.errors import EntryFormatError, InvalidEntryError
from ...core.types import EmptyRecord

COMMENT_PREFIX = "#"


@dataclass(frozen=True)
class LocalizationKey:
    """A translation key.

    Attributes:
        key: The key, exactly as found in the first column
    """

    key: str

    @classmethod
    def from_record(cls, record: list[str], path: str, row: int) -> "LocalizationKey":
        """Take the key from a CSV record.

        Args:
            record: The record's columns
            path: File the record belongs to, as displayed
            row: Line number of the record in its file

        Raises:
            InvalidEntryError: If the record has no (or an empty) first column
        """
        if not record or not record[0]:
            raise InvalidEntryError(EmptyRecord(path, row))
        return cls(record[0])

    @classmethod
    def parse(cls, text: str) -> "LocalizationKey":
        if not text:
            raise EntryFormatError("Expected a translation key, got an empty string")
        return cls(text)

    @property
    def is_comment(self) -> bool:
        return self.key.startswith(COMMENT_PREFIX)

    def __str__(self) -> str:
        return self.key
