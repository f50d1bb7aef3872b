"""Sound reference entries.

Extracted sounds are `.wav` files while packs ship the transcoded
`.xnb` files, so the reference stores the packaged name.
"""

from dataclasses import dataclass
from pathlib import Path

from ...core.errors import EntryFormatError, InvalidEntryError
from ...core.paths import ensure_utf8, file_name
from ...core.types import BadExtension

SOURCE_EXTENSION = ".wav"
PACKAGED_EXTENSION = ".xnb"


@dataclass(frozen=True)
class SoundEntry:
    """Expected packaged file name of a sound.

    Attributes:
        file_name: Name of the `.xnb` file a pack should contain
    """

    file_name: str

    @classmethod
    def from_source(cls, path: Path) -> "SoundEntry":
        """Create an entry from an extracted `.wav` file.

        Example:
            Sounds/Item_1.wav -> "Item_1.xnb"

        Raises:
            InvalidEntryError: If the file is not a `.wav` file
        """
        if path.suffix != SOURCE_EXTENSION:
            raise InvalidEntryError(
                BadExtension(ensure_utf8(path.as_posix()), (SOURCE_EXTENSION.lstrip("."),))
            )
        return cls(file_name(path.with_suffix(PACKAGED_EXTENSION)))

    @classmethod
    def parse(cls, text: str) -> "SoundEntry":
        if not text:
            raise EntryFormatError("Expected a sound file name, got an empty string")
        return cls(text)

    def __str__(self) -> str:
        return self.file_name
