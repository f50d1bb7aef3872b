"""Music reference entries.

Extracted songs carry a numeric ID somewhere in their name; packs name
their replacements `Music_<id>` followed by an accepted extension.
"""

import re
from dataclasses import dataclass

from ...core.errors import EntryFormatError

MUSIC_PREFIX = "Music_"

# Formats the game accepts for replaced songs
EXTENSIONS = ("mp3", "ogg", "wav")


@dataclass(frozen=True)
class MusicEntry:
    """A song ID.

    Attributes:
        song_id: Numeric ID, without leading zeros
    """

    song_id: int

    @classmethod
    def from_file_name(cls, name: str, pattern: re.Pattern[str]) -> "MusicEntry | None":
        """Extract the song ID from an extracted file name.

        Args:
            name: File name (e.g., "01 Overworld Day.wav")
            pattern: Compiled music file name pattern; group 1 is the ID

        Returns:
            The entry, or None if the name holds no ID
        """
        match = pattern.search(name)
        if match is None:
            return None
        return cls(int(match.group(1)))

    @classmethod
    def parse(cls, text: str) -> "MusicEntry":
        """Parse a `Music_<id>` token.

        Raises:
            EntryFormatError: If the token is malformed
        """
        song_id = text.removeprefix(MUSIC_PREFIX)
        if song_id == text or not (song_id.isascii() and song_id.isdecimal()):
            raise EntryFormatError(f"Expected `{MUSIC_PREFIX}<id>`, got `{text}`")
        return cls(int(song_id))

    def __str__(self) -> str:
        return f"{MUSIC_PREFIX}{self.song_id}"
