"""Regular expressions for file names.

Compiled once by Patterns.compile() and handed to every domain that
needs them.
"""

import re
from dataclasses import dataclass

# Locales shipped with the game
LOCALE_TAGS = (
    "en-US",
    "de-DE",
    "it-IT",
    "fr-FR",
    "es-ES",
    "ru-RU",
    "zh-Hans",
    "pt-BR",
    "pl-PL",
)

LOC_FILE_EXTENSIONS = ("csv", "json")

# Group 1: song ID
MUSIC_FILE_NAME_PATTERN = r"([0-9]{2,}).*?\.wav"

# Group 1: locale tag, group 2: file extension
LOC_FILE_NAME_PATTERN = (
    rf"^({'|'.join(re.escape(tag) for tag in LOCALE_TAGS)})-.*"
    rf"\.({'|'.join(LOC_FILE_EXTENSIONS)})$"
)


@dataclass(frozen=True)
class Patterns:
    """Compiled file name patterns."""

    music_file_name: re.Pattern[str]
    loc_file_name: re.Pattern[str]

    @classmethod
    def compile(cls) -> "Patterns":
        return cls(
            music_file_name=re.compile(MUSIC_FILE_NAME_PATTERN),
            loc_file_name=re.compile(LOC_FILE_NAME_PATTERN),
        )
