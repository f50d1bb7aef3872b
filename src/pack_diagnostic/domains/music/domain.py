"""Music domain.

The reference is a flat list of `Music_<id>` tokens built from the
extracted `Music/` directory. A pack's song passes when its name,
without an accepted extension, is one of those tokens.
"""

from pathlib import Path
from typing import TYPE_CHECKING

from ...core.constants import MUSIC_PROGRESS_INTERVAL, MUSIC_REF_NAME
from ...core.errors import EntryFormatError, InvalidEntryError, ReferenceFormatError
from ...core.paths import ensure_utf8, file_name
from ...core.reference import read_flat_reference, write_flat_reference
from ...core.types import VALID, BadExtension, BadName, ItemStatus, UnrecognizedFileName
from ..base import Domain, FileValidator
from .model import EXTENSIONS, MusicEntry

if TYPE_CHECKING:
    from ...builder import BuildData


def split_extension(name: str) -> tuple[str, str]:
    """Split "Music_1.ogg" into ("Music_1", "ogg"); ext is "" if absent."""
    stem, dot, extension = name.rpartition(".")
    if not dot:
        return name, ""
    return stem, extension


class MusicValidator(FileValidator):
    """Checks song names and formats in `Content/Music`."""

    item_name = "songs"
    max_depth = 1

    def __init__(self, root: Path, song_names: set[str]):
        super().__init__(root, len(song_names))
        self.song_names = song_names

    def validate_file(self, path: Path, shown_path: str) -> ItemStatus:
        stem, extension = split_extension(file_name(path))

        if extension not in EXTENSIONS:
            return ItemStatus.invalid(BadExtension(shown_path, EXTENSIONS))

        if stem in self.song_names:
            return VALID
        return ItemStatus.invalid(BadName(shown_path, "the music reference"))


class MusicDomain(Domain):
    """Domain for `Music/` (extracted) and `Content/Music` (packs)."""

    name = "music"
    item_name = "songs"
    source_name = "Music"
    content_name = "Music"
    reference_name = MUSIC_REF_NAME
    max_depth = 1
    progress_interval = MUSIC_PROGRESS_INTERVAL

    def open_entry(self, candidate: Path) -> MusicEntry:
        entry = MusicEntry.from_file_name(file_name(candidate), self.patterns.music_file_name)
        if entry is None:
            raise InvalidEntryError(UnrecognizedFileName(ensure_utf8(candidate.as_posix())))
        return entry

    def write_reference(self, data: "BuildData", refs_dir: Path) -> Path:
        path = self.reference_path(refs_dir)
        write_flat_reference(path, (str(entry) for entry in data.entries()))
        return path

    def open_validator(self, refs_dir: Path, root: Path) -> MusicValidator:
        tokens = read_flat_reference(self.reference_path(refs_dir))
        try:
            for token in tokens:
                MusicEntry.parse(token)
        except EntryFormatError as e:
            raise ReferenceFormatError(f"Malformed music reference: {e}") from e
        # Pack file stems are compared with the tokens as written
        return MusicValidator(root, set(tokens))
