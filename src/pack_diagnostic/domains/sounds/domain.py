"""Sound domain.

References every `.wav` below the extracted `Sounds/` directory under
its packaged `.xnb` name. A pack's sound passes when that name exists
in the same directory of the reference.
"""

from pathlib import Path
from typing import TYPE_CHECKING

from ...core.constants import SOUND_REF_NAME, SOUND_REF_VERSION
from ...core.errors import EntryFormatError, ReferenceFormatError
from ...core.paths import directory_key, file_name
from ...core.reference import directory_groups, open_reference, read_count
from ...core.slop import Slop
from ...core.types import VALID, BadExtension, BadName, ItemStatus
from ..base import Domain, FileValidator
from .model import PACKAGED_EXTENSION, SoundEntry

if TYPE_CHECKING:
    from ...builder import BuildData


def load_sound_groups(slop: Slop) -> dict[str, set[str]]:
    """Collect the expected file names of every directory.

    Raises:
        ReferenceFormatError: If an entry is malformed
    """
    groups: dict[str, set[str]] = {}

    for key, values in directory_groups(slop):
        try:
            groups[key] = {SoundEntry.parse(value).file_name for value in values}
        except EntryFormatError as e:
            raise ReferenceFormatError(f"Malformed sound entry under `{key}`: {e}") from e

    return groups


class SoundValidator(FileValidator):
    """Checks that every packaged sound is a known `.xnb` file."""

    item_name = "sounds"

    def __init__(self, root: Path, total_count: int, groups: dict[str, set[str]]):
        super().__init__(root, total_count)
        self.groups = groups

    def validate_file(self, path: Path, shown_path: str) -> ItemStatus:
        if not path.suffix:
            return ItemStatus.invalid(BadName(shown_path, "the sound reference"))

        if path.suffix != PACKAGED_EXTENSION:
            return ItemStatus.invalid(
                BadExtension(shown_path, (PACKAGED_EXTENSION.lstrip("."),))
            )

        names = self.groups.get(directory_key(path, self.root), set())
        if file_name(path) in names:
            return VALID
        return ItemStatus.invalid(BadName(shown_path, "the sound reference"))


class SoundsDomain(Domain):
    """Domain for `Sounds/` (extracted) and `Content/Sounds` (packs)."""

    name = "sounds"
    item_name = "sounds"
    source_name = "Sounds"
    content_name = "Sounds"
    reference_name = SOUND_REF_NAME
    max_depth = None

    def open_entry(self, candidate: Path) -> SoundEntry:
        return SoundEntry.from_source(candidate)

    def write_reference(self, data: "BuildData", refs_dir: Path) -> Path:
        path = self.reference_path(refs_dir)
        data.to_slop(SOUND_REF_VERSION).save(path)
        return path

    def open_validator(self, refs_dir: Path, root: Path) -> SoundValidator:
        slop = open_reference(self.reference_path(refs_dir), SOUND_REF_VERSION)
        return SoundValidator(root, read_count(slop), load_sound_groups(slop))
