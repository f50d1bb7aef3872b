"""Image domain.

References every image below the extracted `Images/` directory with
its pixel size. A pack's image passes when an image with the same name
and size was found in the same directory.
"""

from pathlib import Path
from typing import TYPE_CHECKING

from ...core.constants import IMAGE_REF_NAME, IMAGE_REF_VERSION
from ...core.errors import EntryFormatError, InvalidEntryError, ReferenceFormatError
from ...core.metadata import ImageReadError, read_image_size
from ...core.paths import directory_key, ensure_utf8
from ...core.patterns import Patterns
from ...core.reference import directory_groups, open_reference, read_count
from ...core.slop import Slop
from ...core.types import BadName, ItemStatus, UnreadableFile
from ..base import Domain, FileValidator
from .model import ImageEntry, SizeReader

if TYPE_CHECKING:
    from ...builder import BuildData


def load_image_groups(slop: Slop) -> dict[str, list[ImageEntry]]:
    """Parse every image entry of a loaded reference.

    Raises:
        ReferenceFormatError: If an entry is malformed
    """
    groups: dict[str, list[ImageEntry]] = {}

    for key, values in directory_groups(slop):
        try:
            groups[key] = [ImageEntry.parse(value) for value in values]
        except EntryFormatError as e:
            raise ReferenceFormatError(f"Malformed image entry under `{key}`: {e}") from e

    return groups


class ImageValidator(FileValidator):
    """Checks images by directory, name and size."""

    item_name = "images"

    def __init__(
        self,
        root: Path,
        total_count: int,
        groups: dict[str, list[ImageEntry]],
        read_size: SizeReader = read_image_size,
    ):
        super().__init__(root, total_count)
        self.groups = groups
        self.read_size = read_size

    def validate_file(self, path: Path, shown_path: str) -> ItemStatus:
        entries = self.groups.get(directory_key(path, self.root), [])

        # Check every entry of the directory; report a size mismatch
        # over a name mismatch
        first_failure: ItemStatus | None = None
        for entry in entries:
            status = entry.validate(path, shown_path, self.read_size)
            if status.is_valid:
                return status
            if not isinstance(status.reason, BadName) and first_failure is None:
                first_failure = status

        if first_failure is not None:
            return first_failure
        return ItemStatus.invalid(BadName(shown_path, "the image reference"))


class ImagesDomain(Domain):
    """Domain for `Images/` (extracted) and `Content/Images` (packs)."""

    name = "images"
    item_name = "images"
    source_name = "Images"
    content_name = "Images"
    reference_name = IMAGE_REF_NAME
    max_depth = None

    def __init__(self, patterns: Patterns, read_size: SizeReader = read_image_size):
        super().__init__(patterns)
        self.read_size = read_size

    def open_entry(self, candidate: Path) -> ImageEntry:
        try:
            return ImageEntry.open(candidate, self.read_size)
        except ImageReadError:
            raise InvalidEntryError(
                UnreadableFile(ensure_utf8(candidate.as_posix()), "image")
            ) from None

    def write_reference(self, data: "BuildData", refs_dir: Path) -> Path:
        path = self.reference_path(refs_dir)
        data.to_slop(IMAGE_REF_VERSION).save(path)
        return path

    def open_validator(self, refs_dir: Path, root: Path) -> ImageValidator:
        slop = open_reference(self.reference_path(refs_dir), IMAGE_REF_VERSION)
        return ImageValidator(root, read_count(slop), load_image_groups(slop), self.read_size)
