"""Image reference entries.

An image is recorded as `<file name>:<width>x<height>`; the directory
it lives in is the key of the list holding it.
"""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ...core.errors import EntryFormatError
from ...core.metadata import ImageReadError, read_image_size
from ...core.paths import file_name
from ...core.types import VALID, BadName, BadSize, ImageSize, ItemStatus, UnreadableFile

SizeReader = Callable[[Path], ImageSize]


def _parse_dimension(text: str, entry: str) -> int:
    if not (text.isascii() and text.isdecimal()):
        raise EntryFormatError(f"Invalid image dimension `{text}` in `{entry}`")
    return int(text)


@dataclass(frozen=True)
class ImageEntry:
    """Data about an individual image that is relevant to the reference.

    Attributes:
        file_name: Name of the file, without its parent directories
        size: The image's pixel dimensions
    """

    file_name: str
    size: ImageSize

    @classmethod
    def open(cls, path: Path, read_size: SizeReader = read_image_size) -> "ImageEntry":
        """Create an entry by reading an image file.

        Raises:
            ImageReadError: If the file is not a readable image
        """
        return cls(file_name(path), read_size(path))

    @classmethod
    def parse(cls, text: str) -> "ImageEntry":
        """Parse a `name:WxH` reference string.

        The name may itself contain `:` and `x`; only the last of each
        is used as a separator.

        Raises:
            EntryFormatError: If the string is malformed
        """
        name, sep, size = text.rpartition(":")
        if not sep or not name:
            raise EntryFormatError(f"Expected `name:WxH`, got `{text}`")

        width, sep, height = size.rpartition("x")
        if not sep:
            raise EntryFormatError(f"Expected `name:WxH`, got `{text}`")

        return cls(name, ImageSize(_parse_dimension(width, text), _parse_dimension(height, text)))

    def validate(self, path: Path, shown_path: str, read_size: SizeReader = read_image_size) -> ItemStatus:
        """Check a candidate file against this entry.

        The name is compared first (exactly, case-sensitive) so that
        files with foreign names are never opened.

        Returns:
            VALID, or an invalid status with BadName, BadSize or
            UnreadableFile
        """
        if file_name(path) != self.file_name:
            return ItemStatus.invalid(BadName(shown_path, "the image reference"))

        try:
            size = read_size(path)
        except ImageReadError:
            return ItemStatus.invalid(UnreadableFile(shown_path, "image"))

        if size != self.size:
            return ItemStatus.invalid(BadSize(shown_path, size, self.size))
        return VALID

    def __str__(self) -> str:
        return f"{self.file_name}:{self.size}"
