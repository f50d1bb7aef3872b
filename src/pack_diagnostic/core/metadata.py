"""Metadata extraction for asset files.

This module wraps the libraries that read file contents: Pillow for
image dimensions and the csv module for localization records
(header row excluded).
"""

import csv
from collections.abc import Iterator
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from .errors import RecordReadError
from .types import ImageSize


class ImageReadError(Exception):
    """An image's dimensions could not be read."""


def read_image_size(file_path: Path) -> ImageSize:
    """Read an image's dimensions without decoding its pixels.

    Args:
        file_path: Path to the image file

    Returns:
        The image's width and height

    Raises:
        ImageReadError: If the file is not a readable image
    """
    try:
        with Image.open(file_path) as img:
            width, height = img.size
    except (UnidentifiedImageError, OSError, ValueError) as e:
        raise ImageReadError(f"Failed to read {file_path}: {e}") from e

    return ImageSize(width, height)


def read_records(file_path: Path) -> Iterator[tuple[int, list[str]]]:
    """Yield (line number, record) for every record after the header.

    The first record is the header and is skipped. A leading byte order
    mark is dropped. Blank lines yield empty records.

    Raises:
        OSError: If the file cannot be opened
        RecordReadError: If the file is not UTF-8 or not valid CSV
    """
    with file_path.open("r", encoding="utf-8-sig", newline="") as f:
        reader = csv.reader(f)
        try:
            next(reader, None)
            for record in reader:
                yield reader.line_num, record
        except (UnicodeDecodeError, csv.Error) as e:
            raise RecordReadError(file_path, str(e)) from e
