"""Loading and checking reference files.

SLOP references (images, sounds) carry `!version` and `!count`
metadata. Flat references (music, localization) are plain
newline-separated token lists without a header.
"""

from collections.abc import Iterable, Iterator
from pathlib import Path

from .constants import COUNT_KEY, METADATA_PREFIX, VERSION_KEY, Version
from .errors import MissingReferenceError, ReferenceFormatError, VersionMismatchError
from .slop import Slop


def _read_int(slop: Slop, key: str) -> int:
    value = slop.get(key)
    if value is None:
        raise ReferenceFormatError(f"Expected the reference to have a `{key}` keyvalue")
    if not isinstance(value, str):
        raise ReferenceFormatError(f"Expected the reference's `{key}` keyvalue to be a string kv")
    if not (value.isascii() and value.isdecimal()):
        raise ReferenceFormatError(
            f"Expected the reference's `{key}` kv to be a positive integer, got `{value}`"
        )
    return int(value)


def validate_version(slop: Slop, expected_version: Version) -> None:
    """Check that the reference's `!version` equals expected_version.

    Raises:
        ReferenceFormatError: If `!version` is missing or not an integer
        VersionMismatchError: If the versions differ
    """
    file_version = _read_int(slop, VERSION_KEY)
    if file_version != expected_version:
        raise VersionMismatchError(expected_version, file_version)


def read_count(slop: Slop) -> int:
    """Return the reference's `!count` metadata."""
    return _read_int(slop, COUNT_KEY)


def is_metadata_key(key: str) -> bool:
    return key.startswith(METADATA_PREFIX)


def directory_groups(slop: Slop) -> Iterator[tuple[str, list[str]]]:
    """Yield (directory key, entries) for every non-metadata key.

    Raises:
        ReferenceFormatError: If a directory key holds a string
    """
    for key, value in slop.items():
        if is_metadata_key(key):
            continue
        if not isinstance(value, list):
            raise ReferenceFormatError(f"Expected `{key}` to hold a list")
        yield key, value


def open_reference(path: Path, expected_version: Version) -> Slop:
    """Open a SLOP reference file and check its version.

    Raises:
        MissingReferenceError: If the file does not exist
        SlopParseError: If the file is not valid SLOP
        ReferenceFormatError: If `!version` is missing or malformed
        VersionMismatchError: If the file has another version
    """
    if not path.is_file():
        raise MissingReferenceError(path)

    slop = Slop.open(path)
    validate_version(slop, expected_version)
    return slop


def read_flat_reference(path: Path) -> list[str]:
    """Read a newline-separated reference file, skipping empty lines.

    Raises:
        MissingReferenceError: If the file does not exist
    """
    if not path.is_file():
        raise MissingReferenceError(path)

    with path.open("r", encoding="utf-8") as f:
        return [line for line in f.read().splitlines() if line]


def write_flat_reference(path: Path, tokens: Iterable[str]) -> None:
    with path.open("w", encoding="utf-8", newline="\n") as f:
        f.writelines(f"{token}\n" for token in tokens)
