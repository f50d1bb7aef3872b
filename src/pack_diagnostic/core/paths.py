"""Path handling and directory traversal.

Reference files group entries by directory key: the parent directory
of a file relative to the walked root, joined with forward slashes and
prefixed with `/`. Files directly under the root have the key `/`.
"""

import os
from collections.abc import Iterator
from pathlib import Path

from .constants import IGNORED_FILE_NAMES
from .errors import MissingDirectoryError, NonUtf8PathError


def ensure_utf8(path: Path | str) -> str:
    """Return the path as a string, rejecting undecodable names.

    Names that are not valid UTF-8 reach Python as lone surrogates
    (surrogateescape); those cannot be stored in a reference file.

    Raises:
        NonUtf8PathError: If the path is not representable as UTF-8
    """
    text = os.fspath(path)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        raise NonUtf8PathError(text) from None
    return text


def file_name(path: Path) -> str:
    """Return the UTF-8 file name at the end of the path."""
    return ensure_utf8(path.name)


def directory_key(path: Path, root: Path) -> str:
    """Compute the reference key of a file's parent directory.

    Example:
        root/Icons/Items/a.png -> "/Icons/Items"
        root/a.png -> "/"

    Args:
        path: File inside root
        root: Walked root directory

    Returns:
        Normalized, forward-slash directory key

    Raises:
        ValueError: If path is not inside root
    """
    parent = path.parent.relative_to(root)
    parts = [ensure_utf8(part) for part in parent.parts]
    return "/" + "/".join(parts)


def display_path(path: Path, root: Path) -> str:
    """Return path relative to root, with forward slashes."""
    relative = path.relative_to(root)
    return "/".join(ensure_utf8(part) for part in relative.parts)


def is_ignored_file(path: Path) -> bool:
    """Return True for OS artifacts such as desktop.ini."""
    return path.name in IGNORED_FILE_NAMES


def require_dir(path: Path, role: str = "directory") -> Path:
    """Return path if it is an existing directory.

    Raises:
        MissingDirectoryError: If it is not
    """
    if not path.is_dir():
        raise MissingDirectoryError(path, role)
    return path


def _raise_walk_error(error: OSError) -> None:
    raise error


def walk_files(root: Path, max_depth: int | None = None) -> Iterator[Path]:
    """Yield every file below root in a deterministic order.

    Directories themselves are not yielded. Any I/O error aborts the walk.

    Args:
        root: Directory to walk
        max_depth: None for a recursive walk, 1 for direct children only

    Yields:
        Paths of files (and anything else that is not a directory)

    Raises:
        OSError: If a directory cannot be listed
        NonUtf8PathError: If a name is not valid UTF-8
    """
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        current = Path(dirpath)
        depth = len(current.relative_to(root).parts) + 1

        dirnames.sort()
        for name in dirnames:
            ensure_utf8(name)
        if max_depth is not None and depth >= max_depth:
            # Do not descend any further
            dirnames.clear()

        for name in sorted(filenames):
            ensure_utf8(name)
            yield current / name
