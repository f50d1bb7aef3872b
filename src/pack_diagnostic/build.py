"""Rebuilding a resource pack.

Copies a pack into a fresh directory, keeping only the files the
domain validators accept. No validation rule lives here.
"""

import shutil
from collections.abc import Callable
from pathlib import Path

from . import output
from .core.constants import PACK_ROOT_FILES, WORKSHOP_FILE_NAME
from .core.paths import require_dir, walk_files
from .domains.base import Domain


def copy_files_if(
    source: Path,
    destination: Path,
    recursive: bool,
    should_copy: Callable[[Path], bool],
) -> list[Path]:
    """Copy the files of source accepted by should_copy.

    Args:
        source: Directory to copy from
        destination: Directory to copy to; created when needed
        recursive: Whether to descend into subdirectories
        should_copy: Predicate receiving each file's full path

    Returns:
        Copied files, relative to source
    """
    if not source.is_dir():
        output.warn(f"No directory at {source}!")
        return []

    max_depth = None if recursive else 1
    selected = [
        path.relative_to(source)
        for path in walk_files(source, max_depth)
        if should_copy(path)
    ]

    if not selected:
        output.divider(f"No files in {source}!")
        return []

    for relative in selected:
        target = destination / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source / relative, target)

    return selected


def build_resource_pack(
    pack_root: Path,
    output_root: Path,
    refs_dir: Path,
    domains: list[Domain],
) -> dict[str, int]:
    """Copy a pack, keeping only files the reference accepts.

    Args:
        pack_root: Existing resource pack
        output_root: Directory receiving the rebuilt pack
        refs_dir: Directory holding the reference files
        domains: Domains whose content directories are copied

    Returns:
        Number of copied files per domain (and "/" for root files)

    Raises:
        MissingDirectoryError: If pack_root does not exist
        PackDiagnosticError: If a needed reference is missing or unusable
    """
    require_dir(pack_root, "`-i`")

    output.divider("Preparing output directory...")
    output_root.mkdir(parents=True, exist_ok=True)

    copied: dict[str, int] = {}

    output.announce("Copying", "/")
    if (pack_root / WORKSHOP_FILE_NAME).is_file():
        output.warn(
            f"{WORKSHOP_FILE_NAME} detected.\n"
            "      Remember to copy-paste it to the result dir."
        )
    copied["/"] = len(
        copy_files_if(pack_root, output_root, False, lambda p: p.name in PACK_ROOT_FILES)
    )

    for domain in domains:
        source = domain.content_path(pack_root)
        if not source.is_dir():
            output.divider(f"No {domain.name} in this pack, skipping.")
            continue

        output.announce("Copying", source.relative_to(pack_root).as_posix())
        validator = domain.open_validator(refs_dir, source)
        copied[domain.name] = len(
            copy_files_if(
                source,
                domain.content_path(output_root),
                domain.max_depth is None,
                validator.is_copy_eligible,
            )
        )

    output.divider("Build complete.")
    output.info(
        "Consider scanning both versions of the pack to "
        "ensure everything was copied properly."
    )
    return copied
