"""Base abstractions for content domains.

A domain is one asset category of a resource pack (images, sounds,
music, localization). Each domain knows how to turn an extracted
source tree into reference entries and how to validate a pack against
the reference written from them.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

from ..core.constants import PACK_CONTENT_DIR, PROGRESS_INTERVAL
from ..core.paths import directory_key, display_path, is_ignored_file, walk_files
from ..core.patterns import Patterns
from ..core.types import IGNORED, ItemStatus

if TYPE_CHECKING:
    from ..builder import BuildData


@runtime_checkable
class ReferenceEntry(Protocol):
    """Protocol for entries stored in a reference file.

    An entry's string form is exactly what gets written to the
    reference and compared against during validation.
    """

    def __str__(self) -> str: ...


class Validator(ABC):
    """Classifies the items of a pack against a loaded reference.

    Attributes:
        root: Directory being validated
        total_count: Number of items expected by the reference
    """

    item_name: ClassVar[str] = "items"

    def __init__(self, root: Path, total_count: int):
        self.root = root
        self.total_count = total_count

    @abstractmethod
    def items(self) -> Iterable[Any]:
        """Iterate over everything the validator should classify."""

    @abstractmethod
    def classify(self, item: Any) -> ItemStatus:
        """Classify one item as ignored, valid or invalid.

        Must not raise for data problems; those become invalid items.
        """

    def is_copy_eligible(self, path: Path) -> bool:
        """Return True if the file at path belongs in a rebuilt pack."""
        return self.classify(path).is_valid


class FileValidator(Validator):
    """Validator whose items are the files below its root."""

    max_depth: ClassVar[int | None] = None

    def items(self) -> Iterator[Path]:
        return walk_files(self.root, self.max_depth)

    def classify(self, item: Path) -> ItemStatus:
        if is_ignored_file(item):
            return IGNORED
        return self.validate_file(item, display_path(item, self.root))

    @abstractmethod
    def validate_file(self, path: Path, shown_path: str) -> ItemStatus:
        """Validate a single, non-ignored file.

        Args:
            path: Path of the file
            shown_path: Root-relative path used in invalid item messages
        """


class Domain(ABC):
    """Abstract base class for all content domains.

    Attributes:
        name: Registry name (e.g., 'images')
        item_name: Plural noun used in console output
        source_name: File or directory holding the domain in an
            extracted game tree
        content_name: Directory holding the domain under a pack's Content/
        reference_name: File name of the domain's reference
        max_depth: None for recursive walks, 1 for shallow ones
        progress_interval: Items between progress line updates
    """

    name: ClassVar[str]
    item_name: ClassVar[str]
    source_name: ClassVar[str]
    content_name: ClassVar[str]
    reference_name: ClassVar[str]
    max_depth: ClassVar[int | None] = None
    progress_interval: ClassVar[int] = PROGRESS_INTERVAL

    def __init__(self, patterns: Patterns):
        self.patterns = patterns

    def source_path(self, extracted_root: Path) -> Path:
        return extracted_root / self.source_name

    def content_path(self, pack_root: Path) -> Path:
        return pack_root / PACK_CONTENT_DIR / self.content_name

    def reference_path(self, refs_dir: Path) -> Path:
        return refs_dir / self.reference_name

    def discover(self, source: Path) -> Iterator[tuple[str, Any]]:
        """Yield (directory key, candidate) pairs for the reference builder.

        The default walks the source directory, skipping OS artifacts.
        """
        for path in walk_files(source, self.max_depth):
            if is_ignored_file(path):
                continue
            yield directory_key(path, source), path

    @abstractmethod
    def open_entry(self, candidate: Any) -> ReferenceEntry:
        """Turn a discovered candidate into a reference entry.

        Raises:
            InvalidEntryError: If the candidate cannot be part of the reference
        """

    @abstractmethod
    def write_reference(self, data: "BuildData", refs_dir: Path) -> Path:
        """Write the reference file and return its path."""

    @abstractmethod
    def open_validator(self, refs_dir: Path, root: Path) -> Validator:
        """Load the reference and return a validator for root.

        Raises:
            PackDiagnosticError: If the reference is missing or unusable
        """
