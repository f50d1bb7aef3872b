"""SLOP: the line-oriented key/value format used by reference files.

A document is a set of keys, each holding either a string or a list
of strings:

    # comment
    !version=1
    /Icons{
        a.png:16x16
        b.png:32x32
    }

Keys containing `=`, `{`, `}` or line breaks, and values containing
line breaks or leading whitespace, cannot be represented. Round trips
are only guaranteed for documents that avoid them.
"""

import re
from collections.abc import Iterator
from pathlib import Path

from .errors import SlopParseError

SlopValue = str | list[str]

# `key=value`; the value is the rest of the line, verbatim
RE_STRING_KV = re.compile(r"^([^={]*)=(.*)$")

# `key{` opening a list block
RE_LIST_KV_START = re.compile(r"^([^={}]*)\{\s*$")

# `}` closing a list block
RE_LIST_KV_END = re.compile(r"^\}\s*$")

LIST_INDENT = "    "

# Characters that would make a key ambiguous once serialized
_FORBIDDEN_KEY_CHARS = ("=", "{", "}", "\n", "\r")


class Slop:
    """An insertion-ordered mapping of keys to SLOP values."""

    def __init__(self, items: dict[str, SlopValue] | None = None):
        self._items: dict[str, SlopValue] = {}
        for key, value in (items or {}).items():
            self.insert(key, value)

    @classmethod
    def from_text(cls, text: str) -> "Slop":
        return parse(text)

    @classmethod
    def open(cls, file_path: Path) -> "Slop":
        """Read and parse a SLOP file.

        Raises:
            OSError: If the file cannot be read
            SlopParseError: If the file is not valid SLOP
        """
        with file_path.open("r", encoding="utf-8") as f:
            return parse(f.read())

    def save(self, file_path: Path) -> None:
        with file_path.open("w", encoding="utf-8", newline="\n") as f:
            f.write(serialize(self))

    def serialize(self) -> str:
        return serialize(self)

    def insert(self, key: str, value: SlopValue) -> None:
        """Insert or replace a key.

        Raises:
            ValueError: If the key cannot be serialized unambiguously
        """
        if not key or key != key.lstrip() or any(c in key for c in _FORBIDDEN_KEY_CHARS):
            raise ValueError(f"Invalid SLOP key: {key!r}")
        if isinstance(value, str):
            self._items[key] = value
        else:
            self._items[key] = list(value)

    def get(self, key: str) -> SlopValue | None:
        return self._items.get(key)

    def get_string(self, key: str) -> str | None:
        """Return the value of `key` if it holds a string."""
        value = self._items.get(key)
        return value if isinstance(value, str) else None

    def get_list(self, key: str) -> list[str] | None:
        """Return the value of `key` if it holds a list."""
        value = self._items.get(key)
        return value if isinstance(value, list) else None

    def keys(self) -> Iterator[str]:
        return iter(self._items.keys())

    def items(self) -> Iterator[tuple[str, SlopValue]]:
        return iter(self._items.items())

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Slop):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Slop({self._items!r})"


def parse(text: str) -> Slop:
    """Parse a SLOP document.

    Args:
        text: The whole document

    Returns:
        The parsed document

    Raises:
        SlopParseError: On the first line that is neither a scalar, the
            start of a list block, blank nor a comment, or on a list block
            that is never closed
    """
    items: dict[str, SlopValue] = {}
    lines = text.splitlines()
    index = 0

    while index < len(lines):
        line = lines[index].lstrip()

        if not line or line.startswith("#"):
            index += 1
            continue

        string_match = RE_STRING_KV.match(line)
        if string_match:
            items[string_match.group(1)] = string_match.group(2)
            index += 1
            continue

        list_match = RE_LIST_KV_START.match(line)
        if list_match:
            values, end_index = _parse_list_block(lines, index)
            items[list_match.group(1)] = values
            index = end_index + 1
            continue

        raise SlopParseError(index + 1, line)

    slop = Slop()
    slop._items = items
    return slop


def _parse_list_block(lines: list[str], start_index: int) -> tuple[list[str], int]:
    values: list[str] = []

    for index in range(start_index + 1, len(lines)):
        line = lines[index].lstrip()
        if RE_LIST_KV_END.match(line):
            return values, index
        values.append(line)

    # Unterminated block
    raise SlopParseError(start_index + 1, lines[start_index].lstrip())


def serialize(slop: Slop) -> str:
    """Serialize a document, keeping key insertion order."""
    parts: list[str] = []

    for key, value in slop.items():
        if isinstance(value, str):
            parts.append(f"{key}={value}\n")
        elif value:
            body = f"\n{LIST_INDENT}".join(value)
            parts.append(f"{key}{{\n{LIST_INDENT}{body}\n}}\n")
        else:
            parts.append(f"{key}{{\n}}\n")

    return "".join(parts)
