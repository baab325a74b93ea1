"""In-memory model of a parsed ckv document.

A :class:`Document` keeps every physical line it was read from, either as an
:class:`Entry` (key line plus continuation lines) or as a :class:`BlankLine`
placeholder, so it can be rendered back byte for byte. The key lookup is
derived from the entries on demand.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Union

from ckv.config import CkvConfig
from ckv.errors import EqualToWithoutAKey, InvalidCharacter, KeyNotFound, NoValueFoundForKey
from ckv.lines import CONTINUATION, SEPARATOR, BlankLine
from ckv.utils import ensure_config

logger = logging.getLogger(__name__)

RESERVED_KEY_CHARS = (SEPARATOR, CONTINUATION, "\n")


@dataclass
class Entry:
    """One key and its value segments.

    ``segments`` are the value's lines. For a ``block`` entry (strict mode) the
    key line is a bare ``key=`` and every segment sits on a continuation line.
    ``gaps`` maps a segment index to the blank lines that appear right before
    that segment's continuation line.
    """

    key: str
    segments: List[str] = field(default_factory=lambda: [""])
    block: bool = False
    gaps: Dict[int, List[str]] = field(default_factory=dict)
    line: Optional[int] = None

    @property
    def value(self) -> str:
        return "\n".join(self.segments)

    @classmethod
    def from_value(cls, key: str, value: str, strict: bool = False) -> "Entry":
        segments = value.split("\n")
        return cls(key, segments, block=strict and len(segments) > 1)

    def interior_blanks(self) -> List[str]:
        return [text for index in sorted(self.gaps) for text in self.gaps[index]]


Item = Union[Entry, BlankLine]


def check_key(key: str) -> None:
    """Reject keys that could not be written back as a key line."""
    if not key:
        raise EqualToWithoutAKey()
    for char in RESERVED_KEY_CHARS:
        if char in key:
            raise InvalidCharacter(char)


class Document:
    """Ordered entries and blank lines of one ckv source."""

    def __init__(
        self,
        items: Optional[List[Item]] = None,
        trailing_newline: bool = False,
        config: Optional[CkvConfig] = None,
    ) -> None:
        self.items: List[Item] = items if items is not None else []
        self.trailing_newline = trailing_newline
        self.config = ensure_config(config, CkvConfig)

    def __repr__(self) -> str:
        return f"Document({len(self.entries())} entries, {len(self.items)} items)"

    def entries(self) -> List[Entry]:
        return [item for item in self.items if isinstance(item, Entry)]

    def _visible(self) -> Dict[str, Entry]:
        """Map each key to the occurrence the duplicate-key policy selects."""
        visible: Dict[str, Entry] = {}
        for entry in self.entries():
            if self.config.duplicate_keys == "first":
                visible.setdefault(entry.key, entry)
            else:
                visible[entry.key] = entry
        return visible

    @property
    def mapping(self) -> Dict[str, str]:
        return {key: entry.value for key, entry in self._visible().items()}

    def keys(self) -> List[str]:
        return list(self._visible())

    def __contains__(self, key: object) -> bool:
        return any(entry.key == key for entry in self.entries())

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._visible())

    def get(self, key: str) -> str:
        """Return the value for ``key``.

        Raises:
            KeyNotFound: If no entry has exactly this key.
        """
        entry = self._visible().get(key)
        if entry is None:
            raise KeyNotFound(key)
        return entry.value

    def set(self, key: str, value: str) -> None:
        """Replace the visible entry for ``key`` in place, or append a new one.

        Blank lines that sat between the old entry's continuation lines are
        kept right after the new entry.

        Raises:
            EqualToWithoutAKey: If ``key`` is empty.
            InvalidCharacter: If ``key`` contains '=', a tab or a newline.
            NoValueFoundForKey: If ``value`` is empty and empty values are not allowed.
        """
        check_key(key)
        if not value and not self.config.allow_empty_values:
            raise NoValueFoundForKey(key)

        new_entry = Entry.from_value(key, value, self.config.strict)
        target = self._visible().get(key)
        if target is None:
            logger.debug("Appending new key %r", key)
            self.items.append(new_entry)
            return

        index = next(i for i, item in enumerate(self.items) if item is target)
        blanks = [BlankLine(text) for text in target.interior_blanks()]
        self.items[index:index + 1] = [new_entry] + blanks
        logger.debug("Replaced key %r at item %d", key, index)

    def remove(self, key: str) -> None:
        """Drop every entry for ``key``; blank lines stay where they are.

        Raises:
            KeyNotFound: If the key is absent.
        """
        if key not in self:
            raise KeyNotFound(key)

        items: List[Item] = []
        for item in self.items:
            if isinstance(item, Entry) and item.key == key:
                items.extend(BlankLine(text) for text in item.interior_blanks())
            else:
                items.append(item)
        logger.debug("Removed key %r", key)
        self.items = items
