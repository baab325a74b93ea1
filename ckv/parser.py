"""Parser for ckv documents.

A ckv document is a sequence of ``key=value`` lines. A value continues over
following lines that start with a tab; each continuation line adds a newline
and its text (after the tab) to the value. Blank lines are kept but carry no
data and do not end a multi-line value.
"""

import logging
from typing import Dict, List, Optional

from ckv.config import CkvConfig
from ckv.document import Document, Entry
from ckv.errors import NoValueFoundForKey, TrailingCharsAfterEqualTo, ValueWithoutAKey
from ckv.lines import BlankLine, ContinuationLine, KeyLine, classify
from ckv.utils import FileOrPath, ensure_config, handle_read

logger = logging.getLogger(__name__)


def parse(text: str, config: Optional[CkvConfig] = None) -> Document:
    """Parse ckv text into a :class:`Document`.

    Args:
        text: ckv text to parse
        config: Optional parse policies

    Returns:
        Document holding every entry and blank line of ``text``

    Raises:
        CkvParseError: On the first syntax error, with its 1-based line number
        NoValueFoundForKey: If empty values are disallowed and one is found

    Example:
        >>> parse("a=x\\n\\ty").get("a")
        'x\\ny'
    """
    config = ensure_config(config, CkvConfig)
    trailing_newline = text.endswith("\n")
    body = text[:-1] if trailing_newline else text
    lines = body.split("\n") if (body or trailing_newline) else []

    doc = Document(trailing_newline=trailing_newline, config=config)
    current: Optional[Entry] = None
    pending: List[str] = []  # Blank lines seen while an entry is open

    for line_no, line in enumerate(lines, start=1):
        raw = classify(line, line_no)

        if isinstance(raw, BlankLine):
            if current is None:
                doc.items.append(raw)
            else:
                pending.append(raw.text)
            continue

        if isinstance(raw, KeyLine):
            if current is not None:
                _close(current, config)
            doc.items.extend(BlankLine(t) for t in pending)
            pending = []
            current = Entry(raw.key, [raw.segment], line=line_no)
            doc.items.append(current)
            continue

        # ContinuationLine
        if current is None:
            raise ValueWithoutAKey(line_no)
        _extend(current, raw, pending, config)
        pending = []

    if current is not None:
        _close(current, config)
    doc.items.extend(BlankLine(t) for t in pending)

    logger.debug("Parsed %d line(s) into %d entries", len(lines), len(doc.entries()))
    return doc


def _extend(entry: Entry, raw: ContinuationLine, gap: List[str], config: CkvConfig) -> None:
    """Append a continuation segment to the open entry."""
    if config.strict and not entry.block:
        if entry.segments != [""]:
            raise TrailingCharsAfterEqualTo(entry.line)
        entry.block = True
        entry.segments = []
    if gap:
        entry.gaps[len(entry.segments)] = gap
    entry.segments.append(raw.segment)


def _close(entry: Entry, config: CkvConfig) -> None:
    if not config.allow_empty_values and not entry.value:
        raise NoValueFoundForKey(entry.key, entry.line)


def loads(text: str, config: Optional[CkvConfig] = None) -> Dict[str, str]:
    """Parse ckv text into a plain ``{key: value}`` dictionary."""
    return parse(text, config).mapping


def load(file_or_path: FileOrPath, config: Optional[CkvConfig] = None) -> Dict[str, str]:
    """Parse ckv from a file or file path.

    Raises:
        FileOpenFailed: If a path cannot be opened
    """
    text = handle_read(file_or_path)
    return loads(text, config)


def import_to_map(source: FileOrPath, config: Optional[CkvConfig] = None) -> Dict[str, str]:
    """Read ``source`` in full and return its key/value mapping."""
    return load(source, config)
