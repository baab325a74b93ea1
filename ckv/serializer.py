"""Serializer for ckv documents."""

from typing import Dict, List, Optional

from ckv.config import CkvConfig
from ckv.document import Document, Entry
from ckv.lines import CONTINUATION, SEPARATOR, BlankLine
from ckv.utils import FileOrPath, ensure_config, handle_write


def render(doc: Document) -> str:
    """
    Render a document back to ckv text.

    For a document produced by :func:`ckv.parse` this reproduces the parsed
    text exactly.

    Args:
        doc: Document to render.

    Returns:
        String containing the ckv text.
    """
    lines: List[str] = []
    for item in doc.items:
        if isinstance(item, BlankLine):
            lines.append(item.text)
        else:
            lines.extend(_entry_lines(item))

    result = "\n".join(lines)
    if doc.trailing_newline:
        result += "\n"
    return result


def _entry_lines(entry: Entry) -> List[str]:
    if entry.block:
        lines = [f"{entry.key}{SEPARATOR}"]
        start = 0
    else:
        lines = [f"{entry.key}{SEPARATOR}{entry.segments[0]}"]
        start = 1
    for index in range(start, len(entry.segments)):
        lines.extend(entry.gaps.get(index, []))
        lines.append(f"{CONTINUATION}{entry.segments[index]}")
    return lines


def dumps(data: Dict[str, str], config: Optional[CkvConfig] = None) -> str:
    """
    Serialize a ``{key: value}`` dictionary to ckv text.

    Multi-line values are written with tab-led continuation lines. The
    output ends with a newline when it is not empty.

    Args:
        data: Dictionary of string keys and string values.
        config: Optional policies (``strict`` selects the block form).

    Returns:
        String containing ckv text.

    Raises:
        TypeError: If a key or value is not a string.
        InvalidCharacter: If a key contains '=', a tab or a newline.
        EqualToWithoutAKey: If a key is empty.
    """
    config = ensure_config(config, CkvConfig)
    doc = Document(trailing_newline=bool(data), config=config)
    for key, value in data.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise TypeError(
                f"Keys and values must be strings, got {type(key).__name__}: {type(value).__name__}"
            )
        doc.set(key, value)
    return render(doc)


def dump(data: Dict[str, str], file_or_path: FileOrPath, config: Optional[CkvConfig] = None) -> None:
    """
    Serialize a dictionary to ckv and write it to a file.

    Raises:
        InvalidOutputStream: If the file cannot be written.
    """
    handle_write(file_or_path, dumps(data, config))
