"""Classification of single physical lines of a ckv document."""

from dataclasses import dataclass
from typing import Union

from ckv.errors import EqualToWithoutAKey, InvalidCharacter, MissingEqualTo

SEPARATOR = "="
CONTINUATION = "\t"


@dataclass
class KeyLine:
    """``key=value`` line opening a new entry."""

    key: str
    segment: str


@dataclass
class ContinuationLine:
    """Tab-led line extending the value of the open entry."""

    segment: str


@dataclass
class BlankLine:
    """Whitespace-only line, kept verbatim."""

    text: str = ""


RawLine = Union[KeyLine, ContinuationLine, BlankLine]


def classify(text: str, line_no: int) -> RawLine:
    """Classify one line (without its newline).

    Raises:
        MissingEqualTo: The line has content but no '='.
        EqualToWithoutAKey: The line starts with '='.
        InvalidCharacter: The key contains a tab.
    """
    if text.startswith(CONTINUATION):
        return ContinuationLine(text[1:])
    if not text.strip():
        return BlankLine(text)

    sep_pos = text.find(SEPARATOR)
    if sep_pos == -1:
        raise MissingEqualTo(line_no)
    if sep_pos == 0:
        raise EqualToWithoutAKey(line_no)

    key = text[:sep_pos]
    if CONTINUATION in key:
        raise InvalidCharacter(CONTINUATION, line_no)
    return KeyLine(key, text[sep_pos + 1:])
