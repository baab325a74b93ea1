"""Exceptions for ckv processing.

Errors carry structured data only (line, character, key, path). Human readable
text is produced by :func:`format_error`, which the CLI uses for reporting.
"""

from typing import Optional


class CkvError(Exception):
    """Base exception for ckv errors."""

    message = "ckv error"

    def __init__(self, line: Optional[int] = None) -> None:
        self.line = line
        super().__init__(self.describe())

    def describe(self) -> str:
        """Message text without location."""
        return self.message


class CkvParseError(CkvError):
    """Syntax error found while reading a ckv document."""


class EqualToWithoutAKey(CkvParseError):
    """An '=' with nothing before it."""

    message = "Found '=' without a key"


class MissingEqualTo(CkvParseError):
    """A key line that never assigns a value."""

    message = "Key should be followed by a '='"


class TrailingCharsAfterEqualTo(CkvParseError):
    """Inline text after '=' on a key that opens a block value (strict mode)."""

    message = "Trailing characters after '='"


class ValueWithoutAKey(CkvParseError):
    """Tab-indented content with no preceding key."""

    message = "Tab found with no preceding key"


class InvalidCharacter(CkvParseError):
    """A reserved character where it is not allowed."""

    def __init__(self, char: str, line: Optional[int] = None) -> None:
        self.char = char
        super().__init__(line)

    def describe(self) -> str:
        return f"Invalid character {self.char!r}"


class KeyNotFound(CkvError):
    """Lookup or removal of a key that is not in the document."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(None)

    def describe(self) -> str:
        return f'"{self.key}": key not found'


class NoValueFoundForKey(CkvError):
    """A key with an empty value where empty values are not allowed."""

    def __init__(self, key: str, line: Optional[int] = None) -> None:
        self.key = key
        super().__init__(line)

    def describe(self) -> str:
        return f'"{self.key}": No value found for key'


class InvalidOutputStream(CkvError):
    """The output sink cannot be written to."""

    message = "Invalid output stream"


class FileOpenFailed(CkvError):
    """The input file could not be opened."""

    def __init__(self, path: str) -> None:
        self.path = str(path)
        super().__init__(None)

    def describe(self) -> str:
        return f"Failed to open file {self.path}"


def format_error(error: CkvError, path: Optional[str] = None) -> str:
    """Render an error as ``path: line N: message``.

    The path and line parts are left out when they are not known.
    """
    parts = []
    if path is not None:
        parts.append(str(path))
    if error.line:
        parts.append(f"line {error.line}")
    parts.append(error.describe())
    return ": ".join(parts)
