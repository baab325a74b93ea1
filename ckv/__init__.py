"""ckv: parser, editor and serializer for line-oriented key-value files.

A ckv file holds ``key=value`` lines; tab-led lines continue the previous
value on a new line. Edits rewrite a single key and keep every other byte.
"""

__version__ = "0.1.0"

from ckv.errors import (
    CkvError,
    CkvParseError,
    EqualToWithoutAKey,
    MissingEqualTo,
    TrailingCharsAfterEqualTo,
    ValueWithoutAKey,
    InvalidCharacter,
    KeyNotFound,
    NoValueFoundForKey,
    InvalidOutputStream,
    FileOpenFailed,
    format_error,
)
from ckv.config import CkvConfig
from ckv.document import Document, Entry
from ckv.parser import parse, loads, load, import_to_map
from ckv.serializer import render, dumps, dump
from ckv.editor import ConfigFile, get_value_for_key, set_value_for_key, remove_key

__all__ = [
    "parse",
    "loads",
    "load",
    "import_to_map",
    "render",
    "dumps",
    "dump",
    "get_value_for_key",
    "set_value_for_key",
    "remove_key",
    "ConfigFile",
    "Document",
    "Entry",
    "CkvConfig",
    "CkvError",
    "CkvParseError",
    "EqualToWithoutAKey",
    "MissingEqualTo",
    "TrailingCharsAfterEqualTo",
    "ValueWithoutAKey",
    "InvalidCharacter",
    "KeyNotFound",
    "NoValueFoundForKey",
    "InvalidOutputStream",
    "FileOpenFailed",
    "format_error",
]
