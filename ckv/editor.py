"""Key lookup and surgical editing of ckv sources.

Every operation reads and parses its source from scratch, applies one change
and renders the whole document again. Nothing is written until the new text
is complete, so a failing operation never leaves partial output behind.
"""

import logging
from typing import Dict, Optional

from ckv.config import CkvConfig
from ckv.document import Document
from ckv.errors import CkvError, InvalidOutputStream
from ckv.parser import import_to_map, parse
from ckv.serializer import render
from ckv.utils import FileOrPath, handle_read, handle_write, is_path

logger = logging.getLogger(__name__)


def _read(source: FileOrPath, config: Optional[CkvConfig]) -> Document:
    return parse(handle_read(source), config)


def _resolve_sink(source: FileOrPath, sink: Optional[FileOrPath]) -> FileOrPath:
    if sink is not None:
        return sink
    if is_path(source):
        return source
    # A stream source has no place to rewrite in place
    raise InvalidOutputStream()


def get_value_for_key(source: FileOrPath, key: str, config: Optional[CkvConfig] = None) -> str:
    """Return the value of ``key`` in ``source``.

    Raises:
        KeyNotFound: If the key is absent.
    """
    return _read(source, config).get(key)


def set_value_for_key(
    source: FileOrPath,
    key: str,
    value: str,
    sink: Optional[FileOrPath] = None,
    config: Optional[CkvConfig] = None,
) -> None:
    """Set ``key`` to ``value`` and write the whole document to ``sink``.

    An existing key keeps its position; a new key is appended at the end.
    With no ``sink`` a path ``source`` is rewritten in place.

    Raises:
        CkvParseError: If ``source`` is not valid ckv.
        InvalidOutputStream: If the output cannot be written.
    """
    target = _resolve_sink(source, sink)
    doc = _read(source, config)
    doc.set(key, value)
    handle_write(target, render(doc))
    logger.debug("Set %r in %s", key, source if is_path(source) else "stream")


def remove_key(
    source: FileOrPath,
    key: str,
    sink: Optional[FileOrPath] = None,
    config: Optional[CkvConfig] = None,
) -> None:
    """Remove ``key`` and write the rest of the document to ``sink``.

    Only the key line and its continuation lines go away.
    With no ``sink`` a path ``source`` is rewritten in place.

    Raises:
        KeyNotFound: If the key is absent; nothing is written.
        InvalidOutputStream: If the output cannot be written.
    """
    target = _resolve_sink(source, sink)
    doc = _read(source, config)
    doc.remove(key)
    handle_write(target, render(doc))
    logger.debug("Removed %r from %s", key, source if is_path(source) else "stream")


class ConfigFile:
    """All ckv operations bound to a single file.

    ``err_line`` holds the line number of the most recent failure, or 0 when
    the failure had no line (missing key, unreadable file, ...).
    """

    def __init__(self, file_path: FileOrPath, config: Optional[CkvConfig] = None) -> None:
        self.file_path = file_path
        self.config = config
        self.err_line = 0

    def __repr__(self) -> str:
        return f"ConfigFile({str(self.file_path)!r})"

    def _run(self, operation, *args, **kwargs):
        self.err_line = 0
        try:
            return operation(self.file_path, *args, config=self.config, **kwargs)
        except CkvError as exc:
            self.err_line = exc.line or 0
            raise

    def import_to_map(self) -> Dict[str, str]:
        return self._run(import_to_map)

    def get_value_for_key(self, key: str) -> str:
        return self._run(get_value_for_key, key)

    def set_value_for_key(self, key: str, value: str, out: Optional[FileOrPath] = None) -> None:
        self._run(set_value_for_key, key, value, sink=out)

    def remove_key(self, key: str, out: Optional[FileOrPath] = None) -> None:
        self._run(remove_key, key, sink=out)
