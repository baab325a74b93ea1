"""Utility functions for ckv processing."""

import os
import tempfile
from pathlib import Path
from typing import Callable, Optional, TextIO, TypeVar, Union

from ckv.errors import FileOpenFailed, InvalidOutputStream

# Type definitions
FileOrPath = Union[str, Path, TextIO]
T = TypeVar('T')


def is_path(file_or_path: FileOrPath) -> bool:
    return isinstance(file_or_path, (str, Path))


def handle_read(file_or_path: FileOrPath) -> str:
    """
    Read content from a file path or file-like object.

    Files are read as UTF-8 with ``newline=""`` so line endings reach the
    parser untranslated.

    Args:
        file_or_path: File path string, Path object, or file-like object

    Returns:
        String content of the file

    Raises:
        FileOpenFailed: If the path cannot be opened or is not valid UTF-8
    """
    if is_path(file_or_path):
        try:
            with open(file_or_path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise FileOpenFailed(str(file_or_path)) from exc
    return file_or_path.read()


def handle_write(file_or_path: FileOrPath, content: str) -> None:
    """
    Write content to a file path or file-like object in one step.

    Paths are replaced atomically: the content goes to a temporary file in
    the same directory which is then moved over the target, so a failure
    leaves the previous file untouched.

    Args:
        file_or_path: File path string, Path object, or file-like object
        content: String content to write

    Raises:
        InvalidOutputStream: If the target cannot be written
    """
    if is_path(file_or_path):
        _replace_file(Path(file_or_path), content)
        return

    writable = getattr(file_or_path, "writable", None)
    try:
        if getattr(file_or_path, "closed", False) or (writable is not None and not writable()):
            raise InvalidOutputStream()
        file_or_path.write(content)
    except (OSError, ValueError, AttributeError) as exc:
        raise InvalidOutputStream() from exc


def _replace_file(path: Path, content: str) -> None:
    # Replace the symlink target, not the link itself
    path = path.resolve()
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    except OSError as exc:
        raise InvalidOutputStream() from exc
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        if path.exists():
            os.chmod(tmp_name, path.stat().st_mode & 0o7777)
        os.replace(tmp_name, path)
    except (OSError, ValueError) as exc:
        raise InvalidOutputStream() from exc
    finally:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)


def ensure_config(config: Optional[T], default_factory: Callable[[], T]) -> T:
    """Ensure config is not None, creating default if needed."""
    return config if config is not None else default_factory()
