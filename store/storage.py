"""
File utilities for the store module.
"""

from __future__ import annotations

import logging
from pathlib import Path

from recordstore_core.errors import ParseError, StoreIOError


logger = logging.getLogger(__name__)

EMPTY_STORE = "[]"


def ensure_store_file(path: str | Path) -> bool:
    """Create the store file with an empty array if it does not exist.

    Returns True when a new file was created.
    """
    file_path = Path(path)
    try:
        if file_path.exists():
            return False
        file_path.write_text(EMPTY_STORE, encoding="utf-8")
    except OSError as exc:
        raise StoreIOError(f"Cannot create store file {file_path}: {exc}") from exc
    logger.debug(f"Created empty store at {file_path}")
    return True


def read_store_text(path: str | Path) -> str:
    file_path = Path(path)
    try:
        data = file_path.read_bytes()
    except OSError as exc:
        raise StoreIOError(f"Cannot read store file {file_path}: {exc}") from exc
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"Store file {file_path} is not valid UTF-8: {exc}") from exc


def write_store_text(path: str | Path, text: str) -> None:
    """Overwrite the store file with the full serialized store.

    The text is encoded before the file is opened, so an encoding failure
    leaves the previous contents in place.
    """
    file_path = Path(path)
    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise StoreIOError(f"Cannot encode store for {file_path}: {exc}") from exc
    try:
        file_path.write_bytes(data)
    except OSError as exc:
        raise StoreIOError(f"Cannot write store file {file_path}: {exc}") from exc
