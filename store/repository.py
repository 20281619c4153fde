"""
JSON-file-backed record repository.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import cast

from recordstore_core.errors import DuplicateError, NotFoundError, ParseError
from recordstore_core.rendering import render_records
from recordstore_core.schemas import Record

from .storage import read_store_text, write_store_text


logger = logging.getLogger(__name__)


def parse_records(text: str, source: str = "store") -> list[Record]:
    """Parse a JSON array of record objects, keeping file order."""
    try:
        payload = cast(object, json.loads(text))
    except json.JSONDecodeError as exc:
        raise ParseError(f"Invalid JSON in {source}: {exc}") from exc
    if not isinstance(payload, list):
        raise ParseError(f"Expected a JSON array in {source}, got {type(payload).__name__}")
    records: list[Record] = []
    for index, item in enumerate(cast(list[object], payload)):
        if not isinstance(item, dict):
            raise ParseError(f"Expected a JSON object at index {index} in {source}")
        records.append(Record.from_dict(cast(dict[str, object], item)))
    return records


class RecordStore:
    """Read-modify-write access to a single JSON store file.

    Every mutating call performs one full read and at most one full rewrite.
    """

    def __init__(self, path: str | Path) -> None:
        self.path: Path = Path(path)

    def load(self) -> list[Record]:
        records = parse_records(read_store_text(self.path), source=str(self.path))
        logger.debug(f"Loaded {len(records)} record(s) from {self.path}")
        return records

    def _persist(self, records: list[Record]) -> None:
        write_store_text(self.path, render_records(records))
        logger.debug(f"Wrote {len(records)} record(s) to {self.path}")

    def add(self, payload: str) -> Record:
        record = Record.from_json(payload)
        records = self.load()
        if any(existing.id == record.id for existing in records):
            raise DuplicateError(record.id)
        records.append(record)
        self._persist(records)
        return record

    def list_records(self) -> list[Record]:
        return self.load()

    def find_by_id(self, record_id: str) -> Record:
        for record in self.load():
            if record.id == record_id:
                return record
        raise NotFoundError(record_id)

    def remove(self, record_id: str) -> Record:
        records = self.load()
        for index, record in enumerate(records):
            if record.id == record_id:
                del records[index]
                self._persist(records)
                return record
        raise NotFoundError(record_id)
