"""Error taxonomy for record store operations."""

from __future__ import annotations


class RecordStoreError(Exception):
    """Base class for every error raised by the record store."""


class ConfigError(RecordStoreError):
    """A required flag or configuration value is missing or invalid."""


class StoreIOError(RecordStoreError, OSError):
    """The backing file could not be created, read or written."""


class ParseError(RecordStoreError, ValueError):
    """Malformed JSON in the backing file or in an item payload."""


class SchemaError(RecordStoreError, ValueError):
    """A record does not satisfy the id/email/age schema."""


class DuplicateError(RecordStoreError):
    def __init__(self, record_id: str) -> None:
        self.record_id = record_id
        super().__init__(f"Item with id {record_id} already exists")


class NotFoundError(RecordStoreError, LookupError):
    def __init__(self, record_id: str) -> None:
        self.record_id = record_id
        super().__init__(f"Item with id {record_id} not found")


class UnsupportedOperationError(RecordStoreError):
    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Operation {operation} not allowed!")
