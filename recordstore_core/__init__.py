"""
Record Store Core Module

Record schema, error taxonomy and rendering for the JSON record store.

This module provides:
- Record schema with strict id/email/age fields
- Error types shared by the store and the CLI
- Fixed field order rendering (id, email, age)
"""

__version__ = "0.1.0"

from .errors import (
    ConfigError,
    DuplicateError,
    NotFoundError,
    ParseError,
    RecordStoreError,
    SchemaError,
    StoreIOError,
    UnsupportedOperationError,
)
from .rendering import render_record, render_records
from .schemas import Record

__all__ = [
    "ConfigError",
    "DuplicateError",
    "NotFoundError",
    "ParseError",
    "Record",
    "RecordStoreError",
    "SchemaError",
    "StoreIOError",
    "UnsupportedOperationError",
    "render_record",
    "render_records",
]
