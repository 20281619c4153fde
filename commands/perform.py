"""Dispatch of one invocation to the record store."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TextIO

from recordstore_core.errors import NotFoundError, RecordStoreError, UnsupportedOperationError
from recordstore_core.rendering import render_record, render_records
from store.repository import RecordStore

from .config import ADD, FIND_BY_ID, LIST, REMOVE, Arguments
from .validation import validate_arguments


logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    SUCCESS = "success"
    # list found no records and wrote nothing
    EMPTY = "empty"
    # add/remove failed; the error text went to the output stream
    REPORTED = "reported"
    # findById missed; nothing was written
    SILENT_MISS = "silent_miss"


def _report(error: RecordStoreError, writer: TextIO) -> Outcome:
    logger.warning(f"Reported failure: {error}")
    writer.write(str(error))
    return Outcome.REPORTED


def perform(arguments: Arguments, writer: TextIO) -> Outcome:
    """Run the requested operation and write its result to ``writer``.

    Errors from add/remove business logic are written as text instead of
    raised. A findById miss writes nothing. Everything else propagates.
    """
    operation = arguments.operation

    if operation == ADD:
        validate_arguments(arguments, require_item=True)
        try:
            record = RecordStore(arguments.file_name).add(arguments.item)
        except RecordStoreError as e:
            return _report(e, writer)
        logger.debug(f"Added record {record.id}")
        return Outcome.SUCCESS

    if operation == LIST:
        validate_arguments(arguments)
        records = RecordStore(arguments.file_name).list_records()
        if not records:
            return Outcome.EMPTY
        writer.write(render_records(records))
        return Outcome.SUCCESS

    if operation == FIND_BY_ID:
        validate_arguments(arguments, require_id=True)
        try:
            record = RecordStore(arguments.file_name).find_by_id(arguments.id)
        except NotFoundError:
            logger.debug(f"No record with id {arguments.id}")
            return Outcome.SILENT_MISS
        writer.write(render_record(record))
        return Outcome.SUCCESS

    if operation == REMOVE:
        validate_arguments(arguments, require_id=True)
        try:
            record = RecordStore(arguments.file_name).remove(arguments.id)
        except RecordStoreError as e:
            return _report(e, writer)
        logger.debug(f"Removed record {record.id}")
        return Outcome.SUCCESS

    validate_arguments(arguments)
    raise UnsupportedOperationError(operation)
