"""Argument checks run before every operation."""

from __future__ import annotations

from recordstore_core.errors import ConfigError
from store.storage import ensure_store_file

from .config import Arguments


def validate_arguments(
    arguments: Arguments,
    require_item: bool = False,
    require_id: bool = False,
) -> None:
    """Check required flags and make sure the store file exists.

    The file is bootstrapped before the operation is checked, so an
    invocation without an operation still leaves an empty store behind.
    """
    if not arguments.file_name:
        raise ConfigError("-fileName flag has to be specified")
    ensure_store_file(arguments.file_name)
    if not arguments.operation:
        raise ConfigError("-operation flag has to be specified")
    if require_item and not arguments.item:
        raise ConfigError("-item flag has to be specified")
    if require_id and not arguments.id:
        raise ConfigError("-id flag has to be specified")
