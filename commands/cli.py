"""CLI interface for the record store."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import typer

from commands.config import OPERATIONS, Arguments, load_config
from commands.perform import perform
from recordstore_core.errors import RecordStoreError

app = typer.Typer(help="JSON file record store CLI", add_completion=False)


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def run(
    operation: Optional[str] = typer.Option(
        None, "-operation", "--operation", help=f"Operation: {', '.join(OPERATIONS)}"
    ),
    file_name: Optional[str] = typer.Option(
        None, "-fileName", "--fileName", help="JSON file holding the records"
    ),
    item: Optional[str] = typer.Option(
        None, "-item", "--item", help='Record to add, e.g. {"id":"1","email":"a@b.com","age":30}'
    ),
    id: Optional[str] = typer.Option(
        None, "-id", "--id", help="Record id for findById and remove"
    ),
    config_path: Optional[str] = typer.Option(
        None, "-config", "--config", help="YAML file with default flag values"
    ),
    verbose: bool = typer.Option(
        False, "-verbose", "--verbose", help="Debug logging on stderr"
    ),
) -> None:
    """Add, list, find or remove records in a JSON file."""
    _configure_logging(verbose)
    try:
        defaults = load_config(config_path) if config_path else None
        arguments = Arguments.from_flags(
            defaults,
            operation=operation,
            file_name=file_name,
            item=item,
            id=id,
        )
        perform(arguments, sys.stdout)
    except RecordStoreError as e:
        typer.secho(f"❌ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    finally:
        sys.stdout.flush()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
