#!/usr/bin/env python3
"""Command line entry point for sluggable.

Usage:
    python -m sluggable.main create "Hello World"
    python -m sluggable.main create "Hello World" --type article --store data/slugs.json --save
    python -m sluggable.main list --type article --store data/slugs.json
"""

import os
from pathlib import Path
from typing import Annotated

import typer
import yaml
from dotenv import load_dotenv
from loguru import logger

from sluggable.constants import CONFIG_ENV_VAR
from sluggable.exceptions import InvalidConfiguration
from sluggable.models.config import SluggableSettings
from sluggable.models.record import Record
from sluggable.service import SlugService
from sluggable.store import JsonSlugStore
from sluggable.utils.config_loader import load_settings
from sluggable.utils.logging import setup_logging

# Load environment variables from .env file
load_dotenv()

app = typer.Typer()


def _load(config_file: Path | None, verbose: bool) -> SluggableSettings:
    """Load settings from the option or the environment and configure logging."""
    path = config_file or os.environ.get(CONFIG_ENV_VAR)
    settings = load_settings(path)

    log_config = settings.logging
    if verbose:
        log_config = log_config.model_copy(update={"level": "DEBUG"})
    setup_logging(log_config)

    return settings


@app.command()
def create(
    text: Annotated[str, typer.Argument(help="Text to turn into a slug")],
    record_type: Annotated[
        str,
        typer.Option("--type", "-t", help="Record type whose configuration applies"),
    ] = "record",
    field: Annotated[
        str,
        typer.Option("--field", help="Slug field name"),
    ] = "slug",
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to sluggable configuration file"),
    ] = None,
    store_file: Annotated[
        Path | None,
        typer.Option("--store", "-s", help="JSON store checked for existing slugs"),
    ] = None,
    save: Annotated[
        bool,
        typer.Option("--save", help="Store a new record holding the slug"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging"),
    ] = False,
) -> None:
    """
    Create a slug from TEXT and print it.
    """
    try:
        settings = _load(config_file, verbose)
        fields = settings.models.get(record_type) or {field: {}}
        store = JsonSlugStore(store_file, unique_fields=list(fields)) if store_file else None

        record = Record(type_name=record_type, slug_fields=fields, source_text=text)
        record.store = store

        slug = SlugService(settings).create_slug(record, field, text)

        if save:
            if store is None:
                typer.echo("--save requires --store", err=True)
                raise typer.Exit(code=2)
            record.set_attribute(field, slug)
            record.set_attribute("source", text)
            store.save(record)
            logger.info("Slug saved", record_type=record_type, key=record.get_key(), slug=slug)

        typer.echo(slug)

    except InvalidConfiguration as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(code=2) from e

    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        typer.echo(f"Failed to create slug: {e}", err=True)
        raise typer.Exit(code=1) from e


@app.command("list")
def list_slugs(
    store_file: Annotated[
        Path,
        typer.Option("--store", "-s", help="JSON store to read"),
    ],
    record_type: Annotated[
        str,
        typer.Option("--type", "-t", help="Record type to list"),
    ] = "record",
    field: Annotated[
        str,
        typer.Option("--field", help="Slug field name"),
    ] = "slug",
) -> None:
    """
    Print the stored slugs of a record type, one "key<TAB>slug" per line.
    """
    if not store_file.exists():
        typer.echo(f"Store not found: {store_file}", err=True)
        raise typer.Exit(code=1)

    store = JsonSlugStore(store_file)
    rows = store.tables.get(record_type, {})
    for key, row in rows.items():
        typer.echo(f"{key}\t{row.get(field, '')}")

    if not rows:
        typer.echo(f"No {record_type} records", err=True)


if __name__ == "__main__":
    app()
