#!/usr/bin/env python3
"""Command-line entry point for trying the allocators by hand.

Usage:
    unique-alloc slug "John Doe" --taken john-doe --taken john-doe-2
    unique-alloc id --count 5 --prefix usr_
    unique-alloc --config config/allocator.yaml --verbose slug "Hello World"
"""

import asyncio
from pathlib import Path
from typing import Annotated

import typer
import yaml
from loguru import logger
from pydantic import ValidationError

from unique_alloc.allocator import UniqueAllocator
from unique_alloc.errors import UniqueAllocError
from unique_alloc.models.config import AllocatorConfig, IdConfig
from unique_alloc.utils.config_loader import load_allocator_config
from unique_alloc.utils.ids import id_generator_from_config
from unique_alloc.utils.logging import setup_logging

app = typer.Typer(no_args_is_help=True)


@app.callback()
def main(
    ctx: typer.Context,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to allocator configuration file",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging"),
    ] = False,
) -> None:
    """Allocate unique slugs and ids."""
    try:
        config = load_allocator_config(config_file) if config_file else AllocatorConfig()
    except (FileNotFoundError, yaml.YAMLError, ValidationError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    if verbose:
        config.logging.level = "DEBUG"
    setup_logging(config.logging)

    ctx.obj = UniqueAllocator(config)


@app.command()
def slug(
    ctx: typer.Context,
    text: Annotated[str, typer.Argument(help="Text to turn into a slug")],
    taken: Annotated[
        list[str] | None,
        typer.Option("--taken", "-t", help="Slug already in use (repeatable)"),
    ] = None,
    max_length: Annotated[
        int | None,
        typer.Option("--max-length", min=1, help="Maximum slug length"),
    ] = None,
    max_attempts: Annotated[
        int | None,
        typer.Option("--max-attempts", min=1, help="Candidates to try"),
    ] = None,
) -> None:
    """Print the first free slug for TEXT."""
    allocator: UniqueAllocator = ctx.obj
    taken_slugs = set(taken or [])

    async def exists(value: str) -> bool:
        return value in taken_slugs

    try:
        result = asyncio.run(
            allocator.generate_slug(
                text, exists, max_length=max_length, max_attempts=max_attempts
            )
        )
    except UniqueAllocError as e:
        logger.error("Slug allocation failed", error=str(e))
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    typer.echo(result)


@app.command("id")
def new_id(
    ctx: typer.Context,
    count: Annotated[int, typer.Option("--count", "-n", min=1, help="Ids to print")] = 1,
    length: Annotated[
        int | None, typer.Option("--length", min=1, help="Random part length")
    ] = None,
    prefix: Annotated[str | None, typer.Option("--prefix", help="Id prefix")] = None,
    alphabet: Annotated[str | None, typer.Option("--alphabet", help="Id alphabet")] = None,
) -> None:
    """Print random ids."""
    allocator: UniqueAllocator = ctx.obj
    overrides = {
        key: value
        for key, value in {"length": length, "prefix": prefix, "alphabet": alphabet}.items()
        if value is not None
    }

    try:
        id_config = IdConfig.model_validate(
            allocator.config.ids.model_dump() | overrides
        )
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    generate = id_generator_from_config(id_config)
    for _ in range(count):
        typer.echo(generate())


if __name__ == "__main__":
    app()
