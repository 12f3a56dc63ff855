"""CLI main entry point."""

import asyncio
import json
import sys
from pathlib import Path

import click

from ...adapters import FsCacheAdapter, StdLoggerAdapter, locator_for_layout
from ...core import LayerCacheConfig, LayerCacheError, LayerCacheService, parse_json_manifest


def create_service(config: LayerCacheConfig) -> LayerCacheService:
    """Create service with wired adapters."""
    locator = locator_for_layout(config.blob_layout)
    cache = FsCacheAdapter()
    logger = StdLoggerAdapter(level=config.log_level)

    return LayerCacheService(
        locator=locator,
        cache=cache,
        logger=logger,
        include_markers=config.include_markers,
        skip_unreadable=config.skip_unreadable_blobs,
    )


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """LayerCache - content-addressed extraction cache for image layers."""
    config = LayerCacheConfig.from_env()
    if debug:
        config.log_level = "DEBUG"
    try:
        ctx.obj = create_service(config)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("blobs_dir", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.argument("cache_dir", type=click.Path(file_okay=False, path_type=Path))
@click.argument("manifest", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_obj
def untar(service: LayerCacheService, blobs_dir: Path, cache_dir: Path, manifest: Path) -> None:
    """Extract the layers listed in MANIFEST into CACHE_DIR."""
    try:
        schema = parse_json_manifest(manifest.read_text(encoding="utf-8"))
        report = asyncio.run(service.extract_layers(blobs_dir, cache_dir, schema.fs_layers))
    except LayerCacheError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(json.dumps(report.to_dict(), indent=2))


@cli.command("find-dir")
@click.argument("cache_dir", type=click.Path(path_type=Path))
@click.argument("name")
@click.pass_obj
def find_dir(service: LayerCacheService, cache_dir: Path, name: str) -> None:
    """Print the extracted directory under CACHE_DIR whose path contains NAME."""
    found = asyncio.run(service.find_named_subpath(cache_dir, name))
    if found is None:
        click.echo(f"Error: No directory matching {name} under {cache_dir}", err=True)
        sys.exit(1)

    click.echo(str(found))


def main() -> None:
    """Main entry point."""
    cli()
