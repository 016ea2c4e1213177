"""CLI interface for Showroom."""

import logging
import sys
from pathlib import Path

import click
from dotenv import load_dotenv

from showroom.config import Config
from showroom.core.errors import GenerationError
from showroom.core.generator import ContentGenerator


@click.group()
def cli() -> None:
    """Showroom - server-rendered dealer pages."""


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover showroom.toml)",
)
@click.option(
    "--content-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Content source directory (overrides config)",
)
@click.option(
    "--static-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Static assets directory (overrides config)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config and PORT)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
def serve(
    config_path: Path | None,
    content_dir: Path | None,
    static_dir: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
) -> None:
    """Generate content and start the server."""
    from showroom.server import run_server

    _configure_logging(verbose)
    config = _load_config(config_path).with_overrides(
        host=host,
        port=port,
        content_dir=content_dir,
        static_dir=static_dir,
    )

    click.echo(f"Content directory: {config.content.source_dir}")
    click.echo(f"Static directory: {config.static.dir}")
    if config.pages.bind_content:
        click.echo("Content pages: enabled")

    try:
        run_server(config)
    except GenerationError as e:
        click.echo(click.style(f"Content generation failed: {e}", fg="red"), err=True)
        sys.exit(1)


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover showroom.toml)",
)
@click.option(
    "--content-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Content source directory (overrides config)",
)
def generate(config_path: Path | None, content_dir: Path | None) -> None:
    """Validate content and list the generated page keys."""
    config = _load_config(config_path).with_overrides(content_dir=content_dir)

    try:
        store = ContentGenerator(config.content.source_dir).generate()
    except GenerationError as e:
        click.echo(click.style(f"Content generation failed: {e}", fg="red"), err=True)
        sys.exit(1)

    for key, item in store.items():
        click.echo(f"  {key}: {item.title} [{item.status}]")
    click.echo(click.style(f"Generated {len(store)} content items", fg="green"))


def _load_config(config_path: Path | None) -> Config:
    """Load .env, config file and PORT, exiting on invalid configuration.

    Args:
        config_path: Explicit config file, or None to auto-discover

    Returns:
        Config with environment applied
    """
    # Best effort: a missing .env file is fine
    load_dotenv()

    try:
        return Config.load(config_path).with_env()
    except (OSError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


if __name__ == "__main__":
    cli()
