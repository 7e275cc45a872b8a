"""CLI entry point for Taskboard."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from taskboard.board import validate_board
from taskboard.config import BoardConfig, ConfigError, load_config
from taskboard.controller import BoardController
from taskboard.loader import BoardLoader, LoadSource, Snapshot
from taskboard.logging import get_logger, setup_logging_from_config

logger = get_logger("cli")


def _load_config_or_exit(config_path: Path | None) -> BoardConfig:
    try:
        return load_config(config_path)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(package_name="taskboard")
def main() -> None:
    """Taskboard - board state engine and host service."""
    pass


@main.command()
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    help="Path to taskboard.yaml (./taskboard.yaml if present)",
)
@click.option("--host", default="127.0.0.1", show_default=True, help="Bind address")
@click.option("--port", default=8000, show_default=True, type=int, help="Bind port")
@click.option("--db", "db_path", default=None, help="Record store path (overrides config)")
def serve(config_path: Path | None, host: str, port: int, db_path: str | None) -> None:
    """Run the host service."""
    import uvicorn  # noqa: PLC0415

    from taskboard.api import create_app  # noqa: PLC0415

    config = _load_config_or_exit(config_path)
    setup_logging_from_config(config.logging)
    logger.info("Serving on %s:%d", host, port)
    uvicorn.run(create_app(config=config, db_path=db_path), host=host, port=port)


@main.command()
@click.argument("bundle", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    help="Path to taskboard.yaml (./taskboard.yaml if present)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
def load(bundle: Path, config_path: Path | None, verbose: bool) -> None:
    """Load a legacy bundle file and print the resulting board as JSON."""
    config = _load_config_or_exit(config_path)
    # stdout carries the JSON; logs reach the console only with --verbose
    setup_logging_from_config(
        config.logging, level="DEBUG" if verbose else None, console=verbose
    )

    controller = BoardController(
        definitions=config.columns,
        loader=BoardLoader(config.columns, use_fallback_data=config.use_fallback_data),
    )
    controller.refresh(Snapshot(legacy_raw=bundle.read_text(encoding="utf-8")))

    if controller.last_source == LoadSource.PREVIOUS:
        click.echo(f"Error: could not parse {bundle}", err=True)
        sys.exit(1)

    for problem in validate_board(controller.board):
        logger.warning("Board invariant violated: %s", problem)

    click.echo(json.dumps(controller.board.to_dict(), indent=2))


if __name__ == "__main__":
    main()
