"""CLI entrypoints for marpkit."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import typer

from marpkit.config import load_settings
from marpkit.fragment import parse_fragment_directive
from marpkit.logging import configure_logging, get_logger, log_exception
from marpkit.menu import generate_menu

app = typer.Typer(add_completion=False, help="Marp deck tooling: menu generation and directive checks")
logger = get_logger(__name__)


@app.command()
def menu(
    root: Path | None = typer.Argument(
        None,
        help="Directory to scan for Marp decks. Defaults to the current working directory.",
        show_default=False,
    ),
) -> None:
    """Scan for Marp decks and write a menu deck into the scanned directory."""

    settings = load_settings()
    configure_logging(settings.log_level)

    root_dir = root if root is not None else Path.cwd()
    try:
        output_path = asyncio.run(generate_menu(root_dir, settings=settings))
    except Exception:
        log_exception(logger, "执行失败", root=str(root_dir))
        raise typer.Exit(code=1) from None

    typer.echo(str(output_path))


@app.command()
def directive(value: str = typer.Argument(..., help="Raw value of a `fragment` directive")) -> None:
    """Show how a `fragment` directive value is interpreted."""

    typer.echo(json.dumps(parse_fragment_directive(value)))


if __name__ == "__main__":
    app()
