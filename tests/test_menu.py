"""Tests for menu generation and the CLI."""

from __future__ import annotations

import asyncio
import json
from datetime import datetime, timezone
from pathlib import Path

import pytest
from typer.testing import CliRunner

from marpkit import cli
from marpkit.config import Settings
from marpkit.menu import generate_menu

DECK = '---\nmarp: true\ntitle: "{title}"\n---\n# Slide\n'


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_generate_menu_writes_document(tmp_path: Path, settings: Settings) -> None:
    _write(tmp_path / "intro.md", DECK.format(title="Intro"))
    _write(tmp_path / "unit" / "loops.md", DECK.format(title="Loops"))
    now = datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc)

    output = asyncio.run(generate_menu(tmp_path, settings=settings, now=now))

    assert output == tmp_path / "menu.md"
    text = output.read_text(encoding="utf-8")
    assert "- [Intro](https://example.com/decks/intro.html)\n" in text
    assert "- unit\n  - [Loops](https://example.com/decks/unit/loops.html)\n" in text
    assert text.endswith("# 2024-01-01 08:00:00")


def test_generate_menu_does_not_list_previous_menu(tmp_path: Path, settings: Settings) -> None:
    """A rerun must not pick up the menu written by the previous run."""

    _write(tmp_path / "intro.md", DECK.format(title="Intro"))

    asyncio.run(generate_menu(tmp_path, settings=settings))
    text = asyncio.run(generate_menu(tmp_path, settings=settings)).read_text(encoding="utf-8")

    assert "menu.html" not in text


def test_generate_menu_honours_output_name(tmp_path: Path, settings: Settings) -> None:
    settings.output_name = "index.md"

    output = asyncio.run(generate_menu(tmp_path, settings=settings))

    assert output.name == "index.md"
    assert output.exists()


def test_cli_menu_writes_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("MARPKIT_ENV_FILE", raising=False)
    monkeypatch.setenv("MARPKIT_BASE_URL", "https://example.com/")
    _write(tmp_path / "deck.md", DECK.format(title="Deck"))

    result = CliRunner().invoke(cli.app, ["menu", str(tmp_path)])

    assert result.exit_code == 0, result.output
    assert "[Deck](https://example.com/deck.html)" in (tmp_path / "menu.md").read_text(encoding="utf-8")


def test_cli_menu_failure_exits_without_output(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    async def boom(*args, **kwargs):
        raise RuntimeError("disk full")

    monkeypatch.setattr(cli, "generate_menu", boom)

    result = CliRunner().invoke(cli.app, ["menu", str(tmp_path)])

    assert result.exit_code == 1
    assert not (tmp_path / "menu.md").exists()


def test_cli_directive() -> None:
    result = CliRunner().invoke(cli.app, ["directive", "FALSE"])

    assert result.exit_code == 0
    assert json.loads(result.output) == {"fragment": False}
