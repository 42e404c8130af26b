"""Tests for deck discovery."""

from __future__ import annotations

import asyncio
from pathlib import Path

from marpkit.backends import AsyncFilesystemBackend
from marpkit.config import Settings
from marpkit.discovery import build_tree
from marpkit.models.tree import DirectoryNode, DocumentNode
from marpkit.outline import tree_to_markdown

DECK = '---\nmarp: true\ntitle: "{title}"\n---\n# Slide\n'
UNTITLED_DECK = "---\nmarp: true\ntheme: uncover\n---\n# Slide\n"


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


class FlakyBackend(AsyncFilesystemBackend):
    """Fails on configured paths, otherwise reads the filesystem."""

    def __init__(self, *, bad_files: tuple[str, ...] = (), bad_dirs: tuple[str, ...] = ()) -> None:
        super().__init__()
        self.bad_files = bad_files
        self.bad_dirs = bad_dirs

    def read_text(self, file_path: str) -> str:
        if file_path.endswith(self.bad_files) and self.bad_files:
            raise PermissionError(13, "Permission denied", file_path)
        return super().read_text(file_path)

    def ls_info(self, path: str):
        if self.bad_dirs and path.endswith(self.bad_dirs):
            raise PermissionError(13, "Permission denied", path)
        return super().ls_info(path)


def test_build_tree_collects_decks_and_prunes(tmp_path: Path, settings: Settings) -> None:
    """It should keep decks, derive titles and URLs, and drop deck-less directories."""

    _write(tmp_path / "intro.md", DECK.format(title="Hello World"))
    _write(tmp_path / "notes.md", "# plain markdown, not a deck\n")
    _write(tmp_path / "UPPER.MD", UNTITLED_DECK)
    _write(tmp_path / "course" / "week1" / "lesson.md", UNTITLED_DECK)
    _write(tmp_path / "empty" / "deeper" / "readme.txt", "marp: true")
    (tmp_path / "empty" / "void").mkdir()

    tree = asyncio.run(build_tree(tmp_path, settings=settings))

    assert set(tree.children) == {"intro.md", "course"}

    intro = tree.children["intro.md"]
    assert isinstance(intro, DocumentNode)
    assert intro.title == "Hello World"
    assert intro.url == "https://example.com/decks/intro.html"

    course = tree.children["course"]
    assert isinstance(course, DirectoryNode)
    lesson = course.children["week1"].children["lesson.md"]
    assert lesson.title == "lesson"
    assert lesson.url == "https://example.com/decks/course/week1/lesson.html"


def test_build_tree_urls_relative_to_root_dir(tmp_path: Path, settings: Settings) -> None:
    _write(tmp_path / "sub" / "deck.md", UNTITLED_DECK)

    tree = asyncio.run(build_tree(tmp_path / "sub", tmp_path, settings=settings))

    assert tree.children["deck.md"].url == "https://example.com/decks/sub/deck.html"


def test_build_tree_skips_unreadable_file(tmp_path: Path, settings: Settings) -> None:
    """A failing read excludes only that file."""

    _write(tmp_path / "bad.md", UNTITLED_DECK)
    _write(tmp_path / "good.md", UNTITLED_DECK)

    tree = asyncio.run(build_tree(tmp_path, backend=FlakyBackend(bad_files=("bad.md",)), settings=settings))

    assert list(tree.children) == ["good.md"]


def test_build_tree_keeps_deck_with_invalid_utf8(tmp_path: Path, settings: Settings) -> None:
    """Undecodable bytes are replaced, the deck stays in the tree."""

    (tmp_path / "binary.md").write_bytes(b"\xff\xfe\x00marp: true")
    (tmp_path / "cafe.md").write_bytes(b"---\nmarp: true\ntitle: caf\xe9\n---\n")

    tree = asyncio.run(build_tree(tmp_path, settings=settings))

    assert list(tree.children) == ["binary.md", "cafe.md"]
    assert tree.children["binary.md"].title == "binary"
    assert tree.children["cafe.md"].title == "caf\ufffd"


def test_build_tree_ignores_symlinks(tmp_path: Path, settings: Settings) -> None:
    """Symlinked directories and files are not followed, so a loop cannot repeat the tree."""

    deck_dir = tmp_path / "a"
    _write(deck_dir / "deck.md", UNTITLED_DECK)
    (deck_dir / "loop").symlink_to(deck_dir, target_is_directory=True)
    (tmp_path / "alias.md").symlink_to(deck_dir / "deck.md")

    tree = asyncio.run(build_tree(tmp_path, settings=settings))

    assert list(tree.children) == ["a"]
    assert list(tree.children["a"].children) == ["deck.md"]
    assert tree_to_markdown(tree) == "- a\n  - [deck](https://example.com/decks/a/deck.html)\n"


def test_build_tree_skips_unlistable_directory(tmp_path: Path, settings: Settings) -> None:
    _write(tmp_path / "locked" / "deck.md", UNTITLED_DECK)
    _write(tmp_path / "open" / "deck.md", UNTITLED_DECK)

    tree = asyncio.run(build_tree(tmp_path, backend=FlakyBackend(bad_dirs=("locked",)), settings=settings))

    assert list(tree.children) == ["open"]


def test_build_tree_missing_root_is_empty(tmp_path: Path, settings: Settings) -> None:
    tree = asyncio.run(build_tree(tmp_path / "does-not-exist", settings=settings))

    assert tree.children == {}


def test_build_tree_excludes_given_files(tmp_path: Path, settings: Settings) -> None:
    _write(tmp_path / "menu.md", UNTITLED_DECK)
    _write(tmp_path / "deck.md", UNTITLED_DECK)

    tree = asyncio.run(build_tree(tmp_path, exclude=[tmp_path / "menu.md"], settings=settings))

    assert list(tree.children) == ["deck.md"]
