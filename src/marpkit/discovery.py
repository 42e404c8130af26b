"""Deck discovery: walk a directory and collect Marp decks into a tree.

Directories without decks are pruned bottom-up, so every directory in the
result leads to at least one deck. Listing and read failures are logged and
skipped; ``build_tree`` never raises for I/O problems.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from marpkit.backends import AsyncFilesystemBackend, FileInfo
from marpkit.config import Settings, load_settings
from marpkit.logging import get_logger
from marpkit.models.tree import DirectoryNode, DocumentNode
from marpkit.utils.frontmatter import extract_title_from_frontmatter, is_marp_deck
from marpkit.utils.paths import strip_suffix, to_deck_url

logger = get_logger(__name__)


async def _read_deck(
    entry: FileInfo,
    root_dir: Path,
    backend: AsyncFilesystemBackend,
    settings: Settings,
) -> DocumentNode | None:
    try:
        content = await backend.aread_text(entry.path)
    except OSError as e:
        logger.warning("读取文件失败：%s，错误信息：%s", entry.path, e)
        return None

    if not is_marp_deck(content, settings.deck_marker):
        return None

    title = extract_title_from_frontmatter(content) or strip_suffix(entry.name, settings.deck_suffix) or entry.name
    relative_path = os.path.relpath(entry.path, root_dir)
    return DocumentNode(title=title, url=to_deck_url(relative_path, settings.base_url))


async def _build_subtree(
    current_dir: Path,
    root_dir: Path,
    backend: AsyncFilesystemBackend,
    settings: Settings,
    exclude: frozenset[str],
) -> DirectoryNode | None:
    node = DirectoryNode()

    try:
        entries = await backend.als_info(str(current_dir))
    except OSError as e:
        logger.warning("访问目录失败：%s，错误信息：%s", current_dir, e)
        return None

    for entry in entries:
        if entry.is_dir:
            sub = await _build_subtree(Path(entry.path), root_dir, backend, settings, exclude)
            if sub is not None:
                node.children[entry.name] = sub
        elif entry.is_file and entry.name.endswith(settings.deck_suffix):
            if os.path.abspath(entry.path) in exclude:
                continue
            doc = await _read_deck(entry, root_dir, backend, settings)
            if doc is not None:
                node.children[entry.name] = doc

    return None if node.is_empty() else node


async def build_tree(
    current_dir: str | Path,
    root_dir: str | Path | None = None,
    *,
    backend: AsyncFilesystemBackend | None = None,
    exclude: Iterable[str | Path] = (),
    settings: Settings | None = None,
) -> DirectoryNode:
    """Build the deck tree under ``current_dir``.

    Args:
        current_dir: Directory to scan.
        root_dir: Directory deck URLs are relative to. Defaults to ``current_dir``.
        backend: File backend; a filesystem backend is used when omitted.
        settings: Settings providing base URL, marker and suffix.
        exclude: Files to leave out, e.g. a previously generated menu.

    Returns:
        The root directory node. It may be empty; only sub-directories are pruned.
    """

    settings = settings or load_settings()
    backend = backend or AsyncFilesystemBackend()
    current = Path(os.path.abspath(current_dir))
    root = Path(os.path.abspath(root_dir)) if root_dir is not None else current

    skipped = frozenset(os.path.abspath(p) for p in exclude)
    tree = await _build_subtree(current, root, backend, settings, skipped)
    return tree or DirectoryNode()
