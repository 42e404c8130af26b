"""Menu generation workflow: scan, render, write."""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path

from marpkit.backends import AsyncFilesystemBackend
from marpkit.config import Settings
from marpkit.discovery import build_tree
from marpkit.logging import get_logger, stage_context
from marpkit.outline import render_menu

logger = get_logger(__name__)


async def generate_menu(
    root_dir: str | Path,
    *,
    settings: Settings,
    backend: AsyncFilesystemBackend | None = None,
    now: datetime | None = None,
) -> Path:
    """Scan ``root_dir`` for decks and write the menu next to them.

    The output file is only written once the whole document has been rendered.

    Args:
        root_dir: Directory to scan; also where the menu is written.
        settings: Runtime settings.
        backend: File backend. Defaults to the filesystem.
        now: Generation time override.

    Returns:
        Path of the written menu file.
    """

    root = Path(os.path.abspath(root_dir))
    backend = backend or AsyncFilesystemBackend(root)
    output_path = root / settings.output_name

    with stage_context("scan"):
        logger.info("开始扫描目录：%s", root)
        tree = await build_tree(root, backend=backend, exclude=[output_path], settings=settings)
        logger.info("Found %d top-level entries", len(tree.children))

    with stage_context("render"):
        document = render_menu(tree, now=now, settings=settings)
        logger.info('包含 "%s" 的 Marp 文件树：\n%s', settings.deck_marker, document)

    with stage_context("write"):
        await backend.awrite_text(str(output_path), document)
        logger.info("文件树已保存至：%s", output_path)

    return output_path
