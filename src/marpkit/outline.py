"""Render the deck tree as a Marp menu document."""

from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

from marpkit.config import Settings
from marpkit.models.tree import DirectoryNode

SECTION_BREAK = "---"
DEFAULT_SPLIT_LINES = 10
DEFAULT_TIMEZONE = "Asia/Shanghai"

MENU_HEADER = """---
marp: true
lang: zh-CN
title: 目录
description: 目录
theme: uncover
transition: fade
paginate: true
_paginate: false
---
# 目录

---

"""


def _outline_lines(tree: DirectoryNode, depth: int = 0) -> list[str]:
    indent = "  " * depth
    lines: list[str] = []
    for name, node in tree.children.items():
        if isinstance(node, DirectoryNode):
            lines.append(f"{indent}- {name}")
            lines.extend(_outline_lines(node, depth + 1))
        else:
            lines.append(f"{indent}- [{node.title}]({node.url})")
    return lines


def insert_section_breaks(lines: list[str], every: int = DEFAULT_SPLIT_LINES) -> list[str]:
    """Drop blank lines and add a ``---`` line after every ``every`` lines.

    No break follows the last line.
    """

    valid = [line for line in lines if line.strip()]
    out: list[str] = []
    for index, line in enumerate(valid):
        out.append(line)
        if (index + 1) % every == 0 and index != len(valid) - 1:
            out.append(SECTION_BREAK)
    return out


def tree_to_markdown(tree: DirectoryNode, split_lines: int = DEFAULT_SPLIT_LINES) -> str:
    """Serialize the tree as a nested markdown list.

    Directories are shown by name, decks as ``[title](url)`` links, two spaces
    of indent per level. Breaks are counted over all lines, whatever their depth.
    """

    lines = insert_section_breaks(_outline_lines(tree), split_lines)
    return "\n".join(lines) + "\n"


def generated_time_footer(now: datetime | None = None, tz: str = DEFAULT_TIMEZONE) -> str:
    """Footer slide stating when the menu was generated (24-hour clock)."""

    zone = ZoneInfo(tz)
    moment = now.astimezone(zone) if now is not None else datetime.now(zone)
    stamp = moment.strftime("%Y-%m-%d %H:%M:%S")
    return f"\n --- \n ### 生成时间 \n # {stamp}"


def render_menu(
    tree: DirectoryNode,
    *,
    now: datetime | None = None,
    settings: Settings | None = None,
) -> str:
    """Header + outline + generation time footer."""

    split_lines = settings.split_lines if settings else DEFAULT_SPLIT_LINES
    tz = settings.timezone if settings else DEFAULT_TIMEZONE
    return MENU_HEADER + tree_to_markdown(tree, split_lines) + generated_time_footer(now, tz)
