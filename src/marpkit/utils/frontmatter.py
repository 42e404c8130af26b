"""Front-matter helpers for Marp decks.

这里只做粗粒度的文本匹配，而不是完整的 YAML 解析：
deck 的判定依赖 ``marp: true`` 子串，标题只取 front-matter 中的 ``title:`` 行。
"""

from __future__ import annotations

import re

# 以 --- 开头和结尾的 front-matter 区块（可跨行）
_FRONTMATTER_RE = re.compile(r"^---\s*(.*?)\s*---", re.MULTILINE | re.DOTALL)
# title 字段：不区分大小写，值可被单/双引号包裹
_TITLE_RE = re.compile(r"""^\s*title\s*:\s*(['"]?)(.*?)\1\s*$""", re.IGNORECASE | re.MULTILINE)


def is_marp_deck(text: str, marker: str = "marp: true") -> bool:
    """Return True when ``text`` contains the deck marker."""

    return marker in text


def extract_title_from_frontmatter(text: str) -> str:
    """Extract the ``title`` field from a front-matter block.

    Args:
        text: Full markdown file content.

    Returns:
        The trimmed title, or an empty string when there is no front-matter
        block or no ``title`` key in it.
    """

    if not text:
        return ""

    fm = _FRONTMATTER_RE.search(text)
    if not fm:
        return ""

    m = _TITLE_RE.search(fm.group(1))
    if not m:
        return ""
    return m.group(2).strip()
