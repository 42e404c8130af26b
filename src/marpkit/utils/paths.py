"""Path to URL conversion."""

from __future__ import annotations

import re

_MD_SUFFIX_RE = re.compile(r"\.[mM][dD]$")


def to_deck_url(relative_path: str, base_url: str) -> str:
    """Turn a deck path relative to the scan root into its published URL.

    Backslash separators become ``/``, a trailing ``.md`` (any case) becomes
    ``.html``, and base and path are joined with exactly one ``/``.

    Args:
        relative_path: Path of the deck relative to the scan root.
        base_url: Site prefix, with or without a trailing slash.

    Returns:
        Absolute URL of the compiled deck.
    """

    normalized = relative_path.replace("\\", "/")
    html_path = _MD_SUFFIX_RE.sub(".html", normalized)
    base = re.sub(r"/$", "", base_url)
    return f"{base}/{re.sub(r'^/', '', html_path)}"


def strip_suffix(name: str, suffix: str) -> str:
    """Drop ``suffix`` from ``name`` if present (case-sensitive)."""

    if suffix and name.endswith(suffix):
        return name[: -len(suffix)]
    return name
