"""Token shape consumed by the fragment directive pass.

The rendering host owns its tokens; this module only names the fields the
pass reads. Any object with ``type`` and ``meta`` attributes qualifies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class TokenKind(str, Enum):
    """Token types the pass cares about."""

    SECTION_START = "marpit_slide_open"
    LIST_ITEM = "list_item_open"
    OTHER = "inline"


# Metadata keys written by the host's directive and fragment passes.
META_SLIDE = "marpitSlide"
META_DIRECTIVES = "marpitDirectives"
META_FRAGMENT = "marpitFragment"


@dataclass
class Token:
    """Minimal token for callers without a host engine."""

    type: str
    meta: dict[str, Any] | None = field(default=None)

    @classmethod
    def section(cls, index: int, directives: dict[str, Any] | None = None) -> "Token":
        return cls(
            type=TokenKind.SECTION_START.value,
            meta={META_SLIDE: index, META_DIRECTIVES: dict(directives or {})},
        )

    @classmethod
    def list_item(cls, fragment: bool | int | None = None) -> "Token":
        meta = None if fragment is None else {META_FRAGMENT: fragment}
        return cls(type=TokenKind.LIST_ITEM.value, meta=meta)
