"""Models used across the project."""

from __future__ import annotations

from marpkit.models.tokens import META_DIRECTIVES, META_FRAGMENT, META_SLIDE, Token, TokenKind
from marpkit.models.tree import DirectoryNode, DocumentNode, TreeNode

__all__ = [
    "DirectoryNode",
    "DocumentNode",
    "META_DIRECTIVES",
    "META_FRAGMENT",
    "META_SLIDE",
    "Token",
    "TokenKind",
    "TreeNode",
]
