"""marpkit: tooling for Marp slide decks.

Includes the ``fragment`` directive plugin and the deck menu generator.
"""

from marpkit.discovery import build_tree
from marpkit.fragment import (
    DirectiveHost,
    parse_fragment_directive,
    propagate_fragment_state,
    register_fragment_directive,
)
from marpkit.menu import generate_menu
from marpkit.models import DirectoryNode, DocumentNode, Token, TokenKind
from marpkit.outline import render_menu, tree_to_markdown

__all__ = [
    "DirectiveHost",
    "DirectoryNode",
    "DocumentNode",
    "Token",
    "TokenKind",
    "build_tree",
    "generate_menu",
    "parse_fragment_directive",
    "propagate_fragment_state",
    "register_fragment_directive",
    "render_menu",
    "tree_to_markdown",
]
