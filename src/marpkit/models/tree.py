"""Deck directory tree models."""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, Field


class DocumentNode(BaseModel):
    """A discovered slide deck (leaf)."""

    is_dir: Literal[False] = False
    title: str = Field(min_length=1)
    url: str


class DirectoryNode(BaseModel):
    """A directory holding decks or further non-empty directories.

    Keys of ``children`` are file or directory names, unique per parent.
    """

    is_dir: Literal[True] = True
    children: dict[str, Union["DirectoryNode", DocumentNode]] = Field(default_factory=dict)

    def is_empty(self) -> bool:
        return not self.children


TreeNode = Union[DirectoryNode, DocumentNode]

DirectoryNode.model_rebuild()
