"""Protocol definitions for pluggable file backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class FileInfo:
    """File information structure.

    ``name`` is the entry's own name; ``path`` is the full path the backend
    can open again.
    """

    name: str
    path: str
    is_dir: bool = False
    is_file: bool = False
    is_symlink: bool = False


class BackendProtocol(ABC):
    """Protocol for file storage backends.

    Implementations raise ``OSError``
    instead of returning error strings. Callers decide how to recover.
    """

    @abstractmethod
    def ls_info(self, path: str) -> list[FileInfo]:
        """List files and directories directly under ``path``."""

    @abstractmethod
    def read_text(self, file_path: str) -> str:
        """Read a whole file as UTF-8 text."""

    @abstractmethod
    def write_text(self, file_path: str, content: str) -> None:
        """Write (create or replace) a whole file as UTF-8 text."""
