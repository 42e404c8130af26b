"""File backends for marpkit.

Provides a synchronous filesystem backend and its async wrapper.
"""

from __future__ import annotations

from marpkit.backends.async_base import AsyncBackendMixin, AsyncFilesystemBackend
from marpkit.backends.filesystem import FilesystemBackend
from marpkit.backends.protocol import BackendProtocol, FileInfo

__all__ = [
    "AsyncBackendMixin",
    "AsyncFilesystemBackend",
    "BackendProtocol",
    "FileInfo",
    "FilesystemBackend",
]
