"""Async base implementations for backends."""

from __future__ import annotations

import asyncio
from pathlib import Path

from marpkit.backends.filesystem import FilesystemBackend
from marpkit.backends.protocol import BackendProtocol, FileInfo


class AsyncBackendMixin:
    """异步后端混入类，为同步后端提供异步方法。"""

    async def als_info(self, path: str) -> list[FileInfo]:
        """异步列出文件和目录。"""
        return await asyncio.to_thread(self.ls_info, path)  # type: ignore[attr-defined]

    async def aread_text(self, file_path: str) -> str:
        """异步读取文件内容。"""
        return await asyncio.to_thread(self.read_text, file_path)  # type: ignore[attr-defined]

    async def awrite_text(self, file_path: str, content: str) -> None:
        """异步写入文件。"""
        await asyncio.to_thread(self.write_text, file_path, content)  # type: ignore[attr-defined]


class AsyncFilesystemBackend(AsyncBackendMixin, BackendProtocol):
    """异步文件系统后端。"""

    def __init__(self, root_dir: str | Path | None = None) -> None:
        """初始化异步文件系统后端。

        Args:
            root_dir: 根目录。
        """
        self._sync_backend = FilesystemBackend(root_dir)

    def ls_info(self, path: str) -> list[FileInfo]:
        """列出文件和目录。"""
        return self._sync_backend.ls_info(path)

    def read_text(self, file_path: str) -> str:
        """读取文件内容。"""
        return self._sync_backend.read_text(file_path)

    def write_text(self, file_path: str, content: str) -> None:
        """写入文件。"""
        self._sync_backend.write_text(file_path, content)
