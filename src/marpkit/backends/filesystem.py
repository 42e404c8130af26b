"""FilesystemBackend: Read and write files directly from the filesystem."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from marpkit.backends.protocol import BackendProtocol, FileInfo
from marpkit.logging import get_logger

logger = get_logger(__name__)


class FilesystemBackend(BackendProtocol):
    """Backend that reads and writes files directly from the filesystem."""

    def __init__(self, root_dir: str | Path | None = None) -> None:
        """Initialize filesystem backend.

        Args:
            root_dir: Directory relative paths are resolved against.
        """
        self.cwd = Path(root_dir).resolve() if root_dir else Path.cwd()

    def _resolve_path(self, key: str) -> Path:
        path = Path(key)
        if path.is_absolute():
            return path
        return (self.cwd / path).resolve()

    def ls_info(self, path: str) -> list[FileInfo]:
        """List files and directories, sorted by name.

        Symlinks are listed but reported as neither file nor directory.

        Raises:
            OSError: If ``path`` is missing, not a directory or unreadable.
        """
        dir_path = self._resolve_path(path)

        results: list[FileInfo] = []
        for child_path in dir_path.iterdir():
            try:
                is_symlink = child_path.is_symlink()
                is_file = not is_symlink and child_path.is_file()
                is_dir = not is_symlink and child_path.is_dir()
            except OSError:
                logger.debug("ls_info: cannot stat %s", child_path)
                continue
            results.append(
                FileInfo(
                    name=child_path.name,
                    path=str(child_path),
                    is_dir=is_dir,
                    is_file=is_file,
                    is_symlink=is_symlink,
                )
            )

        results.sort(key=lambda x: x.name)
        return results

    def read_text(self, file_path: str) -> str:
        """Read file content; undecodable bytes become U+FFFD."""
        resolved_path = self._resolve_path(file_path)
        with resolved_path.open("r", encoding="utf-8", errors="replace") as f:
            return f.read()

    def write_text(self, file_path: str, content: str) -> None:
        """Create or overwrite a file with content.

        The content goes to a temporary file next to the target first, which
        then replaces the target, so a failed write leaves the old file intact.
        """
        resolved_path = self._resolve_path(file_path)
        resolved_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{resolved_path.name}.", suffix=".tmp", dir=resolved_path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.chmod(tmp_name, 0o644)
            os.replace(tmp_name, resolved_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
