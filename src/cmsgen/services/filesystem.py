from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class FilesystemError(OSError):
    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class FileSystem(Protocol):
    def create_directory(self, path: Path) -> None: ...

    def write_file(self, path: Path, content: str) -> None: ...

    def read_file(self, path: Path) -> str: ...

    def list_files(self, path: Path) -> list[Path]: ...


class LocalFileSystem:
    """pathlib-backed FileSystem; every OSError surfaces as FilesystemError."""

    encoding = "utf-8"

    def create_directory(self, path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FilesystemError(f"Cannot create directory {path}: {exc}", path) from exc
        logger.debug("ensured directory %s", path)

    def write_file(self, path: Path, content: str) -> None:
        try:
            path.write_text(content, encoding=self.encoding)
        except OSError as exc:
            raise FilesystemError(f"Cannot write {path}: {exc}", path) from exc

    def read_file(self, path: Path) -> str:
        try:
            return path.read_text(encoding=self.encoding)
        except OSError as exc:
            raise FilesystemError(f"Cannot read {path}: {exc}", path) from exc

    def list_files(self, path: Path) -> list[Path]:
        try:
            return sorted(p for p in path.iterdir() if p.is_file())
        except OSError as exc:
            raise FilesystemError(f"Cannot list {path}: {exc}", path) from exc
