from __future__ import annotations

from pathlib import Path

from cmsgen.services.filesystem import FilesystemError

STUBS_DIR = Path("/stubs")


class MemoryFileSystem:
    """In-memory FileSystem double keyed by absolute Path."""

    def __init__(self, files: dict[Path, str] | None = None) -> None:
        self.files: dict[Path, str] = dict(files or {})
        self.directories: set[Path] = set()
        self.writes: list[Path] = []

    def create_directory(self, path: Path) -> None:
        self.directories.add(path)
        self.directories.update(path.parents)

    def write_file(self, path: Path, content: str) -> None:
        self.files[path] = content
        self.writes.append(path)

    def read_file(self, path: Path) -> str:
        try:
            return self.files[path]
        except KeyError:
            raise FilesystemError(f"Cannot read {path}", path) from None

    def list_files(self, path: Path) -> list[Path]:
        return sorted(p for p in self.files if p.parent == path)


class FailingWriteFileSystem(MemoryFileSystem):
    """Fails on the first write whose path contains `marker`."""

    def __init__(self, files: dict[Path, str], marker: str) -> None:
        super().__init__(files)
        self.marker = marker

    def write_file(self, path: Path, content: str) -> None:
        if self.marker in str(path):
            raise FilesystemError(f"Cannot write {path}: disk full", path)
        super().write_file(path, content)


def stub_files(stubs: dict[str, str], root: Path = STUBS_DIR) -> dict[Path, str]:
    return {root / "element" / name: body for name, body in stubs.items()}
