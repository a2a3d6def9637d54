from pathlib import Path

WORKSPACE_FILE = "cmsgen.yaml"


def workspace_cwd() -> Path:
    """Return the resolved current working directory used by workspace flows."""
    return Path.cwd().resolve()


def find_workspace_file(start: Path | None = None) -> Path | None:
    """Return the nearest `cmsgen.yaml` at or above `start`."""
    directory = (start or workspace_cwd()).resolve()
    for candidate in [directory, *directory.parents]:
        path = candidate / WORKSPACE_FILE
        if path.is_file():
            return path
    return None


def resolve_relative_to_base(
    raw_path: str | Path,
    base: Path,
    resolve: bool = True,
) -> Path:
    """Resolve `raw_path` against `base` when relative."""
    path = Path(raw_path)
    if not path.is_absolute():
        path = base / path
    return path.resolve() if resolve else path
