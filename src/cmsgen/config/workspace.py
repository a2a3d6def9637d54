from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from cmsgen.services.path_policy import find_workspace_file, resolve_relative_to_base
from cmsgen.services.plugins import PluginInfo
from cmsgen.utils.load import load_yaml

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SharedDefaults(BaseModel):
    log_level: Optional[str] = Field(default=None, description="DEFAULT LOG LEVEL")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object):
        if value is None:
            return None
        text = str(value).strip().upper()
        if not text:
            return None
        if text not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}, got {value!r}"
            )
        return text


class WorkspaceConfig(BaseModel):
    plugins: list[PluginInfo] = Field(default_factory=list)
    stubs_dir: Optional[str] = None
    shared: SharedDefaults = Field(default_factory=SharedDefaults)


@dataclass
class WorkspaceContext:
    file_path: Path
    config: WorkspaceConfig

    @property
    def root(self) -> Path:
        return self.file_path.parent

    def resolve_plugins(self) -> list[PluginInfo]:
        """Configured plugins with `path` locators made absolute against the workspace root."""
        resolved: list[PluginInfo] = []
        for plugin in self.config.plugins:
            if plugin.path:
                plugin = plugin.model_copy(
                    update={"path": str(resolve_relative_to_base(plugin.path, self.root))}
                )
            resolved.append(plugin)
        return resolved

    def resolve_stubs_dir(self) -> Optional[Path]:
        raw = self.config.stubs_dir
        if not raw:
            return None
        return resolve_relative_to_base(raw, self.root)


def load_workspace_context(start_dir: Optional[Path] = None) -> Optional[WorkspaceContext]:
    """Search from start_dir upward for cmsgen.yaml and return parsed config."""
    candidate = find_workspace_file(start_dir)
    if candidate is None:
        return None
    data = load_yaml(candidate)
    # Allow users to set plugins/shared to null to fall back to defaults
    for key in ("plugins", "shared"):
        if key in data and data[key] is None:
            data.pop(key)
    cfg = WorkspaceConfig.model_validate(data)
    return WorkspaceContext(file_path=candidate, config=cfg)
