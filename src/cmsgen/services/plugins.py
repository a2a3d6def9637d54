from __future__ import annotations

import inspect
import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional

from pydantic import BaseModel, model_validator

from cmsgen.utils.load import load_ref, read_group_entries

logger = logging.getLogger(__name__)

PLUGINS_GROUP = "cmsgen.plugins"


class PluginNotFoundError(LookupError):
    def __init__(self, name: str) -> None:
        super().__init__(f'Cannot find plugin by name "{name}"')
        self.name = name


class PluginLocatorError(ValueError):
    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f'Cannot locate plugin "{name}": {reason}')
        self.name = name
        self.reason = reason


class PluginInfo(BaseModel):
    """A known plugin and the handle used to find it on disk.

    ``base_class`` is an import reference to the plugin's defining class;
    ``path`` is the defining source location itself. The plugin root is the
    parent directory of that location.
    """

    name: str
    base_class: Optional[str] = None
    path: Optional[str] = None

    @model_validator(mode="after")
    def _one_locator(self) -> "PluginInfo":
        if bool(self.base_class) == bool(self.path):
            raise ValueError(
                f"plugin {self.name!r} needs exactly one of 'base_class' or 'path'"
            )
        return self

    def source_location(self) -> Path:
        if self.path:
            return Path(self.path)
        try:
            obj = load_ref(self.base_class)
        except Exception as exc:
            raise PluginLocatorError(self.name, f"{type(exc).__name__}: {exc}") from exc
        try:
            source = inspect.getsourcefile(obj)
        except TypeError:
            source = None
        if not source:
            raise PluginLocatorError(
                self.name, f"{self.base_class!r} has no source file"
            )
        return Path(source)

    def root(self) -> Path:
        return self.source_location().parent


class PluginRegistry:
    """Ordered, read-only collection of plugins supplied by the host."""

    def __init__(self, plugins: Iterable[PluginInfo] = ()) -> None:
        self._plugins: tuple[PluginInfo, ...] = tuple(plugins)

    def __iter__(self) -> Iterator[PluginInfo]:
        return iter(self._plugins)

    def __len__(self) -> int:
        return len(self._plugins)

    def find(self, name: str) -> PluginInfo:
        for plugin in self._plugins:
            if plugin.name != name:
                continue
            return plugin
        raise PluginNotFoundError(name)

    def resolve_root(self, name: str) -> Path:
        root = self.find(name).root()
        logger.debug("plugin %s resolved to %s", name, root)
        return root


def discover_entry_point_plugins(group: str = PLUGINS_GROUP) -> list[PluginInfo]:
    return [
        PluginInfo(name=name, base_class=value)
        for name, value in read_group_entries(group).items()
    ]


def build_registry(
    configured: Iterable[PluginInfo] = (),
    *,
    include_entry_points: bool = True,
) -> PluginRegistry:
    """Workspace-configured plugins first, then installed entry points not already named."""
    plugins = list(configured)
    if include_entry_points:
        known = {p.name for p in plugins}
        for plugin in discover_entry_point_plugins():
            if plugin.name in known:
                logger.debug("entry point plugin %s shadowed by workspace config", plugin.name)
                continue
            plugins.append(plugin)
    return PluginRegistry(plugins)
