from __future__ import annotations

from pathlib import Path

import pytest

from cmsgen.services.plugins import PluginInfo, PluginRegistry


@pytest.fixture
def example_registry() -> PluginRegistry:
    """Registry whose ExamplePlugin root is /plugins/ExamplePlugin."""
    return PluginRegistry([
        PluginInfo(name="OtherPlugin", path="/plugins/OtherPlugin/src"),
        PluginInfo(name="ExamplePlugin", path="/plugins/ExamplePlugin/src"),
    ])


@pytest.fixture
def plugin_on_disk(tmp_path: Path) -> tuple[PluginRegistry, Path]:
    """A real plugin directory whose locator is its base class source file."""
    root = tmp_path / "custom" / "plugins" / "FancyPlugin" / "src"
    root.mkdir(parents=True)
    base_class = root / "FancyPlugin.php"
    base_class.write_text("<?php\n", encoding="utf-8")
    registry = PluginRegistry([PluginInfo(name="FancyPlugin", path=str(base_class))])
    return registry, root
