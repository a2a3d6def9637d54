from pathlib import Path

from cmsgen.services.filesystem import FilesystemError
from cmsgen.services.plugins import PluginLocatorError, PluginNotFoundError, PluginRegistry
from cmsgen.services.scaffold.element import ElementScaffolder
from cmsgen.services.scaffold.utils import error_exit


def handle(
    element_name: str,
    plugin_name: str,
    *,
    registry: PluginRegistry,
    stubs_dir: Path | None = None,
) -> None:
    scaffolder = ElementScaffolder(registry, stubs_dir=stubs_dir)
    try:
        result = scaffolder.generate(element_name, plugin_name)
    except (PluginNotFoundError, PluginLocatorError, FilesystemError) as exc:
        error_exit(str(exc), code=1)
    print(result.message)
