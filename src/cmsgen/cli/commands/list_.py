from cmsgen.services.plugins import PluginLocatorError, PluginRegistry


def handle(*, registry: PluginRegistry) -> None:
    for plugin in registry:
        try:
            root = str(plugin.root())
        except PluginLocatorError as exc:
            root = f"<unresolved: {exc.reason}>"
        print(f"{plugin.name}\t{root}")
