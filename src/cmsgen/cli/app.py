import argparse
import logging
from pathlib import Path

from cmsgen.cli.commands.element import handle as handle_element
from cmsgen.cli.commands.list_ import handle as handle_list
from cmsgen.config.workspace import load_workspace_context
from cmsgen.services.path_policy import WORKSPACE_FILE
from cmsgen.services.plugins import build_registry
from cmsgen.services.scaffold.utils import error_exit


def main() -> None:
    # Common options shared by top-level and subcommands
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="set logging level (default: WARNING)",
    )

    parser = argparse.ArgumentParser(
        prog="cmsgen",
        description="Scaffold Shopware CMS element boilerplate into plugins.",
        parents=[common],
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_element = sub.add_parser(
        "element",
        help="generate cms element structure",
        description=(
            "Generate the administration and storefront files of a CMS element.\n\n"
            "Usage:\n"
            "  cmsgen element <elementName> <pluginName>\n\n"
            "Existing files with the same names are overwritten."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        parents=[common],
    )
    p_element.add_argument("element_name", metavar="elementName", help="the name of the element")
    p_element.add_argument("plugin_name", metavar="pluginName", help="plugin name")

    sub.add_parser(
        "plugins",
        help="list known plugins and their resolved roots",
        parents=[common],
    )

    args = parser.parse_args()

    try:
        workspace_context = load_workspace_context(Path.cwd())
    except (TypeError, ValueError) as exc:
        logging.basicConfig(level=logging.WARNING, format="%(message)s")
        error_exit(f"Invalid {WORKSPACE_FILE}: {exc}")

    cli_level_arg = getattr(args, "log_level", None)
    shared_defaults = workspace_context.config.shared if workspace_context else None
    default_level_name = (
        shared_defaults.log_level
        if shared_defaults and shared_defaults.log_level
        else "WARNING"
    )
    base_level_name = (cli_level_arg or default_level_name).upper()
    base_level = logging.getLevelName(base_level_name)
    if not isinstance(base_level, int):
        base_level = logging.WARNING

    logging.basicConfig(level=base_level, format="%(message)s")

    configured = workspace_context.resolve_plugins() if workspace_context else []
    registry = build_registry(configured)

    if args.cmd == "element":
        handle_element(
            args.element_name,
            args.plugin_name,
            registry=registry,
            stubs_dir=workspace_context.resolve_stubs_dir() if workspace_context else None,
        )
        return

    if args.cmd == "plugins":
        handle_list(registry=registry)
        return
