"""Scaffold a Shopware CMS element into a plugin.

Stub filenames decide where each rendered stub goes. Matching is plain
substring containment and the rules are independent, so one stub can be
written to several destinations (``component.index.twig.stub`` lands both in
``component/index.js`` and in the component twig template).
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from importlib.resources import as_file, files
from pathlib import Path
from typing import Callable, Iterator, Optional
import logging

from cmsgen.services.filesystem import FileSystem, LocalFileSystem
from cmsgen.services.plugins import PluginRegistry
from cmsgen.services.scaffold.layout import (
    KIND_INDEX,
    KIND_SCSS,
    KIND_TWIG,
    ROLE_BASE,
    STUB_DIR_ELEMENT,
    STUB_STOREFRONT,
    admin_element_dir,
    storefront_element_dir,
    storefront_template_name,
    variant_scss_name,
    variant_twig_name,
    variant_type,
)
from cmsgen.services.scaffold.templates import Placeholders, render
from cmsgen.services.scaffold.utils import status

logger = logging.getLogger(__name__)

# (kind marker, file name builder) evaluated in order, all that match are written
_VARIANT_ROUTES: tuple[tuple[str, Callable[[str, str], str]], ...] = (
    (KIND_TWIG, variant_twig_name),
    (KIND_SCSS, variant_scss_name),
    (KIND_INDEX, lambda variant, element: "index.js"),
)


@contextmanager
def bundled_stubs() -> Iterator[Path]:
    """Yield the stub root shipped with the package."""
    with as_file(files("cmsgen") / "templates") as stubs_dir:
        yield stubs_dir


def stub_targets(filename: str, element_dir: Path, element: str) -> list[Path]:
    """Every destination a stub named `filename` is written to."""
    targets: list[Path] = []
    if ROLE_BASE in filename:
        targets.append(element_dir / "index.js")
    variant = variant_type(filename)
    if variant is not None:
        for kind, name_for in _VARIANT_ROUTES:
            if kind in filename:
                targets.append(element_dir / variant / name_for(variant, element))
    return targets


@dataclass
class ScaffoldResult:
    element: str
    plugin_root: Path
    files: list[Path] = field(default_factory=list)

    @property
    def message(self) -> str:
        return f"CMS Element: {self.element} scaffolding installed successfully"


class ElementScaffolder:
    def __init__(
        self,
        registry: PluginRegistry,
        *,
        fs: Optional[FileSystem] = None,
        stubs_dir: Optional[Path] = None,
    ) -> None:
        self.registry = registry
        self.fs = fs if fs is not None else LocalFileSystem()
        self.stubs_dir = stubs_dir

    def generate(self, element_name: str, plugin_name: str) -> ScaffoldResult:
        """Write the administration and storefront files for `element_name`.

        Raises PluginNotFoundError before touching the filesystem when
        `plugin_name` is not registered. FilesystemError aborts the run and
        leaves already written files in place.
        """
        plugin_root = self.registry.resolve_root(plugin_name)
        if self.stubs_dir is not None:
            return self._generate(element_name, plugin_root, self.stubs_dir)
        with bundled_stubs() as stubs_dir:
            return self._generate(element_name, plugin_root, stubs_dir)

    def _generate(self, element_name: str, plugin_root: Path, stubs_dir: Path) -> ScaffoldResult:
        placeholders = Placeholders.for_element(element_name)
        result = ScaffoldResult(element=element_name, plugin_root=plugin_root)
        self.build_cms_element(plugin_root, placeholders, stubs_dir, result)
        self.build_storefront_element(plugin_root, placeholders, stubs_dir, result)
        logger.debug(result.message)
        return result

    def build_cms_element(
        self,
        plugin_root: Path,
        placeholders: Placeholders,
        stubs_dir: Path,
        result: ScaffoldResult,
    ) -> None:
        element_dir = admin_element_dir(plugin_root, placeholders.name)
        self.fs.create_directory(element_dir)

        for stub in self.fs.list_files(stubs_dir / STUB_DIR_ELEMENT):
            content = render(self.fs.read_file(stub), placeholders)
            variant = variant_type(stub.name)
            if variant is not None:
                self.fs.create_directory(element_dir / variant)
            for target in stub_targets(stub.name, element_dir, placeholders.name):
                self._write(target, content, result)

    def build_storefront_element(
        self,
        plugin_root: Path,
        placeholders: Placeholders,
        stubs_dir: Path,
        result: ScaffoldResult,
    ) -> None:
        template = self.fs.read_file(stubs_dir / STUB_DIR_ELEMENT / STUB_STOREFRONT)
        content = render(template, placeholders, with_label=False)

        target_dir = storefront_element_dir(plugin_root)
        self.fs.create_directory(target_dir)
        self._write(target_dir / storefront_template_name(placeholders.name), content, result)

    def _write(self, path: Path, content: str, result: ScaffoldResult) -> None:
        self.fs.write_file(path, content)
        result.files.append(path)
        status("write", str(path))
