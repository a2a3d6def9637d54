from __future__ import annotations

from pathlib import Path

from cmsgen.services.scaffold.element import ElementScaffolder

ADMIN = Path("Resources/app/administration/src/module/sw-cms/elements/my-cool-element")

EXPECTED = {
    ADMIN / "index.js",
    ADMIN / "component" / "index.js",
    ADMIN / "component" / "sw-cms-el-component-my-cool-element.html.twig",
    ADMIN / "component" / "sw-cms-el-component-my-cool-element.scss",
    ADMIN / "preview" / "index.js",
    ADMIN / "preview" / "sw-cms-el-preview-my-cool-element.html.twig",
    ADMIN / "preview" / "sw-cms-el-preview-my-cool-element.scss",
    ADMIN / "config" / "index.js",
    ADMIN / "config" / "sw-cms-el-config-my-cool-element.html.twig",
    ADMIN / "config" / "sw-cms-el-config-my-cool-element.scss",
    Path("Resources/views/storefront/element/cms-element-my-cool-element.html.twig"),
}


def _written(root: Path) -> dict[Path, bytes]:
    return {
        p.relative_to(root): p.read_bytes()
        for p in root.rglob("*")
        if p.is_file() and p.suffix != ".php"
    }


def test_bundled_stubs_produce_full_element_tree(plugin_on_disk) -> None:
    registry, root = plugin_on_disk

    result = ElementScaffolder(registry).generate("my-cool-element", "FancyPlugin")

    assert set(_written(root)) == EXPECTED
    assert {p.relative_to(root) for p in result.files} == EXPECTED
    assert len(result.files) == len(EXPECTED)


def test_bundled_stubs_are_fully_substituted(plugin_on_disk) -> None:
    registry, root = plugin_on_disk

    ElementScaffolder(registry).generate("my-cool-element", "FancyPlugin")

    for rel, content in _written(root).items():
        text = content.decode("utf-8")
        for token in ("{{ name }}", "{{ block }}", "{{ label }}"):
            assert token not in text, f"{token} left in {rel}"

    base = (root / ADMIN / "index.js").read_text(encoding="utf-8")
    assert "name: 'my-cool-element'" in base
    assert "sw-cms.elements.myCoolElement.label" in base
    storefront = (
        root / "Resources/views/storefront/element/cms-element-my-cool-element.html.twig"
    ).read_text(encoding="utf-8")
    assert "{% block element_my_cool_element %}" in storefront


def test_rerun_overwrites_with_identical_content(plugin_on_disk) -> None:
    registry, root = plugin_on_disk
    scaffolder = ElementScaffolder(registry)

    scaffolder.generate("my-cool-element", "FancyPlugin")
    first = _written(root)
    (root / ADMIN / "index.js").write_text("edited", encoding="utf-8")
    scaffolder.generate("my-cool-element", "FancyPlugin")

    assert _written(root) == first
