from pathlib import Path
import re


def to_camel(name: str) -> str:
    words = re.split(r"[\W_]+", name)
    words = [w for w in words if w]
    if not words:
        return ""
    head, *rest = words
    return head[:1].lower() + head[1:] + "".join(w[:1].upper() + w[1:] for w in rest)


def to_snake(name: str) -> str:
    """Underscore at `aB`, `1B` and `ABc` boundaries of the camel form, then lowercase."""
    camel = to_camel(name)
    out: list[str] = []
    for i, ch in enumerate(camel):
        if i and ch.isupper():
            prev = camel[i - 1]
            nxt = camel[i + 1 : i + 2]
            if prev.islower() or prev.isdigit() or (prev.isupper() and nxt.islower()):
                out.append("_")
        out.append(ch)
    return "".join(out).lower()


# Stub set
STUB_DIR_ELEMENT = "element"
STUB_STOREFRONT = "element.storefront.stub"

# Role / kind markers matched by substring in stub filenames
ROLE_BASE = "base"
VARIANT_TYPES = ("component", "preview", "config")
KIND_TWIG = "twig"
KIND_SCSS = "scss"
KIND_INDEX = "index"

# Plugin-relative directories
ADMIN_ELEMENTS_DIR = Path("Resources/app/administration/src/module/sw-cms/elements")
STOREFRONT_ELEMENT_DIR = Path("Resources/views/storefront/element")


def admin_element_dir(plugin_root: Path, element: str) -> Path:
    return plugin_root / ADMIN_ELEMENTS_DIR / element


def storefront_element_dir(plugin_root: Path) -> Path:
    return plugin_root / STOREFRONT_ELEMENT_DIR


def variant_twig_name(variant: str, element: str) -> str:
    return f"sw-cms-el-{variant}-{element}.html.twig"


def variant_scss_name(variant: str, element: str) -> str:
    return f"sw-cms-el-{variant}-{element}.scss"


def storefront_template_name(element: str) -> str:
    return f"cms-element-{element}.html.twig"


def variant_type(filename: str) -> str | None:
    """First variant marker contained in `filename`, in priority order."""
    for variant in VARIANT_TYPES:
        if variant in filename:
            return variant
    return None
