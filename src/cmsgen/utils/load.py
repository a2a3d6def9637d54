import importlib
import importlib.metadata as md
from pathlib import Path

import yaml


def load_ref(ref: str):
    """Import ``package.module:attr`` or ``package.module.attr`` and return the object."""
    module_name, sep, attr = ref.partition(":")
    if not sep:
        try:
            return importlib.import_module(ref)
        except ModuleNotFoundError:
            module_name, _, attr = ref.rpartition(".")
            if not module_name:
                raise
    module = importlib.import_module(module_name)
    if not attr:
        return module
    obj = module
    for part in attr.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise ImportError(f"Attribute {attr!r} not found in {module_name!r}") from exc
    return obj


def read_group_entries(group: str) -> dict[str, str]:
    """Return installed entry points of ``group`` as name -> value, first one wins."""
    found: dict[str, str] = {}
    for ep in md.entry_points().select(group=group):
        found.setdefault(ep.name, ep.value)
    return found


def load_yaml(p: Path, *, require_mapping: bool = True):
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise FileNotFoundError(f"YAML file not found: {p}") from e
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {p}: {e}") from e

    if data is None:
        return {}
    if require_mapping and not isinstance(data, dict):
        raise TypeError(
            f"Top-level YAML in {p} must be a mapping, got {type(data).__name__}")
    return data
