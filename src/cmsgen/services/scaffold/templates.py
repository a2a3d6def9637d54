from dataclasses import dataclass
from typing import Optional

from cmsgen.services.scaffold.layout import to_camel, to_snake

NAME = "{{ name }}"
BLOCK = "{{ block }}"
LABEL = "{{ label }}"


@dataclass(frozen=True)
class Placeholders:
    name: str
    block: str
    label: str

    @classmethod
    def for_element(cls, element: str) -> "Placeholders":
        return cls(name=element, block=to_snake(element), label=to_camel(element))


def apply(
    template: str,
    name: Optional[str],
    block: Optional[str],
    label: Optional[str],
) -> str:
    """Literal token replacement; a None value leaves its token untouched."""
    for token, value in ((NAME, name), (BLOCK, block), (LABEL, label)):
        if value is not None:
            template = template.replace(token, value)
    return template


def render(template: str, placeholders: Placeholders, *, with_label: bool = True) -> str:
    return apply(
        template,
        placeholders.name,
        placeholders.block,
        placeholders.label if with_label else None,
    )
