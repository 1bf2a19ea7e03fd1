"""
RPSL text generator.

Renders an RPSL object in the line-oriented registry format:

    person:      John Doe
    address:     Main Street 1 # office
    nic-hdl:     JD1-TEST

Supports two modes:
    - FULL: values with their inline comments
    - BARE: value text only
"""

from enum import Enum
from typing import List

from rpsl.entity import Entity
from rpsl.value import Value


class TextMode(Enum):
    """Rendering modes for text output."""
    FULL = "full"   # Values and inline comments
    BARE = "bare"   # Values only


def _label_width(entity: Entity) -> int:
    """Width of the label column: longest declared name, colon and padding."""
    names = entity.get_attribute_names()
    return 3 + max(len(name) for name in names)


def _value_text(value: Value, mode: TextMode) -> str:
    if mode == TextMode.BARE:
        return value.value
    return str(value)


def generate_text(entity: Entity, mode: TextMode = TextMode.FULL) -> str:
    """
    Generate the RPSL text of an object.

    Only defined attributes are rendered, in declaration order, one line
    per value.

    Args:
        entity: RPSL object to render
        mode: Rendering mode (FULL, BARE)

    Returns:
        Text block, every line terminated by a newline
    """
    width = _label_width(entity)
    lines: List[str] = []

    for value in entity.iter_values():
        label = f"{value.name}:"
        lines.append(f"{label:<{width}} {_value_text(value, mode)}")

    return "".join(line + "\n" for line in lines)


def save_text_file(entity: Entity, filename: str, mode: TextMode = TextMode.FULL) -> None:
    """
    Generate RPSL text and save it to a file.

    Args:
        entity: RPSL object to render
        filename: Output file path
        mode: Rendering mode
    """
    text = generate_text(entity, mode=mode)
    with open(filename, 'w') as f:
        f.write(text)


__all__ = ["TextMode", "generate_text", "save_text_file"]
