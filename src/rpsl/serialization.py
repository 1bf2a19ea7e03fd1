"""
Serialization helpers for RPSL objects (Value, Attribute, Entity).

JSON projection:
    Value     -> {"name": ..., "value": ..., "comment": ...}
                 ("comment" is omitted when the value has none)
    Attribute -> list of value dicts
    Entity    -> value dicts of all defined attributes, attribute by
                 attribute, values in stored order

The reverse direction resolves the object type from the first item (the
type attribute always comes first) through a factory.
"""
from __future__ import annotations

import json
import warnings
from typing import Any, Dict, List

import yaml

from rpsl.attribute import Attribute
from rpsl.interfaces import FactoryInterface
from rpsl.entity import Entity
from rpsl.exceptions import TransformerError
from rpsl.transformers import DefaultTransformer
from rpsl.value import Value


def value_to_dict(v: Value) -> Dict[str, Any]:
    d = {"name": v.name, "value": v.value}
    if v.comment is not None:
        d["comment"] = v.comment
    return d


def value_from_dict(d: Dict[str, Any]) -> Value:
    """
    Build a Value from its dict form.

    JSON and YAML may load values as numbers, booleans, dates or null;
    these are converted to text the way DefaultTransformer stores them.

    Raises:
        InvalidDataTypeError: the value or comment has no text form
    """
    name = d["name"]
    comment = d.get("comment")
    return Value(
        name=name,
        value=_to_text(d.get("value"), name),
        comment=None if comment is None else _to_text(comment, name),
    )


def _to_text(raw: Any, name: str) -> str:
    text = DefaultTransformer().stringify(raw)
    if text is None:
        raise TransformerError.for_invalid_type(raw, name)
    return text


def attribute_to_list(a: Attribute) -> List[Dict[str, Any]]:
    return [value_to_dict(v) for v in a]


def entity_to_list(e: Entity) -> List[Dict[str, Any]]:
    items: List[Dict[str, Any]] = []
    for attribute in e.get_attributes():
        items.extend(attribute_to_list(attribute))
    return items


def entity_from_list(items: List[Dict[str, Any]], factory: FactoryInterface) -> Entity:
    """
    Build an object from its JSON projection.

    Items naming an attribute the object does not declare are skipped
    with a warning.

    Raises:
        ValueError: the list is empty
        UnknownTypeError: the factory does not know the type
        InvalidDataTypeError: an item value has no text form
    """
    if not items:
        raise ValueError("Cannot create an RPSL object from an empty list")

    entity = factory.create(items[0]["name"])
    for item in items:
        value = value_from_dict(item)
        if not entity.has(value.name):
            warnings.warn(
                f'Skipping unknown attribute "{value.name}" of the [{entity.get_type()}] object',
                UserWarning,
            )
            continue
        entity.add(value.name, value)
    return entity


def entity_to_json(e: Entity) -> str:
    return json.dumps(entity_to_list(e))


def entity_from_json(s: str, factory: FactoryInterface) -> Entity:
    return entity_from_list(json.loads(s), factory)


def entity_to_yaml(e: Entity) -> str:
    return yaml.safe_dump(entity_to_list(e), sort_keys=False)


def entity_from_yaml(s: str, factory: FactoryInterface) -> Entity:
    return entity_from_list(yaml.safe_load(s), factory)
