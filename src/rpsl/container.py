"""
Ordered, name-keyed collection of Attributes.

Iteration order is the order in which attributes were added, i.e. the
declaration order of the schema. Re-adding a name replaces the attribute
but keeps its original position.

Filtered containers (retain/reject) hold the SAME Attribute objects as the
source. Changing a value through a filtered view changes the original.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, TypeVar

from rpsl.attribute import Attribute
from rpsl.value import Value

T = TypeVar("T")

Predicate = Callable[[Attribute], bool]


class Container:
    """Attributes of one RPSL object."""

    def __init__(self):
        self._attributes: Dict[str, Attribute] = {}

    def add(self, attribute: Attribute) -> None:
        self._attributes[attribute.name] = attribute

    def has(self, name: str) -> bool:
        return name in self._attributes

    def get(self, name: str) -> Optional[Attribute]:
        return self._attributes.get(name)

    def first(self) -> Optional[Attribute]:
        return next(iter(self._attributes.values()), None)

    def attributes(self) -> List[Attribute]:
        return list(self._attributes.values())

    # =========================================================================
    # FILTER / MAP / REDUCE
    # =========================================================================

    def retain(self, fn: Predicate) -> Container:
        """New container with the attributes satisfying the condition."""
        result = Container()
        for attribute in self._attributes.values():
            if fn(attribute):
                result.add(attribute)
        return result

    def reject(self, fn: Predicate) -> Container:
        """New container with the attributes NOT satisfying the condition."""
        return self.retain(lambda attribute: not fn(attribute))

    def map(self, fn: Callable[[Attribute], T]) -> Dict[str, T]:
        """Map each attribute to a value, keyed by attribute name."""
        return {name: fn(attribute) for name, attribute in self._attributes.items()}

    def reduce(self, initial: T, fn: Callable[[T, Attribute], T]) -> T:
        result = initial
        for attribute in self._attributes.values():
            result = fn(result, attribute)
        return result

    def all(self, fn: Predicate) -> bool:
        return all(fn(attribute) for attribute in self._attributes.values())

    def any(self, fn: Predicate) -> bool:
        return any(fn(attribute) for attribute in self._attributes.values())

    # =========================================================================
    # ITERATION
    # =========================================================================

    def __iter__(self) -> Iterator[Tuple[str, Attribute]]:
        """Yield (name, attribute) pairs."""
        return iter(list(self._attributes.items()))

    def iter_values(self) -> Iterator[Value]:
        """Yield the values of all attributes, attribute by attribute."""
        for attribute in list(self._attributes.values()):
            yield from attribute

    def __len__(self) -> int:
        return len(self._attributes)

    def __contains__(self, name: Any) -> bool:
        return name in self._attributes
