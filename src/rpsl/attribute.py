"""
RPSL Attributes

An Attribute is a named, ordered list of Values with two classifications:

    Presence: mandatory, optional, generated, primary_key
    Repeat:   single, multiple

Input passes through the attribute's transformer before it is stored and
again (in reverse) when it is read back through get_value().

ARCHITECTURAL RULE:
    A single attribute never holds more than one value. An add that would
    overflow it is discarded as a whole and leaves the stored value as it
    was. This is not an error: merging records must not need pre-checks.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum
from typing import Any, Iterator, List, Optional, Union

from rpsl.interfaces import ObjectInterface
from rpsl.transformers import DefaultTransformer, Transformer
from rpsl.value import Value

logger = logging.getLogger(__name__)


class Presence(Enum):
    """Whether an attribute must be present in its object."""
    MANDATORY = "mandatory"
    OPTIONAL = "optional"
    GENERATED = "generated"      # set by the registry, optional on input
    PRIMARY_KEY = "primary_key"  # mandatory, part of the handle


class Repeat(Enum):
    """How many values an attribute may hold."""
    SINGLE = "single"
    MULTIPLE = "multiple"


class Attribute:
    """
    A named attribute of an RPSL object.

    Args:
        name: Attribute name (e.g. "nic-hdl")
        presence: Presence member or its value
        repeat: Repeat member or its value

    A new attribute stores text through a DefaultTransformer. Use apply()
    to plug in another transformer.
    """

    def __init__(
        self,
        name: str,
        presence: Union[Presence, str],
        repeat: Union[Repeat, str],
    ):
        self.name = name
        self.presence = Presence(presence)
        self.repeat = Repeat(repeat)
        self._values: List[Value] = []
        self.apply(DefaultTransformer())

    def __repr__(self) -> str:
        return (
            f"Attribute({self.name!r}, {self.presence.value}, "
            f"{self.repeat.value}, values={len(self._values)})"
        )

    def apply(self, transformer: Transformer) -> Attribute:
        """Use a copy of the transformer, bound to this attribute."""
        self.transformer = transformer.set_attribute(self)
        return self

    # =========================================================================
    # VALUES
    # =========================================================================

    def get_value(self) -> Any:
        """
        Return the transformed value(s).

        Single attributes return one value, multiple attributes a list.
        Empty attributes return None. Inline comments are not part of the
        result, iterate over the attribute to see them.
        """
        if self.is_empty():
            return None

        values = [self.transformer.unserialize(value) for value in self._values]
        if self.is_single():
            return values[0]
        return values

    def set_value(self, value: Any) -> Attribute:
        """
        Replace all values. None only clears the attribute.

        Raises:
            TransformerError: an item cannot be converted (the stored
                values are kept)
        """
        candidates = self._serialize(value) if value is not None else []
        self._values = []
        self._store(candidates)
        return self

    def add_values(self, value: Any) -> Attribute:
        """
        Add one or more values after the stored ones.

        Strings are split into lines, sequences are flattened one level.
        Items that turn out empty (e.g. comment-only lines) are dropped.

        Raises:
            TransformerError: an item cannot be converted (nothing is stored)
        """
        self._store(self._serialize(value))
        return self

    def _serialize(self, value: Any) -> List[Value]:
        candidates = (self.transformer.serialize(item) for item in self._to_items(value))
        return [candidate for candidate in candidates if candidate.is_defined()]

    def _store(self, candidates: List[Value]) -> None:
        values = self._values + candidates

        if self.is_multiple() or len(values) <= 1:
            self._values = values
        else:
            logger.debug(
                "Discarded %d value(s) added to single attribute %s",
                len(candidates),
                self.name,
            )

    def append(self, value: Any) -> Attribute:
        return self.add_values(value)

    def first(self) -> Optional[Value]:
        """First stored value, None if there is none."""
        return self._values[0] if self._values else None

    def _to_items(self, value: Any) -> List[Any]:
        if isinstance(value, str):
            return value.replace("\r\n", "\n").split("\n")
        if isinstance(value, ObjectInterface):
            return [value]
        if isinstance(value, Iterable) and not isinstance(value, (bytes, dict)):
            return list(value)
        return [value]

    # =========================================================================
    # CLASSIFICATION
    # =========================================================================

    def is_primary_key(self) -> bool:
        return self.presence is Presence.PRIMARY_KEY

    def is_generated(self) -> bool:
        return self.presence is Presence.GENERATED

    def is_mandatory(self) -> bool:
        return self.presence is Presence.MANDATORY or self.is_primary_key()

    def is_optional(self) -> bool:
        return self.presence is Presence.OPTIONAL or self.is_generated()

    def is_single(self) -> bool:
        return self.repeat is Repeat.SINGLE

    def is_multiple(self) -> bool:
        return self.repeat is Repeat.MULTIPLE

    def is_defined(self) -> bool:
        return any(value.is_defined() for value in self._values)

    def is_empty(self) -> bool:
        return not self.is_defined()

    # =========================================================================
    # SEQUENCE PROTOCOL
    # =========================================================================

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Value]:
        return iter(list(self._values))

    def __getitem__(self, index: int) -> str:
        """Raw text (without comment) of the value at index."""
        return self._values[index].value

    def __setitem__(self, index: int, value: Any) -> None:
        """Replace the value at index. Out of range or empty input is ignored."""
        if not -len(self._values) <= index < len(self._values):
            return

        candidate = self.transformer.serialize(value)
        if candidate.is_defined():
            self._values[index] = candidate

    def __delitem__(self, index: int) -> None:
        """Remove the value at index. Out of range is ignored."""
        if -len(self._values) <= index < len(self._values):
            del self._values[index]

    # =========================================================================
    # COPYING
    # =========================================================================

    def __copy__(self) -> Attribute:
        clone = Attribute.__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone._values = list(self._values)
        clone.apply(self.transformer)
        return clone

    def __deepcopy__(self, memo: dict) -> Attribute:
        return self.__copy__()
