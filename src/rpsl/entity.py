"""
Base class of all RPSL objects.

A schema subclass declares its attributes in configure(), in the order
the serialized record expects them:

    class Person(Entity):
        type_name = "person"

        def configure(self):
            self.create("person", Presence.MANDATORY, Repeat.SINGLE)
            self.create("nic-hdl", Presence.PRIMARY_KEY, Repeat.SINGLE)
            ...

The first attribute names the object type and must be single. The
attributes flagged PRIMARY_KEY make up the handle. Objects with composite
keys override set_handle() to distribute the identifier over their key
attributes.
"""

from __future__ import annotations

import copy
from abc import abstractmethod
from typing import Any, Iterator, List, Optional, Tuple, Union

from rpsl.attribute import Attribute, Presence, Repeat
from rpsl.container import Container
from rpsl.exceptions import AttributeNotFoundError, ConfigurationError
from rpsl.interfaces import ObjectInterface
from rpsl.value import Value


class Entity(ObjectInterface):
    """
    An RPSL object.

    Args:
        handle: Primary key to assign after configuration

    Properties:
        type_name:
            Optional explicit type name of the schema. If set, it must
            match the name of the first attribute.

    Raises:
        ConfigurationError: the schema has no attributes, its type
            attribute is multiple or does not match type_name
    """

    type_name: Optional[str] = None

    def __init__(self, handle: Any = None):
        self._attributes = Container()
        self.configure()
        self._type = self._resolve_type(self._attributes.first())

        if handle is not None:
            self.set_handle(handle)

    @abstractmethod
    def configure(self) -> None:
        """Declare the attributes. The first one is the type attribute."""

    def create(
        self,
        name: str,
        presence: Union[Presence, str],
        repeat: Union[Repeat, str],
    ) -> Attribute:
        """Declare an attribute and return it for further setup."""
        attribute = Attribute(name, presence, repeat)
        self._attributes.add(attribute)
        return attribute

    def _resolve_type(self, attribute: Optional[Attribute]) -> str:
        cls = type(self).__name__
        if attribute is None:
            raise ConfigurationError(f"The {cls} RPSL object does not declare any attribute.")
        if attribute.is_multiple():
            raise ConfigurationError(
                f'The type attribute for the "{attribute.name}" RPSL object must not be multiple.'
            )
        if self.type_name is not None and self.type_name != attribute.name:
            raise ConfigurationError(
                f'The {cls} RPSL object declares type "{self.type_name}" '
                f'but its first attribute is "{attribute.name}".'
            )
        return attribute.name

    # =========================================================================
    # IDENTITY
    # =========================================================================

    def get_type(self) -> str:
        return self._type

    @property
    def type(self) -> str:
        return self._type

    def get_handle(self) -> Optional[str]:
        """
        Return the primary key string.

        The raw text of each primary key attribute is concatenated in
        declaration order. Transformers are bypassed so that the handle
        does not depend on the representation of the values.

        Returns:
            Handle, or None if any primary key attribute is empty
        """
        key = self._primary_key()

        if key.any(lambda a: a.is_empty()):
            return None

        return key.reduce("", lambda handle, a: handle + a.first().value)

    def set_handle(self, handle: Any) -> None:
        """
        Assign the handle to the primary key attribute.

        Override this for composite primary keys.
        """
        attribute = self._primary_key().first()
        if attribute is not None:
            attribute.set_value(handle)

    def _primary_key(self) -> Container:
        return self._attributes.retain(lambda a: a.is_primary_key())

    def __str__(self) -> str:
        return self.get_handle() or ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get_handle()!r})"

    # =========================================================================
    # ATTRIBUTE ACCESS
    # =========================================================================

    def has(self, name: str) -> bool:
        return self._attributes.has(name)

    def attr(self, name: str) -> Attribute:
        """
        Return the attribute object.

        Raises:
            AttributeNotFoundError: the object has no such attribute
        """
        attribute = self._attributes.get(name)
        if attribute is None:
            raise AttributeNotFoundError.for_attribute(name, self)
        return attribute

    def get(self, name: str) -> Any:
        return self.attr(name).get_value()

    def set(self, name: str, value: Any) -> Entity:
        self.attr(name).set_value(value)
        return self

    def add(self, name: str, value: Any) -> Entity:
        self.attr(name).add_values(value)
        return self

    def __contains__(self, name: Any) -> bool:
        return self.has(name)

    def __getitem__(self, name: str) -> Attribute:
        return self.attr(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __delitem__(self, name: str) -> None:
        attribute = self._attributes.get(name)
        if attribute is not None:
            attribute.set_value(None)

    # =========================================================================
    # INSPECTION
    # =========================================================================

    def is_valid(self) -> bool:
        """True if every mandatory (incl. primary key) attribute is defined."""
        return (
            self._attributes
            .retain(lambda a: a.is_mandatory())
            .all(lambda a: a.is_defined())
        )

    def get_attributes(self) -> List[Attribute]:
        """Defined attributes in declaration order."""
        return self._attributes.retain(lambda a: a.is_defined()).attributes()

    def get_values(self) -> List[Value]:
        """All stored values, attribute by attribute."""
        return list(self.iter_values())

    def iter_values(self) -> Iterator[Value]:
        return self._attributes.iter_values()

    def get_attribute_names(self) -> List[str]:
        """Names of all declared attributes."""
        return [name for name, _ in self._attributes]

    def get_mandatory_attributes(self) -> List[str]:
        return list(self._attributes.retain(lambda a: a.is_mandatory()).map(lambda a: a.name).values())

    def get_missing_attributes(self) -> List[str]:
        """Names of mandatory attributes without a value."""
        return [a.name for a in self._attributes.attributes() if a.is_mandatory() and a.is_empty()]

    def __iter__(self) -> Iterator[Tuple[str, Attribute]]:
        """Yield (name, attribute) pairs of all declared attributes."""
        return iter(self._attributes)

    def __len__(self) -> int:
        """Number of non-empty attributes."""
        return len(self._attributes.reject(lambda a: a.is_empty()))

    def __bool__(self) -> bool:
        # an object without values is still an object
        return True

    # =========================================================================
    # COPYING
    # =========================================================================

    def __copy__(self) -> Entity:
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone._attributes = Container()
        for _, attribute in self._attributes:
            clone._attributes.add(copy.copy(attribute))
        return clone

    def __deepcopy__(self, memo: dict) -> Entity:
        return self.__copy__()
