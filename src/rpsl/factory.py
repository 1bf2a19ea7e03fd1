"""
Registry-based object factory.

Maps RPSL type names to schema classes. The type name comes from the
schema's explicit type_name, or from a probe instance when the schema
does not declare one.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Type

from rpsl.entity import Entity
from rpsl.exceptions import UnknownTypeError
from rpsl.interfaces import FactoryInterface

logger = logging.getLogger(__name__)


class ObjectFactory(FactoryInterface):
    """Creates RPSL objects of the registered schema classes."""

    def __init__(self, *classes: Type[Entity]):
        self._classes: Dict[str, Type[Entity]] = {}
        for cls in classes:
            self.register(cls)

    def register(self, cls: Type[Entity]) -> str:
        """Register a schema class and return its type name."""
        type_name = cls.type_name or cls().get_type()
        self._classes[type_name] = cls
        logger.debug("Registered RPSL type %s as %s", type_name, cls.__name__)
        return type_name

    def supports(self, type: str) -> bool:
        return type in self._classes

    def types(self) -> List[str]:
        return list(self._classes)

    def create(self, type: str, handle: Optional[str] = None) -> Entity:
        """
        Raises:
            UnknownTypeError: no schema is registered for the type
        """
        cls = self._classes.get(type)
        if cls is None:
            raise UnknownTypeError(f'There is no RPSL object of type "{type}".')
        return cls(handle)
