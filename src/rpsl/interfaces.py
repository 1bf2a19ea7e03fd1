"""
Capabilities shared between the object model and its collaborators.

These live apart from Entity so that transformers can recognise RPSL
objects (and factories can produce them) without importing the entity
module.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class ObjectInterface(ABC):
    """Anything that can be referenced by RPSL type and handle."""

    @abstractmethod
    def get_type(self) -> str:
        """Return the RPSL type name (e.g. "person")."""

    @abstractmethod
    def get_handle(self) -> Optional[str]:
        """Return the primary key string, None while it is incomplete."""


class FactoryInterface(ABC):
    """Creates RPSL objects from their type name."""

    @abstractmethod
    def create(self, type: str, handle: Optional[str] = None) -> ObjectInterface:
        """
        Create a new RPSL object.

        Args:
            type: RPSL type name of the object
            handle: Primary key to assign, if any

        Returns:
            The new object
        """
