"""
Error hierarchy for the RPSL object model.

Every error raised by this package derives from RPSLError, so callers can
catch the whole family with a single except clause.
"""

from __future__ import annotations

import json
from typing import Any, Optional, TYPE_CHECKING, Union

if TYPE_CHECKING:
    from rpsl.attribute import Attribute
    from rpsl.interfaces import ObjectInterface


class RPSLError(Exception):
    """Base class for all RPSL errors."""
    pass


class ConfigurationError(RPSLError):
    """Raised when a schema definition is inconsistent (a bug, not bad input)."""
    pass


class AttributeNotFoundError(RPSLError, LookupError):
    """Raised when an attribute name is not declared by the object."""

    @classmethod
    def for_attribute(cls, name: str, obj: ObjectInterface) -> AttributeNotFoundError:
        return cls(f'Attribute "{name}" does not exist in the [{obj.get_type()}] object.')


class UnknownTypeError(RPSLError, LookupError):
    """Raised by a factory asked for a type it does not know."""
    pass


class TransformerError(RPSLError):
    """
    Raised when data conversion fails.

    Properties:
        code: INVALID_DATA_TYPE, INVALID_VALUE or None for other failures
    """

    INVALID_DATA_TYPE = 4001
    INVALID_VALUE = 4003

    def __init__(self, message: str, code: Optional[int] = None):
        self.code = code
        super().__init__(message)

    @staticmethod
    def for_invalid_type(value: Any, attribute: Union[Attribute, str, None]) -> InvalidDataTypeError:
        """Error for a value whose data type cannot be stored at all."""
        return InvalidDataTypeError(
            f'Value of type [{type(value).__name__}] could not be stored '
            f'in the "{_attribute_name(attribute)}" attribute.'
        )

    @staticmethod
    def for_invalid_value(value: Any, attribute: Union[Attribute, str, None]) -> InvalidValueError:
        """Error for a value of an acceptable type whose content is unusable."""
        try:
            dumped = json.dumps(value)
        except (TypeError, ValueError):
            dumped = repr(value)
        return InvalidValueError(
            f'Value [{dumped}] could not be stored '
            f'in the "{_attribute_name(attribute)}" attribute.'
        )


class InvalidDataTypeError(TransformerError):
    """The value has a shape the transformer cannot represent."""

    def __init__(self, message: str):
        super().__init__(message, TransformerError.INVALID_DATA_TYPE)


class InvalidValueError(TransformerError):
    """The value has an acceptable shape but unparseable content."""

    def __init__(self, message: str):
        super().__init__(message, TransformerError.INVALID_VALUE)


def _attribute_name(attribute: Union[Attribute, str, None]) -> str:
    if attribute is None:
        return ""
    if isinstance(attribute, str):
        return attribute
    return attribute.name
