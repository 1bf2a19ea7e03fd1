"""
Transformers convert between application data and attribute Values.

    serialize(external) -> Value       (write path, may raise TransformerError)
    unserialize(Value)  -> external    (read path)

A transformer is bound to the attribute it works for. Binding returns a
copy, so a single transformer instance can be applied to any number of
attributes without them sharing state.

Accepted input shapes of DefaultTransformer:
    ObjectInterface  -> handle, tagged with the object's RPSL type
    Value            -> copied (comment and type are kept)
    None             -> empty value
    str              -> parsed (inline comment split off)
    bool             -> "true" / "false"
    int, float       -> JSON number notation (1.0 keeps its fraction)
    datetime, date   -> ISO 8601 (microseconds only when present)
    custom __str__   -> str(value)
    anything else    -> InvalidDataTypeError
"""

from __future__ import annotations

import copy
import json
import logging
from abc import ABC, abstractmethod
from datetime import date, datetime, time, tzinfo
from typing import Any, Callable, Optional, Tuple, TYPE_CHECKING

from rpsl.exceptions import TransformerError
from rpsl.interfaces import FactoryInterface, ObjectInterface
from rpsl.value import Value

if TYPE_CHECKING:
    from rpsl.attribute import Attribute

logger = logging.getLogger(__name__)


class Transformer(ABC):
    """Base class for all transformers."""

    attribute: Optional[Attribute] = None

    @abstractmethod
    def serialize(self, value: Any) -> Value:
        """Convert input data into a Value of the bound attribute."""

    @abstractmethod
    def unserialize(self, value: Value) -> Any:
        """Convert a stored Value into application data."""

    def set_attribute(self, attribute: Attribute) -> Transformer:
        """Return a copy of this transformer bound to the attribute."""
        bound = copy.copy(self)
        bound.attribute = attribute
        return bound

    @property
    def name(self) -> str:
        """Name of the bound attribute ("" while unbound)."""
        return self.attribute.name if self.attribute is not None else ""

    def _value(self, text: str, comment: Optional[str] = None, type: Optional[str] = None) -> Value:
        return Value.parse(self.name, text, comment, type)


class DefaultTransformer(Transformer):
    """Stores everything as text, returns the text."""

    def serialize(self, value: Any) -> Value:
        if isinstance(value, ObjectInterface):
            return self._value(value.get_handle() or "", type=value.get_type())
        if isinstance(value, Value):
            return Value(self.name, value.value, value.comment, value.type)

        text = self.stringify(value)
        if text is None:
            raise TransformerError.for_invalid_type(value, self.attribute)

        return self._value(text)

    def unserialize(self, value: Value) -> Optional[str]:
        return value.value if value.is_defined() else None

    def stringify(self, value: Any) -> Optional[str]:
        """Convert a plain value to text, None if it has no text form."""
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        if isinstance(value, (bool, int, float)):
            return json.dumps(value)
        if isinstance(value, date):
            return value.isoformat()
        if type(value).__str__ is not object.__str__:
            return str(value)
        return None


class HandleTransformer(DefaultTransformer):
    """
    Resolves typed references into RPSL objects on read.

    Values written from an RPSL object remember the object's type. Reading
    such a value asks the factory for an object of that type and handle.
    Untyped values are returned as text.
    """

    def __init__(self, factory: FactoryInterface):
        self.factory = factory

    def unserialize(self, value: Value) -> Any:
        if value.is_empty():
            return None
        if value.type is None:
            return value.value

        try:
            return self.factory.create(value.type, value.value)
        except Exception as e:
            raise TransformerError(
                f'Failed to transform "{value.type}" ({value.value}) into an RPSL object.'
            ) from e


class CallbackTransformer(Transformer):
    """
    Delegates conversion to a pair of callables.

    Args:
        serialize: external data -> text (default: str)
        unserialize: text -> external data (default: str)
    """

    def __init__(
        self,
        serialize: Optional[Callable[[Any], str]] = None,
        unserialize: Optional[Callable[[str], Any]] = None,
    ):
        self.serialize_fn = serialize or str
        self.unserialize_fn = unserialize or str

    def serialize(self, value: Any) -> Value:
        if value is None:
            return self._value("")
        if isinstance(value, Value):
            text, comment = value.value, value.comment
        else:
            text, comment = value, None

        try:
            return self._value(self.serialize_fn(text), comment)
        except (TypeError, ValueError) as e:
            raise TransformerError.for_invalid_value(text, self.attribute) from e

    def unserialize(self, value: Value) -> Any:
        if value.is_empty():
            return None
        return self.unserialize_fn(value.value)


# Tried in order after the strict ISO 8601 format failed.
DATETIME_FORMATS: Tuple[str, ...] = (
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%S.%f",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M%z",
    "%Y-%m-%dT%H:%M",
    "%Y-%m-%d %H:%M:%S%z",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d",
    "%Y%m%d",
    "%d.%m.%Y %H:%M:%S",
    "%d.%m.%Y",
    "%d %B %Y",
    "%d %b %Y",
    "%a, %d %b %Y %H:%M:%S %z",
)

ISO_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


class DatetimeTransformer(Transformer):
    """
    Stores timestamps as ISO 8601 text.

    The reference date fixes what unserialize() returns: an instance of
    the reference's class, converted to the reference's timezone. A naive
    reference (or none) uses the local timezone rules, so each moment gets
    the offset in effect on its own date. A plain date reference makes
    unserialize() return dates.

    Input without timezone information is read in the configured timezone.
    """

    def __init__(self, reference: Optional[date] = None):
        if reference is None:
            reference = datetime.now()

        self.date_class = type(reference)
        self.timezone: Optional[tzinfo] = None
        if isinstance(reference, datetime):
            self.timezone = reference.tzinfo

    def serialize(self, value: Any) -> Value:
        if value is None or value == "":
            return self._value("")

        comment = None
        if isinstance(value, Value):
            if value.is_empty():
                return self._value("")
            comment = value.comment
            value = value.value

        timestamp = self.to_datetime(value).isoformat()

        return self._value(timestamp, comment)

    def unserialize(self, value: Value) -> Any:
        if value.is_empty():
            return None

        try:
            return self.create_from(self.to_datetime(value.value))
        except TransformerError:
            logger.debug("Returning unparseable timestamp %r of %s as text", value.value, self.name)
            return value.value

    def to_datetime(self, value: Any) -> datetime:
        """
        Convert input into an aware datetime.

        Raises:
            InvalidDataTypeError: value is neither a date nor a string
            InvalidValueError: the string is not a recognised timestamp
        """
        if isinstance(value, datetime):
            return self._localize(value)
        if isinstance(value, date):
            return self._localize(datetime.combine(value, time()))
        if not isinstance(value, str):
            raise TransformerError.for_invalid_type(value, self.attribute)

        text = value.strip()
        try:
            return datetime.strptime(text, ISO_FORMAT)
        except ValueError as e:
            error = e

        for fmt in DATETIME_FORMATS:
            try:
                return self._localize(datetime.strptime(text, fmt))
            except ValueError as e:
                error = e

        raise TransformerError.for_invalid_value(value, self.attribute) from error

    def create_from(self, moment: datetime) -> date:
        """Recreate the moment as the configured class in the configured timezone."""
        local = moment.astimezone(self.timezone)

        if not issubclass(self.date_class, datetime):
            return self.date_class(local.year, local.month, local.day)
        if self.date_class is datetime:
            return local

        return self.date_class.fromtimestamp(local.timestamp(), tz=local.tzinfo)

    def _localize(self, moment: datetime) -> datetime:
        if moment.tzinfo is not None:
            return moment
        if self.timezone is None:
            # naive input is local time; astimezone() applies that date's offset
            return moment.astimezone()
        return moment.replace(tzinfo=self.timezone)
