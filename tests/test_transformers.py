"""
Tests for the transformers.

These tests verify:
    - DefaultTransformer input shapes and errors
    - DatetimeTransformer parsing, formatting and timezone handling
    - HandleTransformer reference resolution
    - CallbackTransformer delegation
"""

import time
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest
from rpsl.attribute import Attribute, Presence, Repeat
from rpsl.exceptions import (
    InvalidDataTypeError,
    InvalidValueError,
    TransformerError,
)
from rpsl.examples import Mntner, build_example_factory
from rpsl.interfaces import FactoryInterface
from rpsl.transformers import (
    CallbackTransformer,
    DatetimeTransformer,
    DefaultTransformer,
    HandleTransformer,
)
from rpsl.value import Value

CET = timezone(timedelta(hours=1))

# Central European rules without the zone database: +01:00, +02:00 in summer
BERLIN_RULES = "CET-1CEST,M3.5.0,M10.5.0/3"


@pytest.fixture
def berlin_local_time(monkeypatch):
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available")
    monkeypatch.setenv("TZ", BERLIN_RULES)
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


def bind(transformer):
    return transformer.set_attribute(Attribute("test", Presence.OPTIONAL, Repeat.MULTIPLE))


class TestDefaultTransformer:
    """Test DefaultTransformer."""

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_values(self, value):
        """Should produce an empty value."""
        assert bind(DefaultTransformer()).serialize(value).is_empty()

    def test_string(self):
        """Should store strings as they are."""
        data = bind(DefaultTransformer()).serialize("foo bar")
        assert data.is_defined()
        assert data.name == "test"
        assert data.value == "foo bar"

    def test_string_with_comment(self):
        """Should split inline comments off strings."""
        data = bind(DefaultTransformer()).serialize("foo # bar")
        assert data.value == "foo"
        assert data.comment == "bar"

    @pytest.mark.parametrize("value, expected", [
        (0, "0"),
        (18159228951, "18159228951"),
        (1.0, "1.0"),
        (2.5, "2.5"),
        (True, "true"),
        (False, "false"),
    ])
    def test_scalars(self, value, expected):
        """Should store scalars in JSON notation."""
        data = bind(DefaultTransformer()).serialize(value)
        assert data.is_defined()
        assert data.value == expected

    def test_datetime(self):
        """Should store datetimes as ISO 8601."""
        moment = datetime(2020, 2, 2, 12, 34, 56, tzinfo=timezone.utc)
        assert bind(DefaultTransformer()).serialize(moment).value == "2020-02-02T12:34:56+00:00"

    def test_date(self):
        """Should store dates as ISO 8601."""
        assert bind(DefaultTransformer()).serialize(date(2020, 2, 2)).value == "2020-02-02"

    def test_stringable(self):
        """Should use a custom string form."""
        assert bind(DefaultTransformer()).serialize(Decimal("1.50")).value == "1.50"

    def test_value_passthrough(self):
        """Should keep comment and type of Value input."""
        data = bind(DefaultTransformer()).serialize(Value("other", "TEST-RIPE", "buddy", "person"))
        assert data == Value("test", "TEST-RIPE", "buddy", "person")

    def test_object(self):
        """Should store handle and type of RPSL objects."""
        data = bind(DefaultTransformer()).serialize(Mntner("EXAMPLE-MNT"))
        assert data.value == "EXAMPLE-MNT"
        assert data.type == "mntner"

    def test_invalid_type(self):
        """Should reject values without text form."""
        with pytest.raises(InvalidDataTypeError) as info:
            bind(DefaultTransformer()).serialize(object())
        assert info.value.code == TransformerError.INVALID_DATA_TYPE
        assert str(info.value) == 'Value of type [object] could not be stored in the "test" attribute.'

    def test_unserialize(self):
        """Should return the text, None for empty values."""
        transformer = bind(DefaultTransformer())
        assert transformer.unserialize(Value("test", "foo", "bar")) == "foo"
        assert transformer.unserialize(Value("test", "")) is None


class TestDatetimeTransformer:
    """Test DatetimeTransformer."""

    def test_full_iso_format(self):
        """Should keep the timezone of the input."""
        transformer = bind(DatetimeTransformer(datetime.now(CET)))
        data = transformer.serialize("2020-02-02T12:34:56Z")
        assert data.value == "2020-02-02T12:34:56+00:00"

    def test_local_iso_format(self):
        """Should read input without timezone in the configured one."""
        transformer = bind(DatetimeTransformer(datetime.now(CET)))
        data = transformer.serialize("2020-02-02T12:34:56")
        assert data.value == "2020-02-02T12:34:56+01:00"

    @pytest.mark.parametrize("text, expected", [
        ("2020-02-02 12:34:56", "2020-02-02T12:34:56+01:00"),
        ("2020-02-02", "2020-02-02T00:00:00+01:00"),
        ("02.02.2020", "2020-02-02T00:00:00+01:00"),
        ("2020-02-02 12:34:56+03:00", "2020-02-02T12:34:56+03:00"),
    ])
    def test_free_format(self, text, expected):
        """Should understand common other formats."""
        transformer = bind(DatetimeTransformer(datetime.now(CET)))
        assert transformer.serialize(text).value == expected

    def test_datetime_object(self):
        """Should accept datetime objects."""
        moment = datetime(2020, 2, 2, 12, 34, 56, tzinfo=timezone.utc)
        data = bind(DatetimeTransformer()).serialize(moment)
        assert data.value == "2020-02-02T12:34:56+00:00"

    def test_date_object(self):
        """Should accept dates as midnight in the configured timezone."""
        transformer = bind(DatetimeTransformer(datetime.now(CET)))
        assert transformer.serialize(date(2020, 2, 2)).value == "2020-02-02T00:00:00+01:00"

    def test_value_object(self):
        """Should keep the comment of Value input."""
        data = bind(DatetimeTransformer()).serialize(Value("test", "2020-02-02T12:34:56Z", "first"))
        assert data.value == "2020-02-02T12:34:56+00:00"
        assert data.comment == "first"

    @pytest.mark.parametrize("value", [None, "", Value("test", "")])
    def test_empty_value(self, value):
        """Should produce an empty value."""
        assert bind(DatetimeTransformer()).serialize(value).is_empty()

    def test_invalid_type(self):
        """Should reject non-date, non-string input."""
        with pytest.raises(InvalidDataTypeError) as info:
            bind(DatetimeTransformer()).serialize(42)
        assert str(info.value) == 'Value of type [int] could not be stored in the "test" attribute.'

    def test_invalid_value(self):
        """Should reject text that is no timestamp."""
        with pytest.raises(InvalidValueError) as info:
            bind(DatetimeTransformer()).serialize("foo")
        assert info.value.code == TransformerError.INVALID_VALUE
        assert str(info.value) == 'Value ["foo"] could not be stored in the "test" attribute.'
        assert info.value.__cause__ is not None

    def test_unserialize_timezone(self):
        """Should return the moment in the configured timezone."""
        transformer = bind(DatetimeTransformer(datetime.now(CET)))
        data = transformer.unserialize(Value("test", "2020-02-02T12:34:56Z"))
        assert isinstance(data, datetime)
        assert data.utcoffset() == timedelta(hours=1)
        assert data.strftime("%Y-%m-%d %H:%M:%S") == "2020-02-02 13:34:56"

    def test_unserialize_subclass(self):
        """Should return instances of the reference's class."""
        class Moment(datetime):
            pass

        transformer = bind(DatetimeTransformer(Moment.now(CET)))
        data = transformer.unserialize(Value("test", "2020-02-02T12:34:56Z"))
        assert type(data) is Moment
        assert data == datetime(2020, 2, 2, 12, 34, 56, tzinfo=timezone.utc)

    def test_unserialize_date_reference(self):
        """A date reference should return dates."""
        transformer = bind(DatetimeTransformer(date(2000, 1, 1)))
        data = transformer.unserialize(Value("test", "2020-02-02T12:34:56+00:00"))
        assert type(data) is date

    def test_unserialize_fallback(self):
        """Should return unparseable text unchanged."""
        transformer = bind(DatetimeTransformer())
        assert transformer.unserialize(Value("test", "sometime")) == "sometime"
        assert transformer.unserialize(Value("test", "")) is None

    def test_round_trip(self):
        """serialize then unserialize should reproduce the instant."""
        transformer = bind(DatetimeTransformer(datetime.now(CET)))
        moment = datetime(2021, 6, 30, 23, 15, 0, tzinfo=timezone(timedelta(hours=-5)))

        restored = transformer.unserialize(transformer.serialize(moment))
        assert restored == moment
        assert restored.utcoffset() == timedelta(hours=1)

    def test_round_trip_microseconds(self):
        """Sub-second parts should survive a round trip."""
        transformer = bind(DatetimeTransformer(datetime.now(CET)))
        moment = datetime(2021, 6, 30, 23, 15, 0, 123456, tzinfo=timezone.utc)

        data = transformer.serialize(moment)
        assert data.value == "2021-06-30T23:15:00.123456+00:00"
        assert transformer.unserialize(data) == moment

    @pytest.mark.parametrize("text, expected", [
        ("2020-01-15 12:00:00", "2020-01-15T12:00:00+01:00"),
        ("2020-07-15 12:00:00", "2020-07-15T12:00:00+02:00"),
    ])
    def test_local_time_follows_daylight_saving(self, berlin_local_time, text, expected):
        """Naive input should get the local offset of its own date."""
        transformer = bind(DatetimeTransformer())
        assert transformer.serialize(text).value == expected

    def test_local_date_follows_daylight_saving(self, berlin_local_time):
        """Dates should start at local midnight of that date."""
        transformer = bind(DatetimeTransformer())
        assert transformer.serialize(date(2020, 1, 15)).value == "2020-01-15T00:00:00+01:00"
        assert transformer.serialize(date(2020, 7, 15)).value == "2020-07-15T00:00:00+02:00"

    def test_unserialize_local_time(self, berlin_local_time):
        """Reading should use the local offset of the stored moment."""
        transformer = bind(DatetimeTransformer())

        winter = transformer.unserialize(Value("test", "2020-01-15T11:00:00Z"))
        summer = transformer.unserialize(Value("test", "2020-07-15T10:00:00Z"))

        assert winter.utcoffset() == timedelta(hours=1)
        assert summer.utcoffset() == timedelta(hours=2)
        assert winter.hour == summer.hour == 12

    def test_naive_reference_uses_local_rules(self, berlin_local_time):
        """A naive reference should not pin today's offset."""
        transformer = bind(DatetimeTransformer(datetime(2020, 7, 1)))
        assert transformer.serialize("2020-01-15 12:00:00").value == "2020-01-15T12:00:00+01:00"


class FailingFactory(FactoryInterface):
    def create(self, type, handle=None):
        raise RuntimeError("registry unavailable")


class TestHandleTransformer:
    """Test HandleTransformer."""

    def test_typed_value(self):
        """Should create the referenced object."""
        transformer = bind(HandleTransformer(build_example_factory()))
        data = transformer.unserialize(Value("test", "EXAMPLE-MNT", type="mntner"))
        assert isinstance(data, Mntner)
        assert data.get_handle() == "EXAMPLE-MNT"

    def test_untyped_value(self):
        """Should return the text of untyped values."""
        transformer = bind(HandleTransformer(build_example_factory()))
        assert transformer.unserialize(Value("test", "EXAMPLE-MNT")) == "EXAMPLE-MNT"
        assert transformer.unserialize(Value("test", "")) is None

    def test_factory_failure(self):
        """Should wrap factory errors."""
        transformer = bind(HandleTransformer(FailingFactory()))
        with pytest.raises(TransformerError) as info:
            transformer.unserialize(Value("test", "EXAMPLE-MNT", type="mntner"))
        assert str(info.value) == 'Failed to transform "mntner" (EXAMPLE-MNT) into an RPSL object.'
        assert isinstance(info.value.__cause__, RuntimeError)

    def test_unknown_type(self):
        """Unknown types should fail as well."""
        transformer = bind(HandleTransformer(build_example_factory()))
        with pytest.raises(TransformerError):
            transformer.unserialize(Value("test", "X", type="inetnum"))

    def test_serialize_object(self):
        """Should tag stored objects with their type."""
        attribute = Attribute("mnt-by", Presence.MANDATORY, Repeat.MULTIPLE)
        attribute.apply(HandleTransformer(build_example_factory()))
        attribute.set_value([Mntner("EXAMPLE-MNT"), "OTHER-MNT"])

        first, second = attribute.get_value()
        assert isinstance(first, Mntner)
        assert second == "OTHER-MNT"


class TestCallbackTransformer:
    """Test CallbackTransformer."""

    def test_defaults(self):
        """Should convert to and from text by default."""
        transformer = bind(CallbackTransformer())
        data = transformer.serialize(42)
        assert data.value == "42"
        assert transformer.unserialize(data) == "42"

    def test_callbacks(self):
        """Should use the given callables."""
        transformer = bind(CallbackTransformer(lambda v: str(v).upper(), str.lower))
        data = transformer.serialize(Value("test", "abc", "note"))
        assert data.value == "ABC"
        assert data.comment == "note"
        assert transformer.unserialize(data) == "abc"

    def test_failing_callback(self):
        """Should report conversion errors as invalid values."""
        transformer = bind(CallbackTransformer(lambda v: "%d" % v))
        with pytest.raises(InvalidValueError):
            transformer.serialize("abc")
