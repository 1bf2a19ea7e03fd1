"""
Test the example schemas and the object factory.

Validates that the example schemas declare the expected types and keys,
and that the factory resolves type names and references.
"""

import pytest
from rpsl.entity import Entity
from rpsl.examples import (
    AutNum,
    Mntner,
    Person,
    ReferenceFactory,
    Role,
    Route,
    build_example_factory,
)
from rpsl.exceptions import UnknownTypeError
from rpsl.factory import ObjectFactory
from rpsl.attribute import Presence, Repeat


@pytest.mark.parametrize("cls, type_name", [
    (Person, "person"),
    (Role, "role"),
    (Mntner, "mntner"),
    (AutNum, "aut-num"),
    (Route, "route"),
])
def test_schema_types(cls, type_name):
    assert cls().get_type() == type_name


def test_autnum_handle():
    autnum = AutNum("AS64500")
    autnum.set("as-name", "EXAMPLE-AS")
    assert autnum.get_handle() == "AS64500"
    assert autnum.get("as-name") == "EXAMPLE-AS"


def test_factory_types():
    factory = build_example_factory()
    assert factory.types() == ["person", "role", "mntner", "aut-num", "route"]
    assert factory.supports("route")
    assert not factory.supports("inetnum")


def test_factory_create():
    person = build_example_factory().create("person", "JD1-TEST")
    assert isinstance(person, Person)
    assert person.get_handle() == "JD1-TEST"


def test_factory_unknown_type():
    with pytest.raises(UnknownTypeError):
        build_example_factory().create("inetnum", "192.0.2.0 - 192.0.2.255")


def test_factory_without_type_name():
    class Limerick(Entity):
        def configure(self):
            self.create("limerick", Presence.PRIMARY_KEY, Repeat.SINGLE)

    factory = ObjectFactory()
    assert factory.register(Limerick) == "limerick"
    assert isinstance(factory.create("limerick", "LIM-1"), Limerick)


def test_reference_factory_resolves_maintainers():
    factory = build_example_factory(with_references=True)
    assert isinstance(factory, ReferenceFactory)

    route = factory.create("route", "192.0.2.0/24AS64500")
    route.add("mnt-by", Mntner("EXAMPLE-MNT"))
    route.add("mnt-by", "PLAIN-MNT")

    maintainer, plain = route.get("mnt-by")
    assert isinstance(maintainer, Mntner)
    assert maintainer.get_handle() == "EXAMPLE-MNT"
    assert plain == "PLAIN-MNT"
