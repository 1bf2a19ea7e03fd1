"""
Example schemas modelled on common registry objects.

Covers the main schema patterns:
    - Person / Role: type attribute differs from the primary key (nic-hdl)
    - Mntner / AutNum: the type attribute is the primary key
    - Route: composite primary key (route + origin)
"""
import re
from typing import Any, Optional

from rpsl.attribute import Presence, Repeat
from rpsl.entity import Entity
from rpsl.factory import ObjectFactory
from rpsl.transformers import DatetimeTransformer, HandleTransformer

ORIGIN_RE = re.compile(r"^(?P<route>.+?)(?P<origin>AS\d+)$", re.IGNORECASE)


class Person(Entity):
    type_name = "person"

    def configure(self):
        self.create("person", Presence.MANDATORY, Repeat.SINGLE)
        self.create("address", Presence.MANDATORY, Repeat.MULTIPLE)
        self.create("phone", Presence.MANDATORY, Repeat.MULTIPLE)
        self.create("e-mail", Presence.OPTIONAL, Repeat.MULTIPLE)
        self.create("nic-hdl", Presence.PRIMARY_KEY, Repeat.SINGLE)
        self.create("remarks", Presence.OPTIONAL, Repeat.MULTIPLE)
        self.create("mnt-by", Presence.MANDATORY, Repeat.MULTIPLE)
        self.create("created", Presence.GENERATED, Repeat.SINGLE).apply(DatetimeTransformer())
        self.create("last-modified", Presence.GENERATED, Repeat.SINGLE).apply(DatetimeTransformer())
        self.create("source", Presence.MANDATORY, Repeat.SINGLE)


class Role(Entity):
    type_name = "role"

    def configure(self):
        self.create("role", Presence.MANDATORY, Repeat.SINGLE)
        self.create("address", Presence.MANDATORY, Repeat.MULTIPLE)
        self.create("e-mail", Presence.MANDATORY, Repeat.MULTIPLE)
        self.create("admin-c", Presence.OPTIONAL, Repeat.MULTIPLE)
        self.create("tech-c", Presence.OPTIONAL, Repeat.MULTIPLE)
        self.create("nic-hdl", Presence.PRIMARY_KEY, Repeat.SINGLE)
        self.create("mnt-by", Presence.MANDATORY, Repeat.MULTIPLE)
        self.create("source", Presence.MANDATORY, Repeat.SINGLE)


class Mntner(Entity):
    type_name = "mntner"

    def configure(self):
        self.create("mntner", Presence.PRIMARY_KEY, Repeat.SINGLE)
        self.create("descr", Presence.OPTIONAL, Repeat.MULTIPLE)
        self.create("admin-c", Presence.MANDATORY, Repeat.MULTIPLE)
        self.create("upd-to", Presence.MANDATORY, Repeat.MULTIPLE)
        self.create("auth", Presence.MANDATORY, Repeat.MULTIPLE)
        self.create("mnt-by", Presence.MANDATORY, Repeat.MULTIPLE)
        self.create("source", Presence.MANDATORY, Repeat.SINGLE)


class AutNum(Entity):
    type_name = "aut-num"

    def configure(self):
        self.create("aut-num", Presence.PRIMARY_KEY, Repeat.SINGLE)
        self.create("as-name", Presence.MANDATORY, Repeat.SINGLE)
        self.create("descr", Presence.OPTIONAL, Repeat.MULTIPLE)
        self.create("import", Presence.OPTIONAL, Repeat.MULTIPLE)
        self.create("export", Presence.OPTIONAL, Repeat.MULTIPLE)
        self.create("admin-c", Presence.MANDATORY, Repeat.MULTIPLE)
        self.create("tech-c", Presence.MANDATORY, Repeat.MULTIPLE)
        self.create("mnt-by", Presence.MANDATORY, Repeat.MULTIPLE)
        self.create("source", Presence.MANDATORY, Repeat.SINGLE)


class Route(Entity):
    """
    Route object, identified by prefix and origin AS.

    The handle may be given as a (prefix, origin) pair or as the
    concatenated string, e.g. "192.0.2.0/24AS64500".
    """

    type_name = "route"

    def configure(self):
        self.create("route", Presence.PRIMARY_KEY, Repeat.SINGLE)
        self.create("descr", Presence.OPTIONAL, Repeat.MULTIPLE)
        self.create("origin", Presence.PRIMARY_KEY, Repeat.SINGLE)
        self.create("mnt-by", Presence.MANDATORY, Repeat.MULTIPLE)
        self.create("created", Presence.GENERATED, Repeat.SINGLE).apply(DatetimeTransformer())
        self.create("source", Presence.MANDATORY, Repeat.SINGLE)

    def set_handle(self, handle: Any) -> None:
        if isinstance(handle, str):
            match = ORIGIN_RE.match(handle.strip())
            handle = (match["route"], match["origin"]) if match else (handle, None)

        route, origin = handle
        self.set("route", route)
        self.set("origin", origin)


SCHEMAS = (Person, Role, Mntner, AutNum, Route)


class ReferenceFactory(ObjectFactory):
    """Example factory whose objects resolve their mnt-by references."""

    def create(self, type: str, handle: Optional[str] = None) -> Entity:
        entity = super().create(type, handle)
        if entity.has("mnt-by"):
            entity.attr("mnt-by").apply(HandleTransformer(self))
        return entity


def build_example_factory(with_references: bool = False) -> ObjectFactory:
    """
    Factory for all example schemas.

    Args:
        with_references: resolve mnt-by values into Mntner objects
    """
    cls = ReferenceFactory if with_references else ObjectFactory
    return cls(*SCHEMAS)
