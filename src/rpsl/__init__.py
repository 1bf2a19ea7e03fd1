"""
RPSL Object Model Package

Typed, in-memory representation of registry records (person, role, route,
aut-num, ...) as ordered sets of named attributes.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Network transport to a registry service
    - Persistence
    - Full RPSL grammar parsing (only the value/comment micro-syntax)

Rendering and JSON projection consume the read API in separate layers.
"""

from rpsl.attribute import Attribute, Presence, Repeat
from rpsl.container import Container
from rpsl.entity import Entity
from rpsl.exceptions import (
    AttributeNotFoundError,
    ConfigurationError,
    InvalidDataTypeError,
    InvalidValueError,
    RPSLError,
    TransformerError,
    UnknownTypeError,
)
from rpsl.factory import ObjectFactory
from rpsl.interfaces import FactoryInterface, ObjectInterface
from rpsl.transformers import (
    CallbackTransformer,
    DatetimeTransformer,
    DefaultTransformer,
    HandleTransformer,
    Transformer,
)
from rpsl.value import Value

__version__ = "0.1.0"
