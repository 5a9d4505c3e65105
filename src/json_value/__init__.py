"""
JSON Value - immutable JSON trees with type-safe access and conversion.

Wraps parsed JSON in an immutable value model offering strict, optional
and default-valued navigation, scalar and collection coercion, typed
binding and compact or pretty serialization.
"""

from .values import (
    JsonValue,
    JsonObject,
    JsonArray,
    JsonString,
    JsonNumber,
    JsonBoolean,
    JsonNull,
    JsonOptional,
)
from .types import (
    ValueKind,
    ErrorType,
    StringifyOptions,
    JsonValueError,
    AccessError,
    TypeCoercionError,
    NumberCoercionError,
    BindingError,
    ParseError,
    TypedBinderInterface,
)
from .binder import PydanticBinder, get_default_binder, set_default_binder
from .parser import JsonParser
from .stringify import Stringifier

__version__ = "1.0.0"
__all__ = [
    "JsonValue",
    "JsonObject",
    "JsonArray",
    "JsonString",
    "JsonNumber",
    "JsonBoolean",
    "JsonNull",
    "JsonOptional",
    "ValueKind",
    "ErrorType",
    "StringifyOptions",
    "JsonValueError",
    "AccessError",
    "TypeCoercionError",
    "NumberCoercionError",
    "BindingError",
    "ParseError",
    "TypedBinderInterface",
    "PydanticBinder",
    "get_default_binder",
    "set_default_binder",
    "JsonParser",
    "Stringifier",
]
