"""Core type definitions for JSON values."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


DEFAULT_INDENT = 3

# Largest decimal exponent converted to an unbounded integer; matches the
# default int/str conversion limit of CPython
MAX_BIG_INTEGER_DIGITS = 4300


class ValueKind(Enum):
    """Enumeration of JSON value variants."""
    ARRAY = "array"
    OBJECT = "object"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    OPTIONAL = "optional"


LITERAL_KINDS = frozenset({ValueKind.STRING, ValueKind.NUMBER, ValueKind.BOOLEAN, ValueKind.NULL})
STRUCTURE_KINDS = frozenset({ValueKind.ARRAY, ValueKind.OBJECT})


class ErrorType(Enum):
    """Enumeration of error types."""
    ACCESS = "access"
    TYPE_COERCION = "type_coercion"
    NUMBER_COERCION = "number_coercion"
    BINDING = "binding"
    SYNTAX = "syntax"


@dataclass(frozen=True)
class StringifyOptions:
    """Rendering policy for compact and pretty output."""
    keeping_null: bool = False
    empty_values_to_null: bool = False
    indent: int = DEFAULT_INDENT

    def __post_init__(self):
        if self.indent < 0:
            raise ValueError("indent must be non-negative")


class JsonValueError(Exception):
    """Base exception for JSON value access and conversion."""

    error_type = ErrorType.ACCESS

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message)
        self.context = context


class AccessError(JsonValueError, LookupError):
    """Strict navigation on the wrong variant, a missing key or a bad index."""

    error_type = ErrorType.ACCESS


class TypeCoercionError(JsonValueError, TypeError):
    """A value's variant cannot represent the requested target type."""

    error_type = ErrorType.TYPE_COERCION


class NumberCoercionError(JsonValueError, ValueError):
    """Numeric narrowing would lose a fraction or overflow the target."""

    error_type = ErrorType.NUMBER_COERCION


class BindingError(JsonValueError):
    """Typed-object binding failed inside the binder."""

    error_type = ErrorType.BINDING


class ParseError(JsonValueError, ValueError):
    """JSON text could not be parsed."""

    error_type = ErrorType.SYNTAX


# Errors converted to an empty result by the optional accessors
COERCION_ERRORS = (AccessError, TypeCoercionError, NumberCoercionError, BindingError)


# Abstract base classes for interfaces

class TypedBinderInterface(ABC):
    """Abstract interface for binding generic trees to typed objects."""

    @abstractmethod
    def bind(self, tree: Any, target_type: Any) -> Any:
        """Build an instance of target_type from a generic JSON tree."""
        pass

    @abstractmethod
    def to_tree(self, obj: Any) -> Any:
        """Dump a typed object into a generic JSON tree."""
        pass
