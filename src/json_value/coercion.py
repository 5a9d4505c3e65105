"""Conversion of JSON values into Python scalars, containers and typed objects.

Every function here is the strict form of a conversion: it either returns
the converted value or raises one of TypeCoercionError, NumberCoercionError
or BindingError. Optional and default-valued forms are derived by
``ErrorHandler``.
"""

import math
import struct
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Set, Tuple

from .accessor import resolve
from .binder import get_default_binder
from .types import (
    MAX_BIG_INTEGER_DIGITS,
    NumberCoercionError,
    TypeCoercionError,
    TypedBinderInterface,
    ValueKind,
)

if TYPE_CHECKING:
    from .values import JsonValue


INTEGRAL_RANGES: Dict[str, Tuple[Optional[int], Optional[int]]] = {
    "byte": (-2 ** 7, 2 ** 7 - 1),
    "short": (-2 ** 15, 2 ** 15 - 1),
    "int": (-2 ** 31, 2 ** 31 - 1),
    "long": (-2 ** 63, 2 ** 63 - 1),
    "big_integer": (None, None),
}


def _number(value: "JsonValue", target: str) -> Decimal:
    target_value = resolve(value)
    if target_value.kind is not ValueKind.NUMBER:
        raise TypeCoercionError(f"Cannot convert a JSON {target_value.kind.value} to {target}")
    return target_value.value


def _integral(value: "JsonValue", target: str) -> int:
    number = _number(value, target)
    if number != number.to_integral_value():
        raise NumberCoercionError(f"{number} has a fractional part and cannot be a {target}",
                                  context=number)
    low, high = INTEGRAL_RANGES[target]
    if high is None:
        if number.adjusted() >= MAX_BIG_INTEGER_DIGITS:
            raise NumberCoercionError(f"{number} has more than {MAX_BIG_INTEGER_DIGITS} digits "
                                      f"and cannot be a {target}", context=number)
    elif number.adjusted() > len(str(high)):
        raise NumberCoercionError(f"{number} is out of range for {target} [{low}, {high}]",
                                  context=number)
    result = int(number)
    if (low is not None and result < low) or (high is not None and result > high):
        raise NumberCoercionError(f"{number} is out of range for {target} [{low}, {high}]",
                                  context=number)
    return result


def to_byte(value: "JsonValue") -> int:
    return _integral(value, "byte")


def to_short(value: "JsonValue") -> int:
    return _integral(value, "short")


def to_int(value: "JsonValue") -> int:
    return _integral(value, "int")


def to_long(value: "JsonValue") -> int:
    return _integral(value, "long")


def to_big_integer(value: "JsonValue") -> int:
    return _integral(value, "big_integer")


def to_big_decimal(value: "JsonValue") -> Decimal:
    return _number(value, "big_decimal")


def to_double(value: "JsonValue") -> float:
    number = _number(value, "double")
    result = float(number)
    if math.isinf(result):
        raise NumberCoercionError(f"{number} overflows a double", context=number)
    return result


def to_float(value: "JsonValue") -> float:
    """Round to the nearest IEEE 754 single-precision value."""
    number = _number(value, "float")
    as_double = float(number)
    if math.isinf(as_double):
        raise NumberCoercionError(f"{number} overflows a float", context=number)
    try:
        return struct.unpack("f", struct.pack("f", as_double))[0]
    except OverflowError:
        raise NumberCoercionError(f"{number} overflows a float", context=number) from None


def to_boolean(value: "JsonValue") -> bool:
    target = resolve(value)
    if target.kind is not ValueKind.BOOLEAN:
        raise TypeCoercionError(f"Cannot convert a JSON {target.kind.value} to boolean")
    return target.value


def to_string(value: "JsonValue") -> str:
    """
    Convert a literal to text.

    Strings are returned as-is; numbers and booleans produce their JSON
    text. Null, empty optionals and structures cannot be converted.
    """
    target = resolve(value)
    if target.kind is ValueKind.STRING:
        return target.value
    elif target.kind is ValueKind.NUMBER:
        return str(target.value)
    elif target.kind is ValueKind.BOOLEAN:
        return "true" if target.value else "false"
    raise TypeCoercionError(f"Cannot convert a JSON {target.kind.value} to string")


def to_char(value: "JsonValue") -> str:
    target = resolve(value)
    if target.kind is not ValueKind.STRING:
        raise TypeCoercionError(f"Cannot convert a JSON {target.kind.value} to char")
    if len(target.value) != 1:
        raise TypeCoercionError(f"String of length {len(target.value)} is not a single char",
                                context=target.value)
    return target.value


# Typed binding

def bind(value: "JsonValue", target_type: Any,
         binder: Optional[TypedBinderInterface] = None) -> Any:
    """
    Bind a value to target_type through the typed binder.

    Args:
        value: Value to bind
        target_type: Class or parametrized type descriptor
        binder: Optional binder; defaults to the process-wide binder

    Returns:
        Instance of target_type

    Raises:
        BindingError: If the binder cannot build target_type
    """
    binder = binder or get_default_binder()
    return binder.bind(value.to_tree(), target_type)


def _bind_element(element: "JsonValue", element_type: Any,
                  binder: TypedBinderInterface) -> Any:
    from .values import JsonValue

    if isinstance(element_type, type) and issubclass(element_type, JsonValue):
        if not isinstance(element, element_type):
            raise TypeCoercionError(f"Element is a {type(element).__name__}, "
                                    f"not a {element_type.__name__}")
        return element
    return binder.bind(element.to_tree(), element_type)


def _elements(value: "JsonValue", target: str) -> Tuple["JsonValue", ...]:
    target_value = resolve(value)
    if target_value.kind is not ValueKind.ARRAY:
        raise TypeCoercionError(f"Cannot convert a JSON {target_value.kind.value} to {target}")
    return target_value.elements


def _fields(value: "JsonValue", target: str):
    target_value = resolve(value)
    if target_value.kind is not ValueKind.OBJECT:
        raise TypeCoercionError(f"Cannot convert a JSON {target_value.kind.value} to {target}")
    return target_value.fields


def to_list_of(value: "JsonValue", element_type: Any,
               factory: Callable[[], List[Any]] = list,
               binder: Optional[TypedBinderInterface] = None) -> List[Any]:
    """
    Materialize an array as a list, binding each element in order.

    Args:
        value: Array value
        element_type: Type each element is bound to
        factory: Zero-argument callable creating the empty target list
        binder: Optional binder; defaults to the process-wide binder

    Returns:
        The filled container returned by factory
    """
    binder = binder or get_default_binder()
    result = factory()
    for element in _elements(value, "list"):
        result.append(_bind_element(element, element_type, binder))
    return result


def to_set_of(value: "JsonValue", element_type: Any,
              factory: Callable[[], Set[Any]] = set,
              binder: Optional[TypedBinderInterface] = None) -> Set[Any]:
    """
    Materialize an array as a set.

    Elements are added in array order; equal elements collapse according to
    the container's own equality, so the first one seen is kept.
    """
    binder = binder or get_default_binder()
    result = factory()
    for element in _elements(value, "set"):
        result.add(_bind_element(element, element_type, binder))
    return result


def to_string_indexed_map_of(value: "JsonValue", element_type: Any,
                             factory: Callable[[], Dict[str, Any]] = dict,
                             binder: Optional[TypedBinderInterface] = None) -> Dict[str, Any]:
    """Materialize an object as a key-ordered mapping of bound values."""
    binder = binder or get_default_binder()
    result = factory()
    for key, element in _fields(value, "map").items():
        result[key] = _bind_element(element, element_type, binder)
    return result


def to_int_indexed_map_of(value: "JsonValue", element_type: Any,
                          factory: Callable[[], Dict[int, Any]] = dict,
                          binder: Optional[TypedBinderInterface] = None) -> Dict[int, Any]:
    """Materialize an array as a mapping from 0-based position to bound value."""
    binder = binder or get_default_binder()
    result = factory()
    for index, element in enumerate(_elements(value, "int-indexed map")):
        result[index] = _bind_element(element, element_type, binder)
    return result
