"""Strict single-step navigation over JSON values."""

from typing import TYPE_CHECKING, Any, Union

from .types import AccessError, ValueKind

if TYPE_CHECKING:
    from .values import JsonValue


Selector = Union[int, str]

NO_SELECTOR = object()


def resolve(value: "JsonValue") -> "JsonValue":
    """Return the payload of a present optional, or the value itself."""
    while value.kind is ValueKind.OPTIONAL and value.payload is not None:
        value = value.payload
    return value


def check_selector(selector: Any) -> None:
    """Reject selectors that are neither an index nor a key."""
    if isinstance(selector, bool) or not isinstance(selector, (int, str)):
        raise TypeError(f"selector must be int or str, got {type(selector).__name__}")


def get(value: "JsonValue", selector: Any = NO_SELECTOR) -> "JsonValue":
    """
    Navigate one step from value.

    Args:
        value: Value to navigate from
        selector: Array index, object key, or nothing to unwrap an optional

    Returns:
        The selected child value

    Raises:
        AccessError: If the step does not exist for this value
        TypeError: If selector is neither int nor str
    """
    if selector is NO_SELECTOR:
        return unwrap(value)
    check_selector(selector)
    if isinstance(selector, int):
        return get_index(value, selector)
    return get_key(value, selector)


def get_index(value: "JsonValue", index: int) -> "JsonValue":
    target = resolve(value)
    if target.kind is not ValueKind.ARRAY:
        raise AccessError(f"Cannot index into a JSON {target.kind.value}", context=index)
    elements = target.elements
    if index < 0 or index >= len(elements):
        raise AccessError(f"Index {index} out of range for array of length {len(elements)}",
                          context=index)
    return elements[index]


def get_key(value: "JsonValue", key: str) -> "JsonValue":
    target = resolve(value)
    if target.kind is not ValueKind.OBJECT:
        raise AccessError(f"Cannot look up key {key!r} in a JSON {target.kind.value}", context=key)
    try:
        return target.fields[key]
    except KeyError:
        raise AccessError(f"Key {key!r} not found", context=key) from None


def unwrap(value: "JsonValue") -> "JsonValue":
    if value.kind is not ValueKind.OPTIONAL:
        raise AccessError(f"Cannot unwrap a JSON {value.kind.value}")
    if value.payload is None:
        raise AccessError("Cannot unwrap an empty optional")
    return value.payload
