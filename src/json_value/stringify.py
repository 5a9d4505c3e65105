"""Compact and pretty JSON rendering of value trees."""

import json
import logging
from typing import TYPE_CHECKING, List, Optional, Tuple

from .accessor import resolve
from .types import DEFAULT_INDENT, StringifyOptions, ValueKind

if TYPE_CHECKING:
    from .values import JsonValue


class Stringifier:
    """
    Renders JSON value trees as text.

    Two independent policies apply to both output modes:

    * ``keeping_null`` - when false, object fields holding a null or an
      empty optional are left out instead of being written as ``null``.
    * ``empty_values_to_null`` - when true, empty strings, arrays and
      objects are written as ``null``.

    Rendering is total over the value model: any tree produces text.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the stringifier.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def stringify(self, value: "JsonValue",
                  options: Optional[StringifyOptions] = None) -> str:
        """
        Render value as compact single-line JSON.

        Args:
            value: Tree to render
            options: Rendering policy; indent is ignored

        Returns:
            JSON text without insignificant whitespace
        """
        options = options or StringifyOptions()
        self.logger.debug(f"Compact rendering of a JSON {value.kind.value}")
        return self._compact(value, options)

    def pretty_stringify(self, value: "JsonValue",
                         options: Optional[StringifyOptions] = None) -> str:
        """
        Render value as indented multi-line JSON.

        Each nesting level adds ``options.indent`` spaces; keys are followed
        by ``": "``, and empty arrays and objects stay on one line.

        Args:
            value: Tree to render
            options: Rendering policy

        Returns:
            Pretty-printed JSON text
        """
        options = options or StringifyOptions()
        self.logger.debug(f"Pretty rendering of a JSON {value.kind.value} with indent {options.indent}")
        return self._pretty(value, options, options.indent)

    def _compact(self, value: "JsonValue", options: StringifyOptions) -> str:
        value = resolve(value)
        if options.empty_values_to_null and value.is_empty():
            return "null"

        if value.kind is ValueKind.ARRAY:
            return "[" + ",".join(self._compact(element, options)
                                  for element in value.elements) + "]"
        elif value.kind is ValueKind.OBJECT:
            return "{" + ",".join(f"{_quote(key)}:{self._compact(field, options)}"
                                  for key, field in _kept_fields(value, options)) + "}"
        return _literal(value)

    def _pretty(self, value: "JsonValue", options: StringifyOptions, depth_indent: int) -> str:
        value = resolve(value)
        if options.empty_values_to_null and value.is_empty():
            return "null"

        prefix = " " * depth_indent
        closing_prefix = " " * (depth_indent - options.indent)
        next_indent = depth_indent + options.indent

        if value.kind is ValueKind.ARRAY:
            if not value.elements:
                return "[]"
            lines = [prefix + self._pretty(element, options, next_indent)
                     for element in value.elements]
            return "[\n" + ",\n".join(lines) + "\n" + closing_prefix + "]"
        elif value.kind is ValueKind.OBJECT:
            fields = _kept_fields(value, options)
            if not fields:
                return "{}"
            lines = [f"{prefix}{_quote(key)}: {self._pretty(field, options, next_indent)}"
                     for key, field in fields]
            return "{\n" + ",\n".join(lines) + "\n" + closing_prefix + "}"
        return _literal(value)


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def _literal(value: "JsonValue") -> str:
    if value.kind is ValueKind.STRING:
        return _quote(value.value)
    elif value.kind is ValueKind.NUMBER:
        return str(value.value)
    elif value.kind is ValueKind.BOOLEAN:
        return "true" if value.value else "false"
    # null and empty optional
    return "null"


def _is_absent(value: "JsonValue") -> bool:
    value = resolve(value)
    return value.kind is ValueKind.NULL or value.kind is ValueKind.OPTIONAL


def _kept_fields(value: "JsonValue", options: StringifyOptions) -> List[Tuple[str, "JsonValue"]]:
    if options.keeping_null:
        return list(value.fields.items())
    return [(key, field) for key, field in value.fields.items() if not _is_absent(field)]


default_stringifier = Stringifier()


def stringify(value: "JsonValue", keeping_null: bool = False,
              empty_values_to_null: bool = False) -> str:
    """Render value compactly with the default stringifier."""
    options = StringifyOptions(keeping_null=keeping_null,
                               empty_values_to_null=empty_values_to_null)
    return default_stringifier.stringify(value, options)


def pretty_stringify(value: "JsonValue", indent: int = DEFAULT_INDENT,
                     keeping_null: bool = False, empty_values_to_null: bool = False) -> str:
    """Render value pretty-printed with the default stringifier."""
    options = StringifyOptions(keeping_null=keeping_null,
                               empty_values_to_null=empty_values_to_null,
                               indent=indent)
    return default_stringifier.pretty_stringify(value, options)
