"""Immutable JSON value model.

A JSON document is represented as a tree of ``JsonValue`` nodes. Each
concrete variant carries a ``kind`` tag from the closed ``ValueKind`` enum,
and the accessor, coercion and stringification engines dispatch on that tag.

``JsonOptional`` marks absence ("nothing here") and is distinct from
``JsonNull`` ("present and explicitly null").
"""

import math
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import (
    Any,
    Callable,
    ClassVar,
    Dict,
    Iterable,
    Iterator,
    List,
    Optional,
    Set,
    Tuple,
    TypeVar,
    Union,
)

from . import accessor, coercion, stringify as stringify_engine
from .binder import get_default_binder
from .error_handler import default_error_handler as _errors
from .types import (
    DEFAULT_INDENT,
    LITERAL_KINDS,
    STRUCTURE_KINDS,
    TypeCoercionError,
    TypedBinderInterface,
    ValueKind,
)

T = TypeVar("T")

_NO_DEFAULT = object()


class JsonValue(ABC):
    """
    Root of the JSON value hierarchy.

    Values are immutable. Navigation and conversion come in three forms:
    strict (``get``, ``as_int``...) raising on failure, optional
    (``get_optional``, ``as_int_optional``...) returning None, and
    default-valued (``get_or_default``, ``as_int_or_default``...).
    """

    kind: ClassVar[ValueKind]

    @staticmethod
    def of(obj: Any, binder: Optional[TypedBinderInterface] = None) -> "JsonValue":
        """
        Convert a Python object graph into a JSON value tree.

        Args:
            obj: None, bool, int, float, Decimal, str, mapping, list, tuple,
                set, an existing JsonValue, or any object the binder can dump
            binder: Optional binder used for objects of other types

        Returns:
            The equivalent JsonValue tree

        Raises:
            TypeCoercionError: For non-finite floats or non-string keys
            BindingError: If the binder cannot dump an unknown object
        """
        if isinstance(obj, JsonValue):
            return obj
        if obj is None:
            return JsonNull.INSTANCE
        if isinstance(obj, bool):
            return JsonBoolean.TRUE if obj else JsonBoolean.FALSE
        if isinstance(obj, int):
            return JsonNumber(Decimal(obj))
        if isinstance(obj, float):
            if not math.isfinite(obj):
                raise TypeCoercionError(f"{obj} has no JSON representation", context=obj)
            return JsonNumber(Decimal(repr(obj)))
        if isinstance(obj, Decimal):
            if not obj.is_finite():
                raise TypeCoercionError(f"{obj} has no JSON representation", context=obj)
            return JsonNumber(obj)
        if isinstance(obj, str):
            return JsonString(obj)
        if isinstance(obj, Mapping):
            fields = []
            for key, value in obj.items():
                if not isinstance(key, str):
                    raise TypeCoercionError(f"Object keys must be strings, got {type(key).__name__}",
                                            context=key)
                fields.append((key, JsonValue.of(value, binder)))
            return JsonObject(fields)
        if isinstance(obj, (list, tuple, set, frozenset)):
            return JsonArray([JsonValue.of(item, binder) for item in obj])

        binder = binder or get_default_binder()
        return JsonValue.of(binder.to_tree(obj), binder)

    @staticmethod
    def parse(source: Any) -> "JsonValue":
        """Parse bytes, JSON text, a path or a stream into a value tree."""
        from .parser import JsonParser

        return JsonParser().parse(source)

    # Predicates

    def is_json_array(self) -> bool:
        return self.kind is ValueKind.ARRAY

    def is_json_object(self) -> bool:
        return self.kind is ValueKind.OBJECT

    def is_json_string(self) -> bool:
        return self.kind is ValueKind.STRING

    def is_json_number(self) -> bool:
        return self.kind is ValueKind.NUMBER

    def is_json_boolean(self) -> bool:
        return self.kind is ValueKind.BOOLEAN

    def is_json_null(self) -> bool:
        return self.kind is ValueKind.NULL

    def is_json_optional(self) -> bool:
        return self.kind is ValueKind.OPTIONAL

    def is_json_literal(self) -> bool:
        """True for strings, numbers, booleans and null."""
        return self.kind in LITERAL_KINDS

    def is_json_structure(self) -> bool:
        """True for arrays and objects."""
        return self.kind in STRUCTURE_KINDS

    @abstractmethod
    def is_empty(self) -> bool:
        """True for empty strings, arrays and objects, null and empty optionals."""
        pass

    def is_not_empty(self) -> bool:
        return not self.is_empty()

    # Accessors

    def get(self, selector: Union[int, str, object] = accessor.NO_SELECTOR) -> "JsonValue":
        """
        Navigate one step, failing if the step does not exist.

        ``get(index)`` works on arrays, ``get(key)`` on objects, and ``get()``
        unwraps a present optional.

        Raises:
            AccessError: On the wrong variant, a bad index or a missing key
        """
        return accessor.get(self, selector)

    def get_optional(self, selector: Union[int, str, object] = accessor.NO_SELECTOR
                     ) -> Optional["JsonValue"]:
        """Navigate one step, returning None when the step does not exist."""
        if selector is not accessor.NO_SELECTOR:
            accessor.check_selector(selector)
        return _errors.optional(accessor.get, self, selector)

    def get_or_default(self, selector_or_default: Any, default: Any = _NO_DEFAULT) -> Any:
        """
        Navigate one step, substituting a default when it does not exist.

        Called as ``get_or_default(index_or_key, default)`` or, to unwrap an
        optional, ``get_or_default(default)``.
        """
        if default is _NO_DEFAULT:
            return _errors.or_default(accessor.get, selector_or_default, self)
        accessor.check_selector(selector_or_default)
        return _errors.or_default(accessor.get, default, self, selector_or_default)

    def find(self, selector: Union[int, str]) -> "JsonValue":
        """Navigate one step, yielding JsonOptional.EMPTY when it does not exist."""
        accessor.check_selector(selector)
        return _errors.or_default(accessor.get, JsonOptional.EMPTY, self, selector)

    def as_optional(self) -> Optional["JsonValue"]:
        """Return None for null and empty optionals, the resolved value otherwise."""
        value = accessor.resolve(self)
        if value.kind is ValueKind.NULL or value.kind is ValueKind.OPTIONAL:
            return None
        return value

    # Scalar coercion

    def as_byte(self) -> int:
        return coercion.to_byte(self)

    def as_byte_optional(self) -> Optional[int]:
        return _errors.optional(coercion.to_byte, self)

    def as_byte_or_default(self, default: int) -> int:
        return _errors.or_default(coercion.to_byte, default, self)

    def as_short(self) -> int:
        return coercion.to_short(self)

    def as_short_optional(self) -> Optional[int]:
        return _errors.optional(coercion.to_short, self)

    def as_short_or_default(self, default: int) -> int:
        return _errors.or_default(coercion.to_short, default, self)

    def as_int(self) -> int:
        """
        Convert to a 32-bit integer.

        Raises:
            TypeCoercionError: If the value is not a number
            NumberCoercionError: If it has a fraction or is out of range
        """
        return coercion.to_int(self)

    def as_int_optional(self) -> Optional[int]:
        return _errors.optional(coercion.to_int, self)

    def as_int_or_default(self, default: int) -> int:
        return _errors.or_default(coercion.to_int, default, self)

    def as_long(self) -> int:
        return coercion.to_long(self)

    def as_long_optional(self) -> Optional[int]:
        return _errors.optional(coercion.to_long, self)

    def as_long_or_default(self, default: int) -> int:
        return _errors.or_default(coercion.to_long, default, self)

    def as_big_integer(self) -> int:
        return coercion.to_big_integer(self)

    def as_big_integer_optional(self) -> Optional[int]:
        return _errors.optional(coercion.to_big_integer, self)

    def as_big_integer_or_default(self, default: int) -> int:
        return _errors.or_default(coercion.to_big_integer, default, self)

    def as_float(self) -> float:
        """Convert to the nearest single-precision float."""
        return coercion.to_float(self)

    def as_float_optional(self) -> Optional[float]:
        return _errors.optional(coercion.to_float, self)

    def as_float_or_default(self, default: float) -> float:
        return _errors.or_default(coercion.to_float, default, self)

    def as_double(self) -> float:
        return coercion.to_double(self)

    def as_double_optional(self) -> Optional[float]:
        return _errors.optional(coercion.to_double, self)

    def as_double_or_default(self, default: float) -> float:
        return _errors.or_default(coercion.to_double, default, self)

    def as_big_decimal(self) -> Decimal:
        return coercion.to_big_decimal(self)

    def as_big_decimal_optional(self) -> Optional[Decimal]:
        return _errors.optional(coercion.to_big_decimal, self)

    def as_big_decimal_or_default(self, default: Decimal) -> Decimal:
        return _errors.or_default(coercion.to_big_decimal, default, self)

    def as_boolean(self) -> bool:
        return coercion.to_boolean(self)

    def as_boolean_optional(self) -> Optional[bool]:
        return _errors.optional(coercion.to_boolean, self)

    def as_boolean_or_default(self, default: bool) -> bool:
        return _errors.or_default(coercion.to_boolean, default, self)

    def as_string(self) -> str:
        return coercion.to_string(self)

    def as_string_optional(self) -> Optional[str]:
        return _errors.optional(coercion.to_string, self)

    def as_string_or_default(self, default: str) -> str:
        return _errors.or_default(coercion.to_string, default, self)

    def as_char(self) -> str:
        return coercion.to_char(self)

    def as_char_optional(self) -> Optional[str]:
        return _errors.optional(coercion.to_char, self)

    def as_char_or_default(self, default: str) -> str:
        return _errors.or_default(coercion.to_char, default, self)

    # Collection coercion

    def as_list_of(self, element_type: Any, factory: Callable[[], List[Any]] = list,
                   binder: Optional[TypedBinderInterface] = None) -> List[Any]:
        """
        Bind every array element to element_type, preserving order.

        Args:
            element_type: Target type for each element; JsonValue (or a
                variant class) returns the elements themselves
            factory: Creates the empty target list
            binder: Optional binder; defaults to the process-wide binder

        Raises:
            TypeCoercionError: If this value is not an array
            BindingError: If an element cannot be bound
        """
        return coercion.to_list_of(self, element_type, factory, binder)

    def as_list_of_optional(self, element_type: Any, factory: Callable[[], List[Any]] = list,
                            binder: Optional[TypedBinderInterface] = None) -> Optional[List[Any]]:
        return _errors.optional(coercion.to_list_of, self, element_type, factory, binder)

    def as_list_of_or_default(self, element_type: Any, default: Any,
                              factory: Callable[[], List[Any]] = list,
                              binder: Optional[TypedBinderInterface] = None) -> Any:
        return _errors.or_default(coercion.to_list_of, default, self, element_type, factory, binder)

    def as_set_of(self, element_type: Any, factory: Callable[[], Set[Any]] = set,
                  binder: Optional[TypedBinderInterface] = None) -> Set[Any]:
        """Bind every array element into a set; duplicates collapse, first seen wins."""
        return coercion.to_set_of(self, element_type, factory, binder)

    def as_set_of_optional(self, element_type: Any, factory: Callable[[], Set[Any]] = set,
                           binder: Optional[TypedBinderInterface] = None) -> Optional[Set[Any]]:
        return _errors.optional(coercion.to_set_of, self, element_type, factory, binder)

    def as_set_of_or_default(self, element_type: Any, default: Any,
                             factory: Callable[[], Set[Any]] = set,
                             binder: Optional[TypedBinderInterface] = None) -> Any:
        return _errors.or_default(coercion.to_set_of, default, self, element_type, factory, binder)

    def as_map_of(self, element_type: Any, factory: Callable[[], Dict[str, Any]] = dict,
                  binder: Optional[TypedBinderInterface] = None) -> Dict[str, Any]:
        """Bind every object field value, keyed by field name in field order."""
        return coercion.to_string_indexed_map_of(self, element_type, factory, binder)

    def as_map_of_optional(self, element_type: Any, factory: Callable[[], Dict[str, Any]] = dict,
                           binder: Optional[TypedBinderInterface] = None
                           ) -> Optional[Dict[str, Any]]:
        return _errors.optional(coercion.to_string_indexed_map_of, self, element_type,
                                factory, binder)

    def as_map_of_or_default(self, element_type: Any, default: Any,
                             factory: Callable[[], Dict[str, Any]] = dict,
                             binder: Optional[TypedBinderInterface] = None) -> Any:
        return _errors.or_default(coercion.to_string_indexed_map_of, default, self,
                                  element_type, factory, binder)

    def to_string_indexed_map_of(self, element_type: Any,
                                 factory: Callable[[], Dict[str, Any]] = dict,
                                 binder: Optional[TypedBinderInterface] = None) -> Dict[str, Any]:
        return coercion.to_string_indexed_map_of(self, element_type, factory, binder)

    def to_string_indexed_map_of_optional(self, element_type: Any,
                                          factory: Callable[[], Dict[str, Any]] = dict,
                                          binder: Optional[TypedBinderInterface] = None
                                          ) -> Optional[Dict[str, Any]]:
        return _errors.optional(coercion.to_string_indexed_map_of, self, element_type,
                                factory, binder)

    def to_string_indexed_map_of_or_default(self, element_type: Any, default: Any,
                                            factory: Callable[[], Dict[str, Any]] = dict,
                                            binder: Optional[TypedBinderInterface] = None) -> Any:
        return _errors.or_default(coercion.to_string_indexed_map_of, default, self,
                                  element_type, factory, binder)

    def to_int_indexed_map_of(self, element_type: Any,
                              factory: Callable[[], Dict[int, Any]] = dict,
                              binder: Optional[TypedBinderInterface] = None) -> Dict[int, Any]:
        """Bind every array element, keyed by its 0-based position in array order."""
        return coercion.to_int_indexed_map_of(self, element_type, factory, binder)

    def to_int_indexed_map_of_optional(self, element_type: Any,
                                       factory: Callable[[], Dict[int, Any]] = dict,
                                       binder: Optional[TypedBinderInterface] = None
                                       ) -> Optional[Dict[int, Any]]:
        return _errors.optional(coercion.to_int_indexed_map_of, self, element_type,
                                factory, binder)

    def to_int_indexed_map_of_or_default(self, element_type: Any, default: Any,
                                         factory: Callable[[], Dict[int, Any]] = dict,
                                         binder: Optional[TypedBinderInterface] = None) -> Any:
        return _errors.or_default(coercion.to_int_indexed_map_of, default, self,
                                  element_type, factory, binder)

    # Typed binding

    def as_type(self, target_type: Any, binder: Optional[TypedBinderInterface] = None) -> Any:
        """
        Bind this value to a class or parametrized type such as ``List[Point]``.

        Raises:
            BindingError: If the binder cannot build target_type
        """
        return coercion.bind(self, target_type, binder)

    def as_type_optional(self, target_type: Any,
                         binder: Optional[TypedBinderInterface] = None) -> Any:
        return _errors.optional(coercion.bind, self, target_type, binder)

    def as_type_or_default(self, target_type: Any, default: Any,
                           binder: Optional[TypedBinderInterface] = None) -> Any:
        return _errors.or_default(coercion.bind, default, self, target_type, binder)

    def as_pojo(self, cls: Callable[..., T], binder: Optional[TypedBinderInterface] = None) -> T:
        return coercion.bind(self, cls, binder)

    def as_pojo_optional(self, cls: Callable[..., T],
                         binder: Optional[TypedBinderInterface] = None) -> Optional[T]:
        return _errors.optional(coercion.bind, self, cls, binder)

    def as_pojo_or_default(self, cls: Callable[..., T], default: T,
                           binder: Optional[TypedBinderInterface] = None) -> T:
        return _errors.or_default(coercion.bind, default, self, cls, binder)

    def as_optional_of(self, cls: Callable[..., T],
                       binder: Optional[TypedBinderInterface] = None) -> Optional[T]:
        return self.as_pojo_optional(cls, binder)

    # Conditional helpers

    def if_condition(self, condition_fn: Callable[[], bool],
                     then_fn: Callable[["JsonValue"], T],
                     else_fn: Callable[["JsonValue"], T]) -> T:
        """Apply then_fn if condition_fn() is true at call time, else_fn otherwise."""
        if condition_fn():
            return then_fn(self)
        else:
            return else_fn(self)

    def if_condition_else_this(self, condition_fn: Callable[[], bool],
                               then_fn: Callable[["JsonValue"], "JsonValue"]) -> "JsonValue":
        if condition_fn():
            return then_fn(self)
        else:
            return self

    def if_json_structure(self, then_fn: Callable[["JsonValue"], T],
                          else_fn: Callable[["JsonValue"], T]) -> T:
        return self.if_condition(self.is_json_structure, then_fn, else_fn)

    def if_json_structure_else_this(self, then_fn: Callable[["JsonValue"], "JsonValue"]
                                    ) -> "JsonValue":
        return self.if_condition_else_this(self.is_json_structure, then_fn)

    def if_json_literal(self, then_fn: Callable[["JsonValue"], T],
                        else_fn: Callable[["JsonValue"], T]) -> T:
        return self.if_condition(self.is_json_literal, then_fn, else_fn)

    def if_json_literal_else_this(self, then_fn: Callable[["JsonValue"], "JsonValue"]
                                  ) -> "JsonValue":
        return self.if_condition_else_this(self.is_json_literal, then_fn)

    def if_json_array(self, then_fn: Callable[["JsonValue"], T],
                      else_fn: Callable[["JsonValue"], T]) -> T:
        return self.if_condition(self.is_json_array, then_fn, else_fn)

    def if_json_array_else_this(self, then_fn: Callable[["JsonValue"], "JsonValue"]
                                ) -> "JsonValue":
        return self.if_condition_else_this(self.is_json_array, then_fn)

    def if_json_object(self, then_fn: Callable[["JsonValue"], T],
                       else_fn: Callable[["JsonValue"], T]) -> T:
        return self.if_condition(self.is_json_object, then_fn, else_fn)

    def if_json_object_else_this(self, then_fn: Callable[["JsonValue"], "JsonValue"]
                                 ) -> "JsonValue":
        return self.if_condition_else_this(self.is_json_object, then_fn)

    def if_json_string(self, then_fn: Callable[["JsonValue"], T],
                       else_fn: Callable[["JsonValue"], T]) -> T:
        return self.if_condition(self.is_json_string, then_fn, else_fn)

    def if_json_string_else_this(self, then_fn: Callable[["JsonValue"], "JsonValue"]
                                 ) -> "JsonValue":
        return self.if_condition_else_this(self.is_json_string, then_fn)

    def if_json_number(self, then_fn: Callable[["JsonValue"], T],
                       else_fn: Callable[["JsonValue"], T]) -> T:
        return self.if_condition(self.is_json_number, then_fn, else_fn)

    def if_json_number_else_this(self, then_fn: Callable[["JsonValue"], "JsonValue"]
                                 ) -> "JsonValue":
        return self.if_condition_else_this(self.is_json_number, then_fn)

    def if_json_boolean(self, then_fn: Callable[["JsonValue"], T],
                        else_fn: Callable[["JsonValue"], T]) -> T:
        return self.if_condition(self.is_json_boolean, then_fn, else_fn)

    def if_json_boolean_else_this(self, then_fn: Callable[["JsonValue"], "JsonValue"]
                                  ) -> "JsonValue":
        return self.if_condition_else_this(self.is_json_boolean, then_fn)

    def if_json_null(self, then_fn: Callable[["JsonValue"], T],
                     else_fn: Callable[["JsonValue"], T]) -> T:
        return self.if_condition(self.is_json_null, then_fn, else_fn)

    def if_json_null_else_this(self, then_fn: Callable[["JsonValue"], "JsonValue"]
                               ) -> "JsonValue":
        return self.if_condition_else_this(self.is_json_null, then_fn)

    # Output

    def stringify(self, keeping_null: bool = False, empty_values_to_null: bool = False) -> str:
        """Render as compact JSON; null fields are dropped unless keeping_null."""
        return stringify_engine.stringify(self, keeping_null, empty_values_to_null)

    def pretty_stringify(self, indent: int = DEFAULT_INDENT, keeping_null: bool = False,
                         empty_values_to_null: bool = False) -> str:
        """Render as indented JSON, indent spaces per level."""
        return stringify_engine.pretty_stringify(self, indent, keeping_null, empty_values_to_null)

    @abstractmethod
    def to_tree(self) -> Any:
        """Convert to the parser's generic tree of dict/list/str/Decimal/bool/None."""
        pass

    def __str__(self) -> str:
        return self.stringify(keeping_null=True)


@dataclass(frozen=True)
class JsonString(JsonValue):
    """JSON string."""

    kind: ClassVar[ValueKind] = ValueKind.STRING

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise ValueError(f"JsonString requires str, got {type(self.value).__name__}")

    def is_empty(self) -> bool:
        return self.value == ""

    def to_tree(self) -> str:
        return self.value


@dataclass(frozen=True)
class JsonNumber(JsonValue):
    """JSON number backed by an arbitrary-precision Decimal."""

    kind: ClassVar[ValueKind] = ValueKind.NUMBER

    value: Decimal

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, (int, Decimal)):
            raise ValueError(f"JsonNumber requires Decimal or int, got {type(self.value).__name__}")
        if isinstance(self.value, int):
            object.__setattr__(self, "value", Decimal(self.value))
        if not self.value.is_finite():
            raise ValueError(f"JsonNumber must be finite, got {self.value}")

    def is_empty(self) -> bool:
        return False

    def to_tree(self) -> Decimal:
        return self.value


@dataclass(frozen=True)
class JsonBoolean(JsonValue):
    """JSON true or false."""

    kind: ClassVar[ValueKind] = ValueKind.BOOLEAN

    TRUE: ClassVar["JsonBoolean"]
    FALSE: ClassVar["JsonBoolean"]

    value: bool

    def __post_init__(self):
        if not isinstance(self.value, bool):
            raise ValueError(f"JsonBoolean requires bool, got {type(self.value).__name__}")

    def is_empty(self) -> bool:
        return False

    def to_tree(self) -> bool:
        return self.value


@dataclass(frozen=True)
class JsonNull(JsonValue):
    """Explicit JSON null."""

    kind: ClassVar[ValueKind] = ValueKind.NULL

    INSTANCE: ClassVar["JsonNull"]

    def is_empty(self) -> bool:
        return True

    def to_tree(self) -> None:
        return None


@dataclass(frozen=True)
class JsonOptional(JsonValue):
    """
    Absence marker.

    ``JsonOptional.EMPTY`` is what never-failing lookups yield when nothing
    is found. ``JsonOptional.of(value)`` wraps a present payload, which
    ``get()`` unwraps and every conversion reads through.
    """

    kind: ClassVar[ValueKind] = ValueKind.OPTIONAL

    EMPTY: ClassVar["JsonOptional"]

    payload: Optional[JsonValue] = None

    def __post_init__(self):
        if self.payload is not None and not isinstance(self.payload, JsonValue):
            raise ValueError(f"JsonOptional payload must be a JsonValue, "
                             f"got {type(self.payload).__name__}")

    @classmethod
    def of(cls, obj: Any, binder: Optional[TypedBinderInterface] = None) -> "JsonOptional":
        """Wrap obj (converted with JsonValue.of) as a present optional; None gives EMPTY."""
        if obj is None:
            return cls.EMPTY
        return cls(JsonValue.of(obj, binder))

    def is_present(self) -> bool:
        return self.payload is not None

    def is_empty(self) -> bool:
        return self.payload is None or self.payload.is_empty()

    def to_tree(self) -> Any:
        return None if self.payload is None else self.payload.to_tree()


@dataclass(frozen=True, eq=False)
class JsonArray(JsonValue):
    """Ordered, 0-indexed sequence of JSON values."""

    kind: ClassVar[ValueKind] = ValueKind.ARRAY

    elements: Tuple[JsonValue, ...] = field(default=())

    def __post_init__(self):
        elements = tuple(self.elements)
        for element in elements:
            if not isinstance(element, JsonValue):
                raise ValueError(f"JsonArray elements must be JsonValue, got {type(element).__name__}")
        object.__setattr__(self, "elements", elements)

    def with_item(self, value: Any) -> "JsonArray":
        """Return a new array with value (converted with JsonValue.of) appended."""
        return JsonArray(self.elements + (JsonValue.of(value),))

    def is_empty(self) -> bool:
        return not self.elements

    def to_tree(self) -> List[Any]:
        return [element.to_tree() for element in self.elements]

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(self.elements)

    def __contains__(self, item: Any) -> bool:
        return item in self.elements

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, JsonArray):
            return NotImplemented
        return self.elements == other.elements

    def __hash__(self) -> int:
        return hash((ValueKind.ARRAY, self.elements))


@dataclass(frozen=True, eq=False)
class JsonObject(JsonValue):
    """
    Insertion-ordered mapping from string keys to JSON values.

    Built from a mapping or from (key, value) pairs. A repeated key replaces
    the earlier value but keeps the earlier position.
    """

    kind: ClassVar[ValueKind] = ValueKind.OBJECT

    fields: Mapping = field(default_factory=dict)

    def __post_init__(self):
        pairs = self.fields.items() if isinstance(self.fields, Mapping) else self.fields
        ordered: Dict[str, JsonValue] = {}
        for key, value in pairs:
            if not isinstance(key, str):
                raise ValueError(f"JsonObject keys must be str, got {type(key).__name__}")
            if not isinstance(value, JsonValue):
                raise ValueError(f"JsonObject value for {key!r} must be JsonValue, "
                                 f"got {type(value).__name__}")
            ordered[key] = value
        object.__setattr__(self, "fields", MappingProxyType(ordered))

    def with_field(self, key: str, value: Any) -> "JsonObject":
        """Return a new object with key set; an existing key keeps its position."""
        return JsonObject(list(self.fields.items()) + [(key, JsonValue.of(value))])

    def without_field(self, key: str) -> "JsonObject":
        return JsonObject([(k, v) for k, v in self.fields.items() if k != key])

    def keys(self) -> Iterable[str]:
        return self.fields.keys()

    def values(self) -> Iterable[JsonValue]:
        return self.fields.values()

    def items(self) -> Iterable[Tuple[str, JsonValue]]:
        return self.fields.items()

    def is_empty(self) -> bool:
        return not self.fields

    def to_tree(self) -> Dict[str, Any]:
        return {key: value.to_tree() for key, value in self.fields.items()
                if not (value.kind is ValueKind.OPTIONAL and value.payload is None)}

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __contains__(self, key: Any) -> bool:
        return key in self.fields

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, JsonObject):
            return NotImplemented
        return dict(self.fields) == dict(other.fields)

    def __hash__(self) -> int:
        return hash((ValueKind.OBJECT, frozenset(self.fields.items())))

    def __repr__(self) -> str:
        return f"JsonObject({dict(self.fields)!r})"


JsonBoolean.TRUE = JsonBoolean(True)
JsonBoolean.FALSE = JsonBoolean(False)
JsonNull.INSTANCE = JsonNull()
JsonOptional.EMPTY = JsonOptional()
