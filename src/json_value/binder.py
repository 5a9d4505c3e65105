"""Typed-object binding backed by pydantic."""

import json
import logging
from decimal import Decimal
from functools import lru_cache
from typing import Any, Optional

from pydantic import PydanticUserError, TypeAdapter, ValidationError

from .types import MAX_BIG_INTEGER_DIGITS, BindingError, TypedBinderInterface


@lru_cache(maxsize=256)
def _cached_adapter(target_type: Any) -> TypeAdapter:
    return TypeAdapter(target_type)


def _adapter_for(target_type: Any) -> TypeAdapter:
    try:
        return _cached_adapter(target_type)
    except TypeError:
        # Unhashable type descriptors bypass the cache
        return TypeAdapter(target_type)


def _number_text(number: Decimal) -> str:
    if number.adjusted() < MAX_BIG_INTEGER_DIGITS and number == number.to_integral_value():
        return str(int(number))
    return str(number)


def _json_text(tree: Any) -> str:
    """Render a generic tree as JSON text, writing whole numbers as integers."""
    if isinstance(tree, dict):
        return "{" + ",".join(f"{json.dumps(key)}:{_json_text(value)}"
                              for key, value in tree.items()) + "}"
    elif isinstance(tree, list):
        return "[" + ",".join(_json_text(item) for item in tree) + "]"
    elif isinstance(tree, Decimal):
        return _number_text(tree)
    return json.dumps(tree)


class PydanticBinder(TypedBinderInterface):
    """
    Binds generic JSON trees to typed objects with pydantic.

    Any type pydantic can validate is accepted as a target: builtins,
    dataclasses, ``BaseModel`` subclasses, ``TypedDict`` and parametrized
    generics such as ``List[int]`` or ``Dict[str, Point]``.
    """

    def __init__(self, strict: bool = False, logger: Optional[logging.Logger] = None):
        """
        Initialize the binder.

        Args:
            strict: Use pydantic strict mode (no lax conversions such as "1" -> 1)
            logger: Optional logger instance
        """
        self.strict = strict
        self.logger = logger or logging.getLogger(__name__)

    def bind(self, tree: Any, target_type: Any) -> Any:
        """
        Build an instance of target_type from a generic tree.

        Args:
            tree: dict/list/str/Decimal/bool/None tree
            target_type: Class or parametrized type descriptor

        Returns:
            Instance of target_type

        Raises:
            BindingError: If the tree does not fit target_type or the type
                is not supported by pydantic
        """
        try:
            adapter = _adapter_for(target_type)
            if self.strict:
                # strict validation refuses Decimal for int and float, so numbers
                # go through JSON text where each target reads them natively
                return adapter.validate_json(_json_text(tree), strict=True)
            return adapter.validate_python(tree)
        except ValidationError as e:
            self.logger.debug(f"Binding to {_type_name(target_type)} failed with "
                              f"{e.error_count()} validation error(s)")
            raise BindingError(
                f"Cannot bind value to {_type_name(target_type)}: {e.error_count()} validation error(s)",
                context=e.errors()
            ) from e
        except PydanticUserError as e:
            self.logger.warning(f"pydantic cannot build a validator for {_type_name(target_type)}")
            raise BindingError(f"Unsupported binding target {_type_name(target_type)}: {e}") from e

    def to_tree(self, obj: Any) -> Any:
        """
        Dump a typed object into a generic tree.

        Args:
            obj: Dataclass, model or other pydantic-serializable object

        Returns:
            JSON-compatible tree of dict/list/str/int/float/bool/None

        Raises:
            BindingError: If pydantic cannot serialize the object
        """
        try:
            return _adapter_for(type(obj)).dump_python(obj, mode="json")
        except PydanticUserError as e:
            raise BindingError(f"Cannot convert {type(obj).__name__} to JSON: {e}") from e
        except (TypeError, ValueError) as e:
            # pydantic_core raises PydanticSerializationError, a ValueError
            raise BindingError(f"Cannot convert {type(obj).__name__} to JSON: {e}") from e


def _type_name(target_type: Any) -> str:
    return getattr(target_type, "__name__", None) or repr(target_type)


_default_binder: TypedBinderInterface = PydanticBinder()


def get_default_binder() -> TypedBinderInterface:
    """Return the binder used when a call site does not pass one."""
    return _default_binder


def set_default_binder(binder: TypedBinderInterface) -> None:
    """Replace the process-wide default binder."""
    global _default_binder
    if not isinstance(binder, TypedBinderInterface):
        raise TypeError(f"binder must implement TypedBinderInterface, got {type(binder).__name__}")
    _default_binder = binder
