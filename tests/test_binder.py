"""Tests for the typed binder and its injection points."""

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

import pytest
from pydantic import BaseModel

from json_value import (
    BindingError,
    ErrorType,
    JsonValue,
    PydanticBinder,
    TypedBinderInterface,
    get_default_binder,
    set_default_binder,
)


@dataclass
class Point:
    x: int
    y: int


class Item(BaseModel):
    name: str
    price: Decimal
    note: Optional[str] = None


class RecordingBinder(TypedBinderInterface):
    """Binder returning fixed results and recording its calls."""

    def __init__(self):
        self.calls = []

    def bind(self, tree, target_type):
        self.calls.append(("bind", tree, target_type))
        return "bound"

    def to_tree(self, obj):
        self.calls.append(("to_tree", obj))
        return {"recorded": True}


class TestPydanticBinder:
    """Tests for PydanticBinder."""

    def setup_method(self):
        """Set up test fixtures."""
        self.binder = PydanticBinder()

    def test_bind_dataclass(self):
        """Test binding a tree to a dataclass."""
        assert self.binder.bind({"x": Decimal(1), "y": Decimal(2)}, Point) == Point(1, 2)

    def test_bind_model_with_defaults(self):
        """Test binding a tree to a model with an optional field."""
        item = self.binder.bind({"name": "pen", "price": Decimal("1.20")}, Item)

        assert item.price == Decimal("1.20")
        assert item.note is None

    def test_bind_generic(self):
        """Test binding to a parametrized list of dataclasses."""
        tree = [{"x": 1, "y": 2}, {"x": 3, "y": 4}]

        assert self.binder.bind(tree, List[Point]) == [Point(1, 2), Point(3, 4)]

    def test_bind_mismatch(self):
        """Test that validation failures become BindingError with details."""
        with pytest.raises(BindingError) as exc_info:
            self.binder.bind({"x": "one"}, Point)

        error = exc_info.value
        assert error.error_type is ErrorType.BINDING
        assert "Point" in str(error)
        assert {tuple(detail["loc"]) for detail in error.context} == {("x",), ("y",)}

    def test_strict_mode(self):
        """Test that strict mode refuses lax conversions."""
        assert self.binder.bind("7", int) == 7
        with pytest.raises(BindingError):
            PydanticBinder(strict=True).bind("7", int)

    def test_strict_mode_binds_json_numbers(self):
        """Test that strict mode reads parsed numbers as their natural types."""
        strict = PydanticBinder(strict=True)

        assert JsonValue.parse('{"x": 1, "y": 2}').as_pojo(Point, binder=strict) == Point(1, 2)
        assert JsonValue.of(7).as_type(int, binder=strict) == 7
        assert JsonValue.parse("1E+2").as_type(int, binder=strict) == 100
        assert JsonValue.parse("2.5").as_type(float, binder=strict) == 2.5
        assert JsonValue.parse("0.1").as_type(Decimal, binder=strict) == Decimal("0.1")
        assert JsonValue.parse("[1, 2]").as_list_of(int, binder=strict) == [1, 2]

    def test_strict_mode_rejects_fractional_int(self):
        """Test that strict mode still refuses a fraction for an int field."""
        value = JsonValue.parse('{"x": 1.5, "y": 2}')

        assert value.as_pojo_optional(Point, binder=PydanticBinder(strict=True)) is None

    def test_to_tree(self):
        """Test dumping typed objects to JSON-compatible trees."""
        assert self.binder.to_tree(Point(1, 2)) == {"x": 1, "y": 2}
        assert self.binder.to_tree(Item(name="pen", price=Decimal("1.5"))) == {
            "name": "pen", "price": "1.5", "note": None
        }


class TestBinderInjection:
    """Tests for per-call and process-wide binder selection."""

    def setup_method(self):
        """Remember the default binder."""
        self.original = get_default_binder()

    def teardown_method(self):
        """Restore the default binder."""
        set_default_binder(self.original)

    def test_per_call_binder(self):
        """Test that an explicit binder is used for one call."""
        binder = RecordingBinder()
        value = JsonValue.of({"x": 1})

        assert value.as_type(Point, binder=binder) == "bound"
        assert binder.calls == [("bind", {"x": Decimal(1)}, Point)]

    def test_collection_binder(self):
        """Test that collection conversions bind each element with the given binder."""
        binder = RecordingBinder()

        assert JsonValue.of([1, 2]).as_list_of(Point, binder=binder) == ["bound", "bound"]
        assert len(binder.calls) == 2

    def test_of_uses_binder_for_unknown_objects(self):
        """Test that JsonValue.of dumps unknown objects through the binder."""
        binder = RecordingBinder()
        marker = object()

        assert JsonValue.of([marker], binder=binder) == JsonValue.of([{"recorded": True}])
        assert binder.calls == [("to_tree", marker)]

    def test_set_default_binder(self):
        """Test replacing the process-wide binder."""
        binder = RecordingBinder()
        set_default_binder(binder)

        assert get_default_binder() is binder
        assert JsonValue.of({"x": 1}).as_pojo(Point) == "bound"

    def test_set_default_binder_rejects_other_objects(self):
        """Test that only binder implementations are accepted."""
        with pytest.raises(TypeError):
            set_default_binder(object())
        assert get_default_binder() is self.original
