"""Tests for strict, optional and default-valued navigation."""

import pytest

from json_value import (
    AccessError,
    JsonNull,
    JsonNumber,
    JsonOptional,
    JsonString,
    JsonValue,
)


class TestGet:
    """Tests for strict navigation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.array = JsonValue.of([10, 20, 30])
        self.obj = JsonValue.of({"a": 1, "b": None})

    def test_get_index(self):
        """Test index access on an array."""
        assert self.array.get(0) == JsonNumber(10)
        assert self.array.get(2) == JsonNumber(30)

    def test_get_index_out_of_range(self):
        """Test that an index past the end fails."""
        with pytest.raises(AccessError, match="out of range"):
            self.array.get(5)

    def test_get_negative_index(self):
        """Test that negative indices are out of range."""
        with pytest.raises(AccessError):
            self.array.get(-1)

    def test_get_key(self):
        """Test key access on an object."""
        assert self.obj.get("a") == JsonNumber(1)
        assert self.obj.get("b") is JsonNull.INSTANCE

    def test_get_missing_key(self):
        """Test that an absent key fails."""
        with pytest.raises(AccessError, match="not found"):
            self.obj.get("missing")

    def test_get_wrong_variant(self):
        """Test index on object and key on array."""
        with pytest.raises(AccessError):
            self.obj.get(0)
        with pytest.raises(AccessError):
            self.array.get("a")
        with pytest.raises(AccessError):
            JsonString("abc").get(0)

    def test_get_unwraps_present_optional(self):
        """Test that get() returns the payload of an optional."""
        assert JsonOptional(JsonString("x")).get() == JsonString("x")

    def test_get_unwrap_fails_on_empty_and_non_optional(self):
        """Test that get() fails when there is nothing to unwrap."""
        with pytest.raises(AccessError):
            JsonOptional.EMPTY.get()
        with pytest.raises(AccessError):
            self.array.get()

    def test_navigation_reads_through_present_optional(self):
        """Test that a present optional is transparent to navigation."""
        assert JsonOptional(self.array).get(1) == JsonNumber(20)

    @pytest.mark.parametrize("selector", [True, 1.5, None, ("a",)])
    def test_invalid_selector_is_a_type_error(self, selector):
        """Test that non int/str selectors are programming errors."""
        with pytest.raises(TypeError):
            self.array.get(selector)
        with pytest.raises(TypeError):
            self.array.get_optional(selector)

    def test_access_error_is_lookup_error(self):
        """Test AccessError fits the builtin hierarchy."""
        with pytest.raises(LookupError):
            self.array.get(99)


class TestGetOptional:
    """Tests for never-failing navigation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.array = JsonValue.of([10, 20, 30])

    def test_get_optional_out_of_range(self):
        """Test that a missing index returns None."""
        assert self.array.get_optional(5) is None
        assert self.array.get_optional(1) == JsonNumber(20)

    def test_get_optional_wrong_variant(self):
        """Test that the wrong variant returns None."""
        assert self.array.get_optional("key") is None
        assert JsonNull.INSTANCE.get_optional(0) is None

    def test_get_optional_unwrap(self):
        """Test optional unwrap."""
        assert JsonOptional.EMPTY.get_optional() is None
        assert JsonOptional(JsonNumber(1)).get_optional() == JsonNumber(1)
        assert JsonString("x").get_optional() is None


class TestGetOrDefault:
    """Tests for default-valued navigation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.array = JsonValue.of([10, 20, 30])

    def test_get_or_default_index(self):
        """Test the default is used only when the index is missing."""
        assert self.array.get_or_default(5, JsonNull.INSTANCE) is JsonNull.INSTANCE
        assert self.array.get_or_default(0, JsonNull.INSTANCE) == JsonNumber(10)

    def test_get_or_default_key(self):
        """Test the default for a missing key."""
        obj = JsonValue.of({"a": 1})
        fallback = JsonString("fallback")

        assert obj.get_or_default("z", fallback) is fallback
        assert obj.get_or_default("a", fallback) == JsonNumber(1)

    def test_get_or_default_unwrap(self):
        """Test the single-argument form unwraps optionals."""
        assert JsonOptional.EMPTY.get_or_default(JsonNull.INSTANCE) is JsonNull.INSTANCE
        assert JsonOptional(JsonNumber(2)).get_or_default(JsonNull.INSTANCE) == JsonNumber(2)


class TestFind:
    """Tests for chainable navigation."""

    def test_find_chain(self):
        """Test chained lookups through nested structures."""
        value = JsonValue.of({"a": [{"b": 7}]})

        assert value.find("a").find(0).find("b").as_int() == 7

    def test_find_missing_yields_empty_optional(self):
        """Test that absence propagates as JsonOptional.EMPTY."""
        value = JsonValue.of({"a": [1]})

        assert value.find("x") is JsonOptional.EMPTY
        assert value.find("x").find(0).find("y") is JsonOptional.EMPTY
        assert value.find("a").find(3).as_int_optional() is None


class TestAsOptional:
    """Tests for as_optional."""

    def test_as_optional(self):
        """Test that null and absence become None."""
        assert JsonNull.INSTANCE.as_optional() is None
        assert JsonOptional.EMPTY.as_optional() is None
        assert JsonOptional(JsonString("x")).as_optional() == JsonString("x")
        value = JsonValue.of([1])
        assert value.as_optional() is value
