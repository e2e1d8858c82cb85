"""Error rule evaluator unit tests"""

import pytest

from schemaform.errors import InvalidPatternError
from schemaform.locale import DEFAULT_LOCALE, Locale
from schemaform.schema import parse_schema
from schemaform.validation import (
    get_error_message,
    get_error_message_of_array,
    get_error_message_of_number,
    get_error_message_of_object,
    get_error_message_of_string,
    record_invalid,
)
from schemaform.values import UNDEFINED


@pytest.mark.parametrize(
    "value,raw_schema",
    [
        ("text", {"type": "string"}),
        (3, {"type": "number"}),
        (3, {"type": "integer"}),
        ([1, 1], {"type": "array"}),
        ({"a": 1}, {"type": "object"}),
        (True, {"type": "boolean"}),
        (None, {"type": "null"}),
    ],
)
def test_unconstrained_values_are_valid(value, raw_schema):
    assert get_error_message(value, parse_schema(raw_schema), DEFAULT_LOCALE) == ""


class TestString:
    """Tests for string rules"""

    def test_min_length_reported_before_pattern(self):
        schema = parse_schema({"type": "string", "minLength": 5, "pattern": "^[0-9]+$"})

        assert get_error_message_of_string("ab", schema, False, DEFAULT_LOCALE) == (
            "Value must be at least 5 characters long."
        )

    def test_max_length(self):
        schema = parse_schema({"type": "string", "maxLength": 2})

        assert get_error_message_of_string("abc", schema) == "Value must be at most 2 characters long."
        assert get_error_message_of_string("ab", schema) == ""

    def test_pattern_must_match_whole_value(self):
        schema = parse_schema({"type": "string", "pattern": "[0-9]+"})

        assert get_error_message_of_string("123", schema) == ""
        assert get_error_message_of_string("a123", schema) == (
            "Value doesn't match the pattern [0-9]+."
        )

    def test_undefined_and_null_skip_checks(self):
        schema = parse_schema({"type": "string", "minLength": 5})

        assert get_error_message_of_string(UNDEFINED, schema) == ""
        assert get_error_message_of_string(None, schema, True) == ""

    def test_required_undefined_uses_literal_message(self):
        locale = Locale.model_validate({"error": {"minLength": "trop court"}})

        assert get_error_message_of_string(UNDEFINED, parse_schema({"type": "string"}), True, locale) == (
            "Field is required"
        )

    def test_invalid_pattern_raises(self):
        schema = parse_schema({"type": "string", "pattern": "[unclosed"})

        with pytest.raises(InvalidPatternError) as exc_info:
            get_error_message_of_string("x", schema)

        assert exc_info.value.pattern == "[unclosed"
        assert exc_info.value.__cause__ is not None

    def test_custom_locale(self):
        locale = Locale.model_validate({"error": {"minLength": "min {0}"}})
        schema = parse_schema({"type": "string", "minLength": 3})

        assert get_error_message_of_string("a", schema, False, locale) == "min 3"


class TestNumber:
    """Tests for number rules"""

    def test_exclusive_minimum_wins_over_minimum(self):
        schema = parse_schema({"type": "number", "minimum": 5, "exclusiveMinimum": 5})

        assert get_error_message_of_number(5, schema) == "Value must be > 5."
        assert get_error_message_of_number(6, schema) == ""

    def test_exclusive_minimum_ignores_stricter_minimum(self):
        schema = parse_schema({"type": "number", "minimum": 10, "exclusiveMinimum": 5})

        assert get_error_message_of_number(6, schema) == ""

    def test_inclusive_minimum(self):
        schema = parse_schema({"type": "number", "minimum": 5})

        assert get_error_message_of_number(5, schema) == ""
        assert get_error_message_of_number(4.5, schema) == "Value must be >= 5."

    def test_maximum_rules(self):
        inclusive = parse_schema({"type": "number", "maximum": 10})
        exclusive = parse_schema({"type": "number", "maximum": 10, "exclusiveMaximum": 10})

        assert get_error_message_of_number(10, inclusive) == ""
        assert get_error_message_of_number(11, inclusive) == "Value must be <= 10."
        assert get_error_message_of_number(10, exclusive) == "Value must be < 10."

    def test_lower_bound_reported_before_multiple_of(self):
        schema = parse_schema({"type": "integer", "minimum": 10, "multipleOf": 3})

        assert get_error_message_of_number(4, schema) == "Value must be >= 10."
        assert get_error_message_of_number(11, schema) == "Value must be multiple value of 3."
        assert get_error_message_of_number(12, schema) == ""

    def test_multiple_of_ignored_when_not_positive(self):
        schema = parse_schema({"type": "number", "multipleOf": 0})

        assert get_error_message_of_number(7, schema) == ""

    def test_fractional_multiple_of(self):
        schema = parse_schema({"type": "number", "multipleOf": 0.5})

        assert get_error_message_of_number(1.5, schema) == ""
        assert get_error_message_of_number(1.25, schema) == "Value must be multiple value of 0.5."

    def test_undefined_is_valid(self):
        schema = parse_schema({"type": "number", "minimum": 1})

        assert get_error_message_of_number(UNDEFINED, schema) == ""


class TestArray:
    """Tests for array rules"""

    def test_unique_items_reports_first_duplicate_pair(self):
        schema = parse_schema({"type": "array", "uniqueItems": True})

        assert get_error_message_of_array([1, 2, 1], schema) == (
            "The item in 0 and 2 must not be same."
        )

    def test_unique_items_scans_by_later_index_first(self):
        schema = parse_schema({"type": "array", "uniqueItems": True})

        # (1, 2) is found before (0, 3)
        assert get_error_message_of_array(["a", "b", "b", "a"], schema) == (
            "The item in 1 and 2 must not be same."
        )

    def test_unique_items_compares_structurally(self):
        schema = parse_schema({"type": "array", "uniqueItems": True})

        assert get_error_message_of_array([{"a": [1]}, {"a": [1]}], schema) != ""
        assert get_error_message_of_array([{"a": [1]}, {"a": [2]}], schema) == ""

    def test_min_items_reported_before_unique_items(self):
        schema = parse_schema({"type": "array", "minItems": 3, "uniqueItems": True})

        assert get_error_message_of_array([1, 1], schema) == (
            "The length of the array must be >= 3."
        )

    def test_max_items(self):
        schema = parse_schema({"type": "array", "maxItems": 1})

        assert get_error_message_of_array([1, 2], schema) == (
            "The length of the array must be <= 1."
        )

    def test_undefined_is_valid(self):
        schema = parse_schema({"type": "array", "minItems": 1})

        assert get_error_message_of_array(UNDEFINED, schema) == ""


class TestObject:
    """Tests for object rules"""

    def test_undefined_members_are_not_counted(self):
        schema = parse_schema({"type": "object", "minProperties": 2})

        assert get_error_message_of_object({"a": 1, "b": UNDEFINED}, schema) == (
            "Properties count must be >= 2."
        )
        assert get_error_message_of_object({"a": 1, "b": None}, schema) == ""

    def test_max_properties(self):
        schema = parse_schema({"type": "object", "maxProperties": 1})

        assert get_error_message_of_object({"a": 1, "b": 2}, schema) == (
            "Properties count must be <= 1."
        )


class TestDispatch:
    """Tests for get_error_message"""

    def test_string_required(self):
        schema = parse_schema({"type": "string"})

        assert get_error_message(UNDEFINED, schema, required=True) == "Field is required"
        assert get_error_message(UNDEFINED, schema) == ""

    def test_mistyped_string_value_is_skipped(self):
        schema = parse_schema({"type": "string", "minLength": 3})

        assert get_error_message(12, schema) == ""

    def test_mistyped_number_value_is_skipped(self):
        schema = parse_schema({"type": "number", "minimum": 3})

        assert get_error_message("1", schema) == ""
        assert get_error_message(None, schema) == ""


def test_record_invalid():
    invalid = []

    record_invalid(invalid, False, "a")
    record_invalid(invalid, False, "a")
    record_invalid(invalid, False, 2)
    assert invalid == ["a", 2]

    record_invalid(invalid, True, "a")
    record_invalid(invalid, True, "missing")
    assert invalid == [2]
