"""Title resolver unit tests"""

from schemaform.schema import PropertyEntry, parse_schema
from schemaform.titles import find_title, find_title_from_schema, get_title, truncate_title
from schemaform.values import UNDEFINED

STATUS = parse_schema(
    {"type": "string", "enum": ["a", "b", "c"], "enumTitles": ["Active", ""]}
)
NAME = parse_schema({"type": "string"})
LEVEL = parse_schema({"type": "integer", "enum": [1, 2], "enumTitles": ["Low", "High"]})


def test_truncate_title():
    title = "x" * 40

    result = truncate_title(title)

    assert result == "x" * 30 + "..."
    assert len(result) == 33


def test_truncate_title_keeps_33_characters():
    assert truncate_title("y" * 33) == "y" * 33


def test_find_title_prefers_enum_title():
    candidates = [PropertyEntry("status", STATUS), PropertyEntry("name", NAME)]

    assert find_title({"status": "a", "name": "Bob"}, candidates) == "Active"


def test_find_title_falls_back_to_raw_string_when_enum_title_empty():
    candidates = [PropertyEntry("status", STATUS)]

    assert find_title({"status": "b"}, candidates) == "b"
    assert find_title({"status": "c"}, candidates) == "c"


def test_find_title_uses_next_candidate():
    candidates = [PropertyEntry("name", NAME), PropertyEntry("status", STATUS)]

    assert find_title({"name": "", "status": "a"}, candidates) == "Active"


def test_find_title_numeric_enum():
    assert find_title({"level": 2}, [PropertyEntry("level", LEVEL)]) == "High"
    assert find_title({"level": 3}, [PropertyEntry("level", LEVEL)]) is None


def test_find_title_truncates():
    assert find_title({"name": "n" * 40}, [PropertyEntry("name", NAME)]) == "n" * 30 + "..."


def test_find_title_custom_truncation():
    result = find_title(
        {"name": "abcdefghij"},
        [PropertyEntry("name", NAME)],
        max_length=5,
        truncate_length=3,
    )

    assert result == "abc..."


def test_find_title_without_value():
    assert find_title(None, [PropertyEntry("name", NAME)]) is None
    assert find_title({}, []) is None


def test_find_title_from_schema_scans_declared_properties():
    schema = parse_schema(
        {
            "type": "object",
            "properties": {"id": {"type": "integer"}, "label": {"type": "string"}},
        }
    )

    assert find_title_from_schema({"id": 3, "label": "first", "other": "x"}, schema) == "first"
    assert find_title_from_schema({"other": "x"}, schema) is None


def test_get_title_returns_first_non_empty():
    assert get_title(None, "", UNDEFINED, "Name", "fallback") == "Name"
    assert get_title(None, 0) == "0"
    assert get_title() == ""
    assert get_title(None, "") == ""
