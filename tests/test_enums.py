from schemaform.enums import ConditionOperator, SchemaType, Visibility


def test_visibility_enum_values():
    assert Visibility.REQUIRED.value == "required"
    assert Visibility.OPTIONAL.value == "optional"
    assert Visibility.HIDDEN.value == "hidden"


def test_visibility_is_string_enum():
    assert isinstance(Visibility.HIDDEN, str)
    assert Visibility.HIDDEN == "hidden"


def test_visibility_flag_round_trip():
    assert Visibility.from_flag(True) is Visibility.REQUIRED
    assert Visibility.from_flag(None) is Visibility.OPTIONAL
    assert Visibility.from_flag(False) is Visibility.HIDDEN
    assert Visibility.HIDDEN.flag is False
    assert Visibility.OPTIONAL.flag is None


def test_condition_operators_compare_to_raw_strings():
    assert ConditionOperator.STRICT_EQUAL == "==="
    assert ConditionOperator.IS_UNDEFINED == "isUndefined"
    assert SchemaType.INTEGER == "integer"
