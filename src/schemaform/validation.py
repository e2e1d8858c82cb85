"""Per-node error messages.

Every evaluator returns ``""`` when the value satisfies its schema, otherwise
the localized message of the first violated rule. Rules are checked in a
fixed order so the surfaced message is stable when several are broken.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Any, Mapping

from .consts import FIELD_REQUIRED_MESSAGE
from .equality import is_same
from .errors import InvalidPatternError
from .locale import Locale, get_locale
from .schema import ArraySchema, NumberSchema, ObjectSchema, Schema, StringSchema
from .values import UNDEFINED, is_number

logger = logging.getLogger(__name__)


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern:
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e


def get_error_message_of_string(
    value: str | None, schema: StringSchema, required: bool = False, locale: Locale | None = None
) -> str:
    """Check minLength, maxLength and pattern, in that order.

    Raises:
        InvalidPatternError: ``schema.pattern`` is not a valid regular expression
    """
    locale = get_locale(locale)
    if value is not UNDEFINED and value is not None:
        if schema.min_length is not None and len(value) < schema.min_length:
            return locale.message("min_length", schema.min_length)
        if schema.max_length is not None and len(value) > schema.max_length:
            return locale.message("max_length", schema.max_length)
        if schema.pattern is not None and _compile(schema.pattern).fullmatch(value) is None:
            return locale.message("pattern", schema.pattern)
    if value is UNDEFINED and required:
        return FIELD_REQUIRED_MESSAGE
    return ""


def get_error_message_of_number(value: Any, schema: NumberSchema, locale: Locale | None = None) -> str:
    """Check the lower bound, the upper bound and multipleOf, in that order.

    An exclusive bound, when set, replaces the inclusive one entirely.
    """
    locale = get_locale(locale)
    if value is UNDEFINED or not is_number(value):
        return ""

    if schema.exclusive_minimum is not None:
        if value <= schema.exclusive_minimum:
            return locale.message("larger_than", schema.exclusive_minimum)
    elif schema.minimum is not None and value < schema.minimum:
        return locale.message("minimum", schema.minimum)

    if schema.exclusive_maximum is not None:
        if value >= schema.exclusive_maximum:
            return locale.message("smaller_than", schema.exclusive_maximum)
    elif schema.maximum is not None and value > schema.maximum:
        return locale.message("maximum", schema.maximum)

    if schema.multiple_of is not None and schema.multiple_of > 0:
        if not float(value / schema.multiple_of).is_integer():
            return locale.message("multiple_of", schema.multiple_of)
    return ""


def get_error_message_of_array(value: list | None, schema: ArraySchema, locale: Locale | None = None) -> str:
    locale = get_locale(locale)
    if not isinstance(value, list):
        return ""

    if schema.min_items is not None and len(value) < schema.min_items:
        return locale.message("min_items", schema.min_items)
    if schema.max_items is not None and len(value) > schema.max_items:
        return locale.message("max_items", schema.max_items)
    if schema.unique_items:
        # first duplicate pair (j < i) in scan order wins
        for i in range(1, len(value)):
            for j in range(i):
                if is_same(value[j], value[i]):
                    return locale.message("unique_items", j, i)
    return ""


def get_error_message_of_object(value: Mapping | None, schema: ObjectSchema, locale: Locale | None = None) -> str:
    locale = get_locale(locale)
    if not isinstance(value, Mapping):
        return ""

    count = sum(1 for item in value.values() if item is not UNDEFINED)
    if schema.min_properties is not None and count < schema.min_properties:
        return locale.message("min_properties", schema.min_properties)
    if schema.max_properties is not None and count > schema.max_properties:
        return locale.message("max_properties", schema.max_properties)
    return ""


def get_error_message(value: Any, schema: Schema, locale: Locale | None = None, required: bool = False) -> str:
    """Dispatch to the evaluator for ``schema``'s type.

    Boolean, null and untyped nodes carry no constraints and are always valid.
    """
    if isinstance(schema, StringSchema):
        if value is not UNDEFINED and value is not None and not isinstance(value, str):
            logger.debug(f"Skipping string checks for non-string value {value!r}")
            return ""
        return get_error_message_of_string(value, schema, required, locale)
    if isinstance(schema, NumberSchema):
        return get_error_message_of_number(value, schema, locale)
    if isinstance(schema, ArraySchema):
        return get_error_message_of_array(value, schema, locale)
    if isinstance(schema, ObjectSchema):
        return get_error_message_of_object(value, schema, locale)
    return ""


def record_invalid(invalid: list, is_valid: bool, key: str | int) -> list:
    """Track which properties (or item indexes) of a container are invalid.

    The list is updated in place and returned.
    """
    if is_valid:
        if key in invalid:
            invalid.remove(key)
    elif key not in invalid:
        invalid.append(key)
    return invalid
