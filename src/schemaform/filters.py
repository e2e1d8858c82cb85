"""Search-box predicates for object properties and array entries."""

from __future__ import annotations

from typing import Any

from .consts import MIN_ITEM_COUNT_IF_NEED_FILTER
from .schema import NumberSchema, ObjectSchema, Schema, StringSchema
from .titles import find_title_from_schema, get_title
from .utils import stringify
from .values import is_number


def filter_object(property: str, schema: Schema, filter_value: str) -> bool:
    """Match a property by key, title or description."""
    return (
        filter_value == ""
        or filter_value in property
        or (bool(schema.title) and filter_value in schema.title)
        or (bool(schema.description) and filter_value in schema.description)
    )


def filter_array(value: Any, index: int, schema: Schema, filter_value: str) -> bool:
    """Match an array entry by index, scalar value or derived title.

    ``schema`` is the item schema.
    """
    if filter_value == "" or filter_value in str(index):
        return True
    if isinstance(schema, StringSchema) and isinstance(value, str):
        if filter_value in value:
            return True
    if isinstance(schema, NumberSchema) and is_number(value):
        if filter_value in stringify(value):
            return True

    if isinstance(schema, ObjectSchema):
        title = get_title(find_title_from_schema(value, schema), schema.title)
        return filter_value in title
    return False


def needs_filter(count: int, threshold: int = MIN_ITEM_COUNT_IF_NEED_FILTER) -> bool:
    """Whether a container is large enough to show a search box."""
    return count >= threshold
