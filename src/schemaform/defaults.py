"""Initial values for schema nodes."""

from __future__ import annotations

import copy
import logging
from typing import Any, Mapping

from .enums import SchemaType
from .schema import AnySchema, ArraySchema, NumberSchema, ObjectSchema, Schema, StringSchema, value_key
from .values import UNDEFINED, BoxedValue, from_host, is_number

logger = logging.getLogger(__name__)


def _matches_type(schema: Schema, value: Any) -> bool:
    if isinstance(schema, ObjectSchema):
        return isinstance(value, Mapping)
    if isinstance(schema, ArraySchema):
        return isinstance(value, list)
    if isinstance(schema, NumberSchema):
        return is_number(value)
    if isinstance(schema, StringSchema):
        return isinstance(value, str)
    if schema.type == SchemaType.BOOLEAN:
        return isinstance(value, bool)
    return value is None


def _from_initial(schema: Schema, initial_value: Any) -> Any:
    initial_value = from_host(initial_value, schema)
    if isinstance(schema, AnySchema) and schema.type is None:
        if isinstance(initial_value, BoxedValue):
            return initial_value.value
        return initial_value

    if isinstance(initial_value, BoxedValue):
        inner = initial_value.value
        if _matches_type(schema, inner) and inner is not None:
            return inner
        return UNDEFINED

    if _matches_type(schema, initial_value):
        return initial_value
    return UNDEFINED


def get_default_value(required: bool | None, schema: Schema, initial_value: Any = UNDEFINED) -> Any:
    """Compute the value a node starts with.

    Precedence: a type-compatible ``initial_value`` (boxed or raw), then
    UNDEFINED for optional nodes, then a type-compatible ``schema.default``,
    then the type fallback.

    Examples:
        >>> get_default_value(True, StringSchema(enum=["a", "b"]))
        'a'
    """
    if initial_value is not UNDEFINED:
        value = _from_initial(schema, initial_value)
        if value is not UNDEFINED:
            return value
        logger.debug(
            f"Initial value {initial_value!r} does not match schema type {schema.type!r}"
        )

    if not required:
        return UNDEFINED

    if schema.has_default and _matches_type(schema, schema.default):
        return copy.deepcopy(schema.default)

    if isinstance(schema, ObjectSchema):
        return {value_key(name, sub): UNDEFINED for name, sub in schema.properties.items()}
    if isinstance(schema, ArraySchema):
        return []
    if isinstance(schema, (NumberSchema, StringSchema)):
        if schema.enum:
            return schema.enum[0]
        return 0 if isinstance(schema, NumberSchema) else ""
    if schema.type == SchemaType.BOOLEAN:
        return False
    return None


def toggle_optional(value: Any, schema: Schema, initial_value: Any = UNDEFINED) -> Any:
    """Flip an optional node between absent and materialised."""
    if value is UNDEFINED:
        return get_default_value(True, schema, initial_value)
    return UNDEFINED
