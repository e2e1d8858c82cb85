"""Whole-document evaluation.

The editor evaluates nodes one at a time as they are rendered; these helpers
apply the same per-node operations to every visible node of a document and
key the results by dot path. The root is ``""``; object keys containing dots
or backslashes are escaped (``a\\.b``), array items use their index.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .defaults import get_default_value
from .enums import Visibility
from .locale import Locale, get_locale
from .schema import ArraySchema, ObjectSchema, Schema, ordered_properties, parse_schema, value_key
from .validation import get_error_message
from .values import UNDEFINED, from_host, unbox
from .visibility import is_required

logger = logging.getLogger(__name__)


def escape_path_segment(segment: Any) -> str:
    if not isinstance(segment, str):
        segment = str(segment)
    return segment.replace("\\", "\\\\").replace(".", "\\.")


def join_path(parent: str, segment: Any) -> str:
    segment = escape_path_segment(segment)
    return f"{parent}.{segment}" if parent else segment


def _visible_children(schema: ObjectSchema, value: Mapping):
    for entry in ordered_properties(schema):
        visibility = is_required(schema.required, value, schema, entry.property)
        yield entry, value_key(entry.property, entry.schema), visibility


def validate_tree(schema: Schema | Mapping, value: Any, locale: Locale | None = None, required: bool = True) -> dict[str, str]:
    """Collect the error message of every visible node that has one.

    Raises:
        SchemaException: ``schema`` is not a schema document
        InvalidPatternError: a string schema carries an invalid pattern
    """
    schema = parse_schema(schema)
    messages: dict[str, str] = {}
    _collect_errors(schema, from_host(value, schema), "", required, get_locale(locale), messages)
    return messages


def _collect_errors(schema: Schema, value: Any, path: str, required: bool, locale: Locale, messages: dict[str, str]) -> None:
    value = unbox(value)
    message = get_error_message(value, schema, locale, required)
    if message:
        messages[path] = message

    if isinstance(schema, ObjectSchema) and isinstance(value, Mapping):
        for entry, key, visibility in _visible_children(schema, value):
            if visibility is Visibility.HIDDEN:
                continue
            _collect_errors(
                entry.schema,
                value.get(key, UNDEFINED),
                join_path(path, key),
                visibility is Visibility.REQUIRED,
                locale,
                messages,
            )
    elif isinstance(schema, ArraySchema) and isinstance(value, list):
        for i, item in enumerate(value):
            _collect_errors(schema.items, item, join_path(path, i), True, locale, messages)


def resolve_visibility(schema: Schema | Mapping, value: Any) -> dict[str, Visibility]:
    """Visibility of every object property reachable through visible nodes."""
    schema = parse_schema(schema)
    result: dict[str, Visibility] = {}
    _collect_visibility(schema, from_host(value, schema), "", result)
    return result


def _collect_visibility(schema: Schema, value: Any, path: str, result: dict[str, Visibility]) -> None:
    value = unbox(value)
    if isinstance(schema, ObjectSchema) and isinstance(value, Mapping):
        for entry, key, visibility in _visible_children(schema, value):
            child_path = join_path(path, key)
            result[child_path] = visibility
            if visibility is not Visibility.HIDDEN:
                _collect_visibility(entry.schema, value.get(key, UNDEFINED), child_path, result)
    elif isinstance(schema, ArraySchema) and isinstance(value, list):
        for i, item in enumerate(value):
            _collect_visibility(schema.items, item, join_path(path, i), result)


def materialize_defaults(schema: Schema | Mapping, value: Any = UNDEFINED, required: bool = True) -> Any:
    """Fill absent required nodes with their default values.

    Present values are kept even when they do not match their schema type;
    optional absent properties stay UNDEFINED and hidden ones are left alone.
    """
    schema = parse_schema(schema)
    return _materialize(schema, from_host(value, schema), required)


def _materialize(schema: Schema, value: Any, required: bool) -> Any:
    if value is UNDEFINED:
        value = get_default_value(required, schema)
    else:
        value = unbox(value)

    if isinstance(schema, ObjectSchema) and isinstance(value, Mapping):
        value = dict(value)
        for entry, key, visibility in _visible_children(schema, value):
            if visibility is Visibility.HIDDEN:
                continue
            current = value.get(key, UNDEFINED)
            child = _materialize(entry.schema, current, visibility is Visibility.REQUIRED)
            if child is UNDEFINED and key not in value:
                continue
            value[key] = child
    elif isinstance(schema, ArraySchema) and isinstance(value, list):
        value = [_materialize(schema.items, item, True) for item in value]
    return value
