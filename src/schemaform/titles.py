"""Display labels for object and array entries."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from .consts import TITLE_ELLIPSIS, TITLE_MAX_LENGTH, TITLE_TRUNCATE_LENGTH
from .schema import NumberSchema, ObjectSchema, PropertyEntry, StringSchema
from .utils import index_of, stringify
from .values import UNDEFINED


def truncate_title(
    title: str,
    max_length: int = TITLE_MAX_LENGTH,
    truncate_length: int = TITLE_TRUNCATE_LENGTH,
) -> str:
    """Shorten titles longer than ``max_length``.

    Examples:
        >>> truncate_title("a" * 40)
        'aaaaaaaaaaaaaaaaaaaaaaaaaaaaaa...'
    """
    if len(title) > max_length:
        return title[:truncate_length] + TITLE_ELLIPSIS
    return title


def _enum_title(raw: Any, schema: Any) -> str | None:
    if not isinstance(schema, (NumberSchema, StringSchema)):
        return None
    if not schema.enum or not schema.enum_titles:
        return None
    index = index_of(schema.enum, raw)
    if index == -1 or index >= len(schema.enum_titles):
        return None
    title = schema.enum_titles[index]
    if isinstance(title, str) and title:
        return title
    return None


def find_title(value: Mapping | None, properties: Iterable[PropertyEntry], **truncate) -> str | None:
    """Derive a label for an object entry from its own property values.

    ``properties`` is tried in order. A property whose schema maps the value
    to a non-empty enum title yields that title, otherwise a non-empty string
    value is used as is. Returns None when no candidate produces a title.
    """
    if not isinstance(value, Mapping):
        return None

    for property, schema in properties or []:
        raw = value.get(property, UNDEFINED)
        title = _enum_title(raw, schema)
        if title is None and isinstance(raw, str) and raw:
            title = raw
        if title is not None:
            return truncate_title(title, **truncate)
    return None


def find_title_from_schema(value: Mapping | None, schema: ObjectSchema, **truncate) -> str | None:
    """First non-empty string among the object's declared properties."""
    if not isinstance(value, Mapping):
        return None
    for property in schema.properties:
        raw = value.get(property, UNDEFINED)
        if isinstance(raw, str) and raw:
            return truncate_title(raw, **truncate)
    return None


def get_title(*titles: Any) -> str:
    for title in titles:
        if title is None or title is UNDEFINED or title == "":
            continue
        return stringify(title)
    return ""
