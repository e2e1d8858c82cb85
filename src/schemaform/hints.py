"""Display hints the editor derives from values and schemas."""

from __future__ import annotations

from typing import Any

from .consts import (
    BASE64_IMAGE_MARKER,
    BASE64_IMAGE_PREFIX,
    HTTP_PREFIX,
    HTTPS_PREFIX,
    IMAGE_EXTENSIONS,
)
from .enums import SchemaType
from .schema import NumberSchema


def is_base64_image(value: Any) -> bool:
    if not isinstance(value, str) or not value:
        return False
    return value.startswith(BASE64_IMAGE_PREFIX) and BASE64_IMAGE_MARKER in value


def is_image_url(value: Any) -> bool:
    """Whether ``value`` is an http(s) URL ending in a known image extension.

    Examples:
        >>> is_image_url("https://example.com/logo.png")
        True
        >>> is_image_url("ftp://example.com/logo.png")
        False
    """
    if not isinstance(value, str) or len(value) <= len(HTTPS_PREFIX):
        return False
    if not value.startswith((HTTP_PREFIX, HTTPS_PREFIX)):
        return False
    return value[-4:] in IMAGE_EXTENSIONS


def get_number_step(schema: NumberSchema) -> int | float | str | None:
    if schema.step is not None:
        return schema.step
    return "any" if schema.type == SchemaType.NUMBER else None
