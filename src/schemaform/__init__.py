from __future__ import annotations

from .defaults import get_default_value, toggle_optional
from .enums import ConditionOperator, SchemaType, Visibility
from .equality import is_same
from .errors import ConfigException, InvalidPatternError, SchemaException, SchemaFormException
from .filters import filter_array, filter_object, needs_filter
from .hints import get_number_step, is_base64_image, is_image_url
from .locale import DEFAULT_LOCALE, Locale, format_message, get_locale
from .schema import (
    AnySchema,
    ArraySchema,
    BooleanSchema,
    EnumOption,
    NullSchema,
    NumberSchema,
    ObjectSchema,
    PropertyEntry,
    Schema,
    StringSchema,
    get_options,
    ordered_properties,
    parse_schema,
)
from .titles import find_title, find_title_from_schema, get_title, truncate_title
from .validation import (
    get_error_message,
    get_error_message_of_array,
    get_error_message_of_number,
    get_error_message_of_object,
    get_error_message_of_string,
    record_invalid,
)
from .values import UNDEFINED, BoxedValue, from_host, strip_undefined, unbox
from .visibility import is_required
from .walker import materialize_defaults, resolve_visibility, validate_tree

__all__ = [
    "AnySchema",
    "ArraySchema",
    "BooleanSchema",
    "BoxedValue",
    "ConditionOperator",
    "ConfigException",
    "DEFAULT_LOCALE",
    "EnumOption",
    "InvalidPatternError",
    "Locale",
    "NullSchema",
    "NumberSchema",
    "ObjectSchema",
    "PropertyEntry",
    "Schema",
    "SchemaException",
    "SchemaFormException",
    "SchemaType",
    "StringSchema",
    "UNDEFINED",
    "Visibility",
    "filter_array",
    "filter_object",
    "find_title",
    "find_title_from_schema",
    "format_message",
    "from_host",
    "get_default_value",
    "get_error_message",
    "get_error_message_of_array",
    "get_error_message_of_number",
    "get_error_message_of_object",
    "get_error_message_of_string",
    "get_locale",
    "get_number_step",
    "get_options",
    "get_title",
    "is_base64_image",
    "is_image_url",
    "is_required",
    "is_same",
    "materialize_defaults",
    "needs_filter",
    "ordered_properties",
    "parse_schema",
    "record_invalid",
    "resolve_visibility",
    "strip_undefined",
    "toggle_optional",
    "truncate_title",
    "unbox",
    "validate_tree",
]
