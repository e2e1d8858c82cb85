from __future__ import annotations

import logging
from typing import Annotated, Any, Literal, Mapping, NamedTuple, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    WrapValidator,
    field_validator,
)
from pydantic.alias_generators import to_camel

from .errors import SchemaException
from .values import UNDEFINED

logger = logging.getLogger(__name__)


def _drop_invalid(value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo) -> Any:
    try:
        return handler(value)
    except ValidationError:
        logger.debug(f"Dropping malformed schema keyword {info.field_name}={value!r}")
        return None


Number = Union[int, float]

LenientStr = Annotated[Optional[str], WrapValidator(_drop_invalid)]
LenientBool = Annotated[Optional[bool], WrapValidator(_drop_invalid)]
LenientInt = Annotated[Optional[int], WrapValidator(_drop_invalid)]
LenientNumber = Annotated[Optional[Number], WrapValidator(_drop_invalid)]
LenientList = Annotated[Optional[list[Any]], WrapValidator(_drop_invalid)]
LenientNames = Annotated[Optional[list[str]], WrapValidator(_drop_invalid)]
Condition = Annotated[
    Optional[Annotated[list[Any], Field(min_length=2, max_length=3)]],
    WrapValidator(_drop_invalid),
]


class CommonSchema(BaseModel):
    """Keywords shared by every schema node.

    Attributes accept both the camelCase keys of schema documents and their
    snake_case names. Unknown keywords are kept as extras.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )

    title: LenientStr = None
    description: LenientStr = None
    default: Any = UNDEFINED
    readonly: LenientBool = None
    property_order: Annotated[Optional[Union[int, float, str]], WrapValidator(_drop_invalid)] = None
    required_when: Condition = None
    optional_when: Condition = None
    property_name: LenientStr = None
    one_of: LenientList = None
    format: LenientStr = None

    @property
    def has_default(self) -> bool:
        return self.default is not UNDEFINED


class ObjectSchema(CommonSchema):
    type: Literal["object"] = "object"
    properties: dict[str, Schema] = Field(default_factory=dict)
    required: LenientNames = None
    min_properties: LenientInt = None
    max_properties: LenientInt = None
    additional_properties: LenientBool = None

    @field_validator("properties", mode="before")
    @classmethod
    def drop_malformed_properties(cls, v):
        if not isinstance(v, Mapping):
            return {}
        kept = {}
        for name, sub in v.items():
            if isinstance(sub, (Mapping, BaseModel)):
                kept[name] = sub
            else:
                logger.debug(f"Dropping property {name!r}: schema is not a mapping")
        return kept


class ArraySchema(CommonSchema):
    type: Literal["array"] = "array"
    items: Schema = Field(default_factory=lambda: AnySchema())
    min_items: LenientInt = None
    max_items: LenientInt = None
    unique_items: LenientBool = None
    enum: LenientList = None
    enum_titles: LenientList = None
    table_mode: LenientBool = None

    @field_validator("items", mode="before")
    @classmethod
    def default_items(cls, v):
        if isinstance(v, (Mapping, BaseModel)):
            return v
        return {}


class NumberSchema(CommonSchema):
    type: Literal["number", "integer"] = "number"
    minimum: LenientNumber = None
    exclusive_minimum: LenientNumber = None
    maximum: LenientNumber = None
    exclusive_maximum: LenientNumber = None
    multiple_of: LenientNumber = None
    enum: LenientList = None
    enum_titles: LenientList = None
    step: Annotated[Optional[Union[Number, Literal["any"]]], WrapValidator(_drop_invalid)] = None


class StringSchema(CommonSchema):
    type: Literal["string"] = "string"
    min_length: LenientInt = None
    max_length: LenientInt = None
    pattern: LenientStr = None
    enum: LenientList = None
    enum_titles: LenientList = None
    language: LenientStr = None
    step: Annotated[Optional[Union[Number, Literal["any"]]], WrapValidator(_drop_invalid)] = None


class BooleanSchema(CommonSchema):
    type: Literal["boolean"] = "boolean"


class NullSchema(CommonSchema):
    type: Literal["null"] = "null"


class AnySchema(CommonSchema):
    """Schema without a usable ``type``; unrecognised type names land here too."""

    type: LenientStr = None


_TAGS = ("object", "array", "string", "boolean", "null")


def _schema_tag(raw: Any) -> str | None:
    if isinstance(raw, BaseModel):
        type_ = getattr(raw, "type", None)
    elif isinstance(raw, Mapping):
        type_ = raw.get("type")
    else:
        return None

    if not isinstance(type_, str):
        return "any"
    if type_ in ("number", "integer"):
        return "number"
    if type_ in _TAGS:
        return type_
    return "any"


Schema = Annotated[
    Union[
        Annotated[ObjectSchema, Tag("object")],
        Annotated[ArraySchema, Tag("array")],
        Annotated[NumberSchema, Tag("number")],
        Annotated[StringSchema, Tag("string")],
        Annotated[BooleanSchema, Tag("boolean")],
        Annotated[NullSchema, Tag("null")],
        Annotated[AnySchema, Tag("any")],
    ],
    Discriminator(_schema_tag),
]

ObjectSchema.model_rebuild()
ArraySchema.model_rebuild()

_schema_adapter: TypeAdapter[Schema] = TypeAdapter(Schema)


def parse_schema(raw: Any) -> Schema:
    """Build a schema tree from a pre-parsed schema document."""
    if isinstance(raw, CommonSchema):
        return raw
    if not isinstance(raw, Mapping):
        raise SchemaException(
            f"Schema document must be a mapping, got {type(raw).__name__}"
        )

    try:
        return _schema_adapter.validate_python(raw)
    except ValidationError as e:
        error_lines = ["Schema validation failed:"]
        for error in e.errors():
            loc = " -> ".join(str(item) for item in error["loc"])
            error_lines.append(f"  - {loc}: {error['msg']}")
        raise SchemaException("\n".join(error_lines)) from e


class PropertyEntry(NamedTuple):
    property: str
    schema: Schema


class EnumOption(NamedTuple):
    value: Any
    label: Any


def value_key(property: str, schema: Schema) -> str:
    """Key under which a property is stored in the value tree."""
    return schema.property_name or property


def _order_key(entry: PropertyEntry) -> float:
    order = entry.schema.property_order
    if order is None:
        return 0
    try:
        return float(order)
    except (TypeError, ValueError):
        return 0


def ordered_properties(schema: ObjectSchema) -> list[PropertyEntry]:
    """Properties in display order.

    Declaration order, stably re-sorted by ``propertyOrder`` (missing counts
    as 0).
    """
    entries = [PropertyEntry(name, sub) for name, sub in schema.properties.items()]
    return sorted(entries, key=_order_key)


def get_options(schema: NumberSchema | StringSchema | ArraySchema) -> list[EnumOption]:
    enum_titles = schema.enum_titles or []
    options = []
    for i, value in enumerate(schema.enum or []):
        label = enum_titles[i] if i < len(enum_titles) and isinstance(enum_titles[i], str) else value
        options.append(EnumOption(value=value, label=label))
    return options
