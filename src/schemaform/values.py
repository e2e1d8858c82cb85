"""Value tree model shared by every resolver.

A value is a ``dict``, ``list``, ``int``/``float``, ``bool``, ``str``, ``None``
(null) or :data:`UNDEFINED` (absent). Hosts sometimes hand over values wrapped
as ``{"value": V, ...}``; :func:`from_host` turns those into
:class:`BoxedValue` once so the resolvers never re-detect the shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from .enums import SchemaType


class _Undefined:
    """Marker for an absent value, distinct from ``None`` (null)."""

    _instance: "_Undefined | None" = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED: Any = _Undefined()


@dataclass(frozen=True)
class BoxedValue:
    """A value delivered together with host metadata."""

    value: Any = UNDEFINED
    meta: dict[str, Any] = field(default_factory=dict)


def is_undefined(value: Any) -> bool:
    return value is UNDEFINED


def is_number(value: Any) -> bool:
    """True for ints and floats but not for booleans."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


_SCALAR_TYPES = (
    SchemaType.NUMBER,
    SchemaType.INTEGER,
    SchemaType.STRING,
    SchemaType.BOOLEAN,
    SchemaType.NULL,
)


def _value_keys(schema: Any) -> dict[str, Any]:
    return {sub.property_name or name: sub for name, sub in schema.properties.items()}


def _is_boxed(raw: Any, schema: Any) -> bool:
    """Whether ``raw`` is the ``{"value": V, ...}`` host shape for ``schema``.

    Without a schema every mapping carrying a ``value`` key is boxed. An
    object schema only boxes a mapping whose ``value`` is itself a mapping and
    never when ``value`` is one of its own properties. Untyped schemas take
    mappings as they are.
    """
    if not isinstance(raw, Mapping) or "value" not in raw:
        return False
    if schema is None:
        return True
    if schema.type == SchemaType.OBJECT:
        return "value" not in _value_keys(schema) and isinstance(raw["value"], Mapping)
    return schema.type == SchemaType.ARRAY or schema.type in _SCALAR_TYPES


def _resolve_children(raw: Any, schema: Any) -> Any:
    if isinstance(raw, Mapping):
        if schema is None:
            return {k: from_host(v) for k, v in raw.items()}
        if schema.type != SchemaType.OBJECT:
            return raw
        subs = _value_keys(schema)
        return {k: from_host(v, subs[k]) if k in subs else v for k, v in raw.items()}
    if isinstance(raw, list):
        if schema is None:
            return [from_host(v) for v in raw]
        if schema.type != SchemaType.ARRAY:
            return raw
        return [from_host(v, schema.items) for v in raw]
    return raw


def from_host(raw: Any, schema: Any = None) -> Any:
    """Resolve the boxed shape of a host value tree.

    Every node in the ``{"value": V, ...}`` shape becomes a
    :class:`BoxedValue` whose remaining keys are kept as metadata; children
    are resolved against their own schema. When ``schema`` is given, boxing
    follows :func:`_is_boxed`. Values already resolved are returned unchanged.

    Examples:
        >>> from_host({"name": {"value": "ab"}})
        {'name': BoxedValue(value='ab', meta={})}
    """
    if isinstance(raw, BoxedValue) or raw is UNDEFINED:
        return raw
    if _is_boxed(raw, schema):
        meta = {k: v for k, v in raw.items() if k != "value"}
        return BoxedValue(value=_resolve_children(raw["value"], schema), meta=meta)
    return _resolve_children(raw, schema)


def unbox(value: Any) -> Any:
    if isinstance(value, BoxedValue):
        return value.value
    return value


def strip_undefined(value: Any) -> Any:
    """Copy of a value tree without UNDEFINED members and without boxes.

    Used before handing a tree to a serializer.
    """
    value = unbox(value)
    if isinstance(value, Mapping):
        return {
            k: strip_undefined(v) for k, v in value.items() if unbox(v) is not UNDEFINED
        }
    if isinstance(value, (list, tuple)):
        return [None if unbox(v) is UNDEFINED else strip_undefined(v) for v in value]
    return value
