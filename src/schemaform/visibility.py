from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from .enums import ConditionOperator, Visibility
from .schema import ObjectSchema
from .utils import index_of, strict_equals
from .values import UNDEFINED, from_host, unbox

logger = logging.getLogger(__name__)


def _evaluate(condition: Sequence[Any], value: Mapping, schema: ObjectSchema) -> bool | None:
    """Evaluate ``[sibling, operator, operand]`` against the sibling's value.

    Returns None when the rule cannot be evaluated: the sibling is not a
    declared property or the operator is not recognised.
    """
    left, operator = condition[0], condition[1]
    operand = condition[2] if len(condition) > 2 else UNDEFINED
    if not isinstance(left, str) or left not in schema.properties:
        return None

    sibling = unbox(from_host(value.get(left, UNDEFINED), schema.properties[left]))

    if operator in (ConditionOperator.STRICT_EQUAL, ConditionOperator.EQUAL):
        return strict_equals(sibling, operand)
    if operator == ConditionOperator.IN:
        return isinstance(operand, (list, tuple)) and index_of(operand, sibling) != -1
    if operator == ConditionOperator.IS_UNDEFINED:
        return sibling is UNDEFINED

    logger.debug(f"Unrecognised condition operator {operator!r} on {left!r}")
    return None


def is_required(
    required: Sequence[str] | None,
    value: Any,
    schema: ObjectSchema,
    property: str,
) -> Visibility:
    """Decide whether ``property`` of an object is required, optional or hidden.

    An explicit ``required`` entry always wins. Otherwise ``requiredWhen``
    decides between REQUIRED and HIDDEN, then ``optionalWhen`` between
    OPTIONAL and HIDDEN. A rule that cannot be evaluated falls through to the
    next one; with no applicable rule the property is OPTIONAL.
    """
    if required and property in required:
        return Visibility.REQUIRED

    if schema is None:
        return Visibility.OPTIONAL
    value = unbox(from_host(value, schema))
    if not isinstance(value, Mapping):
        return Visibility.OPTIONAL
    property_schema = schema.properties.get(property)
    if property_schema is None:
        return Visibility.OPTIONAL

    if property_schema.required_when:
        result = _evaluate(property_schema.required_when, value, schema)
        if result is not None:
            return Visibility.REQUIRED if result else Visibility.HIDDEN

    if property_schema.optional_when:
        result = _evaluate(property_schema.optional_when, value, schema)
        if result is not None:
            return Visibility.OPTIONAL if result else Visibility.HIDDEN

    return Visibility.OPTIONAL
