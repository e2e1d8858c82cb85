"""Structural equality over value trees."""

from __future__ import annotations

from typing import Any, Mapping

from .utils import strict_equals
from .values import UNDEFINED


def _is_container(value: Any) -> bool:
    return isinstance(value, (list, tuple, Mapping))


def is_same(value1: Any, value2: Any) -> bool:
    """Deep equality used to detect duplicate array items.

    Mappings compare by key count, then by the keys of ``value1`` only, so a
    key missing from ``value2`` reads as UNDEFINED there. This is not
    symmetric for mappings holding UNDEFINED members.

    Examples:
        >>> is_same([1, 2], [1, 2])
        True
        >>> is_same({"a": 1}, {"a": 1, "b": 2})
        False
    """
    if not _is_container(value1):
        return strict_equals(value1, value2)
    if not _is_container(value2):
        return False

    if isinstance(value1, (list, tuple)):
        if not isinstance(value2, (list, tuple)) or len(value1) != len(value2):
            return False
        return all(is_same(a, b) for a, b in zip(value1, value2))

    if isinstance(value2, (list, tuple)) or len(value1) != len(value2):
        return False
    for key, item in value1.items():
        if not is_same(item, value2.get(key, UNDEFINED)):
            return False
    return True
