"""Utility functions for schemaform"""

import json
import logging
import math
from pathlib import Path
from typing import Any, Sequence

from .values import UNDEFINED, is_number

logger = logging.getLogger(__name__)


def canonicalify(p: Path | str) -> Path:
    return Path(p).expanduser().resolve()


def ensure_path(p: Path | str) -> Path:
    path = canonicalify(p)
    path.mkdir(parents=True, exist_ok=True)
    return path


def stringify(value: Any) -> str:
    """Render a value the way the editor displays it.

    Examples:
        >>> stringify(5.0)
        '5'
        >>> stringify(True)
        'true'
        >>> stringify(None)
        'null'
    """
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, dict)):
        return json.dumps(value, ensure_ascii=False, default=stringify)
    return str(value)


def strict_equals(left: Any, right: Any) -> bool:
    """Scalar equality that never treats a boolean as a number."""
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right
    if is_number(left) and is_number(right):
        return left == right
    if left is None or left is UNDEFINED:
        return left is right
    if type(left) is not type(right):
        return False
    return left == right


def index_of(items: Sequence[Any], item: Any) -> int:
    """Position of ``item`` in ``items`` under :func:`strict_equals`, or -1."""
    for i, candidate in enumerate(items):
        if strict_equals(candidate, item):
            return i
    return -1
