"""Enumeration type definitions"""

from __future__ import annotations

from enum import Enum


class SchemaType(str, Enum):
    OBJECT = "object"
    ARRAY = "array"
    NUMBER = "number"
    INTEGER = "integer"
    STRING = "string"
    BOOLEAN = "boolean"
    NULL = "null"


class Visibility(str, Enum):
    """Three-state visibility of an object property in the editor."""

    REQUIRED = "required"
    OPTIONAL = "optional"
    HIDDEN = "hidden"

    @classmethod
    def from_flag(cls, flag: bool | None) -> "Visibility":
        """Convert the legacy ``True`` / ``None`` / ``False`` form."""
        if flag is True:
            return cls.REQUIRED
        if flag is False:
            return cls.HIDDEN
        return cls.OPTIONAL

    @property
    def flag(self) -> bool | None:
        if self is Visibility.REQUIRED:
            return True
        if self is Visibility.HIDDEN:
            return False
        return None


class ConditionOperator(str, Enum):
    """Operators understood by ``requiredWhen`` / ``optionalWhen``."""

    STRICT_EQUAL = "==="
    EQUAL = "equal"
    IN = "in"
    IS_UNDEFINED = "isUndefined"
