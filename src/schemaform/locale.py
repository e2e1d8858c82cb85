"""Locale tables consumed by the error evaluators.

Locales are passed explicitly into every evaluator. :data:`DEFAULT_LOCALE`
is the single process-wide fallback, used when a caller passes ``None``.
"""

from __future__ import annotations

from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .utils import stringify


class _LocaleGroup(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ButtonMessages(_LocaleGroup):
    collapse: str = "Collapse"
    expand: str = "Expand"
    add: str = "Add"
    delete: str = "Delete"


class ErrorMessages(_LocaleGroup):
    min_length: str = "Value must be at least {0} characters long."
    max_length: str = "Value must be at most {0} characters long."
    pattern: str = "Value doesn't match the pattern {0}."
    minimum: str = "Value must be >= {0}."
    maximum: str = "Value must be <= {0}."
    larger_than: str = "Value must be > {0}."
    smaller_than: str = "Value must be < {0}."
    min_items: str = "The length of the array must be >= {0}."
    max_items: str = "The length of the array must be <= {0}."
    unique_items: str = "The item in {0} and {1} must not be same."
    multiple_of: str = "Value must be multiple value of {0}."
    min_properties: str = "Properties count must be >= {0}."
    max_properties: str = "Properties count must be <= {0}."


class InfoMessages(_LocaleGroup):
    not_exists: str = "Not defined"
    true: str = "True"
    false: str = "False"
    search: str = "Search"


class Locale(_LocaleGroup):
    button: ButtonMessages = Field(default_factory=ButtonMessages)
    error: ErrorMessages = Field(default_factory=ErrorMessages)
    info: InfoMessages = Field(default_factory=InfoMessages)

    def message(self, key: str, *operands: Any) -> str:
        """Format the error template ``key`` (snake_case or camelCase)."""
        name = key if key in ErrorMessages.model_fields else _snake(key)
        return format_message(getattr(self.error, name), *operands)

    def merged(self, overrides: dict[str, dict[str, str]]) -> "Locale":
        """Return a copy with the given groups partially replaced."""
        data = self.model_dump()
        for group, messages in overrides.items():
            data.setdefault(_snake(group), {}).update(
                {_snake(k): v for k, v in messages.items()}
            )
        return Locale.model_validate(data)


def _snake(name: str) -> str:
    return "".join(f"_{c.lower()}" if c.isupper() else c for c in name)


def format_message(template: str, *operands: Any) -> str:
    """Fill the positional placeholders ``{0}``, ``{1}``, ... of a template.

    Only the first occurrence of each placeholder is replaced.
    """
    for i, operand in enumerate(operands):
        template = template.replace(f"{{{i}}}", stringify(operand), 1)
    return template


MESSAGE_GROUPS: dict[str, type[_LocaleGroup]] = {
    "button": ButtonMessages,
    "error": ErrorMessages,
    "info": InfoMessages,
}


def unknown_message_names(group: str, names: Iterable[str]) -> list[str]:
    """Names (snake_case or camelCase) that are not messages of ``group``."""
    fields = MESSAGE_GROUPS[group].model_fields
    return [name for name in names if _snake(name) not in fields]


DEFAULT_LOCALE = Locale()


def get_locale(locale: Locale | None) -> Locale:
    return locale or DEFAULT_LOCALE
