"""Configuration file loading and validation."""

import logging
from pathlib import Path

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from .consts import (
    ENV_NESTED_DELIMITER,
    ENV_PREFIX,
    LOG_FILE_DEFAULT,
    MIN_ITEM_COUNT_IF_NEED_FILTER,
    TITLE_MAX_LENGTH,
    TITLE_TRUNCATE_LENGTH,
)
from .errors import ConfigException
from .i18n import load_locale
from .locale import MESSAGE_GROUPS, Locale, unknown_message_names

logger = logging.getLogger(__name__)

LOCALE_GROUPS = tuple(MESSAGE_GROUPS)


class Config(BaseSettings):
    """Engine configuration."""

    language: str = Field(default="en")
    log_file: str = Field(default=LOG_FILE_DEFAULT)
    filter_threshold: int = Field(default=MIN_ITEM_COUNT_IF_NEED_FILTER, ge=1)
    title_max_length: int = Field(default=TITLE_MAX_LENGTH, ge=1)
    title_truncate_length: int = Field(default=TITLE_TRUNCATE_LENGTH, ge=1)
    locale_overrides: dict[str, dict[str, str]] = Field(default_factory=dict)

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter=ENV_NESTED_DELIMITER,
    )

    @field_validator("locale_overrides")
    @classmethod
    def validate_locale_groups(cls, v: dict[str, dict[str, str]]) -> dict[str, dict[str, str]]:
        unknown = [group for group in v if group not in LOCALE_GROUPS]
        if unknown:
            raise ValueError(
                f"Unknown locale groups: {', '.join(unknown)}. "
                f"Supported groups: {', '.join(LOCALE_GROUPS)}"
            )
        for group, messages in v.items():
            misspelled = unknown_message_names(group, messages)
            if misspelled:
                raise ValueError(
                    f"Unknown {group} messages: {', '.join(misspelled)}"
                )
        return v

    @model_validator(mode="after")
    def validate_title_lengths(self) -> "Config":
        if self.title_truncate_length >= self.title_max_length:
            raise ValueError(
                "title_truncate_length must be smaller than title_max_length"
            )
        return self

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )

    @classmethod
    def load_from_file(cls, config_path: str) -> "Config":
        """Load configuration from specified path."""
        path = Path(config_path)
        if not path.exists():
            raise ConfigException(f"Configuration file not found: {config_path}")

        class _Config(cls):
            model_config = SettingsConfigDict(
                toml_file=str(path),
                env_prefix=ENV_PREFIX,
                env_nested_delimiter=ENV_NESTED_DELIMITER,
            )

        try:
            return _Config()
        except ValidationError as e:
            error_lines = ["Configuration validation failed:"]
            for error in e.errors():
                loc = " -> ".join(str(item) for item in error["loc"])
                error_lines.append(f"  - {loc}: {error['msg']}")
            raise ConfigException("\n".join(error_lines)) from e

    def build_locale(self) -> Locale:
        """Locale for ``language`` with ``locale_overrides`` applied."""
        locale = load_locale(self.language)
        if self.locale_overrides:
            locale = locale.merged(self.locale_overrides)
        return locale

    def truncate_options(self) -> dict[str, int]:
        """Keyword arguments for the title helpers."""
        return {
            "max_length": self.title_max_length,
            "truncate_length": self.title_truncate_length,
        }
