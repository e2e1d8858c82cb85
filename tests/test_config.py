"""Configuration module unit tests"""

import os
import tempfile
from pathlib import Path

import pytest

from schemaform.config import Config
from schemaform.errors import ConfigException
from schemaform.locale import DEFAULT_LOCALE


@pytest.fixture
def temp_config_file():
    """Create a temporary config file"""
    fd, path = tempfile.mkstemp(suffix=".toml")
    os.close(fd)
    yield path
    # Cleanup
    os.unlink(path)


def test_defaults(temp_config_file):
    """Test: An empty file yields the default configuration"""
    Path(temp_config_file).write_text("")

    config = Config.load_from_file(temp_config_file)

    assert config.language == "en"
    assert config.filter_threshold == 6
    assert config.title_max_length == 33
    assert config.title_truncate_length == 30
    assert config.locale_overrides == {}
    assert config.build_locale() == DEFAULT_LOCALE


def test_load_from_file(temp_config_file):
    """Test: Values and locale overrides are read from TOML"""
    content = """
filter_threshold = 3
title_max_length = 20
title_truncate_length = 10

[locale_overrides.error]
minLength = "Need {0} characters"

[locale_overrides.info]
search = "Find"
"""
    Path(temp_config_file).write_text(content)

    config = Config.load_from_file(temp_config_file)
    locale = config.build_locale()

    assert config.filter_threshold == 3
    assert config.truncate_options() == {"max_length": 20, "truncate_length": 10}
    assert locale.error.min_length == "Need {0} characters"
    assert locale.info.search == "Find"
    assert locale.error.max_length == DEFAULT_LOCALE.error.max_length


def test_env_overrides_file_config(temp_config_file, monkeypatch):
    """Test: Environment variables override file config values"""
    Path(temp_config_file).write_text("filter_threshold = 3\n")
    monkeypatch.setenv("SCHEMAFORM_FILTER_THRESHOLD", "10")

    config = Config.load_from_file(temp_config_file)

    assert config.filter_threshold == 10


def test_missing_file():
    with pytest.raises(ConfigException, match="not found"):
        Config.load_from_file("/nonexistent/schemaform.toml")


def test_invalid_threshold(temp_config_file):
    Path(temp_config_file).write_text("filter_threshold = 0\n")

    with pytest.raises(ConfigException) as exc_info:
        Config.load_from_file(temp_config_file)

    assert "filter_threshold" in str(exc_info.value)


def test_truncate_length_must_be_below_max_length(temp_config_file):
    Path(temp_config_file).write_text("title_max_length = 10\ntitle_truncate_length = 10\n")

    with pytest.raises(ConfigException, match="title_truncate_length"):
        Config.load_from_file(temp_config_file)


def test_unknown_locale_group(temp_config_file):
    Path(temp_config_file).write_text('[locale_overrides.theme]\ncard = "w-full"\n')

    with pytest.raises(ConfigException, match="Unknown locale groups: theme"):
        Config.load_from_file(temp_config_file)


def test_unknown_locale_message(temp_config_file):
    Path(temp_config_file).write_text('[locale_overrides.error]\nminLenght = "too short"\n')

    with pytest.raises(ConfigException, match="Unknown error messages: minLenght"):
        Config.load_from_file(temp_config_file)


def test_build_locale_uses_language_catalogue():
    locale = Config(language="zh", locale_overrides={"info": {"search": "查找"}}).build_locale()

    assert locale.error.minimum == "值必须 >= {0}。"
    assert locale.info.search == "查找"
