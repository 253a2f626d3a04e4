"""Tests for configuration module."""

import json
import os

import pytest
from pydantic import ValidationError

from defschema.config import Config, ConversionOptions


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    # Keep a developer's .env or exported variables out of the defaults
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith("DEFSCHEMA_"):
            monkeypatch.delenv(name)


def test_config_defaults():
    """Test default configuration values."""
    config = Config()

    assert config.conversion.error_messages is False
    assert config.conversion.effect_strategy == "input"
    assert config.conversion.ref_strategy == "root"
    assert config.conversion.target == "jsonSchema7"
    assert config.conversion.definition_path == "definitions"
    assert config.conversion.base_path == ["#"]
    assert config.conversion.pipe_strategy == "all"
    assert config.conversion.date_strategy == "format:date-time"
    assert config.conversion.map_strategy == "entries"

    assert config.logging.level == "INFO"
    assert config.logging.format == "json"
    assert config.logging.file is None

    assert config.app_version == "0.1.0"


def test_config_from_env(monkeypatch):
    """Test loading configuration from environment variables."""
    monkeypatch.setenv("DEFSCHEMA_LOGGING__LEVEL", "DEBUG")
    monkeypatch.setenv("DEFSCHEMA_CONVERSION__ERROR_MESSAGES", "true")
    monkeypatch.setenv("DEFSCHEMA_CONVERSION__TARGET", "openApi3")
    monkeypatch.setenv("DEFSCHEMA_CONVERSION__REF_STRATEGY", "relative")

    config = Config()

    assert config.logging.level == "DEBUG"
    assert config.conversion.error_messages is True
    assert config.conversion.target == "openApi3"
    assert config.conversion.ref_strategy == "relative"


def test_config_rejects_unknown_strategy(monkeypatch):
    monkeypatch.setenv("DEFSCHEMA_CONVERSION__EFFECT_STRATEGY", "output")
    with pytest.raises(ValidationError):
        Config()


def test_config_from_file(tmp_path):
    """Test loading configuration from a JSON file."""
    config_file = tmp_path / "defschema.json"
    config_file.write_text(json.dumps({
        "conversion": {"error_messages": True, "definition_path": "$defs"},
        "logging": {"level": "WARNING", "format": "console"},
    }))

    config = Config.from_file(config_file)

    assert config.conversion.error_messages is True
    assert config.conversion.definition_path == "$defs"
    assert config.conversion.ref_strategy == "root"
    assert config.logging.level == "WARNING"
    assert config.logging.format == "console"


def test_conversion_options_validation():
    with pytest.raises(ValidationError):
        ConversionOptions(target="jsonSchema2019")
    with pytest.raises(ValidationError):
        ConversionOptions(definition_path="")
    with pytest.raises(ValidationError):
        ConversionOptions(base_path=[])

    options = ConversionOptions(date_strategy="integer", map_strategy="record")
    assert options.date_strategy == "integer"
    assert options.map_strategy == "record"
