"""Configuration management for defschema."""

import json
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.common import DateStrategy, EffectStrategy, MapStrategy, PipeStrategy, RefStrategy, Target


class ConversionOptions(BaseModel): # Nested under Config (BaseSettings)
    """Options threaded through every converter call of one conversion run."""

    error_messages: bool = Field(default=False, description="Emit per-constraint custom messages under 'errorMessage'.")
    effect_strategy: EffectStrategy = Field(default=EffectStrategy.INPUT, description="How transforms are described: 'input' reuses the input schema, 'any' emits an untyped schema.")
    ref_strategy: RefStrategy = Field(default=RefStrategy.ROOT, description="How revisited definitions are emitted: 'root' or 'relative' $ref, 'none' re-derives, 'seen' emits an empty schema.")
    target: Target = Field(default=Target.JSON_SCHEMA_7, description="Output dialect.")
    definition_path: str = Field(default="definitions", min_length=1, description="Key under which named definitions are emitted.")
    base_path: List[str] = Field(default_factory=lambda: ["#"], min_length=1, description="JSON pointer segments of the document root.")
    pipe_strategy: PipeStrategy = Field(default=PipeStrategy.ALL, description="How pipelines are described.")
    date_strategy: DateStrategy = Field(default=DateStrategy.FORMAT_DATE_TIME, description="How dates are described.")
    map_strategy: MapStrategy = Field(default=MapStrategy.ENTRIES, description="How maps are described: array of entries or a record.")

    model_config = {"use_enum_values": True, "validate_default": True}


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="json", description="Log format")
    file: Optional[Path] = Field(default=None, description="Log file path")


class Config(BaseSettings):
    """Main configuration for defschema. Loads from environment variables prefixed with DEFSCHEMA_."""

    model_config = SettingsConfigDict(
        env_prefix='DEFSCHEMA_',
        env_nested_delimiter='__', # e.g., DEFSCHEMA_CONVERSION__ERROR_MESSAGES
        extra='ignore',
        env_file='.env',
        env_file_encoding='utf-8'
    )

    conversion: ConversionOptions = Field(default_factory=ConversionOptions)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    app_version: str = Field(default="0.1.0", description="Version of the defschema software.")

    @classmethod
    def from_file(cls, file_path: Path) -> "Config":
        """Create configuration strictly from a JSON file.
        This does not layer with environment variables.
        """
        with open(file_path) as f:
            config_data = json.load(f)
        return cls.model_validate(config_data)
