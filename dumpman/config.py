import logging
import re
from functools import lru_cache
from pathlib import PurePath
from typing import List, Optional

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError


class Settings(BaseSettings):
    """
    Centralized application configuration with type validation.
    Values are read from DUMPMAN_* environment variables or a local .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="DUMPMAN_", env_file=".env", extra="ignore"
    )

    # --- General Settings ---
    LOG_LEVEL: str = "WARNING"
    LOG_FILE: Optional[str] = None

    # --- Camera Layout ---
    CONTENT_PATH: str = "DCIM/100CANON"
    MEDIA_PATTERN: str = r"MVI_(\d{4})\.MOV"

    # --- Output Settings ---
    IGNORED_OUTPUT_ENTRIES: List[str] = [".DS_Store"]

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown LOG_LEVEL: {value}")
        return level

    @field_validator("MEDIA_PATTERN")
    @classmethod
    def validate_media_pattern(cls, value: str) -> str:
        try:
            compiled = re.compile(value)
        except re.error as e:
            raise ValueError(f"MEDIA_PATTERN is not a valid regex: {e}") from e
        if compiled.groups != 1:
            raise ValueError(
                "MEDIA_PATTERN must have exactly one capture group for the file number"
            )
        return value

    @field_validator("CONTENT_PATH")
    @classmethod
    def validate_content_path(cls, value: str) -> str:
        if PurePath(value).is_absolute():
            raise ValueError("CONTENT_PATH must be relative to the root")
        return value

    @property
    def content_parts(self) -> tuple:
        return PurePath(self.CONTENT_PATH).parts

    @property
    def media_regex(self) -> re.Pattern:
        return re.compile(self.MEDIA_PATTERN)


@lru_cache()
def get_settings() -> Settings:
    """
    Returns a cached instance of the application settings.
    The first call to this function will initialize the settings.
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
