"""Engine configuration from environment variables via pydantic-settings.

Variables use the ``CALCENGINE_`` prefix (``CALCENGINE_INPUT_CAP=16``) and
may also come from a ``.env`` file. ``get_settings()`` is cached, so one
settings instance is shared per process unless an engine is given its own.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CalculatorSettings(BaseSettings):
    """Calculator engine settings."""

    model_config = SettingsConfigDict(env_prefix="CALCENGINE_", env_file=".env", extra="ignore")

    # Maximum characters a user may type into one entry
    input_cap: int = Field(default=12, ge=1)

    # Characters the display surface can show
    display_length: int = Field(default=12, ge=1)

    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> CalculatorSettings:
    return CalculatorSettings()
