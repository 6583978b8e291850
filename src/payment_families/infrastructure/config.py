from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from PAYMENT_FAMILIES_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PAYMENT_FAMILIES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Family selection
    default_family: str = Field(
        default="pagseguro",
        min_length=1,
        description="Family used when none is named explicitly",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_format: Literal["standard", "verbose"] = Field(
        default="standard",
        description="Log format (verbose adds module and line number)",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded on first use."""
    return Settings()
