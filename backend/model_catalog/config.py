import logging
import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.model_registry import Model, parse

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    # --- Model Selection ---
    # Wire name of the model used when a caller does not pick one,
    # e.g. "gpt-4", "gpt-4-32k", "gpt-4-vision-preview"
    DEFAULT_MODEL_NAME: str = os.getenv("DEFAULT_MODEL_NAME", "gpt-3.5-turbo")

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra fields from environment
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache()
def get_settings() -> Settings:
    """Returns the process-wide settings instance."""
    return Settings()


def get_default_model(settings: Optional[Settings] = None) -> Model:
    """
    Resolves DEFAULT_MODEL_NAME to a Model.

    Raises:
        UnsupportedModel: If the configured name is not a supported model.
    """
    settings = settings or get_settings()
    model = parse(settings.DEFAULT_MODEL_NAME)
    logger.debug(f"Default model resolved to {model}")
    return model


def configure_logging(level: Optional[str] = None) -> None:
    """Applies LOG_LEVEL (or `level`) to the root logging configuration."""
    level = (level or get_settings().LOG_LEVEL).upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("model_catalog").setLevel(level)
