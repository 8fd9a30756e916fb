"""Runtime settings and logging setup."""
import logging
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.logging import RichHandler

from leitner_tutor.algorithm import LEARNING_THRESHOLD

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Settings read from LEITNER_* environment variables.

    An invalid value raises ``pydantic.ValidationError`` (a ``ValueError``).
    """

    model_config = SettingsConfigDict(env_prefix="LEITNER_", env_ignore_empty=True, extra="ignore")

    learning_threshold: int = Field(default=LEARNING_THRESHOLD, ge=0)
    log_level: LogLevel = "WARNING"
    # False starts with an empty deck
    seed: bool = True

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value


def load_settings(**overrides) -> Settings:
    return Settings(**overrides)


def setup_logging(level: str = "WARNING") -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )
