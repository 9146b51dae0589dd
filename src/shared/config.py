from typing import Dict

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.const import (
    DEFAULT_ITERATIONS,
    DEFAULT_LIST_SIZE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_WARMUP_REPETITIONS,
    DEFAULT_WARMUP_ROUNDS,
    LIBRARY_LOG_LEVELS,
)


class Config(BaseSettings):
    """Global configuration settings for the list benchmark."""

    list_size: int = Field(default=DEFAULT_LIST_SIZE, ge=0)
    iterations: int = Field(default=DEFAULT_ITERATIONS, ge=0)
    warmup_rounds: int = Field(default=DEFAULT_WARMUP_ROUNDS, ge=0)
    warmup_repetitions: int = Field(default=DEFAULT_WARMUP_REPETITIONS, ge=0)
    log_level: str = DEFAULT_LOG_LEVEL
    library_log_levels: Dict[str, str] = dict(LIBRARY_LOG_LEVELS)

    model_config = SettingsConfigDict(
        frozen=True,
    )

    @property
    def warmup_executions(self) -> int:
        """Total number of discarded warmup executions per benchmark."""
        return self.warmup_rounds * self.warmup_repetitions

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """
        Customise the sources for settings.

        Only constructor keyword arguments are honoured; environment
        variables, dotenv and secret files are ignored so a run is fully
        determined by the values passed in code.
        """
        return (init_settings,)
