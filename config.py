# config.py

"""Application configuration.

Values come from ``config.json`` beside this file and may be overridden by
environment variables or a ``.env`` file. :func:`get_settings` caches the
result.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

CONFIG_PATH = Path(__file__).with_name("config.json")


class Settings(BaseSettings):
    """Application settings; environment variables win over ``config.json``."""

    model_config = SettingsConfigDict(
        env_file=".env", json_file=CONFIG_PATH, extra="ignore"
    )

    app_name: str = "kitchenpos"
    app_env: str = "dev"
    database_url: str = "sqlite:///./kitchenpos.db"
    sql_echo: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # A missing json file contributes nothing.
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            JsonConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
