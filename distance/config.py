from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Host-level overrides applied when the shipped defaults are registered."""

    model_config = SettingsConfigDict(env_prefix="DISTANCE_")

    namespace: str = "distance"
    format_comma: bool = True
    format_suffix: bool = False


settings = Settings()
