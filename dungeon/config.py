"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    dungeon_env: str = "development"
    dungeon_log_level: str = "info"

    # Render defaults
    dungeon_scale: float = 100.0
    dungeon_nudge: tuple[int, int] = (0, 0)
    dungeon_max_depth: int = 64

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
