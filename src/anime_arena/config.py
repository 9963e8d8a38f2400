"""Application configuration using pydantic-settings."""

import random
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from .engine.types import RNG


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ARENA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    debug: bool = False

    # Randomness - unset means platform randomness
    rng_seed: int | None = None

    # Battle setup
    default_player_id: str = "p001"
    default_opponent_id: str = "p002"
    catalog_path: str | None = None  # External JSON catalog instead of the built-in roster

    # Command-line runner
    turn_delay_seconds: float = 0.0  # Pause between turns, pacing only
    max_turns: int = 200  # Stop an autoplayed battle that never ends

    def make_rng(self) -> RNG:
        """Build the session random source, seeded when ``rng_seed`` is set."""
        if self.rng_seed is None:
            return random.random
        return random.Random(self.rng_seed).random


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
