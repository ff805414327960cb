"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Key-value persistence ("file", "memory" or "mongo")
    storage_backend: str = "file"
    storage_dir: str = ".careerhub"

    # MongoDB (only used when storage_backend == "mongo")
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "careerhub"

    # Simulated round-trip for mutating resource calls
    simulated_latency_seconds: float = 1.0
    simulated_failure_rate: float = 0.0

    # Saved items: one slot per actor (True) or one shared slot per kind (False)
    scope_saved_items_by_actor: bool = True

    # Toast lifetime reported with every notification
    notification_seconds: int = 3

    # Load the demo users/companies/jobs/events/courses at start-up
    seed_demo_data: bool = True

    # App
    log_level: str = "INFO"
    debug: bool = True

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
