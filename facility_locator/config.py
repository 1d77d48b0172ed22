"""Centralised application settings loaded from environment / .env file."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Network seeding
    proximity_threshold_km: float = 100.0  # hubs closer than this get a road
    dataset_path: Optional[str] = None  # JSON dataset; built-in data when unset

    # Queries
    default_result_limit: int = 5
    max_result_limit: int = 50

    # API
    rate_limit: str = "100/minute"
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
