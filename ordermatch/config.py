# ordermatch/config.py

from typing import Literal
from pydantic_settings import BaseSettings
from functools import lru_cache

AssignmentStrategy = Literal["greedy", "best_score"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "Order Match API"
    app_env: str = "development"
    debug: bool = True
    frontend_url: str = "http://localhost:3000"

    # Matching config
    match_threshold: float = 60
    auto_approve_ratio: float = 0.9  # of the maximum core score (85)
    forward_date_window_days: int = 90
    backdate_tolerance_days: int = 7
    assignment_strategy: AssignmentStrategy = "greedy"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
