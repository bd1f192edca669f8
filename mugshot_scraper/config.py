"""Pydantic Settings — loads configuration from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "extra": "ignore"}

    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    target_url_template: str = "https://wakenc.mugshots.zone/2025/07/page/{page}/"
    # Dynamic page-count detection is not implemented
    total_pages: int = 10

    headless: bool = True
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/125.0.0.0 Safari/537.36"
    )
    accept_language: str = "en-US,en;q=0.9"

    navigation_wait_until: str = "networkidle"
    navigation_timeout_ms: int = 15000
    max_navigation_attempts: int = 3
    retry_backoff_seconds: float = 1.0
    content_wait_timeout_ms: int = 15000
    settle_delay_seconds: float = 2.0


@lru_cache
def get_settings() -> Settings:
    return Settings()
