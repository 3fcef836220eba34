"""Centralised application settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"

    # API
    host: str = "0.0.0.0"
    port: int = 8000
    rate_limit: str = "100/minute"

    # Market
    default_buy_threshold: float = 100.0
    isolate_observer_failures: bool = True  # keep fan-out going past a failing observer

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
