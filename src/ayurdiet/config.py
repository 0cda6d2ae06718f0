"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    openai_api_key: str
    openai_model: str = "gpt-5.2"
    openai_reasoning_effort: str | None = "medium"
    openai_store: bool = False
    openai_max_retries: int = 2
    generation_timeout_seconds: float = 60.0
    nutrition_db_path: str = "data/ifct2017.db"
    max_nutrition_records: int = 10
    max_policy_excerpts: int = 5
    max_alternatives: int = 5
    dosha_secondary_threshold: float = 0.4
    google_api_key: str
    weather_api_key: str
    weather_base_url: str = "https://api.weatherapi.com/v1"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
