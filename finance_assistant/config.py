"""Configuration management using Pydantic Settings"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # LLM provider
    api_key: str | None = Field(default=None, validation_alias=AliasChoices("API_KEY", "GEMINI_API_KEY"))
    llm_api_base: str = "https://generativelanguage.googleapis.com"
    llm_model: str = "gemini-2.5-flash"

    # Service
    service_name: str = "finance-assistant"
    log_level: str = "INFO"

    # HTTP Client
    http_timeout_seconds: float = 120.0

    # Records
    allow_record_deletion: bool = False
    seed_demo_data: bool = False


settings = Settings()
