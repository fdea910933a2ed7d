from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_TITLE: str = "String Analyzer Service"
    APP_VERSION: str = "1.0.0"
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Logging configuration used by string_analyzer.logging
    LOG_LEVEL: str = "INFO"
    CONSOLE_LOG_LEVEL: str = "INFO"
    # Set to DEBUG to log every translator rule that fires
    NLP_LOG_LEVEL: str = "INFO"

    # Rate limiting. Counters live in memory unless REDIS_URL is set.
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT: int = 120
    RATE_LIMIT_WINDOW: int = 60
    REDIS_URL: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
