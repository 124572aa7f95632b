"""
Configuration settings for the Academic SERP Analyzer.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Shipped default for SERPER_API_KEY; the search client serves mock data while it is set
SERPER_PLACEHOLDER_KEY = "YOUR_SERPER_API_KEY"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    # === Application ===
    APP_NAME: str = "Academic SERP Analyzer"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"  # development | production
    
    # === Serper Search Provider ===
    SERPER_API_KEY: str = SERPER_PLACEHOLDER_KEY
    SERPER_API_URL: str = "https://google.serper.dev/search"
    SERPER_TIMEOUT: float = 10.0  # seconds
    SERPER_MAX_RESULTS: int = 10  # Provider-side cap on results per query
    
    # === Analysis Core ===
    WORKER_POOL_SIZE: int = 10  # Fixed, independent of result count
    CLASSIFICATION_TIMEOUT_SECONDS: float = 30.0  # Global deadline per batch
    
    # === HTTP ===
    CORS_ALLOW_ORIGINS: list[str] = ["*"]
    
    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True


# Global settings instance
settings = Settings()
