"""Application configuration loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed settings exposed via dependency injection throughout the app."""

    # Read .env with BOM tolerance; case-sensitive keys
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8-sig",
        case_sensitive=True,
    )

    APP_NAME: str = "RFM Segmentation API"
    ENV: str = "dev"  # dev | staging | prod
    DEBUG: bool = True

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 3235

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_SERIALIZE: bool = True

    # CORS
    CORS_ALLOWED_ORIGINS: list[str] = Field(default_factory=list)

    # Maximum allowed request body size.
    MAX_UPLOAD_BYTES: int = 5 * 1024 * 1024  # 5 MB

    # Dataset generation
    DEFAULT_GENERATE_COUNT: int = 150
    MAX_GENERATE_COUNT: int = 10_000
    # Generation runs in worker threads; bounds how many run at once.
    GENERATE_MAX_CONCURRENCY: int = 4
    # See rfm_api.core.rate_limit.limiter for syntax.
    GENERATE_RATE: str = "60/minute"
    GENERATE_OP_TIMEOUT_SEC: float = 30

    # Selected-ids submission endpoint
    SUBMIT_DELAY_MS: int = 100
    SUBMIT_RATE: str = "30/minute"


settings = Settings()
