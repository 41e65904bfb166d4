from decimal import Decimal
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables or a .env file.
    """

    APP_NAME: str = Field(default="In-Memory Store API")
    APP_VERSION: str = Field(default="1.0.0")
    LOG_LEVEL: str = Field(default="INFO")

    # Populate the stores with sample users and products at startup
    SEED_SAMPLE_DATA: bool = Field(default=True)

    # Upper bound used when a price range search has no maximum
    MAX_PRICE_CEILING: Decimal = Field(default=Decimal("999999.99"))
    DEFAULT_USER_ROLE: str = Field(default="USER")

    CORS_ORIGINS: list[str] = Field(default=["*"])

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
