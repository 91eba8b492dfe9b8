# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    DATABASE_URL: str = Field(default="sqlite:///./ops360.db")
    APP_NAME: str = "Ops360 API"
    APP_DESC: str = "Ticketing dashboard and IT-asset tracker"
    APP_VERSION: str = "0.1.0"

    # CORS origins, comma separated
    CORS_ORIGINS: str | None = None

    # Fixed tenant until sessions exist
    ORG_ID: str = "demo_org"
    SEED_REQUESTER_EMAIL: str = "admin@demo.local"
    SEED_HINT: str = "Seed user missing. Run the database seed step first."

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # Pydantic v2 style config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origins(self) -> list[str]:
        if not self.CORS_ORIGINS:
            return ["*"]
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
