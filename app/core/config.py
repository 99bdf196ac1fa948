# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Env vars (.env):
      - STORE_API_URL (remote persistence endpoint, takes ?action=...)
      - STORE_API_TIMEOUT (seconds per request)

    Optional:
      - GEMINI_API_KEY (without it, description suggestions fall back)
      - GEMINI_MODEL
      - DESCRIPTION_LANGUAGE
    """

    PROJECT_NAME: str = "Inventory Memo API"
    API_V1_STR: str = "/api/v1"

    # Remote persistence service
    STORE_API_URL: str = "http://localhost/api.php"
    STORE_API_TIMEOUT: float = 10.0

    # Description assistant
    GEMINI_API_KEY: str | None = None
    GEMINI_MODEL: str = "gemini-3-flash-preview"
    DESCRIPTION_LANGUAGE: str = "Bengali"

    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
    ]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
