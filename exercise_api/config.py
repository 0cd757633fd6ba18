from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Upstream dataset
    DATASET_URL: str = "https://raw.githubusercontent.com/zomvr2/free-exercise-db/main/dist/exercises.json"
    CATALOG_TTL_SECONDS: float = 3600.0
    FETCH_TIMEOUT_SECONDS: float = 10.0

    # Response shaping
    SEARCH_THRESHOLD: float = 0.6
    PAGE_SIZE: int = Field(10, ge=1)
    RANDOM_SAMPLE_SIZE: int = Field(5, ge=0)
    RECOMMENDATION_LIMIT: int = Field(5, ge=0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]
