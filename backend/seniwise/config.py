"""Application configuration."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_DATA_DIR = Path(__file__).resolve().parent / "data"


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables."""

    app_name: str = "Seniwise Residents API"
    locale: str = "en_us"
    residents_page_size: int = 20
    residents_data_path: Path = _DATA_DIR / "demo_residents.json"
    staff_data_path: Path = _DATA_DIR / "staff.json"
    cors_allow_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    model_config = SettingsConfigDict(
        env_file=str(_BACKEND_DIR / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""

    return Settings()
