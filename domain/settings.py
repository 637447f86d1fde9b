from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).resolve().parents[1] / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=str(ENV_FILE), case_sensitive=False, extra="ignore")

    APP_NAME: str = "Visitor Pass Management"
    # Empty means the backend is served from the same origin as the app.
    BACKEND_URL: str = ""
    APP_ORIGIN: str = "http://localhost:8501"
    REQUEST_TIMEOUT: float = 15.0
    LOG_LEVEL: str = "INFO"

    @property
    def api_base(self) -> str:
        base = self.BACKEND_URL.strip() or self.APP_ORIGIN.strip()
        return base.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    return Settings()
