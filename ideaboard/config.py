from __future__ import annotations
from pathlib import Path
from typing import Any, Optional, Tuple

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent
ENV_FILE = BASE_DIR / ".env"
DEFAULT_DB_PATH = BASE_DIR / "ideaboard.db"

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        frozen=True,
    )

    # DATABASE_URL may be a bare path or a sqlite:///path URL.
    DB_PATH: Path = Field(DEFAULT_DB_PATH, validation_alias=AliasChoices("DATABASE_URL", "DB_PATH"))
    DB_TIMEOUT: float = 5.0
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    FRONTEND_URL: Optional[str] = None
    API_URL: str = "http://localhost:5000"
    LOG_LEVEL: str = "INFO"

    @field_validator("DB_PATH", mode="before")
    @classmethod
    def _strip_sqlite_scheme(cls, value: Any) -> Any:
        if isinstance(value, str) and value.startswith("sqlite:///"):
            return value[len("sqlite:///"):]
        return value

    @field_validator("FRONTEND_URL", mode="before")
    @classmethod
    def _blank_is_none(cls, value: Any) -> Any:
        return value or None

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()

    @property
    def allowed_origins(self) -> Tuple[str, ...]:
        # Listed for logging only; CORS accepts every origin.
        return tuple(o for o in (self.FRONTEND_URL, "http://localhost:3000") if o)

settings = Settings()
