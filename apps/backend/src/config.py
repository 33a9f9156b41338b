from pathlib import Path
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8080, ge=0, le=65535)
    LOG_LEVEL: str = Field(default="info")

    # Reported in the startup banner and /api/health
    SERVICE_NAME: str = Field(default="RailRakshak Backend")

    @field_validator('LOG_LEVEL', mode='after')
    @classmethod
    def normalize_log_level(cls, v):
        """uvicorn expects lowercase level names"""
        level = v.strip().lower()
        if level not in {"critical", "error", "warning", "info", "debug"}:
            raise ValueError(f"unknown log level: {v}")
        return level

try:
    settings = Settings()
except ValidationError as e:
    print("❌ Env validation failed:\n", e.json(indent=2))
    raise
