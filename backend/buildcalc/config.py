"""Runtime settings, read from the environment (and a project ``.env``)."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")


def _split_origins(value: str) -> list[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


class Settings(BaseModel):
    """Application settings.

    Every field has a default so the service runs without any environment
    configuration; ``from_env`` overrides them from environment variables.
    """

    app_name: str = "BuildCalc"
    environment: str = "development"
    log_level: str = "INFO"
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
    )
    max_plinth_area: float = Field(default=50_000.0, gt=0)
    max_compare_options: int = Field(default=5, ge=1)
    timeline_overlap_factor: float = Field(default=0.7, gt=0, le=1)

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from environment variables, keeping defaults for unset ones."""
        values: dict[str, object] = {}
        env_map = {
            "APP_NAME": "app_name",
            "ENVIRONMENT": "environment",
            "LOG_LEVEL": "log_level",
            "MAX_PLINTH_AREA": "max_plinth_area",
            "MAX_COMPARE_OPTIONS": "max_compare_options",
            "TIMELINE_OVERLAP_FACTOR": "timeline_overlap_factor",
        }
        for env_name, field_name in env_map.items():
            raw = os.environ.get(env_name)
            if raw:
                values[field_name] = raw

        origins = os.environ.get("CORS_ORIGINS")
        if origins:
            values["cors_origins"] = _split_origins(origins)

        return cls.model_validate(values)

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, read once from the environment."""
    return Settings.from_env()
