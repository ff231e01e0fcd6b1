import os
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]
load_dotenv(ROOT_DIR / ".env")


def _flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


class Settings:
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./habits.db")
    AUTO_CREATE_SCHEMA: bool = _flag("AUTO_CREATE_SCHEMA")
    APP_TIMEZONE: str = os.getenv("APP_TIMEZONE", "UTC").strip() or "UTC"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    # Toggle restrictions, both off to keep the permissive behaviour.
    REQUIRE_HABIT_OWNER: bool = _flag("REQUIRE_HABIT_OWNER")
    REQUIRE_SCHEDULED_TOGGLE: bool = _flag("REQUIRE_SCHEDULED_TOGGLE")
    CORS_ORIGINS: list[str] = [
        item.strip()
        for item in os.getenv("CORS_ORIGINS", "*").split(",")
        if item.strip()
    ]


settings = Settings()
