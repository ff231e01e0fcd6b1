from typing import Generator

from sqlalchemy.orm import Session

from tracker.config import settings
from tracker.db import SessionLocal
from tracker.schedule import Clock


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_clock() -> Clock:
    return Clock(settings.APP_TIMEZONE)
