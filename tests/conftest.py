from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from api_main import app
from tracker.api.deps import get_clock, get_db
from tracker.db import make_engine
from tracker.models import Base
from tracker.schedule import Clock


class FrozenClock(Clock):
    def __init__(self, moment: datetime, tz_name: str = "UTC") -> None:
        super().__init__(tz_name, now=lambda: self.moment)
        self.moment = moment

    def set(self, moment: datetime) -> None:
        self.moment = moment


def at(year: int, month: int, day: int, hour: int = 12) -> datetime:
    return datetime(year, month, day, hour, tzinfo=timezone.utc)


@pytest.fixture
def engine():
    engine = make_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)()
    yield session
    session.close()


@pytest.fixture
def clock():
    # 2024-01-01 is a Monday
    return FrozenClock(at(2024, 1, 1))


@pytest.fixture
def client(db, clock):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def alice(db):
    from tracker.crud import upsert_google_user

    return upsert_google_user(db, "g-alice", "alice@x.com", "Alice", "https://img.example/alice.png")


@pytest.fixture
def bob(db):
    from tracker.crud import upsert_google_user

    return upsert_google_user(db, "g-bob", "bob@x.com", "Bob", None)
