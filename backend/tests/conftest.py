import os
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"

from coach_service.database import Base, build_engine, get_db  # noqa: E402
from coach_service.main import app  # noqa: E402
from coach_service.repositories.coach import SqlAlchemyCoachRepository  # noqa: E402
from coach_service.services.coach_manager import CoachManager  # noqa: E402

engine = build_engine(os.environ["DATABASE_URL"], poolclass=StaticPool)
TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


def reset_database() -> None:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


class StepClock:
    """Returns a strictly increasing sequence of timestamps."""

    def __init__(self, start: datetime = datetime(2024, 3, 11, 9, 0, 0, tzinfo=timezone.utc)) -> None:
        self.current = start

    def __call__(self) -> datetime:
        value = self.current
        self.current += timedelta(minutes=1)
        return value


@pytest.fixture(autouse=True)
def _prepare_db():
    reset_database()


@pytest.fixture()
def client():
    app.dependency_overrides[get_db] = override_get_db
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture()
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def repository(db):
    return SqlAlchemyCoachRepository(db)


@pytest.fixture()
def clock():
    return StepClock()


@pytest.fixture()
def manager(repository, clock):
    return CoachManager(repository, clock=clock)
