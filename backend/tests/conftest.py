"""
Every test gets its own in-memory SQLite database. The app's get_db
dependency is pointed at it, so nothing leaks between tests.
"""
import os

# must be set before vikfit.settings is first imported
os.environ.setdefault("DB_DRIVER", "sqlite")
os.environ.setdefault("DB_PATH", ":memory:")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from vikfit import models  # noqa: F401  # registers tables on Base.metadata
from vikfit.db import Base, get_db, make_engine
from vikfit.main import app
from vikfit.repositories.goal_repo import MacroGoalRepository
from vikfit.repositories.log_repo import LogRepository
from vikfit.repositories.meal_repo import MealRepository
from vikfit.repositories.workout_repo import WorkoutRepository


@pytest.fixture
def engine():
    eng = make_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    s = session_factory()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        s = session_factory()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def complete_session(db):
    """Log a finished session of ``workout`` on ``day``, one set per exercise given."""
    def _complete(workout, day, exercises=()):
        logs = LogRepository(db)
        wl = logs.start(workout.id, day)
        for ex in exercises:
            logs.log_set(wl.id, exercise_id=ex.id, set_number=1, reps_completed=10)
        return logs.complete(wl.id, total_duration_seconds=1800)
    return _complete


@pytest.fixture
def workouts(db):
    return WorkoutRepository(db)


@pytest.fixture
def meals(db):
    return MealRepository(db)


@pytest.fixture
def goals(db):
    return MacroGoalRepository(db)
