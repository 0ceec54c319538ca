import os

# Settings are read at import time; point them at an in-memory database first
os.environ["SQLALCHEMY_DATABASE_URI"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ENVIRONMENT"] = "development"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from healthtrack import crud
from healthtrack.core.security import create_access_token
from healthtrack.db.base import Base
from healthtrack.db.session import SessionLocal, engine
from healthtrack.main import app
from healthtrack.schemas.user import UserCreate


@pytest.fixture(autouse=True)
def setup_database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def user_a(db):
    return crud.user.create(db, obj_in=UserCreate(email="alice@example.com", first_name="Alice"), id="user-a")


@pytest.fixture
def user_b(db):
    return crud.user.create(db, obj_in=UserCreate(email="bob@example.com", first_name="Bob"), id="user-b")


@pytest.fixture
def client():
    # No context manager: the lifespan would dispose the shared in-memory connection
    yield TestClient(app)
    app.dependency_overrides.clear()


def auth_headers(user) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture
def headers_a(user_a):
    return auth_headers(user_a)


@pytest.fixture
def headers_b(user_b):
    return auth_headers(user_b)


def scores(sleep, nutrition, exercise, hydration, mood, **extra) -> dict:
    data = {
        "sleep_score": sleep,
        "nutrition_score": nutrition,
        "exercise_score": exercise,
        "hydration_score": hydration,
        "mood_score": mood,
    }
    data.update(extra)
    return data
