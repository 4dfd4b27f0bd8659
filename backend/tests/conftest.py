# backend/tests/conftest.py
import os
import sys
from datetime import date, datetime, timezone

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..')))

# Must be set before backend.forecast.core.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["FORECAST_CITY"] = "Madrid"
os.environ["DB_CREATE_TABLES"] = "false"

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from backend.forecast.api.procedures import get_today
from backend.forecast.db.session import Base, get_db
from backend.forecast.main import app
from backend.forecast.models.weather_forecast import WeatherCondition, WeatherForecast


# In-memory SQLite shared across threads so the TestClient sees the same data
@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db, today):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_today] = lambda: today
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def today():
    return date(2025, 6, 15)


@pytest.fixture
def make_forecast(db):
    """Insert a forecast row directly, bypassing the service layer."""
    def _make(city="New York", day=None, **overrides):
        stamp = datetime(2025, 6, 1, 8, 0, tzinfo=timezone.utc)
        fields = dict(
            city=city,
            date=day or date(2025, 6, 15),
            temperature_high=25.0,
            temperature_low=18.0,
            condition=WeatherCondition.SUNNY,
            description="Clear sunny day",
            humidity=45,
            wind_speed=10.0,
            created_at=stamp,
            updated_at=stamp,
        )
        fields.update(overrides)
        forecast = WeatherForecast(**fields)
        db.add(forecast)
        db.commit()
        db.refresh(forecast)
        return forecast

    return _make
