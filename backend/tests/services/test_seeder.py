# backend/tests/services/test_seeder.py
import random
import pytest
from unittest.mock import MagicMock, patch
from datetime import datetime, timedelta, timezone

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from backend.forecast.models.weather_forecast import WeatherCondition, WeatherForecast
from backend.forecast.services.seeder import CONDITION_PROFILES, generate_forecast_day, seed_city_weather


def _city_count(db, city):
    return db.scalar(select(func.count()).select_from(WeatherForecast).where(WeatherForecast.city == city))


def _assert_within_profile(forecast):
    profile = CONDITION_PROFILES[forecast.condition]
    low, high = profile["temp_high"]
    assert low <= forecast.temperature_high <= high
    assert forecast.temperature_low < forecast.temperature_high
    assert profile["humidity"][0] <= forecast.humidity <= profile["humidity"][1]
    assert profile["wind_speed"][0] <= forecast.wind_speed <= profile["wind_speed"][1]
    assert forecast.description in profile["descriptions"]


def test_seed_creates_seven_consecutive_days(db, today):
    result = seed_city_weather(db, "Madrid", today=today, rng=random.Random(7))

    assert len(result) == 7
    assert [f.date for f in result] == [today + timedelta(days=i) for i in range(7)]
    for forecast in result:
        assert forecast.id is not None
        assert forecast.city == "Madrid"
        assert isinstance(forecast.created_at, datetime)
        assert forecast.created_at == forecast.updated_at


def test_seed_values_respect_condition_profiles(db, today):
    result = seed_city_weather(db, "Madrid", today=today)

    for forecast in result:
        assert forecast.condition in set(WeatherCondition)
        assert 0 <= forecast.humidity <= 100
        assert forecast.wind_speed >= 0
        _assert_within_profile(forecast)


def test_seed_replaces_existing_rows_for_city(db, make_forecast, today):
    for offset in range(3):
        make_forecast(city="Madrid", day=today + timedelta(days=offset), description="stale")
    make_forecast(city="Paris", day=today)

    seed_city_weather(db, "Madrid", today=today)

    assert _city_count(db, "Madrid") == 7
    assert _city_count(db, "Paris") == 1
    stale = db.scalars(select(WeatherForecast).where(WeatherForecast.description == "stale")).all()
    assert stale == []


def test_seed_twice_still_leaves_seven_rows(db, today):
    seed_city_weather(db, "Madrid", today=today)
    second = seed_city_weather(db, "Madrid", today=today + timedelta(days=1))

    assert _city_count(db, "Madrid") == 7
    stored = db.scalars(select(WeatherForecast).order_by(WeatherForecast.date)).all()
    assert [f.date for f in stored] == [f.date for f in second]
    assert stored[0].date == today + timedelta(days=1)


def test_seed_storage_error_rolls_back():
    mock_db = MagicMock()
    mock_db.commit.side_effect = SQLAlchemyError("disk full")

    with pytest.raises(SQLAlchemyError):
        seed_city_weather(mock_db, "Madrid")

    mock_db.rollback.assert_called_once()
    mock_db.refresh.assert_not_called()


@pytest.mark.parametrize("seed", range(20))
def test_generate_forecast_day_stays_in_range(seed, today):
    stamp = datetime(2025, 6, 15, tzinfo=timezone.utc)
    forecast = generate_forecast_day("Madrid", today, random.Random(seed), stamp)

    assert forecast.date == today
    assert forecast.created_at == stamp
    _assert_within_profile(forecast)


def test_profiles_cover_every_condition():
    assert set(CONDITION_PROFILES) == set(WeatherCondition)
    # Sunny days run warmer, drier and calmer than rainy ones
    sunny, rainy = CONDITION_PROFILES[WeatherCondition.SUNNY], CONDITION_PROFILES[WeatherCondition.RAINY]
    assert sunny["temp_high"][0] > rainy["temp_high"][1] - 5
    assert sunny["humidity"][1] < rainy["humidity"][0]
    assert sunny["wind_speed"][1] <= rainy["wind_speed"][0]


def test_seed_uses_injected_timestamp(db, today):
    now = datetime(2025, 6, 15, 6, 45, tzinfo=timezone.utc)

    result = seed_city_weather(db, "Madrid", today=today, now=now)

    for forecast in result:
        assert forecast.created_at.replace(tzinfo=None) == now.replace(tzinfo=None)
        assert forecast.updated_at == forecast.created_at


@patch("backend.forecast.services.seeder.logger")
def test_seed_refresh_failure_is_logged_and_rolled_back(mock_logger):
    mock_db = MagicMock()
    mock_db.refresh.side_effect = SQLAlchemyError("connection reset")

    with pytest.raises(SQLAlchemyError, match="connection reset"):
        seed_city_weather(mock_db, "Madrid")

    mock_db.commit.assert_called_once()
    mock_db.rollback.assert_called_once()
    mock_logger.error.assert_called_once()
