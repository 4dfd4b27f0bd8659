# backend/forecast/services/forecast_service.py
import logging
from datetime import date, datetime, timedelta, timezone

from sqlalchemy import select
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from backend.forecast.core.exceptions import ForecastNotFoundError
from backend.forecast.models.weather_forecast import WeatherForecast
from backend.forecast.schemas.weather_forecast import (
    WeatherForecastCreate,
    WeatherForecastQuery,
    WeatherForecastUpdate,
)

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def create_forecast(db: Session, data: WeatherForecastCreate, now: datetime | None = None) -> WeatherForecast:
    """
    Inserts one forecast. created_at and updated_at share the same timestamp.
    Storage errors are logged and re-raised after a rollback.
    """
    stamp = now or _utcnow()
    forecast = WeatherForecast(**data.model_dump(), created_at=stamp, updated_at=stamp)
    try:
        db.add(forecast)
        db.commit()
        db.refresh(forecast)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Weather forecast creation failed: %s", e)
        raise
    logger.info("Created weather forecast %s for %s on %s", forecast.id, forecast.city, forecast.date)
    return forecast


def get_city_weather(db: Session, city: str) -> list[WeatherForecast]:
    """Returns every forecast stored for exactly `city` (case-sensitive)."""
    stmt = (
        select(WeatherForecast)
        .where(WeatherForecast.city == city)
        .order_by(WeatherForecast.date, WeatherForecast.id)
    )
    try:
        return list(db.scalars(stmt))
    except SQLAlchemyError as e:
        logger.error("Failed to get weather for %s: %s", city, e)
        raise


def get_forecasts(
    db: Session,
    query: WeatherForecastQuery | None = None,
    today: date | None = None,
) -> list[WeatherForecast]:
    """
    Windowed read: forecasts dated in [today, today + days), optionally for one
    city, earliest first, at most `days` rows. `today` defaults to the server's
    local calendar date.
    """
    query = query or WeatherForecastQuery()
    start = today or date.today()
    end = start + timedelta(days=query.days)

    stmt = select(WeatherForecast).where(
        WeatherForecast.date >= start,
        WeatherForecast.date < end,
    )
    if query.city: # Empty string means no filter
        stmt = stmt.where(WeatherForecast.city == query.city)
    stmt = stmt.order_by(WeatherForecast.date, WeatherForecast.id).limit(query.days)

    try:
        return list(db.scalars(stmt))
    except SQLAlchemyError as e:
        logger.error("Weather forecasts retrieval failed: %s", e)
        raise


def update_forecast(db: Session, data: WeatherForecastUpdate, now: datetime | None = None) -> WeatherForecast:
    """
    Applies only the supplied fields to forecast `data.id` and re-stamps
    updated_at. Raises ForecastNotFoundError, without writing, if the id is unknown.
    """
    try:
        forecast = db.get(WeatherForecast, data.id)
        if forecast is None:
            raise ForecastNotFoundError(data.id)

        for field, value in data.changes().items():
            setattr(forecast, field, value)
        forecast.updated_at = now or _utcnow()

        db.commit()
        db.refresh(forecast)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Weather forecast update failed: %s", e)
        raise
    logger.info("Updated weather forecast %s", forecast.id)
    return forecast
