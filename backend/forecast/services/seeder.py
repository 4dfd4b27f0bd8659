# backend/forecast/services/seeder.py
import os
import sys
import logging
import random
from datetime import date, datetime, timedelta, timezone

from sqlalchemy import delete
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

# Ensure sys.path is correct for imports from backend.forecast when run as a script
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..', '..')))

from backend.forecast.core.config import FORECAST_CITY, SEED_DAYS
from backend.forecast.models.weather_forecast import WeatherCondition, WeatherForecast

logger = logging.getLogger(__name__)

# Per-condition ranges used to generate believable demo data.
# temp_high: range for the daily high; spread: how far the low sits below it.
CONDITION_PROFILES = {
    WeatherCondition.SUNNY: {
        "temp_high": (24, 32), "spread": (9, 13), "humidity": (20, 40), "wind_speed": (2, 10),
        "descriptions": ["Clear skies with plenty of sunshine", "Bright and sunny day", "Hot and sunny weather"],
    },
    WeatherCondition.PARTLY_CLOUDY: {
        "temp_high": (20, 28), "spread": (7, 11), "humidity": (35, 55), "wind_speed": (5, 14),
        "descriptions": ["Partly cloudy with some sun breaks", "Clearing up with intermittent clouds"],
    },
    WeatherCondition.CLOUDY: {
        "temp_high": (16, 24), "spread": (5, 9), "humidity": (50, 70), "wind_speed": (6, 16),
        "descriptions": ["Overcast with thick cloud cover", "Grey skies all day"],
    },
    WeatherCondition.RAINY: {
        "temp_high": (12, 20), "spread": (4, 8), "humidity": (70, 90), "wind_speed": (10, 22),
        "descriptions": ["Light rain throughout the day", "Showers on and off"],
    },
    WeatherCondition.STORMY: {
        "temp_high": (14, 22), "spread": (4, 8), "humidity": (75, 95), "wind_speed": (25, 50),
        "descriptions": ["Thunderstorms with strong gusts", "Heavy rain and lightning"],
    },
    WeatherCondition.SNOWY: {
        "temp_high": (-3, 3), "spread": (3, 7), "humidity": (65, 85), "wind_speed": (8, 20),
        "descriptions": ["Snowfall expected through the day", "Light snow and freezing temperatures"],
    },
}


def generate_forecast_day(city: str, day: date, rng: random.Random, stamp: datetime) -> WeatherForecast:
    condition = rng.choice(list(CONDITION_PROFILES))
    profile = CONDITION_PROFILES[condition]

    temperature_high = rng.randint(*profile["temp_high"])
    temperature_low = temperature_high - rng.randint(*profile["spread"])

    return WeatherForecast(
        city=city,
        date=day,
        temperature_high=temperature_high,
        temperature_low=temperature_low,
        condition=condition,
        description=rng.choice(profile["descriptions"]),
        humidity=rng.randint(*profile["humidity"]),
        wind_speed=rng.randint(*profile["wind_speed"]),
        created_at=stamp,
        updated_at=stamp,
    )


def seed_city_weather(
    db: Session,
    city: str = FORECAST_CITY,
    today: date | None = None,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> list[WeatherForecast]:
    """
    Replaces every stored forecast for `city` with SEED_DAYS freshly generated
    days starting today. The delete and insert share one transaction.
    """
    rng = rng or random.Random()
    start = today or date.today()
    stamp = now or datetime.now(timezone.utc)

    forecasts = [
        generate_forecast_day(city, start + timedelta(days=offset), rng, stamp)
        for offset in range(SEED_DAYS)
    ]

    try:
        deleted = db.execute(delete(WeatherForecast).where(WeatherForecast.city == city)).rowcount
        db.add_all(forecasts)
        db.commit()
        for forecast in forecasts:
            db.refresh(forecast)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("%s weather seeding failed: %s", city, e)
        raise
    logger.info("Seeded %d forecasts for %s (replaced %s)", len(forecasts), city, deleted)
    return forecasts


if __name__ == "__main__":
    from backend.forecast.core.logging_config import configure_logging
    from backend.forecast.db.session import Base, SessionLocal, engine

    configure_logging()
    Base.metadata.create_all(bind=engine)

    db: Session = SessionLocal()
    try:
        seed_city_weather(db, sys.argv[1] if len(sys.argv) > 1 else FORECAST_CITY)
    finally:
        db.close()
