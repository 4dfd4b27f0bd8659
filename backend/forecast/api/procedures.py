# backend/forecast/api/procedures.py
from datetime import date, datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from backend.forecast.core.config import FORECAST_CITY
from backend.forecast.db.session import get_db
from backend.forecast.schemas.weather_forecast import (
    HealthCheck,
    WeatherForecast,
    WeatherForecastCreate,
    WeatherForecastQuery,
    WeatherForecastUpdate,
)
from backend.forecast.services import forecast_service, seeder

# Procedure-style routes: one path per callable, named as the front-end calls them
router = APIRouter()


# Dependency for the server's calendar day; tests override it to pin the window
def get_today() -> date:
    return date.today()


@router.get("/healthcheck", response_model=HealthCheck)
def healthcheck():
    return HealthCheck(status="ok", timestamp=datetime.now(timezone.utc))


# Main endpoint for the fixed city's weather
@router.get("/getCityWeather", response_model=list[WeatherForecast])
def get_city_weather(db: Session = Depends(get_db)):
    return forecast_service.get_city_weather(db, FORECAST_CITY)


# Destructive: replaces the fixed city's rows with 7 generated days
@router.post("/seedCityWeather", response_model=list[WeatherForecast])
def seed_city_weather(db: Session = Depends(get_db), today: date = Depends(get_today)):
    return seeder.seed_city_weather(db, FORECAST_CITY, today=today)


@router.post("/createForecast", response_model=WeatherForecast)
def create_forecast(payload: WeatherForecastCreate, db: Session = Depends(get_db)):
    return forecast_service.create_forecast(db, payload)


@router.get("/getForecasts", response_model=list[WeatherForecast])
def get_forecasts(
    query: Annotated[WeatherForecastQuery, Query()],
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    return forecast_service.get_forecasts(db, query, today=today)


@router.post("/updateForecast", response_model=WeatherForecast)
def update_forecast(payload: WeatherForecastUpdate, db: Session = Depends(get_db)):
    return forecast_service.update_forecast(db, payload)
