# backend/forecast/schemas/weather_forecast.py
import datetime as dt

from pydantic import BaseModel, ConfigDict, Field, model_validator

from backend.forecast.core.config import DEFAULT_FORECAST_DAYS, MAX_FORECAST_DAYS
from backend.forecast.models.weather_forecast import WeatherCondition


# --- Pydantic Models for Data Validation ---
# These mirror the WeatherForecast SQLAlchemy model. Range and enum checks
# live here, not in the table.
class WeatherForecastCreate(BaseModel):
    city: str
    date: dt.date
    temperature_high: float
    temperature_low: float
    condition: WeatherCondition
    description: str
    humidity: int = Field(..., ge=0, le=100)
    wind_speed: float = Field(..., ge=0)


class WeatherForecastUpdate(BaseModel):
    """Partial update: only the fields present in the payload are applied."""

    id: int
    city: str | None = None
    date: dt.date | None = None
    temperature_high: float | None = None
    temperature_low: float | None = None
    condition: WeatherCondition | None = None
    description: str | None = None
    humidity: int | None = Field(None, ge=0, le=100)
    wind_speed: float | None = Field(None, ge=0)

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        # Omitting a field leaves it untouched; sending null for it is an error
        nulls = sorted(name for name in self.model_fields_set if getattr(self, name) is None)
        if nulls:
            raise ValueError(f"fields may be omitted but not null: {', '.join(nulls)}")
        return self

    def changes(self) -> dict:
        """Return the supplied fields, minus the id."""
        return self.model_dump(exclude_unset=True, exclude={"id"})


class WeatherForecastQuery(BaseModel):
    city: str | None = None # Exact match, case-sensitive
    days: int = Field(DEFAULT_FORECAST_DAYS, gt=0, le=MAX_FORECAST_DAYS)


class WeatherForecast(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    city: str
    date: dt.date
    temperature_high: float
    temperature_low: float
    condition: WeatherCondition
    description: str
    humidity: int
    wind_speed: float
    created_at: dt.datetime
    updated_at: dt.datetime


class HealthCheck(BaseModel):
    status: str
    timestamp: dt.datetime
