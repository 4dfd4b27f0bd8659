# backend/forecast/models/weather_forecast.py
import enum

from sqlalchemy import Column, Integer, String, Float, Date, DateTime, Text, Enum

from backend.forecast.db.session import Base # Import Base from your session setup


class WeatherCondition(str, enum.Enum):
    SUNNY = "sunny"
    CLOUDY = "cloudy"
    RAINY = "rainy"
    STORMY = "stormy"
    SNOWY = "snowy"
    PARTLY_CLOUDY = "partly_cloudy"


class WeatherForecast(Base):
    __tablename__ = "weather_forecasts"

    id = Column(Integer, primary_key=True, index=True) # Auto-incrementing PK
    city = Column(String(255), nullable=False, index=True) # E.g., 'Madrid'; not unique per date
    date = Column(Date, nullable=False, index=True) # Calendar day the forecast is for

    temperature_high = Column(Float, nullable=False) # Degrees Celsius
    temperature_low = Column(Float, nullable=False)

    # Stored by value ('partly_cloudy'), backed by a 'weather_condition' enum type on PostgreSQL
    condition = Column(
        Enum(
            WeatherCondition,
            name="weather_condition",
            values_callable=lambda conditions: [c.value for c in conditions],
        ),
        nullable=False,
    )
    description = Column(Text, nullable=False) # E.g., 'Light rain throughout the day'

    humidity = Column(Integer, nullable=False) # Percent, 0-100
    wind_speed = Column(Float, nullable=False) # km/h, non-negative

    # Stamped by the service layer: equal on insert, updated_at refreshed on every update
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return (
            f"<WeatherForecast(id={self.id}, city='{self.city}', date={self.date}, "
            f"condition={self.condition}, high={self.temperature_high}, low={self.temperature_low})>"
        )
