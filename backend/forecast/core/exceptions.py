# backend/forecast/core/exceptions.py


class ForecastNotFoundError(Exception):
    """Raised when an update targets a forecast id that does not exist."""

    def __init__(self, forecast_id: int):
        self.forecast_id = forecast_id
        super().__init__(f"Weather forecast with id {forecast_id} not found")
