# backend/forecast/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from backend.forecast.api.procedures import router
from backend.forecast.core.config import CORS_ORIGINS, DB_CREATE_TABLES, FORECAST_CITY, SERVER_PORT
from backend.forecast.core.exceptions import ForecastNotFoundError
from backend.forecast.core.logging_config import configure_logging
from backend.forecast.db.session import Base, engine
from backend.forecast.models import weather_forecast # noqa: F401  registers the table on Base

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    if DB_CREATE_TABLES:
        Base.metadata.create_all(bind=engine)
    logger.info("Weather API ready, serving forecasts for %s", FORECAST_CITY)
    yield
    engine.dispose()
    logger.info("Weather API shut down")


app = FastAPI(title="City Weather Forecast API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ForecastNotFoundError)
async def forecast_not_found_handler(request: Request, exc: ForecastNotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    # The service layer has already logged the underlying error
    return JSONResponse(status_code=500, content={"detail": "Storage error"})


@app.get("/")
async def root():
    return {"message": "Welcome to the City Weather Forecast API"}


app.include_router(router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=SERVER_PORT)
