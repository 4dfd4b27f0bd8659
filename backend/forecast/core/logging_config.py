# backend/forecast/core/logging_config.py
import logging

from backend.forecast.core.config import LOG_LEVEL

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configure root logging once for the API process and the seed script."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
