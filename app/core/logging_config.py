# app/core/logging_config.py
import logging
from typing import Optional
from .config import settings

def setup_logging(level: Optional[str] = None):
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # Every pod call is already logged by the endpoints
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
