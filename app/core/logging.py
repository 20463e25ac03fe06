# app/core/logging.py
import logging
from typing import Optional
from app.config import settings

ROOT = "recommender"
FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Logger under the shared "recommender." namespace with a single stream
    handler. `level` overrides LOG_LEVEL for noisy components.
    """
    logger = logging.getLogger(f"{ROOT}.{name}")
    if not logger.handlers:
        lvl = (level or settings.log_level).upper()
        logger.setLevel(lvl)
        handler = logging.StreamHandler()
        handler.setLevel(lvl)
        handler.setFormatter(logging.Formatter(FORMAT))
        logger.addHandler(handler)
        # one handler per logger; don't echo through the root logger as well
        logger.propagate = False
    return logger
