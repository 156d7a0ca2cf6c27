import logging
import os
from typing import Optional

from dotenv import load_dotenv

# charge immédiatement le .env
load_dotenv()

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Logger standardisé (handler console unique).
    Le niveau vient de `level`, sinon de LOG_LEVEL (INFO par défaut).
    Passer level="DEBUG" pour voir les messages du GaugesClient.
    """
    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    logger = logging.getLogger(name)
    if not logger.hasHandlers():
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(log_level)
    return logger
