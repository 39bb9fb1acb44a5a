# app/utils/logging.py
import logging

from app.utils.settings import LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(
            f"Invalid LOG_LEVEL {name!r}, expected one of DEBUG, INFO, WARNING, ERROR, CRITICAL"
        )
    return level


def get_logger(name: str) -> logging.Logger:
    # basicConfig nic nie robi, gdy root ma juz handlery
    logging.basicConfig(level=_level(LOG_LEVEL), format=_FORMAT)
    return logging.getLogger(name)
