import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "ATLAS_UNPACKER_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _resolve_level(name: str, override: Optional[str] = None) -> int:
    # WARNING for library modules, INFO for the CLI; the env variable wins over both.
    default_level = logging.INFO if name.endswith(".cli") else logging.WARNING
    level_name = override or os.getenv(LOG_LEVEL_ENV, logging.getLevelName(default_level))
    level = getattr(logging, level_name.upper(), None)
    return level if isinstance(level, int) else default_level


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(_resolve_level(name))
    return logger
