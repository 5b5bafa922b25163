"""
Catalog logging

Everything logs under the "catalog" logger or one of its children
("catalog.service", ...). Handlers are attached to the parent only, once.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, Union

import config

LOGGER_NAME = "catalog"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _handlers(log_file: Optional[Union[str, Path]]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))
    return handlers


def setup_logger(
    name: str = LOGGER_NAME,
    level: int = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """Attach stderr (and optional file) handlers to `name`.

    Handlers are added on the first call only; later calls just move the level.
    """
    log = logging.getLogger(name)
    log.setLevel(level)
    if log.handlers:
        return log

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _handlers(log_file):
        handler.setFormatter(formatter)
        log.addHandler(handler)
    return log


def setup_from_config() -> logging.Logger:
    """Configure the catalog logger from LOG_LEVEL / LOG_FILE."""
    return setup_logger(level=config.log_level(), log_file=config.log_file())


def get_logger(component: Optional[str] = None) -> logging.Logger:
    """The catalog logger, or its child `catalog.<component>`."""
    if component is None:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{component}")
