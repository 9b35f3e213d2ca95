"""Exception types and the shared ``thermal_noise`` logger."""

from __future__ import annotations

import logging
import os
from typing import Optional

__all__ = [
    "ThermalNoiseError",
    "UnknownMethodError",
    "MissingParameterError",
    "ScenarioError",
    "get_logger",
    "configure_logging",
]

LOGGER_NAME = "thermal_noise"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class ThermalNoiseError(Exception):
    pass


class UnknownMethodError(ThermalNoiseError, ValueError):
    pass


class MissingParameterError(ThermalNoiseError, ValueError):
    pass


class ScenarioError(ThermalNoiseError, ValueError):
    pass


_logger: Optional[logging.Logger] = None


def get_logger() -> logging.Logger:
    """Return the package logger, attaching a console handler on first use."""
    global _logger
    if _logger is None:
        _logger = logging.getLogger(LOGGER_NAME)
        _logger.setLevel(logging.INFO)
        if not _logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter(LOG_FORMAT))
            _logger.addHandler(h)
    return _logger


def configure_logging(verbose: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """Reset the package logger handlers.

    ``verbose`` switches the level to DEBUG. ``log_file`` adds a UTF-8 file
    handler next to the console one.
    """
    logger = get_logger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    fmt = logging.Formatter(LOG_FORMAT)
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_file:
        fh = logging.FileHandler(os.fspath(log_file), encoding="utf-8")
        fh.setFormatter(fmt)
        logger.addHandler(fh)
    return logger
