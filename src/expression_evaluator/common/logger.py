"""Shared logger for the expression evaluator."""
import logging
import os

LOGGER_NAME: str = "expression_evaluator"
LOG_LEVEL_ENV: str = "EXPRESSION_EVALUATOR_LOG_LEVEL"
LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _build_logger() -> logging.Logger:
    """
    Create the package logger with a single stream handler.

    The level is read from the ``EXPRESSION_EVALUATOR_LOG_LEVEL`` environment
    variable and falls back to WARNING when unset or unknown.

    :return: Configured logger
    :rtype: logging.Logger
    """
    log = logging.getLogger(LOGGER_NAME)

    # Module may be reloaded, avoid stacking handlers
    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)

    level_name: str = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    log.setLevel(level if isinstance(level, int) else logging.WARNING)
    return log


logger: logging.Logger = _build_logger()
