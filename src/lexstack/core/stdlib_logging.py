"""Stdlib logging setup for hosts embedding lexstack.

lexstack modules log through ``logging.getLogger(__name__)`` and never
configure handlers on import. Hosts that want lexstack's messages without
setting up logging themselves can call :func:`configure_logging`.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER_NAME = "lexstack"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_INSTALLED_HANDLER: logging.Handler | None = None
_CONFIGURED_TARGET: str | None = None


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(*, level: str = "INFO", log_path: Optional[Path] = None) -> logging.Logger:
    """Attach one handler to the ``lexstack`` logger.

    Writes to ``log_path`` when given, stderr otherwise. Idempotent
    per-process: calling again with the same target only updates the level;
    a different target replaces the previously installed handler.
    """
    global _INSTALLED_HANDLER, _CONFIGURED_TARGET

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_level_from_name(level))

    target = str(Path(log_path).resolve()) if log_path is not None else "<stderr>"
    if _INSTALLED_HANDLER is not None and _CONFIGURED_TARGET == target:
        _INSTALLED_HANDLER.setLevel(_level_from_name(level))
        return logger

    _remove_installed_handler()

    if log_path is not None:
        Path(target).parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level_from_name(level))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    _INSTALLED_HANDLER = handler
    _CONFIGURED_TARGET = target
    return logger


def _remove_installed_handler() -> None:
    global _INSTALLED_HANDLER, _CONFIGURED_TARGET
    if _INSTALLED_HANDLER is not None:
        logger = logging.getLogger(LOGGER_NAME)
        logger.removeHandler(_INSTALLED_HANDLER)
        _INSTALLED_HANDLER.close()
    _INSTALLED_HANDLER = None
    _CONFIGURED_TARGET = None


def reset_logging_for_tests() -> None:
    """Test-only: remove the handler installed by :func:`configure_logging`."""
    _remove_installed_handler()
    logging.getLogger(LOGGER_NAME).setLevel(logging.NOTSET)


__all__ = ["configure_logging", "reset_logging_for_tests", "LOGGER_NAME"]
