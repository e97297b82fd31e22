"""
Runtime settings read from the environment.

EMITTER_PAYLOAD_COPY  how payloads are duplicated per listener: shallow (default), deep or none
EMITTER_LOG_LEVEL     level applied to the ``Emitter`` logger by ``configure_logging`` (default WARNING)
"""
import copy
import logging
import os
from typing import Any, Callable, Dict, Optional

PAYLOAD_COPY_ENV = "EMITTER_PAYLOAD_COPY"
LOG_LEVEL_ENV = "EMITTER_LOG_LEVEL"

DEFAULT_PAYLOAD_COPY = "shallow"
DEFAULT_LOG_LEVEL = "WARNING"


def _identity(payload: Any) -> Any:
    return payload


PAYLOAD_COPIERS: Dict[str, Callable[[Any], Any]] = {
    "shallow": copy.copy,
    "deep": copy.deepcopy,
    "none": _identity,
}


def get_payload_copy_mode() -> str:
    return (os.environ.get(PAYLOAD_COPY_ENV) or "").strip().lower() or DEFAULT_PAYLOAD_COPY


def resolve_copier(mode: Optional[str] = None) -> Callable[[Any], Any]:
    mode = (mode or "").strip().lower() or get_payload_copy_mode()
    copier = PAYLOAD_COPIERS.get(mode)
    if copier is None:
        raise ValueError(f"{PAYLOAD_COPY_ENV} must be one of {sorted(PAYLOAD_COPIERS)}, got '{mode}'")
    return copier


def get_log_level() -> int:
    name = (os.environ.get(LOG_LEVEL_ENV) or "").strip().upper() or DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"{LOG_LEVEL_ENV} is not a valid logging level: '{name}'")
    return level


def configure_logging(level: Optional[int] = None) -> logging.Logger:
    """Apply the configured level to the package logger and return it."""
    logger = logging.getLogger("Emitter")
    logger.setLevel(level if level is not None else get_log_level())
    return logger
