from __future__ import annotations

from .config import LoggingConfig
from .core import (
    _QUEUE_LISTENER_ATTR,
    configure_logging,
    get_logger,
    parse_level,
)
from .handlers import _HANDLER_TAG_ATTR
from .sink import LoggingSink

__all__ = [
    "LoggingConfig",
    "LoggingSink",
    "configure_logging",
    "get_logger",
    "parse_level",
]
