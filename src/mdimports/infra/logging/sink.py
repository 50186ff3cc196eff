from __future__ import annotations

"""
Logging Sink Adapter.

Bridges the processor's structured (level, tag, message) diagnostics to
the standard logging hierarchy. Each tag becomes a child logger of the
package so that handlers and levels can be tuned per emitter.
"""

import logging
from typing import Dict

from mdimports.infra.logging.config import _LEVEL_MAP, PACKAGE_LOGGER_NAME


class LoggingSink:
    """Log-sink port that forwards messages to stdlib loggers."""

    def __init__(self, root_name: str = PACKAGE_LOGGER_NAME) -> None:
        self.root_name = root_name
        self._loggers: Dict[str, logging.Logger] = {}

    def log(self, level: str, tag: str, message: str) -> None:
        """
        Emit a structured message.

        Args:
            level: 'warn', 'error' or 'debug'; anything else logs at INFO.
            tag: Emitting component, used as the child logger name.
            message: Human readable message.
        """
        level_int = _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)
        self._logger_for(tag).log(level_int, message)

    def _logger_for(self, tag: str) -> logging.Logger:
        if tag not in self._loggers:
            self._loggers[tag] = logging.getLogger(f"{self.root_name}.{tag}")
        return self._loggers[tag]
