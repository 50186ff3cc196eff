from __future__ import annotations

"""
Logging Core Orchestrator.

Maintains the idempotent lifecycle of the logging subsystem. A single
QueueHandler on the root logger feeds a QueueListener that owns the real
handlers, so writing diagnostics never blocks the import traversal.

The configured level is applied twice: on the root logger, which owns
the handlers, and on the 'mdimports' package logger, which is where the
processor sink emits. An embedding application that tuned the package
logger on its own is overridden when the CLI reconfigures logging.
"""

import atexit
import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from mdimports.infra.logging.config import _LEVEL_MAP, PACKAGE_LOGGER_NAME, LoggingConfig
from mdimports.infra.logging.handlers import (
    _create_console_handler,
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

# Internal state flags for idempotency and lifecycle tracking
_CONFIGURED_FLAG_ATTR: str = "_mdimports_configured"
_QUEUE_LISTENER_ATTR: str = "_mdimports_queue_listener"

_FALLBACK_FMT: str = "FALLBACK | %(levelname)s | %(name)s | %(message)s"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Route diagnostics to stderr and an optional rotating file through a queue.

    Args:
        cfg: Structural configuration for the logging system.
        force: If True, tear down the previous setup and build a new one.

    Returns:
        logging.Logger: The root logger carrying the queue handler.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    level_int = parse_level(cfg.level)
    _teardown(root)

    try:
        handlers = _build_handlers(cfg, level_int)
    except (OSError, ValueError, TypeError) as e:
        # Invalid format strings or sizes in the config land here
        return _fall_back_to_console(root, e)

    _apply_level(root, level_int)
    if handlers:
        _attach_queue(root, handlers)
    return root


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a named logger instance compliant with the global configuration.

    Args:
        name: Hierarchical name for the logger (usually __name__).

    Returns:
        logging.Logger: The requested logger instance.
    """
    return logging.getLogger(name)


def parse_level(level: Optional[str]) -> int:
    """Convert a string-based logging level to its numeric constant."""
    if not level:
        return logging.INFO
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _build_handlers(cfg: LoggingConfig, level_int: int) -> List[logging.Handler]:
    """Create the sinks the queue listener will drain into."""
    handlers: List[logging.Handler] = []

    if cfg.console:
        handlers.append(_create_console_handler(level_int, logging.Formatter(cfg.console_fmt)))

    if cfg.log_file:
        fh = _create_rotating_file_handler(
            cfg.log_file,
            level_int,
            logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh is not None:
            handlers.append(fh)

    return handlers


def _apply_level(root: logging.Logger, level_int: int) -> None:
    root.setLevel(level_int)
    logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(level_int)


def _attach_queue(root: logging.Logger, handlers: List[logging.Handler]) -> QueueListener:
    """Put a tagged QueueHandler on the root and start a listener for the handlers."""
    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)

    queue_handler = QueueHandler(log_queue)
    _tag_handler(queue_handler)

    listener = QueueListener(log_queue, *handlers, respect_handler_level=True)
    listener.start()
    root.addHandler(queue_handler)

    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)

    # Flush pending records on interpreter shutdown
    atexit.register(_safe_stop_listener, listener)
    return listener


def _fall_back_to_console(root: logging.Logger, exc: Exception) -> logging.Logger:
    """
    Install a plain synchronous stderr handler after a failed setup.

    The configured flag stays unset so the next call retries the full setup.
    """
    _teardown(root)
    _apply_level(root, logging.INFO)
    root.addHandler(_create_console_handler(logging.NOTSET, logging.Formatter(_FALLBACK_FMT)))

    logging.getLogger(PACKAGE_LOGGER_NAME).warning(
        f"Logging setup failed ({exc}). Using plain console output."
    )
    return root


def _teardown(root: logging.Logger) -> None:
    """Detach our handlers and stop the listener of a previous setup."""
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()

    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        # Listener-owned handlers are not on the root; release the log file here
        for h in listener.handlers:
            h.close()
        setattr(root, _QUEUE_LISTENER_ATTR, None)

    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """
    Stop a QueueListener, tolerating listeners that were already stopped.

    The internal thread is None once stop() has run, which happens when
    a test reset races the atexit hook.
    """
    if not listener:
        return

    if getattr(listener, "_thread", None) is not None:
        listener.stop()
