from __future__ import annotations

"""
Logging Core Orchestrator.

Maintains the idempotent lifecycle of the logging subsystem. A single
QueueHandler on the root logger feeds a QueueListener, so request handlers
in the HTTP service never block on file writes.
"""

import atexit
import logging
import os
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from dirspace.infra.fs import get_user_data_dir
from dirspace.infra.logging.config import _LEVEL_MAP, LoggingConfig
from dirspace.infra.logging.handlers import (
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_dirspace_configured"
_QUEUE_LISTENER_ATTR: str = "_dirspace_queue_listener"

DEFAULT_LOG_FILE_NAME = "dirspace.log"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def get_default_log_path(file_name: str = DEFAULT_LOG_FILE_NAME) -> str:
    """
    Resolve the standard log path within the user data directory.

    Args:
        file_name: Target log filename.

    Returns:
        str: Absolute path to the persistent log file.
    """
    return os.path.join(get_user_data_dir(), "logs", file_name)


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger once, using non-blocking queue-based I/O.

    Subsequent calls are no-ops unless force is set, in which case the
    package's own handlers and listener are torn down and rebuilt.

    Args:
        cfg: Structural configuration for the logging system.
        force: If True, bypass idempotency checks and re-initialize handlers.

    Returns:
        logging.Logger: The initialized root logger instance.
    """
    root = logging.getLogger()

    try:
        if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
            return root

        level_int = _parse_level(cfg.level)
        root.setLevel(level_int)

        _remove_our_handlers(root)
        _stop_existing_listener(root)

        handlers_list: List[logging.Handler] = []

        if cfg.console:
            sh = logging.StreamHandler(sys.stderr)
            sh.setLevel(level_int)
            sh.setFormatter(logging.Formatter(cfg.console_fmt))
            _tag_handler(sh)
            handlers_list.append(sh)

        if cfg.log_file:
            fh = _create_rotating_file_handler(
                cfg.log_file,
                level_int,
                logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
                cfg.max_bytes,
                cfg.backup_count,
            )
            if fh:
                handlers_list.append(fh)

        if not handlers_list:
            return root

        log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)

        queue_handler = QueueHandler(log_queue)
        _tag_handler(queue_handler)

        listener = QueueListener(log_queue, *handlers_list, respect_handler_level=True)
        listener.start()

        root.addHandler(queue_handler)

        setattr(root, _QUEUE_LISTENER_ATTR, listener)
        setattr(root, _CONFIGURED_FLAG_ATTR, True)

        # Flush pending records on interpreter shutdown
        atexit.register(_safe_stop_listener, listener)

        return root

    # Fallback to emergency console logging if the infrastructure fails
    except Exception:
        _remove_our_handlers(root)
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(logging.Formatter("CRITICAL FALLBACK | %(levelname)s | %(message)s"))
        _tag_handler(sh)
        root.addHandler(sh)
        root.warning("Logging infrastructure failed. Switched to emergency console.")
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


def shutdown_logging() -> None:
    """Stop the listener and detach the package's handlers."""
    root = logging.getLogger()
    _stop_existing_listener(root)
    _remove_our_handlers(root)
    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a string-based logging level to its numeric constant."""
    if not level:
        return logging.INFO
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)


def _remove_our_handlers(root: logging.Logger) -> None:
    """Detach and close every package-managed handler on the root."""
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()


def _stop_existing_listener(root: logging.Logger) -> None:
    """Terminate and release the existing QueueListener to reset state."""
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        setattr(root, _QUEUE_LISTENER_ATTR, None)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """
    Stop a QueueListener, tolerating listeners that were already stopped.

    atexit may fire after a test or a forced reconfiguration has already
    joined the listener thread.
    """
    if listener is None:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
