"""Fling event logging and the lazysnap handler pipeline."""

from __future__ import annotations

import dataclasses
import json
import logging
import queue
from collections.abc import Mapping
from datetime import UTC, datetime
from enum import Enum
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from lazysnap.api.logging import SnapLoggingConfig
from lazysnap.runtime.debug_config import resolve_log_file_path, resolve_log_level_name

SNAP_LOGGER_NAME = "lazysnap"

_QUEUE_LISTENER: QueueListener | None = None


def log_fling_event(
    logger: logging.Logger,
    event: str,
    *,
    level: int = logging.DEBUG,
    **fields: object,
) -> None:
    """Log a `fling.*` event with its fields inline and attached for JSON output."""
    if not logger.isEnabledFor(level):
        return
    rendered = " ".join(f"{key}={_render_field(value)}" for key, value in fields.items())
    logger.log(
        level,
        "%s %s" if rendered else "%s%s",
        event,
        rendered,
        extra={"event": event, "fling": fields},
    )


class JsonFormatter(logging.Formatter):
    """One JSON object per record; fling events keep their fields structured."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        event = getattr(record, "event", None)
        if event is not None:
            payload["event"] = event
            fields: Mapping[str, object] = getattr(record, "fling", {})
            payload["fling"] = {key: _json_field(value) for key, value in fields.items()}
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def configure_snap_logging(config: SnapLoggingConfig) -> None:
    """Attach console and optional queued file handlers to the lazysnap logger."""
    shutdown_snap_logging()

    handlers: list[logging.Handler] = [_console_handler(config.console_format)]
    if config.file_path:
        file_path = Path(config.file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True)
        file_handler.setFormatter(_resolve_formatter(config.file_format))
        handlers.append(file_handler)

    snap_logger = logging.getLogger(SNAP_LOGGER_NAME)
    snap_logger.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))
    snap_logger.propagate = False

    if len(handlers) == 1:
        snap_logger.addHandler(handlers[0])
        return

    # Trajectory ticks run on the UI thread; file writes happen on the listener thread.
    global _QUEUE_LISTENER
    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    snap_logger.addHandler(QueueHandler(log_queue))
    _QUEUE_LISTENER = QueueListener(log_queue, *handlers, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def shutdown_snap_logging() -> None:
    """Flush queued records and hand the lazysnap logger back to the host's configuration."""
    global _QUEUE_LISTENER

    if _QUEUE_LISTENER is not None:
        _QUEUE_LISTENER.stop()
        _QUEUE_LISTENER = None

    snap_logger = logging.getLogger(SNAP_LOGGER_NAME)
    for handler in list(snap_logger.handlers):
        snap_logger.removeHandler(handler)
        handler.close()
    snap_logger.setLevel(logging.NOTSET)
    snap_logger.propagate = True


def setup_snap_logging(*, debug_trace: bool = False) -> bool:
    """Install lazysnap handlers unless the host application already configured logging.

    Returns whether handlers were installed.
    """
    if logging.getLogger().handlers or logging.getLogger(SNAP_LOGGER_NAME).handlers:
        return False
    configure_snap_logging(
        SnapLoggingConfig(
            level_name=resolve_log_level_name(default="DEBUG" if debug_trace else "INFO"),
            console_format="text",
            file_path=resolve_log_file_path(),
            file_format="json",
        )
    )
    return True


def get_snap_logger(name: str) -> logging.Logger:
    """Return namespaced logger instance."""
    return logging.getLogger(name)


def _console_handler(kind: str) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(_resolve_formatter(kind))
    return handler


def _resolve_formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")


def _render_field(value: object) -> str:
    describe = getattr(value, "describe", None)
    if callable(describe):
        return str(describe())
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, float):
        return f"{value:.3f}"
    return str(value)


def _json_field(value: object) -> object:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, Enum):
        return value.value
    return value
