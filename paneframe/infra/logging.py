"""Logging configuration for pane rendering and markup loading."""

from __future__ import annotations

import json
import logging
import queue
from dataclasses import dataclass
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from paneframe.infra.config import PaneFrameConfig, load_config

__all__ = [
    "JsonFormatter",
    "LoggingConfig",
    "build_logging_config",
    "configure_logging",
    "setup_logging",
]

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_listener: QueueListener | None = None

# Attributes every LogRecord carries; anything else came in through ``extra=``.
_RECORD_ATTRIBUTES = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Console and optional file sink settings."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json

    @classmethod
    def from_config(cls, config: PaneFrameConfig) -> LoggingConfig:
        return cls(
            level_name=config.log_level or "INFO",
            console_format=config.log_format,
            file_path=config.log_file,
        )


class JsonFormatter(logging.Formatter):
    """One JSON object per record; ``extra=`` values land under ``fields``."""

    def payload(self, record: logging.LogRecord) -> dict[str, object]:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = {key: value for key, value in vars(record).items() if key not in _RECORD_ATTRIBUTES}
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return payload

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(self.payload(record), ensure_ascii=True, default=str)


def configure_logging(config: LoggingConfig) -> None:
    """Replace root handlers; with a file sink, route records through a queue listener."""
    global _listener

    _stop_listener()
    handlers = _build_handlers(config)
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.getLevelNamesMapping().get(config.level_name.upper(), logging.INFO))

    if len(handlers) == 1:
        root.addHandler(handlers[0])
        return

    records: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(records))
    _listener = QueueListener(records, *handlers, respect_handler_level=True)
    _listener.start()


def build_logging_config(config: PaneFrameConfig | None = None) -> LoggingConfig:
    """Derive logging settings from runtime configuration."""
    return LoggingConfig.from_config(config or load_config())


def setup_logging(config: PaneFrameConfig | None = None) -> None:
    """Configure logging once; existing root handlers are left in place."""
    if logging.getLogger().handlers:
        return
    logging_config = build_logging_config(config)
    configure_logging(logging_config)
    logging.getLogger(__name__).debug("logging_configured level=%s", logging_config.level_name)


def _build_handlers(config: LoggingConfig) -> list[logging.Handler]:
    console = logging.StreamHandler()
    console.setFormatter(_formatter(config.console_format))
    if not config.file_path:
        return [console]
    path = Path(config.file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    sink = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    sink.setFormatter(_formatter(config.file_format))
    return [console, sink]


def _stop_listener() -> None:
    global _listener
    if _listener is not None:
        _listener.stop()
        _listener = None


def _formatter(kind: str) -> logging.Formatter:
    return JsonFormatter() if kind.strip().lower() == "json" else logging.Formatter(TEXT_FORMAT)
