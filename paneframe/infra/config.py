"""Runtime configuration read from environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from paneframe.core.models import CONTAINER_WIDTH, MAX_CONTAINER_ROWS


@dataclass(frozen=True, slots=True)
class PaneFrameConfig:
    """Immutable runtime configuration."""

    container_width: int
    container_rows: int
    log_level: str
    log_format: str
    log_file: str | None = None


def load_config(*, env: Mapping[str, str] | None = None) -> PaneFrameConfig:
    """Load configuration from the process environment or an explicit mapping."""
    rows = _int("PANEFRAME_CONTAINER_ROWS", MAX_CONTAINER_ROWS, minimum=1, env=env)
    return PaneFrameConfig(
        container_width=_int("PANEFRAME_CONTAINER_WIDTH", CONTAINER_WIDTH, minimum=1, env=env),
        container_rows=min(rows, MAX_CONTAINER_ROWS),
        log_level=_text("PANEFRAME_LOG_LEVEL", _text("LOG_LEVEL", "INFO", env=env), env=env).upper(),
        log_format=_text("LOG_FORMAT", "text", env=env).lower(),
        log_file=_text("PANEFRAME_LOG_FILE", "", env=env) or None,
    )


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _int(
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        value = int(default)
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            value = int(default)
    if minimum is None:
        return value
    return max(int(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)
