"""Shared exception policy helpers for configuration boundaries."""

from __future__ import annotations

import logging
from typing import TypeAlias
from xml.etree.ElementTree import ParseError

# Data errors tolerated at the markup load boundary.
RecoverableConfigErrors: TypeAlias = tuple[type[BaseException], ...]
RECOVERABLE_CONFIG_ERRORS: RecoverableConfigErrors = (
    ValueError,
    KeyError,
    ParseError,
)


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *args: object,
    level: int = logging.WARNING,
) -> None:
    """Emit structured observability for tolerated recoverable exceptions."""
    logger.log(level, message, *args, exc_info=True)
