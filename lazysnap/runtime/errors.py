"""Fling cancellation and host-fault policy helpers."""

from __future__ import annotations

import logging
from typing import TypeAlias


class FlingCancelledError(Exception):
    """Raised by a frame ticker or host to abandon a running trajectory."""


# Faults a host adapter may tolerate, e.g. a Qt view deleted mid-fling.
RecoverableHostErrors: TypeAlias = tuple[type[BaseException], ...]
RECOVERABLE_HOST_ERRORS: RecoverableHostErrors = (
    RuntimeError,
    AttributeError,
)


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *,
    level: int = logging.DEBUG,
) -> None:
    """Emit observability for a tolerated recoverable exception."""
    logger.log(level, message, exc_info=True)
