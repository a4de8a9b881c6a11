"""Normalization and format validation helpers."""

from __future__ import annotations

import logging
import math

from eorzea_time._constants import FORBIDDEN_DIRECTIVES
from eorzea_time._errors import ERR_MSG_INVALID_FORMAT, InvalidFormatError

logger = logging.getLogger(__name__)


def or_zero(value: float | None) -> float:
    """Return ``value``, or 0 when it is missing, zero or NaN."""
    if not value or (isinstance(value, float) and math.isnan(value)):
        return 0
    return value


def carry(value: float, size: int) -> int:
    """Return the whole units of ``size`` held by ``value``.

    Only values strictly greater than ``size`` carry, so exactly one full
    unit (e.g. 60 seconds) stays put and wraps to zero.
    """
    if value > size:
        return math.trunc(value) // size
    return 0


def wrap(value: float, size: int) -> int:
    """Truncate ``value`` toward zero and wrap it into ``[0, size)``."""
    return int(value) % size


def validate_format(fmt: str) -> None:
    """Reject format strings containing calendar or timezone directives.

    This is a plain substring search, so an escaped ``%%d`` is rejected
    as well.
    """
    for letter in FORBIDDEN_DIRECTIVES:
        directive = "%" + letter
        if directive in fmt:
            details = f"format string {fmt!r} contains the date directive {directive!r}"
            logger.debug("Rejecting format: %s", details)
            raise InvalidFormatError(
                f"{ERR_MSG_INVALID_FORMAT}: {directive}",
                details,
            )
