"""The EorzeaTime value type."""

from __future__ import annotations

import datetime
import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import overload

from eorzea_time._clock import Clock, SystemClock
from eorzea_time._constants import (
    DEFAULT_FORMAT,
    EORZEA_TIME_CONSTANT,
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    PLACEHOLDER_DATE,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from eorzea_time._errors import ERR_MSG_UNFORMATTABLE, InvalidFormatError
from eorzea_time._utils import carry, or_zero, validate_format, wrap

logger = logging.getLogger(__name__)

_system_clock = SystemClock()


@dataclass(frozen=True, eq=False, init=False)
class EorzeaTime:
    """A time of day on the Eorzean clock.

    Eorzea has no calendar, so only the hour, minute and second are
    tracked. Out-of-range components carry into the next unit and the
    hour wraps at 24.
    """

    hour: int
    minute: int
    second: int

    def __init__(
        self,
        hour: float | None = 0,
        minute: float | None = 0,
        second: float | None = 0,
    ) -> None:
        hour = or_zero(hour)
        minute = or_zero(minute)
        second = or_zero(second)

        minute += carry(second, SECONDS_PER_MINUTE)
        hour += carry(minute, MINUTES_PER_HOUR)

        object.__setattr__(self, "second", wrap(second, SECONDS_PER_MINUTE))
        object.__setattr__(self, "minute", wrap(minute, MINUTES_PER_HOUR))
        object.__setattr__(self, "hour", wrap(hour, HOURS_PER_DAY))

    @overload
    @classmethod
    def coerce(cls, hour: EorzeaTime) -> EorzeaTime: ...

    @overload
    @classmethod
    def coerce(
        cls, hour: float, minute: float | None = ..., second: float | None = ...
    ) -> EorzeaTime: ...

    @classmethod
    def coerce(cls, hour, minute=0, second=0):
        """Build an EorzeaTime from components, or pass one through as-is."""
        if isinstance(hour, EorzeaTime):
            return hour
        if isinstance(hour, Real):
            return cls(hour, minute, second)
        raise TypeError(
            f"expected an EorzeaTime or a number, got {type(hour).__name__}"
        )

    @classmethod
    def from_timestamp(cls, epoch_seconds: float) -> EorzeaTime:
        """Return the Eorzea time at the given real-world Unix timestamp."""
        eorzea_seconds = epoch_seconds * EORZEA_TIME_CONSTANT
        result = cls(
            math.fmod(eorzea_seconds / SECONDS_PER_HOUR, HOURS_PER_DAY),
            math.fmod(eorzea_seconds / SECONDS_PER_MINUTE, MINUTES_PER_HOUR),
            math.fmod(eorzea_seconds, SECONDS_PER_MINUTE),
        )
        logger.debug("Epoch %.3f is Eorzea time %r", epoch_seconds, result)
        return result

    @classmethod
    def now(cls, clock: Clock | None = None) -> EorzeaTime:
        """Return the current Eorzea time.

        Args:
            clock: Source of the real-world timestamp. Defaults to the
                system clock.
        """
        if clock is None:
            clock = _system_clock
        return cls.from_timestamp(clock.now())

    def eq(
        self,
        other: EorzeaTime | float,
        minute: float | None = None,
        second: float | None = None,
    ) -> bool:
        """Return True if both times show the same hour and minute.

        Seconds are ignored. ``other`` may also be given as raw
        components, e.g. ``t.eq(11, 30)``.
        """
        other = EorzeaTime.coerce(other, minute, second)
        return self.hour == other.hour and self.minute == other.minute

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EorzeaTime):
            return NotImplemented
        return self.eq(other)

    def __hash__(self) -> int:
        return hash((self.hour, self.minute))

    def strftime(self, fmt: str) -> str:
        """Format the time with strftime directives.

        Only time-of-day directives are accepted; any day, month, year,
        weekday or timezone directive raises InvalidFormatError before
        formatting starts.
        """
        validate_format(fmt)
        dt = datetime.datetime.combine(
            PLACEHOLDER_DATE, datetime.time(self.hour, self.minute, self.second)
        )
        try:
            return dt.strftime(fmt)
        except ValueError as exc:
            raise InvalidFormatError(
                ERR_MSG_UNFORMATTABLE,
                f"strftime rejected format string {fmt!r}: {exc}",
                wrapped=exc,
            ) from exc

    def to_string(self) -> str:
        return self.strftime(DEFAULT_FORMAT)

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return self.strftime(format_spec)
