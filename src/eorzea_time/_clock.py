"""Wall-clock port and system adapter.

``EorzeaTime.now()`` reads real-world time through a :class:`Clock` so
callers and tests can substitute their own time source.
"""

from __future__ import annotations

import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Source of the current Unix epoch timestamp."""

    def now(self) -> float:
        """Return seconds since the Unix epoch, with fractional part."""
        ...


class SystemClock:
    """Production clock wrapping ``time.time()``.

    Satisfies :class:`Clock` via structural subtyping.
    """

    def now(self) -> float:
        return time.time()
