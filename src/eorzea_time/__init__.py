"""eorzea_time - Convert real-world time to Eorzea time."""

from __future__ import annotations

import logging

try:
    from eorzea_time._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from eorzea_time._clock import Clock, SystemClock
from eorzea_time._constants import EORZEA_TIME_CONSTANT
from eorzea_time._errors import EorzeaTimeError, InvalidFormatError
from eorzea_time._time import EorzeaTime

__all__ = [
    "EORZEA_TIME_CONSTANT",
    "Clock",
    "EorzeaTime",
    "EorzeaTimeError",
    "InvalidFormatError",
    "SystemClock",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
