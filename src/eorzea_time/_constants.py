"""Constants for Eorzea time derivation and formatting."""

from __future__ import annotations

import datetime

EORZEA_TIME_CONSTANT = 3600 / 175
"""Eorzea seconds elapsed per real-world second."""

SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
SECONDS_PER_HOUR = SECONDS_PER_MINUTE * MINUTES_PER_HOUR

# strftime directive letters that refer to calendar or timezone concepts.
FORBIDDEN_DIRECTIVES: tuple[str, ...] = (
    "a", "A", "b", "B", "c", "d", "h", "j", "m",
    "U", "w", "W", "x", "y", "Y", "z", "Z",
)

PLACEHOLDER_DATE = datetime.date(1980, 2, 1)
"""Arbitrary date combined with an Eorzea time before calling strftime."""

DEFAULT_FORMAT = "%X Eorzea Time"
