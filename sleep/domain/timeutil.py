"""Wall-clock helpers: "HH:MM" strings to minutes.

Parsing never fails. Anything that is not two integer fields around a
single colon is read as 0 minutes.
"""

import re

MINUTES_PER_DAY = 24 * 60

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_int(text: str) -> int | None:
    """Strict integer parse: optional sign and ASCII digits, signed 32-bit range.

    Returns None for anything else.
    """
    if _INTEGER.fullmatch(text) is None:
        return None
    value = int(text)
    if not INT32_MIN <= value <= INT32_MAX:
        return None
    return value


def parse_clock_string(hhmm: str) -> int:
    """Convert "HH:MM" to minutes since midnight, or 0 if malformed.

    No range check is applied: "99:99" gives 99 * 60 + 99.
    """
    parts = hhmm.split(":")
    if len(parts) != 2:
        return 0
    hours, minutes = (parse_int(p) for p in parts)
    if hours is None or minutes is None:
        return 0
    return hours * 60 + minutes


def sleep_window_minutes(bedtime: str, wake_target: str) -> int:
    """Minutes from bedtime to target wake, rolling over midnight.

    A wake time at or before bedtime is taken to be the next day, so
    identical times give a full 1440-minute window.
    """
    bed = parse_clock_string(bedtime)
    wake = parse_clock_string(wake_target)
    if wake <= bed:
        wake += MINUTES_PER_DAY
    return wake - bed
