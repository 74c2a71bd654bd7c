"""
Display strings for the dive list and the dive info form.

Every function here is pure: the same dive values and unit settings always
produce the same string, so rows can be re-derived at any time.
"""

import time

from divelog.errors import UnitError
from divelog.units import (
    LITERS_PER_CUFT,
    Length,
    Temperature,
    Volume,
    mkelvin_to,
    mm_to_feet,
)

WEEKDAYS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
MONTHS = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]

MAX_TEXT_LENGTH = 40


def weekday(when):
    tm = time.gmtime(when)
    # struct_time counts from Monday
    return WEEKDAYS[(tm.tm_wday + 1) % 7]


def monthname(month):
    return MONTHS[month - 1]


def format_date(when):
    tm = time.gmtime(when)
    return (
        f"{weekday(when)}, {monthname(tm.tm_mon)} {tm.tm_mday}, {tm.tm_year} "
        f"{tm.tm_hour:02d}:{tm.tm_min:02d}"
    )


def format_depth(mm, unit: Length):
    if unit == Length.METERS:
        tenths = (mm + 49) // 100
        integer, frac = divmod(tenths, 10)
        if integer < 20:
            return f"{integer}.{frac}"
        return f"{integer}"
    if unit == Length.FEET:
        return f"{int(mm_to_feet(mm) + 0.5)}"
    raise UnitError(f"unknown length unit {unit}")


def format_duration(seconds):
    return f"{seconds // 60}:{seconds % 60:02d}"


def format_temperature(mkelvin, unit: Temperature):
    if not mkelvin:
        return ""
    return f"{mkelvin_to(mkelvin, unit):.1f}"


def format_nitrox(o2):
    if not o2:
        return "air"
    return f"{o2 / 10.0:.1f}"


def format_sac(ml_per_min, unit: Volume):
    if not ml_per_min:
        return ""
    sac = ml_per_min / 1000.0
    if unit == Volume.LITER:
        return f"{sac:4.1f}"
    if unit == Volume.CUFT:
        return f"{sac / LITERS_PER_CUFT:4.2f}"
    raise UnitError(f"unknown volume unit {unit}")


def truncate(text, length=MAX_TEXT_LENGTH):
    if text is None:
        return ""
    return text[:length]
