"""
Hebrew calendar arithmetic.

This module converts between Hebrew (year, month, day) triples and absolute
day numbers using integer arithmetic only. Absolute day 0 is 17 Tevet 3761,
and absolute days increase by one per civil day with no gaps.

Months are numbered from Nisan, so the year starts in the middle of the
numbering (Tishrei = 7):
    1 Nisan ... 6 Elul, 7 Tishrei ... 11 Sh'vat, 12 Adar I, 13 Adar II

In a non-leap year month 12 is plain "Adar" and there is no month 13.
"""

import math
from functools import lru_cache
from typing import NamedTuple

from config import ELAPSED_DAYS_CACHE_SIZE

# ========= MONTHS =========

NISAN = 1
IYYAR = 2
SIVAN = 3
TAMUZ = 4
AV = 5
ELUL = 6
TISHREI = 7
CHESHVAN = 8
KISLEV = 9
TEVET = 10
SHVAT = 11
ADAR_I = 12
ADAR_II = 13

# Month value used when iterating past the end of a year
NISAN_NEXT_YEAR = 14

_MONTH_NAMES_BASE = (
    "",
    "Nisan",
    "Iyyar",
    "Sivan",
    "Tamuz",
    "Av",
    "Elul",
    "Tishrei",
    "Cheshvan",
    "Kislev",
    "Tevet",
    "Sh'vat",
)
MONTH_NAMES = (
    _MONTH_NAMES_BASE + ("Adar",),
    _MONTH_NAMES_BASE + ("Adar I", "Adar II"),
)

# ========= WEEKDAYS =========
# Absolute day 0 is a Sunday

SUNDAY = 0
MONDAY = 1
TUESDAY = 2
WEDNESDAY = 3
THURSDAY = 4
FRIDAY = 5
SATURDAY = 6

# ========= CONSTANTS =========

# Offset between the elapsed-days count and the absolute day number.
# A multiple of 7, so both counts agree on the day of the week.
EPOCH = -1373428

# Molad arithmetic: 1080 parts per hour, 25920 parts per day
PARTS_PER_HOUR = 1080
PARTS_PER_DAY = 24 * PARTS_PER_HOUR
MONTHS_PER_CYCLE = 235

# Mean lunar month is 29 days + 13753 parts; a mean year is 235/19 of those.
_MEAN_MONTH_PARTS = 29 * PARTS_PER_DAY + 13753
_MEAN_YEAR_NUMERATOR = MONTHS_PER_CYCLE * _MEAN_MONTH_PARTS
_MEAN_YEAR_DENOMINATOR = 19 * PARTS_PER_DAY

YEAR_LENGTHS = (353, 354, 355, 383, 384, 385)


# ========= ERRORS =========

class InvalidArgumentError(TypeError):
    """Raised when a validating function receives a non-numeric or non-finite value."""


class MonthOutOfRangeError(InvalidArgumentError):
    """Raised when a month number is numeric but outside 1..14."""


class DateOutOfRangeError(InvalidArgumentError):
    """Raised by validate_date for a month or day that does not exist in the year."""


def _describe(value) -> str:
    """Render a value for an error message, spelling out non-finite floats."""
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
    return str(value)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# ========= YEAR ARITHMETIC =========

def is_leap_year(year: int) -> bool:
    """Return True if `year` has 13 months (years 3, 6, 8, 11, 14, 17, 19 of the cycle)."""
    return (7 * year + 1) % 19 < 7


def months_in_year(year: int) -> int:
    return 12 + is_leap_year(year)


@lru_cache(maxsize=ELAPSED_DAYS_CACHE_SIZE)
def elapsed_days(year: int) -> int:
    """
    Days from the calendar epoch to 1 Tishrei of `year`.

    Every other year and month length is derived from differences between
    consecutive values of this function.

    Args:
        year: Hebrew year (>= 1)

    Returns:
        Day count such that elapsed_days(1) == 1
    """
    prev_year = year - 1
    cycle_year = prev_year % 19
    months_elapsed = (
        MONTHS_PER_CYCLE * (prev_year // 19)  # complete Metonic cycles
        + 12 * cycle_year  # regular months in this cycle
        + (7 * cycle_year + 1) // 19  # leap months in this cycle
    )
    parts_elapsed = 204 + 793 * (months_elapsed % PARTS_PER_HOUR)
    hours_elapsed = (
        5
        + 12 * months_elapsed
        + 793 * (months_elapsed // PARTS_PER_HOUR)
        + parts_elapsed // PARTS_PER_HOUR
    )
    # Time of the molad within its day, in parts
    parts = parts_elapsed % PARTS_PER_HOUR + PARTS_PER_HOUR * (hours_elapsed % 24)
    day = 1 + 29 * months_elapsed + hours_elapsed // 24

    if (
        parts >= 19440  # molad at or after noon
        or (day % 7 == TUESDAY and parts >= 9924 and not is_leap_year(year))
        or (day % 7 == MONDAY and parts >= 16789 and is_leap_year(prev_year))
    ):
        day += 1

    # Rosh Hashanah never falls on Sunday, Wednesday or Friday
    if day % 7 in (SUNDAY, WEDNESDAY, FRIDAY):
        day += 1

    return day


def days_in_year(year: int) -> int:
    """Number of days in `year`: one of 353, 354, 355, 383, 384, 385."""
    return elapsed_days(year + 1) - elapsed_days(year)


def long_cheshvan(year: int) -> bool:
    """True when Cheshvan has 30 days (a "complete" year of 355 or 385 days)."""
    return days_in_year(year) % 10 == 5


def short_kislev(year: int) -> bool:
    """True when Kislev has 29 days (a "deficient" year of 353 or 383 days)."""
    return days_in_year(year) % 10 == 3


def days_in_month(month: int, year: int) -> int:
    """
    Number of days in a Hebrew month.

    The month is not validated; an Adar II lookup in a non-leap year returns
    29 like any other short month.
    """
    if month in (IYYAR, TAMUZ, ELUL, TEVET, ADAR_II):
        return 29
    if (
        (month == ADAR_I and not is_leap_year(year))
        or (month == CHESHVAN and not long_cheshvan(year))
        or (month == KISLEV and short_kislev(year))
    ):
        return 29
    return 30


def get_month_name(month, year: int) -> str:
    """
    Transliterated name of a month in a given year.

    Args:
        month: Month number 1..14 (14, and 13 in a non-leap year, mean
            Nisan of the following year)
        year: Hebrew year, used for the leap-year naming of Adar

    Returns:
        Month name such as "Tishrei", "Adar", "Adar I" or "Adar II"

    Raises:
        InvalidArgumentError: month is not a number, or is NaN
        MonthOutOfRangeError: month is a number outside 1..14
    """
    if not _is_number(month) or (isinstance(month, float) and math.isnan(month)):
        raise InvalidArgumentError(f"bad month argument {_describe(month)}")
    if (
        isinstance(month, float) and not month.is_integer()
    ) or not 1 <= month <= NISAN_NEXT_YEAR:
        raise MonthOutOfRangeError(f"bad month argument {_describe(month)}")

    month = int(month)
    leap = is_leap_year(year)
    if month > months_in_year(year):
        return MONTH_NAMES[leap][NISAN]
    return MONTH_NAMES[leap][month]


# ========= CONVERSION =========

def hebrew2abs(year: int, month: int, day: int) -> int:
    """
    Convert a Hebrew date to an absolute day number.

    Months before Tishrei belong to the second half of the year, so they are
    counted after every month from Tishrei through the last Adar. The input is
    not checked: an out-of-range day simply runs into the following months.
    """
    total = day
    if month < TISHREI:
        for m in range(TISHREI, months_in_year(year) + 1):
            total += days_in_month(m, year)
        for m in range(NISAN, month):
            total += days_in_month(m, year)
    else:
        for m in range(TISHREI, month):
            total += days_in_month(m, year)
    return EPOCH + elapsed_days(year) + total - 1


def _new_year(year: int) -> int:
    """Absolute day of 1 Tishrei."""
    return EPOCH + elapsed_days(year)


def month_order(year: int) -> tuple:
    """Months of `year` in calendar order, Tishrei first and Elul last."""
    return tuple(range(TISHREI, months_in_year(year) + 1)) + tuple(range(NISAN, TISHREI))


def abs2hebrew(abs_day) -> "HebrewDate":
    """
    Convert an absolute day number to a Hebrew date.

    Args:
        abs_day: Absolute day; floats are truncated toward zero

    Returns:
        The HebrewDate for that day

    Raises:
        InvalidArgumentError: abs_day is not a number, or is NaN or infinite
    """
    if not _is_number(abs_day) or not math.isfinite(abs_day):
        raise InvalidArgumentError(f"invalid parameter to abs2hebrew {_describe(abs_day)}")
    abs_day = int(abs_day)

    # First estimate from the mean year length, then settle on the exact year
    year = (abs_day - EPOCH) * _MEAN_YEAR_DENOMINATOR // _MEAN_YEAR_NUMERATOR
    while _new_year(year) > abs_day:
        year -= 1
    while _new_year(year + 1) <= abs_day:
        year += 1

    remaining = abs_day - _new_year(year)
    for month in month_order(year):
        length = days_in_month(month, year)
        if remaining < length:
            return HebrewDate(year, month, remaining + 1)
        remaining -= length

    raise AssertionError(f"abs2hebrew could not place day {abs_day} in year {year}")


def validate_date(year: int, month: int, day: int) -> None:
    """
    Check that (year, month, day) names a real day.

    Raises:
        DateOutOfRangeError: the year is below 1, the month does not exist in
            that year, or the day is past the end of the month
    """
    if year < 1:
        raise DateOutOfRangeError(f"bad year argument {year}")
    if not 1 <= month <= months_in_year(year):
        raise DateOutOfRangeError(f"bad month argument {month} for year {year}")
    if not 1 <= day <= days_in_month(month, year):
        raise DateOutOfRangeError(
            f"bad day argument {day} for {get_month_name(month, year)} {year}"
        )


# ========= DATE TYPE =========

class HebrewDate(NamedTuple):
    """A Hebrew calendar date. Fields are unchecked; see validate_date."""

    year: int
    month: int
    day: int

    @classmethod
    def from_abs(cls, abs_day) -> "HebrewDate":
        return abs2hebrew(abs_day)

    def abs(self) -> int:
        return hebrew2abs(self.year, self.month, self.day)

    def day_of_week(self) -> int:
        """Weekday of the date, 0 = Sunday ... 6 = Saturday."""
        return self.abs() % 7

    def is_leap_year(self) -> bool:
        return is_leap_year(self.year)

    def days_in_month(self) -> int:
        return days_in_month(self.month, self.year)

    def month_name(self) -> str:
        return get_month_name(self.month, self.year)

    def next(self) -> "HebrewDate":
        return abs2hebrew(self.abs() + 1)

    def prev(self) -> "HebrewDate":
        return abs2hebrew(self.abs() - 1)
