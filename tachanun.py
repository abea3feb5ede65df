"""
Tachanun rule engine.

Tachanun is not said on Rosh Chodesh, the month of Nisan, Lag BaOmer,
Rosh Chodesh Sivan until Isru Chag, Tisha B'Av, Tu B'Av, Erev Rosh Hashanah,
Rosh Hashanah, Erev Yom Kippur until Isru Chag of Sukkot, Chanukah,
Tu BiShvat, Purim and Shushan Purim, and Purim Katan.

Some congregations also omit it from Rosh Chodesh Sivan until 13 Sivan,
from Sukkot until Rosh Chodesh Cheshvan, on Pesach Sheini, Yom Ha'atzmaut
and Yom Yerushalayim.

Tachanun is not said at Mincha on the day before a day it is not said at
Shacharit. On Shabbat it is not said at Shacharit, but Tzidkatcha is usually
said at Mincha.

The exception dates of each Hebrew year are computed once per (year, locale)
and cached for the life of the process.
"""

import threading
from bisect import bisect_left
from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List, NamedTuple, Tuple

from hdate import (
    ADAR_I,
    ADAR_II,
    AV,
    ELUL,
    FRIDAY,
    IYYAR,
    KISLEV,
    NISAN,
    SATURDAY,
    SHVAT,
    SIVAN,
    TISHREI,
    HebrewDate,
    days_in_month,
    hebrew2abs,
    is_leap_year,
    months_in_year,
)
from modern import date_yom_haatzmaut, date_yom_yerushalayim


@dataclass(frozen=True)
class TachanunResult:
    """What is said on one day.

    Attributes:
        no_tachanun: No Tachanun at either service, according to everybody
        shacharit: Tachanun is said at Shacharit
        mincha: Tachanun is said at Mincha
        all_congs: All congregations follow this ruling
    """

    no_tachanun: bool
    shacharit: bool
    mincha: bool
    all_congs: bool

    def to_dict(self) -> Dict[str, bool]:
        data = asdict(self)
        return {
            "noTachanun": data["no_tachanun"],
            "shacharit": data["shacharit"],
            "mincha": data["mincha"],
            "allCongs": data["all_congs"],
        }


NO_TACHANUN = TachanunResult(
    no_tachanun=True,
    shacharit=False,
    mincha=False,
    all_congs=False,
)


class TachanunDateSet(NamedTuple):
    """Sorted absolute days of one year's exceptions."""

    none: Tuple[int, ...]
    some: Tuple[int, ...]
    yes_prev: Tuple[int, ...]


# ========= YEAR TABLES =========

def _days(year: int, month: int, first: int, last: int) -> List[int]:
    """Absolute days of `first`..`last` (inclusive) of a month."""
    start = hebrew2abs(year, month, first)
    return [start + offset for offset in range(last - first + 1)]


def _skip_shabbat(abs_day: int) -> int:
    return abs_day + 1 if abs_day % 7 == SATURDAY else abs_day


def _sorted(days: Iterable[int]) -> Tuple[int, ...]:
    return tuple(sorted(set(days)))


def build_year_sets(year: int, il: bool) -> TachanunDateSet:
    """
    Compute the three exception sets for a Hebrew year.

    Args:
        year: Hebrew year
        il: True for Israel, False for the diaspora

    Returns:
        TachanunDateSet with `none` (no Tachanun anywhere), `some` (omitted
        only by some congregations) and `yes_prev` (days whose eve keeps its
        own Mincha rule)
    """
    leap = is_leap_year(year)
    month_numbers = range(1, months_in_year(year) + 1)
    adar = ADAR_II if leap else ADAR_I
    israel_offset = 1 if il else 0

    none: List[int] = []
    # Rosh Chodesh; the first of Tishrei is also Rosh Hashanah
    none.extend(hebrew2abs(year, month, 1) for month in month_numbers)
    none.extend(
        hebrew2abs(year, month, 30)
        for month in month_numbers
        if days_in_month(month, year) == 30
    )
    none.append(hebrew2abs(year, TISHREI, 2))
    none.extend(_days(year, NISAN, 1, days_in_month(NISAN, year)))
    none.append(hebrew2abs(year, IYYAR, 18))  # Lag BaOmer
    # Rosh Chodesh Sivan through Isru Chag
    none.extend(_days(year, SIVAN, 1, 8 - israel_offset))
    none.append(_skip_shabbat(hebrew2abs(year, AV, 9)))  # Tisha B'Av
    none.append(hebrew2abs(year, AV, 15))  # Tu B'Av
    none.append(hebrew2abs(year, ELUL, 29))  # Erev Rosh Hashanah
    # Erev Yom Kippur through Isru Chag
    none.extend(_days(year, TISHREI, 9, 24 - israel_offset))
    # Chanukah runs into Tevet
    chanukah = hebrew2abs(year, KISLEV, 25)
    none.extend(chanukah + offset for offset in range(8))
    none.append(hebrew2abs(year, SHVAT, 15))  # Tu BiShvat
    none.append(hebrew2abs(year, adar, 14))  # Purim
    none.append(_skip_shabbat(hebrew2abs(year, adar, 15)))  # Shushan Purim
    if leap:
        none.append(hebrew2abs(year, ADAR_I, 14))  # Purim Katan

    some: List[int] = []
    some.extend(_days(year, SIVAN, 1, 13))
    some.extend(_days(year, TISHREI, 20, 30))
    some.append(hebrew2abs(year, IYYAR, 14))  # Pesach Sheini
    for modern_date in (date_yom_haatzmaut(year), date_yom_yerushalayim(year)):
        if modern_date is not None:
            some.append(modern_date.abs())

    yes_prev = [
        hebrew2abs(year - 1, ELUL, 29),  # Erev Rosh Hashanah
        hebrew2abs(year, TISHREI, 9),  # Erev Yom Kippur
        hebrew2abs(year, IYYAR, 14),  # Pesach Sheini
    ]

    return TachanunDateSet(
        none=_sorted(none),
        some=_sorted(some),
        yes_prev=_sorted(yes_prev),
    )


# ========= CACHE =========
# Key: (Hebrew year, il), Value: the year's TachanunDateSet. Entries are never evicted.
_tachanun_cache: Dict[Tuple[int, bool], TachanunDateSet] = {}
_tachanun_cache_lock = threading.Lock()


def get_year_sets(year: int, il: bool) -> TachanunDateSet:
    """Return the cached exception sets for (year, il), building them on first use."""
    key = (year, bool(il))
    dates = _tachanun_cache.get(key)
    if dates is None:
        with _tachanun_cache_lock:
            dates = _tachanun_cache.get(key)
            if dates is None:
                dates = build_year_sets(year, bool(il))
                _tachanun_cache[key] = dates
    return dates


def clear_tachanun_cache() -> None:
    """Clear the per-year cache. Useful for testing."""
    with _tachanun_cache_lock:
        _tachanun_cache.clear()


def _contains(days: Tuple[int, ...], abs_day: int) -> bool:
    index = bisect_left(days, abs_day)
    return index < len(days) and days[index] == abs_day


# ========= LOOKUP =========

def tachanun(hdate: HebrewDate, il: bool) -> TachanunResult:
    """
    Return what Tachanun (or Tzidkatcha on Shabbat) is said on `hdate`.

    Args:
        hdate: The Hebrew date
        il: True for Israel, False for the diaspora

    Returns:
        TachanunResult; days with nothing said anywhere return NO_TACHANUN
    """
    return _classify(hdate, il, check_next=True)


def _classify(hdate: HebrewDate, il: bool, check_next: bool) -> TachanunResult:
    dates = get_year_sets(hdate.year, il)
    abs_day = hdate.abs()
    if _contains(dates.none, abs_day):
        return NO_TACHANUN

    dow = abs_day % 7
    shacharit = dow != SATURDAY
    all_congs = not _contains(dates.some, abs_day)

    # Mincha follows tomorrow's Shacharit, except on the eves in yes_prev
    tomorrow = abs_day + 1
    if check_next and not _contains(dates.yes_prev, tomorrow):
        mincha = _classify(HebrewDate.from_abs(tomorrow), il, check_next=False).shacharit
    else:
        mincha = dow != FRIDAY

    if all_congs and not mincha and not shacharit:
        return NO_TACHANUN
    return TachanunResult(
        no_tachanun=False,
        shacharit=shacharit,
        mincha=mincha,
        all_congs=all_congs,
    )
