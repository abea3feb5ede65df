"""
Modern Israeli commemorations whose dates move with the day of the week.

Yom HaZikaron is nominally 4 Iyyar and Yom Ha'atzmaut 5 Iyyar, but both are
moved so that neither touches Shabbat.
"""

from typing import Optional

from hdate import IYYAR, NISAN, SATURDAY, SUNDAY, TUESDAY, HebrewDate

FIRST_YOM_HAATZMAUT_YEAR = 5708
FIRST_YOM_YERUSHALAYIM_YEAR = 5727

# From 5764 a Monday Yom HaZikaron (Pesach on Tuesday) moves to Tuesday
_MONDAY_RULE_YEAR = 5764


def _yom_hazikaron_day(year: int) -> int:
    """Day of Iyyar for Yom HaZikaron, from the weekday of 15 Nisan."""
    pesach_dow = HebrewDate(year, NISAN, 15).day_of_week()
    if pesach_dow == SUNDAY:
        return 2
    if pesach_dow == SATURDAY:
        return 3
    if year >= _MONDAY_RULE_YEAR and pesach_dow == TUESDAY:
        return 5
    return 4


def date_yom_hazikaron(year: int) -> Optional[HebrewDate]:
    """
    Date of Yom HaZikaron in a Hebrew year.

    Args:
        year: Hebrew year

    Returns:
        The HebrewDate in Iyyar, or None before it was first observed (5708)
    """
    if year < FIRST_YOM_HAATZMAUT_YEAR:
        return None
    return HebrewDate(year, IYYAR, _yom_hazikaron_day(year))


def date_yom_haatzmaut(year: int) -> Optional[HebrewDate]:
    """Date of Yom Ha'atzmaut: the day after Yom HaZikaron, or None before 5708."""
    if year < FIRST_YOM_HAATZMAUT_YEAR:
        return None
    return HebrewDate(year, IYYAR, _yom_hazikaron_day(year) + 1)


def date_yom_yerushalayim(year: int) -> Optional[HebrewDate]:
    """Date of Yom Yerushalayim (28 Iyyar), or None before 5727."""
    if year < FIRST_YOM_YERUSHALAYIM_YEAR:
        return None
    return HebrewDate(year, IYYAR, 28)
