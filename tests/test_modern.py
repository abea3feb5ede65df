"""
Unit tests for the weekday-adjusted modern Israeli commemorations.
"""

import os
import sys
import unittest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from hdate import FRIDAY, IYYAR, SATURDAY, HebrewDate
from modern import (
    date_yom_haatzmaut,
    date_yom_hazikaron,
    date_yom_yerushalayim,
)


class TestYomHaZikaron(unittest.TestCase):
    """Tests for date_yom_hazikaron."""

    def test_pesach_on_tuesday(self):
        """5784: Pesach on Tuesday moves Yom HaZikaron to Monday 5 Iyyar."""
        self.assertEqual(date_yom_hazikaron(5784), HebrewDate(5784, IYYAR, 5))

    def test_pesach_on_sunday(self):
        """5785: Pesach on Sunday moves Yom HaZikaron back to 2 Iyyar."""
        self.assertEqual(date_yom_hazikaron(5785), HebrewDate(5785, IYYAR, 2))

    def test_pesach_on_saturday(self):
        """5782: Pesach on Shabbat moves Yom HaZikaron back to 3 Iyyar."""
        self.assertEqual(date_yom_hazikaron(5782), HebrewDate(5782, IYYAR, 3))

    def test_before_first_year(self):
        self.assertIsNone(date_yom_hazikaron(5707))

    def test_never_next_to_shabbat(self):
        """Neither day should fall on Friday or Shabbat."""
        for year in range(5708, 5900):
            for hd in (date_yom_hazikaron(year), date_yom_haatzmaut(year)):
                self.assertNotIn(hd.day_of_week(), (FRIDAY, SATURDAY), hd)


class TestYomHaatzmaut(unittest.TestCase):
    """Tests for date_yom_haatzmaut."""

    def test_day_after_yom_hazikaron(self):
        for year in (5708, 5763, 5764, 5784, 5785, 5786):
            self.assertEqual(
                date_yom_haatzmaut(year).abs(),
                date_yom_hazikaron(year).abs() + 1,
            )

    def test_first_year(self):
        self.assertIsNone(date_yom_haatzmaut(5707))
        self.assertIsNotNone(date_yom_haatzmaut(5708))


class TestYomYerushalayim(unittest.TestCase):
    """Tests for date_yom_yerushalayim."""

    def test_28_iyyar(self):
        self.assertEqual(date_yom_yerushalayim(5784), HebrewDate(5784, IYYAR, 28))

    def test_first_year(self):
        self.assertIsNone(date_yom_yerushalayim(5726))
        self.assertIsNotNone(date_yom_yerushalayim(5727))


if __name__ == "__main__":
    unittest.main()
