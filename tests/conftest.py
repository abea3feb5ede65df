"""
Test configuration and shared fixtures for the calendar and Tachanun tests.

This module provides common test data used across all test modules.
"""

import os
import sys

# Ensure parent directory is in path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


# Year lengths of a run of consecutive years (leap years marked)
KNOWN_YEAR_LENGTHS = {
    5779: 385,  # leap
    5780: 355,
    5781: 353,
    5782: 384,  # leap
    5783: 355,
    5784: 383,  # leap
    5785: 355,
    5786: 354,
    5787: 385,  # leap
    5788: 355,
    5789: 354,
}

# Known absolute days (absolute day 0 is 17 Tevet 3761)
KNOWN_ABS_DAYS = {
    (5769, 8, 15): 733359,
    (5708, 2, 6): 711262,
    (3762, 7, 1): 249,
    (3761, 1, 1): 72,
    (3761, 10, 18): 1,
    (3761, 10, 17): 0,
    (3761, 10, 16): -1,
    (3761, 10, 1): -16,
}
