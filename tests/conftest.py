"""Shared fixtures for eatout tests."""
from datetime import datetime

import numpy as np
import pytest

from eatout.models import Day, Hours, Restaurant, Time, WeeklySchedule

# A Wednesday
NOON_WEDNESDAY = datetime(2026, 10, 14, 12, 0)


def make_restaurant(name, start="9:00", end="17:00", days=None):
    """Build a restaurant open the same hours on the given days (default: every day)."""
    hours = Hours(Time.parse(start), Time.parse(end))
    days = list(Day) if days is None else days
    return Restaurant(name=name, schedule=WeeklySchedule({day: hours for day in days}))


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def clock():
    return lambda: NOON_WEDNESDAY


@pytest.fixture
def catalog():
    """Two places open at noon on Wednesday and one that isn't."""
    return [
        make_restaurant("Alpha Grill", "11:00", "22:00"),
        make_restaurant("Bistro Closed", "17:00", "23:00"),
        make_restaurant("Cafe Central", "7:00", "15:00"),
    ]
