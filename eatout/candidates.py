"""Candidate selection and ordering for eatout."""

from dataclasses import dataclass
from typing import TypeVar

import numpy as np

from eatout.models import Day, Restaurant, Time

T = TypeVar("T")


@dataclass(frozen=True)
class ListingRow:
    """One restaurant in the browse-all listing."""

    name: str
    hours_display: str
    viable: bool


def compute_candidates(catalog: list[Restaurant], day: Day, time: Time) -> list[Restaurant]:
    """Return the viable restaurants, in catalog order."""
    return [restaurant for restaurant in catalog if restaurant.is_viable(day, time)]


def shuffle(items: list[T], rng: np.random.Generator | None = None) -> list[T]:
    """
    Shuffle items in place with Fisher-Yates and return them.

    Each step draws an index from the shrinking front of the list and
    swaps it into the current tail slot.
    """
    rng = rng if rng is not None else np.random.default_rng()
    length = len(items)

    for i in range(length):
        j = length - i
        index = int(rng.integers(0, j))
        items[index], items[j - 1] = items[j - 1], items[index]

    return items


def compute_listing(
    catalog: list[Restaurant],
    day: Day,
    time: Time,
    viable_first: bool = False,
) -> list[ListingRow]:
    """
    Build the browse-all listing of every restaurant.

    Rows are sorted by name. With viable_first, open places come first and
    each group is sorted by name.
    """
    rows = [
        ListingRow(
            name=restaurant.name,
            hours_display=restaurant.hours_display(day),
            viable=restaurant.is_viable(day, time),
        )
        for restaurant in catalog
    ]

    if viable_first:
        return sorted(rows, key=lambda r: (not r.viable, r.name))
    return sorted(rows, key=lambda r: r.name)
