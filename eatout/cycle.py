"""The suggestion cycle: which restaurant to show next."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

import numpy as np

from eatout.candidates import ListingRow, compute_candidates, compute_listing, shuffle
from eatout.models import Day, Restaurant, Time

TERMINATED_MESSAGE = "There aren't any places left to eat. Try again?"


class Mode(Enum):
    PRESENTING = "presenting"  # showing a suggestion, waiting for accept/reject
    TERMINATED = "terminated"  # out of suggestions, the next advance restarts
    TABULATING = "tabulating"  # showing every restaurant instead of the queue


@dataclass(frozen=True)
class CycleState:
    """A snapshot of a SuggestionCycle."""

    mode: Mode
    resume_mode: Mode
    current: Restaurant | None
    queue: tuple[Restaurant, ...]
    listing: tuple[ListingRow, ...] = ()


@dataclass(frozen=True)
class CycleView:
    """What the presentation layer needs to draw the current mode."""

    mode: Mode
    name: str = ""
    hours: str = ""
    message: str = ""
    listing: tuple[ListingRow, ...] = field(default_factory=tuple)


class SuggestionCycle:
    """
    Walks a shuffled queue of viable restaurants, one rejection at a time.

    Two signals drive it: advance() (reject the current suggestion, or
    restart once the queue has run out) and toggle_tabulation() (switch
    to and from the browse-all listing). Each session owns its own cycle;
    instances must not be shared between sessions.
    """

    def __init__(
        self,
        catalog: list[Restaurant],
        clock: Callable[[], datetime] | None = None,
        rng: np.random.Generator | None = None,
        viable_first: bool = False,
    ):
        self.catalog = catalog
        self.clock = clock or datetime.now
        self.rng = rng if rng is not None else np.random.default_rng()
        self.viable_first = viable_first

        self._queue: list[Restaurant] = []
        self._current: Restaurant | None = None
        self._mode = Mode.PRESENTING
        # Mode to go back to when tabulation is switched off
        self._resume_mode = Mode.PRESENTING
        self._listing: list[ListingRow] = []

    def _now(self) -> tuple[Day, Time]:
        moment = self.clock()
        return Day.from_date(moment), Time.now(moment)

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def current(self) -> Restaurant | None:
        return self._current

    @property
    def remaining(self) -> int:
        return len(self._queue)

    def start(self) -> CycleView:
        """Build a fresh shuffled queue and show its first entry."""
        day, time = self._now()
        self._queue = shuffle(compute_candidates(self.catalog, day, time), self.rng)
        self._current = None
        self._mode = Mode.PRESENTING
        self._resume_mode = Mode.PRESENTING
        self._listing = []
        return self.advance()

    def advance(self) -> CycleView:
        """Move on to the next suggestion, terminating or restarting as needed."""
        if self._mode is Mode.TABULATING:
            self._mode = self._resume_mode
            self._listing = []

        if self._queue:
            self._current = self._queue.pop()
            self._mode = Mode.PRESENTING
        elif self._mode is Mode.TERMINATED:
            return self.start()
        else:
            self._current = None
            self._mode = Mode.TERMINATED

        return self.view()

    def toggle_tabulation(self) -> CycleView:
        """Switch to the full listing, or back to where the cycle left off."""
        if self._mode is Mode.TABULATING:
            self._mode = self._resume_mode
            self._listing = []
        else:
            day, time = self._now()
            self._listing = compute_listing(self.catalog, day, time, self.viable_first)
            self._resume_mode = self._mode
            self._mode = Mode.TABULATING
        return self.view()

    def view(self) -> CycleView:
        if self._mode is Mode.TABULATING:
            return CycleView(mode=self._mode, listing=tuple(self._listing))
        if self._mode is Mode.TERMINATED:
            return CycleView(mode=self._mode, message=TERMINATED_MESSAGE)
        # Presenting before the first suggestion has been drawn
        if self._current is None:
            return CycleView(mode=self._mode)

        day, _ = self._now()
        hours = self._current.hours_on(day)
        return CycleView(
            mode=self._mode,
            name=self._current.name,
            hours=str(hours) if hours is not None else "",
        )

    def get_state(self) -> CycleState:
        return CycleState(
            mode=self._mode,
            resume_mode=self._resume_mode,
            current=self._current,
            queue=tuple(self._queue),
            listing=tuple(self._listing),
        )

    def set_state(self, state: CycleState):
        if state.resume_mode is Mode.TABULATING:
            raise ValueError("Cannot resume into tabulation")
        self._mode = state.mode
        self._resume_mode = state.resume_mode
        self._current = state.current
        self._queue = list(state.queue)
        self._listing = list(state.listing)
