"""Data models for eatout."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum, IntEnum
from functools import total_ordering

MAX_HOURS = 47  # two midnights, so closing times past 12 AM need no wraparound
MAX_MINUTES = 60
MAX_OFFSET = 255

# Minutes added to the query time to account for getting there
TRAVEL_BUFFER_MINUTES = 10


class TimeParseErrorKind(Enum):
    MISSING_SEPARATOR = "missing separator"
    TOO_FEW_COMPONENTS = "too few components"
    TOO_MANY_COMPONENTS = "too many components"
    GENERIC = "generic"


class TimeParseError(ValueError):
    """Raised when a schedule time string cannot be converted to a Time."""

    def __init__(self, kind: TimeParseErrorKind, text: object):
        self.kind = kind
        self.text = text
        super().__init__(f"Invalid time string {text!r}: {kind.value}")


def _lenient_component(part: str) -> int:
    # Anything that isn't a small unsigned number counts as 0, whitespace included
    digits = part[1:] if part.startswith("+") else part
    if digits.isascii() and digits.isdigit() and int(digits) <= MAX_OFFSET:
        return int(digits)
    return 0


@total_ordering
@dataclass(frozen=True, eq=False)
class Time:
    """
    A low-resolution point in time, relative to midnight.

    Hours run to 47 so a closing time after midnight can be written as
    e.g. 26:00. Times compare by minutes past midnight, so an uncarried
    16:60 equals 17:00, but 25:00 and 1:00 are different times.
    """

    hours: int
    minutes: int = 0

    def __post_init__(self):
        if not 0 <= self.hours <= MAX_HOURS:
            raise ValueError(f"hours must be in 0..{MAX_HOURS}, got {self.hours}")
        if not 0 <= self.minutes <= MAX_MINUTES:
            raise ValueError(f"minutes must be in 0..{MAX_MINUTES}, got {self.minutes}")

    @classmethod
    def with_hours(cls, hours: int) -> "Time":
        return cls(hours, 0)

    @classmethod
    def now(cls, moment: datetime | None = None) -> "Time":
        """Read the time of day from a wall-clock reading (default: now)."""
        moment = moment or datetime.now()
        return cls(moment.hour, moment.minute)

    @classmethod
    def parse(cls, text: str) -> "Time":
        """
        Parse an "HH:MM" string.

        Components that aren't numbers are read as 0 rather than rejected,
        so "noon:30" parses as 0:30.
        """
        if not isinstance(text, str):
            raise TimeParseError(TimeParseErrorKind.GENERIC, text)
        if ":" not in text:
            raise TimeParseError(TimeParseErrorKind.MISSING_SEPARATOR, text)

        parts = [_lenient_component(p) for p in text.split(":")]
        if len(parts) < 2:
            raise TimeParseError(TimeParseErrorKind.TOO_FEW_COMPONENTS, text)
        if len(parts) > 2:
            raise TimeParseError(TimeParseErrorKind.TOO_MANY_COMPONENTS, text)

        try:
            return cls(parts[0], parts[1])
        except ValueError as e:
            raise TimeParseError(TimeParseErrorKind.GENERIC, text) from e

    def add_minutes(self, offset: int) -> "Time":
        """
        Return this time moved forward by offset minutes (0..255).

        Minutes carry into hours only once they go over 60, so 1:59 + 1 is
        1:60. Hours past 47 wrap around by 48.
        """
        if not 0 <= offset <= MAX_OFFSET:
            raise ValueError(f"offset must be in 0..{MAX_OFFSET}, got {offset}")

        hours = self.hours
        minutes = self.minutes + offset
        while minutes > MAX_MINUTES:
            hours += 1
            minutes -= 60
        if hours > MAX_HOURS:
            hours -= MAX_HOURS + 1
        return Time(hours, minutes)

    def difference(self, other: "Time") -> int:
        """Signed number of minutes from other to self."""
        return (self.hours - other.hours) * 60 + (self.minutes - other.minutes)

    @property
    def total_minutes(self) -> int:
        return self.hours * 60 + self.minutes

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.total_minutes == other.total_minutes

    def __lt__(self, other: "Time") -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.total_minutes < other.total_minutes

    def __hash__(self) -> int:
        return hash(self.total_minutes)

    def __add__(self, offset: int) -> "Time":
        if not isinstance(offset, int):
            return NotImplemented
        return self.add_minutes(offset)

    def __sub__(self, other: "Time") -> int:
        if not isinstance(other, Time):
            return NotImplemented
        return self.difference(other)

    def __str__(self) -> str:
        hours = self.hours
        pm = False
        if hours > 24:
            hours -= 24
        if hours > 12:
            hours -= 12
            pm = True
        if hours == 12:
            pm = not pm
        if hours == 0:
            hours = 12
        return f"{hours}:{self.minutes:02d} {'PM' if pm else 'AM'}"


class Day(IntEnum):
    """A day of the week, numbered from Sunday = 0."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def from_index(cls, index: int) -> "Day":
        """Convert a 0-6 index; anything outside 0..5 is Saturday."""
        if 0 <= index <= 5:
            return cls(index)
        return cls.SATURDAY

    @classmethod
    def from_date(cls, value: date) -> "Day":
        # date.weekday() counts from Monday = 0
        return cls.from_index((value.weekday() + 1) % 7)

    @classmethod
    def parse(cls, name: str) -> "Day":
        """Look up a day by full or three-letter name, ignoring case."""
        key = name.strip().lower()
        for day in cls:
            if key in (day.label, day.label[:3]):
                return day
        raise ValueError(f"Unknown day: {name!r}")

    @property
    def label(self) -> str:
        return self.name.lower()


DAY_NAMES = [day.label for day in Day]


@dataclass(frozen=True)
class Hours:
    """The times a business opens and closes on one day."""

    start: Time
    end: Time

    def __str__(self) -> str:
        start, end = str(self.start), str(self.end)
        if start == end:
            return "Open 24 hours"
        return f"{start}–{end}"


@dataclass(frozen=True)
class WeeklySchedule(Mapping):
    """Opening hours per day. A day without an entry is closed."""

    days: dict[Day, Hours] = field(default_factory=dict)

    def __post_init__(self):
        for day in self.days:
            if not isinstance(day, Day):
                raise TypeError(f"Schedule keys must be Day, got {day!r}")

    def __getitem__(self, day: Day) -> Hours:
        return self.days[day]

    def __iter__(self) -> Iterator[Day]:
        return iter(sorted(self.days))

    def __len__(self) -> int:
        return len(self.days)

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.days.items())))

    def open_days(self) -> list[Day]:
        return list(self)


@dataclass(frozen=True)
class Restaurant:
    """A restaurant and its weekly hours."""

    name: str
    schedule: WeeklySchedule = field(default_factory=WeeklySchedule)

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Restaurant name must not be empty")

    def hours_on(self, day: Day) -> Hours | None:
        return self.schedule.get(day)

    def is_open(self, day: Day) -> bool:
        return self.hours_on(day) is not None

    def is_viable(self, day: Day, time: Time) -> bool:
        """
        Whether this is a reasonable place to head to right now.

        The query time is pushed forward by the travel buffer, and the
        result must fall strictly inside the day's opening hours.
        """
        hours = self.hours_on(day)
        if hours is None:
            return False
        arrival = time + TRAVEL_BUFFER_MINUTES
        return hours.start < arrival and hours.end > arrival

    def hours_display(self, day: Day) -> str:
        hours = self.hours_on(day)
        return str(hours) if hours is not None else "Closed"
