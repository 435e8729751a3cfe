"""JSON and YAML catalog parsing for eatout."""

import json
from pathlib import Path
from typing import Any

import yaml

from eatout.models import DAY_NAMES, Day, Hours, Restaurant, Time, TimeParseError, WeeklySchedule

JSON_SUFFIXES = {".json"}
YAML_SUFFIXES = {".yaml", ".yml"}


class CatalogLoadError(Exception):
    """Raised when the restaurant catalog can't be read in full."""


def parse_time(value: Any) -> Time:
    """
    Convert a schedule time value to a Time.

    Accepts an "HH:MM" string, a whole number of hours, or a mapping with
    "hours" and an optional "minutes" key.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid time value: {value!r}")
    if isinstance(value, str):
        return Time.parse(value)
    if isinstance(value, int):
        return Time.with_hours(value)
    if isinstance(value, dict):
        if "hours" not in value:
            raise ValueError(f"Time mapping needs an 'hours' key: {value!r}")
        return Time(int(value["hours"]), int(value.get("minutes", 0)))
    raise ValueError(f"Invalid time value: {value!r}")


def parse_hours(entry: Any) -> Hours:
    if not isinstance(entry, dict) or "start" not in entry or "end" not in entry:
        raise ValueError(f"Hours need 'start' and 'end': {entry!r}")
    return Hours(start=parse_time(entry["start"]), end=parse_time(entry["end"]))


def parse_restaurant(record: Any) -> Restaurant:
    """Build a Restaurant from one catalog record."""
    if not isinstance(record, dict):
        raise ValueError(f"Expected a mapping, got {type(record).__name__}")

    name = record.get("name")
    if not isinstance(name, str):
        raise ValueError("Missing restaurant name")

    raw_hours = record.get("hours") or {}
    if not isinstance(raw_hours, dict):
        raise ValueError(f"'hours' must be a mapping of day names for {name!r}")

    days: dict[Day, Hours] = {}
    for day_name, entry in raw_hours.items():
        day = Day.parse(str(day_name))
        if day in days:
            raise ValueError(f"Duplicate hours for {day.label} in {name!r}")
        # null means closed
        if entry is None:
            continue
        days[day] = parse_hours(entry)

    return Restaurant(name=name, schedule=WeeklySchedule(days))


def parse_catalog(data: Any) -> list[Restaurant]:
    """
    Convert already-decoded catalog data to a list of Restaurants.

    The data is either a list of records or a mapping with a
    "restaurants" list. Any bad record fails the whole catalog.
    """
    if data is None:
        return []
    if isinstance(data, dict):
        if "restaurants" not in data:
            raise CatalogLoadError("Catalog mapping needs a 'restaurants' list")
        data = data["restaurants"]
        if data is None:
            return []
    if not isinstance(data, list):
        raise CatalogLoadError(f"Catalog must be a list of restaurants, got {type(data).__name__}")

    restaurants: list[Restaurant] = []
    for position, record in enumerate(data, start=1):
        try:
            restaurants.append(parse_restaurant(record))
        except (TimeParseError, ValueError, TypeError) as e:
            label = record.get("name") if isinstance(record, dict) else None
            where = f"{label!r} (entry {position})" if label else f"entry {position}"
            raise CatalogLoadError(f"Invalid restaurant {where}: {e}") from e

    return restaurants


def load_catalog(path: Path) -> list[Restaurant]:
    """Load the restaurant catalog from a JSON or YAML file."""
    suffix = path.suffix.lower()
    if suffix not in JSON_SUFFIXES | YAML_SUFFIXES:
        raise CatalogLoadError(f"Unsupported catalog format: {path.suffix or path.name}")

    try:
        with path.open(encoding="utf-8") as f:
            if suffix in JSON_SUFFIXES:
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except OSError as e:
        raise CatalogLoadError(f"Could not read catalog {path}: {e}") from e
    except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise CatalogLoadError(f"Could not parse catalog {path}: {e}") from e

    return parse_catalog(data)


def create_catalog_template(output_path: Path, days: list[str] | None = None):
    """Create an example catalog YAML file."""
    days = days or DAY_NAMES
    template = {
        "restaurants": [
            {
                "name": "Restaurant Name",
                "hours": {day: {"start": "11:00", "end": "21:30"} for day in days},
            }
        ]
    }

    header = f"""\
# Restaurant catalog for eatout
# List every place you might want to eat, with its hours for each day.
#
# Days: {", ".join(DAY_NAMES)}
#
# Leave a day out (or set it to null) if the restaurant is closed.
# Times are "HH:MM" on a 24-hour clock and must be quoted. Closing times
# after midnight continue past 24, e.g. "25:30" for 1:30 AM.
# A restaurant open around the clock uses the same start and end time.
#
# Example entry:
#   - name: "Night Owl Diner"
#     hours:
#       friday:
#         start: "18:00"
#         end: "27:00"

"""

    with output_path.open("w", encoding="utf-8") as f:
        f.write(header)
        yaml.dump(template, f, default_flow_style=False, sort_keys=False)
