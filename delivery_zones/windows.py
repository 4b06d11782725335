# delivery_zones/windows.py

from datetime import date, datetime
from typing import Dict, Iterable, List, Union

import pandas as pd

from .config import BUSINESS_TIMEZONE, WEEKDAYS
from .models import TimeWindow, Zone
from .logging_utils import get_logger

logger = get_logger("Windows")

# Windows with unparseable times sort after every real time of day
UNPARSEABLE_MINUTES = 24 * 60 * 100


def time_to_minutes(value: str) -> int:
    """Convert "HH:MM" to minutes since midnight."""
    try:
        hours, minutes = value.split(":")
        return int(hours) * 60 + int(minutes)
    except (AttributeError, TypeError, ValueError):
        return UNPARSEABLE_MINUTES


def _sort_key(window: TimeWindow):
    return (time_to_minutes(window.start), time_to_minutes(window.end), str(window.start), str(window.end))


def normalize_weekday(name: str) -> str:
    day = str(name).strip().lower()
    if day not in WEEKDAYS:
        raise ValueError(f"Unknown weekday: {name!r}. Expected one of {WEEKDAYS}")
    return day


def weekday_for_date(value: Union[date, datetime, str, pd.Timestamp], tz: str = BUSINESS_TIMEZONE) -> str:
    """
    Lowercase English weekday of a delivery date in the business timezone.

    Naive dates and datetimes are taken as already local to the business.
    Timezone-aware values are converted to `tz` first.
    """
    ts = pd.Timestamp(value)
    if ts.tzinfo is not None:
        ts = ts.tz_convert(tz)
    return WEEKDAYS[ts.dayofweek]


def merge_windows(zones: Iterable[Zone], weekday: str) -> List[TimeWindow]:
    """
    Union of the windows every zone offers on `weekday`.

    Deduplicated by (start, end) and sorted by start then end time.
    Overlapping windows are kept as separate slots.
    """
    weekday = normalize_weekday(weekday)
    unique = {}
    for zone in zones:
        for window in zone.windows.get(weekday) or []:
            window = TimeWindow.from_record(window)
            unique.setdefault((repr(window.start), repr(window.end)), window)
    return sorted(unique.values(), key=_sort_key)


def merge_weekly_windows(zones: Iterable[Zone]) -> Dict[str, List[TimeWindow]]:
    """merge_windows for each weekday that has at least one window."""
    zones = list(zones)
    weekly = {}
    for day in WEEKDAYS:
        day_windows = merge_windows(zones, day)
        if day_windows:
            weekly[day] = day_windows
    logger.debug(f"Weekly windows across {len(zones)} zones on {len(weekly)} days")
    return weekly
