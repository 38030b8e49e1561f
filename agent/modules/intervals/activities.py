"""Ordering and windowing helpers for activity lists.

Intervals.icu aggregate endpoints return activities in no particular order,
so everything handed back to the agent goes through ``sort_activities_by_start``
first.
"""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta, timezone
from typing import Any, Iterable

from modules.intervals.models import TimeWindow

DEFAULT_RECENT_COUNT = 5
DEFAULT_LOOKBACK_DAYS = 120
DEFAULT_SPORT_TYPE = "Ride"

SORTED_BY = "start_date_local desc"

# Marker Intervals.icu leaves in ``_note`` on activities it cannot serve.
STRAVA_MARKER = "STRAVA"


def parse_start_local(value: Any) -> datetime | None:
    """Parse a ``start_date_local`` value, or return None if it is unusable.

    Aware timestamps are converted to naive UTC so they compare against the
    naive local timestamps Intervals.icu normally sends.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def start_sort_key(activity: Any) -> float:
    """Seconds since the epoch of the activity start, ``-inf`` when unknown."""
    if not isinstance(activity, dict):
        return -math.inf
    parsed = parse_start_local(activity.get("start_date_local"))
    if parsed is None:
        return -math.inf
    return parsed.replace(tzinfo=timezone.utc).timestamp()


def sort_activities_by_start(activities: Iterable[Any]) -> list:
    """Return a new list ordered newest first; undated activities go last."""
    return sorted(activities, key=start_sort_key, reverse=True)


def _finite_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def coerce_count(value: Any, default: int = DEFAULT_RECENT_COUNT) -> int:
    """Non-negative integer count; ``default`` when absent or not a finite number."""
    number = _finite_number(value)
    if number is None:
        return default
    return max(0, int(number))


def coerce_limit(value: Any) -> int | None:
    """Optional non-negative truncation limit."""
    number = _finite_number(value)
    if number is None:
        return None
    return max(0, int(number))


def coerce_lookback_days(value: Any, default: int = DEFAULT_LOOKBACK_DAYS) -> int:
    """Positive number of days; ``default`` when absent, invalid or below one."""
    number = _finite_number(value)
    if number is None or int(number) < 1:
        return default
    return int(number)


def parse_iso_date(value: str | date) -> date:
    """Accept ``YYYY-MM-DD`` or an ISO datetime and return its calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        raise ValueError(f"Invalid date '{value}', expected YYYY-MM-DD") from None


def resolve_window(
    newest: str | date | None,
    lookback_days: Any = DEFAULT_LOOKBACK_DAYS,
    today: date | None = None,
) -> TimeWindow:
    """Build the ``[oldest, newest]`` window ending at ``newest`` (default today).

    Plain calendar subtraction on dates, so no timezone can shift the result.
    """
    days = coerce_lookback_days(lookback_days)
    end = parse_iso_date(newest) if newest else (today or date.today())
    return TimeWindow(oldest=end - timedelta(days=days), newest=end, lookback_days=days)


def date_range_curve(oldest: str, newest: str) -> str:
    """Curve specifier selecting every activity between two dates."""
    return f"r.{oldest}.{newest}"


def is_strava_shell(activity: Any) -> bool:
    """True when an activity detail record is a Strava placeholder."""
    if not isinstance(activity, dict):
        return False
    return STRAVA_MARKER in str(activity.get("_note") or "")
