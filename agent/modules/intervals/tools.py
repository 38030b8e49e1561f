"""Intervals.icu module tool implementations."""

from __future__ import annotations

from datetime import date
from typing import Any, Awaitable

import structlog

from modules.intervals.activities import (
    DEFAULT_SPORT_TYPE,
    SORTED_BY,
    coerce_count,
    coerce_limit,
    date_range_curve,
    is_strava_shell,
    parse_iso_date,
    resolve_window,
    sort_activities_by_start,
)
from modules.intervals.client import IntervalsAPIError, IntervalsClient
from modules.intervals.models import Attempt, SourceCheck

logger = structlog.get_logger()

NOTE_ACTIVITIES_FOUND = (
    "Basic activity information retrieved. For full data (heart rate and power "
    "streams), import your history into Intervals.icu with a Strava Bulk Export."
)
NOTE_NO_ACTIVITIES = "No activities found"

STRAVA_LIMITATION = (
    "Because of Strava API policy, activities synced from Strava cannot be fetched "
    "in full through the Intervals.icu API. Workarounds: 1) import your data with a "
    "Strava Bulk Export; 2) sync Garmin/Wahoo/Zwift directly to Intervals.icu."
)

MSG_STRAVA_SOURCE = (
    "This activity comes from Strava. Because of Strava API policy its full data "
    "cannot be fetched through the API. Import it with a Strava Bulk Export, or "
    "sync Garmin/Wahoo/Zwift directly to Intervals.icu."
)
MSG_ACCESSIBLE = "This activity is fully accessible through the API"

STRAVA_SOLUTION = {
    "description": (
        "This activity comes from Strava; Strava API policy prevents fetching its full data"
    ),
    "options": [
        "1. Strava Bulk Export: request a data export in Strava settings, then import it in Intervals.icu settings",
        "2. Direct sync: connect Garmin/Wahoo/Zwift/Coros devices directly to Intervals.icu",
        "3. Manual upload: download FIT/TCX files from the device or Strava and upload them to Intervals.icu",
    ],
}


def _today() -> str:
    return date.today().isoformat()


def _is_unprocessable(error: Exception | None) -> bool:
    # Intervals.icu answers 422 for activities it only knows as Strava stubs.
    return isinstance(error, IntervalsAPIError) and error.status_code == 422


class IntervalsTools:
    """Tool implementations backed by one athlete's Intervals.icu account."""

    def __init__(self, client: IntervalsClient):
        self.client = client

    # ------------------------------------------------------------------
    # Passthrough tools
    # ------------------------------------------------------------------

    async def get_athlete_profile(self) -> dict:
        return await self.client.get_athlete()

    async def get_activities(self, oldest: str, newest: str | None = None) -> list:
        return await self.client.get_activities(oldest, newest)

    async def get_activity_detail(self, activity_id: str) -> dict:
        return await self.client.get_activity(str(activity_id))

    async def get_activity_intervals(self, activity_id: str) -> Any:
        return await self.client.get_activity_intervals(str(activity_id))

    async def get_activity_power_curve(self, activity_id: str) -> Any:
        return await self.client.get_activity_power_curve(str(activity_id))

    async def get_activity_streams(
        self, activity_id: str, types: list[str] | None = None
    ) -> list:
        if isinstance(types, str):
            types = [t.strip() for t in types.split(",") if t.strip()]
        return await self.client.get_activity_streams(str(activity_id), types or None)

    async def get_wellness(self, oldest: str | None = None, newest: str | None = None) -> list:
        return await self.client.get_wellness(oldest, newest)

    async def get_wellness_for_date(self, date: str) -> dict:
        return await self.client.get_wellness_for_date(date)

    async def get_power_curves(self, type: str | None = None, curves: str | None = None) -> Any:
        return await self.client.get_power_curves(type or "Ride", curves or "1y")

    async def get_pace_curves(self, type: str | None = None, curves: str | None = None) -> Any:
        return await self.client.get_pace_curves(type or "Run", curves or "1y")

    async def get_hr_curves(self, type: str | None = None, curves: str | None = None) -> Any:
        return await self.client.get_hr_curves(type or "Ride", curves or "1y")

    async def get_events(self, oldest: str | None = None, newest: str | None = None) -> list:
        return await self.client.get_events(oldest, newest)

    async def get_gear(self) -> list:
        return await self.client.get_gear()

    async def search_activities(self, query: str, limit: int | None = None) -> list:
        return await self.client.search_activities(query, int(limit) if limit else 10)

    async def get_athlete_summary(self, start: str | None = None, end: str | None = None) -> Any:
        return await self.client.get_athlete_summary(start, end)

    async def get_power_hr_curve(self, start: str, end: str) -> Any:
        return await self.client.get_power_hr_curve(start, end)

    # ------------------------------------------------------------------
    # Activity lists with details
    # ------------------------------------------------------------------

    async def get_activities_with_details(
        self,
        oldest: str,
        newest: str | None = None,
        type: str | None = None,
        limit: int | None = None,
    ) -> dict:
        """List activities with summary detail via the power-curve endpoint.

        The per-activity endpoint returns empty shells for Strava-synced
        activities, but the ``activities`` map of a date-range power curve
        still carries their name, distance, time and load.
        """
        sport = type or DEFAULT_SPORT_TYPE
        oldest = parse_iso_date(oldest).isoformat()
        newest = parse_iso_date(newest).isoformat() if newest else _today()

        curve_data = await self.client.get_power_curves(sport, date_range_curve(oldest, newest))

        found = curve_data.get("activities") if isinstance(curve_data, dict) else None
        if not found:
            return {
                "activities": [],
                "sorted_by": SORTED_BY,
                "note": NOTE_NO_ACTIVITIES,
                "strava_limitation": STRAVA_LIMITATION,
            }

        values = found.values() if isinstance(found, dict) else found
        activities = sort_activities_by_start(values)
        max_items = coerce_limit(limit)
        if max_items is not None:
            activities = activities[:max_items]

        return {
            "activities": activities,
            "sorted_by": SORTED_BY,
            "note": NOTE_ACTIVITIES_FOUND,
            "strava_limitation": STRAVA_LIMITATION,
        }

    async def get_recent_activities_with_details(
        self,
        n: int | None = None,
        type: str | None = None,
        lookback_days: int | None = None,
        newest: str | None = None,
    ) -> dict:
        """Most recent ``n`` activities of one sport type.

        Fetches every activity in the lookback window and keeps the newest
        ``n``. The window is not widened when it holds fewer than ``n``.
        """
        count = coerce_count(n)
        sport = type or DEFAULT_SPORT_TYPE
        window = resolve_window(newest, lookback_days)
        bounds = window.as_dict()

        details = await self.get_activities_with_details(
            oldest=bounds["oldest"], newest=bounds["newest"], type=sport
        )
        activities = details["activities"][:count]

        return {
            "n": count,
            "type": sport,
            **bounds,
            "count": len(activities),
            "sorted_by": SORTED_BY,
            "activities": activities,
            "note": details["note"],
            "strava_limitation": details["strava_limitation"],
        }

    # ------------------------------------------------------------------
    # Strava-restricted activities
    # ------------------------------------------------------------------

    async def check_activity_source(self, activity_id: str) -> dict:
        """Guess whether an activity is a Strava shell Intervals.icu cannot serve."""
        try:
            activity = await self.client.get_activity(str(activity_id))
        except IntervalsAPIError as e:
            if _is_unprocessable(e):
                return SourceCheck(isStrava=True, source="STRAVA", message=MSG_STRAVA_SOURCE).model_dump()
            raise

        if is_strava_shell(activity):
            return SourceCheck(isStrava=True, source="STRAVA", message=MSG_STRAVA_SOURCE).model_dump()

        return SourceCheck(
            isStrava=False,
            source=activity.get("source") or "UNKNOWN",
            message=MSG_ACCESSIBLE,
        ).model_dump()

    async def get_max_activity_data(self, activity_id: str) -> dict:
        """Gather whatever data is reachable for one activity.

        Lookups run one after another; a failed secondary lookup leaves its
        section out of the result instead of failing the call.
        """
        activity_id = str(activity_id)
        result: dict[str, Any] = {
            "id": activity_id,
            "dataSource": [],
            "strava_limited": False,
        }

        detail = await self._attempt("activity_detail", activity_id, self.client.get_activity(activity_id))
        if detail.ok:
            if is_strava_shell(detail.value):
                result["strava_limited"] = True
                result["activity"] = {"id": activity_id, "_note": detail.value.get("_note")}
            else:
                result["activity"] = detail.value
                result["dataSource"].append("activity_detail")
        elif _is_unprocessable(detail.error):
            result["strava_limited"] = True

        curves = await self._attempt(
            "power_curves", activity_id, self.client.get_power_curves("Ride", "all")
        )
        if curves.ok and isinstance(curves.value, dict):
            known = curves.value.get("activities")
            basic_info = known.get(activity_id) if isinstance(known, dict) else None
            if basic_info:
                result["basicInfo"] = basic_info
                result["dataSource"].append("power_curves")

        if result["strava_limited"]:
            result["solution"] = STRAVA_SOLUTION

        return result

    async def _attempt(self, lookup: str, activity_id: str, call: Awaitable[Any]) -> Attempt:
        """Await ``call`` and capture its outcome instead of raising."""
        try:
            return Attempt(value=await call)
        except Exception as e:
            logger.warning(
                "max_activity_lookup_failed",
                lookup=lookup,
                activity_id=activity_id,
                error=str(e),
            )
            return Attempt(error=e)
