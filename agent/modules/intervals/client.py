"""Intervals.icu REST API client."""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from shared.config import Settings

logger = structlog.get_logger()

DEFAULT_BASE_URL = "https://intervals.icu"

# Intervals.icu personal API keys use a fixed Basic-auth username.
API_KEY_USERNAME = "API_KEY"


class IntervalsAPIError(RuntimeError):
    """Non-2xx response from Intervals.icu."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Intervals.icu API error: {status_code} - {body}")


class IntervalsConnectionError(RuntimeError):
    """Intervals.icu could not be reached."""


def _clean_params(params: dict[str, Any] | None) -> dict[str, Any] | None:
    """Drop unset query parameters."""
    if not params:
        return None
    cleaned = {k: v for k, v in params.items() if v is not None and v != ""}
    return cleaned or None


class IntervalsClient:
    """Async client for the Intervals.icu API, bound to one athlete."""

    def __init__(
        self,
        api_key: str,
        athlete_id: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
    ):
        self.athlete_id = athlete_id
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout
        self._auth = httpx.BasicAuth(API_KEY_USERNAME, api_key)

    @classmethod
    def from_settings(cls, settings: Settings) -> IntervalsClient:
        return cls(
            api_key=settings.intervals_api_key,
            athlete_id=settings.intervals_athlete_id,
            base_url=settings.intervals_base_url,
            timeout=settings.intervals_timeout,
        )

    @property
    def _athlete_path(self) -> str:
        return f"/api/v1/athlete/{self.athlete_id}"

    # ------------------------------------------------------------------
    # Athlete
    # ------------------------------------------------------------------

    async def get_athlete(self) -> dict:
        """Fetch the athlete profile (name, weight, timezone, ...)."""
        return await self._get(f"{self._athlete_path}/profile")

    async def get_sport_settings(self) -> dict:
        """Fetch the athlete record including per-sport settings."""
        return await self._get(self._athlete_path)

    async def get_athlete_summary(self, start: str | None = None, end: str | None = None) -> Any:
        return await self._get(
            f"{self._athlete_path}/athlete-summary.json",
            {"start": start, "end": end},
        )

    async def get_gear(self) -> list:
        return await self._get(f"{self._athlete_path}/gear.json")

    # ------------------------------------------------------------------
    # Activities
    # ------------------------------------------------------------------

    async def get_activities(self, oldest: str, newest: str | None = None) -> list:
        """List activities between two ISO dates.

        Activities synced from Strava come back as stubs here; see
        ``get_power_curves`` with a date-range curve for usable summaries.
        """
        return await self._get(
            f"{self._athlete_path}/activities",
            {"oldest": oldest, "newest": newest},
        )

    async def get_activity(self, activity_id: str) -> dict:
        return await self._get(f"/api/v1/activity/{activity_id}")

    async def get_activity_intervals(self, activity_id: str) -> Any:
        return await self._get(f"/api/v1/activity/{activity_id}/intervals")

    async def get_activity_power_curve(self, activity_id: str) -> Any:
        return await self._get(f"/api/v1/activity/{activity_id}/power-curve.json")

    async def get_activity_streams(
        self, activity_id: str, types: list[str] | None = None
    ) -> list:
        """Fetch time-series streams (watts, heartrate, cadence, ...)."""
        params = {"types": ",".join(types)} if types else None
        return await self._get(f"/api/v1/activity/{activity_id}/streams.json", params)

    async def search_activities(self, query: str, limit: int = 10) -> list:
        return await self._get(
            f"{self._athlete_path}/activities/search",
            {"q": query, "limit": limit},
        )

    async def search_activities_full(self, query: str, limit: int = 10) -> list:
        """Full-text search returning complete activity records."""
        return await self._get(
            f"{self._athlete_path}/activities/search-full",
            {"q": query, "limit": limit},
        )

    async def get_activity_power_curves(
        self, oldest: str, newest: str, type: str = "Ride"
    ) -> Any:
        """Per-activity power curves for a date range."""
        return await self._get(
            f"{self._athlete_path}/activity-power-curves.json",
            {"oldest": oldest, "newest": newest, "type": type},
        )

    # ------------------------------------------------------------------
    # Wellness & calendar
    # ------------------------------------------------------------------

    async def get_wellness(self, oldest: str | None = None, newest: str | None = None) -> list:
        return await self._get(
            f"{self._athlete_path}/wellness.json",
            {"oldest": oldest, "newest": newest},
        )

    async def get_wellness_for_date(self, date: str) -> dict:
        return await self._get(f"{self._athlete_path}/wellness/{date}")

    async def get_events(self, oldest: str | None = None, newest: str | None = None) -> list:
        return await self._get(
            f"{self._athlete_path}/events.json",
            {"oldest": oldest, "newest": newest},
        )

    # ------------------------------------------------------------------
    # Curves
    # ------------------------------------------------------------------

    async def get_power_curves(self, type: str = "Ride", curves: str = "1y") -> Any:
        """Athlete power curves.

        ``curves`` takes the Intervals.icu curve specifiers: ``1y``, ``42d``,
        ``all`` or a date range ``r.<oldest>.<newest>``. The response carries
        an ``activities`` map keyed by activity ID for every activity that
        contributed to the curves.
        """
        return await self._get(
            f"{self._athlete_path}/power-curves.json",
            {"type": type, "curves": curves},
        )

    async def get_pace_curves(self, type: str = "Run", curves: str = "1y") -> Any:
        return await self._get(
            f"{self._athlete_path}/pace-curves.json",
            {"type": type, "curves": curves},
        )

    async def get_hr_curves(self, type: str = "Ride", curves: str = "1y") -> Any:
        return await self._get(
            f"{self._athlete_path}/hr-curves.json",
            {"type": type, "curves": curves},
        )

    async def get_power_hr_curve(self, start: str, end: str) -> Any:
        return await self._get(
            f"{self._athlete_path}/power-hr-curve",
            {"start": start, "end": end},
        )

    # ------------------------------------------------------------------

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET ``path`` and return the decoded JSON body."""
        url = f"{self.base_url}{path}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, auth=self._auth) as client:
                resp = await client.get(
                    url,
                    params=_clean_params(params),
                    headers={"Content-Type": "application/json"},
                )
                resp.raise_for_status()
                return resp.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "intervals_http_error",
                path=path,
                status=e.response.status_code,
                body=e.response.text,
            )
            raise IntervalsAPIError(e.response.status_code, e.response.text) from e
        except httpx.RequestError as e:
            logger.error("intervals_request_error", path=path, error=str(e))
            raise IntervalsConnectionError(f"Failed to connect to Intervals.icu: {e}") from e
