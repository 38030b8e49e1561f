"""Intervals.icu module tool definitions."""

from shared.schemas.tools import ModuleManifest, ToolDefinition, ToolParameter

_ACTIVITY_ID = ToolParameter(name="activity_id", type="string", description="Activity ID")


def _date_param(name: str, description: str, required: bool = False) -> ToolParameter:
    return ToolParameter(name=name, type="string", description=description, required=required)


def _curve_params(default_type: str, type_hint: str) -> list[ToolParameter]:
    return [
        ToolParameter(
            name="type",
            type="string",
            description=f"Sport type: {type_hint}. Default: {default_type}",
            required=False,
        ),
        ToolParameter(
            name="curves",
            type="string",
            description="Curve range: 1y (past year), 42d (past 42 days), all (all time), etc. Default: 1y",
            required=False,
        ),
    ]


MANIFEST = ModuleManifest(
    module_name="intervals",
    description=(
        "Read training data from Intervals.icu: athlete profile, activities, streams, "
        "wellness, power/pace/heart-rate curves, calendar events and gear."
    ),
    tools=[
        ToolDefinition(
            name="intervals.get_athlete_profile",
            description="Get the athlete's basic information, including name, weight and timezone.",
            parameters=[],
        ),
        ToolDefinition(
            name="intervals.get_activities",
            description=(
                "List all activities (training sessions) in a date range. Returns type, "
                "distance, time, heart rate, power and other summary fields per activity."
            ),
            parameters=[
                _date_param("oldest", "Oldest date, ISO-8601 (e.g. 2024-01-01)", required=True),
                _date_param("newest", "Newest date, ISO-8601 (e.g. 2024-12-31). Optional, defaults to today"),
            ],
        ),
        ToolDefinition(
            name="intervals.get_activity_detail",
            description="Get the full statistics of a single activity.",
            parameters=[_ACTIVITY_ID],
        ),
        ToolDefinition(
            name="intervals.get_activity_intervals",
            description="Get an activity's intervals, with detailed statistics for each work/rest segment.",
            parameters=[_ACTIVITY_ID],
        ),
        ToolDefinition(
            name="intervals.get_activity_power_curve",
            description="Get an activity's power curve: the best power held for each duration.",
            parameters=[_ACTIVITY_ID],
        ),
        ToolDefinition(
            name="intervals.get_activity_streams",
            description=(
                "Get an activity's data streams over time, such as heart rate, power, "
                "speed and altitude."
            ),
            parameters=[
                _ACTIVITY_ID,
                ToolParameter(
                    name="types",
                    type="array",
                    items="string",
                    description="Stream types to return, e.g. watts, heartrate, cadence, speed, altitude, distance, time",
                    required=False,
                ),
            ],
        ),
        ToolDefinition(
            name="intervals.get_wellness",
            description=(
                "Get wellness records: weight, resting heart rate, HRV, sleep, fatigue, "
                "stress and similar daily metrics."
            ),
            parameters=[
                _date_param("oldest", "Oldest date, ISO-8601"),
                _date_param("newest", "Newest date, ISO-8601"),
            ],
        ),
        ToolDefinition(
            name="intervals.get_wellness_for_date",
            description="Get the wellness record for one day.",
            parameters=[
                _date_param("date", "Date, ISO-8601 (e.g. 2024-12-30)", required=True),
            ],
        ),
        ToolDefinition(
            name="intervals.get_power_curves",
            description="Get the athlete's power curves (MMP), the best power for each duration.",
            parameters=_curve_params("Ride", "Ride, Run, Swim, etc."),
        ),
        ToolDefinition(
            name="intervals.get_pace_curves",
            description="Get the athlete's pace curves, the best pace for each distance (running/swimming).",
            parameters=_curve_params("Run", "Run, Swim, etc."),
        ),
        ToolDefinition(
            name="intervals.get_hr_curves",
            description="Get the athlete's heart rate curves, the highest heart rate held for each duration.",
            parameters=_curve_params("Ride", "Ride, Run, Swim, etc."),
        ),
        ToolDefinition(
            name="intervals.get_events",
            description="Get calendar events: planned workouts, races, rest days and notes.",
            parameters=[
                _date_param("oldest", "Oldest date, ISO-8601"),
                _date_param("newest", "Newest date, ISO-8601"),
            ],
        ),
        ToolDefinition(
            name="intervals.get_gear",
            description="Get the athlete's gear, such as bikes and shoes.",
            parameters=[],
        ),
        ToolDefinition(
            name="intervals.search_activities",
            description="Search activities by name or tag.",
            parameters=[
                ToolParameter(
                    name="query",
                    type="string",
                    description="Search keywords, or a tag starting with #",
                ),
                ToolParameter(
                    name="limit",
                    type="number",
                    description="Maximum number of results. Default: 10",
                    required=False,
                ),
            ],
        ),
        ToolDefinition(
            name="intervals.get_athlete_summary",
            description=(
                "Get the athlete's training summary: total volume, fitness (CTL), "
                "fatigue (ATL) and form."
            ),
            parameters=[
                _date_param("start", "Start date, ISO-8601"),
                _date_param("end", "End date, ISO-8601"),
            ],
        ),
        ToolDefinition(
            name="intervals.get_power_hr_curve",
            description="Get the power vs heart rate curve, used to analyse aerobic efficiency.",
            parameters=[
                _date_param("start", "Start date, ISO-8601", required=True),
                _date_param("end", "End date, ISO-8601", required=True),
            ],
        ),
        ToolDefinition(
            name="intervals.get_activities_with_details",
            description=(
                "List activities with summary details. Works around the Strava data "
                "restriction and returns name, distance, time and training load for each "
                "activity. Prefer this over get_activities."
            ),
            parameters=[
                _date_param("oldest", "Oldest date, ISO-8601 (e.g. 2024-01-01)", required=True),
                _date_param("newest", "Newest date, ISO-8601 (e.g. 2024-12-31). Optional, defaults to today"),
                ToolParameter(
                    name="type",
                    type="string",
                    description="Sport type: Ride, Run, Swim, etc. Default: Ride",
                    required=False,
                ),
                ToolParameter(
                    name="limit",
                    type="number",
                    description="Maximum number of results, taken after sorting by start_date_local descending",
                    required=False,
                ),
            ],
        ),
        ToolDefinition(
            name="intervals.get_recent_activities_with_details",
            description=(
                "Get the most recent N activities with summary details, sorted by "
                "start_date_local descending. Looks back lookback_days to collect "
                "candidates before truncating, so the latest N are not missed."
            ),
            parameters=[
                ToolParameter(
                    name="n",
                    type="number",
                    description="Number of recent activities. Default: 5",
                    required=False,
                ),
                ToolParameter(
                    name="type",
                    type="string",
                    description="Sport type: Ride, Run, Swim, etc. Default: Ride",
                    required=False,
                ),
                ToolParameter(
                    name="lookback_days",
                    type="number",
                    description="Days to look back when collecting candidates. Default: 120",
                    required=False,
                ),
                _date_param("newest", "Newest date, ISO-8601 (e.g. 2026-01-20). Optional, defaults to today"),
            ],
        ),
        ToolDefinition(
            name="intervals.get_max_activity_data",
            description=(
                "Get as much data as is available for one activity. For Strava-synced "
                "activities, tries several sources and explains how to get the full data."
            ),
            parameters=[_ACTIVITY_ID],
        ),
        ToolDefinition(
            name="intervals.check_activity_source",
            description="Check where an activity came from and whether it is a Strava activity the API cannot fully serve.",
            parameters=[_ACTIVITY_ID],
        ),
    ],
)
