"""Test fixtures and mock data for Intervals.icu module tests."""

from __future__ import annotations

ATHLETE_PROFILE = {
    "athlete": {
        "id": "i12345",
        "name": "Test Rider",
        "weight": 68.5,
        "timezone": "Europe/Amsterdam",
    },
    "sharedFolders": [],
}

# Activities keyed by ID, deliberately out of date order.
RUN_ACTIVITIES = {
    "i1002": {
        "id": "i1002",
        "name": "Tempo run",
        "type": "Run",
        "start_date_local": "2025-05-20T07:00:00",
        "distance": 10012.0,
        "moving_time": 2760,
        "icu_training_load": 62,
    },
    "i1005": {
        "id": "i1005",
        "name": "Long run",
        "type": "Run",
        "start_date_local": "2025-05-31T08:30:00",
        "distance": 21150.0,
        "moving_time": 6900,
        "icu_training_load": 118,
    },
    "i1001": {
        "id": "i1001",
        "name": "Easy run",
        "type": "Run",
        "start_date_local": "2025-04-10T18:15:00",
        "distance": 6500.0,
        "moving_time": 2300,
        "icu_training_load": 31,
    },
    "i1004": {
        "id": "i1004",
        "name": "Intervals 6x800",
        "type": "Run",
        "start_date_local": "2025-05-27T06:45:00",
        "distance": 9200.0,
        "moving_time": 2900,
        "icu_training_load": 80,
    },
    "i1003": {
        "id": "i1003",
        "name": "Recovery jog",
        "type": "Run",
        "start_date_local": "2025-05-22T19:00:00",
        "distance": 5000.0,
        "moving_time": 1900,
        "icu_training_load": 20,
    },
}

RUN_CURVES_RESPONSE = {
    "list": [{"id": "r.2025-04-02.2025-06-01", "secs": [1, 5, 60], "values": [410, 395, 320]}],
    "activities": RUN_ACTIVITIES,
}

RIDE_CURVES_RESPONSE_SMALL = {
    "list": [{"id": "r.2024-02-09.2024-03-10", "secs": [5, 60], "values": [900, 410]}],
    "activities": {
        "i2001": {"id": "i2001", "type": "Ride", "start_date_local": "2024-02-15T09:00:00"},
        "i2003": {"id": "i2003", "type": "Ride", "start_date_local": "2024-03-09T10:00:00"},
        "i2002": {"id": "i2002", "type": "Ride", "start_date_local": "2024-02-28T17:30:00"},
    },
}

CURVES_RESPONSE_NO_ACTIVITIES = {
    "list": [{"id": "r.2024-01-01.2024-01-31", "secs": [], "values": []}],
}

FULL_ACTIVITY = {
    "id": "i3001",
    "name": "Morning ride",
    "type": "Ride",
    "source": "GARMIN_CONNECT",
    "start_date_local": "2025-06-01T07:00:00",
    "icu_average_watts": 212,
    "average_heartrate": 141,
}

STRAVA_SHELL_ACTIVITY = {
    "id": "i3002",
    "_note": "STRAVA activities are not available via the API",
}

ALL_TIME_CURVES_RESPONSE = {
    "list": [{"id": "all", "secs": [5, 60], "values": [1010, 450]}],
    "activities": {
        "i3002": {
            "id": "i3002",
            "name": "Club ride",
            "start_date_local": "2025-05-18T09:00:00",
            "distance": 82000.0,
            "icu_training_load": 145,
        },
    },
}
