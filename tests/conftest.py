# tests/conftest.py
import pytest

from ptvline.models import Departure, Direction, Route, Stop


# --- Raw payloads, shaped like the timetable API's JSON ---
@pytest.fixture
def routes_payload():
    return {
        "routes": [
            {
                "route_type": 0,
                "route_id": 1,
                "route_name": "Alamein",
                "route_number": "",
                "route_gtfs_id": "2-ALM",
                "route_service_status": {"description": "Good Service", "timestamp": "2024-03-01T09:00:00+11:00"},
            },
            {"route_type": 0, "route_id": 2, "route_name": "Belgrave", "route_number": "", "route_gtfs_id": "2-BEG"},
        ],
        "status": {"version": "3.0", "health": 1},
    }


@pytest.fixture
def departures_payload():
    return {
        "departures": [
            {
                "stop_id": 1071, "route_id": 3, "run_id": 951234, "run_ref": "951234",
                "direction_id": 1, "scheduled_departure_utc": "2024-03-01T09:45:00Z",
                "estimated_departure_utc": None, "at_platform": False,
                "platform_number": "5", "departure_sequence": 0,
            },
            {
                "stop_id": 1071, "route_id": 3, "run_id": 951230, "run_ref": "951230",
                "direction_id": 1, "scheduled_departure_utc": "2024-03-01T09:15:00Z",
                "estimated_departure_utc": "2024-03-01T09:17:00Z", "at_platform": True,
                "platform_number": "5", "departure_sequence": 0,
            },
            {
                "stop_id": 1071, "route_id": 3, "run_id": 951301, "run_ref": "951301",
                "direction_id": 2, "scheduled_departure_utc": "2024-03-01T09:20:00Z",
                "estimated_departure_utc": None, "at_platform": False,
                "platform_number": "6", "departure_sequence": 0,
            },
        ]
    }


# --- Already-built records ---
@pytest.fixture
def routes():
    return [
        Route(RouteID=1, RouteName="Alamein", RouteGtfsID="2-ALM"),
        Route(RouteID=2, RouteName="Belgrave", RouteGtfsID="2-BEG"),
    ]


@pytest.fixture
def stops():
    return [
        Stop(StopID=1071, StopName="Flinders Street Station", StopSuburb="Melbourne City"),
        Stop(StopID=1181, StopName="Southern Cross Station", StopSuburb="West Melbourne"),
    ]


@pytest.fixture
def departures():
    # two morning departures in the display layout, UTC wall time
    return [
        Departure(StopID=1071, RouteID=3, RunID=1, DirectionID=1, ScheduledDepartureUTC="01-03-2024 09:15 AM"),
        Departure(StopID=1071, RouteID=3, RunID=2, DirectionID=1, ScheduledDepartureUTC="01-03-2024 09:15 AM"),
    ]


@pytest.fixture
def directions():
    return [
        Direction(DirectionID=1, DirectionName="City (Flinders Street)", RouteID=3),
        Direction(DirectionID=2, DirectionName="Alamein", RouteID=3),
    ]
