from ptvline.models import Departure, Route, Stop
from ptvline.records import LookupStatus


def test_departure_from_api_payload(departures_payload):
    dep = Departure.model_validate(departures_payload["departures"][1])
    assert dep.ScheduledDepartureUTC == "01-03-2024 09:15 AM"
    # only the scheduled time is re-laid out
    assert dep.EstimatedDepartureUTC == "2024-03-01T09:17:00Z"
    assert dep.AtPlatform is True
    assert dep.DirectionID == 1


def test_unexpected_timestamp_is_kept_verbatim():
    dep = Departure.model_validate({"stop_id": 1, "route_id": 2, "scheduled_departure_utc": "soon"})
    assert dep.ScheduledDepartureUTC == "soon"


def test_route_nested_status(routes_payload):
    route = Route.model_validate(routes_payload["routes"][0])
    assert route.RouteServiceStatus.Description == "Good Service"
    assert Route.model_validate(routes_payload["routes"][1]).RouteServiceStatus is None


def test_attribute_names_follow_declaration_order():
    stop = Stop(StopID=1)
    assert stop.attribute_names()[:3] == ("StopID", "StopName", "StopSuburb")


def test_attribute_value():
    stop = Stop(StopID=1, StopName="Richmond")
    assert stop.attribute_value("StopName").value == "Richmond"
    assert stop.attribute_value("stop_name").status is LookupStatus.MISSING


def test_with_attribute_is_copy_on_write():
    dep = Departure(StopID=1, RouteID=2, ScheduledDepartureUTC="01-03-2024 09:15 AM")
    changed = dep.with_attribute("ScheduledDepartureUTC", "date conversion failed")
    assert changed is not dep
    assert dep.ScheduledDepartureUTC == "01-03-2024 09:15 AM"
    assert changed.ScheduledDepartureUTC == "date conversion failed"
    assert changed.attribute_names() == dep.attribute_names()


def test_json_dump_uses_attribute_names():
    data = Stop(StopID=1, StopName="Richmond").model_dump(mode="json")
    assert data["StopID"] == 1 and data["StopName"] == "Richmond"
