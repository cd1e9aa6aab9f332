from ptvline.departures import next_departures_towards
from ptvline.models import Departure


def _dep(run, direction, when):
    return Departure(StopID=1, RouteID=3, RunID=run, DirectionID=direction, ScheduledDepartureUTC=when)


DEPS = [
    _dep(1, 1, "01-03-2024 09:45 AM"),
    _dep(2, 2, "01-03-2024 09:20 AM"),
    _dep(3, 1, "bad"),
    _dep(4, 1, "01-03-2024 09:15 AM"),
    _dep(5, 1, "02-03-2024 12:05 AM"),
]


def test_direction_filter_and_order():
    out = next_departures_towards(DEPS, direction_id=1)
    assert [d.RunID for d in out] == [4, 1, 5, 3]


def test_count_caps_result():
    assert [d.RunID for d in next_departures_towards(DEPS, 1, 2)] == [4, 1]


def test_any_direction():
    out = next_departures_towards(DEPS)
    assert [d.RunID for d in out] == [4, 2, 1, 5, 3]


def test_input_untouched():
    next_departures_towards(DEPS, 1, 1)
    assert [d.RunID for d in DEPS] == [1, 2, 3, 4, 5]
