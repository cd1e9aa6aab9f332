# ptvline/departures.py
from datetime import datetime
from typing import List, Sequence

from .models import Departure
from .timefmt import parse_display

_LAST = datetime.max


def _sort_key(dep: Departure):
    when = parse_display(dep.ScheduledDepartureUTC)
    # naive max sorts after every real time; unparseable departures go last
    return when.replace(tzinfo=None) if when else _LAST


def next_departures_towards(
    departures: Sequence[Departure], direction_id: int = -1, count: int = -1
) -> List[Departure]:
    """
    The next `count` departures heading towards `direction_id`, soonest first.
    direction_id -1 keeps every direction, count <= 0 keeps them all.
    """
    picked = [d for d in departures if direction_id == -1 or d.DirectionID == direction_id]
    picked.sort(key=_sort_key)
    if count > 0:
        picked = picked[:count]
    return picked
