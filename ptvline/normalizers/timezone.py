# ptvline/normalizers/timezone.py
import logging
from datetime import timezone as dt_timezone, tzinfo
from typing import Any
from zoneinfo import ZoneInfo

from ..errors import InvalidTimezone
from ..records import LookupStatus, has_attribute, is_introspectable, lookup, replace_attribute
from ..timefmt import DATE_CONVERSION_FAILED, format_display, parse_display
from .base import Normalizer

logger = logging.getLogger(__name__)

SCHEDULED_DEPARTURE = "ScheduledDepartureUTC"


def resolve_timezone(name: str) -> tzinfo:
    """'UTC' or an IANA name -> tzinfo. Raises InvalidTimezone."""
    if name == "UTC":
        return dt_timezone.utc
    try:
        return ZoneInfo(name)
    except (KeyError, ValueError, TypeError, OSError) as e:
        # ZoneInfoNotFoundError is a KeyError; malformed keys raise ValueError
        logger.debug("error loading location %r: %s", name, e)
        raise InvalidTimezone(name) from e


class TimezoneNormalizer(Normalizer):
    """
    Rewrites a record's ScheduledDepartureUTC (display layout, UTC wall time)
    into the target timezone, keeping the same layout.
    A value that won't parse is replaced with DATE_CONVERSION_FAILED;
    the record itself is always kept.
    """
    def __init__(self, timezone: str):
        self.timezone = timezone
        self.zone = resolve_timezone(timezone)

    def normalize_record(self, rec: Any) -> Any:
        if not is_introspectable(rec) or not has_attribute(rec, SCHEDULED_DEPARTURE):
            return rec

        current = lookup(rec, SCHEDULED_DEPARTURE)
        if current.status is LookupStatus.UNREADABLE:
            return rec

        departure = parse_display(current.value)
        if departure is None:
            logger.warning("cannot parse %s=%r", SCHEDULED_DEPARTURE, current.value)
            return self._replace(rec, DATE_CONVERSION_FAILED)

        local = departure.astimezone(self.zone)
        return self._replace(rec, format_display(local))

    def _replace(self, rec: Any, value: str) -> Any:
        try:
            return replace_attribute(rec, SCHEDULED_DEPARTURE, value)
        except Exception:
            # a record that can't be copied is passed through untouched
            logger.debug("cannot set %s on %s", SCHEDULED_DEPARTURE, type(rec).__name__, exc_info=True)
            return rec
