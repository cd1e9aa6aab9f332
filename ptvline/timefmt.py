# ptvline/timefmt.py
import re
from datetime import datetime, timezone
from typing import Optional

# DD-MM-YYYY hh:mm AM/PM, shared by the parse and format paths
DISPLAY_LAYOUT = "%d-%m-%Y %I:%M %p"
# what the timetable API sends, e.g. 2024-03-01T09:15:00Z
API_LAYOUT = "%Y-%m-%dT%H:%M:%SZ"

DATE_CONVERSION_FAILED = "date conversion failed"

# strptime accepts unpadded fields, the display layout does not
_DISPLAY_RE = re.compile(r"(\d{2}-\d{2}-\d{4}) (\d{2})(:\d{2} (?:AM|PM))")


def parse_display(value) -> Optional[datetime]:
    """Parse a display-layout string as a UTC wall time. None if it doesn't fit."""
    m = _DISPLAY_RE.fullmatch(value) if isinstance(value, str) else None
    if m is None:
        return None
    day, hour, rest = m.groups()
    # hour 00 reads like 12: 00 AM is midnight, 00 PM is noon
    if hour == "00":
        hour = "12"
    try:
        return datetime.strptime(f"{day} {hour}{rest}", DISPLAY_LAYOUT).replace(tzinfo=timezone.utc)
    except ValueError:
        return None


def format_display(dt: datetime) -> str:
    return dt.strftime(DISPLAY_LAYOUT)


def api_to_display(value):
    """Re-lay an API timestamp into the display layout; anything else is returned as-is."""
    if not isinstance(value, str):
        return value
    try:
        dt = datetime.strptime(value, API_LAYOUT)
    except ValueError:
        return value
    return format_display(dt)
