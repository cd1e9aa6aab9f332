# ptvline/projection.py
from typing import Any, Iterable, List, Sequence

from .records import lookup


def parse_format(format: str) -> List[str]:
    """Example --format "RouteID RouteName" -> ["RouteID", "RouteName"]."""
    return format.split(" ")


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def project_record(rec: Any, fields: Sequence[str], delimiter: str) -> str:
    """
    One record -> one line.
    A field that can't be looked up contributes nothing, not even a delimiter.
    The delimiter goes after every found value except the one in the last
    format position, so a missing last field can leave a trailing delimiter.
    """
    last = len(fields) - 1
    parts = []
    for j, name in enumerate(fields):
        field = lookup(rec, name)
        if not field.found:
            continue
        parts.append(_text(field.value))
        if j < last:
            parts.append(delimiter)
    return "".join(parts)


def project(records: Iterable[Any], format: str, delimiter: str) -> str:
    """Render the named fields of each record as delimited lines, one per record."""
    fields = parse_format(format)
    return "\n".join(project_record(rec, fields, delimiter) for rec in records)
