# ptvline/output.py
import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Sequence

from pydantic import BaseModel

from .normalizers import normalize
from .projection import project

logger = logging.getLogger(__name__)


def _to_jsonable(rec: Any) -> Any:
    if isinstance(rec, BaseModel):
        return rec.model_dump(mode="json")
    if isinstance(rec, Mapping):
        return dict(rec)
    return rec


def to_json(records: Sequence[Any]) -> str:
    """Indented, human-readable JSON for a record list."""
    return json.dumps([_to_jsonable(r) for r in records], indent=2, ensure_ascii=False, default=str)


def render(records: Sequence[Any], format: str, delimiter: str, timezone: str) -> str:
    """
    Normalize timestamps first, always; plain JSON output shows them too.
    Then: no format -> full JSON, a format -> projected lines.
    An empty result is always "[]", formatted or not.
    """
    normalized = normalize(records, timezone)
    if not format or not normalized:
        return to_json(normalized)
    return project(normalized, format, delimiter)


def print_result(records: Sequence[Any], format: str = "", delimiter: str = " ", timezone: str = "UTC") -> None:
    print(render(records, format, delimiter, timezone))


def write_json_file(records: Sequence[Any], path="routes.json") -> Path:
    """Dump records as-is (no normalization) to `path`."""
    p = Path(path)
    p.write_text(to_json(records), encoding="utf-8")
    logger.info("wrote %d records to %s", len(records), p)
    return p
