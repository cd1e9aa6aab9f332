# ptvline/api.py
"""
Thin client for the timetable API (v3 endpoints).

Every getter returns a list of validated records from `ptvline.models`;
transport, HTTP and payload problems surface as `ApiError`.
"""
import logging
from typing import Any, Dict, List, Optional, Type

import requests
from pydantic import ValidationError

from . import settings
from .errors import ApiError
from .models import RECORD_MODELS, Departure, Direction, Route, Stop, TimetableRecord

logger = logging.getLogger(__name__)


class TimetableClient:
    def __init__(
        self,
        base_url: str = settings.API_BASE_URL,
        route_type: int = settings.ROUTE_TYPE,
        timeout: float = settings.TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.route_type = route_type
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    # -----------------------------
    # transport
    # -----------------------------
    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        logger.debug("GET %s params=%s", url, params)
        try:
            r = self.session.get(url, params=params, timeout=self.timeout)
            r.raise_for_status()
            return r.json()
        except requests.JSONDecodeError as e:
            raise ApiError(f"invalid JSON from {path}: {e}") from e
        except requests.RequestException as e:
            raise ApiError(f"request to {path} failed: {e}") from e

    def _records(self, payload: Dict[str, Any], key: str, model: Type[TimetableRecord]) -> List[Any]:
        items = payload.get(key) if isinstance(payload, dict) else None
        if items is None:
            return []
        if not isinstance(items, list):
            raise ApiError(f"expected a list under {key!r}, got {type(items).__name__}")
        try:
            return [model.model_validate(it) for it in items]
        except ValidationError as e:
            raise ApiError(f"unexpected {key} payload: {e}") from e

    # -----------------------------
    # endpoints
    # -----------------------------
    def get_routes(self, route_name: Optional[str] = None) -> List[Route]:
        params = {"route_name": route_name} if route_name else None
        return self._records(self._get("/v3/routes", params), "routes", Route)

    def get_stops(self, route_id: int, route_type: Optional[int] = None, stop_name: str = "") -> List[Stop]:
        rt = self.route_type if route_type is None else route_type
        stops = self._records(
            self._get(f"/v3/stops/route/{route_id}/route_type/{rt}"), "stops", Stop
        )
        if stop_name:
            needle = stop_name.lower()
            stops = [s for s in stops if needle in s.StopName.lower()]
        return stops

    def get_departures(self, stop_id: int, route_id: int, route_type: Optional[int] = None) -> List[Departure]:
        rt = self.route_type if route_type is None else route_type
        path = f"/v3/departures/route_type/{rt}/stop/{stop_id}/route/{route_id}"
        return self._records(self._get(path), "departures", Departure)

    def get_directions(self, route_id: int) -> List[Direction]:
        return self._records(
            self._get(f"/v3/directions/route/{route_id}"), "directions", Direction
        )

    def fetch_records(self, kind: str, **filters) -> List[Any]:
        """Generic entry point: kind is one of routes/stops/departures/directions."""
        if kind not in RECORD_MODELS:
            raise ValueError(f"unknown record kind: {kind!r}")
        return getattr(self, f"get_{kind}")(**filters)
