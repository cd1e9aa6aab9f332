# ptvline/models.py
from typing import Any, Dict, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .records import MISSING, FieldLookup
from .timefmt import api_to_display

# -----------------------------
# Record shapes returned by the timetable API.
# Attribute names are what --format refers to; aliases are the API's JSON keys.
# -----------------------------


class TimetableRecord(BaseModel):
    """Base for every record shape; implements the `records.Record` protocol."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def attribute_names(self) -> Tuple[str, ...]:
        return tuple(type(self).model_fields)

    def attribute_value(self, name: str) -> FieldLookup:
        if name not in type(self).model_fields:
            return MISSING
        return FieldLookup.of(getattr(self, name))

    def with_attribute(self, name: str, value: Any) -> "TimetableRecord":
        return self.model_copy(update={name: value})


class ServiceStatus(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    Description: str = Field("", alias="description")
    Timestamp: str = Field("", alias="timestamp")


class Route(TimetableRecord):
    RouteType: int = Field(0, alias="route_type")
    RouteID: int = Field(alias="route_id")
    RouteName: str = Field("", alias="route_name")
    RouteNumber: str = Field("", alias="route_number")
    RouteGtfsID: str = Field("", alias="route_gtfs_id")
    RouteServiceStatus: Optional[ServiceStatus] = Field(None, alias="route_service_status")


class Stop(TimetableRecord):
    StopID: int = Field(alias="stop_id")
    StopName: str = Field("", alias="stop_name")
    StopSuburb: str = Field("", alias="stop_suburb")
    RouteType: int = Field(0, alias="route_type")
    StopSequence: int = Field(0, alias="stop_sequence")
    StopLatitude: Optional[float] = Field(None, alias="stop_latitude")
    StopLongitude: Optional[float] = Field(None, alias="stop_longitude")


class Departure(TimetableRecord):
    StopID: int = Field(alias="stop_id")
    RouteID: int = Field(alias="route_id")
    RunID: int = Field(0, alias="run_id")
    RunRef: str = Field("", alias="run_ref")
    DirectionID: int = Field(-1, alias="direction_id")
    ScheduledDepartureUTC: Optional[str] = Field(None, alias="scheduled_departure_utc")
    EstimatedDepartureUTC: Optional[str] = Field(None, alias="estimated_departure_utc")
    AtPlatform: bool = Field(False, alias="at_platform")
    PlatformNumber: Optional[str] = Field(None, alias="platform_number")
    DepartureSequence: int = Field(0, alias="departure_sequence")

    @field_validator("ScheduledDepartureUTC", mode="before")
    @classmethod
    def _display_layout(cls, v):
        # The API sends ISO-8601; everything downstream expects the display layout.
        return api_to_display(v)


class Direction(TimetableRecord):
    DirectionID: int = Field(alias="direction_id")
    DirectionName: str = Field("", alias="direction_name")
    RouteID: int = Field(alias="route_id")
    RouteType: int = Field(0, alias="route_type")
    RouteDirectionDescription: str = Field("", alias="route_direction_description")


RECORD_MODELS: Dict[str, Type[TimetableRecord]] = {
    "routes": Route,
    "stops": Stop,
    "departures": Departure,
    "directions": Direction,
}
