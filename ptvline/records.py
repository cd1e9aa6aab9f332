# ptvline/records.py
"""
Attribute-by-name access over any record shape.

The normalizer and the projector only talk to records through this module,
so they never need to know whether they hold a Route, a Stop, a Departure,
a Direction or a plain dict straight from the API.
"""
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, Tuple, runtime_checkable


@runtime_checkable
class Record(Protocol):
    def attribute_names(self) -> Tuple[str, ...]:
        """Attribute names in declaration order."""
        ...

    def attribute_value(self, name: str) -> "FieldLookup":
        ...

    def with_attribute(self, name: str, value: Any) -> "Record":
        """Return a NEW record with one attribute replaced. Do not mutate `self`."""
        ...


class LookupStatus(str, Enum):
    FOUND = "found"
    MISSING = "missing"          # the record's shape has no such attribute
    UNREADABLE = "unreadable"    # the attribute (or the record) can't be read


@dataclass(frozen=True)
class FieldLookup:
    status: LookupStatus
    value: Any = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND

    @classmethod
    def of(cls, value: Any) -> "FieldLookup":
        return cls(LookupStatus.FOUND, value)


MISSING = FieldLookup(LookupStatus.MISSING)
UNREADABLE = FieldLookup(LookupStatus.UNREADABLE)


def is_introspectable(rec: Any) -> bool:
    return isinstance(rec, (Record, Mapping))


def has_attribute(rec: Any, name: str) -> bool:
    """False when the record has no such attribute or can't list its attributes."""
    if isinstance(rec, Record):
        try:
            return name in rec.attribute_names()
        except Exception:
            return False
    if isinstance(rec, Mapping):
        return name in rec
    return False


def lookup(rec: Any, name: str) -> FieldLookup:
    """Read one named attribute without ever raising."""
    if isinstance(rec, Record):
        try:
            return rec.attribute_value(name)
        except Exception:
            return UNREADABLE
    if isinstance(rec, Mapping):
        if name not in rec:
            return MISSING
        try:
            return FieldLookup.of(rec[name])
        except Exception:
            return UNREADABLE
    return UNREADABLE


def replace_attribute(rec: Any, name: str, value: Any) -> Any:
    """Copy-on-write setter: returns a new record, `rec` is left alone."""
    if isinstance(rec, Record):
        return rec.with_attribute(name, value)
    if isinstance(rec, Mapping):
        out = dict(rec)
        out[name] = value
        return out
    raise TypeError(f"cannot set {name!r} on {type(rec).__name__}")
