# ptvline/normalizers/base.py
from typing import Any, Protocol


class Normalizer(Protocol):
    def normalize_record(self, rec: Any) -> Any:
        """Return a NEW normalized record (or `rec` itself if nothing changes). Do not mutate `rec`."""
        ...
