# ptvline/normalizers/pipeline.py
from collections.abc import Sequence
from typing import Any, List

from ..errors import NotASequence
from .base import Normalizer
from .timezone import TimezoneNormalizer


class NormalizerPipeline(Normalizer):
    """
    A chain of normalizers.
    Each stage takes the output of the previous stage.
    """
    def __init__(self, stages: List[Normalizer]):
        self.stages = stages

    def normalize_record(self, rec: Any) -> Any:
        out = rec  # stages are copy-on-write, no need to copy up front
        for stage in self.stages:
            out = stage.normalize_record(out)
        return out


def get_default_normalizer(timezone: str) -> Normalizer:
    """Factory for the default pipeline. Raises InvalidTimezone."""
    return NormalizerPipeline([TimezoneNormalizer(timezone)])


def normalize(records: Sequence, timezone: str) -> List[Any]:
    """
    Return a new list with every record's scheduled departure moved into `timezone`.

    Raises InvalidTimezone / NotASequence before touching any record, so a
    failure never yields partial output. Order and length are preserved.
    """
    normalizer = get_default_normalizer(timezone)
    if isinstance(records, (str, bytes, bytearray)) or not isinstance(records, Sequence):
        raise NotASequence(records)
    return [normalizer.normalize_record(rec) for rec in records]
