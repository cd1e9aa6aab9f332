from .base import Normalizer
from .pipeline import NormalizerPipeline, get_default_normalizer, normalize
from .timezone import SCHEDULED_DEPARTURE, TimezoneNormalizer, resolve_timezone

__all__ = [
    "Normalizer",
    "NormalizerPipeline",
    "TimezoneNormalizer",
    "SCHEDULED_DEPARTURE",
    "get_default_normalizer",
    "normalize",
    "resolve_timezone",
]
