"""Airport code normalization and metadata."""

from .directory import AirportDirectory
from .normalizer import AirportNormalizer

__all__ = [
    "AirportDirectory",
    "AirportNormalizer",
]
