"""Core schemas for flight key reconciliation."""

from .signature import DELIMITER, ExistingMapping, FlightSignature

__all__ = [
    "DELIMITER",
    "ExistingMapping",
    "FlightSignature",
]
