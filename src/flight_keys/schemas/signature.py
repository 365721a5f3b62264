"""Flight signature and lookup result DTOs."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Separates the four fields of a composite key.
DELIMITER = "|"

_NON_ALNUM = re.compile(r"[^A-Z0-9]")


class FlightSignature(BaseModel):
    """Raw description of one flight occurrence as seen by a producer.

    Flight numbers and airport codes lose their punctuation before they reach
    a composite key, so a stray delimiter there is harmless. The date is kept
    verbatim, as is an airport string with nothing alphanumeric in it; only
    those can carry a delimiter into the key.
    """

    model_config = ConfigDict(frozen=True)

    date: str = Field(description="Departure date, DD/MM/YYYY (UTC)")
    flight_number: str
    origin: str = Field(description="Airport code or alias")
    destination: str = Field(description="Airport code or alias")

    @field_validator("date")
    @classmethod
    def _reject_delimiter_in_date(cls, value: str) -> str:
        if DELIMITER in value:
            msg = f"must not contain {DELIMITER!r}"
            raise ValueError(msg)
        return value

    @field_validator("origin", "destination")
    @classmethod
    def _reject_bare_delimiter(cls, value: str) -> str:
        if DELIMITER in value and not _NON_ALNUM.sub("", value.strip().upper()):
            msg = f"must contain an airport code, got {value!r}"
            raise ValueError(msg)
        return value


class ExistingMapping(BaseModel):
    """A previously stored flight key plus the route it was stored under."""

    model_config = ConfigDict(frozen=True)

    flight_key: str
    origin: str
    destination: str
