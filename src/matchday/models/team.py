"""Team and Venue models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Venue(BaseModel):
    """A ground that can host matches."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    county: str | None = None
    sub_county: str | None = None


class Team(BaseModel):
    """A registered team.

    Geographic attributes are only read by the venue-assignment pass; the
    pairing algorithm looks at ``id`` alone.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str
    group: str | None = None
    county: str | None = None
    sub_county: str | None = None
    ward: str | None = None
