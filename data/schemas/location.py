"""
Pydantic v2 models for JHU CSSE daily report locations and ingestion results.
"""

from pydantic import BaseModel, Field, TypeAdapter


class LocationStats(BaseModel):
    """
    Cumulative counts for one location.
    None marks a count that was missing or non-numeric in the source row.
    """

    confirmed: int | None = None
    deaths: int | None = None
    recovered: int | None = None


class Coordinates(BaseModel):
    """Latitude/longitude exactly as published (not parsed)."""

    latitude: str | None = None
    longitude: str | None = None


class JhuLocation(BaseModel):
    """
    One geographic observation from a JHU CSSE daily report.
    county is set only for US county-level rows.
    """

    country: str | None = None
    province: str | None = None
    county: str | None = None
    updated_at: str | None = Field(None, alias="updatedAt", description="Source timestamp, passed through")
    stats: LocationStats = Field(default_factory=LocationStats)
    coordinates: Coordinates = Field(default_factory=Coordinates)

    model_config = {"populate_by_name": True}

    @property
    def is_county(self) -> bool:
        return self.county is not None


class IngestResult(BaseModel):
    """Outcome of one snapshot ingestion run."""

    success: bool = Field(...)
    snapshot_date: str | None = Field(None, description="MM-DD-YYYY date of the requested report")
    location_count: int = Field(default=0, ge=0)
    error: str | None = Field(None)


LOCATION_LIST_ADAPTER = TypeAdapter(list[JhuLocation])
