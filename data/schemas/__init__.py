"""
JHU snapshot data schemas: Pydantic v2 models for cached locations and ingestion results.
"""

from data.schemas.location import (
    Coordinates,
    IngestResult,
    JhuLocation,
    LocationStats,
)

__all__ = [
    "Coordinates",
    "IngestResult",
    "JhuLocation",
    "LocationStats",
]
