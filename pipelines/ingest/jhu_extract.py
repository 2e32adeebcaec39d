"""
Row extraction for JHU CSSE daily reports.
Maps one header-less CSV row (list of strings) to a JhuLocation.
"""

import re
from typing import Any, Sequence

from data.schemas.location import Coordinates, JhuLocation, LocationStats

# Daily report columns (0-indexed):
# FIPS, Admin2, Province_State, Country_Region, Last_Update, Lat, Long_,
# Confirmed, Deaths, Recovered, ...
COUNTY_FIELD = 1
PROVINCE_FIELD = 2
COUNTRY_FIELD = 3
UPDATED_AT_FIELD = 4
LATITUDE_FIELD = 5
LONGITUDE_FIELD = 6
CONFIRMED_FIELD = 7
DEATHS_FIELD = 8
RECOVERED_FIELD = 9

# Leading integer; anything after the digits is ignored ("10.0" -> 10)
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _field(row: Sequence[Any], index: int) -> str | None:
    """Return row[index] as str, or None if the row is too short or the value is missing."""
    if index >= len(row) or row[index] is None:
        return None
    return str(row[index])


def _optional(value: str | None) -> str | None:
    """Empty string -> None."""
    return value if value else None


def parse_count(value: Any) -> int | None:
    """
    Best-effort integer coercion for a count column.

    Args:
        value: Raw field value (usually a string).

    Returns:
        The leading integer of value, or None if missing or non-numeric.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def extract_location(row: Sequence[Any]) -> JhuLocation:
    """
    Build a JhuLocation from one CSV row.
    Never raises; short rows yield None for the missing positions.

    Args:
        row: Ordered string fields from the daily report.

    Returns:
        JhuLocation for the row.
    """
    return JhuLocation(
        country=_field(row, COUNTRY_FIELD),
        province=_optional(_field(row, PROVINCE_FIELD)),
        county=_optional(_field(row, COUNTY_FIELD)),
        updated_at=_field(row, UPDATED_AT_FIELD),
        stats=LocationStats(
            confirmed=parse_count(_field(row, CONFIRMED_FIELD)),
            deaths=parse_count(_field(row, DEATHS_FIELD)),
            recovered=parse_count(_field(row, RECOVERED_FIELD)),
        ),
        coordinates=Coordinates(
            latitude=_field(row, LATITUDE_FIELD),
            longitude=_field(row, LONGITUDE_FIELD),
        ),
    )
