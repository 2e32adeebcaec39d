"""
Read-side views over a cached JHU snapshot.
Both functions are pure: they never mutate their input or touch the cache.
"""

from typing import Iterable

from data.schemas.location import JhuLocation


def add_counts(total: int | None, value: int | None) -> int | None:
    """Sum two counts; an invalid count (None) on either side makes the sum invalid."""
    if total is None or value is None:
        return None
    return total + value


def generalize_locations(data: Iterable[JhuLocation]) -> list[JhuLocation]:
    """
    Roll US county rows up into one summed row per province.

    Non-county rows are passed through first, in their original order, with
    an empty province defaulted to None. One row per province follows, in the
    order each province was first seen; its county field is None.

    Args:
        data: Snapshot locations as stored in the cache.

    Returns:
        Generalized list of JhuLocation.
    """
    result: list[JhuLocation] = []
    # dict keeps first-seen province order
    states: dict[str | None, JhuLocation] = {}

    for loc in data:
        province = loc.province or None
        if loc.is_county:
            state = states.get(province)
            if state is None:
                states[province] = loc.model_copy(update={"county": None, "province": province}, deep=True)
                continue
            state.stats.confirmed = add_counts(state.stats.confirmed, loc.stats.confirmed)
            state.stats.deaths = add_counts(state.stats.deaths, loc.stats.deaths)
            state.stats.recovered = add_counts(state.stats.recovered, loc.stats.recovered)
        else:
            result.append(loc.model_copy(update={"province": province}, deep=True))

    result.extend(states.values())
    return result


def filter_counties(data: Iterable[JhuLocation], county: str | None = None) -> list[JhuLocation]:
    """
    Return county-level rows, optionally only those named county.

    Args:
        data: Snapshot locations as stored in the cache.
        county: County name; compared case-insensitively. None or "" returns all counties.

    Returns:
        Matching JhuLocation rows in their original order.
    """
    counties = [loc for loc in data if loc.county is not None]
    if not county:
        return counties
    wanted = county.lower()
    return [loc for loc in counties if loc.county.lower() == wanted]
