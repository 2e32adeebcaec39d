"""JHU CSSE snapshot API routes."""

from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger

from data.schemas.location import JhuLocation
from data.storage.cache_store import CacheGateway, RedisCacheStore, load_locations
from infra.settings import JHU_V2_KEY
from pipelines.transform.jhu_views import filter_counties, generalize_locations

router = APIRouter()


@lru_cache(maxsize=1)
def get_cache() -> CacheGateway:
    """Shared Redis-backed cache store (overridden in tests)."""
    return RedisCacheStore.from_url()


def _snapshot(cache: CacheGateway) -> list[JhuLocation]:
    locations = load_locations(cache, JHU_V2_KEY)
    if locations is None:
        logger.warning("No JHU snapshot cached under {}", JHU_V2_KEY)
        raise HTTPException(status_code=404, detail="JHU CSSE data not found")
    return locations


@router.get("/", response_model=list[JhuLocation])
def get_jhu_locations(cache: CacheGateway = Depends(get_cache)) -> list[JhuLocation]:
    """Get every location in today's snapshot."""
    return _snapshot(cache)


@router.get("/generalized", response_model=list[JhuLocation])
def get_generalized_locations(cache: CacheGateway = Depends(get_cache)) -> list[JhuLocation]:
    """Get the snapshot with US counties summed into their states."""
    return generalize_locations(_snapshot(cache))


@router.get("/counties", response_model=list[JhuLocation])
def get_counties(cache: CacheGateway = Depends(get_cache)) -> list[JhuLocation]:
    """Get all US county rows."""
    return filter_counties(_snapshot(cache))


@router.get("/counties/{county}", response_model=list[JhuLocation])
def get_county(county: str, cache: CacheGateway = Depends(get_cache)) -> list[JhuLocation]:
    """Get county rows matching a county name."""
    matches = filter_counties(_snapshot(cache), county.strip().lower())
    if not matches:
        raise HTTPException(status_code=404, detail=f"County {county!r} not found")
    return matches
