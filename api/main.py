"""FastAPI application serving the cached JHU CSSE snapshot."""

from contextlib import asynccontextmanager
from urllib.parse import urlparse

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from infra.settings import JHU_V2_KEY, REDIS_URL

from .routers import jhucsse

logger.add("logs/api.log", rotation="1 day", retention="7 days")


def _redis_location(url: str) -> str:
    """host:port/db of a redis URL, without credentials."""
    parsed = urlparse(url)
    return f"{parsed.hostname}:{parsed.port or 6379}{parsed.path or '/0'}"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Serving JHU snapshot key {} from redis {}", JHU_V2_KEY, _redis_location(REDIS_URL))
    yield


app = FastAPI(
    title="JHU Snapshot API",
    description="Cached JHU CSSE daily report: all locations, state rollups, and US counties",
    version="1.0.0",
    lifespan=lifespan,
)

# Read-only public data
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["GET"])

app.include_router(jhucsse.router, prefix="/v2/jhucsse", tags=["jhucsse"])


@app.get("/")
async def root() -> dict[str, str]:
    """Name, version, and the cache key the snapshot routes read."""
    return {
        "name": "JHU Snapshot API",
        "version": "1.0.0",
        "snapshot_key": JHU_V2_KEY,
    }


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
