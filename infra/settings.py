"""
Runtime configuration for the JHU snapshot cache.
Loads configuration from environment variables via python-dotenv.
"""

import os
from pathlib import Path

import redis
from dotenv import load_dotenv

# Load .env from project root (parent of infra/)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=_env_path)

REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")
JHU_BASE_URL = os.getenv(
    "JHU_BASE_URL",
    "https://raw.githubusercontent.com/CSSEGISandData/COVID-19/master/csse_covid_19_data/csse_covid_19_daily_reports",
)
JHU_V2_KEY = os.getenv("JHU_V2_KEY", "jhu_v2")
# Reports are dated by the publisher's day; anchor "yesterday" to a fixed zone
SNAPSHOT_TIMEZONE = os.getenv("JHU_SNAPSHOT_TIMEZONE", "America/Denver")
REQUEST_TIMEOUT = int(os.getenv("JHU_REQUEST_TIMEOUT", "30"))


def get_redis_client(url: str | None = None) -> redis.Redis:
    """
    Return a Redis client for REDIS_URL (or the given url).
    Responses are decoded to str so cached payloads come back as JSON text.
    """
    return redis.Redis.from_url(url or REDIS_URL, decode_responses=True)
