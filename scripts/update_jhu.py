"""CLI to refresh the cached JHU CSSE snapshot (run once per day by a scheduler)."""

import argparse
import sys
from pathlib import Path

# Project root
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from loguru import logger
from data.storage.cache_store import InMemoryCacheStore, RedisCacheStore
from pipelines.ingest.jhu_snapshot import JhuSnapshotIngestor


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Fetch a JHU CSSE daily report and store it in the cache."
    )
    parser.add_argument(
        "--date",
        type=str,
        help="Report date as MM-DD-YYYY (default: yesterday in America/Denver).",
    )
    parser.add_argument(
        "--redis-url",
        type=str,
        default=None,
        help="Redis URL (default: from REDIS_URL env or redis://localhost:6379/0).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Fetch and parse the report without writing to Redis.",
    )
    args = parser.parse_args(argv)

    cache = InMemoryCacheStore() if args.dry_run else RedisCacheStore.from_url(args.redis_url)
    ingestor = JhuSnapshotIngestor(cache)
    result = ingestor.ingest(args.date)

    if not result.success:
        logger.error("Snapshot {} not updated: {}", result.snapshot_date, result.error)
        return 1

    prefix = "Dry run: " if args.dry_run else ""
    print(f"{prefix}{result.location_count} locations for {result.snapshot_date}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
