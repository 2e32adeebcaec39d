"""Data ingestion pipelines."""

from pipelines.ingest.jhu_extract import extract_location, parse_count
from pipelines.ingest.jhu_snapshot import JhuSnapshotIngestor, snapshot_date, snapshot_url

__all__ = [
    "JhuSnapshotIngestor",
    "extract_location",
    "parse_count",
    "snapshot_date",
    "snapshot_url",
]
