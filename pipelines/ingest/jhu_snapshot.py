"""
JHU CSSE daily snapshot ingestion.
Fetches yesterday's daily report CSV, normalizes every row into a JhuLocation
and stores the full collection in the cache under a single key.
"""

import io
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import pandas as pd
import requests
from loguru import logger

from data.schemas.location import IngestResult, JhuLocation
from data.storage.cache_store import CacheGateway, save_locations
from infra.settings import JHU_BASE_URL, JHU_V2_KEY, REQUEST_TIMEOUT, SNAPSHOT_TIMEZONE
from pipelines.ingest.jhu_extract import extract_location

DATE_FORMAT = "%m-%d-%Y"


def snapshot_date(now: datetime | None = None, tz: str = SNAPSHOT_TIMEZONE) -> str:
    """
    Return yesterday's date in the reference timezone as MM-DD-YYYY.

    Args:
        now: Current time (defaults to the wall clock). Naive values are taken as local time.
        tz: IANA timezone used to decide what "yesterday" is.
    """
    zone = ZoneInfo(tz)
    local_now = now.astimezone(zone) if now is not None else datetime.now(zone)
    return (local_now - timedelta(days=1)).strftime(DATE_FORMAT)


def snapshot_url(date_string: str, base_url: str = JHU_BASE_URL) -> str:
    """URL of the daily report CSV for a MM-DD-YYYY date."""
    return f"{base_url.rstrip('/')}/{date_string}.csv"


class JhuSnapshotIngestor:
    """
    Pulls one JHU CSSE daily report and replaces the cached snapshot with it.

    The cache write is the last step and happens only after the fetch, parse
    and extraction all succeeded, so a failed run leaves the previous
    snapshot untouched.
    """

    def __init__(
        self,
        cache: CacheGateway,
        base_url: str = JHU_BASE_URL,
        key: str = JHU_V2_KEY,
        timeout: int = REQUEST_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        """
        Initialize the ingestor.

        Args:
            cache: Cache store the snapshot is written to.
            base_url: Directory URL holding the MM-DD-YYYY.csv daily reports.
            key: Cache key for the full snapshot.
            timeout: Request timeout in seconds (default 30).
            session: Optional requests session (a new one is created if omitted).
        """
        self.cache = cache
        self.base_url = base_url
        self.key = key
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": "jhu-snapshot-cache/1.0"})

    def _decode_csv_bytes(self, csv_bytes: bytes) -> str:
        """Decode CSV bytes; fallback to latin-1 on UnicodeDecodeError."""
        for encoding in ("utf-8-sig", "cp1252"):
            try:
                return csv_bytes.decode(encoding)
            except UnicodeDecodeError:
                continue
        logger.warning("CSV decode failed with common encodings, using latin-1 with errors=replace")
        return csv_bytes.decode("latin-1", errors="replace")

    def fetch(self, date_string: str) -> bytes:
        """
        Fetch the raw daily report for a date.

        Raises:
            requests.RequestException: network failure or non-2xx status
                (including reports that are not published yet).
        """
        url = snapshot_url(date_string, self.base_url)
        response = self.session.get(url, timeout=self.timeout)
        response.raise_for_status()
        logger.debug("Fetched {} ({} bytes)", url, len(response.content))
        return response.content

    def _read_frame(self, text: str, width: int | None = None) -> pd.DataFrame:
        """Read CSV text header-less as strings; width forces the column count."""
        wide_lines: list[int] = []

        def _keep_wide_line(bad_line: list[str]) -> list[str]:
            wide_lines.append(len(bad_line))
            return bad_line

        df = pd.read_csv(
            io.StringIO(text),
            header=None,
            names=list(range(width)) if width else None,
            dtype=str,
            keep_default_na=False,
            engine="python",
            on_bad_lines=_keep_wide_line,
        )
        if wide_lines and width is None:
            # Lines wider than the first one: re-read at the widest width seen
            return self._read_frame(text, max(wide_lines))
        return df

    def parse_rows(self, text: str) -> list[list[str]]:
        """
        Tokenize CSV text into rows of strings, dropping the header row.

        The CSV is read header-less so every line comes back as data; the
        first line is the column header and is discarded here. Each row keeps
        its own width: fields pandas padded onto short lines are removed, and
        lines wider than the header are kept whole.
        """
        rows = []
        for values in self._read_frame(text).values.tolist():
            # Real fields are always str (keep_default_na=False); padding is NaN
            while values and not isinstance(values[-1], str):
                values.pop()
            rows.append(values)
        return rows[1:]

    def build_locations(self, text: str) -> list[JhuLocation]:
        """Parse CSV text and extract one JhuLocation per data row, in order."""
        return [extract_location(row) for row in self.parse_rows(text)]

    def ingest(self, date_string: str | None = None) -> IngestResult:
        """
        Replace the cached snapshot with the daily report for date_string.

        Fetch and parse failures are logged and reported in the result; the
        cache is not written in that case. Cache errors propagate.

        Args:
            date_string: MM-DD-YYYY report date (defaults to snapshot_date()).

        Returns:
            IngestResult with the number of stored locations or the failure cause.
        """
        date_string = date_string or snapshot_date()
        logger.info("Using {}.csv CSSEGISandData", date_string)

        try:
            raw = self.fetch(date_string)
            locations = self.build_locations(self._decode_csv_bytes(raw))
        except Exception as e:
            logger.error("Requesting JHU locations failed for {}: {}", date_string, e)
            return IngestResult(success=False, snapshot_date=date_string, error=str(e))

        save_locations(self.cache, self.key, locations)
        logger.info("Updated JHU CSSE: {} locations", len(locations))
        return IngestResult(success=True, snapshot_date=date_string, location_count=len(locations))
