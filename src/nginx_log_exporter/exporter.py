"""The exporter: owns tailing state and sample storage behind one lock.

A scrape refreshes the file registry, reads what was appended to every
watched file, aggregates the parsed durations and renders the full
histogram state. Scrapes are serialized; concurrent callers block.
"""

import logging
import threading
from collections.abc import Sequence
from typing import Literal

from nginx_log_exporter.adapters.files.reader import read_new_lines
from nginx_log_exporter.adapters.files.registry import FileRegistry
from nginx_log_exporter.adapters.storage.in_memory import InMemorySeriesStorage
from nginx_log_exporter.core.encoding.prometheus import encode_family
from nginx_log_exporter.core.errors import (
    RecordDecodeError,
    ScrapeError,
    StatusClassError,
)
from nginx_log_exporter.core.metrics import DEFAULT_HISTOGRAM_BUCKETS, histogram
from nginx_log_exporter.core.models import MetricSample, WatchedFile
from nginx_log_exporter.core.parsing import parse_line
from nginx_log_exporter.core.ports import SeriesStoragePort

logger = logging.getLogger(__name__)

METRIC_NAME = "nginx_http_request_duration_seconds"
METRIC_HELP = "Request duration in seconds"

StatusPolicy = Literal["skip", "fail"]


class Exporter:
    """Tails access logs and renders request durations as a histogram.

    Args:
        pattern: Glob pattern naming the access-log files.
        storage: Sample storage (default: unbounded InMemorySeriesStorage).
        buckets: Histogram bucket upper bounds in seconds.
        status_policy: What to do with a line whose status code has no valid
            class: "skip" drops the line, "fail" aborts the scrape.
    """

    def __init__(
        self,
        pattern: str,
        storage: SeriesStoragePort | None = None,
        buckets: Sequence[float] | None = None,
        status_policy: StatusPolicy = "skip",
    ) -> None:
        if status_policy not in ("skip", "fail"):
            raise ValueError(f"Unknown status policy: {status_policy!r}")
        self._registry = FileRegistry(pattern)
        self._storage = storage if storage is not None else InMemorySeriesStorage()
        self._buckets = tuple(
            buckets if buckets is not None else DEFAULT_HISTOGRAM_BUCKETS
        )
        self._status_policy = status_policy
        self._lock = threading.Lock()

    @property
    def registry(self) -> FileRegistry:
        return self._registry

    @property
    def storage(self) -> SeriesStoragePort:
        return self._storage

    @property
    def buckets(self) -> tuple[float, ...]:
        return self._buckets

    def scrape(self) -> str:
        """Run one refresh, read, aggregate and render cycle.

        Returns:
            Prometheus exposition text.

        Raises:
            ScrapeError: If the scrape was aborted. Samples aggregated before
                the failure are kept.
        """
        with self._lock:
            self._registry.refresh()
            for entry in self._registry.files():
                if not self._registry.check_rotation(entry):
                    continue
                self._read_file(entry)
            return self._render()

    def _read_file(self, entry: WatchedFile) -> None:
        try:
            for line in read_new_lines(entry):
                self._ingest(line)
        except OSError as e:
            logger.error("Failed to read log file %s: %s", entry.path, e)

    def _ingest(self, line: bytes) -> None:
        try:
            record = parse_line(line)
        except RecordDecodeError as e:
            logger.error(
                "Failed to parse log line: %s - Error: %s",
                line.strip().decode("utf-8", errors="replace"),
                e,
            )
            return
        except StatusClassError as e:
            if self._status_policy == "fail":
                raise ScrapeError(str(e)) from e
            logger.warning("Skipping log line with invalid status code: %s", e)
            return
        if record is not None:
            self._storage.record(record.labels, record.duration)

    def _render(self) -> str:
        samples: list[MetricSample] = []
        for key, values in self._storage.series():
            samples.extend(
                histogram(METRIC_NAME, values, key.as_labels(), self._buckets)
            )
        return encode_family(METRIC_NAME, "histogram", METRIC_HELP, samples)
