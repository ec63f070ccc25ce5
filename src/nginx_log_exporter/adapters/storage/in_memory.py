"""In-memory storage adapter for duration samples."""

from collections.abc import Iterable, Sequence

from nginx_log_exporter.core.models import LabelKey


class InMemorySeriesStorage:
    """Unbounded in-memory implementation of SeriesStoragePort.

    Every sample recorded since startup is kept so that buckets can be
    recomputed exactly on each scrape. Memory grows with the number of
    observed requests; use RingBufferSeriesStorage to bound it.
    """

    def __init__(self) -> None:
        self._series: dict[LabelKey, list[float]] = {}

    def record(self, key: LabelKey, value: float) -> None:
        """Append a duration sample to the series for key."""
        self._series.setdefault(key, []).append(value)

    def series(self) -> Iterable[tuple[LabelKey, Sequence[float]]]:
        """Return all series ordered by label key."""
        return sorted(self._series.items())

    def __len__(self) -> int:
        return len(self._series)
