"""Ring buffer storage adapter for duration samples.

Provides bounded in-memory storage that automatically evicts the oldest
samples of a series when its buffer is full. Useful for long-running
exporters that need predictable memory usage.
"""

from collections import deque
from collections.abc import Iterable, Sequence

from nginx_log_exporter.core.models import LabelKey


class RingBufferSeriesStorage:
    """Ring buffer implementation of SeriesStoragePort.

    Each label key gets its own fixed-size circular buffer. Histograms are
    then computed over the newest max_samples observations only.

    Args:
        max_samples: Maximum number of samples kept per series.
    """

    def __init__(self, max_samples: int) -> None:
        if max_samples < 1:
            raise ValueError("max_samples must be at least 1")
        self._max_samples = max_samples
        self._series: dict[LabelKey, deque[float]] = {}

    def record(self, key: LabelKey, value: float) -> None:
        """Append a duration sample, evicting the oldest when full."""
        buffer = self._series.get(key)
        if buffer is None:
            buffer = deque(maxlen=self._max_samples)
            self._series[key] = buffer
        buffer.append(value)

    def series(self) -> Iterable[tuple[LabelKey, Sequence[float]]]:
        """Return all series ordered by label key."""
        return [(key, list(buffer)) for key, buffer in sorted(self._series.items())]

    def __len__(self) -> int:
        return len(self._series)
