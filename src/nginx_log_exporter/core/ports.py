"""Port interfaces for sample storage adapters.

The exporter depends only on this protocol, not on concrete storages.
"""

from collections.abc import Iterable, Sequence
from typing import Protocol, runtime_checkable

from nginx_log_exporter.core.models import LabelKey


@runtime_checkable
class SeriesStoragePort(Protocol):
    """Port for duration sample storage.

    Adapters implementing this protocol keep duration samples grouped by
    label key. Examples: InMemorySeriesStorage, RingBufferSeriesStorage.
    """

    def record(self, key: LabelKey, value: float) -> None:
        """Append a duration sample to the series for key."""
        ...

    def series(self) -> Iterable[tuple[LabelKey, Sequence[float]]]:
        """Return all series as (key, samples) pairs.

        Returns:
            Iterable of pairs ordered by label key.
        """
        ...

    def __len__(self) -> int:
        """Return the number of distinct series."""
        ...
