"""Storage adapters implementing SeriesStoragePort."""

from nginx_log_exporter.adapters.storage.in_memory import InMemorySeriesStorage
from nginx_log_exporter.adapters.storage.ring_buffer import RingBufferSeriesStorage

__all__ = [
    "InMemorySeriesStorage",
    "RingBufferSeriesStorage",
]
