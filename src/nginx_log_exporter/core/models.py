"""Core domain models for access-log metrics."""

from dataclasses import dataclass, field
from typing import NamedTuple


class LabelKey(NamedTuple):
    """Aggregation key for duration samples.

    Attributes:
        method: HTTP method (e.g., GET).
        path: Request URL as logged.
        status_class: Status code class ("1xx" .. "5xx").
        host: Virtual host the request was served for.
    """

    method: str
    path: str
    status_class: str
    host: str

    def as_labels(self) -> dict[str, str]:
        """Return the key as Prometheus label pairs, in render order."""
        return {
            "method": self.method,
            "path": self.path,
            "status_code": self.status_class,
            "host": self.host,
        }


@dataclass(frozen=True)
class AccessRecord:
    """A single parsed access-log line.

    Attributes:
        labels: Aggregation key derived from the line.
        duration: Request duration in seconds.
    """

    labels: LabelKey
    duration: float


@dataclass
class WatchedFile:
    """Tailing state for one file matched by the glob pattern.

    Attributes:
        path: Filesystem path, unique within a registry.
        inode: Inode observed at the last successful stat.
        offset: Number of bytes already consumed.
    """

    path: str
    inode: int
    offset: int = 0


@dataclass(frozen=True)
class MetricSample:
    """A single rendered metric value.

    Attributes:
        name: Metric name (e.g., nginx_http_request_duration_seconds_bucket).
        value: The metric value.
        labels: Key-value pairs for metric dimensions.
    """

    name: str
    value: float
    labels: dict[str, str] = field(default_factory=dict)
