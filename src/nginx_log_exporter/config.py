"""Runtime settings for the exporter process."""

from dataclasses import dataclass, field

from nginx_log_exporter.core.metrics import DEFAULT_HISTOGRAM_BUCKETS

DEFAULT_LOG_PATH = "/var/log/nginx/*.log"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 9090
DEFAULT_LOG_LEVEL = "info"


@dataclass(frozen=True)
class ExporterSettings:
    """Settings for one exporter process.

    Attributes:
        log_path: Glob pattern naming the access-log files.
        host: Interface the HTTP server binds to.
        port: Port the HTTP server listens on.
        log_level: Process log level name (e.g., "info", "debug").
        strict_status: Abort the scrape on an invalid status code instead
            of skipping the line.
        max_samples: Per-series retention; None keeps every sample.
        buckets: Histogram bucket upper bounds in seconds.
    """

    log_path: str = DEFAULT_LOG_PATH
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    strict_status: bool = False
    max_samples: int | None = None
    buckets: tuple[float, ...] = field(
        default_factory=lambda: tuple(DEFAULT_HISTOGRAM_BUCKETS)
    )
