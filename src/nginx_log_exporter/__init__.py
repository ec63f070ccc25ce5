"""Prometheus histograms of request durations from nginx JSON access logs."""

from nginx_log_exporter.core.errors import (
    ExporterError,
    RecordDecodeError,
    ScrapeError,
    StatusClassError,
)
from nginx_log_exporter.core.metrics import exponential_buckets, histogram
from nginx_log_exporter.core.models import AccessRecord, LabelKey, WatchedFile
from nginx_log_exporter.core.parsing import parse_line
from nginx_log_exporter.exporter import Exporter

__version__ = "0.1.0"

__all__ = [
    "AccessRecord",
    "Exporter",
    "ExporterError",
    "LabelKey",
    "RecordDecodeError",
    "ScrapeError",
    "StatusClassError",
    "WatchedFile",
    "__version__",
    "exponential_buckets",
    "histogram",
    "parse_line",
]
