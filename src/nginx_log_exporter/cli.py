"""Command-line entry point."""

import argparse
import logging
import os
from collections.abc import Sequence

import uvicorn

from nginx_log_exporter import __version__
from nginx_log_exporter.adapters.frameworks.fastapi import create_app
from nginx_log_exporter.adapters.storage.in_memory import InMemorySeriesStorage
from nginx_log_exporter.adapters.storage.ring_buffer import RingBufferSeriesStorage
from nginx_log_exporter.config import (
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOG_PATH,
    DEFAULT_PORT,
    ExporterSettings,
)
from nginx_log_exporter.core.ports import SeriesStoragePort
from nginx_log_exporter.exporter import Exporter
from nginx_log_exporter.logging_setup import configure_logging, parse_level

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nginx-log-exporter",
        description="Nginx Prometheus Exporter: request duration histograms "
        "from JSON access logs.",
    )
    parser.add_argument(
        "-l",
        "--log-path",
        default=DEFAULT_LOG_PATH,
        help=f"Glob pattern of access logs to tail (default: {DEFAULT_LOG_PATH}).",
    )
    parser.add_argument(
        "-p",
        "--port",
        type=int,
        default=DEFAULT_PORT,
        help=f"Port to listen on (default: {DEFAULT_PORT}).",
    )
    parser.add_argument(
        "--host",
        default=DEFAULT_HOST,
        help=f"Interface to bind (default: {DEFAULT_HOST}).",
    )
    parser.add_argument(
        "--strict-status",
        action="store_true",
        help="Fail the scrape on an invalid status code instead of skipping the line.",
    )
    parser.add_argument(
        "--max-samples",
        type=_positive_int,
        default=None,
        help="Keep only the newest N samples per series (default: keep all).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_settings(
    argv: Sequence[str] | None = None, env: dict[str, str] | None = None
) -> ExporterSettings:
    """Build settings from command-line arguments and the environment."""
    args = build_parser().parse_args(argv)
    environ = os.environ if env is None else env
    return ExporterSettings(
        log_path=args.log_path,
        host=args.host,
        port=args.port,
        log_level=environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL),
        strict_status=args.strict_status,
        max_samples=args.max_samples,
    )


def build_exporter(settings: ExporterSettings) -> Exporter:
    """Create the exporter described by settings."""
    storage: SeriesStoragePort
    if settings.max_samples is None:
        storage = InMemorySeriesStorage()
    else:
        storage = RingBufferSeriesStorage(settings.max_samples)
    return Exporter(
        settings.log_path,
        storage=storage,
        buckets=settings.buckets,
        status_policy="fail" if settings.strict_status else "skip",
    )


def main(argv: Sequence[str] | None = None) -> None:
    settings = parse_settings(argv)
    configure_logging(settings.log_level)

    logger.info("Starting Nginx Prometheus Exporter")
    logger.info("Log file: %s", settings.log_path)

    app = create_app(build_exporter(settings))

    logger.info("Server listening on %s:%d", settings.host, settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=parse_level(settings.log_level),
    )
