"""Shared test fixtures for all test modules."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

try:
    import httpx
except ImportError:
    httpx = None


def make_line(
    method: str = "GET",
    url: str = "/x",
    host: str = "h",
    status: str = "200",
    request_time: str = "0.02",
) -> str:
    """Build one nginx JSON access-log line, newline terminated."""
    record = {
        "http": {"response": {"status_code": status}},
        "nginx": {
            "access": {"method": method, "url": url, "host": host},
            "time": {"request": request_time},
        },
    }
    return json.dumps(record) + "\n"


@pytest.fixture
def line_factory() -> Callable[..., str]:
    """Factory fixture returning make_line."""
    return make_line


@pytest.fixture
def log_dir(tmp_path: Path) -> Path:
    """Provide an empty directory for access logs."""
    path = tmp_path / "nginx"
    path.mkdir()
    return path


@pytest.fixture
def log_pattern(log_dir: Path) -> str:
    """Glob pattern matching *.log files in log_dir."""
    return str(log_dir / "*.log")


@pytest.fixture
def append_lines() -> Callable[[Path, list[str]], None]:
    """Fixture returning a helper that appends text lines to a file."""

    def _append(path: Path, lines: list[str]) -> None:
        with open(path, "a", encoding="utf-8") as f:
            f.write("".join(lines))

    return _append


@pytest.fixture
def asgi_test_client():
    """Factory fixture that creates an httpx.AsyncClient for ASGI testing.

    Usage:
        async def test_something(asgi_test_client):
            app = create_app(exporter)
            async with asgi_test_client(app) as client:
                response = await client.get("/metrics")
    """
    if httpx is None:
        pytest.skip("httpx not installed")

    def _get_client(app):
        """Return an AsyncClient context manager for the given app."""
        return httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://test"
        )

    return _get_client
