"""Decoding of nginx JSON access-log lines into access records.

The expected line shape is the one produced by the nginx JSON log format
shipped with common log pipelines:

    {"http": {"response": {"status_code": "200"}},
     "nginx": {"access": {"method": "GET", "url": "/x", "host": "h"},
               "time": {"request": "0.02"}}}

Unknown fields are ignored.
"""

import math

from pydantic import BaseModel, ValidationError

from nginx_log_exporter.core.errors import RecordDecodeError, StatusClassError
from nginx_log_exporter.core.models import AccessRecord, LabelKey


class _Response(BaseModel):
    status_code: str


class _Http(BaseModel):
    response: _Response


class _Access(BaseModel):
    method: str
    url: str
    host: str


class _Time(BaseModel):
    request: str


class _Nginx(BaseModel):
    access: _Access
    time: _Time


class NginxLogEntry(BaseModel):
    """Structured nginx access-log line."""

    http: _Http
    nginx: _Nginx


def status_class(status_code: str) -> str:
    """Map a status code string to its class label.

    Args:
        status_code: Status code as logged (e.g., "404").

    Returns:
        One of "1xx", "2xx", "3xx", "4xx" or "5xx".

    Raises:
        StatusClassError: If the code is not numeric or outside 100-599.
    """
    if not (status_code.isascii() and status_code.isdigit()):
        raise StatusClassError(f"Failed to parse status_code {status_code!r}")
    status = int(status_code)
    if not 100 <= status <= 599:
        raise StatusClassError(f"Unknown status code {status}")
    return f"{status // 100}xx"


def parse_duration(raw: str) -> float | None:
    """Parse a request duration in seconds.

    Returns None for values that are absent, non-numeric or non-finite;
    upstream logs write "-" when no request time is available. Surrounding
    whitespace, digit separators and non-ASCII digits are rejected.
    """
    if not raw.isascii() or "_" in raw or raw != raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def decode_entry(line: bytes | str) -> NginxLogEntry:
    """Decode a raw line into its structured form.

    Raises:
        RecordDecodeError: If the line is not UTF-8 JSON of the expected shape.
    """
    if isinstance(line, bytes):
        try:
            line = line.decode("utf-8")
        except UnicodeDecodeError as e:
            raise RecordDecodeError(f"Line is not valid UTF-8: {e}") from e
    try:
        return NginxLogEntry.model_validate_json(line)
    except ValidationError as e:
        raise RecordDecodeError(str(e)) from e


def parse_line(line: bytes | str) -> AccessRecord | None:
    """Parse one access-log line into an AccessRecord.

    Args:
        line: A single line, with or without its terminator.

    Returns:
        The parsed record, or None when the line carries no usable duration.

    Raises:
        RecordDecodeError: If the line is structurally malformed.
        StatusClassError: If the status code has no valid class.
    """
    entry = decode_entry(line)
    duration = parse_duration(entry.nginx.time.request)
    if duration is None:
        return None
    labels = LabelKey(
        method=entry.nginx.access.method,
        path=entry.nginx.access.url,
        status_class=status_class(entry.http.response.status_code),
        host=entry.nginx.access.host,
    )
    return AccessRecord(labels=labels, duration=duration)
