"""Histogram helper functions for creating MetricSample objects."""

from collections.abc import Sequence
from decimal import Decimal

from nginx_log_exporter.core.models import MetricSample


def exponential_buckets(start: float, factor: float, count: int) -> list[float]:
    """Create geometrically growing bucket boundaries.

    Args:
        start: Upper bound of the first bucket (must be > 0)
        factor: Growth factor between consecutive bounds (must be > 1)
        count: Number of bounds to generate (must be >= 1)

    Returns:
        Ascending list of bucket upper bounds
    """
    if start <= 0:
        raise ValueError("start must be positive")
    if factor <= 1:
        raise ValueError("factor must be greater than 1")
    if count < 1:
        raise ValueError("count must be at least 1")

    buckets: list[float] = []
    current = start
    for _ in range(count):
        buckets.append(current)
        current *= factor
    return buckets


DEFAULT_HISTOGRAM_BUCKETS = exponential_buckets(0.005, 2.0, 10)


def bucket_counts(values: Sequence[float], buckets: Sequence[float]) -> list[int]:
    """Count values per bucket, cumulatively and inclusive of the bound."""
    counts = [0] * len(buckets)
    for value in values:
        for i, bound in enumerate(buckets):
            if value <= bound:
                counts[i] += 1
    return counts


def histogram(
    name: str,
    values: Sequence[float],
    labels: dict[str, str] | None = None,
    buckets: Sequence[float] | None = None,
) -> list[MetricSample]:
    """Create histogram metric samples for a series of observations.

    Args:
        name: Metric name (e.g., "nginx_http_request_duration_seconds")
        values: All observed values for one label set
        labels: Optional dimension labels
        buckets: Bucket boundaries (default: exponential 0.005 * 2^n, 10 bounds)

    Returns:
        List of MetricSample objects (bucket samples + sum + count)
    """
    base_labels = labels or {}
    bucket_boundaries = buckets if buckets is not None else DEFAULT_HISTOGRAM_BUCKETS
    total = len(values)

    samples: list[MetricSample] = []

    for boundary, count in zip(
        bucket_boundaries, bucket_counts(values, bucket_boundaries), strict=True
    ):
        samples.append(
            MetricSample(
                name=f"{name}_bucket",
                value=float(count),
                labels={**base_labels, "le": format_value(boundary)},
            )
        )

    # +Inf bucket always holds every observation
    samples.append(
        MetricSample(
            name=f"{name}_bucket",
            value=float(total),
            labels={**base_labels, "le": "+Inf"},
        )
    )

    samples.append(
        MetricSample(name=f"{name}_sum", value=float(sum(values)), labels=base_labels)
    )

    samples.append(
        MetricSample(name=f"{name}_count", value=float(total), labels=base_labels)
    )

    return samples


def format_value(value: float) -> str:
    """Render a number in plain decimal form.

    Integral values drop the fractional part ("3", not "3.0"), and small or
    large magnitudes never use scientific notation.
    """
    if value != value:
        return "NaN"
    if value in (float("inf"), float("-inf")):
        return "+Inf" if value > 0 else "-Inf"
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text
