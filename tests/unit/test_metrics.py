"""Tests for histogram helper functions."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from nginx_log_exporter.core.metrics import (
    DEFAULT_HISTOGRAM_BUCKETS,
    bucket_counts,
    exponential_buckets,
    format_value,
    histogram,
)
from nginx_log_exporter.core.models import MetricSample

durations = st.lists(
    st.floats(min_value=0, max_value=100, allow_nan=False, allow_infinity=False),
    max_size=50,
)


class TestExponentialBuckets:
    """Tests for exponential_buckets()."""

    @pytest.mark.core
    def test_generates_geometric_bounds(self) -> None:
        """Each bound is the previous one times the factor."""
        assert exponential_buckets(1.0, 2.0, 4) == [1.0, 2.0, 4.0, 8.0]

    @pytest.mark.core
    def test_default_buckets(self) -> None:
        """Default buckets start at 5ms and double ten times."""
        assert [format_value(b) for b in DEFAULT_HISTOGRAM_BUCKETS] == [
            "0.005",
            "0.01",
            "0.02",
            "0.04",
            "0.08",
            "0.16",
            "0.32",
            "0.64",
            "1.28",
            "2.56",
        ]

    @pytest.mark.core
    @pytest.mark.parametrize(
        ("start", "factor", "count"),
        [(0.0, 2.0, 3), (-1.0, 2.0, 3), (1.0, 1.0, 3), (1.0, 2.0, 0)],
    )
    def test_rejects_invalid_arguments(
        self, start: float, factor: float, count: int
    ) -> None:
        with pytest.raises(ValueError):
            exponential_buckets(start, factor, count)


class TestBucketCounts:
    """Tests for bucket_counts()."""

    @pytest.mark.core
    def test_counts_are_cumulative_and_inclusive(self) -> None:
        """A value equal to a bound is counted in that bucket."""
        assert bucket_counts([0.5, 1.0, 1.5, 3.0], [1.0, 2.0, 4.0]) == [2, 3, 4]

    @pytest.mark.core
    def test_values_above_all_bounds_are_not_counted(self) -> None:
        assert bucket_counts([10.0], [1.0, 2.0]) == [0, 0]

    @pytest.mark.core
    @given(values=durations)
    def test_counts_are_non_decreasing(self, values: list[float]) -> None:
        """Cumulative counts never decrease with increasing bounds."""
        counts = bucket_counts(values, DEFAULT_HISTOGRAM_BUCKETS)
        assert counts == sorted(counts)
        assert all(c <= len(values) for c in counts)


class TestHistogram:
    """Tests for histogram() helper function."""

    @pytest.mark.core
    def test_returns_buckets_inf_sum_and_count(self) -> None:
        """Histogram yields one sample per bound plus +Inf, sum and count."""
        samples = histogram("latency", [0.5, 2.0], buckets=[1.0, 2.0])

        assert samples == [
            MetricSample("latency_bucket", 1.0, {"le": "1"}),
            MetricSample("latency_bucket", 2.0, {"le": "2"}),
            MetricSample("latency_bucket", 2.0, {"le": "+Inf"}),
            MetricSample("latency_sum", 2.5, {}),
            MetricSample("latency_count", 2.0, {}),
        ]

    @pytest.mark.core
    def test_labels_are_carried_before_le(self) -> None:
        """Bucket samples carry the base labels followed by le."""
        samples = histogram("latency", [0.1], labels={"method": "GET"}, buckets=[1.0])

        assert list(samples[0].labels) == ["method", "le"]
        assert samples[-1].labels == {"method": "GET"}

    @pytest.mark.core
    def test_uses_default_buckets(self) -> None:
        samples = histogram("latency", [0.1])
        assert len(samples) == len(DEFAULT_HISTOGRAM_BUCKETS) + 3

    @pytest.mark.core
    @given(values=durations)
    def test_inf_bucket_equals_count(self, values: list[float]) -> None:
        """The +Inf bucket always equals the total number of observations."""
        samples = histogram("latency", values)
        inf = next(s for s in samples if s.labels.get("le") == "+Inf")
        count = next(s for s in samples if s.name == "latency_count")

        assert inf.value == count.value == len(values)


class TestFormatValue:
    """Tests for format_value()."""

    @pytest.mark.core
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0.02, "0.02"),
            (1.0, "1"),
            (0.0, "0"),
            (2.56, "2.56"),
            (0.00001, "0.00001"),
            (1e-7, "0.0000001"),
            (1e20, "100000000000000000000"),
            (float("inf"), "+Inf"),
            (float("-inf"), "-Inf"),
            (float("nan"), "NaN"),
        ],
    )
    def test_plain_decimal_form(self, value: float, expected: str) -> None:
        """Numbers never render in scientific notation."""
        assert format_value(value) == expected
