"""Prometheus text format encoder for metric samples."""

from collections.abc import Iterable

from nginx_log_exporter.core.metrics import format_value
from nginx_log_exporter.core.models import MetricSample

CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"


def escape_label_value(value: str) -> str:
    """Escape a label value for the text exposition format."""
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def escape_help(text: str) -> str:
    """Escape HELP text for the text exposition format."""
    return text.replace("\\", "\\\\").replace("\n", "\\n")


def format_labels(labels: dict[str, str]) -> str:
    """Format labels as {key="value",...}, keeping insertion order.

    Returns an empty string when there are no labels.
    """
    if not labels:
        return ""
    pairs = ",".join(f'{k}="{escape_label_value(v)}"' for k, v in labels.items())
    return "{" + pairs + "}"


def encode_sample(sample: MetricSample) -> str:
    """Encode a single sample as one exposition line (no newline)."""
    return f"{sample.name}{format_labels(sample.labels)} {format_value(sample.value)}"


def encode_family(
    name: str,
    metric_type: str,
    help_text: str,
    samples: Iterable[MetricSample],
) -> str:
    """Encode one metric family in Prometheus text format.

    Args:
        name: Family name used in the HELP and TYPE comments.
        metric_type: One of counter, gauge, histogram, summary, untyped.
        help_text: Human readable description.
        samples: Samples belonging to the family, in render order.

    Returns:
        Exposition text ending with a newline.
    """
    lines = [
        f"# HELP {name} {escape_help(help_text)}",
        f"# TYPE {name} {metric_type}",
    ]
    lines.extend(encode_sample(sample) for sample in samples)
    return "\n".join(lines) + "\n"


def encode_error(message: str) -> str:
    """Encode an error as a single exposition comment line."""
    return f"# Error: {' '.join(message.splitlines())}\n"
