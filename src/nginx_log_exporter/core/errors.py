"""Exception hierarchy for the exporter."""


class ExporterError(Exception):
    """Base class for all exporter errors."""


class RecordDecodeError(ExporterError):
    """A log line could not be decoded into an access record."""


class StatusClassError(ExporterError):
    """A status code could not be mapped to a status class."""


class ScrapeError(ExporterError):
    """A scrape was aborted; the message is reported to the HTTP client."""
