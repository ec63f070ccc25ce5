"""Incremental reading of newly appended lines."""

from collections.abc import Iterator

from nginx_log_exporter.core.models import WatchedFile


def read_new_lines(entry: WatchedFile) -> Iterator[bytes]:
    """Yield complete lines appended to a file since the last read.

    The file is opened in binary mode and read from entry.offset. The offset
    advances by the exact byte length of each complete line, terminator
    included, before that line is yielded. A trailing line without a newline
    is left for the next read. Blank lines are consumed but not yielded.

    Args:
        entry: Registered file whose rotation state is current.

    Yields:
        Raw line bytes, terminator included.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with open(entry.path, "rb") as f:
        f.seek(entry.offset)
        for line in f:
            if not line.endswith(b"\n"):
                break
            entry.offset += len(line)
            if line.strip():
                yield line
