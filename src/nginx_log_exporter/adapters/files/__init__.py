"""Filesystem adapters: glob-based file registry and incremental reader."""

from nginx_log_exporter.adapters.files.reader import read_new_lines
from nginx_log_exporter.adapters.files.registry import FileRegistry

__all__ = ["FileRegistry", "read_new_lines"]
