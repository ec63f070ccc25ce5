"""Adapters connecting the core to storage, files and HTTP frameworks."""
