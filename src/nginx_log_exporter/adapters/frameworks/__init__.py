"""HTTP framework adapters exposing the exporter."""
