"""Core domain: models, parsing, histogram helpers and ports."""
