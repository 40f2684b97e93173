"""In-memory lighting zone service with a small HTTP/JSON API."""

__version__ = "0.1.0"
