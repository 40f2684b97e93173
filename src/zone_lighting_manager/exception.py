"""Exceptions module."""


class InvalidZoneId(Exception):
    """Raised when a zone id is not an integer within the zone range."""

    def __init__(self, raw: object) -> None:
        """Keep the rejected value around for logging."""
        super().__init__(f"Invalid zone id: {raw!r}")
        self.raw = raw


class MalformedPayload(Exception):
    """Raised when a request body cannot be decoded as JSON."""
