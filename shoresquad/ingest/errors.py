"""Errors raised while obtaining environmental data."""


class DataUnavailable(Exception):
    """Raised when a feed returns a non-success status or cannot be reached."""

    def __init__(
        self, message: str, feed: str | None = None, status_code: int | None = None
    ):
        super().__init__(message)
        self.feed = feed
        self.status_code = status_code


class MalformedResponse(DataUnavailable):
    """Raised when a response parses but lacks the expected structure."""
