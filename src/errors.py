"""Errors raised at the HTTP boundary and the status codes they map to."""


class StatsCardError(Exception):
    """Base class for errors that become a plain-text HTTP response."""

    status_code = 500
    message = "Internal Server Error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class ClientError(StatsCardError):
    """Missing or invalid request input."""

    status_code = 400
    message = "Bad Request"


class UpstreamError(StatsCardError):
    """The GitHub API call failed or returned a non-success status."""

    status_code = 502
    message = "Error fetching data"


class NotFound(StatsCardError):
    """No route matches the requested path."""

    status_code = 404
    message = "Not Found"
