"""
Exception hierarchy for the FRED client.
Transport problems and parse problems are kept apart so callers can tell a bad
request from a bad payload.
"""


class FredError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(FredError):
    """Missing or invalid API key, or unusable settings."""


class InvalidParameterError(FredError, ValueError):
    """A builder setter was given a value outside its accepted set."""


class TransportError(FredError):
    """The request did not produce a successful HTTP response."""

    def __init__(self, message: str, status_code: int | None = None, path: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.path = path


class FredAPIError(TransportError):
    """FRED answered with its JSON error document (error_code/error_message)."""

    def __init__(self, error_code: int, error_message: str, status_code: int | None = None, path: str | None = None):
        super().__init__(f"ERROR {error_code}: {error_message}", status_code=status_code, path=path)
        self.error_code = error_code
        self.error_message = error_message


class RateLimitedError(TransportError):
    """HTTP 429 from FRED."""

    def __init__(self, message: str, retry_after: float | None = None, path: str | None = None):
        super().__init__(message, status_code=429, path=path)
        self.retry_after = retry_after


class ParseError(FredError):
    """The response body was not JSON or did not have the expected shape."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path
