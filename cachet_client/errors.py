"""Exception types raised by the Cachet client.

Remote failures (401, 404, 4xx/5xx) are never raised; they are returned
as failed ``ApiResponse`` objects. Exceptions cover only conditions the
API cannot report itself.
"""


class CachetError(Exception):
    """Base exception for the Cachet client."""


class CachetTransportError(CachetError):
    """The HTTP request could not be completed.

    Attributes:
        url: Requested URL with credentials redacted.
    """

    def __init__(self, message: str, url: str) -> None:
        super().__init__(message)
        self.url = url


class CachetDecodeError(CachetError):
    """A successful response carried a body that is not valid JSON.

    Attributes:
        status_code: HTTP status code of the response.
    """

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code
