# errors.py
"""
Error types raised by the OMS client.

Every failure that happens while dispatching a request is normalized into
one of two kinds, both catchable as OmsClientError:

- RequestError: the OMS answered with a non-2xx status.
- GeneralError: the call could not be completed at all.

Deserialization errors are not part of this hierarchy and propagate as-is.
"""

from typing import Optional


class OmsClientError(Exception):
    """Base class for all OMS client errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class RequestError(OmsClientError):
    """The OMS rejected or failed the request at the HTTP level."""

    @classmethod
    def because_of_error(
        cls, status_code: int, response_body: str, error: BaseException
    ) -> "RequestError":
        """
        Build a RequestError from a bad HTTP response.

        Args:
            status_code: HTTP status returned by the OMS.
            response_body: Raw response body text.
            error: The failure that triggered this error, kept as __cause__.

        Returns:
            RequestError carrying the status and body.
        """
        return cls(
            f"OMS request failed with HTTP {status_code}: {response_body[:200]}",
            status_code=status_code,
            response_body=response_body,
        )


class GeneralError(OmsClientError):
    """The request could not be completed (network, timeout, etc.)."""

    @classmethod
    def because_of_error(cls, error: BaseException) -> "GeneralError":
        """Build a GeneralError describing the original failure."""
        return cls(f"OMS request could not be completed: {error}")


class BadResponseError(Exception):
    """Raised at the dispatch point for a non-2xx HTTP response."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code
        self.body = body
