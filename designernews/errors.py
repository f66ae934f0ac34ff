"""Exception definitions for the Designer News client"""

from typing import Optional


class DesignerNewsException(Exception):
    """Base exception for all errors raised by this package."""

    pass


class ConfigException(DesignerNewsException):
    """Raised when the config file cannot be read or fails validation."""

    pass


class DecodeError(DesignerNewsException):
    """Raised when a successful response body cannot be turned into stories."""

    pass


class ResponseError(DesignerNewsException):
    """Raised for a response that was not successful or carried no body.

    The status code, reason phrase and raw error body are kept on the
    exception so callers can inspect what the service actually answered.
    """

    status: int
    message: str
    body: Optional[str]

    def __init__(self, status: int, message: str = "", body: Optional[str] = None):
        super().__init__(f"Error loading stories {status} {message}".strip())
        self.status = status
        self.message = message
        self.body = body

    def __eq__(self, other):
        if not isinstance(other, ResponseError):
            return NotImplemented

        return (
            type(self) is type(other)
            and self.status == other.status
            and self.message == other.message
            and self.body == other.body
        )

    def __hash__(self):
        return hash((type(self), self.status, self.message, self.body))
