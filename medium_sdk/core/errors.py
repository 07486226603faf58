"""
Exceptions raised by the Medium client.
"""

from typing import Optional

DEFAULT_ERROR_CODE = -1


class MediumError(Exception):
    """Base class for every error raised by the client."""

    def __init__(self, message: str, code: int = DEFAULT_ERROR_CODE):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        return f"{self.message} (code {self.code})"


class MediumAPIError(MediumError):
    """The API answered with a non-2xx status or an error envelope."""

    def __init__(self, message: str, code: int = DEFAULT_ERROR_CODE, status: Optional[int] = None):
        super().__init__(message, code)
        self.status = status


class MediumDecodeError(MediumError):
    """The response body was not valid JSON or did not match the result type."""


class MediumTransportError(MediumError):
    """The request could not be completed at the network level."""


class MediumTimeoutError(MediumTransportError):
    """The request did not complete within the configured timeout."""


class MediumUploadError(MediumError):
    """The file to upload could not be read."""
