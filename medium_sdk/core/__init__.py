"""
Core client functionality.
"""

from .oauth_base import OAuthBase
from .client import MediumClient
from .errors import (
    MediumAPIError,
    MediumDecodeError,
    MediumError,
    MediumTimeoutError,
    MediumTransportError,
    MediumUploadError,
)

__all__ = [
    'OAuthBase',
    'MediumClient',
    'MediumError',
    'MediumAPIError',
    'MediumDecodeError',
    'MediumTransportError',
    'MediumTimeoutError',
    'MediumUploadError',
]
