"""
Medium SDK
----------
An asynchronous client for the Medium publishing API.
"""

from .core import (
    MediumAPIError,
    MediumClient,
    MediumDecodeError,
    MediumError,
    MediumTimeoutError,
    MediumTransportError,
    MediumUploadError,
)
from .models import (
    AccessToken,
    ContentFormat,
    Contributor,
    CreatePostOptions,
    Image,
    License,
    Post,
    Publication,
    PublishStatus,
    Scope,
    UploadOptions,
    User,
)

__version__ = "1.0.0"

__all__ = [
    'MediumClient',
    'MediumError',
    'MediumAPIError',
    'MediumDecodeError',
    'MediumTransportError',
    'MediumTimeoutError',
    'MediumUploadError',
    'AccessToken',
    'ContentFormat',
    'Contributor',
    'CreatePostOptions',
    'Image',
    'License',
    'Post',
    'Publication',
    'PublishStatus',
    'Scope',
    'UploadOptions',
    'User',
]
