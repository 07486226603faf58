from .medium_models import (
    AccessToken,
    ContentFormat,
    Contributor,
    CreatePostOptions,
    GrantType,
    Image,
    License,
    Post,
    Publication,
    PublishStatus,
    Scope,
    UploadOptions,
    User,
)

__all__ = [
    'AccessToken',
    'ContentFormat',
    'Contributor',
    'CreatePostOptions',
    'GrantType',
    'Image',
    'License',
    'Post',
    'Publication',
    'PublishStatus',
    'Scope',
    'UploadOptions',
    'User',
]
