from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Optional


class Scope(str, Enum):
    """OAuth scopes a client may request."""
    BASIC_PROFILE = "basicProfile"
    LIST_PUBLICATIONS = "listPublications"
    PUBLISH_POST = "publishPost"
    UPLOAD_IMAGE = "uploadImage"


class GrantType(str, Enum):
    AUTHORIZATION_CODE = "authorization_code"
    REFRESH_TOKEN = "refresh_token"


class ContentFormat(str, Enum):
    HTML = "html"
    MARKDOWN = "markdown"


class PublishStatus(str, Enum):
    PUBLIC = "public"
    DRAFT = "draft"
    UNLISTED = "unlisted"


class License(str, Enum):
    ALL_RIGHTS_RESERVED = "all-rights-reserved"
    CC_40_BY = "cc-40-by"
    CC_40_BY_SA = "cc-40-by-sa"
    CC_40_BY_ND = "cc-40-by-nd"
    CC_40_BY_NC = "cc-40-by-nc"
    CC_40_BY_NC_ND = "cc-40-by-nc-nd"
    CC_40_BY_NC_SA = "cc-40-by-nc-sa"
    CC_40_ZERO = "cc-40-zero"
    PUBLIC_DOMAIN = "public-domain"


class MediumModel(BaseModel):
    """Base for models mirroring the API's camelCase JSON."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreatePostOptions(MediumModel):
    """Request model for creating a post."""
    user_id: str = Field(default="", exclude=True)
    publication_id: str = Field(default="", exclude=True)
    title: str = ""
    content: str = ""
    content_format: Optional[ContentFormat] = None
    tags: List[str] = Field(default_factory=list)
    canonical_url: Optional[str] = None
    publish_status: Optional[PublishStatus] = None
    license: Optional[License] = None
    notify_followers: bool = False

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the JSON body, dropping fields left at their zero value."""
        data = self.model_dump(mode="json", by_alias=True)
        return {k: v for k, v in data.items() if v not in (None, "", [], False)}


class UploadOptions(BaseModel):
    """Request model for uploading an image."""
    file_path: str
    content_type: str


class User(MediumModel):
    """Model for user profile data."""
    id: str
    username: Optional[str] = None
    name: Optional[str] = None
    url: Optional[str] = None
    image_url: Optional[str] = None


class Publication(MediumModel):
    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    image_url: Optional[str] = None


class Contributor(MediumModel):
    """A user's role within a publication."""
    publication_id: str
    user_id: str
    role: str


class Post(MediumModel):
    """Response model for created posts."""
    id: str
    title: Optional[str] = None
    author_id: Optional[str] = None
    publication_id: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    url: Optional[str] = None
    canonical_url: Optional[str] = None
    publish_status: Optional[PublishStatus] = None
    published_at: Optional[int] = None
    license: Optional[License] = None
    license_url: Optional[str] = None


class Image(MediumModel):
    """Response model for image uploads."""
    url: str
    md5: Optional[str] = None


class AccessToken(BaseModel):
    """Response model for OAuth tokens."""
    token_type: str = "Bearer"
    access_token: str
    refresh_token: Optional[str] = None
    scope: List[str] = Field(default_factory=list)
    expires_at: Optional[int] = None
