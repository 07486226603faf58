from typing import Any, Dict, List, Optional, Sequence, Type, TypeVar
import asyncio
import json
import os
from urllib.parse import urlencode

import aiohttp
from pydantic import BaseModel, TypeAdapter, ValidationError

from ..config import DEFAULT_HOST, DEFAULT_TIMEOUT, Settings, get_settings
from ..models import (
    AccessToken,
    Contributor,
    CreatePostOptions,
    GrantType,
    Image,
    Post,
    Publication,
    Scope,
    UploadOptions,
    User,
)
from ..utils.fs import FileSystem, LocalFileSystem
from ..utils.logger import get_logger
from .errors import (
    MediumAPIError,
    MediumDecodeError,
    MediumTimeoutError,
    MediumTransportError,
    MediumUploadError,
)
from .oauth_base import OAuthBase

logger = get_logger(__name__)

AUTHORIZATION_URL = "https://medium.com/m/oauth/authorize"

ModelT = TypeVar("ModelT", bound=BaseModel)


class MediumClient(OAuthBase):
    """Client for the Medium REST API.

    Every endpoint coroutine performs a single HTTP round trip in its own
    session. ``timeout`` bounds the whole call; a per-call ``timeout``
    argument overrides it. Cancelling the awaiting task cancels the request.
    """

    def __init__(self, client_id: str = "", client_secret: str = "", access_token: str = "",
                 host: str = DEFAULT_HOST, timeout: float = DEFAULT_TIMEOUT,
                 fs: Optional[FileSystem] = None):
        super().__init__(client_id, client_secret)
        self.host = host
        self.access_token = access_token
        self.timeout = timeout
        self.fs = fs or LocalFileSystem()

        logger.debug(f"Initialized Medium client for host: {self.host}")

    @classmethod
    def with_access_token(cls, access_token: str) -> "MediumClient":
        """Create a client that only holds a self-issued access token."""
        return cls(access_token=access_token)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "MediumClient":
        """Create a client from environment settings."""
        settings = settings or get_settings()
        return cls(
            client_id=settings.MEDIUM_CLIENT_ID,
            client_secret=settings.MEDIUM_CLIENT_SECRET,
            access_token=settings.MEDIUM_ACCESS_TOKEN,
            host=settings.MEDIUM_HOST,
            timeout=settings.MEDIUM_TIMEOUT
        )

    def get_authorization_url(self, state: str, redirect_url: str, scopes: Sequence[Scope]) -> str:
        """Get the URL a user visits to grant this client access."""
        params = {
            'client_id': self.client_id,
            'scope': ','.join(Scope(scope).value for scope in scopes),
            'state': state,
            'response_type': 'code',
            'redirect_uri': redirect_url
        }
        return f"{AUTHORIZATION_URL}?{urlencode(params)}"

    async def exchange_authorization_code(self, code: str, redirect_url: str,
                                          timeout: Optional[float] = None) -> AccessToken:
        """
        Exchange authorization code for access token.

        The new token replaces ``access_token`` on this client.
        """
        return await self._acquire_access_token({
            "code": code,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "grant_type": GrantType.AUTHORIZATION_CODE.value,
            "redirect_uri": redirect_url
        }, timeout)

    async def exchange_refresh_token(self, refresh_token: str,
                                     timeout: Optional[float] = None) -> AccessToken:
        """
        Exchange a refresh token for a new access token.

        The new token replaces ``access_token`` on this client.
        """
        return await self._acquire_access_token({
            "refresh_token": refresh_token,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "grant_type": GrantType.REFRESH_TOKEN.value
        }, timeout)

    async def get_user(self, user_id: str = "", timeout: Optional[float] = None) -> User:
        """
        Get a user's profile.

        Args:
            user_id: User to look up; empty means the token's owner

        Returns:
            User profile
        """
        path = "/v1/me" if not user_id else f"/v1/{user_id}"
        body = await self._request("GET", path, timeout=timeout)
        return self._decode(User, self._unwrap(body))

    async def get_user_publications(self, user_id: str,
                                    timeout: Optional[float] = None) -> List[Publication]:
        """Get the publications a user subscribes to, writes for or edits."""
        body = await self._request("GET", f"/v1/users/{user_id}/publications", timeout=timeout)
        return self._decode_list(Publication, self._unwrap(body))

    async def get_publication_contributors(self, publication_id: str,
                                           timeout: Optional[float] = None) -> List[Contributor]:
        """Get the editors and writers of a publication."""
        body = await self._request("GET", f"/v1/publications/{publication_id}/contributors",
                                   timeout=timeout)
        return self._decode_list(Contributor, self._unwrap(body))

    async def create_post(self, options: CreatePostOptions,
                          timeout: Optional[float] = None) -> Post:
        """
        Create a post on a user's profile, or in a publication when
        ``options.publication_id`` is set.

        Args:
            options: Post fields; fields left unset are omitted from the body

        Returns:
            The created post
        """
        if options.publication_id:
            path = f"/v1/publications/{options.publication_id}/posts"
        else:
            path = f"/v1/users/{options.user_id}/posts"

        body = await self._request("POST", path, payload=options.to_payload(), timeout=timeout)
        return self._decode(Post, self._unwrap(body))

    async def upload_image(self, options: UploadOptions,
                           timeout: Optional[float] = None) -> Image:
        """
        Upload an image to be used in posts.

        Args:
            options: Local file path and its content type

        Returns:
            The hosted image's URL and digest
        """
        try:
            with self.fs.open(options.file_path) as fh:
                contents = fh.read()
        except OSError as e:
            logger.error(f"Error reading upload file {options.file_path}: {str(e)}")
            raise MediumUploadError(f"Could not read {options.file_path}: {e}") from e

        form = aiohttp.FormData()
        form.add_field(
            "image",
            contents,
            filename=os.path.basename(options.file_path),
            content_type=options.content_type
        )

        logger.debug(f"Uploading {len(contents)} bytes from {options.file_path}")
        body = await self._request("POST", "/v1/images", multipart=form, timeout=timeout)
        return self._decode(Image, self._unwrap(body))

    async def _acquire_access_token(self, data: Dict[str, str],
                                    timeout: Optional[float]) -> AccessToken:
        debug_data = dict(data)
        debug_data['client_secret'] = '[REDACTED]'
        for key in ('code', 'refresh_token'):
            if key in debug_data:
                debug_data[key] = '[REDACTED]'
        logger.debug(f"Token request data: {debug_data}")

        body = await self._request("POST", "/v1/tokens", form=data, timeout=timeout)
        token = self._decode(AccessToken, body)
        self.access_token = token.access_token
        logger.debug("Access token updated")
        return token

    async def _request(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None,
                       form: Optional[Dict[str, str]] = None,
                       multipart: Optional[aiohttp.FormData] = None,
                       timeout: Optional[float] = None) -> Any:
        """
        Perform one HTTP round trip and return the parsed JSON body.

        Exactly one of ``payload``, ``form`` or ``multipart`` may be given;
        with none of them the request carries no body.
        """
        url = f"{self.host.rstrip('/')}{path}"
        headers = {
            "Authorization": f"Bearer {self.access_token}",
            "Accept": "application/json",
            "Accept-Charset": "utf-8"
        }

        data: Any = None
        if multipart is not None:
            # aiohttp sets the multipart content type with its boundary
            data = multipart
        elif form is not None:
            headers["Content-Type"] = "application/x-www-form-urlencoded"
            data = urlencode(form).encode("utf-8")
        else:
            headers["Content-Type"] = "application/json"
            if payload is not None:
                data = json.dumps(payload, separators=(",", ":")).encode("utf-8")

        limit = self.timeout if timeout is None else timeout
        logger.debug(f"{method} {path}")

        try:
            async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=limit)) as session:
                async with session.request(method, url, data=data, headers=headers) as response:
                    status = response.status
                    raw = await response.read()
        except asyncio.TimeoutError as e:
            logger.error(f"{method} {path} timed out after {limit}s")
            raise MediumTimeoutError(f"{method} {path} failed: timeout exceeded after {limit}s") from e
        except aiohttp.ClientError as e:
            logger.error(f"{method} {path} failed: {str(e)}")
            raise MediumTransportError(f"{method} {path} failed: {e}") from e

        logger.debug(f"{method} {path} response status: {status}")
        ok = 200 <= status < 300

        try:
            body = json.loads(raw) if raw else None
        except ValueError as e:
            if not ok:
                logger.error(f"{method} {path} returned status {status}")
                raise MediumAPIError(f"Unexpected response status {status}", status=status) from e
            logger.error(f"Could not parse response of {method} {path}: {str(e)}")
            raise MediumDecodeError(f"Could not parse response: {e}") from e

        errors = body.get("errors") if isinstance(body, dict) else None
        if isinstance(errors, list) and errors and isinstance(errors[0], dict):
            first = errors[0]
            logger.error(f"{method} {path} returned error: {first}")
            raise MediumAPIError(
                first.get("message", f"Unexpected response status {status}"),
                code=first.get("code", -1),
                status=status
            )

        if not ok:
            logger.error(f"{method} {path} returned status {status}")
            raise MediumAPIError(f"Unexpected response status {status}", status=status)

        return body

    @staticmethod
    def _unwrap(body: Any) -> Any:
        if not isinstance(body, dict) or "data" not in body:
            raise MediumDecodeError("Response is missing the data envelope")
        return body["data"]

    @staticmethod
    def _decode(model: Type[ModelT], data: Any) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise MediumDecodeError(f"Unexpected {model.__name__} payload: {e}") from e

    @staticmethod
    def _decode_list(model: Type[ModelT], data: Any) -> List[ModelT]:
        try:
            return TypeAdapter(List[model]).validate_python(data)
        except ValidationError as e:
            raise MediumDecodeError(f"Unexpected {model.__name__} list payload: {e}") from e
