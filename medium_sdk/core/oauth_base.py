from abc import ABC, abstractmethod
from typing import Optional, Sequence
from ..models import AccessToken, Scope


class OAuthBase(ABC):
    """Base class for OAuth 2.0 clients."""

    def __init__(self, client_id: str, client_secret: str):
        self.client_id = client_id
        self.client_secret = client_secret

    @abstractmethod
    def get_authorization_url(self, state: str, redirect_url: str, scopes: Sequence[Scope]) -> str:
        """Get the authorization URL for OAuth flow."""
        pass

    @abstractmethod
    async def exchange_authorization_code(self, code: str, redirect_url: str,
                                          timeout: Optional[float] = None) -> AccessToken:
        """Exchange authorization code for access token."""
        pass

    @abstractmethod
    async def exchange_refresh_token(self, refresh_token: str,
                                     timeout: Optional[float] = None) -> AccessToken:
        """Refresh an expired access token."""
        pass
