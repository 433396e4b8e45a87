"""OAuth2 access tokens for the FCM HTTP v1 API"""

from typing import Optional
import asyncio
import logging

from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2 import service_account

from app.core.config import settings
from app.core.exceptions import TokenExchangeException
from app.core.firebase import ServiceAccountInfo

logger = logging.getLogger(__name__)


class TokenProvider:
    """
    Exchanges a signed service-account JWT for a bearer token.

    Every call performs a fresh exchange unless cache_token is set, in which
    case a token is reused until google-auth reports it as expired.
    """

    def __init__(
        self,
        account: ServiceAccountInfo,
        scope: str = settings.FCM_SCOPE,
        cache_token: bool = False
    ):
        self.account = account
        self.scope = scope
        self.cache_token = cache_token
        self._credentials: Optional[service_account.Credentials] = None
        self._lock = asyncio.Lock()

    async def get_access_token(self) -> str:
        """Return a bearer token, raising TokenExchangeException on any failure"""
        if not self.cache_token:
            credentials = await asyncio.to_thread(self._exchange)
            return credentials.token

        async with self._lock:
            if self._credentials is None or not self._credentials.valid:
                self._credentials = await asyncio.to_thread(self._exchange)
            return self._credentials.token

    def _exchange(self) -> service_account.Credentials:
        logger.debug("Getting access token...")
        try:
            credentials = service_account.Credentials.from_service_account_info(
                self.account.as_credentials_info(),
                scopes=[self.scope]
            )
            credentials.refresh(Request())
        except (GoogleAuthError, ValueError) as e:
            raise TokenExchangeException(f"Access token exchange failed: {e}") from e

        if not credentials.token:
            raise TokenExchangeException("Access token exchange returned no token")

        logger.debug("Access token obtained")
        return credentials
