from __future__ import annotations

import logging
import threading
import time
from typing import TYPE_CHECKING, cast

from .config import Verb
from .exceptions import AuthenticationError
from .params import Params

if TYPE_CHECKING:
    from .client import HTTPClient

logger = logging.getLogger(__name__)

TOKEN_PATH = "/v1/security/oauth2/token"
# Refresh this many seconds before the server-side expiry.
TOKEN_BUFFER = 10


class AccessToken:
    """Cached OAuth2 client-credentials token for one client.

    The token is fetched lazily on the first authenticated call and replaced
    wholesale once it is within TOKEN_BUFFER seconds of expiring. Refreshing
    goes through the client's unauthenticated request path, so a failing
    token call raises the same NetworkError/ResponseError types as any other
    request.
    """

    def __init__(self, client: HTTPClient):
        self.client = client
        self.access_token: str | None = None
        self.expires_at: float = 0.0
        self._lock = threading.Lock()

    def get_bearer_token(self) -> str:
        with self._lock:
            if self.needs_refresh():
                return self.update_access_token()
            return cast(str, self.access_token)

    def needs_refresh(self) -> bool:
        return self.access_token is None or time.time() + TOKEN_BUFFER >= self.expires_at

    def update_access_token(self) -> str:
        config = self.client.configuration
        params = (
            Params.with_("grant_type", "client_credentials")
            .and_("client_id", config.client_id)
            .and_("client_secret", config.client_secret)
        )
        response = self.client.unauthenticated_request(Verb.POST, TOKEN_PATH, params, None)

        result = response.result if isinstance(response.result, dict) else {}
        token = result.get("access_token")
        if not token:
            raise AuthenticationError(response)

        self.access_token = token
        try:
            expires_in = float(result.get("expires_in", 0))
        except (TypeError, ValueError):
            expires_in = 0.0
        self.expires_at = time.time() + expires_in
        logger.debug(f"Refreshed access token, expires in {expires_in:.0f}s")
        return token
