"""A single HTTP call against the API."""

from __future__ import annotations

import platform
from typing import TYPE_CHECKING

import requests

from .config import Verb
from .params import Params
from .version import __version__

if TYPE_CHECKING:
    from .client import HTTPClient

ACCEPT = "application/json, application/vnd.amadeus+json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
SECRET_PARAMS = {"client_secret"}


class Request:
    """One verb/path/params call, optionally carrying a bearer token.

    The connection is opened lazily by `establish_connection()` and belongs to
    this request only; sessions are never shared between requests.
    """

    def __init__(
        self,
        verb: Verb | str,
        path: str,
        params: Params | None,
        bearer_token: str | None,
        client: HTTPClient,
    ):
        self._verb = Verb(verb)
        self._path = path
        self._params = Params(params) if params is not None else None
        self._bearer_token = bearer_token
        self._client = client

        config = client.configuration
        self.scheme = config.scheme
        self.host = config.host
        self.port = config.port
        self.timeout = config.timeout
        self.headers = self._build_headers()
        self.url = self._build_url(config.base_url)

        self.session: requests.Session | None = None
        self.connection: requests.PreparedRequest | None = None

    @property
    def verb(self) -> Verb:
        return self._verb

    @property
    def path(self) -> str:
        return self._path

    @property
    def params(self) -> Params | None:
        return self._params

    @property
    def bearer_token(self) -> str | None:
        return self._bearer_token

    @property
    def client(self) -> HTTPClient:
        return self._client

    @property
    def query_string(self) -> str:
        if not self._params:
            return ""
        return self._params.to_query_string()

    def clone_params(self) -> Params:
        return self._params.clone() if self._params is not None else Params()

    def establish_connection(self) -> requests.PreparedRequest:
        """Open a fresh session and prepare verb, URL and headers."""
        self.session = requests.Session()
        self.connection = requests.Request(self._verb.value, self.url, headers=self.headers).prepare()
        return self.connection

    def write_body(self, data: str) -> None:
        if self.connection is None:
            raise RuntimeError("establish_connection() must be called before write_body()")
        self.connection.prepare_body(data.encode("utf-8"), None)

    def send(self) -> requests.Response:
        if self.session is None or self.connection is None:
            raise RuntimeError("establish_connection() must be called before send()")
        try:
            return self.session.send(self.connection, timeout=self.timeout)
        finally:
            self.close()

    def close(self) -> None:
        if self.session is not None:
            self.session.close()

    def _build_headers(self) -> dict[str, str]:
        config = self._client.configuration
        user_agent = f"amadeus-python-client/{__version__} python/{platform.python_version()}"
        if config.custom_app_id:
            user_agent += f" {config.custom_app_id}/{config.custom_app_version or ''}".rstrip("/")

        headers = {"User-Agent": user_agent, "Accept": ACCEPT}
        if self._bearer_token:
            headers["Authorization"] = f"Bearer {self._bearer_token}"
        if self._verb is Verb.POST:
            headers["Content-Type"] = FORM_CONTENT_TYPE
        return headers

    def _build_url(self, base_url: str) -> str:
        url = f"{base_url}{self._path}"
        if self._verb is Verb.GET and self._params:
            separator = "&" if "?" in url else "?"
            url = f"{url}{separator}{self.query_string}"
        return url

    def __str__(self) -> str:
        params = None
        if self._params is not None:
            params = {k: ("***" if k in SECRET_PARAMS else v) for k, v in self._params.items()}
        return (
            f"Request(verb={self._verb.value}, url={self.url}, params={params}, "
            f"authenticated={self._bearer_token is not None})"
        )

    __repr__ = __str__
