from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import requests

from .config import LogLevel
from .exceptions import (
    AuthenticationError,
    ClientError,
    NetworkError,
    NotFoundError,
    ResponseError,
    ServerError,
)

if TYPE_CHECKING:
    from .client import HTTPClient
    from .request import Request

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPES = ("application/json", "application/vnd.amadeus+json")


class Response:
    """The outcome of one Request.

    `raw` is the underlying requests.Response, or None when the call failed
    before any response arrived. Derived fields (`status_code`, `body`,
    `result`, `data`, `parsed`) are filled in by `parse()`.
    """

    def __init__(self, request: Request, raw: requests.Response | None = None):
        self.request = request
        self.raw = raw
        self.status_code: int | None = None
        self.headers: dict[str, str] = {}
        self.body: str | None = None
        self.result: Any = None
        self.data: Any = None
        self.parsed = False

    def parse(self, client: HTTPClient) -> None:
        if self.raw is None:
            return

        self.status_code = self.raw.status_code
        self.headers = dict(self.raw.headers)
        self.body = self.raw.text

        if not self.body or not self.is_json():
            return
        try:
            self.result = json.loads(self.body)
        except ValueError as e:
            logger.debug(f"Could not decode JSON body ({self.status_code}): {e}")
            return

        self.parsed = True
        if isinstance(self.result, dict):
            self.data = self.result.get("data")

    def is_json(self) -> bool:
        content_type = ""
        if self.raw is not None:
            content_type = self.raw.headers.get("Content-Type", "")
        return any(kind in content_type for kind in JSON_CONTENT_TYPES)

    def detect_error(self, client: HTTPClient) -> None:
        """Raise the matching ResponseError subclass if this response is a failure."""
        error_class = self._error_class()
        if error_class is None:
            return

        error = error_class(self)
        config = client.configuration
        if config.log_level >= LogLevel.WARN:
            config.logger.warning(f"Amadeus {error.code}: {error.description()}")
        raise error

    def _error_class(self) -> type[ResponseError] | None:
        status = self.status_code
        if status is None:
            return NetworkError
        if status >= 500:
            return ServerError
        if status == 404:
            return NotFoundError
        if status == 401:
            return AuthenticationError
        if status >= 400:
            return ClientError
        if self.parsed and isinstance(self.result, dict) and self.result.get("errors"):
            return ClientError
        return None

    def __str__(self) -> str:
        return (
            f"Response(status_code={self.status_code}, parsed={self.parsed}, "
            f"body={self.body!r})"
        )

    __repr__ = __str__
