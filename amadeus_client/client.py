from __future__ import annotations

import logging
from typing import Any, overload

import requests

from .auth import AccessToken
from .config import Configuration, LogLevel, Verb
from .exceptions import NetworkError
from .params import Params
from .request import Request
from .resources import Resource
from .response import Response

logger = logging.getLogger(__name__)

PAGE_OFFSET_KEY = "page[offset]"


class HTTPClient:
    """Authenticated HTTP access to the API plus pagination helpers.

    Every call blocks until the round trip completes. The access token is
    shared state on the client: a refresh done for one call is reused by the
    next ones. Nothing is retried.
    """

    def __init__(self, configuration: Configuration):
        self.configuration = configuration
        self.access_token = AccessToken(self)

    def get(self, path: str, params: Params | dict[str, Any] | None = None) -> Response:
        """Authenticated GET; params go to the query string.

        Example:
            >>> client.get("/v1/reference-data/locations", Params.with_("keyword", "LON"))
        """
        return self.request(Verb.GET, path, _as_params(params))

    def post(self, path: str, params: Params | dict[str, Any] | None = None) -> Response:
        """Authenticated POST; params are form-encoded into the body."""
        return self.request(Verb.POST, path, _as_params(params))

    def unauthenticated_request(
        self,
        verb: Verb | str,
        path: str,
        params: Params | None,
        bearer_token: str | None,
    ) -> Response:
        """Issue a request with an explicit (possibly absent) bearer token.

        Used internally by AccessToken to fetch the first token.
        """
        request = self._build_request(verb, path, params, bearer_token)
        self._log(request)
        return self._execute(request)

    def request(self, verb: Verb | str, path: str, params: Params | None = None) -> Response:
        return self.unauthenticated_request(verb, path, params, self.access_token.get_bearer_token())

    # =========================================================================
    # Pagination
    # =========================================================================

    @overload
    def previous(self, source: Response) -> Response | None: ...
    @overload
    def previous(self, source: Resource) -> list[Resource]: ...

    def previous(self, source):
        return self._page("previous", source)

    @overload
    def next(self, source: Response) -> Response | None: ...
    @overload
    def next(self, source: Resource) -> list[Resource]: ...

    def next(self, source):
        return self._page("next", source)

    @overload
    def first(self, source: Response) -> Response | None: ...
    @overload
    def first(self, source: Resource) -> list[Resource]: ...

    def first(self, source):
        return self._page("first", source)

    @overload
    def last(self, source: Response) -> Response | None: ...
    @overload
    def last(self, source: Resource) -> list[Resource]: ...

    def last(self, source):
        return self._page("last", source)

    def _page(self, page_name: str, source: Response | Resource) -> Response | list[Resource] | None:
        if isinstance(source, Resource):
            return self._page_resource(page_name, source)
        return self._page_response(page_name, source)

    def _page_response(self, page_name: str, response: Response | None) -> Response | None:
        """Fetch another page of `response`, or None if there is no such page.

        The link is expected to end in `...offset=<value>`; everything after
        the last `=` is taken as the new offset.
        """
        offset = _page_offset(response, page_name)
        if offset is None:
            logger.debug(f"No '{page_name}' page link in response")
            return None

        original = response.request
        params = original.clone_params()
        params.put(PAGE_OFFSET_KEY, offset)
        return self.request(original.verb, original.path, params)

    def _page_resource(self, page_name: str, resource: Resource) -> list[Resource]:
        response = self._page_response(page_name, resource.response)
        resource_class = resource.deserialization_class or type(resource)
        return Resource.from_array(response, resource_class)

    # =========================================================================
    # Request lifecycle
    # =========================================================================

    def _build_request(
        self, verb: Verb | str, path: str, params: Params | None, bearer_token: str | None
    ) -> Request:
        return Request(verb, path, params, bearer_token, self)

    def _log(self, obj: Request | Response) -> None:
        if self.configuration.log_level is LogLevel.DEBUG:
            self.configuration.logger.info(str(obj))

    def _execute(self, request: Request) -> Response:
        response = Response(request, self._fetch(request))
        response.parse(self)
        self._log(response)
        response.detect_error(self)
        return response

    def _fetch(self, request: Request) -> requests.Response:
        try:
            request.establish_connection()
            self._write(request)
            return request.send()
        except (requests.exceptions.RequestException, OSError) as e:
            logger.debug(f"Network failure for {request.verb.value} {request.path}: {e}")
            request.close()
            raise NetworkError(Response(request)) from e

    def _write(self, request: Request) -> None:
        if request.verb is Verb.POST and request.params is not None:
            request.write_body(request.params.to_query_string())


class Client(HTTPClient):
    """Entry point for the Amadeus API.

    Examples:
        >>> client = Client.from_env()
        >>> response = client.get("/v1/reference-data/locations",
        ...                       Params.with_("keyword", "LON").and_("subType", "AIRPORT"))
        >>> client.next(response)
    """

    @classmethod
    def from_env(cls, dotenv: bool = True, **overrides: Any) -> Client:
        return cls(Configuration.from_env(dotenv=dotenv, **overrides))


def _as_params(params: Params | dict[str, Any] | None) -> Params | None:
    if params is None or isinstance(params, Params):
        return params
    return Params(params)


def _page_offset(response: Response | None, page_name: str) -> str | None:
    if response is None or not response.parsed or not isinstance(response.result, dict):
        return None
    meta = response.result.get("meta")
    links = meta.get("links") if isinstance(meta, dict) else None
    link = links.get(page_name) if isinstance(links, dict) else None
    if not isinstance(link, str) or "=" not in link:
        return None
    return link.split("=")[-1]
