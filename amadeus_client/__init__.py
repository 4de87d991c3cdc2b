"""Python client for the Amadeus for Developers REST API.

This package provides:
- OAuth2 client-credentials auth with a cached, auto-refreshing token
- A thin synchronous HTTP client (GET/POST) with typed error classes
- previous/next/first/last pagination over `meta.links`

Note: endpoint-specific namespaces are not included; call paths directly.
"""

from .client import Client, HTTPClient
from .config import Configuration, LogLevel, Verb
from .exceptions import (
    AmadeusError,
    AuthenticationError,
    ClientError,
    ConfigurationError,
    NetworkError,
    NotFoundError,
    ResponseError,
    ServerError,
)
from .params import Params
from .request import Request
from .resources import Resource
from .response import Response
from .version import __version__

__all__ = [
    "AmadeusError",
    "AuthenticationError",
    "Client",
    "ClientError",
    "Configuration",
    "ConfigurationError",
    "HTTPClient",
    "LogLevel",
    "NetworkError",
    "NotFoundError",
    "Params",
    "Request",
    "Resource",
    "Response",
    "ResponseError",
    "ServerError",
    "Verb",
    "__version__",
]
