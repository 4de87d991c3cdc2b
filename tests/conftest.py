from __future__ import annotations

import json
import os
from typing import Any
from unittest.mock import Mock

import pytest

from amadeus_client import Client, Configuration

ENV_KEYS = [
    "AMADEUS_CLIENT_ID",
    "AMADEUS_CLIENT_SECRET",
    "AMADEUS_HOSTNAME",
    "AMADEUS_HOST",
    "AMADEUS_SSL",
    "AMADEUS_PORT",
    "AMADEUS_LOG_LEVEL",
    "AMADEUS_CUSTOM_APP_ID",
    "AMADEUS_CUSTOM_APP_VERSION",
]


def _make_raw_response(
    status_code: int = 200,
    payload: Any = None,
    text: str | None = None,
    content_type: str = "application/vnd.amadeus+json",
) -> Mock:
    """Build a stand-in for requests.Response."""
    raw = Mock()
    raw.status_code = status_code
    raw.headers = {"Content-Type": content_type} if content_type else {}
    if text is None:
        text = json.dumps(payload) if payload is not None else ""
    raw.text = text
    return raw


def _token_response(token: str = "token_abc", expires_in: int = 1799) -> Mock:
    return _make_raw_response(
        payload={"type": "amadeusOAuth2Token", "access_token": token, "expires_in": expires_in},
        content_type="application/json",
    )


@pytest.fixture
def clean_env(monkeypatch):
    """Remove AMADEUS_* variables so tests do not see the developer's setup.

    Every known key is registered with monkeypatch first, so values a test
    writes straight into os.environ are removed again afterwards.
    """
    keys = set(ENV_KEYS) | {key for key in os.environ if key.startswith("AMADEUS_")}
    for key in keys:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    yield


@pytest.fixture
def configuration():
    return Configuration(client_id="client_123", client_secret="secret_456")


@pytest.fixture
def client(configuration):
    return Client(configuration)


@pytest.fixture
def authed_client(client):
    """A client whose token is already cached, so no token call is made."""
    client.access_token.access_token = "cached_token"
    client.access_token.expires_at = float("inf")
    return client


@pytest.fixture
def sample_locations_page():
    """One page of a paginated locations response."""
    return {
        "meta": {
            "count": 60,
            "links": {
                "self": "https://test.api.amadeus.com/v1/reference-data/locations?keyword=LON&page[offset]=10",
                "next": "https://test.api.amadeus.com/v1/reference-data/locations?keyword=LON&page[offset]=20",
                "previous": "https://test.api.amadeus.com/v1/reference-data/locations?keyword=LON&page[offset]=0",
                "first": "https://test.api.amadeus.com/v1/reference-data/locations?keyword=LON&page[offset]=0",
                "last": "https://test.api.amadeus.com/v1/reference-data/locations?keyword=LON&page[offset]=50",
            },
        },
        "data": [
            {"type": "location", "subType": "AIRPORT", "iataCode": "LHR", "name": "HEATHROW"},
            {"type": "location", "subType": "AIRPORT", "iataCode": "LGW", "name": "GATWICK"},
        ],
    }


@pytest.fixture
def sample_error_payload():
    return {
        "errors": [
            {
                "status": 400,
                "code": 477,
                "title": "INVALID FORMAT",
                "detail": "invalid query parameter format",
                "source": {"parameter": "airline", "example": "1X"},
            }
        ]
    }


@pytest.fixture
def make_raw_response():
    """Factory for fake requests.Response objects."""
    return _make_raw_response


@pytest.fixture
def token_response():
    """Factory for successful OAuth2 token responses."""
    return _token_response
