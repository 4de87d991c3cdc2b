from __future__ import annotations

import importlib.util
from pathlib import Path
from unittest.mock import patch

import pytest
import requests

pytest.importorskip("pandas")

SCRIPTS_DIR = Path(__file__).parent.parent / "scripts"


def load_script(name: str):
    spec = importlib.util.spec_from_file_location(name, SCRIPTS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def amadeus_get():
    return load_script("amadeus_get")


@pytest.fixture
def script_env(clean_env, monkeypatch, tmp_path):
    monkeypatch.setenv("AMADEUS_CLIENT_ID", "env_id")
    monkeypatch.setenv("AMADEUS_CLIENT_SECRET", "env_secret")
    monkeypatch.chdir(tmp_path)


def paged(data, next_offset=None):
    links = {"next": f"https://test.api.amadeus.com/v1/x?page[offset]={next_offset}"} if next_offset else {}
    return {"meta": {"links": links}, "data": data}


class TestFetchRows:
    def test_single_page_makes_one_request(self, amadeus_get, authed_client, make_raw_response):
        page = make_raw_response(200, paged([{"iataCode": "LHR"}], next_offset=10))

        with patch.object(requests.Session, "send", return_value=page) as mock_send:
            rows = amadeus_get.fetch_rows(authed_client, "/v1/x", amadeus_get.Params(), 1)

        assert rows == [{"iataCode": "LHR"}]
        assert mock_send.call_count == 1

    def test_follows_next_up_to_page_count(self, amadeus_get, authed_client, make_raw_response):
        pages = [
            make_raw_response(200, paged([{"iataCode": "LHR"}], next_offset=10)),
            make_raw_response(200, paged([{"iataCode": "LGW"}], next_offset=20)),
        ]

        with patch.object(requests.Session, "send", side_effect=pages) as mock_send:
            rows = amadeus_get.fetch_rows(authed_client, "/v1/x", amadeus_get.Params(), 2)

        assert rows == [{"iataCode": "LHR"}, {"iataCode": "LGW"}]
        assert mock_send.call_count == 2

    def test_stops_when_no_next_link(self, amadeus_get, authed_client, make_raw_response):
        page = make_raw_response(200, paged([{"iataCode": "LHR"}]))

        with patch.object(requests.Session, "send", return_value=page) as mock_send:
            rows = amadeus_get.fetch_rows(authed_client, "/v1/x", amadeus_get.Params(), 5)

        assert rows == [{"iataCode": "LHR"}]
        assert mock_send.call_count == 1


class TestAmadeusGetMain:
    def test_one_page_is_token_plus_one_request(
        self, amadeus_get, script_env, make_raw_response, token_response, capsys
    ):
        responses = [token_response(), make_raw_response(200, paged([{"iataCode": "LHR"}], next_offset=10))]

        with (
            patch("sys.argv", ["amadeus_get", "/v1/x", "--pages", "1"]),
            patch.object(requests.Session, "send", side_effect=responses) as mock_send,
        ):
            assert amadeus_get.main() == 0

        assert mock_send.call_count == 2
        assert "LHR" in capsys.readouterr().out

    def test_api_error_exit_code(self, amadeus_get, script_env, make_raw_response, token_response, capsys):
        responses = [token_response(), make_raw_response(400, {"errors": [{"detail": "bad keyword"}]})]

        with (
            patch("sys.argv", ["amadeus_get", "/v1/x", "-p", "keyword=L"]),
            patch.object(requests.Session, "send", side_effect=responses),
        ):
            assert amadeus_get.main() == 1

        assert "bad keyword" in capsys.readouterr().err

    def test_network_failure_exit_code(self, amadeus_get, script_env, capsys):
        with (
            patch("sys.argv", ["amadeus_get", "/v1/x"]),
            patch.object(requests.Session, "send", side_effect=requests.ConnectionError("down")),
        ):
            assert amadeus_get.main() == 2

        assert "Network failure" in capsys.readouterr().err
