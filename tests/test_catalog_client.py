"""
Tests for catalog/client.py — the one-shot catalogue fetch.

The requests session is replaced by a MagicMock; every failure mode must
come back as a FetchError with no partial data.
"""
from unittest.mock import MagicMock, patch

import pytest
import requests

from catalog.client import fetch_bodies, make_fetcher
from catalog.errors import FetchError

URL = "https://catalog.test/bodies/"


def _response(status: int = 200, payload=None, json_error: Exception | None = None):
    resp = MagicMock()
    resp.status_code = status
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(
            f"{status} Server Error", response=resp
        )
    else:
        resp.raise_for_status.return_value = None
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    return resp


def _session(resp=None, error: Exception | None = None):
    session = MagicMock()
    if error is not None:
        session.get.side_effect = error
    else:
        session.get.return_value = resp
    return session


class TestFetchBodies:
    def test_returns_bodies_array(self, raw_bodies):
        session = _session(_response(payload={"bodies": raw_bodies}))
        assert fetch_bodies(URL, session=session, timeout=5) == raw_bodies
        session.get.assert_called_once_with(URL, timeout=5)

    def test_empty_bodies_array(self):
        session = _session(_response(payload={"bodies": []}))
        assert fetch_bodies(URL, session=session) == []

    def test_non_2xx_raises(self):
        session = _session(_response(status=503))
        with pytest.raises(FetchError) as exc_info:
            fetch_bodies(URL, session=session)
        assert exc_info.value.status_code == 503
        assert exc_info.value.url == URL
        assert "Network response was not ok" in str(exc_info.value)

    def test_connection_error_raises(self):
        session = _session(error=requests.ConnectionError("connection refused"))
        with pytest.raises(FetchError, match="connection refused") as exc_info:
            fetch_bodies(URL, session=session)
        assert exc_info.value.status_code is None

    def test_timeout_raises(self):
        session = _session(error=requests.Timeout())
        with pytest.raises(FetchError, match="Timeout"):
            fetch_bodies(URL, session=session)

    def test_invalid_json_raises(self):
        session = _session(_response(json_error=ValueError("Expecting value")))
        with pytest.raises(FetchError, match="not valid JSON"):
            fetch_bodies(URL, session=session)

    @pytest.mark.parametrize("payload", [
        [], {"data": []}, {"bodies": None}, {"bodies": {"terre": {}}}, "bodies",
    ])
    def test_payload_without_bodies_array_raises(self, payload):
        session = _session(_response(payload=payload))
        with pytest.raises(FetchError, match="'bodies' array"):
            fetch_bodies(URL, session=session)

    def test_error_chains_original_exception(self):
        original = requests.ConnectionError("dns failure")
        with pytest.raises(FetchError) as exc_info:
            fetch_bodies(URL, session=_session(error=original))
        assert exc_info.value.__cause__ is original


class TestMakeFetcher:
    def test_fetcher_uses_url_and_timeout(self):
        with patch("catalog.client.fetch_bodies", return_value=[{"isPlanet": True}]) as fb:
            fetch = make_fetcher(URL, timeout=7)
            assert fetch() == [{"isPlanet": True}]
        args, kwargs = fb.call_args
        assert args == (URL,)
        assert kwargs["timeout"] == 7
        assert kwargs["session"] is not None

    def test_fetcher_propagates_fetch_error(self):
        with patch("catalog.client.fetch_bodies", side_effect=FetchError("down")):
            with pytest.raises(FetchError, match="down"):
                make_fetcher(URL)()
