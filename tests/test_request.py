"""
HTTP Transport Tests
"""

from unittest.mock import Mock

import pytest
import requests

from awin_api.coreutils.request import get_json, new_session
from awin_api.exceptions import AwinAPIError


def test_new_session_headers():
    session = new_session("abc")

    assert session.headers["Authorization"] == "Bearer abc"
    assert session.headers["Accept"] == "application/json"
    session.close()


def test_get_json_passes_params_and_timeout(make_response):
    session = Mock(spec=requests.Session)
    session.get.return_value = make_response(200, {"ok": True})

    body = get_json(session, "https://api.awin.com/x", params={"a": 1}, timeout=3)

    assert body == {"ok": True}
    session.get.assert_called_once_with("https://api.awin.com/x", params={"a": 1}, timeout=3)


def test_whitespace_body_is_none(make_response):
    session = Mock(spec=requests.Session)
    session.get.return_value = make_response(200, raw=b"  \n")

    assert get_json(session, "https://api.awin.com/x") is None


def test_error_status_is_api_error(make_response):
    session = Mock(spec=requests.Session)
    session.get.return_value = make_response(429, {"description": "Too many requests"})

    with pytest.raises(AwinAPIError) as excinfo:
        get_json(session, "https://api.awin.com/x")

    assert str(excinfo.value) == "API Error: Too many requests"
    assert isinstance(excinfo.value, requests.RequestException)


def test_invalid_json_success_body(make_response):
    session = Mock(spec=requests.Session)
    session.get.return_value = make_response(200, raw=b"not json")

    with pytest.raises(ValueError, match="Invalid JSON response"):
        get_json(session, "https://api.awin.com/x")
