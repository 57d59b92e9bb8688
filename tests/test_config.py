"""
Configuration Tests - AWIN_* environment variables
"""

import pytest

from awin_api.config import ClientConfig
from awin_api.coreutils.time import format_api_datetime, parse_cli_datetime
from awin_api.exceptions import AwinConfigError

AWIN_VARS = [
    "AWIN_AUTH_TOKEN",
    "AWIN_PUBLISHER_ID",
    "AWIN_TIMEOUT",
    "AWIN_API_CALLS_LIMIT",
    "AWIN_VERBOSE_COMMISSION_GROUPS",
    "AWIN_ENDPOINT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in AWIN_VARS:
        monkeypatch.delenv(var, raising=False)


def test_defaults(monkeypatch):
    monkeypatch.setenv("AWIN_AUTH_TOKEN", "t")
    monkeypatch.setenv("AWIN_PUBLISHER_ID", "12")

    config = ClientConfig.from_env()

    assert config == ClientConfig(auth_token="t", publisher_id=12)
    assert config.timeout == 10
    assert config.api_calls_limit == 20
    assert config.verbose_commission_groups is False
    assert config.endpoint == "https://api.awin.com"


def test_overrides(monkeypatch):
    monkeypatch.setenv("AWIN_AUTH_TOKEN", "t")
    monkeypatch.setenv("AWIN_PUBLISHER_ID", "12")
    monkeypatch.setenv("AWIN_TIMEOUT", "30")
    monkeypatch.setenv("AWIN_API_CALLS_LIMIT", "0")
    monkeypatch.setenv("AWIN_VERBOSE_COMMISSION_GROUPS", "Yes")
    monkeypatch.setenv("AWIN_ENDPOINT", "http://localhost:8080")

    config = ClientConfig.from_env()

    assert config.timeout == 30
    assert config.api_calls_limit == 0
    assert config.verbose_commission_groups is True
    assert config.endpoint == "http://localhost:8080"


def test_missing_token(monkeypatch):
    monkeypatch.setenv("AWIN_PUBLISHER_ID", "12")

    with pytest.raises(AwinConfigError, match="AWIN_AUTH_TOKEN"):
        ClientConfig.from_env()


def test_bad_publisher_id(monkeypatch):
    monkeypatch.setenv("AWIN_AUTH_TOKEN", "t")
    monkeypatch.setenv("AWIN_PUBLISHER_ID", "abc")

    with pytest.raises(AwinConfigError, match="must be an integer"):
        ClientConfig.from_env()


def test_datetime_helpers():
    dt = parse_cli_datetime("2023-01-31T23:59:59")

    assert format_api_datetime(dt) == "2023-01-31T23:59:59"
    assert format_api_datetime(parse_cli_datetime("2023-01-01")) == "2023-01-01T00:00:00"
    with pytest.raises(ValueError):
        parse_cli_datetime("31/01/2023")
