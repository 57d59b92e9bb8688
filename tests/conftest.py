"""
Shared fixtures: canned HTTP responses and a routing fake session
"""

import json
from unittest.mock import Mock

import pytest
import requests


def build_response(status_code=200, body=None, raw=None):
    response = requests.Response()
    response.status_code = status_code
    if raw is not None:
        response._content = raw
    elif body is None:
        response._content = b""
    else:
        response._content = json.dumps(body).encode("utf-8")
    return response


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def routed_session():
    """Session whose GETs are answered by URL substring"""

    def _build(routes):
        session = Mock(spec=requests.Session)

        def _get(url, params=None, timeout=None):
            for fragment, answer in routes.items():
                if fragment in url:
                    if isinstance(answer, Exception):
                        raise answer
                    if callable(answer):
                        return answer(url, params)
                    return answer
            raise AssertionError(f"Unexpected request to {url}")

        session.get.side_effect = _get
        return session

    return _build
