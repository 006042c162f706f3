"""Shared fixtures: a fake ``requests.request`` that records calls."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from snipcart import SnipcartClient, ClientConfig


def make_response(status_code: int = 200, body: Any = None, reason: str = "OK", text: str | None = None) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.reason = reason
    response.url = "https://mock.snipcart.test"
    if text is not None:
        response.json.side_effect = json.JSONDecodeError("Expecting value", text, 0)
    else:
        response.json.return_value = {} if body is None else body
    return response


def sent_json(mocked: MagicMock) -> Any:
    """Decode the JSON body of the last call made through ``mocked``."""
    return json.loads(mocked.call_args.kwargs["data"])


@pytest.fixture
def respond():
    return make_response


@pytest.fixture
def sent_body():
    return sent_json


@pytest.fixture
def client() -> SnipcartClient:
    return SnipcartClient("secret", ClientConfig(base_url="https://mock.snipcart.test"))


@pytest.fixture
def fake_request():
    """Patch ``requests.request`` as used by the transport.

    Tests set ``fake_request.return_value`` (or ``side_effect``) to a
    response made with :func:`make_response`.
    """
    with patch("snipcart.http.requests.request") as mocked:
        mocked.return_value = make_response()
        yield mocked
