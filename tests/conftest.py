"""Pytest configuration and fixtures for UniFi Network API tests."""

import base64
import json
from typing import Any, Dict, List, Optional
from unittest.mock import Mock

import pytest
import requests

from unifi_network_api import UnifiClient
from unifi_network_api.transport import Transport

CONTROLLER_URL = "https://unifi.local"


def make_response(
    status_code: int = 200,
    body: Any = None,
    content: Optional[bytes] = None,
    headers: Optional[Dict[str, str]] = None,
) -> requests.Response:
    """Build a real requests.Response with a JSON (or raw) body."""
    response = requests.Response()
    response.status_code = status_code
    if content is None:
        content = json.dumps(body).encode("utf-8") if body is not None else b""
    response._content = content
    response.headers.update(headers or {})
    return response


def envelope(data: Any, rc: str = "ok") -> Dict[str, Any]:
    return {"meta": {"rc": rc}, "data": data}


def make_jwt(claims: Dict[str, Any]) -> str:
    def encode(part: Dict[str, Any]) -> str:
        return base64.urlsafe_b64encode(json.dumps(part).encode("utf-8")).rstrip(b"=").decode("ascii")

    return f"{encode({'alg': 'HS256'})}.{encode(claims)}.signature"


@pytest.fixture
def sleeps() -> List[float]:
    """Backoff delays requested by the transport, recorded instead of slept."""
    return []


@pytest.fixture
def transport(sleeps) -> Transport:
    """Transport whose HTTP calls are served by a Mock and whose backoff never sleeps."""
    t = Transport(sleep=sleeps.append)
    t.session.request = Mock(name="request")
    return t


@pytest.fixture
def api_key_client(transport) -> UnifiClient:
    """Client for a UniFi OS console authenticated with an API key."""
    return UnifiClient(CONTROLLER_URL, api_key="test-api-key", transport=transport)


@pytest.fixture
def password_client(transport) -> UnifiClient:
    """Client logged in with username and password; the CSRF token is 'csrf-123'."""
    transport.session.request.side_effect = [
        make_response(200, envelope([])),
        make_response(200, envelope([{"name": "admin"}]), headers={"X-Csrf-Token": "csrf-123"}),
    ]
    client = UnifiClient(CONTROLLER_URL, username="admin", password="secret", transport=transport)
    transport.session.request.reset_mock(side_effect=True)
    return client


def sent(transport: Transport, index: int = -1):
    """(method, url, kwargs) of one recorded HTTP call."""
    call = transport.session.request.call_args_list[index]
    method, url = call.args
    return method, url, call.kwargs
