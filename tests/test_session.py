"""Tests for login, CSRF harvesting and auth headers."""

import json
import threading
from unittest.mock import patch

import pytest
import requests

from unifi_network_api import UnifiAuthenticationError, UnifiClient
from unifi_network_api.session import AuthSession, ReadWriteLock

from .conftest import CONTROLLER_URL, envelope, make_jwt, make_response, sent


def test_api_key_mode_headers(transport):
    # Arrange
    auth = AuthSession(transport, CONTROLLER_URL, api_key="k-1")

    # Act & Assert: the key is sent on every method and no CSRF header ever is
    for method in ("GET", "POST", "PUT", "DELETE"):
        assert auth.headers_for(method) == {"X-API-KEY": "k-1"}
    assert auth.is_ready()


def test_api_key_mode_skips_login(transport):
    # Act
    UnifiClient(CONTROLLER_URL, api_key="k-1", transport=transport)

    # Assert: no request is made before the first resource call
    transport.session.request.assert_not_called()


def test_login_posts_credentials_to_unprefixed_path(password_client, transport):
    # Arrange
    transport.session.request.side_effect = [
        make_response(200),
        make_response(200, headers={"X-Csrf-Token": "csrf-456"}),
    ]

    # Act
    password_client.login()

    # Assert
    method, url, kwargs = sent(transport, 0)
    assert (method, url) == ("POST", "https://unifi.local/api/auth/login")
    assert json.loads(kwargs["data"]) == {"username": "admin", "password": "secret"}
    method, url, _ = sent(transport, 1)
    assert (method, url) == ("GET", "https://unifi.local/proxy/network/api/s/default/self")
    assert password_client.auth.csrf_token == "csrf-456"


def test_password_mode_csrf_only_on_mutating_methods(password_client):
    auth = password_client.auth

    assert auth.is_authenticated
    assert auth.headers_for("GET") == {}
    for method in ("POST", "PUT", "DELETE", "post"):
        assert auth.headers_for(method) == {"X-Csrf-Token": "csrf-123"}


def test_login_rejected_fails_construction(transport):
    # Arrange
    transport.session.request.return_value = make_response(401, {"errors": ["bad credentials"]})

    # Act & Assert
    with pytest.raises(UnifiAuthenticationError, match="401"):
        UnifiClient(CONTROLLER_URL, username="admin", password="wrong", transport=transport)

    # Only the login request was attempted
    assert transport.session.request.call_count == 1


def test_login_requires_exactly_200(transport):
    transport.session.request.return_value = make_response(204)

    with pytest.raises(UnifiAuthenticationError):
        UnifiClient(CONTROLLER_URL, username="admin", password="secret", transport=transport)


def test_login_unreachable_controller(transport, sleeps):
    # Arrange
    transport.session.request.side_effect = requests.exceptions.ConnectionError("refused")

    # Act & Assert: the transport error surfaces as an authentication failure
    with pytest.raises(UnifiAuthenticationError):
        UnifiClient(CONTROLLER_URL, username="admin", password="secret", transport=transport)
    assert transport.session.request.call_count == 5


def test_csrf_token_from_cookie_when_header_missing(transport):
    # Arrange
    transport.session.cookies.set("TOKEN", make_jwt({"csrfToken": "from-cookie"}))
    transport.session.request.side_effect = [make_response(200), make_response(200, envelope([]))]

    # Act
    client = UnifiClient(CONTROLLER_URL, username="admin", password="secret", transport=transport)

    # Assert
    assert client.auth.csrf_token == "from-cookie"


def test_csrf_failure_is_not_fatal(transport):
    # Arrange: the self endpoint cannot be reached
    transport.session.request.side_effect = [
        make_response(200),
        requests.exceptions.ConnectionError("reset"),
    ]

    # Act
    client = UnifiClient(CONTROLLER_URL, username="admin", password="secret", transport=transport)

    # Assert: logged in, but without a token and without retrying the lookup
    assert client.auth.is_authenticated
    assert client.auth.csrf_token == ""
    assert client.auth.headers_for("POST") == {}
    assert transport.session.request.call_count == 2


def test_malformed_token_cookie_is_ignored(transport):
    transport.session.cookies.set("TOKEN", "not-a-jwt")
    auth = AuthSession(transport, CONTROLLER_URL, username="admin", password="secret")

    assert auth._extract_csrf_token_from_cookie() is None


def test_read_write_lock_excludes_readers_during_write():
    # Arrange
    lock = ReadWriteLock()
    entered = threading.Event()

    def reader():
        with lock.read():
            entered.set()

    # Act: a reader started while the write lock is held must wait for it
    with lock.write():
        thread = threading.Thread(target=reader)
        thread.start()
        assert not entered.wait(0.05)
    thread.join(1)

    # Assert
    assert entered.is_set()


def test_failed_login_closes_transport_built_by_client(transport):
    # Arrange: the client builds its own transport, and the controller rejects the login
    transport.session.request.return_value = make_response(401)

    # Act
    with patch("unifi_network_api.api_client.Transport", return_value=transport):
        with pytest.raises(UnifiAuthenticationError):
            UnifiClient(CONTROLLER_URL, username="admin", password="wrong")

    # Assert: the connection pool is released since no client was returned
    assert transport.closed


def test_failed_login_leaves_caller_transport_open(transport):
    transport.session.request.return_value = make_response(401)

    with pytest.raises(UnifiAuthenticationError):
        UnifiClient(CONTROLLER_URL, username="admin", password="wrong", transport=transport)

    assert not transport.closed
