"""Tests for URL path construction."""

import pytest

from unifi_network_api.routing import (
    PROXY_PREFIX,
    Dialect,
    escape_site,
    login_path,
    route,
    self_path,
)


@pytest.mark.parametrize("dialect", [Dialect.REST, Dialect.V2, Dialect.CMD])
@pytest.mark.parametrize("is_standalone", [True, False])
def test_route_prefix_present_only_on_unifi_os(dialect, is_standalone):
    # Act
    path = route(dialect, "default", is_standalone, "networkconf")

    # Assert: the proxy prefix appears once on UniFi OS and never on standalone controllers
    assert path.startswith(PROXY_PREFIX) is not is_standalone
    assert path.count(PROXY_PREFIX) == (0 if is_standalone else 1)


def test_route_rest_dialect():
    assert route(Dialect.REST, "default", False, "networkconf/abc123") == \
        "/proxy/network/api/s/default/rest/networkconf/abc123"
    assert route(Dialect.REST, "default", True, "networkconf") == "/api/s/default/rest/networkconf"


def test_route_v2_dialect():
    assert route(Dialect.V2, "default", False, "static-dns") == "/proxy/network/v2/api/site/default/static-dns"
    assert route(Dialect.V2, "site2", True, "apgroups/id1") == "/v2/api/site/site2/apgroups/id1"


def test_route_cmd_dialect():
    assert route(Dialect.CMD, "default", False, "stamgr") == "/proxy/network/api/s/default/cmd/stamgr"


def test_route_is_deterministic():
    # Arrange
    first = route(Dialect.V2, "default", False, "trafficrules")

    # Act
    second = route(Dialect.V2, "default", False, "trafficrules")

    # Assert: building the same path twice never double-prefixes
    assert first == second


def test_route_rejects_unknown_dialect():
    with pytest.raises(ValueError, match="Unsupported dialect"):
        route("graphql", "default", False, "networkconf")


def test_site_is_escaped_as_path_segment():
    assert escape_site("my site/1") == "my%20site%2F1"
    assert route(Dialect.REST, "a b", True, "user") == "/api/s/a%20b/rest/user"


def test_login_path_never_prefixed():
    assert login_path() == "/api/auth/login"


def test_self_path_follows_topology():
    assert self_path("default", False) == "/proxy/network/api/s/default/self"
    assert self_path("default", True) == "/api/s/default/self"
