"""
URL path construction for the UniFi Network Application.

The controller exposes two API dialects under a per-site namespace. On UniFi OS
consoles (UDM, UDR, Cloud Key Gen2, ...) the Network Application sits behind
the ``/proxy/network`` prefix; a standalone Network Application serves the
same paths without it.
"""

from enum import Enum
from urllib.parse import quote

PROXY_PREFIX = "/proxy/network"
LOGIN_PATH = "/api/auth/login"

# Characters Go-style path-segment escaping leaves alone, besides unreserved ones.
_SITE_SAFE_CHARS = "$&+:=@"


class Dialect(str, Enum):
    """API dialect of an endpoint."""

    REST = "rest"
    V2 = "v2"
    CMD = "cmd"


def escape_site(site: str) -> str:
    return quote(site, safe=_SITE_SAFE_CHARS)


def with_topology(path: str, is_standalone: bool) -> str:
    """Prefix ``path`` with the proxy prefix unless the controller is standalone."""
    if is_standalone:
        return path
    return PROXY_PREFIX + path


def route(dialect: Dialect, site: str, is_standalone: bool, endpoint: str) -> str:
    """
    Build the request path for a logical endpoint.

    Args:
        dialect: Which URL convention the endpoint belongs to.
        site: Site identifier (short name), escaped as a path segment.
        is_standalone: True for a standalone Network Application (no proxy prefix).
        endpoint: Logical endpoint, e.g. ``networkconf`` or ``static-dns/<id>``.

    Returns:
        The absolute path, without scheme or host.
    """
    escaped = escape_site(site)
    if dialect == Dialect.REST:
        path = f"/api/s/{escaped}/rest/{endpoint}"
    elif dialect == Dialect.V2:
        path = f"/v2/api/site/{escaped}/{endpoint}"
    elif dialect == Dialect.CMD:
        path = f"/api/s/{escaped}/cmd/{endpoint}"
    else:
        raise ValueError(f"Unsupported dialect: {dialect}")
    return with_topology(path, is_standalone)


def login_path() -> str:
    """The login endpoint lives outside the site namespace and is never proxied."""
    return LOGIN_PATH


def self_path(site: str, is_standalone: bool) -> str:
    return with_topology(f"/api/s/{escape_site(site)}/self", is_standalone)
