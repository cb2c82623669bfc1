"""
UniFi Network API client for managing UniFi Network Application configuration.

This package provides a Python interface to the UniFi Network Application's
private API, allowing networks, firewall rules and groups, WLANs, port
profiles, RADIUS profiles, port forwards, static routes, static DNS records,
traffic rules and known clients to be created, read, updated and deleted.
"""

from .api_client import UnifiClient
from .config import ControllerConfig
from .routing import Dialect
from .transport import Transport
from .models import (
    UnifiApGroup,
    UnifiFirewallGroup,
    UnifiFirewallRule,
    UnifiNetworkConf,
    UnifiPortConf,
    UnifiPortForward,
    UnifiRadiusProfile,
    UnifiStaticDns,
    UnifiStaticRoute,
    UnifiTrafficRule,
    UnifiUser,
    UnifiUserGroup,
    UnifiWlanConf,
)
from .exceptions import (
    UnifiControllerError,
    UnifiAuthenticationError,
    UnifiTransportError,
    UnifiAPIError,
    UnifiDecodeError,
    UnifiEmptyResponseError,
    UnifiNotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    "UnifiClient",
    "ControllerConfig",
    "Dialect",
    "Transport",
    "UnifiApGroup",
    "UnifiFirewallGroup",
    "UnifiFirewallRule",
    "UnifiNetworkConf",
    "UnifiPortConf",
    "UnifiPortForward",
    "UnifiRadiusProfile",
    "UnifiStaticDns",
    "UnifiStaticRoute",
    "UnifiTrafficRule",
    "UnifiUser",
    "UnifiUserGroup",
    "UnifiWlanConf",
    "UnifiControllerError",
    "UnifiAuthenticationError",
    "UnifiTransportError",
    "UnifiAPIError",
    "UnifiDecodeError",
    "UnifiEmptyResponseError",
    "UnifiNotFoundError",
]
