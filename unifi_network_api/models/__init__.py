"""
Data models for UniFi Network configuration records.

.. warning::
    The dataclasses defined in this module represent commonly observed fields in the
    UniFi Network Application's **undocumented** private API. The actual data
    structure returned by the controller can vary with the controller and
    firmware version. Every field is therefore optional, fields left as ``None``
    are not sent, and fields the controller returns that a model does not declare
    are captured in the ``_extra_fields`` dictionary and sent back unchanged by
    ``to_dict()``.

Each resource class carries the logical ``endpoint`` it lives under and the API
``dialect`` (legacy REST or v2) used to reach it.
"""

from .base import BaseUnifiModel, UnifiResource
from .networkconf import UnifiNetworkConf, UnifiWanProviderCapabilities
from .firewall import UnifiFirewallRule, UnifiFirewallGroup
from .portconf import UnifiPortConf, UnifiQosProfile
from .wlanconf import UnifiWlanConf
from .groups import UnifiUserGroup, UnifiApGroup
from .radius import UnifiRadiusProfile, UnifiRadiusServer
from .portforward import UnifiPortForward
from .routing import UnifiStaticRoute
from .staticdns import UnifiStaticDns
from .trafficrule import (
    UnifiTrafficRule,
    UnifiTrafficRuleTarget,
    UnifiTrafficBandwidth,
    UnifiTrafficDomain,
    UnifiPolicySchedule,
)
from .user import UnifiUser

__all__ = [
    "BaseUnifiModel",
    "UnifiResource",
    "UnifiNetworkConf",
    "UnifiWanProviderCapabilities",
    "UnifiFirewallRule",
    "UnifiFirewallGroup",
    "UnifiPortConf",
    "UnifiQosProfile",
    "UnifiWlanConf",
    "UnifiUserGroup",
    "UnifiApGroup",
    "UnifiRadiusProfile",
    "UnifiRadiusServer",
    "UnifiPortForward",
    "UnifiStaticRoute",
    "UnifiStaticDns",
    "UnifiTrafficRule",
    "UnifiTrafficRuleTarget",
    "UnifiTrafficBandwidth",
    "UnifiTrafficDomain",
    "UnifiPolicySchedule",
    "UnifiUser",
]
