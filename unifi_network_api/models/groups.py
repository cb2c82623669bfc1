"""
Models for user groups and access point groups.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional

from ..routing import Dialect
from .base import UnifiResource


@dataclass
class UnifiUserGroup(UnifiResource):
    """A bandwidth-limit group clients and WLANs can be assigned to."""

    endpoint: ClassVar[str] = "usergroup"

    site_id: Optional[str] = None
    name: Optional[str] = None
    qos_rate_max_down: Optional[int] = None  # Kbps, -1 for unlimited
    qos_rate_max_up: Optional[int] = None  # Kbps, -1 for unlimited
    attr_hidden_id: Optional[str] = None
    attr_no_delete: Optional[bool] = None


@dataclass
class UnifiApGroup(UnifiResource):
    """A named set of access points a WLAN can be restricted to (v2 API)."""

    endpoint: ClassVar[str] = "apgroups"
    dialect: ClassVar[Dialect] = Dialect.V2

    name: Optional[str] = None
    attr_hidden_id: Optional[str] = None
    attr_no_delete: Optional[bool] = None
    device_macs: Optional[List[str]] = None
    for_wlanconf: Optional[bool] = None

    def to_request(self, resource_id: Optional[str] = None) -> Dict[str, Any]:
        # The v2 endpoint only accepts these three keys, all of them present.
        return {
            "name": self.name or "",
            "device_macs": list(self.device_macs or []),
            "for_wlanconf": bool(self.for_wlanconf),
        }
