"""
Models for traffic management rules (v2 API).
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional

from ..routing import Dialect
from .base import BaseUnifiModel, UnifiResource

ALL_CLIENTS = "ALL_CLIENTS"


@dataclass
class UnifiTrafficRuleTarget(BaseUnifiModel):
    """A device target of a traffic rule."""

    client_mac: Optional[str] = None
    type: Optional[str] = None  # 'ALL_CLIENTS', 'CLIENT', 'NETWORK'
    network_id: Optional[str] = None


@dataclass
class UnifiTrafficBandwidth(BaseUnifiModel):
    download_limit_kbps: Optional[int] = None
    upload_limit_kbps: Optional[int] = None
    enabled: Optional[bool] = None


@dataclass
class UnifiTrafficDomain(BaseUnifiModel):
    domain: Optional[str] = None
    description: Optional[str] = None
    ports: Optional[List[int]] = None


@dataclass
class UnifiPolicySchedule(BaseUnifiModel):
    """When a rule is active."""

    mode: Optional[str] = None  # 'ALWAYS', 'EVERY_DAY', 'EVERY_WEEK', 'ONE_TIME_ONLY'
    time_range_start: Optional[str] = None
    time_range_end: Optional[str] = None
    days_of_week: Optional[List[str]] = None


@dataclass
class UnifiTrafficRule(UnifiResource):
    """
    Represents a traffic management rule.

    Attributes:
        action: 'BLOCK', 'ALLOW' or 'SPEED_LIMIT'.
        matching_target: What the rule matches ('INTERNET', 'DOMAIN', 'APP',
                         'APP_CATEGORY', 'IP', 'REGION', 'LOCAL_NETWORK').
        target_devices: Devices the rule applies to. An empty list is sent as
                        a single ``ALL_CLIENTS`` target.
        bandwidth_limit: Limits applied when ``action`` is 'SPEED_LIMIT'.
    """

    endpoint: ClassVar[str] = "trafficrules"
    dialect: ClassVar[Dialect] = Dialect.V2
    _nested_models: ClassVar[Dict[str, Any]] = {
        "target_devices": UnifiTrafficRuleTarget,
        "schedule": UnifiPolicySchedule,
        "domains": UnifiTrafficDomain,
        "bandwidth_limit": UnifiTrafficBandwidth,
    }

    name: Optional[str] = None
    enabled: Optional[bool] = None
    action: Optional[str] = None
    matching_target: Optional[str] = None
    target_devices: Optional[List[UnifiTrafficRuleTarget]] = None
    schedule: Optional[UnifiPolicySchedule] = None
    description: Optional[str] = None
    app_category_ids: Optional[List[str]] = None
    app_ids: Optional[List[int]] = None
    domains: Optional[List[UnifiTrafficDomain]] = None
    ip_addresses: Optional[List[str]] = None
    ip_ranges: Optional[List[str]] = None
    regions: Optional[List[str]] = None
    network_id: Optional[str] = None
    bandwidth_limit: Optional[UnifiTrafficBandwidth] = None

    def to_request(self, resource_id: Optional[str] = None) -> Dict[str, Any]:
        request = self.to_dict()
        request.pop("_id", None)
        request.update({
            "name": self.name or "",
            "action": self.action or "",
            "matching_target": self.matching_target or "",
            "description": self.description or "",
            "enabled": True if self.enabled is None else self.enabled,
        })
        if not self.target_devices:
            request["target_devices"] = [{"type": ALL_CLIENTS}]
        return request
