from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional

from ..routing import Dialect
from .base import UnifiResource

DEFAULT_RECORD_TYPE = "A"
# Record types whose port/priority/weight fields the controller honours.
PRIORITY_RECORD_TYPES = ("SRV", "MX")


@dataclass
class UnifiStaticDns(UnifiResource):
    """
    Represents a static DNS record served by the gateway (v2 API).

    Attributes:
        key: The record name (e.g., 'nas.lan').
        value: The record value (an address, a target host, ...).
        record_type: 'A', 'AAAA', 'CNAME', 'MX', 'SRV', 'TXT', ... Defaults to 'A'.
        ttl: Time to live in seconds; 0 lets the gateway decide.
        port: SRV target port.
        priority: SRV/MX priority.
        weight: SRV weight.
    """

    endpoint: ClassVar[str] = "static-dns"
    dialect: ClassVar[Dialect] = Dialect.V2

    key: Optional[str] = None
    value: Optional[str] = None
    record_type: Optional[str] = None
    enabled: Optional[bool] = None
    ttl: Optional[int] = None
    port: Optional[int] = None
    priority: Optional[int] = None
    weight: Optional[int] = None

    def to_request(self, resource_id: Optional[str] = None) -> Dict[str, Any]:
        request: Dict[str, Any] = {}
        if resource_id is not None:
            request["_id"] = resource_id
        request.update({
            "key": self.key or "",
            "value": self.value or "",
            "record_type": self.record_type or DEFAULT_RECORD_TYPE,
            "enabled": True if self.enabled is None else self.enabled,
            "ttl": 0,
            "port": 0,
            "priority": 0,
            "weight": 0,
        })
        if self.ttl is not None and self.ttl > 0:
            request["ttl"] = self.ttl
        if self.record_type in PRIORITY_RECORD_TYPES:
            if self.port is not None:
                request["port"] = self.port
            if self.priority is not None:
                request["priority"] = self.priority
            if self.weight is not None:
                request["weight"] = self.weight
        return request
