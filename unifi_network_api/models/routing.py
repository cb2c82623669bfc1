from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional

from .base import UnifiResource, api_field

STATIC_ROUTE_TYPE = "static-route"
NEXTHOP_ROUTE = "nexthop-route"
DEFAULT_DISTANCE = 1


@dataclass
class UnifiStaticRoute(UnifiResource):
    """
    Represents a static route on the gateway (``routing`` endpoint).

    Only next-hop routes are managed: :meth:`to_request` always sends
    ``type=static-route`` and ``static-route_type=nexthop-route`` whatever the
    instance holds, because the controller rejects routing records that lack them.
    """

    endpoint: ClassVar[str] = "routing"

    site_id: Optional[str] = None
    name: Optional[str] = None
    enabled: Optional[bool] = None
    type: Optional[str] = None
    gateway_type: Optional[str] = None
    gateway_device: Optional[str] = None
    static_route_network: Optional[str] = api_field("static-route_network")
    static_route_nexthop: Optional[str] = api_field("static-route_nexthop")
    static_route_distance: Optional[int] = api_field("static-route_distance")
    static_route_interface: Optional[str] = api_field("static-route_interface")
    static_route_type: Optional[str] = api_field("static-route_type")

    def to_request(self, resource_id: Optional[str] = None) -> Dict[str, Any]:
        request: Dict[str, Any] = {}
        if resource_id is not None:
            request["_id"] = resource_id
        request.update({
            "name": self.name or "",
            "type": STATIC_ROUTE_TYPE,
            "enabled": True if self.enabled is None else self.enabled,
            "static-route_network": self.static_route_network or "",
            "static-route_nexthop": self.static_route_nexthop or "",
            "static-route_type": NEXTHOP_ROUTE,
            "static-route_distance": (
                DEFAULT_DISTANCE if self.static_route_distance is None else self.static_route_distance
            ),
        })
        return request
