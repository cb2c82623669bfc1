from dataclasses import dataclass
from typing import ClassVar, List, Optional

from .base import UnifiResource


@dataclass
class UnifiPortForward(UnifiResource):
    """A destination NAT (port forwarding) rule on the gateway."""

    endpoint: ClassVar[str] = "portforward"

    site_id: Optional[str] = None
    name: Optional[str] = None
    enabled: Optional[bool] = None
    pfwd_interface: Optional[str] = None  # 'wan', 'wan2', 'both'
    proto: Optional[str] = None  # 'tcp', 'udp', 'tcp_udp'
    src: Optional[str] = None  # Allowed source, 'any' or a CIDR
    dst_port: Optional[str] = None
    fwd: Optional[str] = None  # Internal IP to forward to
    fwd_port: Optional[str] = None
    log: Optional[bool] = None
    destination_ip: Optional[str] = None
    destination_ips: Optional[List[str]] = None
    src_limiting_enabled: Optional[bool] = None
