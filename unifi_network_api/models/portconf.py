from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional

from .base import BaseUnifiModel, UnifiResource


@dataclass
class UnifiQosProfile(BaseUnifiModel):
    """Quality of Service settings attached to a port profile."""

    qos_policies: Optional[List[Dict[str, Any]]] = None
    qos_profile_mode: Optional[str] = None


@dataclass
class UnifiPortConf(UnifiResource):
    """
    Represents a UniFi switch port profile configuration.

    Port profiles define settings that can be applied to switch ports, including
    operation mode, PoE settings, VLAN configurations, and security controls.
    """

    endpoint: ClassVar[str] = "portconf"
    _nested_models: ClassVar[Dict[str, Any]] = {"qos_profile": UnifiQosProfile}

    # Basic identification
    site_id: Optional[str] = None
    name: Optional[str] = None

    # General port settings
    setting_preference: Optional[str] = None  # 'auto' or 'manual'
    op_mode: Optional[str] = None  # 'switch', 'mirror', 'aggregate'
    autoneg: Optional[bool] = None
    full_duplex: Optional[bool] = None
    speed: Optional[int] = None  # Mbps, when autoneg is off

    # PoE settings
    poe_mode: Optional[str] = None  # 'auto', 'off', 'pasv24', 'passthrough'

    # Network configuration
    forward: Optional[str] = None  # 'all', 'native', 'customize', 'disabled'
    native_networkconf_id: Optional[str] = None
    tagged_networkconf_ids: Optional[List[str]] = None
    excluded_networkconf_ids: Optional[List[str]] = None
    voice_networkconf_id: Optional[str] = None
    multicast_router_networkconf_ids: Optional[List[str]] = None
    tagged_vlan_mgmt: Optional[str] = None

    # Port security settings
    isolation: Optional[bool] = None
    dot1x_ctrl: Optional[str] = None  # 802.1X control mode
    dot1x_idle_timeout: Optional[int] = None
    port_keepalive_enabled: Optional[bool] = None
    port_security_enabled: Optional[bool] = None
    port_security_mac_address: Optional[List[str]] = None

    # Storm control
    stormctrl_bcast_enabled: Optional[bool] = None
    stormctrl_bcast_rate: Optional[int] = None
    stormctrl_mcast_enabled: Optional[bool] = None
    stormctrl_mcast_rate: Optional[int] = None
    stormctrl_ucast_enabled: Optional[bool] = None
    stormctrl_ucast_rate: Optional[int] = None

    # Rate limiting
    egress_rate_limit_kbps_enabled: Optional[bool] = None
    egress_rate_limit_kbps: Optional[int] = None

    # Spanning Tree Protocol
    stp_port_mode: Optional[bool] = None

    # LLDP-MED settings
    lldpmed_enabled: Optional[bool] = None
    lldpmed_notify_enabled: Optional[bool] = None

    qos_profile: Optional[UnifiQosProfile] = None
