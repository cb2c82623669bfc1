from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional

from .base import BaseUnifiModel, UnifiResource


@dataclass
class UnifiWanProviderCapabilities(BaseUnifiModel):
    """ISP bandwidth capabilities advertised for a WAN network."""

    download_kilobits_per_second: Optional[int] = None
    upload_kilobits_per_second: Optional[int] = None


@dataclass
class UnifiNetworkConf(UnifiResource):
    """Represents a network configuration (LAN, VLAN, WAN, etc.) from UniFi."""

    endpoint: ClassVar[str] = "networkconf"
    _nested_models: ClassVar[Dict[str, Any]] = {
        "wan_provider_capabilities": UnifiWanProviderCapabilities,
    }

    site_id: Optional[str] = None
    name: Optional[str] = None
    purpose: Optional[str] = None  # e.g., 'corporate', 'vlan-only', 'guest', 'wan'
    enabled: Optional[bool] = None
    setting_preference: Optional[str] = None  # e.g., 'auto', 'manual'
    gateway_type: Optional[str] = None
    gateway_device: Optional[str] = None
    auto_scale_enabled: Optional[bool] = None
    attr_hidden_id: Optional[str] = None
    attr_no_delete: Optional[bool] = None

    # VLAN
    vlan: Optional[int] = None
    vlan_enabled: Optional[bool] = None
    ip_subnet: Optional[str] = None

    # DHCP server
    dhcpd_enabled: Optional[bool] = None
    dhcpd_start: Optional[str] = None
    dhcpd_stop: Optional[str] = None
    dhcpd_leasetime: Optional[int] = None  # Seconds
    dhcp_relay_enabled: Optional[bool] = None
    dhcpd_time_offset_enabled: Optional[bool] = None
    dhcpd_unifi_controller: Optional[str] = None
    dhcpd_wpad_url: Optional[str] = None
    dhcpguard_enabled: Optional[bool] = None
    dhcpd_gateway_enabled: Optional[bool] = None
    dhcpd_gateway: Optional[str] = None
    dhcpd_dns_enabled: Optional[bool] = None
    dhcpd_dns_1: Optional[str] = None
    dhcpd_dns_2: Optional[str] = None
    dhcpd_dns_3: Optional[str] = None
    dhcpd_dns_4: Optional[str] = None
    dhcpd_boot_enabled: Optional[bool] = None
    dhcpd_boot_server: Optional[str] = None
    dhcpd_boot_filename: Optional[str] = None
    dhcpd_tftp_server: Optional[str] = None
    dhcpd_ntp_enabled: Optional[bool] = None
    dhcpd_ntp_1: Optional[str] = None
    dhcpd_ntp_2: Optional[str] = None

    # WAN (only meaningful when purpose='wan')
    wan: Optional[str] = None
    wan_type: Optional[str] = None  # e.g., 'dhcp', 'static', 'pppoe'
    wan_ip: Optional[str] = None
    wan_netmask: Optional[str] = None
    wan_gateway: Optional[str] = None
    wan_networkgroup: Optional[str] = None
    wan_ip_aliases: Optional[List[str]] = None
    wan_dns_preference: Optional[str] = None
    wan_dhcp_options: Optional[List[Dict[str, Any]]] = None
    wan_dslite_remote_host: Optional[str] = None
    wan_dslite_remote_host_auto: Optional[bool] = None
    wan_provider_capabilities: Optional[UnifiWanProviderCapabilities] = None
    report_wan_event: Optional[bool] = None
    wan_type_v6: Optional[str] = None
    wan_ipv6_dns1: Optional[str] = None
    wan_ipv6_dns2: Optional[str] = None
    wan_ipv6_dns_preference: Optional[str] = None
    wan_dhcpv6_cos: Optional[int] = None
    wan_dhcpv6_pd_size_auto: Optional[bool] = None
    wan_smartq_enabled: Optional[bool] = None
    wan_egress_qos: Optional[str] = None
    wan_dhcp_cos: Optional[int] = None
    wan_failover_priority: Optional[int] = None
    wan_load_balance_type: Optional[str] = None
    wan_load_balance_weight: Optional[int] = None
    wan_vlan_enabled: Optional[bool] = None
    wan_vlan: Optional[int] = None

    # IPv6
    ipv6_setting_preference: Optional[str] = None
    ipv6_wan_delegation_type: Optional[str] = None

    # Multicast
    igmp_snooping: Optional[bool] = None
    igmp_proxy_upstream: Optional[bool] = None
    igmp_proxy_for: Optional[str] = None
    domain_name: Optional[str] = None

    # Access and NAT
    internet_access_enabled: Optional[bool] = None
    intra_network_access_enabled: Optional[bool] = None
    is_nat: Optional[bool] = None
    nat_outbound_ip_addresses: Optional[List[str]] = None
    mac_override_enabled: Optional[bool] = None
    mdns_enabled: Optional[bool] = None
    lte_lan_enabled: Optional[bool] = None
    upnp_lan_enabled: Optional[bool] = None
    pptpc_server_enabled: Optional[bool] = None

    # Routing and zones
    networkgroup: Optional[str] = None  # e.g., 'LAN', 'WAN', 'VPN'
    routing_table_id: Optional[int] = None
    single_network_lan: Optional[str] = None
    firewall_zone_id: Optional[str] = None
