"""
Models for firewall rules and firewall groups.
"""

from dataclasses import dataclass
from typing import ClassVar, List, Optional

from .base import UnifiResource


@dataclass
class UnifiFirewallRule(UnifiResource):
    """
    Represents a legacy (ruleset-based) firewall rule.

    Attributes:
        ruleset: Chain the rule belongs to (e.g., 'LAN_IN', 'WAN_OUT').
        rule_index: Position within the ruleset; user rules start at 2000 or 4000.
        action: 'accept', 'drop' or 'reject'.
        src_firewallgroup_ids: Firewall group IDs matched as source.
        dst_firewallgroup_ids: Firewall group IDs matched as destination.
    """

    endpoint: ClassVar[str] = "firewallrule"

    site_id: Optional[str] = None
    name: Optional[str] = None
    enabled: Optional[bool] = None
    rule_index: Optional[int] = None
    ruleset: Optional[str] = None
    action: Optional[str] = None
    protocol: Optional[str] = None
    protocol_match_excepted: Optional[bool] = None
    protocol_v6: Optional[str] = None
    icmp_typename: Optional[str] = None
    icmp_v6_typename: Optional[str] = None
    logging: Optional[bool] = None
    state_established: Optional[bool] = None
    state_invalid: Optional[bool] = None
    state_new: Optional[bool] = None
    state_related: Optional[bool] = None
    ipsec: Optional[str] = None
    src_firewallgroup_ids: Optional[List[str]] = None
    src_mac_address: Optional[str] = None
    src_address: Optional[str] = None
    src_networkconf_id: Optional[str] = None
    src_networkconf_type: Optional[str] = None
    src_port: Optional[str] = None
    dst_firewallgroup_ids: Optional[List[str]] = None
    dst_address: Optional[str] = None
    dst_networkconf_id: Optional[str] = None
    dst_networkconf_type: Optional[str] = None
    dst_port: Optional[str] = None


@dataclass
class UnifiFirewallGroup(UnifiResource):
    """A named set of addresses or ports referenced by firewall rules."""

    endpoint: ClassVar[str] = "firewallgroup"

    site_id: Optional[str] = None
    name: Optional[str] = None
    group_type: Optional[str] = None  # 'address-group', 'ipv6-address-group', 'port-group'
    group_members: Optional[List[str]] = None
