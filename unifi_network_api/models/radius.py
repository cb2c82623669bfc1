from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional

from .base import BaseUnifiModel, UnifiResource


@dataclass
class UnifiRadiusServer(BaseUnifiModel):
    """One authentication or accounting server of a RADIUS profile."""

    ip: Optional[str] = None
    port: Optional[int] = None
    x_secret: Optional[str] = field(default=None, repr=False)


@dataclass
class UnifiRadiusProfile(UnifiResource):
    """
    Represents a RADIUS profile used by WPA-Enterprise WLANs and 802.1X ports.

    Attributes:
        use_usg_auth_server: Use the gateway's built-in RADIUS server for authentication.
        use_usg_acct_server: Use the gateway's built-in RADIUS server for accounting.
        auth_servers: External authentication servers.
        acct_servers: External accounting servers.
        vlan_enabled: Whether RADIUS-assigned VLANs are honoured.
        vlan_wlan_mode: RADIUS VLAN mode for wireless clients ('disabled', 'optional', 'required').
        interim_update_interval: Accounting interim update interval in seconds.
    """

    endpoint: ClassVar[str] = "radiusprofile"
    _nested_models: ClassVar[Dict[str, Any]] = {
        "auth_servers": UnifiRadiusServer,
        "acct_servers": UnifiRadiusServer,
    }

    site_id: Optional[str] = None
    name: Optional[str] = None
    use_usg_acct_server: Optional[bool] = None
    use_usg_auth_server: Optional[bool] = None
    vlan_enabled: Optional[bool] = None
    vlan_wlan_mode: Optional[str] = None
    acct_servers: Optional[List[UnifiRadiusServer]] = None
    auth_servers: Optional[List[UnifiRadiusServer]] = None
    interim_update_enabled: Optional[bool] = None
    interim_update_interval: Optional[int] = None
    attr_hidden_id: Optional[str] = None
    attr_no_delete: Optional[bool] = None
    attr_no_edit: Optional[bool] = None
