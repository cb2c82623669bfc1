from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional

from .base import UnifiResource


@dataclass
class UnifiWlanConf(UnifiResource):
    """
    Represents a WLAN (SSID) configuration entry.

    Attributes:
        name: The SSID (network name) of the WLAN.
        security: Security mode (e.g., 'open', 'wpapsk', 'wpaeap').
        wpa_mode: WPA mode (e.g., 'wpa2').
        wpa_enc: WPA encryption type (e.g., 'ccmp').
        x_passphrase: The WPA pre-shared key. Hidden from repr and masked in logs.
        networkconf_id: Identifier of the network the SSID bridges into.
        usergroup_id: Identifier of the user group (bandwidth limits) for clients.
        ap_group_ids: AP group IDs the WLAN is broadcast on.
        ap_group_mode: 'all' or 'groups'.
        wlan_bands: Bands the WLAN operates on (e.g., ['2g', '5g']).
        radiusprofile_id: RADIUS profile used for WPA-Enterprise or MAC auth.
        pmf_mode: Protected Management Frames mode ('disabled', 'optional', 'required').
        minrate_*: Minimum data rate control per band.
        dtim_*: DTIM period per band.
    """

    endpoint: ClassVar[str] = "wlanconf"

    site_id: Optional[str] = None
    name: Optional[str] = None
    enabled: Optional[bool] = None

    # Security
    security: Optional[str] = None
    wpa_mode: Optional[str] = None
    wpa_enc: Optional[str] = None
    wpa3_support: Optional[bool] = None
    wpa3_transition: Optional[bool] = None
    wpa3_enhanced_192: Optional[bool] = None
    wpa3_fast_roaming: Optional[bool] = None
    x_passphrase: Optional[str] = field(default=None, repr=False)
    x_iapp_key: Optional[str] = field(default=None, repr=False)
    passphrase_autogenerated: Optional[bool] = None
    private_preshared_keys: Optional[List[Dict[str, Any]]] = None
    private_preshared_keys_enabled: Optional[bool] = None
    pmf_mode: Optional[str] = None

    # Network binding
    networkconf_id: Optional[str] = None
    usergroup_id: Optional[str] = None
    is_guest: Optional[bool] = None
    hide_ssid: Optional[bool] = None
    wlan_band: Optional[str] = None
    wlan_bands: Optional[List[str]] = None
    ap_group_ids: Optional[List[str]] = None
    ap_group_mode: Optional[str] = None
    vlan: Optional[int] = None
    vlan_enabled: Optional[bool] = None

    # MAC filtering
    mac_filter_enabled: Optional[bool] = None
    mac_filter_list: Optional[List[str]] = None
    mac_filter_policy: Optional[str] = None  # 'allow' or 'deny'

    # RADIUS
    radiusprofile_id: Optional[str] = None
    radius_das_enabled: Optional[bool] = None
    radius_mac_auth_enabled: Optional[bool] = None
    radius_macacl_format: Optional[str] = None

    # Scheduling
    schedule_enabled: Optional[bool] = None
    schedule: Optional[List[str]] = None
    schedule_with_duration: Optional[List[Dict[str, Any]]] = None
    setting_preference: Optional[str] = None

    # Minimum data rates
    minrate_ng_enabled: Optional[bool] = None
    minrate_ng_data_rate_kbps: Optional[int] = None
    minrate_ng_advertising_rates: Optional[bool] = None
    minrate_na_enabled: Optional[bool] = None
    minrate_na_data_rate_kbps: Optional[int] = None
    minrate_na_advertising_rates: Optional[bool] = None
    minrate_setting_preference: Optional[str] = None

    # Radio behaviour
    no2ghz_oui: Optional[bool] = None
    no_ipv6_ndp: Optional[bool] = None
    optimize_iot_wifi_connectivity: Optional[bool] = None
    bcastenhance_enabled: Optional[bool] = None
    mcastenhance_enabled: Optional[bool] = None
    group_rekey: Optional[int] = None  # Seconds
    dtim_mode: Optional[str] = None
    dtim_na: Optional[int] = None
    dtim_ng: Optional[int] = None
    dtim_6e: Optional[int] = None
    uapsd_enabled: Optional[bool] = None
    fast_roaming_enabled: Optional[bool] = None
    proxy_arp: Optional[bool] = None
    bss_transition: Optional[bool] = None
    l2_isolation: Optional[bool] = None
    iapp_enabled: Optional[bool] = None
