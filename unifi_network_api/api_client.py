from typing import List, Optional, Type, TypeVar

from . import crud
from .config import ControllerConfig
from .exceptions import UnifiAuthenticationError
from .logging import get_logger
from .models import (
    UnifiApGroup,
    UnifiFirewallGroup,
    UnifiFirewallRule,
    UnifiNetworkConf,
    UnifiPortConf,
    UnifiPortForward,
    UnifiRadiusProfile,
    UnifiStaticDns,
    UnifiStaticRoute,
    UnifiTrafficRule,
    UnifiUser,
    UnifiUserGroup,
    UnifiWlanConf,
)
from .models.base import RequestBody, UnifiResource
from .request import RequestDescriptor, RequestEngine
from .routing import Dialect
from .session import AuthSession
from .transport import Transport
from .utils import normalize_mac

logger = get_logger(__name__)

T = TypeVar("T", bound=UnifiResource)


class UnifiClient:
    """
    Client for managing the configuration of a UniFi Network Application site.

    Every resource kind gets five operations (create/get/list/update/delete)
    that accept and return the kind's model. Nothing is cached: every read
    goes to the controller.

    Note:
        This client talks to the UniFi Network Application's **undocumented**
        private API. Response structures and endpoint behavior may change
        without notice between controller versions. Fields a model does not
        declare are kept in the ``_extra_fields`` attribute of returned objects.
    """

    def __init__(
        self,
        controller_url,
        username=None,
        password=None,
        api_key=None,
        site="default",
        verify_ssl=True,
        is_standalone=False,
        timeout=30,
        max_attempts=5,
        backoff_min=1,
        backoff_max=30,
        transport: Optional[Transport] = None,
    ):
        """
        Initialize the client and, unless an API key is given, authenticate.

        Args:
            controller_url: Base URL of the controller (e.g., https://192.168.1.1).
            username: Local admin username, used when no API key is given.
            password: Password for ``username``.
            api_key: Static API key. When set, no login is performed and every
                     request carries the ``X-API-KEY`` header.
            site: Site short name. Defaults to "default".
            verify_ssl: Whether to verify TLS certificates. Can be:
                       - True: Verify SSL certificates (default, recommended)
                       - False: Disable verification (insecure, not recommended)
                       - str: Path to a CA bundle file or directory with certificates of trusted CAs
            is_standalone: True for a standalone Network Application; False (default)
                           for UniFi OS consoles, where the API sits behind /proxy/network.
            timeout: Per-request timeout in seconds.
            max_attempts: Attempts for requests failing at the connection level (1-10).
            backoff_min: Minimum delay in seconds between attempts.
            backoff_max: Maximum delay in seconds between attempts.
            transport: Optional pre-built Transport; when given, the TLS and retry
                       arguments above are ignored.

        Raises:
            ValueError: If the arguments are invalid.
            UnifiAuthenticationError: If login fails.
        """
        config = ControllerConfig(
            host=controller_url,
            username=username,
            password=password,
            api_key=api_key,
            site=site,
            allow_insecure=verify_ssl is False,
            is_standalone=is_standalone,
            timeout=timeout,
            max_attempts=max_attempts,
            backoff_min=backoff_min,
            backoff_max=backoff_max,
        )
        config.validate()

        logger.debug(
            f"Initializing UnifiClient with URL: {controller_url}, site: {config.site}, "
            f"is_standalone: {is_standalone}, api_key: {'yes' if api_key else 'no'}"
        )
        self.controller_url = controller_url.rstrip("/")
        self.site = config.site
        self.is_standalone = is_standalone

        owns_transport = transport is None
        self.transport = transport or Transport(
            verify_ssl=verify_ssl,
            timeout=timeout,
            max_attempts=max_attempts,
            backoff_min=backoff_min,
            backoff_max=backoff_max,
        )
        self.auth = AuthSession(
            self.transport,
            self.controller_url,
            site=self.site,
            is_standalone=is_standalone,
            username=username,
            password=password,
            api_key=api_key,
        )
        self.engine = RequestEngine(self.auth)

        if not config.uses_api_key:
            try:
                self.login()
            except UnifiAuthenticationError:
                if owns_transport:
                    self.transport.close()
                raise

    @classmethod
    def from_config(cls, config: ControllerConfig, transport: Optional[Transport] = None) -> "UnifiClient":
        """Create a client from a :class:`ControllerConfig`."""
        config.validate()
        return cls(
            config.host,
            username=config.username,
            password=config.password,
            api_key=config.api_key,
            site=config.site,
            verify_ssl=not config.allow_insecure,
            is_standalone=config.is_standalone,
            timeout=config.timeout,
            max_attempts=config.max_attempts,
            backoff_min=config.backoff_min,
            backoff_max=config.backoff_max,
            transport=transport,
        )

    @classmethod
    def from_env(cls, env_file: Optional[str] = None, **overrides) -> "UnifiClient":
        """Create a client from UNIFI_* environment variables (see :meth:`ControllerConfig.load`)."""
        return cls.from_config(ControllerConfig.load(env_file, **overrides))

    def __enter__(self) -> "UnifiClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Abort retries still pending and close the HTTP session."""
        self.transport.close()

    def login(self) -> None:
        """
        Authenticate (again) with username and password.

        A no-op in API-key mode.

        Raises:
            UnifiAuthenticationError: If authentication fails.
        """
        self.auth.login()

    # Generic operations

    def create(self, model: Type[T], item: RequestBody) -> T:
        """
        Create a record of kind ``model``.

        Args:
            model: Resource model class, e.g. ``UnifiNetworkConf``.
            item: A model instance, or a raw dictionary sent as-is.

        Returns:
            The record as stored by the controller, with its ``_id``.

        Raises:
            UnifiEmptyResponseError: If the controller returned no record.
            UnifiAPIError: If the controller rejected the request.
            UnifiTransportError: If the controller could not be reached.
        """
        return crud.create(self.engine, model, item)

    def get(self, model: Type[T], resource_id: str) -> T:
        """
        Fetch one record of kind ``model`` by id.

        Raises:
            UnifiNotFoundError: If the controller returned no record.
            UnifiAPIError: If the controller rejected the request.
        """
        return crud.get(self.engine, model, resource_id)

    def list(self, model: Type[T]) -> List[T]:
        """Fetch every record of kind ``model``. An empty collection yields an empty list."""
        return crud.list_all(self.engine, model)

    def update(self, model: Type[T], resource_id: str, item: RequestBody) -> T:
        """
        Replace record ``resource_id`` of kind ``model`` and return its new state.

        Raises:
            UnifiNotFoundError: If the controller returned no record and the read-back found none.
            UnifiAPIError: If the controller rejected the request.
        """
        return crud.update(self.engine, model, resource_id, item)

    def delete(self, model: Type[T], resource_id: str) -> None:
        crud.delete(self.engine, model, resource_id)

    def find(self, model: Type[T], resource_id: Optional[str] = None, name: Optional[str] = None) -> T:
        """
        Find a record of kind ``model`` by id or name among all records.

        Raises:
            ValueError: If neither ``resource_id`` nor ``name`` is given.
            UnifiNotFoundError: If nothing matches.
        """
        return crud.find_resource(self.engine, model, resource_id=resource_id, name=name)

    # Networks

    def create_network(self, network: UnifiNetworkConf) -> UnifiNetworkConf:
        return self.create(UnifiNetworkConf, network)

    def get_network(self, network_id: str) -> UnifiNetworkConf:
        return self.get(UnifiNetworkConf, network_id)

    def list_networks(self) -> List[UnifiNetworkConf]:
        return self.list(UnifiNetworkConf)

    def update_network(self, network_id: str, network: UnifiNetworkConf) -> UnifiNetworkConf:
        return self.update(UnifiNetworkConf, network_id, network)

    def delete_network(self, network_id: str) -> None:
        self.delete(UnifiNetworkConf, network_id)

    # Firewall rules

    def create_firewall_rule(self, rule: UnifiFirewallRule) -> UnifiFirewallRule:
        return self.create(UnifiFirewallRule, rule)

    def get_firewall_rule(self, rule_id: str) -> UnifiFirewallRule:
        return self.get(UnifiFirewallRule, rule_id)

    def list_firewall_rules(self) -> List[UnifiFirewallRule]:
        return self.list(UnifiFirewallRule)

    def update_firewall_rule(self, rule_id: str, rule: UnifiFirewallRule) -> UnifiFirewallRule:
        return self.update(UnifiFirewallRule, rule_id, rule)

    def delete_firewall_rule(self, rule_id: str) -> None:
        self.delete(UnifiFirewallRule, rule_id)

    # Firewall groups

    def create_firewall_group(self, group: UnifiFirewallGroup) -> UnifiFirewallGroup:
        return self.create(UnifiFirewallGroup, group)

    def get_firewall_group(self, group_id: str) -> UnifiFirewallGroup:
        return self.get(UnifiFirewallGroup, group_id)

    def list_firewall_groups(self) -> List[UnifiFirewallGroup]:
        return self.list(UnifiFirewallGroup)

    def update_firewall_group(self, group_id: str, group: UnifiFirewallGroup) -> UnifiFirewallGroup:
        return self.update(UnifiFirewallGroup, group_id, group)

    def delete_firewall_group(self, group_id: str) -> None:
        self.delete(UnifiFirewallGroup, group_id)

    # Port profiles

    def create_port_profile(self, profile: UnifiPortConf) -> UnifiPortConf:
        return self.create(UnifiPortConf, profile)

    def get_port_profile(self, profile_id: str) -> UnifiPortConf:
        return self.get(UnifiPortConf, profile_id)

    def list_port_profiles(self) -> List[UnifiPortConf]:
        return self.list(UnifiPortConf)

    def update_port_profile(self, profile_id: str, profile: UnifiPortConf) -> UnifiPortConf:
        return self.update(UnifiPortConf, profile_id, profile)

    def delete_port_profile(self, profile_id: str) -> None:
        self.delete(UnifiPortConf, profile_id)

    # WLANs

    def create_wlan(self, wlan: UnifiWlanConf) -> UnifiWlanConf:
        return self.create(UnifiWlanConf, wlan)

    def get_wlan(self, wlan_id: str) -> UnifiWlanConf:
        return self.get(UnifiWlanConf, wlan_id)

    def list_wlans(self) -> List[UnifiWlanConf]:
        return self.list(UnifiWlanConf)

    def update_wlan(self, wlan_id: str, wlan: UnifiWlanConf) -> UnifiWlanConf:
        return self.update(UnifiWlanConf, wlan_id, wlan)

    def delete_wlan(self, wlan_id: str) -> None:
        self.delete(UnifiWlanConf, wlan_id)

    # User groups

    def create_user_group(self, group: UnifiUserGroup) -> UnifiUserGroup:
        return self.create(UnifiUserGroup, group)

    def get_user_group(self, group_id: str) -> UnifiUserGroup:
        return self.get(UnifiUserGroup, group_id)

    def list_user_groups(self) -> List[UnifiUserGroup]:
        return self.list(UnifiUserGroup)

    def update_user_group(self, group_id: str, group: UnifiUserGroup) -> UnifiUserGroup:
        return self.update(UnifiUserGroup, group_id, group)

    def delete_user_group(self, group_id: str) -> None:
        self.delete(UnifiUserGroup, group_id)

    # AP groups (v2)

    def create_ap_group(self, group: UnifiApGroup) -> UnifiApGroup:
        """
        Create an AP group.

        Only ``name``, ``device_macs`` and ``for_wlanconf`` are sent; unset
        values are sent as an empty list and ``False``.
        """
        return self.create(UnifiApGroup, group)

    def get_ap_group(self, group_id: str) -> UnifiApGroup:
        """Fetch an AP group, scanning the group list if the direct lookup fails."""
        return self.get(UnifiApGroup, group_id)

    def list_ap_groups(self) -> List[UnifiApGroup]:
        return self.list(UnifiApGroup)

    def update_ap_group(self, group_id: str, group: UnifiApGroup) -> UnifiApGroup:
        return self.update(UnifiApGroup, group_id, group)

    def delete_ap_group(self, group_id: str) -> None:
        self.delete(UnifiApGroup, group_id)

    # RADIUS profiles

    def create_radius_profile(self, profile: UnifiRadiusProfile) -> UnifiRadiusProfile:
        return self.create(UnifiRadiusProfile, profile)

    def get_radius_profile(self, profile_id: str) -> UnifiRadiusProfile:
        return self.get(UnifiRadiusProfile, profile_id)

    def list_radius_profiles(self) -> List[UnifiRadiusProfile]:
        return self.list(UnifiRadiusProfile)

    def update_radius_profile(self, profile_id: str, profile: UnifiRadiusProfile) -> UnifiRadiusProfile:
        return self.update(UnifiRadiusProfile, profile_id, profile)

    def delete_radius_profile(self, profile_id: str) -> None:
        self.delete(UnifiRadiusProfile, profile_id)

    # Port forwards

    def create_port_forward(self, forward: UnifiPortForward) -> UnifiPortForward:
        return self.create(UnifiPortForward, forward)

    def get_port_forward(self, forward_id: str) -> UnifiPortForward:
        return self.get(UnifiPortForward, forward_id)

    def list_port_forwards(self) -> List[UnifiPortForward]:
        return self.list(UnifiPortForward)

    def update_port_forward(self, forward_id: str, forward: UnifiPortForward) -> UnifiPortForward:
        return self.update(UnifiPortForward, forward_id, forward)

    def delete_port_forward(self, forward_id: str) -> None:
        self.delete(UnifiPortForward, forward_id)

    # Static routes

    def create_static_route(self, route: UnifiStaticRoute) -> UnifiStaticRoute:
        """
        Create a next-hop static route.

        The request always carries ``type=static-route`` and
        ``static-route_type=nexthop-route``; ``enabled`` defaults to True and
        ``static-route_distance`` to 1.
        """
        return self.create(UnifiStaticRoute, route)

    def get_static_route(self, route_id: str) -> UnifiStaticRoute:
        return self.get(UnifiStaticRoute, route_id)

    def list_static_routes(self) -> List[UnifiStaticRoute]:
        return self.list(UnifiStaticRoute)

    def update_static_route(self, route_id: str, route: UnifiStaticRoute) -> UnifiStaticRoute:
        return self.update(UnifiStaticRoute, route_id, route)

    def delete_static_route(self, route_id: str) -> None:
        self.delete(UnifiStaticRoute, route_id)

    # Static DNS records (v2)

    def create_static_dns(self, record: UnifiStaticDns) -> UnifiStaticDns:
        """
        Create a static DNS record.

        ``record_type`` defaults to "A". ``ttl``, ``port``, ``priority`` and
        ``weight`` are sent as 0 unless set; the last three are only taken from
        the record for SRV and MX records.
        """
        return self.create(UnifiStaticDns, record)

    def get_static_dns(self, record_id: str) -> UnifiStaticDns:
        return self.get(UnifiStaticDns, record_id)

    def list_static_dns(self) -> List[UnifiStaticDns]:
        return self.list(UnifiStaticDns)

    def update_static_dns(self, record_id: str, record: UnifiStaticDns) -> UnifiStaticDns:
        return self.update(UnifiStaticDns, record_id, record)

    def delete_static_dns(self, record_id: str) -> None:
        self.delete(UnifiStaticDns, record_id)

    # Traffic rules (v2)

    def create_traffic_rule(self, rule: UnifiTrafficRule) -> UnifiTrafficRule:
        """Create a traffic rule. Without target devices the rule applies to all clients."""
        return self.create(UnifiTrafficRule, rule)

    def get_traffic_rule(self, rule_id: str) -> UnifiTrafficRule:
        return self.get(UnifiTrafficRule, rule_id)

    def list_traffic_rules(self) -> List[UnifiTrafficRule]:
        return self.list(UnifiTrafficRule)

    def update_traffic_rule(self, rule_id: str, rule: UnifiTrafficRule) -> UnifiTrafficRule:
        return self.update(UnifiTrafficRule, rule_id, rule)

    def delete_traffic_rule(self, rule_id: str) -> None:
        self.delete(UnifiTrafficRule, rule_id)

    # Users (known clients)

    def create_user(self, user: UnifiUser) -> UnifiUser:
        return self.create(UnifiUser, user)

    def get_user(self, user_id: str) -> UnifiUser:
        return self.get(UnifiUser, user_id)

    def list_users(self) -> List[UnifiUser]:
        return self.list(UnifiUser)

    def update_user(self, user_id: str, user: UnifiUser) -> UnifiUser:
        return self.update(UnifiUser, user_id, user)

    def delete_user(self, mac: str) -> None:
        """
        Forget a client.

        User records cannot be deleted through the REST endpoint; the station
        manager's ``forget-sta`` command removes the record for a MAC address.

        Args:
            mac: MAC address of the client, in any common notation.

        Raises:
            ValueError: If the MAC address is invalid.
            UnifiAPIError: If the controller rejected the command.
        """
        payload = {"cmd": "forget-sta", "macs": [normalize_mac(mac)]}
        self.engine.execute(
            RequestDescriptor("POST", "stamgr", Dialect.CMD, payload),
            expect_result=False,
        )
