"""Tests for model parsing and request bodies."""

import pytest

from unifi_network_api import (
    UnifiApGroup,
    UnifiDecodeError,
    UnifiNetworkConf,
    UnifiRadiusProfile,
    UnifiStaticDns,
    UnifiStaticRoute,
    UnifiTrafficRule,
    UnifiWlanConf,
)
from unifi_network_api.models.base import parse_model, parse_models
from unifi_network_api.models.trafficrule import UnifiTrafficRuleTarget
from unifi_network_api.utils import normalize_mac


def test_static_dns_defaults():
    # Act
    body = UnifiStaticDns(key="nas.lan", value="10.0.0.5", record_type="").to_request()

    # Assert: record type falls back to A, numeric fields are always sent
    assert body == {
        "key": "nas.lan",
        "value": "10.0.0.5",
        "record_type": "A",
        "enabled": True,
        "ttl": 0,
        "port": 0,
        "priority": 0,
        "weight": 0,
    }


def test_static_dns_srv_fields():
    record = UnifiStaticDns(
        key="_sip._tcp.lan", value="pbx.lan", record_type="SRV",
        ttl=300, port=5060, priority=10, weight=5,
    )

    body = record.to_request()

    assert (body["ttl"], body["port"], body["priority"], body["weight"]) == (300, 5060, 10, 5)


def test_static_dns_ignores_port_for_a_records():
    body = UnifiStaticDns(key="a.lan", value="10.0.0.1", port=53, priority=1, ttl=-5).to_request()

    assert (body["ttl"], body["port"], body["priority"]) == (0, 0, 0)


def test_static_dns_update_carries_id():
    body = UnifiStaticDns(key="a.lan", value="10.0.0.1").to_request("d1")

    assert next(iter(body)) == "_id"
    assert body["_id"] == "d1"


def test_static_route_defaults():
    # Arrange
    route = UnifiStaticRoute(
        name="lab", static_route_network="10.10.0.0/16", static_route_nexthop="192.168.1.2",
        type="interface-route",
    )

    # Act
    body = route.to_request()

    # Assert: fixed route kind, enabled with distance 1 unless set
    assert body == {
        "name": "lab",
        "type": "static-route",
        "enabled": True,
        "static-route_network": "10.10.0.0/16",
        "static-route_nexthop": "192.168.1.2",
        "static-route_type": "nexthop-route",
        "static-route_distance": 1,
    }
    assert route.to_request("r1")["_id"] == "r1"


def test_static_route_parses_hyphenated_keys():
    route = UnifiStaticRoute.from_dict({
        "_id": "r1",
        "static-route_network": "10.0.0.0/8",
        "static-route_distance": 5,
        "gateway_type": "default",
    })

    assert route.static_route_network == "10.0.0.0/8"
    assert route.static_route_distance == 5
    assert route._extra_fields == {}


def test_traffic_rule_without_targets_applies_to_all_clients():
    # Act
    body = UnifiTrafficRule(name="No games", action="BLOCK", matching_target="APP", app_ids=[5]).to_request()

    # Assert
    assert body["target_devices"] == [{"type": "ALL_CLIENTS"}]
    assert body["enabled"] is True
    assert body["description"] == ""
    assert body["app_ids"] == [5]


def test_traffic_rule_keeps_explicit_targets():
    rule = UnifiTrafficRule(
        name="kid", action="BLOCK", matching_target="INTERNET", enabled=False, _id="t1",
        target_devices=[UnifiTrafficRuleTarget(client_mac="aa:bb:cc:dd:ee:ff", type="CLIENT")],
    )

    body = rule.to_request("t1")

    assert body["target_devices"] == [{"client_mac": "aa:bb:cc:dd:ee:ff", "type": "CLIENT"}]
    assert body["enabled"] is False
    assert "_id" not in body


def test_ap_group_body_has_exactly_three_keys():
    assert UnifiApGroup(name="Upstairs", _id="a1", attr_no_delete=True).to_request() == {
        "name": "Upstairs",
        "device_macs": [],
        "for_wlanconf": False,
    }


def test_extra_fields_survive_round_trip():
    # Arrange
    data = {"_id": "n1", "name": "LAN", "some_new_setting": {"enabled": True}}

    # Act
    network = UnifiNetworkConf.from_dict(data)

    # Assert
    assert network._extra_fields == {"some_new_setting": {"enabled": True}}
    assert network.to_dict() == data


def test_nested_models_are_parsed():
    profile = UnifiRadiusProfile.from_dict({
        "_id": "p1",
        "name": "corp",
        "auth_servers": [{"ip": "10.0.0.2", "port": 1812, "x_secret": "s3cret"}],
    })

    assert profile.auth_servers[0].ip == "10.0.0.2"
    assert profile.to_dict()["auth_servers"][0]["x_secret"] == "s3cret"


def test_secrets_hidden_from_repr():
    wlan = UnifiWlanConf(name="Home", x_passphrase="hunter22")

    assert "hunter22" not in repr(wlan)


def test_parse_models_accepts_single_object():
    assert [n.id for n in parse_models(UnifiNetworkConf, {"_id": "n1"})] == ["n1"]
    assert parse_models(UnifiNetworkConf, None) == []


def test_parse_models_rejects_scalars():
    with pytest.raises(UnifiDecodeError):
        parse_models(UnifiNetworkConf, [1, 2])
    with pytest.raises(UnifiDecodeError):
        parse_model(UnifiNetworkConf, [])


@pytest.mark.parametrize("mac", ["AA:BB:CC:DD:EE:FF", "aa-bb-cc-dd-ee-ff", "aabb.ccdd.eeff", "AABBCCDDEEFF"])
def test_normalize_mac(mac):
    assert normalize_mac(mac) == "aa:bb:cc:dd:ee:ff"


@pytest.mark.parametrize("mac", ["", "aa:bb:cc", "zz:bb:cc:dd:ee:ff", "aa:bb:cc:dd:ee:ff:00"])
def test_normalize_mac_rejects_invalid(mac):
    with pytest.raises(ValueError):
        normalize_mac(mac)
