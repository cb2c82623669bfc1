"""Tests for logging helpers."""

import logging

from unifi_network_api.logging import MASK, get_logger, log_api_payload, mask_secrets


def test_get_logger_is_namespaced():
    assert get_logger().name == "unifi_network_api"
    assert get_logger("unifi_network_api.crud").name == "unifi_network_api.crud"
    assert get_logger("custom").name == "unifi_network_api.custom"


def test_mask_secrets_recurses():
    data = {
        "name": "Home",
        "x_passphrase": "hunter22",
        "auth_servers": [{"ip": "10.0.0.2", "x_secret": "s3cret"}],
        "password": "pw",
    }

    masked = mask_secrets(data)

    assert masked["name"] == "Home"
    assert masked["x_passphrase"] == MASK
    assert masked["auth_servers"][0] == {"ip": "10.0.0.2", "x_secret": MASK}
    assert masked["password"] == MASK
    assert data["x_passphrase"] == "hunter22"


def test_payload_log_never_contains_secrets(caplog):
    logger = get_logger("tests")

    with caplog.at_level(logging.DEBUG, logger="unifi_network_api"):
        log_api_payload(logger, "POST", "https://unifi.local/x", {"name": "Home", "x_passphrase": "hunter22"})

    assert "Home" in caplog.text
    assert "hunter22" not in caplog.text
