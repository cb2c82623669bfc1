"""Tests for ControllerConfig."""

from unittest.mock import patch

import pytest

from unifi_network_api import ControllerConfig, UnifiClient
from unifi_network_api.config import DEFAULT_HOST


@pytest.fixture
def env_file(tmp_path):
    path = tmp_path / ".env"
    path.write_text("")
    return path


def test_config_load_from_env_vars(env_file):
    # Arrange
    env = {
        "UNIFI_HOST": "https://10.0.0.1",
        "UNIFI_API_KEY": "env-api-key",
        "UNIFI_SITE": "lab",
        "UNIFI_INSECURE": "true",
        "UNIFI_STANDALONE": "1",
        "UNIFI_TIMEOUT": "12.5",
    }
    with patch.dict("os.environ", env, clear=True):

        # Act
        config = ControllerConfig.load(env_file)

    # Assert
    assert config.host == "https://10.0.0.1"
    assert config.api_key == "env-api-key"
    assert config.uses_api_key
    assert config.site == "lab"
    assert config.allow_insecure is True
    assert config.is_standalone is True
    assert config.timeout == 12.5
    assert config.max_attempts == 5


def test_config_load_from_dotenv_file(env_file):
    # Arrange
    env_file.write_text("UNIFI_USERNAME=admin\nUNIFI_PASSWORD=secret\n")
    with patch.dict("os.environ", {}, clear=True):

        # Act
        config = ControllerConfig.load(env_file)

    # Assert: defaults apply where nothing is set
    assert config.host == DEFAULT_HOST
    assert (config.username, config.password) == ("admin", "secret")
    assert config.site == "default"
    assert not config.uses_api_key


def test_environment_wins_over_dotenv_file(env_file):
    env_file.write_text("UNIFI_API_KEY=from-file\n")
    with patch.dict("os.environ", {"UNIFI_API_KEY": "from-env"}, clear=True):
        config = ControllerConfig.load(env_file)

    assert config.api_key == "from-env"


def test_overrides_win(env_file):
    with patch.dict("os.environ", {"UNIFI_API_KEY": "k"}, clear=True):
        config = ControllerConfig.load(env_file, site="branch", max_attempts=3, username=None)

    assert (config.site, config.max_attempts) == ("branch", 3)


def test_unknown_override_rejected(env_file):
    with patch.dict("os.environ", {"UNIFI_API_KEY": "k"}, clear=True):
        with pytest.raises(ValueError, match="Unknown configuration option"):
            ControllerConfig.load(env_file, sitename="x")


def test_missing_credentials(env_file):
    with patch.dict("os.environ", {}, clear=True):
        with pytest.raises(ValueError, match="api_key or username and password"):
            ControllerConfig.load(env_file)


@pytest.mark.parametrize("kwargs", [
    {"max_attempts": 0},
    {"max_attempts": 11},
    {"backoff_min": 5, "backoff_max": 1},
    {"timeout": 0},
    {"host": ""},
])
def test_invalid_settings(kwargs):
    config = ControllerConfig(api_key="k", **kwargs)

    with pytest.raises(ValueError):
        config.validate()


def test_empty_site_becomes_default():
    config = ControllerConfig(api_key="k", site="")

    config.validate()

    assert config.site == "default"


def test_client_rejects_missing_credentials(transport):
    with pytest.raises(ValueError):
        UnifiClient("https://unifi.local", transport=transport)
    transport.session.request.assert_not_called()


def test_client_from_config(transport):
    config = ControllerConfig(host="https://unifi.local", api_key="k", site="lab", is_standalone=True)

    client = UnifiClient.from_config(config, transport=transport)

    assert client.site == "lab"
    assert client.auth.is_standalone
    assert client.transport is transport
