"""
Construction-time configuration for the UniFi Network API client.
"""

import os
from dataclasses import dataclass, fields, replace
from typing import Optional

from dotenv import load_dotenv

DEFAULT_HOST = "https://localhost:8443"
DEFAULT_SITE = "default"
DEFAULT_TIMEOUT = 30
DEFAULT_MAX_ATTEMPTS = 5
DEFAULT_BACKOFF_MIN = 1
DEFAULT_BACKOFF_MAX = 30

_TRUE_VALUES = ("1", "true", "yes", "on")


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in _TRUE_VALUES


@dataclass
class ControllerConfig:
    """
    Settings consumed by :class:`~unifi_network_api.api_client.UnifiClient`.

    Either ``api_key`` or ``username``/``password`` must be provided. When an
    API key is present it wins and no interactive login is performed.
    """

    host: str = DEFAULT_HOST
    username: Optional[str] = None
    password: Optional[str] = None
    api_key: Optional[str] = None
    site: str = DEFAULT_SITE
    allow_insecure: bool = False
    is_standalone: bool = False
    timeout: float = DEFAULT_TIMEOUT
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    backoff_min: float = DEFAULT_BACKOFF_MIN
    backoff_max: float = DEFAULT_BACKOFF_MAX

    @classmethod
    def load(cls, env_file: Optional[str] = None, **overrides) -> "ControllerConfig":
        """
        Load configuration from a ``.env`` file, the environment and explicit overrides.

        Values already present in the environment are not replaced by the
        ``.env`` file. Overrides that are ``None`` are ignored.

        Args:
            env_file: Optional path to a dotenv file. If None, python-dotenv
                      searches for a ``.env`` file from the working directory.
            **overrides: Field values that take precedence over the environment.

        Returns:
            A validated ControllerConfig.

        Raises:
            ValueError: If an override names an unknown field or the result is invalid.
        """
        load_dotenv(env_file, override=False)

        timeout = os.getenv("UNIFI_TIMEOUT")
        config = cls(
            host=os.getenv("UNIFI_HOST") or DEFAULT_HOST,
            username=os.getenv("UNIFI_USERNAME") or None,
            password=os.getenv("UNIFI_PASSWORD") or None,
            api_key=os.getenv("UNIFI_API_KEY") or None,
            site=os.getenv("UNIFI_SITE") or DEFAULT_SITE,
            allow_insecure=_env_bool("UNIFI_INSECURE"),
            is_standalone=_env_bool("UNIFI_STANDALONE"),
            timeout=float(timeout) if timeout else DEFAULT_TIMEOUT,
        )

        known = {f.name for f in fields(cls)}
        unknown = set(overrides) - known
        if unknown:
            raise ValueError(f"Unknown configuration option(s): {', '.join(sorted(unknown))}")
        config = replace(config, **{k: v for k, v in overrides.items() if v is not None})
        config.validate()
        return config

    @property
    def uses_api_key(self) -> bool:
        return bool(self.api_key)

    def validate(self) -> None:
        """
        Check the configuration for obvious mistakes.

        Raises:
            ValueError: If the host or credentials are missing, or retry settings are out of range.
        """
        if not self.host:
            raise ValueError("A controller host URL is required")
        if not self.site:
            self.site = DEFAULT_SITE
        if not self.api_key and not (self.username and self.password):
            raise ValueError(
                "Either api_key or username and password must be provided")
        if self.max_attempts < 1 or self.max_attempts > 10:
            raise ValueError("max_attempts must be between 1 and 10")
        if self.backoff_min < 0 or self.backoff_max < self.backoff_min:
            raise ValueError("backoff_max must be greater than or equal to backoff_min >= 0")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
