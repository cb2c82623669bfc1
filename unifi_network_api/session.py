"""
Credential state, login handshake and per-request auth headers.
"""

import base64
import binascii
import json
import threading
from contextlib import contextmanager
from typing import Dict, Optional

from .exceptions import UnifiAuthenticationError, UnifiTransportError
from .logging import get_logger
from .routing import login_path, self_path
from .transport import Transport

logger = get_logger(__name__)

API_KEY_HEADER = "X-API-KEY"
CSRF_HEADER = "X-Csrf-Token"
CSRF_METHODS = frozenset({"POST", "PUT", "DELETE"})


class ReadWriteLock:
    """Many concurrent readers or a single writer; writers are not starved."""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self):
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self):
        with self._cond:
            self._writers_waiting += 1
            while self._writer or self._readers:
                self._cond.wait()
            self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class AuthSession:
    """
    Shared session state for one controller and site.

    The cached CSRF token and the authenticated flag are the only mutable
    state; they are read under the shared lock and replaced under the
    exclusive lock. No lock is held while a request is in flight.
    """

    def __init__(
        self,
        transport: Transport,
        controller_url: str,
        site: str = "default",
        is_standalone: bool = False,
        username: Optional[str] = None,
        password: Optional[str] = None,
        api_key: Optional[str] = None,
    ):
        self.transport = transport
        self.controller_url = controller_url.rstrip("/")
        self.site = site or "default"
        self.is_standalone = is_standalone
        self.api_key = api_key or None
        self._username = username
        self._password = password

        self._lock = ReadWriteLock()
        self._csrf_token = ""
        self._authenticated = False

    @property
    def uses_api_key(self) -> bool:
        return self.api_key is not None

    @property
    def csrf_token(self) -> str:
        with self._lock.read():
            return self._csrf_token

    @property
    def is_authenticated(self) -> bool:
        with self._lock.read():
            return self._authenticated

    def is_ready(self) -> bool:
        """True when requests may be sent: API-key mode or a successful login."""
        return self.uses_api_key or self.is_authenticated

    def login(self) -> None:
        """
        Authenticate with the controller using username and password.

        In API-key mode this is a no-op. Otherwise the credentials are POSTed
        to ``/api/auth/login``; on HTTP 200 the session-introspection endpoint
        is queried once to harvest the CSRF token used on mutating requests.

        Raises:
            UnifiAuthenticationError: If the controller rejects the credentials
                                      or cannot be reached.
        """
        if self.uses_api_key:
            logger.debug("API key configured, skipping interactive login.")
            return

        login_uri = f"{self.controller_url}{login_path()}"
        logger.debug(f"Attempting authentication with username: {self._username} at {login_uri}")
        payload = json.dumps({"username": self._username, "password": self._password}).encode("utf-8")
        try:
            response = self.transport.send(
                "POST",
                login_uri,
                headers={"Content-Type": "application/json", "Accept": "application/json"},
                data=payload,
            )
        except UnifiTransportError as e:
            error_msg = f"Authentication failed: {e}"
            logger.error(error_msg)
            raise UnifiAuthenticationError(error_msg) from e

        if response.status_code != 200:
            error_msg = f"login failed with status: {response.status_code}"
            logger.error(error_msg)
            raise UnifiAuthenticationError(error_msg)

        token = self._fetch_csrf_token()

        with self._lock.write():
            self._authenticated = True
            self._csrf_token = token
        logger.info("Successfully connected to UniFi controller.")

    def _fetch_csrf_token(self) -> str:
        """
        Harvest the CSRF token after login.

        Failure is not fatal: an empty token is returned and later mutating
        requests will be rejected by the controller.
        """
        csrf_uri = f"{self.controller_url}{self_path(self.site, self.is_standalone)}"
        try:
            response = self.transport.send("GET", csrf_uri, retry=False)
        except UnifiTransportError as e:
            logger.warning(f"Could not fetch CSRF token from {csrf_uri}: {e}")
            return ""

        token = response.headers.get(CSRF_HEADER) or self._extract_csrf_token_from_cookie()
        if not token:
            logger.warning("CSRF token not found; mutating requests may be rejected.")
            return ""
        logger.debug("Harvested CSRF token.")
        return token

    def _extract_csrf_token_from_cookie(self) -> Optional[str]:
        """Extracts the CSRF token from the UniFi OS 'TOKEN' JWT cookie if available."""
        unifi_cookie = self.transport.session.cookies.get("TOKEN")
        if not unifi_cookie:
            logger.debug("UniFi OS 'TOKEN' cookie not found in session.")
            return None

        parts = unifi_cookie.split(".")
        if len(parts) != 3:
            logger.warning("Invalid JWT structure found in TOKEN cookie.")
            return None

        try:
            payload_b64 = parts[1]
            payload_b64 += "=" * (-len(payload_b64) % 4)
            payload_json = base64.urlsafe_b64decode(payload_b64).decode("utf-8")
            return json.loads(payload_json).get("csrfToken")
        except (binascii.Error, json.JSONDecodeError, UnicodeDecodeError, AttributeError) as e:
            logger.error(f"Error decoding JWT payload from TOKEN cookie: {e}")
            return None

    def headers_for(self, method: str) -> Dict[str, str]:
        """
        Auth headers for a request with the given HTTP method.

        API-key mode always yields the key header and never a CSRF header.
        Password mode yields the CSRF header only for POST/PUT/DELETE and only
        when a token is cached.
        """
        if self.uses_api_key:
            return {API_KEY_HEADER: self.api_key}
        if method.upper() not in CSRF_METHODS:
            return {}
        token = self.csrf_token
        if token:
            return {CSRF_HEADER: token}
        return {}
