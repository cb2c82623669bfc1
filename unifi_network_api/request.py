"""
Request construction, status classification and response unwrapping.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .exceptions import UnifiAPIError, UnifiAuthenticationError, UnifiDecodeError
from .logging import get_logger, log_api_payload, log_api_response
from .routing import Dialect, route
from .session import AuthSession
from .utils import UnifiEncoder

logger = get_logger(__name__)


@dataclass(frozen=True)
class RequestDescriptor:
    """One API call: built fresh per request and never reused."""

    method: str
    endpoint: str
    dialect: Dialect = Dialect.REST
    body: Any = None


def decode_body(content: bytes) -> Any:
    """
    Decode a response body, unwrapping the ``{meta, data}`` envelope when present.

    The envelope is tried first: a JSON object whose ``meta.rc`` is a non-empty
    value yields its ``data`` member. Anything else is returned as decoded
    from the raw body. A zero-length body yields None.

    Args:
        content: Raw response body.

    Returns:
        The decoded payload.

    Raises:
        UnifiDecodeError: If the body is not valid JSON, or is an envelope without ``data``.
    """
    if not content or not content.strip():
        return None

    try:
        decoded = json.loads(content)
    except (ValueError, UnicodeDecodeError) as e:
        raise UnifiDecodeError(f"Failed to parse API response: {e}", content) from e

    if isinstance(decoded, dict):
        meta = decoded.get("meta")
        rc = meta.get("rc") if isinstance(meta, dict) else None
        if rc:
            if rc != "ok":
                logger.warning(f"Controller returned result code '{rc}': {meta.get('msg', '')}")
            if "data" not in decoded:
                raise UnifiDecodeError("Unexpected API response format: envelope without 'data'", content)
            return decoded["data"]

    return decoded


class RequestEngine:
    """Executes RequestDescriptors against one controller site."""

    def __init__(self, auth: AuthSession):
        self.auth = auth

    @property
    def transport(self):
        return self.auth.transport

    def url_for(self, descriptor: RequestDescriptor) -> str:
        path = route(descriptor.dialect, self.auth.site, self.auth.is_standalone, descriptor.endpoint)
        return f"{self.auth.controller_url}{path}"

    def build_headers(self, method: str, has_body: bool) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if has_body:
            headers["Content-Type"] = "application/json"
        headers.update(self.auth.headers_for(method))
        return headers

    def execute(self, descriptor: RequestDescriptor, expect_result: bool = True) -> Optional[Any]:
        """
        Execute a request and return its decoded payload.

        Args:
            descriptor: The request to send.
            expect_result: If False the response body is not read or decoded
                           (fire-and-forget calls such as deletes).

        Returns:
            The unwrapped payload, or None when no result is expected or the body is empty.

        Raises:
            UnifiAuthenticationError: If the session is neither in API-key mode nor logged in.
            UnifiTransportError: If the controller could not be reached after retries.
            UnifiAPIError: If the controller answered with a status >= 400.
            UnifiDecodeError: If the response body cannot be decoded.
        """
        if not self.auth.is_ready():
            raise UnifiAuthenticationError("Client is not authenticated; call login() first")

        method = descriptor.method.upper()
        url = self.url_for(descriptor)

        data = None
        if descriptor.body is not None:
            data = json.dumps(descriptor.body, cls=UnifiEncoder).encode("utf-8")
            if logger.isEnabledFor(logging.DEBUG):
                log_api_payload(logger, method, url, json.loads(data))

        response = self.transport.send(
            method,
            url,
            headers=self.build_headers(method, descriptor.body is not None),
            data=data,
        )

        if response.status_code >= 400:
            body = response.content.decode("utf-8", errors="replace") if response.content else ""
            logger.debug(f"API {method} request to {url} failed (Status: {response.status_code})")
            raise UnifiAPIError(response.status_code, body, method, url)

        logger.debug(f"API {method} request to {url} successful (Status: {response.status_code})")
        if not expect_result:
            return None

        payload = decode_body(response.content)
        log_api_response(logger, url, payload, response.status_code)
        return payload
