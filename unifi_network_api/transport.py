"""
HTTP transport with connection reuse and bounded retries.
"""

import logging
import threading
from typing import Callable, Dict, Optional, Union

import requests
import urllib3
from requests.adapters import HTTPAdapter
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    stop_when_event_set,
    wait_exponential,
)

from .config import (
    DEFAULT_BACKOFF_MAX,
    DEFAULT_BACKOFF_MIN,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_TIMEOUT,
)
from .exceptions import UnifiTransportError
from .logging import get_logger

logger = get_logger(__name__)

RETRYABLE_EXCEPTIONS = (
    requests.exceptions.ConnectionError,
    requests.exceptions.Timeout,
)


class Transport:
    """
    Executes HTTP requests for the client.

    Only failures that never produced an HTTP response (connection errors and
    timeouts) are retried. Any response, whatever its status, is returned to
    the caller as-is.
    """

    def __init__(
        self,
        verify_ssl: Union[bool, str] = True,
        timeout: float = DEFAULT_TIMEOUT,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        backoff_min: float = DEFAULT_BACKOFF_MIN,
        backoff_max: float = DEFAULT_BACKOFF_MAX,
        pool_maxsize: int = 10,
        sleep: Optional[Callable[[float], None]] = None,
    ):
        """
        Initialize the transport.

        Args:
            verify_ssl: Whether to verify TLS certificates. Can be:
                       - True: Verify certificates (default, recommended)
                       - False: Disable verification (self-signed controllers)
                       - str: Path to a CA bundle file or directory with certificates of trusted CAs
            timeout: Per-attempt request timeout in seconds.
            max_attempts: Total number of attempts for a retryable failure.
            backoff_min: Lower bound of the exponential backoff in seconds.
            backoff_max: Upper bound of the exponential backoff in seconds.
            pool_maxsize: Maximum number of pooled connections per host.
            sleep: Optional replacement for the backoff sleep. Defaults to an
                   interruptible wait that returns early once the transport is closed.
        """
        self.verify_ssl = verify_ssl
        self.timeout = timeout
        self.max_attempts = max_attempts
        self.backoff_min = backoff_min
        self.backoff_max = backoff_max

        self._closed = threading.Event()
        self._sleep = sleep if sleep is not None else self._closed.wait

        self.session = requests.Session()
        adapter = HTTPAdapter(pool_connections=pool_maxsize, pool_maxsize=pool_maxsize, max_retries=0)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)
        self.session.verify = verify_ssl

        if not verify_ssl:
            logger.warning(
                "SSL certificate verification is disabled. This is not recommended for production use."
            )
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def close(self) -> None:
        """Abort pending retries and release pooled connections."""
        self._closed.set()
        self.session.close()

    def _send_once(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]],
        data: Optional[bytes],
    ) -> requests.Response:
        if self._closed.is_set():
            raise UnifiTransportError(f"Transport closed, {method} {url} aborted", method, url)
        logger.debug(f"Sending {method} {url}")
        return self.session.request(
            method,
            url,
            headers=headers,
            data=data,
            timeout=self.timeout,
        )

    def send(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        data: Optional[bytes] = None,
        retry: bool = True,
    ) -> requests.Response:
        """
        Send a request, retrying connection failures and timeouts with exponential backoff.

        Args:
            method: HTTP method.
            url: Absolute URL.
            headers: Request headers.
            data: Already-serialized request body.
            retry: If False, a single attempt is made.

        Returns:
            requests.Response: The first response received, whatever its status.

        Raises:
            UnifiTransportError: If every attempt failed, the transport was closed,
                                 or the request could not be prepared.
        """
        attempts = self.max_attempts if retry else 1
        retrying = Retrying(
            stop=stop_after_attempt(attempts) | stop_when_event_set(self._closed),
            wait=wait_exponential(multiplier=self.backoff_min or 1, min=self.backoff_min, max=self.backoff_max),
            retry=retry_if_exception_type(RETRYABLE_EXCEPTIONS),
            sleep=self._sleep,
            before_sleep=before_sleep_log(logger, logging.DEBUG),
            reraise=True,
        )
        try:
            return retrying(self._send_once, method, url, headers, data)
        except RETRYABLE_EXCEPTIONS as e:
            error_msg = f"API {method} request to {url} failed after {attempts} attempt(s): {e}"
            logger.error(error_msg)
            raise UnifiTransportError(error_msg, method, url) from e
        except requests.exceptions.RequestException as e:
            error_msg = f"API {method} request to {url} failed: {e}"
            logger.error(error_msg)
            raise UnifiTransportError(error_msg, method, url) from e
