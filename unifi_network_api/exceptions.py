from typing import Optional


class UnifiControllerError(Exception):
    """Base exception for UnifiClient errors."""

    pass


class UnifiAuthenticationError(UnifiControllerError):
    """Raised when authentication with the UniFi Controller fails."""

    pass


class UnifiTransportError(UnifiControllerError):
    """Raised when a request never produced an HTTP response (connection failure, timeout)."""

    def __init__(self, message: str, method: Optional[str] = None, url: Optional[str] = None):
        super().__init__(message)
        self.method = method
        self.url = url


class UnifiAPIError(UnifiControllerError):
    """Raised when the UniFi Controller answers with a 4xx/5xx status."""

    def __init__(
        self,
        status_code: int,
        body: str = "",
        method: Optional[str] = None,
        url: Optional[str] = None,
    ):
        super().__init__(f"unifi api error (status {status_code}): {body}")
        self.status_code = status_code
        self.body = body
        self.method = method
        self.url = url


class UnifiDecodeError(UnifiControllerError):
    """Raised when a response body cannot be decoded."""

    def __init__(self, message: str, body: Optional[bytes] = None):
        super().__init__(message)
        self.body = body


class UnifiEmptyResponseError(UnifiControllerError):
    """Raised when a create operation returned no records."""

    def __init__(self, endpoint: str):
        super().__init__(f"empty response from unifi for '{endpoint}'")
        self.endpoint = endpoint


class UnifiNotFoundError(UnifiControllerError):
    """Raised when a requested resource does not exist on the controller."""

    def __init__(self, endpoint: str, resource_id: Optional[str] = None, name: Optional[str] = None):
        target = resource_id if resource_id is not None else f"name={name}"
        super().__init__(f"resource not found: {endpoint}/{target}")
        self.endpoint = endpoint
        self.resource_id = resource_id
        self.name = name
