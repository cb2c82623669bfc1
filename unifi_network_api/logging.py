import logging
import json
from typing import Any, Dict, Optional

SECRET_FIELDS = frozenset({"password", "x_passphrase", "x_secret", "x_iapp_key"})
MASK = "********"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger with the appropriate name.

    Args:
        name: Optional specific logger name. If not provided, uses the package root logger.

    Returns:
        A logger instance for the specified name
    """
    if name is None:
        return logging.getLogger("unifi_network_api")
    elif name.startswith("unifi_network_api"):
        return logging.getLogger(name)
    else:
        return logging.getLogger(f"unifi_network_api.{name}")


def mask_secrets(data: Any) -> Any:
    """
    Return a copy of ``data`` with secret values replaced by a mask.

    Keys listed in ``SECRET_FIELDS`` and any key starting with ``x_`` (the
    controller's convention for secret attributes) are masked, recursively.
    """
    if isinstance(data, dict):
        masked = {}
        for key, value in data.items():
            if key in SECRET_FIELDS or (isinstance(key, str) and key.startswith("x_")):
                masked[key] = MASK
            else:
                masked[key] = mask_secrets(value)
        return masked
    if isinstance(data, list):
        return [mask_secrets(item) for item in data]
    return data


def log_extra_fields(
    logger: logging.Logger,
    obj_name: str,
    obj_id: str,
    extra_fields: Dict[str, Any],
    max_length: int = 300,
):
    """
    Log extra fields found in an object using the provided logger.

    Args:
        logger: Logger to use
        obj_name: Name of the object type (e.g., 'UnifiNetworkConf').
        obj_id: Identifier for the specific object (usually its _id).
        extra_fields: Dictionary of extra fields.
        max_length: Maximum length for field values in the log. Default is 300.
    """
    if not logger.isEnabledFor(logging.DEBUG) or not extra_fields:
        return

    truncated_fields = {}
    for key, value in mask_secrets(extra_fields).items():
        if isinstance(value, (dict, list)):
            try:
                value_str = json.dumps(value)
                if len(value_str) > max_length:
                    value_str = value_str[:max_length] + "... [truncated]"
                truncated_fields[key] = value_str
            except (TypeError, ValueError):
                truncated_fields[key] = f"<complex structure: {type(value).__name__}>"
        elif isinstance(value, str) and len(value) > max_length:
            truncated_fields[key] = value[:max_length] + "... [truncated]"
        else:
            truncated_fields[key] = value

    logger.debug(
        f"Extra fields for {obj_name} {obj_id}: {json.dumps(truncated_fields, indent=2)}"
    )


def log_api_payload(
    logger: logging.Logger,
    method: str,
    url: str,
    payload: Any,
    max_length: int = 500,
):
    """
    Log an outgoing request body with secrets masked.

    Args:
        logger: Logger to use
        method: HTTP method of the request.
        url: The API URL being called.
        payload: The JSON-compatible body about to be sent.
        max_length: Maximum length for the body in the log. Default is 500.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return
    try:
        payload_str = json.dumps(mask_secrets(payload))
    except (TypeError, ValueError) as e:
        logger.debug(f"API {method} to {url} - Error serializing payload for log: {e}")
        return
    if len(payload_str) > max_length:
        payload_str = payload_str[:max_length] + "... [truncated]"
    logger.debug(f"API {method} to {url} with payload:\n{payload_str}")


def log_api_response(
    logger: logging.Logger,
    url: str,
    response_data: Any,
    status_code: int,
    truncate: bool = True,
    max_length: int = 500,
):
    """
    Log API response data using the provided logger.

    Args:
        logger: Logger to use
        url: The API URL that was called.
        response_data: The decoded response payload.
        status_code: HTTP status code.
        truncate: Whether to truncate large response values. Default is True.
        max_length: Maximum length for response in the log if truncated. Default is 500.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return
    try:
        response_str = json.dumps(mask_secrets(response_data))
        if truncate and len(response_str) > max_length:
            response_str = response_str[:max_length] + "... [truncated]"

        logger.debug(
            f"API Response from {url} (Status: {status_code}):\n{response_str}"
        )
    except (TypeError, ValueError) as e:
        logger.debug(
            f"API Response from {url} (Status: {status_code}) - Error serializing: {e}"
        )
