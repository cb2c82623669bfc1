"""
Utility functions for the UniFi Network API package.
"""

import dataclasses
import json
import re
from typing import Any, Dict, Set, Tuple, Type

from .logging import get_logger

logger = get_logger(__name__)

_MAC_HEX = re.compile(r"[^0-9a-fA-F]")


class UnifiEncoder(json.JSONEncoder):
    """JSON encoder that serializes models through their ``to_dict`` method."""

    def default(self, obj):
        if hasattr(obj, "to_dict") and callable(getattr(obj, "to_dict")):
            return obj.to_dict()
        return super().default(obj)


def get_api_field_mapping(model_class: Type) -> Dict[str, str]:
    """
    Create a mapping between API field names and model attribute names.

    Examines dataclass fields with metadata to find mappings between
    API field names (like 'static-route_network') and Python attribute names
    (like 'static_route_network').

    Args:
        model_class: The dataclass model to examine for field mappings

    Returns:
        Dictionary mapping UniFi API field names to Python model attribute names
    """
    if not dataclasses.is_dataclass(model_class):
        return {}

    field_mapping = {}

    for field in dataclasses.fields(model_class):
        if "unifi_api_field" in field.metadata:
            field_mapping[field.metadata["unifi_api_field"]] = field.name

    return field_mapping


def get_model_field_names(model_class: Type) -> Set[str]:
    """Names of the init fields of a dataclass model, excluding ``_extra_fields``."""
    if not dataclasses.is_dataclass(model_class):
        return set()
    return {
        field.name
        for field in dataclasses.fields(model_class)
        if field.init and field.name != "_extra_fields"
    }


def map_api_data_to_model(
    data: Dict[str, Any], model_class: Type
) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Maps API data to model fields, separating model fields from extra fields.

    This function handles:
    - Direct field matches
    - Fields with ``unifi_api_field`` metadata mapping
    - Extra fields preservation

    Args:
        data: Input dictionary from API response
        model_class: The dataclass model to map data to

    Returns:
        Tuple containing (model_fields, extra_fields) where:
            - model_fields: Dictionary of fields that map to the model's attributes
            - extra_fields: Dictionary of extra fields that don't directly map to the model
    """
    valid_params = get_model_field_names(model_class)
    field_map = get_api_field_mapping(model_class)

    model_fields = {}
    extra_fields = {}

    for api_key, value in data.items():
        mapped_key = None

        if api_key in field_map and field_map[api_key] in valid_params:
            mapped_key = field_map[api_key]
        elif api_key in valid_params and api_key not in field_map.values():
            mapped_key = api_key

        if mapped_key is not None:
            model_fields[mapped_key] = value
        else:
            extra_fields[api_key] = value

    return model_fields, extra_fields


def normalize_mac(mac_address: str) -> str:
    """
    Normalize a MAC address to the lower-case, colon-separated form the controller uses.

    Args:
        mac_address: MAC address in any common notation (``AA-BB-CC-DD-EE-FF``,
                     ``aabb.ccdd.eeff``, ``AABBCCDDEEFF``...).

    Returns:
        The normalized MAC address, e.g. ``aa:bb:cc:dd:ee:ff``.

    Raises:
        ValueError: If the value does not contain exactly 12 hex digits.
    """
    value = mac_address or ""
    digits = _MAC_HEX.sub("", value)
    if len(digits) != 12 or len(digits) != len(re.sub(r"[:\-. ]", "", value)):
        raise ValueError(f"Invalid MAC address: {mac_address}")
    digits = digits.lower()
    return ":".join(digits[i:i + 2] for i in range(0, 12, 2))
