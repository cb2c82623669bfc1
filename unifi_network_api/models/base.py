"""
Base classes shared by the resource models.
"""

import dataclasses
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Type, TypeVar, Union

from ..exceptions import UnifiDecodeError
from ..logging import get_logger, log_extra_fields
from ..routing import Dialect
from ..utils import map_api_data_to_model

logger = get_logger(__name__)

O = TypeVar("O", bound="BaseUnifiModel")


def api_field(name: str, default: Any = None) -> Any:
    """Declare a model attribute whose JSON key is not a valid Python identifier."""
    return field(default=default, metadata={"unifi_api_field": name})


def _serialize(value: Any) -> Any:
    if isinstance(value, BaseUnifiModel):
        return value.to_dict()
    if isinstance(value, list):
        return [_serialize(v) for v in value]
    if isinstance(value, dict):
        return {k: _serialize(v) for k, v in value.items()}
    return value


@dataclass
class BaseUnifiModel:
    """
    Common behaviour for objects exchanged with the controller.

    Attributes left as ``None`` are omitted from :meth:`to_dict`. Fields the
    controller returns but the model does not declare are kept in
    ``_extra_fields`` and written back by :meth:`to_dict`, so a record read
    from the controller can be modified and sent back without losing data.
    """

    # Attribute name -> model class for nested objects (or lists of them).
    _nested_models: ClassVar[Dict[str, Type["BaseUnifiModel"]]] = {}

    # Store any extra fields not explicitly defined
    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls: Type[O], data: Mapping[str, Any]) -> O:
        """
        Build a model from a decoded API object.

        Args:
            data: One JSON object as returned by the controller.

        Returns:
            The model instance, with unknown fields in ``_extra_fields``.
        """
        model_fields, extra_fields = map_api_data_to_model(dict(data), cls)
        for name, nested in cls._nested_models.items():
            value = model_fields.get(name)
            if isinstance(value, list):
                model_fields[name] = [
                    nested.from_dict(v) if isinstance(v, Mapping) else v for v in value
                ]
            elif isinstance(value, Mapping):
                model_fields[name] = nested.from_dict(value)
        obj = cls(**model_fields)
        obj._extra_fields = extra_fields
        log_extra_fields(logger, cls.__name__, str(data.get("_id", "")), extra_fields)
        return obj

    def to_dict(self) -> Dict[str, Any]:
        """Converts the dataclass instance to a dictionary keyed by API field names."""
        data = {}
        for f in dataclasses.fields(self):
            if f.name == "_extra_fields":
                continue
            value = getattr(self, f.name)
            if value is None:
                continue
            data[f.metadata.get("unifi_api_field", f.name)] = _serialize(value)
        for key, value in self._extra_fields.items():
            data.setdefault(key, value)
        return data


R = TypeVar("R", bound="UnifiResource")


@dataclass
class UnifiResource(BaseUnifiModel):
    """
    A configuration record the controller stores under a site.

    Subclasses set ``endpoint`` (the logical endpoint name) and ``dialect``.
    The identifier ``_id`` is assigned by the controller on create.
    """

    endpoint: ClassVar[str] = ""
    dialect: ClassVar[Dialect] = Dialect.REST

    _id: Optional[str] = None

    @property
    def id(self) -> Optional[str]:
        return self._id

    def to_request(self, resource_id: Optional[str] = None) -> Dict[str, Any]:
        """
        Body to send when creating (``resource_id`` is None) or updating this record.

        Resources whose controller schema requires fixed or defaulted values
        override this.
        """
        return self.to_dict()


def parse_models(model: Type[R], payload: Any) -> List[R]:
    """Convert a decoded array payload into model instances. None is an empty list."""
    if payload is None:
        return []
    if isinstance(payload, Mapping):
        payload = [payload]
    if not isinstance(payload, list) or not all(isinstance(item, Mapping) for item in payload):
        raise UnifiDecodeError(
            f"Expected a list of {model.__name__} objects, got {type(payload).__name__}")
    return [model.from_dict(item) for item in payload]


def parse_model(model: Type[R], payload: Any) -> R:
    """Convert a decoded single-object payload into a model instance."""
    if not isinstance(payload, Mapping):
        raise UnifiDecodeError(
            f"Expected a {model.__name__} object, got {type(payload).__name__}")
    return model.from_dict(payload)


# A model instance, or a raw dictionary sent as-is.
RequestBody = Union[UnifiResource, Dict[str, Any]]
