"""
Generic create/get/list/update/delete over resource models.

Legacy REST endpoints answer every call, including single-record ones, with
an array. v2 endpoints answer with the bare object. Both variants are
parameterized by a :class:`~unifi_network_api.models.base.UnifiResource`
subclass, which supplies the endpoint name, the dialect and the identifier.
"""

from typing import Any, List, Optional, Type, TypeVar

from .exceptions import (
    UnifiAPIError,
    UnifiDecodeError,
    UnifiEmptyResponseError,
    UnifiNotFoundError,
)
from .logging import get_logger
from .models.base import RequestBody, UnifiResource, parse_model, parse_models
from .request import RequestDescriptor, RequestEngine
from .routing import Dialect

logger = get_logger(__name__)

T = TypeVar("T", bound=UnifiResource)


def _body(item: RequestBody, resource_id: Optional[str] = None) -> Any:
    if isinstance(item, UnifiResource):
        return item.to_request(resource_id)
    return item


def _endpoint(model: Type[T], endpoint: Optional[str]) -> str:
    endpoint = endpoint or model.endpoint
    if not endpoint:
        raise ValueError(f"{model.__name__} does not define an endpoint")
    return endpoint


def _require_id(resource_id: str) -> str:
    if not resource_id:
        raise ValueError("A resource id is required")
    return resource_id


# Legacy REST dialect


def create_resource(engine: RequestEngine, model: Type[T], item: RequestBody, endpoint: Optional[str] = None) -> T:
    """
    POST a new record and return the one the controller created.

    Raises:
        UnifiEmptyResponseError: If the controller answered with an empty array.
    """
    endpoint = _endpoint(model, endpoint)
    payload = engine.execute(RequestDescriptor("POST", endpoint, Dialect.REST, _body(item)))
    items = parse_models(model, payload)
    if not items:
        raise UnifiEmptyResponseError(endpoint)
    return items[0]


def get_resource(engine: RequestEngine, model: Type[T], resource_id: str, endpoint: Optional[str] = None) -> T:
    """
    GET one record by id.

    Raises:
        UnifiNotFoundError: If the controller answered with an empty array.
    """
    endpoint = _endpoint(model, endpoint)
    payload = engine.execute(RequestDescriptor("GET", f"{endpoint}/{_require_id(resource_id)}", Dialect.REST))
    items = parse_models(model, payload)
    if not items:
        raise UnifiNotFoundError(endpoint, resource_id)
    return items[0]


def list_resources(engine: RequestEngine, model: Type[T], endpoint: Optional[str] = None) -> List[T]:
    """GET every record under the endpoint. An empty collection is an empty list."""
    endpoint = _endpoint(model, endpoint)
    payload = engine.execute(RequestDescriptor("GET", endpoint, Dialect.REST))
    return parse_models(model, payload)


def update_resource(
    engine: RequestEngine, model: Type[T], resource_id: str, item: RequestBody, endpoint: Optional[str] = None
) -> T:
    """
    PUT a record and return its new state.

    Some controller versions answer a successful PUT with no records; the
    current state is then read back with a GET.
    """
    endpoint = _endpoint(model, endpoint)
    resource_id = _require_id(resource_id)
    payload = engine.execute(
        RequestDescriptor("PUT", f"{endpoint}/{resource_id}", Dialect.REST, _body(item, resource_id))
    )
    items = parse_models(model, payload)
    if not items:
        logger.debug(f"PUT {endpoint}/{resource_id} returned no records, reading back current state")
        return get_resource(engine, model, resource_id, endpoint)
    return items[0]


def delete_resource(engine: RequestEngine, model: Type[T], resource_id: str, endpoint: Optional[str] = None) -> None:
    endpoint = _endpoint(model, endpoint)
    engine.execute(
        RequestDescriptor("DELETE", f"{endpoint}/{_require_id(resource_id)}", Dialect.REST),
        expect_result=False,
    )


# v2 dialect


def create_v2_resource(engine: RequestEngine, model: Type[T], item: RequestBody, endpoint: Optional[str] = None) -> T:
    endpoint = _endpoint(model, endpoint)
    payload = engine.execute(RequestDescriptor("POST", endpoint, Dialect.V2, _body(item)))
    if payload is None:
        raise UnifiEmptyResponseError(endpoint)
    return parse_model(model, payload)


def list_v2_resources(engine: RequestEngine, model: Type[T], endpoint: Optional[str] = None) -> List[T]:
    endpoint = _endpoint(model, endpoint)
    payload = engine.execute(RequestDescriptor("GET", endpoint, Dialect.V2))
    return parse_models(model, payload)


def get_v2_resource(engine: RequestEngine, model: Type[T], resource_id: str, endpoint: Optional[str] = None) -> T:
    """
    GET one v2 record by id, falling back to scanning the list.

    The single-record v2 GET is missing or unreliable for some resource kinds
    on some firmware versions. When it fails with an API or decode error, the
    full list is fetched and searched for the id. If that also fails or finds
    nothing, the original error is raised.
    """
    endpoint = _endpoint(model, endpoint)
    resource_id = _require_id(resource_id)
    try:
        payload = engine.execute(RequestDescriptor("GET", f"{endpoint}/{resource_id}", Dialect.V2))
        if payload is None:
            raise UnifiNotFoundError(endpoint, resource_id)
        return parse_model(model, payload)
    except (UnifiAPIError, UnifiDecodeError, UnifiNotFoundError) as e:
        logger.debug(f"v2 GET {endpoint}/{resource_id} failed ({e}), falling back to a list scan")
        try:
            candidates = list_v2_resources(engine, model, endpoint)
        except (UnifiAPIError, UnifiDecodeError) as list_error:
            logger.debug(f"v2 list scan of {endpoint} failed: {list_error}")
            raise e
        for candidate in candidates:
            if candidate.id == resource_id:
                logger.debug(f"Found {endpoint}/{resource_id} by list scan")
                return candidate
        logger.debug(f"{endpoint}/{resource_id} not present in list scan")
        raise e


def update_v2_resource(
    engine: RequestEngine, model: Type[T], resource_id: str, item: RequestBody, endpoint: Optional[str] = None
) -> T:
    endpoint = _endpoint(model, endpoint)
    resource_id = _require_id(resource_id)
    payload = engine.execute(
        RequestDescriptor("PUT", f"{endpoint}/{resource_id}", Dialect.V2, _body(item, resource_id))
    )
    if payload is None:
        logger.debug(f"v2 PUT {endpoint}/{resource_id} returned no body, reading back current state")
        return get_v2_resource(engine, model, resource_id, endpoint)
    return parse_model(model, payload)


def delete_v2_resource(engine: RequestEngine, model: Type[T], resource_id: str, endpoint: Optional[str] = None) -> None:
    endpoint = _endpoint(model, endpoint)
    engine.execute(
        RequestDescriptor("DELETE", f"{endpoint}/{_require_id(resource_id)}", Dialect.V2),
        expect_result=False,
    )


# Dialect dispatch


def create(engine: RequestEngine, model: Type[T], item: RequestBody) -> T:
    if model.dialect == Dialect.V2:
        return create_v2_resource(engine, model, item)
    return create_resource(engine, model, item)


def get(engine: RequestEngine, model: Type[T], resource_id: str) -> T:
    if model.dialect == Dialect.V2:
        return get_v2_resource(engine, model, resource_id)
    return get_resource(engine, model, resource_id)


def list_all(engine: RequestEngine, model: Type[T]) -> List[T]:
    if model.dialect == Dialect.V2:
        return list_v2_resources(engine, model)
    return list_resources(engine, model)


def update(engine: RequestEngine, model: Type[T], resource_id: str, item: RequestBody) -> T:
    if model.dialect == Dialect.V2:
        return update_v2_resource(engine, model, resource_id, item)
    return update_resource(engine, model, resource_id, item)


def delete(engine: RequestEngine, model: Type[T], resource_id: str) -> None:
    if model.dialect == Dialect.V2:
        delete_v2_resource(engine, model, resource_id)
    else:
        delete_resource(engine, model, resource_id)


def find_resource(
    engine: RequestEngine,
    model: Type[T],
    resource_id: Optional[str] = None,
    name: Optional[str] = None,
) -> T:
    """
    Look a record up by id or by name among all records of its kind.

    Args:
        engine: Request engine bound to the site.
        model: Resource model to look up.
        resource_id: Identifier to match. Takes precedence over ``name`` per record.
        name: Value of the record's ``name`` attribute to match.

    Returns:
        The first matching record.

    Raises:
        ValueError: If neither ``resource_id`` nor ``name`` is given.
        UnifiNotFoundError: If no record matches.
    """
    if resource_id is None and name is None:
        raise ValueError("Either resource_id or name must be provided")
    for candidate in list_all(engine, model):
        if resource_id is not None and candidate.id == resource_id:
            return candidate
        if name is not None and getattr(candidate, "name", None) == name:
            return candidate
    raise UnifiNotFoundError(model.endpoint, resource_id, name)
