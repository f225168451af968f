"""Read-only lookups over an assembled :class:`ApiDocumentation`.

Searches walk the supported classes in declaration order and return the
first match.  A miss returns ``None`` (or an empty tuple for operation
lookups); it is never an error.
"""

from __future__ import annotations
from typing import Any, Iterator, Optional, Union

from hydra_ld.model import (
    ApiDocumentation,
    ClassLike,
    Entity,
    Operation,
    Property,
    SupportedClass,
    SupportedProperty,
    identifier,
)
from hydra_ld.namespaces import DEFAULT_NAMESPACES, Resolver


def find_class(api: ApiDocumentation, class_id: str) -> Optional[ClassLike]:
    """Find a supported class or collection by identifier."""
    for cls in api.supported_classes:
        if cls.common.id == class_id:
            return cls
    return None


def _supported_properties(api: ApiDocumentation) -> Iterator[SupportedProperty]:
    for cls in api.supported_classes:
        # collections carry no supported properties
        if isinstance(cls, SupportedClass):
            yield from cls.supported_properties


def find_supported_property(
    api: ApiDocumentation, supported_property_id: str,
) -> Optional[SupportedProperty]:
    """Find a supported property by its own identifier, across all classes."""
    for sp in _supported_properties(api):
        if sp.common.id == supported_property_id:
            return sp
    return None


def find_property(api: ApiDocumentation, property_id: str) -> Optional[Property]:
    """Find the RDF property wrapped by any supported property."""
    for sp in _supported_properties(api):
        if sp.property.common.id == property_id:
            return sp.property
    return None


def find_class_operations(
    api: ApiDocumentation, class_id: str,
) -> tuple[Operation, ...]:
    cls = find_class(api, class_id)
    if cls is None:
        return ()
    return cls.operations


def find_model(
    api: ApiDocumentation, uri: str,
) -> Optional[Union[ClassLike, SupportedProperty, Property]]:
    """Find a class, then a supported property, then a property."""
    found = find_class(api, uri)
    if found is None:
        found = find_supported_property(api, uri)
    if found is None:
        found = find_property(api, uri)
    return found


def model_or_uri(model: Union[str, Entity]) -> Optional[str]:
    """The identifier of *model*, or *model* itself when it is a string URI."""
    if isinstance(model, str):
        return model
    return identifier(model)


entity_id = model_or_uri


def is_class_model(model: Any, ns: Resolver = DEFAULT_NAMESPACES) -> bool:
    return getattr(model, "declared_type", None) == ns.resolve("hydra:Class")


def is_collection_model(model: Any, ns: Resolver = DEFAULT_NAMESPACES) -> bool:
    return getattr(model, "declared_type", None) == ns.resolve("hydra:Collection")


def is_supported_property(model: Any, ns: Resolver = DEFAULT_NAMESPACES) -> bool:
    return getattr(model, "declared_type", None) == ns.resolve("hydra:SupportedProperty")
