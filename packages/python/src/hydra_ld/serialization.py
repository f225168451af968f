"""JSON-LD and SHACL serialization of Hydra model elements.

:func:`to_jsonld` and :func:`to_shacl` dispatch over the closed set of
entity types in :mod:`hydra_ld.model`.  Output is expanded JSON-LD keyed
by full IRIs, with references written as links (``{"@id": ...}``) so
they can be told apart from literals.

Mapping of supported-property cardinality to SHACL:
    min_count   → sh:minCount
    max_count   → sh:maxCount
    property id → sh:predicate
"""

from __future__ import annotations
from typing import Any, Optional

from hydra_ld.model import (
    ApiDocumentation,
    Collection,
    CommonProps,
    Entity,
    ENTITY_TYPES,
    Operation,
    Property,
    SupportedClass,
    SupportedProperty,
)
from hydra_ld.namespaces import DEFAULT_NAMESPACES, Resolver


# ── JSON-LD ────────────────────────────────────────────────────────


def to_jsonld(entity: Entity, ns: Resolver = DEFAULT_NAMESPACES) -> dict[str, Any]:
    """Serialize *entity* (and everything it contains) as JSON-LD."""
    if isinstance(entity, Operation):
        return _operation_to_jsonld(entity, ns)
    if isinstance(entity, Property):
        return _property_to_jsonld(entity, ns)
    if isinstance(entity, SupportedProperty):
        return _supported_property_to_jsonld(entity, ns)
    if isinstance(entity, SupportedClass):
        return _class_to_jsonld(entity, ns)
    if isinstance(entity, Collection):
        return _collection_to_jsonld(entity, ns)
    if isinstance(entity, ApiDocumentation):
        return _api_to_jsonld(entity, ns)
    raise TypeError(f"Cannot serialize {type(entity).__name__} as JSON-LD")


def _operation_to_jsonld(op: Operation, ns: Resolver) -> dict[str, Any]:
    jsonld: dict[str, Any] = {
        "@type": op.declared_type,
        ns.resolve("hydra:method"): op.method,
    }
    _link_if_some(jsonld, ns.resolve("hydra:expects"), op.expects)
    _link_if_some(jsonld, ns.resolve("hydra:returns"), op.returns)
    return _with_common(jsonld, op.common, ns)


def _property_to_jsonld(prop: Property, ns: Resolver) -> dict[str, Any]:
    jsonld: dict[str, Any] = {"@type": prop.declared_type}
    _link_if_some(jsonld, ns.resolve("rdfs:domain"), prop.domain)
    _link_if_some(jsonld, ns.resolve("rdfs:range"), prop.range)
    return _with_common(
        jsonld, prop.common, ns,
        title_term="rdfs:label", description_term="rdfs:comment",
    )


def _supported_property_to_jsonld(
    sp: SupportedProperty, ns: Resolver,
) -> dict[str, Any]:
    rdf_property = _property_to_jsonld(sp.property, ns)
    if not sp.property.is_plain:
        rdf_property[ns.resolve("hydra:supportedOperation")] = [
            _operation_to_jsonld(op, ns) for op in sp.operations
        ]
    jsonld: dict[str, Any] = {
        "@type": sp.declared_type,
        ns.resolve("hydra:property"): rdf_property,
    }
    _set_if_some(jsonld, ns.resolve("hydra:required"), sp.required)
    _set_if_some(jsonld, ns.resolve("hydra:readonly"), sp.readonly)
    _set_if_some(jsonld, ns.resolve("hydra:writeonly"), sp.writeonly)
    return _with_common(jsonld, sp.common, ns)


def _class_to_jsonld(cls: SupportedClass, ns: Resolver) -> dict[str, Any]:
    jsonld: dict[str, Any] = {
        "@type": [cls.declared_type, ns.resolve("sh:Shape")],
        ns.resolve("hydra:supportedProperty"): [
            _supported_property_to_jsonld(sp, ns) for sp in cls.supported_properties
        ],
        ns.resolve("hydra:supportedOperation"): [
            _operation_to_jsonld(op, ns) for op in cls.operations
        ],
    }
    sh_properties = _property_shapes(cls, ns)
    if sh_properties:
        jsonld[ns.resolve("sh:property")] = sh_properties
    return _with_common(jsonld, cls.common, ns)


def _collection_to_jsonld(coll: Collection, ns: Resolver) -> dict[str, Any]:
    if coll.is_paginated:
        types = [
            ns.resolve("hydra:Class"),
            ns.resolve("hydra:PagedCollection"),
            coll.declared_type,
        ]
    else:
        types = [ns.resolve("hydra:Class"), coll.declared_type]
    jsonld: dict[str, Any] = {
        "@type": types,
        ns.resolve("hydra:supportedOperation"): [
            _operation_to_jsonld(op, ns) for op in coll.operations
        ],
    }
    _link_if_some(jsonld, ns.resolve("hld:memberClass"), coll.member_class)
    return _with_common(jsonld, coll.common, ns)


def _api_to_jsonld(api: ApiDocumentation, ns: Resolver) -> dict[str, Any]:
    jsonld: dict[str, Any] = {
        "@type": api.declared_type,
        ns.resolve("hydra:entrypoint"): {"@id": api.entrypoint},
        ns.resolve("hld:entrypointClass"): {"@id": api.entrypoint_class},
        ns.resolve("hydra:supportedClass"): [
            to_jsonld(cls, ns) for cls in api.supported_classes
        ],
    }
    return _with_common(jsonld, api.common, ns)


# ── SHACL ──────────────────────────────────────────────────────────


def to_shacl(entity: Entity, ns: Resolver = DEFAULT_NAMESPACES) -> Optional[dict[str, Any]]:
    """SHACL fragment for *entity*, or ``None`` when it declares no constraint.

    Supported properties produce a property shape; supported classes
    produce a ``sh:NodeShape`` targeting the class.  Every other entity
    yields ``None``.
    """
    if isinstance(entity, SupportedProperty):
        return _property_shape(entity, ns)
    if isinstance(entity, SupportedClass):
        return _node_shape(entity, ns)
    if isinstance(entity, ENTITY_TYPES):
        return None
    raise TypeError(f"Cannot serialize {type(entity).__name__} as SHACL")


def shapes_graph(api: ApiDocumentation, ns: Resolver = DEFAULT_NAMESPACES) -> dict[str, Any]:
    """Every class shape of *api* as a single SHACL ``@graph`` document."""
    graph = []
    for cls in api.supported_classes:
        shape = to_shacl(cls, ns)
        if shape is not None:
            graph.append(shape)
    return {"@graph": graph}


def _property_shape(sp: SupportedProperty, ns: Resolver) -> Optional[dict[str, Any]]:
    shape: dict[str, Any] = {
        ns.resolve("sh:predicate"): {"@id": sp.property.common.id},
    }
    _set_if_some(shape, ns.resolve("sh:minCount"), sp.min_count)
    _set_if_some(shape, ns.resolve("sh:maxCount"), sp.max_count)
    # a bare predicate constrains nothing
    if len(shape) == 1:
        return None
    return shape


def _property_shapes(cls: SupportedClass, ns: Resolver) -> list[dict[str, Any]]:
    shapes = []
    for sp in cls.supported_properties:
        shape = _property_shape(sp, ns)
        if shape is not None:
            shapes.append(shape)
    return shapes


def _node_shape(cls: SupportedClass, ns: Resolver) -> dict[str, Any]:
    return {
        "@id": cls.common.id,
        "@type": ns.resolve("sh:NodeShape"),
        ns.resolve("sh:targetClass"): {"@id": cls.common.id},
        ns.resolve("sh:property"): _property_shapes(cls, ns),
    }


# ── Helpers ────────────────────────────────────────────────────────


def _set_if_some(jsonld: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        jsonld[key] = value


def _link_if_some(jsonld: dict[str, Any], key: str, value: Optional[str]) -> None:
    if value is not None:
        jsonld[key] = {"@id": value}


def _add_type(jsonld: dict[str, Any], rdf_type: str) -> None:
    """Add *rdf_type* to ``@type`` without duplicating it."""
    current = jsonld.get("@type")
    if current is None:
        jsonld["@type"] = rdf_type
    elif isinstance(current, list):
        if rdf_type not in current:
            jsonld["@type"] = current + [rdf_type]
    elif current != rdf_type:
        jsonld["@type"] = [current, rdf_type]


def _with_common(
    jsonld: dict[str, Any],
    common: CommonProps,
    ns: Resolver,
    *,
    title_term: str = "hydra:title",
    description_term: str = "hydra:description",
) -> dict[str, Any]:
    _set_if_some(jsonld, "@id", common.id)
    if common.type is not None:
        _add_type(jsonld, common.type)
    _set_if_some(jsonld, ns.resolve(title_term), common.title)
    _set_if_some(jsonld, ns.resolve(description_term), common.description)
    return jsonld
