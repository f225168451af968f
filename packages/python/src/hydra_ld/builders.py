"""Builders for Hydra API model elements.

Every builder takes keyword options, fills defaults, resolves the
element's declared RDF type through the injected resolver (``ns``),
validates the result and returns a frozen value::

    users = supported_class(
        id="http://example.org/User",
        supported_properties=[
            supported_property(
                property=property(id="http://schema.org/name"),
                required=True,
            ),
        ],
        operations=[get_operation(returns="http://example.org/User")],
    )

Unknown options are ignored.  Invalid options raise
:class:`~hydra_ld.errors.ValidationError`.
"""

from __future__ import annotations
import logging
from typing import Any, Iterable, Optional

from hydra_ld.model import (
    ApiDocumentation,
    ClassLike,
    Collection,
    CommonProps,
    Operation,
    Property,
    SupportedClass,
    SupportedProperty,
)
from hydra_ld.namespaces import DEFAULT_NAMESPACES, Resolver
from hydra_ld.validation import (
    check_api_documentation,
    check_collection,
    check_operation,
    check_property,
    check_supported_class,
    check_supported_property,
    property_type_term,
)

logger = logging.getLogger(__name__)


def _ignore_unknown(builder: str, options: dict[str, Any]) -> None:
    if options:
        logger.debug("%s: ignoring unknown options %s", builder, sorted(options))


def _common(
    id: Optional[str],
    type: Optional[str],
    title: Optional[str],
    description: Optional[str],
) -> CommonProps:
    return CommonProps(id=id, type=type, title=title, description=description)


def _sequence(items: Optional[Iterable[Any]]) -> tuple[Any, ...]:
    return tuple(items) if items is not None else ()


# ── Operations ─────────────────────────────────────────────────────


def operation(
    *,
    method: Optional[str] = None,
    id: Optional[str] = None,
    type: Optional[str] = None,
    title: Optional[str] = None,
    description: Optional[str] = None,
    expects: Optional[str] = None,
    returns: Optional[str] = None,
    handler: Any = None,
    ns: Resolver = DEFAULT_NAMESPACES,
    **options: Any,
) -> Operation:
    """Define a ``hydra:Operation``; the method defaults to ``GET``.

    *handler* is opaque: stored verbatim, never inspected or called.
    """
    _ignore_unknown("operation", options)
    op = Operation(
        declared_type=ns.resolve("hydra:Operation"),
        method=method if method is not None else "GET",
        common=_common(id, type, title, description),
        expects=expects,
        returns=returns,
        handler=handler,
    )
    check_operation(op, ns)
    logger.debug("Built %s operation %s", op.method, op.common.id or "<anonymous>")
    return op


def get_operation(**options: Any) -> Operation:
    """Define a ``GET`` operation."""
    return operation(**{**options, "method": "GET"})


def post_operation(**options: Any) -> Operation:
    """Define a ``POST`` operation."""
    return operation(**{**options, "method": "POST"})


def put_operation(**options: Any) -> Operation:
    """Define a ``PUT`` operation."""
    return operation(**{**options, "method": "PUT"})


def patch_operation(**options: Any) -> Operation:
    """Define a ``PATCH`` operation."""
    return operation(**{**options, "method": "PATCH"})


def delete_operation(**options: Any) -> Operation:
    """Define a ``DELETE`` operation."""
    return operation(**{**options, "method": "DELETE"})


# ── Properties ─────────────────────────────────────────────────────


def _property(
    builder: str,
    is_link: bool,
    is_template: bool,
    id: Optional[str],
    type: Optional[str],
    title: Optional[str],
    description: Optional[str],
    domain: Optional[str],
    range: Optional[str],
    ns: Resolver,
    options: dict[str, Any],
) -> Property:
    _ignore_unknown(builder, options)
    prop = Property(
        declared_type=ns.resolve(property_type_term(is_link, is_template)),
        is_link=is_link,
        is_template=is_template,
        common=_common(id, type, title, description),
        domain=domain,
        range=range,
    )
    check_property(prop, ns)
    logger.debug("Built %s %s", builder, prop.common.id)
    return prop


def property(
    *,
    id: Optional[str] = None,
    type: Optional[str] = None,
    title: Optional[str] = None,
    description: Optional[str] = None,
    domain: Optional[str] = None,
    range: Optional[str] = None,
    ns: Resolver = DEFAULT_NAMESPACES,
    **options: Any,
) -> Property:
    """Define a plain ``rdf:Property``."""
    return _property(
        "property", False, False,
        id, type, title, description, domain, range, ns, options,
    )


def link(
    *,
    id: Optional[str] = None,
    type: Optional[str] = None,
    title: Optional[str] = None,
    description: Optional[str] = None,
    domain: Optional[str] = None,
    range: Optional[str] = None,
    ns: Resolver = DEFAULT_NAMESPACES,
    **options: Any,
) -> Property:
    """Define a ``hydra:Link`` from an RDF property."""
    return _property(
        "link", True, False,
        id, type, title, description, domain, range, ns, options,
    )


def templated_link(
    *,
    id: Optional[str] = None,
    type: Optional[str] = None,
    title: Optional[str] = None,
    description: Optional[str] = None,
    domain: Optional[str] = None,
    range: Optional[str] = None,
    ns: Resolver = DEFAULT_NAMESPACES,
    **options: Any,
) -> Property:
    """Define a ``hydra:TemplatedLink`` from an RDF property."""
    return _property(
        "templated_link", False, True,
        id, type, title, description, domain, range, ns, options,
    )


def supported_property(
    *,
    property: Optional[Property] = None,
    operations: Optional[Iterable[Operation]] = None,
    id: Optional[str] = None,
    type: Optional[str] = None,
    title: Optional[str] = None,
    description: Optional[str] = None,
    required: Optional[bool] = None,
    readonly: Optional[bool] = None,
    writeonly: Optional[bool] = None,
    min_count: Optional[int] = None,
    max_count: Optional[int] = None,
    ns: Resolver = DEFAULT_NAMESPACES,
    **options: Any,
) -> SupportedProperty:
    """Wrap *property* with visibility, cardinality and operations.

    A required property without an explicit ``min_count`` gets a
    ``min_count`` of 1.  Operations are only allowed on links and
    templated links.
    """
    _ignore_unknown("supported_property", options)
    if required is True and min_count is None:
        min_count = 1
    sp = SupportedProperty(
        declared_type=ns.resolve("hydra:SupportedProperty"),
        property=property,
        common=_common(id, type, title, description),
        required=required,
        readonly=readonly,
        writeonly=writeonly,
        min_count=min_count,
        max_count=max_count,
        operations=_sequence(operations),
    )
    check_supported_property(sp, ns)
    logger.debug(
        "Built supported property for %s (%d operations)",
        sp.property.common.id, len(sp.operations),
    )
    return sp


# ── Classes ────────────────────────────────────────────────────────


def supported_class(
    *,
    id: Optional[str] = None,
    supported_properties: Optional[Iterable[SupportedProperty]] = None,
    operations: Optional[Iterable[Operation]] = None,
    type: Optional[str] = None,
    title: Optional[str] = None,
    description: Optional[str] = None,
    ns: Resolver = DEFAULT_NAMESPACES,
    **options: Any,
) -> SupportedClass:
    """Define a ``hydra:Class`` exposed by the API."""
    _ignore_unknown("supported_class", options)
    cls = SupportedClass(
        declared_type=ns.resolve("hydra:Class"),
        common=_common(id, type, title, description),
        supported_properties=_sequence(supported_properties),
        operations=_sequence(operations),
    )
    check_supported_class(cls, ns)
    logger.debug(
        "Built class %s (%d properties, %d operations)",
        cls.common.id, len(cls.supported_properties), len(cls.operations),
    )
    return cls


def collection(
    *,
    id: Optional[str] = None,
    is_paginated: bool = False,
    member_class: Optional[str] = None,
    operations: Optional[Iterable[Operation]] = None,
    type: Optional[str] = None,
    title: Optional[str] = None,
    description: Optional[str] = None,
    ns: Resolver = DEFAULT_NAMESPACES,
    **options: Any,
) -> Collection:
    """Define a ``hydra:Collection``, optionally paginated."""
    _ignore_unknown("collection", options)
    coll = Collection(
        declared_type=ns.resolve("hydra:Collection"),
        common=_common(id, type, title, description),
        is_paginated=is_paginated,
        member_class=member_class,
        operations=_sequence(operations),
    )
    check_collection(coll, ns)
    logger.debug("Built collection %s (paginated=%s)", coll.common.id, coll.is_paginated)
    return coll


def api_documentation(
    *,
    supported_classes: Optional[Iterable[ClassLike]] = None,
    entrypoint: Optional[str] = None,
    entrypoint_class: Optional[str] = None,
    id: Optional[str] = None,
    type: Optional[str] = None,
    title: Optional[str] = None,
    description: Optional[str] = None,
    ns: Resolver = DEFAULT_NAMESPACES,
    **options: Any,
) -> ApiDocumentation:
    """Define the ``hydra:ApiDocumentation`` root.

    *entrypoint_class* must be the identifier of one of
    *supported_classes*.
    """
    _ignore_unknown("api_documentation", options)
    api = ApiDocumentation(
        declared_type=ns.resolve("hydra:ApiDocumentation"),
        common=_common(id, type, title, description),
        entrypoint=entrypoint,
        entrypoint_class=entrypoint_class,
        supported_classes=_sequence(supported_classes),
    )
    check_api_documentation(api, ns)
    logger.debug(
        "Built API documentation with entrypoint %s (%d classes)",
        api.entrypoint, len(api.supported_classes),
    )
    return api
