"""Invariant checks for Hydra model elements.

Each ``check_*`` function validates one entity against its structural
contract and raises :class:`~hydra_ld.errors.ValidationError` (or its
:class:`~hydra_ld.errors.GrammarViolation` subclass) on the first
violation.  Builders run these eagerly; there is no deferred mode.
"""

from __future__ import annotations
from typing import Any, Iterable, Optional

from hydra_ld.errors import GrammarViolation, ValidationError
from hydra_ld.grammar import (
    is_absolute_path,
    is_identifier,
    is_uri,
    require,
)
from hydra_ld.model import (
    ApiDocumentation,
    Collection,
    CommonProps,
    Operation,
    Property,
    SupportedClass,
    SupportedProperty,
)
from hydra_ld.namespaces import DEFAULT_NAMESPACES, Resolver


HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD")


# ── Shared ─────────────────────────────────────────────────────────


def check_common_props(common: CommonProps, *, id_required: bool = False) -> None:
    if common.id is None:
        if id_required:
            raise ValidationError("id", "required", "An identifier is mandatory")
    else:
        require(is_identifier, common.id, "id", "uri")
    if common.type is not None:
        require(is_uri, common.type, "type", "uri")
    for name in ("title", "description"):
        value = getattr(common, name)
        if value is not None and not isinstance(value, str):
            raise ValidationError(
                name, "type",
                f"Expected a string, got {type(value).__name__}", value,
            )


def _check_optional_uri(value: Optional[str], path: str) -> None:
    if value is not None:
        require(is_uri, value, path, "uri")


def _check_optional_bool(value: Any, path: str) -> None:
    if value is not None and not isinstance(value, bool):
        raise ValidationError(
            path, "type", f"Expected a boolean, got {type(value).__name__}", value,
        )


def _check_elements(items: Iterable[Any], kinds: tuple[type, ...], path: str) -> None:
    for index, item in enumerate(items):
        if not isinstance(item, kinds):
            expected = " or ".join(k.__name__ for k in kinds)
            raise ValidationError(
                f"{path}[{index}]", "type",
                f"Expected {expected}, got {type(item).__name__}", item,
            )


def _check_declared_type(actual: str, expected: str, path: str = "@type") -> None:
    if actual != expected:
        raise ValidationError(
            path, "declared-type",
            f'Expected declared type "{expected}", found "{actual}"', actual,
        )


# ── Operations ─────────────────────────────────────────────────────


def check_operation(op: Operation, ns: Resolver = DEFAULT_NAMESPACES) -> None:
    _check_declared_type(op.declared_type, ns.resolve("hydra:Operation"))
    if op.method not in HTTP_METHODS:
        raise GrammarViolation(
            "method", "method",
            f"{op.method!r} is not one of {', '.join(HTTP_METHODS)}",
            op.method,
        )
    check_common_props(op.common)
    _check_optional_uri(op.expects, "expects")
    _check_optional_uri(op.returns, "returns")


# ── Properties ─────────────────────────────────────────────────────


def property_type_term(is_link: bool, is_template: bool) -> str:
    if is_link:
        return "hydra:Link"
    if is_template:
        return "hydra:TemplatedLink"
    return "rdf:Property"


def check_property(prop: Property, ns: Resolver = DEFAULT_NAMESPACES) -> None:
    _check_optional_bool(prop.is_link, "is_link")
    _check_optional_bool(prop.is_template, "is_template")
    if prop.is_link and prop.is_template:
        raise ValidationError(
            "is_link", "exclusive",
            "A property cannot be both a link and a templated link",
        )
    _check_declared_type(
        prop.declared_type,
        ns.resolve(property_type_term(prop.is_link, prop.is_template)),
    )
    check_common_props(prop.common, id_required=True)
    _check_optional_uri(prop.domain, "domain")
    _check_optional_uri(prop.range, "range")


def check_property_props(
    *,
    required: Optional[bool] = None,
    readonly: Optional[bool] = None,
    writeonly: Optional[bool] = None,
    min_count: Optional[int] = None,
    max_count: Optional[int] = None,
) -> None:
    """Visibility and cardinality rules of a supported property."""
    _check_optional_bool(required, "required")
    _check_optional_bool(readonly, "readonly")
    _check_optional_bool(writeonly, "writeonly")

    if readonly and writeonly:
        raise ValidationError(
            "readonly", "exclusive",
            "A property cannot be both readonly and writeonly",
        )

    for name, count in (("min_count", min_count), ("max_count", max_count)):
        if count is None:
            continue
        if not isinstance(count, int) or isinstance(count, bool):
            raise ValidationError(
                name, "type",
                f"Expected an integer, got {type(count).__name__}", count,
            )
        if count < 0:
            raise ValidationError(
                name, "non-negative", f"Cardinality {count} is negative", count,
            )

    if min_count is not None and max_count is not None and min_count > max_count:
        raise ValidationError(
            "min_count", "min-max",
            f"min_count {min_count} exceeds max_count {max_count}",
            min_count,
        )

    if required is True and min_count is not None and min_count < 1:
        raise ValidationError(
            "min_count", "required",
            f"A required property needs min_count >= 1, found {min_count}",
            min_count,
        )
    if required is False and min_count is not None and min_count > 0:
        raise ValidationError(
            "min_count", "required",
            f"An optional property needs min_count 0, found {min_count}",
            min_count,
        )


def check_supported_property(
    sp: SupportedProperty, ns: Resolver = DEFAULT_NAMESPACES,
) -> None:
    _check_declared_type(sp.declared_type, ns.resolve("hydra:SupportedProperty"))
    if not isinstance(sp.property, Property):
        raise ValidationError(
            "property", "type",
            f"Expected Property, got {type(sp.property).__name__}", sp.property,
        )
    check_common_props(sp.common)
    check_property_props(
        required=sp.required,
        readonly=sp.readonly,
        writeonly=sp.writeonly,
        min_count=sp.min_count,
        max_count=sp.max_count,
    )
    _check_elements(sp.operations, (Operation,), "operations")
    if sp.property.is_plain and sp.operations:
        raise ValidationError(
            "operations", "link-operations",
            "Operations can only be attached to links and templated links",
            sp.operations,
        )


# ── Classes ────────────────────────────────────────────────────────


def check_supported_class(
    cls: SupportedClass, ns: Resolver = DEFAULT_NAMESPACES,
) -> None:
    _check_declared_type(cls.declared_type, ns.resolve("hydra:Class"))
    check_common_props(cls.common, id_required=True)
    _check_elements(cls.supported_properties, (SupportedProperty,), "supported_properties")
    _check_elements(cls.operations, (Operation,), "operations")


def check_collection(coll: Collection, ns: Resolver = DEFAULT_NAMESPACES) -> None:
    _check_declared_type(coll.declared_type, ns.resolve("hydra:Collection"))
    check_common_props(coll.common, id_required=True)
    if not isinstance(coll.is_paginated, bool):
        raise ValidationError(
            "is_paginated", "type",
            f"Expected a boolean, got {type(coll.is_paginated).__name__}",
            coll.is_paginated,
        )
    _check_optional_uri(coll.member_class, "member_class")
    _check_elements(coll.operations, (Operation,), "operations")


def check_api_documentation(
    api: ApiDocumentation, ns: Resolver = DEFAULT_NAMESPACES,
) -> None:
    _check_declared_type(api.declared_type, ns.resolve("hydra:ApiDocumentation"))
    check_common_props(api.common)
    require(is_absolute_path, api.entrypoint, "entrypoint", "absolute-path")
    require(is_uri, api.entrypoint_class, "entrypoint_class", "uri")

    if not api.supported_classes:
        raise ValidationError(
            "supported_classes", "non-empty",
            "An API documentation needs at least one supported class",
        )
    _check_elements(
        api.supported_classes, (SupportedClass, Collection), "supported_classes",
    )

    seen: set[str] = set()
    for index, cls in enumerate(api.supported_classes):
        class_id = cls.common.id
        if class_id in seen:
            raise ValidationError(
                f"supported_classes[{index}]", "unique-id",
                f'Duplicate supported class identifier "{class_id}"', class_id,
            )
        seen.add(class_id)

    if api.entrypoint_class not in seen:
        raise ValidationError(
            "entrypoint_class", "entrypoint-class",
            f'"{api.entrypoint_class}" is not the identifier of any supported class',
            api.entrypoint_class,
        )
