"""Immutable value types of a Hydra API model.

Instances are produced by :mod:`hydra_ld.builders`, which validate them
before returning; constructing them directly skips every invariant
check.  Sequences are stored as tuples and no entity holds a reference
to its parent.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Optional, Union


@dataclass(frozen=True)
class CommonProps:
    """Properties shared by every model element."""

    id: Optional[str] = None
    type: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class Operation:
    declared_type: str
    method: str
    common: CommonProps = field(default_factory=CommonProps)
    expects: Optional[str] = None
    returns: Optional[str] = None
    handler: Any = field(default=None, compare=False)


@dataclass(frozen=True)
class Property:
    """An RDF property, a ``hydra:Link`` or a ``hydra:TemplatedLink``."""

    declared_type: str
    is_link: bool
    is_template: bool
    common: CommonProps
    domain: Optional[str] = None
    range: Optional[str] = None

    @property
    def is_plain(self) -> bool:
        return not (self.is_link or self.is_template)


@dataclass(frozen=True)
class SupportedProperty:
    declared_type: str
    property: Property
    common: CommonProps = field(default_factory=CommonProps)
    required: Optional[bool] = None
    readonly: Optional[bool] = None
    writeonly: Optional[bool] = None
    min_count: Optional[int] = None
    max_count: Optional[int] = None
    operations: tuple[Operation, ...] = ()


@dataclass(frozen=True)
class SupportedClass:
    declared_type: str
    common: CommonProps
    supported_properties: tuple[SupportedProperty, ...] = ()
    operations: tuple[Operation, ...] = ()


@dataclass(frozen=True)
class Collection:
    declared_type: str
    common: CommonProps
    is_paginated: bool = False
    member_class: Optional[str] = None
    operations: tuple[Operation, ...] = ()


ClassLike = Union[SupportedClass, Collection]


@dataclass(frozen=True)
class ApiDocumentation:
    declared_type: str
    common: CommonProps
    entrypoint: str
    entrypoint_class: str
    supported_classes: tuple[ClassLike, ...]


Entity = Union[
    Operation,
    Property,
    SupportedProperty,
    SupportedClass,
    Collection,
    ApiDocumentation,
]

ENTITY_TYPES = (
    Operation,
    Property,
    SupportedProperty,
    SupportedClass,
    Collection,
    ApiDocumentation,
)


def identifier(entity: Entity) -> Optional[str]:
    """The ``@id`` of *entity*, if it has one."""
    return entity.common.id
