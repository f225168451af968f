"""
hydra-ld: Hydra API descriptions as validated JSON-LD and SHACL

Declaratively build an API's classes, properties, links, operations and
collections; every element is checked when it is built and can be
serialized as JSON-LD (API discovery) or SHACL (instance constraints).
Wraps PyLD for JSON-LD processing of the serialized documents.
"""

__version__ = "0.1.0"

from hydra_ld.errors import HydraError, ValidationError, GrammarViolation
from hydra_ld.namespaces import (
    Resolver,
    Namespaces,
    DEFAULT_NAMESPACES,
    DEFAULT_PREFIXES,
)
from hydra_ld.grammar import (
    PathVariable,
    is_path_component,
    is_relative_path,
    is_absolute_path,
    is_path,
    is_path_variable,
    is_route,
    is_uri,
    is_curie,
    is_term,
    is_datatype,
    is_jsonld_literal,
    is_link,
)
from hydra_ld.model import (
    CommonProps,
    Operation,
    Property,
    SupportedProperty,
    SupportedClass,
    Collection,
    ApiDocumentation,
)
from hydra_ld.validation import HTTP_METHODS
from hydra_ld.builders import (
    operation,
    get_operation,
    post_operation,
    put_operation,
    patch_operation,
    delete_operation,
    property,
    link,
    templated_link,
    supported_property,
    supported_class,
    collection,
    api_documentation,
)
from hydra_ld.serialization import to_jsonld, to_shacl, shapes_graph
from hydra_ld.query import (
    find_class,
    find_supported_property,
    find_property,
    find_class_operations,
    find_model,
    model_or_uri,
    entity_id,
    is_class_model,
    is_collection_model,
    is_supported_property,
)
from hydra_ld.processor import HydraProcessor, DEFAULT_PROCESSOR_OPTIONS

__all__ = [
    "HydraError",
    "ValidationError",
    "GrammarViolation",
    "Resolver",
    "Namespaces",
    "DEFAULT_NAMESPACES",
    "DEFAULT_PREFIXES",
    "PathVariable",
    "is_path_component",
    "is_relative_path",
    "is_absolute_path",
    "is_path",
    "is_path_variable",
    "is_route",
    "is_uri",
    "is_curie",
    "is_term",
    "is_datatype",
    "is_jsonld_literal",
    "is_link",
    "CommonProps",
    "Operation",
    "Property",
    "SupportedProperty",
    "SupportedClass",
    "Collection",
    "ApiDocumentation",
    "HTTP_METHODS",
    "operation",
    "get_operation",
    "post_operation",
    "put_operation",
    "patch_operation",
    "delete_operation",
    "property",
    "link",
    "templated_link",
    "supported_property",
    "supported_class",
    "collection",
    "api_documentation",
    "to_jsonld",
    "to_shacl",
    "shapes_graph",
    "find_class",
    "find_supported_property",
    "find_property",
    "find_class_operations",
    "find_model",
    "model_or_uri",
    "entity_id",
    "is_class_model",
    "is_collection_model",
    "is_supported_property",
    "HydraProcessor",
    "DEFAULT_PROCESSOR_OPTIONS",
]
