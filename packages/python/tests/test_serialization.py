"""Tests for JSON-LD and SHACL serialization of Hydra models."""

import pytest

from hydra_ld.builders import (
    api_documentation,
    collection,
    get_operation,
    link,
    operation,
    post_operation,
    property,
    supported_class,
    supported_property,
    templated_link,
)
from hydra_ld.model import CommonProps
from hydra_ld.namespaces import HLD, HYDRA, RDF, RDFS, SHACL
from hydra_ld.serialization import shapes_graph, to_jsonld, to_shacl


EX = "http://example.org/"


# ═══════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════


def _user_class():
    name = supported_property(
        property=property(id=f"{EX}name", range="http://www.w3.org/2001/XMLSchema#string"),
        required=True,
        max_count=1,
    )
    nickname = supported_property(property=property(id=f"{EX}nickname"))
    friends = supported_property(
        property=link(id=f"{EX}friends", range=f"{EX}Users"),
        readonly=True,
        operations=[get_operation(returns=f"{EX}Users")],
    )
    return supported_class(
        id=f"{EX}User",
        title="User",
        description="A registered user",
        supported_properties=[name, nickname, friends],
        operations=[get_operation(returns=f"{EX}User")],
    )


def _api():
    users = collection(
        id=f"{EX}Users",
        is_paginated=True,
        member_class=f"{EX}User",
        operations=[post_operation(expects=f"{EX}User", returns=f"{EX}User")],
    )
    return api_documentation(
        id=f"{EX}doc",
        title="Example API",
        supported_classes=[_user_class(), users],
        entrypoint="/api",
        entrypoint_class=f"{EX}User",
    )


# ═══════════════════════════════════════════════════════════════════
# Operations and properties
# ═══════════════════════════════════════════════════════════════════


class TestOperationJsonLd:
    def test_minimal(self):
        assert to_jsonld(operation()) == {
            "@type": f"{HYDRA}Operation",
            f"{HYDRA}method": "GET",
        }

    def test_links_and_common_props(self):
        op = post_operation(
            id=f"{EX}createUser",
            title="Create",
            description="Creates a user",
            expects=f"{EX}User",
            returns=f"{EX}User",
        )
        jsonld = to_jsonld(op)
        assert jsonld["@id"] == f"{EX}createUser"
        assert jsonld[f"{HYDRA}method"] == "POST"
        assert jsonld[f"{HYDRA}expects"] == {"@id": f"{EX}User"}
        assert jsonld[f"{HYDRA}returns"] == {"@id": f"{EX}User"}
        assert jsonld[f"{HYDRA}title"] == "Create"
        assert jsonld[f"{HYDRA}description"] == "Creates a user"

    def test_extra_type_appended(self):
        op = operation(type="http://schema.org/SearchAction")
        assert to_jsonld(op)["@type"] == [
            f"{HYDRA}Operation", "http://schema.org/SearchAction",
        ]

    def test_handler_not_serialized(self):
        jsonld = to_jsonld(operation(handler=lambda *args: None))
        assert all("handler" not in key for key in jsonld)


class TestPropertyJsonLd:
    def test_plain(self):
        prop = property(
            id=f"{EX}name", title="name", description="The name",
            domain=f"{EX}User", range=f"{EX}Text",
        )
        assert to_jsonld(prop) == {
            "@id": f"{EX}name",
            "@type": f"{RDF}Property",
            f"{RDFS}label": "name",
            f"{RDFS}comment": "The name",
            f"{RDFS}domain": {"@id": f"{EX}User"},
            f"{RDFS}range": {"@id": f"{EX}Text"},
        }

    def test_link_type(self):
        assert to_jsonld(link(id=f"{EX}friends"))["@type"] == f"{HYDRA}Link"

    def test_templated_link_type(self):
        jsonld = to_jsonld(templated_link(id=f"{EX}search"))
        assert jsonld["@type"] == f"{HYDRA}TemplatedLink"


# ═══════════════════════════════════════════════════════════════════
# Supported properties
# ═══════════════════════════════════════════════════════════════════


class TestSupportedPropertyJsonLd:
    def test_plain_property_has_no_operations_key(self):
        sp = supported_property(property=property(id=f"{EX}name"), required=True)
        jsonld = to_jsonld(sp)
        assert jsonld["@type"] == f"{HYDRA}SupportedProperty"
        assert jsonld[f"{HYDRA}required"] is True
        nested = jsonld[f"{HYDRA}property"]
        assert nested["@id"] == f"{EX}name"
        assert f"{HYDRA}supportedOperation" not in nested

    def test_link_carries_operations(self):
        sp = supported_property(
            property=link(id=f"{EX}friends"),
            operations=[get_operation(), post_operation()],
        )
        nested = to_jsonld(sp)[f"{HYDRA}property"]
        methods = [op[f"{HYDRA}method"] for op in nested[f"{HYDRA}supportedOperation"]]
        assert methods == ["GET", "POST"]

    def test_link_without_operations(self):
        sp = supported_property(property=link(id=f"{EX}friends"))
        assert to_jsonld(sp)[f"{HYDRA}property"][f"{HYDRA}supportedOperation"] == []

    def test_visibility_flags(self):
        sp = supported_property(
            property=property(id=f"{EX}password"), writeonly=True, readonly=False,
        )
        jsonld = to_jsonld(sp)
        assert jsonld[f"{HYDRA}writeonly"] is True
        assert jsonld[f"{HYDRA}readonly"] is False
        assert f"{HYDRA}required" not in jsonld

    def test_cardinality_not_in_jsonld(self):
        sp = supported_property(property=property(id=f"{EX}name"), min_count=0, max_count=2)
        assert all("Count" not in key for key in to_jsonld(sp))


class TestSupportedPropertyShacl:
    def test_predicate_and_counts(self):
        sp = supported_property(property=property(id=f"{EX}name"), required=True, max_count=1)
        assert to_shacl(sp) == {
            f"{SHACL}predicate": {"@id": f"{EX}name"},
            f"{SHACL}minCount": 1,
            f"{SHACL}maxCount": 1,
        }

    def test_zero_min_count_kept(self):
        sp = supported_property(property=property(id=f"{EX}name"), min_count=0)
        assert to_shacl(sp)[f"{SHACL}minCount"] == 0

    def test_unconstrained_is_none(self):
        sp = supported_property(property=property(id=f"{EX}name"))
        assert to_shacl(sp) is None


# ═══════════════════════════════════════════════════════════════════
# Classes, collections and documentation
# ═══════════════════════════════════════════════════════════════════


class TestSupportedClassJsonLd:
    def test_shape(self):
        jsonld = to_jsonld(_user_class())
        assert jsonld["@id"] == f"{EX}User"
        assert jsonld["@type"] == [f"{HYDRA}Class", f"{SHACL}Shape"]
        assert jsonld[f"{HYDRA}title"] == "User"
        assert len(jsonld[f"{HYDRA}supportedProperty"]) == 3
        assert len(jsonld[f"{HYDRA}supportedOperation"]) == 1

    def test_sh_property_only_for_constrained(self):
        jsonld = to_jsonld(_user_class())
        sh_props = jsonld[f"{SHACL}property"]
        assert sh_props == [{
            f"{SHACL}predicate": {"@id": f"{EX}name"},
            f"{SHACL}minCount": 1,
            f"{SHACL}maxCount": 1,
        }]

    def test_no_sh_property_when_unconstrained(self):
        cls = supported_class(
            id=f"{EX}Tag",
            supported_properties=[supported_property(property=property(id=f"{EX}label"))],
        )
        assert f"{SHACL}property" not in to_jsonld(cls)

    def test_empty_sequences_emitted(self):
        jsonld = to_jsonld(supported_class(id=f"{EX}Empty"))
        assert jsonld[f"{HYDRA}supportedProperty"] == []
        assert jsonld[f"{HYDRA}supportedOperation"] == []

    def test_node_shape(self):
        shape = to_shacl(_user_class())
        assert shape["@id"] == f"{EX}User"
        assert shape["@type"] == f"{SHACL}NodeShape"
        assert shape[f"{SHACL}targetClass"] == {"@id": f"{EX}User"}
        assert len(shape[f"{SHACL}property"]) == 1


class TestCollectionJsonLd:
    def test_paginated_types(self):
        jsonld = to_jsonld(collection(id=f"{EX}Users", is_paginated=True))
        assert jsonld["@type"] == [
            f"{HYDRA}Class", f"{HYDRA}PagedCollection", f"{HYDRA}Collection",
        ]

    def test_plain_types(self):
        jsonld = to_jsonld(collection(id=f"{EX}Users"))
        assert jsonld["@type"] == [f"{HYDRA}Class", f"{HYDRA}Collection"]

    def test_member_class_link(self):
        jsonld = to_jsonld(collection(id=f"{EX}Users", member_class=f"{EX}User"))
        assert jsonld[f"{HLD}memberClass"] == {"@id": f"{EX}User"}

    def test_member_class_absent(self):
        jsonld = to_jsonld(collection(id=f"{EX}Users"))
        assert f"{HLD}memberClass" not in jsonld

    def test_no_shacl(self):
        assert to_shacl(collection(id=f"{EX}Users")) is None


class TestApiDocumentationJsonLd:
    def test_document(self):
        jsonld = to_jsonld(_api())
        assert jsonld["@id"] == f"{EX}doc"
        assert jsonld["@type"] == f"{HYDRA}ApiDocumentation"
        assert jsonld[f"{HYDRA}title"] == "Example API"
        assert jsonld[f"{HYDRA}entrypoint"] == {"@id": "/api"}
        assert jsonld[f"{HLD}entrypointClass"] == {"@id": f"{EX}User"}
        classes = jsonld[f"{HYDRA}supportedClass"]
        assert [c["@id"] for c in classes] == [f"{EX}User", f"{EX}Users"]

    def test_idempotent(self):
        api = _api()
        assert to_jsonld(api) == to_jsonld(api)

    def test_no_shacl(self):
        assert to_shacl(_api()) is None

    def test_shapes_graph(self):
        graph = shapes_graph(_api())["@graph"]
        assert [shape["@id"] for shape in graph] == [f"{EX}User"]


# ═══════════════════════════════════════════════════════════════════
# Dispatch
# ═══════════════════════════════════════════════════════════════════


class TestDispatch:
    @pytest.mark.parametrize("value", [{"@id": "x"}, "http://example.org", None, CommonProps()])
    def test_jsonld_rejects_non_entities(self, value):
        with pytest.raises(TypeError):
            to_jsonld(value)

    def test_shacl_rejects_non_entities(self):
        with pytest.raises(TypeError):
            to_shacl({"@id": "x"})

    def test_operation_and_property_have_no_shacl(self):
        assert to_shacl(operation()) is None
        assert to_shacl(property(id=f"{EX}name")) is None

    def test_path_identifier_echoed(self):
        cls = supported_class(id="/users/{id}")
        assert to_jsonld(cls)["@id"] == "/users/{id}"
