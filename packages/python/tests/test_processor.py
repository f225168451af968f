"""Tests for the PyLD-backed processing facade."""

import pytest

from hydra_ld.builders import (
    api_documentation,
    collection,
    get_operation,
    operation,
    property,
    supported_class,
    supported_property,
)
from hydra_ld.namespaces import DEFAULT_NAMESPACES, HYDRA, RDF, SHACL
from hydra_ld.processor import DEFAULT_PROCESSOR_OPTIONS, HydraProcessor
from hydra_ld.serialization import to_jsonld


EX = "http://example.org/"


@pytest.fixture
def processor():
    return HydraProcessor()


@pytest.fixture
def api():
    user = supported_class(
        id=f"{EX}User",
        supported_properties=[
            supported_property(property=property(id=f"{EX}name"), required=True),
        ],
        operations=[get_operation(returns=f"{EX}User")],
    )
    return api_documentation(
        id=f"{EX}doc",
        supported_classes=[user, collection(id=f"{EX}Users")],
        entrypoint="/api",
        entrypoint_class=f"{EX}User",
    )


class TestConfiguration:
    def test_default_options(self):
        assert DEFAULT_PROCESSOR_OPTIONS["base"] == "http://localhost/"

    def test_options_merged(self):
        proc = HydraProcessor(options={"base": "http://example.org/"})
        assert proc._options["base"] == "http://example.org/"
        assert DEFAULT_PROCESSOR_OPTIONS["base"] == "http://localhost/"

    def test_namespaces(self, processor):
        assert processor.namespaces is DEFAULT_NAMESPACES


class TestDocument:
    def test_matches_serializer(self, processor, api):
        assert processor.document(api) == to_jsonld(api)

    def test_shapes(self, processor, api):
        shapes = processor.shapes(api)
        assert shapes["@context"]["sh"] == SHACL
        assert [s["@id"] for s in shapes["@graph"]] == [f"{EX}User"]


class TestExpand:
    def test_operation(self, processor):
        expanded = processor.expand(operation(method="POST"))
        assert expanded == [{
            "@type": [f"{HYDRA}Operation"],
            f"{HYDRA}method": [{"@value": "POST"}],
        }]

    def test_relative_entrypoint_resolved_against_base(self, processor, api):
        node = processor.expand(api)[0]
        assert node[f"{HYDRA}entrypoint"] == [{"@id": "http://localhost/api"}]


class TestCompact:
    def test_default_context(self, processor):
        compacted = processor.compact(operation(method="DELETE"))
        assert compacted["@type"] == "hydra:Operation"
        assert compacted["hydra:method"] == "DELETE"
        assert compacted["@context"]["hydra"] == HYDRA


class TestFlatten:
    def test_node_list(self, processor, api):
        nodes = processor.flatten(api)
        ids = {node["@id"] for node in nodes}
        assert f"{EX}doc" in ids
        assert f"{EX}User" in ids
        assert f"{EX}Users" in ids


class TestToRdf:
    def test_type_triples(self, processor, api):
        nquads = processor.to_rdf(api)
        assert (
            f"<{EX}User> <{RDF}type> <{HYDRA}Class> ." in nquads
        )
        assert (
            f"<{EX}doc> <{RDF}type> <{HYDRA}ApiDocumentation> ." in nquads
        )
