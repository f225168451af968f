"""
Example 02: SHACL Shapes and JSON-LD Processing
===============================================

Derives SHACL node shapes from supported-property cardinality and runs
the serialized documentation through the JSON-LD processor.

Use case: A server validates incoming instances against the shapes it
advertises, and clients consume the documentation as compacted JSON-LD
or as RDF.
"""

import json

from hydra_ld import (
    HydraProcessor,
    api_documentation,
    property,
    supported_class,
    supported_property,
    to_shacl,
)

EX = "http://example.org/"

user = supported_class(
    id=f"{EX}User",
    supported_properties=[
        supported_property(property=property(id=f"{EX}email"), required=True, max_count=1),
        supported_property(property=property(id=f"{EX}nickname"), max_count=3),
        supported_property(property=property(id=f"{EX}bio")),
    ],
)
api = api_documentation(
    supported_classes=[user],
    entrypoint="/api",
    entrypoint_class=f"{EX}User",
)

# ── 1. SHACL ─────────────────────────────────────────────────────

print("=== 1. Node Shape ===\n")

# bio declares no cardinality, so only two property shapes appear
print(json.dumps(to_shacl(user), indent=2))

# ── 2. Processing ────────────────────────────────────────────────

processor = HydraProcessor(options={"base": "https://api.example.org/"})

print("\n=== 2. Compacted ===\n")
print(json.dumps(processor.compact(api), indent=2))

print("\n=== 3. N-Quads ===\n")
print(processor.to_rdf(api))

print("\n=== 4. Shapes Graph ===\n")
print(json.dumps(processor.shapes(api), indent=2))
