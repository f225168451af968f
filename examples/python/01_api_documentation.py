"""
Example 01: API Documentation
=============================

Builds the Hydra description of a small users API: a User class with a
required name and a friends link, a paginated Users collection, and the
API documentation tying them to an entrypoint.

Use case: A service publishes machine-readable documentation so clients
can discover which classes, properties and operations it exposes.
"""

import json

from hydra_ld import (
    ValidationError,
    api_documentation,
    collection,
    find_class_operations,
    find_model,
    get_operation,
    link,
    post_operation,
    property,
    supported_class,
    supported_property,
    to_jsonld,
)

EX = "http://example.org/"

# ── 1. Properties and links ──────────────────────────────────────

print("=== 1. Supported Properties ===\n")

name = supported_property(
    property=property(id="http://schema.org/name", title="name"),
    required=True,
    max_count=1,
)
friends = supported_property(
    property=link(id=f"{EX}friends", range=f"{EX}Users"),
    readonly=True,
    operations=[get_operation(returns=f"{EX}Users")],
)
print(f"name min_count: {name.min_count}")   # 1, implied by required=True
print(f"friends operations: {[op.method for op in friends.operations]}")

# ── 2. Classes and collections ───────────────────────────────────

print("\n=== 2. Classes ===\n")

user = supported_class(
    id=f"{EX}User",
    title="User",
    description="A registered user",
    supported_properties=[name, friends],
    operations=[get_operation(returns=f"{EX}User")],
)
users = collection(
    id=f"{EX}Users",
    is_paginated=True,
    member_class=f"{EX}User",
    operations=[post_operation(expects=f"{EX}User", returns=f"{EX}User")],
)

api = api_documentation(
    id=f"{EX}doc",
    title="Users API",
    supported_classes=[user, users],
    entrypoint="/api",
    entrypoint_class=f"{EX}Users",
)

print(json.dumps(to_jsonld(api), indent=2))

# ── 3. Lookups ───────────────────────────────────────────────────

print("\n=== 3. Lookups ===\n")

print(f"Users operations: {[op.method for op in find_class_operations(api, f'{EX}Users')]}")
print(f"friends is a link: {find_model(api, f'{EX}friends').is_link}")

# ── 4. Invariants are checked when building ──────────────────────

print("\n=== 4. Rejected Definitions ===\n")

try:
    supported_property(
        property=property(id="http://schema.org/name"),
        operations=[get_operation()],
    )
except ValidationError as exc:
    print(f"{exc.constraint}: {exc.message}")

try:
    api_documentation(
        supported_classes=[user],
        entrypoint="/api",
        entrypoint_class=f"{EX}Missing",
    )
except ValidationError as exc:
    print(f"{exc.constraint}: {exc.message}")
