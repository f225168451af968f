"""Vocabulary resolution for Hydra models.

Builders and serializers never inline vocabulary IRIs; they ask a
:class:`Resolver` to expand terms such as ``"hydra:Class"``.  The
default :class:`Namespaces` table is created once at import time and is
never mutated afterwards; callers that need extra prefixes derive a new
table with :meth:`Namespaces.with_prefixes`.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, Optional, Protocol, runtime_checkable


HYDRA = "http://www.w3.org/ns/hydra/core#"
RDF = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
RDFS = "http://www.w3.org/2000/01/rdf-schema#"
XSD = "http://www.w3.org/2001/XMLSchema#"
SHACL = "http://www.w3.org/ns/shacl#"
OWL = "http://www.w3.org/2002/07/owl#"
HLD = "https://w3id.org/hydra-ld/vocab#"

DEFAULT_PREFIXES: dict[str, str] = {
    "hydra": HYDRA,
    "rdf": RDF,
    "rdfs": RDFS,
    "xsd": XSD,
    "sh": SHACL,
    "owl": OWL,
    "hld": HLD,
}


@runtime_checkable
class Resolver(Protocol):
    """Maps a vocabulary term to a fully qualified IRI."""

    def resolve(self, term: str) -> str:
        ...


class Namespaces:
    """Immutable prefix table implementing :class:`Resolver`.

    ``resolve("prefix:suffix")`` expands registered prefixes.  Any other
    string (a full IRI, a path, a CURIE with an unregistered prefix) is
    returned unchanged, so already-expanded IRIs can be passed anywhere a
    term is accepted.
    """

    __slots__ = ("_prefixes",)

    def __init__(self, prefixes: Optional[Mapping[str, str]] = None) -> None:
        table = {**DEFAULT_PREFIXES, **(prefixes or {})}
        for prefix, iri in table.items():
            if not prefix or ":" in prefix:
                raise ValueError(f"Invalid prefix: {prefix!r}")
            if not isinstance(iri, str) or not iri:
                raise ValueError(f"Prefix {prefix!r} must map to a non-empty IRI")
        self._prefixes = MappingProxyType(table)

    @property
    def prefixes(self) -> Mapping[str, str]:
        return self._prefixes

    def resolve(self, term: str) -> str:
        if not isinstance(term, str):
            raise TypeError(f"Term must be a string, got: {type(term).__name__}")
        prefix, sep, suffix = term.partition(":")
        if not sep or suffix.startswith("//"):
            return term
        base = self._prefixes.get(prefix)
        if base is None:
            return term
        return base + suffix

    def compact(self, iri: str) -> str:
        """Return the CURIE for *iri*, or *iri* itself when no prefix matches.

        The longest matching namespace wins.
        """
        best: Optional[tuple[str, str]] = None
        for prefix, base in self._prefixes.items():
            if iri.startswith(base) and len(iri) > len(base):
                if best is None or len(base) > len(best[1]):
                    best = (prefix, base)
        if best is None:
            return iri
        return f"{best[0]}:{iri[len(best[1]):]}"

    def with_prefixes(self, **prefixes: str) -> "Namespaces":
        """Return a new table with *prefixes* added or overridden."""
        return Namespaces({**self._prefixes, **prefixes})

    def context(self) -> dict[str, Any]:
        """JSON-LD ``@context`` declaring every prefix in the table."""
        return {prefix: iri for prefix, iri in self._prefixes.items()}

    def __contains__(self, prefix: object) -> bool:
        return prefix in self._prefixes

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Namespaces):
            return NotImplemented
        return dict(self._prefixes) == dict(other._prefixes)

    def __hash__(self) -> int:
        return hash(frozenset(self._prefixes.items()))

    def __repr__(self) -> str:
        return f"Namespaces({dict(self._prefixes)!r})"


DEFAULT_NAMESPACES = Namespaces()
