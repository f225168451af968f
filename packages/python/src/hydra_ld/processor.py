"""
HydraProcessor: JSON-LD processing of Hydra API models

Wraps PyLD so serialized API documentation can be expanded, compacted
against the namespace table, flattened or converted to N-Quads.
"""

from __future__ import annotations
import logging
from typing import Any, Optional

from pyld import jsonld

from hydra_ld.grammar import LOCAL_BASE
from hydra_ld.model import ApiDocumentation, Entity
from hydra_ld.namespaces import DEFAULT_NAMESPACES, Namespaces
from hydra_ld.serialization import shapes_graph, to_jsonld

logger = logging.getLogger(__name__)


DEFAULT_PROCESSOR_OPTIONS: dict[str, Any] = {
    # site-relative identifiers such as "/users" resolve against this base
    "base": LOCAL_BASE,
}


class HydraProcessor:
    """JSON-LD processor for Hydra model elements, wrapping PyLD."""

    def __init__(
        self,
        ns: Namespaces = DEFAULT_NAMESPACES,
        options: Optional[dict[str, Any]] = None,
    ):
        self._ns = ns
        self._options = {**DEFAULT_PROCESSOR_OPTIONS, **(options or {})}

    @property
    def namespaces(self) -> Namespaces:
        return self._ns

    # ── Serialization ────────────────────────────────────────────

    def document(self, entity: Entity) -> dict[str, Any]:
        """Serialized JSON-LD for *entity* (expanded IRIs, no context)."""
        return to_jsonld(entity, self._ns)

    def shapes(self, api: ApiDocumentation) -> dict[str, Any]:
        """SHACL shapes of every class in *api*, with a prefix context."""
        return {"@context": self._ns.context(), **shapes_graph(api, self._ns)}

    # ── Core Operations ──────────────────────────────────────────

    def expand(self, entity: Entity, **kwargs: Any) -> list[dict[str, Any]]:
        """Expand the serialized form of *entity*."""
        logger.debug("Expanding %s", type(entity).__name__)
        return jsonld.expand(self.document(entity), {**self._options, **kwargs})

    def compact(
        self, entity: Entity, ctx: Any = None, **kwargs: Any,
    ) -> dict[str, Any]:
        """Compact *entity*; the namespace table is the default context."""
        logger.debug("Compacting %s", type(entity).__name__)
        context = ctx if ctx is not None else self._ns.context()
        return jsonld.compact(
            self.document(entity), context, {**self._options, **kwargs},
        )

    def flatten(self, entity: Entity, ctx: Any = None, **kwargs: Any) -> Any:
        """Flatten *entity*; a node list without *ctx*, a compacted graph with it."""
        logger.debug("Flattening %s", type(entity).__name__)
        return jsonld.flatten(self.document(entity), ctx, {**self._options, **kwargs})

    def to_rdf(self, entity: Entity, **kwargs: Any) -> str:
        """Convert *entity* to N-Quads."""
        logger.debug("Converting %s to N-Quads", type(entity).__name__)
        return jsonld.to_rdf(
            self.document(entity),
            {**self._options, **kwargs, "format": "application/n-quads"},
        )
