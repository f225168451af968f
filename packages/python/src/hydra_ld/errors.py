"""Error taxonomy for hydra-ld.

Construction failures are raised at the offending field and carry the
same four facts a validation finding reports: the field ``path``, the
``constraint`` that failed, a human ``message`` and the offending
``value``.
"""

from __future__ import annotations
from typing import Any


class HydraError(ValueError):
    """Base class for every error raised while building an API model."""


class ValidationError(HydraError):
    """An entity violates a structural or cross-referential invariant."""

    def __init__(
        self,
        path: str,
        constraint: str,
        message: str,
        value: Any = None,
    ) -> None:
        super().__init__(f"{path}: {message} [{constraint}]")
        self.path = path
        self.constraint = constraint
        self.message = message
        self.value = value


class GrammarViolation(ValidationError):
    """A string field does not satisfy its path/URI/CURIE/literal grammar."""
