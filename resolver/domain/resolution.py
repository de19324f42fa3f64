"""Explicit success-or-failure result for module lookups."""

from dataclasses import dataclass
from typing import Optional

from resolver.domain.entities import Module
from resolver.domain.errors import PathNotFound


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving a path to a module."""

    path: Optional[str]
    module: Optional[Module] = None
    error: Optional[PathNotFound] = None

    @property
    def ok(self) -> bool:
        """True when a module was found."""
        return self.module is not None
