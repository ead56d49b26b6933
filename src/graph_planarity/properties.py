"""
Named graph properties.

Adapters exposing the planarity predicates behind a common ``run(graph)``
interface, so a host framework can register and invoke them by name:

- GraphProperty: Abstract base for boolean graph properties
- IsPlanar: Planarity
- IsMaximallyPlanar: Maximal planarity
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .maximal import is_maximally_planar
from .planarity import is_planar


class GraphProperty(ABC):
    """
    Abstract base class for boolean graph properties.

    Instances hold no state between calls; every ``run`` is independent.

    Example:
        prop = IsPlanar()
        prop.run(graph)
    """

    name: str = ""

    @abstractmethod
    def run(self, graph: Any) -> bool:
        """Evaluate the property on ``graph``."""
        pass

    def __call__(self, graph: Any) -> bool:
        return self.run(graph)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class IsPlanar(GraphProperty):
    """The graph admits a planar embedding."""

    name = "is_planar"

    def run(self, graph: Any) -> bool:
        return is_planar(graph)


class IsMaximallyPlanar(GraphProperty):
    """The graph is planar and no edge can be added while staying planar."""

    name = "is_maximally_planar"

    def run(self, graph: Any) -> bool:
        return is_maximally_planar(graph)


__all__ = [
    "GraphProperty",
    "IsPlanar",
    "IsMaximallyPlanar",
]
