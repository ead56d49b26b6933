"""
graph-planarity: Exact planarity and maximal-planarity tests in Python.

This package decides two properties of simple undirected graphs:
- is_planar: the graph can be drawn in the plane without edge crossings
- is_maximally_planar: the graph is planar and no edge can be added
  without breaking planarity

Planarity is decided by a memoized delete/contract search that bottoms out
in exhaustive K5 / K3,3 subgraph tests on small graphs.
"""

__version__ = "0.1.0"

# Maximal planarity
from .maximal import is_maximally_planar

# Planarity search
from .planarity import (
    GraphState,
    GraphStructureWarning,
    PerformanceWarning,
    PlanarityCache,
    PlanaritySearch,
    connected_components,
    is_connected,
    is_planar,
    snapshot,
)

# Named property adapters
from .properties import (
    GraphProperty,
    IsMaximallyPlanar,
    IsPlanar,
)

# Shared types for external graphs
from .types import (
    Graph,
    GraphLike,
    Link,
    LinkLike,
    Node,
    NodeLike,
    get_link_endpoints,
    get_node_id,
)

# Validation utilities
from .validation import (
    InvalidLinkError,
    InvalidNodeError,
    MalformedGraphError,
    ValidationError,
    validate_link_endpoints,
    validate_node_ids,
)

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Node",
    "Link",
    "Graph",
    "GraphLike",
    "NodeLike",
    "LinkLike",
    "get_node_id",
    "get_link_endpoints",
    # Predicates
    "is_planar",
    "is_maximally_planar",
    # Named properties
    "GraphProperty",
    "IsPlanar",
    "IsMaximallyPlanar",
    # Search internals
    "GraphState",
    "PlanarityCache",
    "PlanaritySearch",
    "snapshot",
    "connected_components",
    "is_connected",
    # Warnings
    "GraphStructureWarning",
    "PerformanceWarning",
    # Validation
    "ValidationError",
    "InvalidNodeError",
    "InvalidLinkError",
    "MalformedGraphError",
    "validate_node_ids",
    "validate_link_endpoints",
]
