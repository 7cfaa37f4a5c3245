"""Configuration for heapgraph components."""

from dataclasses import dataclass

from heapgraph.types.base import Cost, DuplicateEdgePolicy


@dataclass
class GraphConfig:
    """Defaults applied when building graphs."""

    # Weight given to edges created without an explicit weight
    default_edge_weight: Cost = 1

    # Behaviour of a second connect_to() towards the same successor
    duplicate_edge_policy: DuplicateEdgePolicy = DuplicateEdgePolicy.ALLOW


# Global configuration instance, read at call time
GRAPH_CONFIG = GraphConfig()
