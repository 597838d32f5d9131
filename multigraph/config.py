"""
    Graph configuration - algorithm options and diagnostics.

    Plain dataclasses; a Graph built without a config uses the defaults.
"""
from dataclasses import dataclass, field


@dataclass
class ShortestPathConfig:
    """
    Controls Dijkstra's handling of edge weights.

    Attributes:
        check_non_negative: Raise ValueError when the default weight or an
                            edge weight met during relaxation is below zero.
                            When False, negative weights give undefined
                            distances.
    """
    check_non_negative: bool = False


@dataclass
class GraphConfig:
    """
    Top-level configuration for a Graph.

    Attributes:
        shortest_path:  Options for ``Graph.dijkstra``.
        log_mutations:  Emit a DEBUG record for every successful
                        add/remove of a node or edge.
    """
    shortest_path: ShortestPathConfig = field(default_factory=ShortestPathConfig)
    log_mutations: bool = False
