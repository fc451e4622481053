"""
Connectivity analyzer for network graphs.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Set

import networkx as nx

logger = logging.getLogger(__name__)


@dataclass
class ConnectivityResult:
    """Results from connectivity analysis."""
    component_count: int = 0
    components: List[Set[str]] = field(default_factory=list)
    isolated_nodes: List[str] = field(default_factory=list)

    @property
    def is_connected(self) -> bool:
        return self.component_count == 1


class ConnectivityAnalyzer:
    """
    Counts connected components of an undirected network graph.
    """

    def analyze(self, graph: nx.Graph) -> ConnectivityResult:
        """
        Analyze connectivity of the given graph.

        Args:
            graph: Undirected NetworkX graph

        Returns:
            ConnectivityResult with components in node insertion order
        """
        components = list(nx.connected_components(graph))
        isolated = [node for node in graph.nodes if graph.degree(node) == 0]

        logger.debug(f"Found {len(components)} component(s), {len(isolated)} isolated node(s)")

        return ConnectivityResult(
            component_count=len(components),
            components=components,
            isolated_nodes=isolated,
        )
