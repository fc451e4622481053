"""
Redundancy analyzer for network graphs.

A network is redundant when no single connection is a point of failure:
removing any one link leaves every device reachable. Equivalently the graph
is connected and has no bridge edge, which networkx finds in O(V + E).
"""

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

import networkx as nx

logger = logging.getLogger(__name__)


@dataclass
class RedundancyResult:
    """Results from redundancy analysis."""
    is_redundant: bool = False
    bridges: List[Tuple[str, str]] = field(default_factory=list)


class RedundancyAnalyzer:
    """
    Tests whether a network survives the loss of any single connection.
    """

    def analyze(self, graph: nx.Graph) -> RedundancyResult:
        """
        Analyze redundancy of the given graph.

        An edgeless graph is reported as not redundant, and so is a graph
        that is already split into several components.

        Args:
            graph: Undirected NetworkX graph

        Returns:
            RedundancyResult with the bridge connections, if any
        """
        links = graph.copy()
        links.remove_edges_from(list(nx.selfloop_edges(links)))

        if links.number_of_edges() == 0 or not nx.is_connected(links):
            return RedundancyResult(is_redundant=False)

        bridges = list(nx.bridges(links))
        logger.debug(f"Found {len(bridges)} bridge connection(s)")

        return RedundancyResult(is_redundant=not bridges, bridges=bridges)
