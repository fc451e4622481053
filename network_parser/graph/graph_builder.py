"""
Graph builder module for constructing network graphs.
"""

import logging
from dataclasses import dataclass, field
from typing import List

import networkx as nx

from ..core.models import Device, Connection

logger = logging.getLogger(__name__)


@dataclass
class GraphBuildResult:
    """Graph together with the bookkeeping from connection filtering."""
    graph: nx.Graph
    valid_connections: List[Connection] = field(default_factory=list)
    invalid_connections: List[Connection] = field(default_factory=list)

    @property
    def invalid_count(self) -> int:
        return len(self.invalid_connections)


class GraphBuilder:
    """
    Builds undirected network graphs from canonical devices and connections.
    """

    def build(self, devices: List[Device], connections: List[Connection]) -> GraphBuildResult:
        """
        Build a NetworkX graph from devices and connections.

        Every device becomes a node, isolated or not. Connections naming an
        unknown device are left out of the graph and reported back.

        Args:
            devices: Canonical device records
            connections: Canonical connection records

        Returns:
            GraphBuildResult with the graph and the filtered connections
        """
        graph = nx.Graph(name="Network Graph")

        for device in devices:
            graph.add_node(device.id, device=device)

        device_ids = set(graph.nodes)
        valid, invalid = [], []

        for connection in connections or []:
            if connection.is_valid_for(device_ids):
                graph.add_edge(connection.source, connection.target)
                valid.append(connection)
            else:
                invalid.append(connection)

        if invalid:
            logger.debug(f"Discarded {len(invalid)} connection(s) referencing unknown devices")

        return GraphBuildResult(graph=graph, valid_connections=valid, invalid_connections=invalid)
