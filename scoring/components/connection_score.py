"""
Connection scoring: connectivity and redundancy over the built graph.
"""

import logging

from network_parser.core.models import Network
from network_parser.graph import GraphBuilder, ConnectivityAnalyzer, RedundancyAnalyzer

from ..core.interfaces import ScoreComponent, ScoreResult, ScoreType
from ..score_helpers import summarize_items

logger = logging.getLogger(__name__)


class ConnectionScore(ScoreComponent):
    """
    Builds the network graph once, then scores how many segments it falls
    into and whether it survives the loss of any single connection.
    """

    def __init__(self, config=None):
        super().__init__(config)
        self._graph_builder = GraphBuilder()
        self._connectivity_analyzer = ConnectivityAnalyzer()
        self._redundancy_analyzer = RedundancyAnalyzer()

    @property
    def score_type(self) -> ScoreType:
        return ScoreType.CONNECTION

    def calculate(self, network: Network) -> ScoreResult:
        cfg = self.config

        if not network.connections:
            return ScoreResult(
                score=0,
                feedback=("No connections found - devices must be connected",),
                details={'components': len(network.devices), 'redundant': False},
            )

        score = 0
        feedback = []

        built = self._graph_builder.build(network.devices, network.connections)
        if built.invalid_count:
            feedback.append(f"{built.invalid_count} invalid connection(s) found")

        connectivity = self._connectivity_analyzer.analyze(built.graph)
        segments = connectivity.component_count
        if segments == 1:
            feedback.append("All devices are connected in a single network")
            score += cfg.connectivity_points
        else:
            feedback.append(f"Network has {segments} disconnected segments")
            score += max(0, cfg.connectivity_points - (segments - 1) * cfg.segment_penalty)
            if connectivity.isolated_nodes:
                feedback.append(
                    "Isolated devices: "
                    + summarize_items(connectivity.isolated_nodes, cfg.max_listed_items)
                )

        redundancy = self._redundancy_analyzer.analyze(built.graph)
        if redundancy.is_redundant:
            feedback.append("Network has redundant connections for fault tolerance")
            score += cfg.redundancy_points
        else:
            feedback.append("Consider adding redundant connections for better reliability")
            if redundancy.bridges:
                links = [f"{u}-{v}" for u, v in redundancy.bridges]
                feedback.append(
                    "Single points of failure: "
                    + summarize_items(links, cfg.max_listed_items)
                )

        logger.debug(f"Connection score {score} ({segments} segment(s), redundant={redundancy.is_redundant})")

        return ScoreResult(
            score=score,
            feedback=tuple(feedback),
            details={
                'components': segments,
                'redundant': redundancy.is_redundant,
                'invalid_connections': built.invalid_count,
                'bridges': len(redundancy.bridges),
            },
        )
