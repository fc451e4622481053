"""
Graph Module - Network Graph Construction and Analysis

Contains the graph builder and the structural analyzers that
run over the built graph.
"""

from .graph_builder import GraphBuilder, GraphBuildResult
from .connectivity_analyzer import ConnectivityAnalyzer, ConnectivityResult
from .redundancy_analyzer import RedundancyAnalyzer, RedundancyResult

__all__ = [
    'GraphBuilder',
    'GraphBuildResult',
    'ConnectivityAnalyzer',
    'ConnectivityResult',
    'RedundancyAnalyzer',
    'RedundancyResult',
]
