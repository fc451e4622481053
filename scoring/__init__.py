"""
Scoring Package - Grading Policy for Network Topology Designs

Turns the analyzer outputs of ``network_parser`` into points, feedback
lines and a pass/fail verdict.

Architecture:
- core/: Interfaces, value types and exceptions
- components/: One scoring component per analyzer group, plus the breakdown
- config.py: Point values and thresholds
- network_score.py: The aggregating scorer

Example Usage:
    from scoring import NetworkTopologyScorer

    scorer = NetworkTopologyScorer()
    result = scorer.evaluate({
        "devices": ["Router", "Switch", "PC1", "PC2"],
        "connections": [["Router", "Switch"], ["Switch", "PC1"], ["Switch", "PC2"]],
    })
    print(result.score, result.passed)
"""

# Core interfaces and value types
from .core.interfaces import ScoreType, ScoreResult, ScoreComponent
from .core.exceptions import (
    ScoringError,
    EvaluationError,
    ConfigurationError
)

# Configuration
from .config import ScoringConfig

# Components
from .components import (
    ScoreBreakdown,
    DeviceScore,
    ConnectionScore,
    TopologyScore,
    SecurityScore,
    SubnetScore,
)

# Aggregation
from .analysis_result import AnalysisResult
from .network_score import NetworkTopologyScorer, evaluate_network

__version__ = "1.0.0"

__all__ = [
    # Core
    'ScoreType',
    'ScoreResult',
    'ScoreComponent',

    # Exceptions
    'ScoringError',
    'EvaluationError',
    'ConfigurationError',

    # Configuration
    'ScoringConfig',

    # Components
    'ScoreBreakdown',
    'DeviceScore',
    'ConnectionScore',
    'TopologyScore',
    'SecurityScore',
    'SubnetScore',

    # Aggregation
    'AnalysisResult',
    'NetworkTopologyScorer',
    'evaluate_network',
]

# Module configuration
import logging
logging.getLogger(__name__).addHandler(logging.NullHandler())
