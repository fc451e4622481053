"""
Network topology scorer.

Runs every scoring component over a submitted network and combines their
points and feedback into a single AnalysisResult.
"""

import logging
from typing import Any, Dict, List, Optional

from network_parser.core.models import Network

from .analysis_result import AnalysisResult, PASSED_MESSAGE, FAILED_MESSAGE
from .components import (
    ScoreBreakdown,
    DeviceScore,
    ConnectionScore,
    TopologyScore,
    SecurityScore,
    SubnetScore,
)
from .config import ScoringConfig
from .core.exceptions import EvaluationError, ScoringError
from .core.interfaces import ScoreComponent, ScoreResult, ScoreType

logger = logging.getLogger(__name__)


class NetworkTopologyScorer:
    """
    Grades network designs across device, connection, topology, security
    and subnet criteria.

    The scorer keeps no per-request state: one instance can evaluate any
    number of networks, from any number of threads.

    Scoring Groups (feedback is emitted in this order):
    - Device: routers, switches, firewalls and type diversity
    - Connection: connected segments and single-link redundancy
    - Topology: hierarchical design, VLANs and IP addressing
    - Security: DMZ, access control lists and VPN
    - Subnet: CIDR validity of declared subnets
    """

    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = config or ScoringConfig()
        self.config.validate()

        self.components: List[ScoreComponent] = [
            DeviceScore(self.config),
            ConnectionScore(self.config),
            TopologyScore(self.config),
            SecurityScore(self.config),
            SubnetScore(self.config),
        ]

    def evaluate(self, network_data: Optional[Dict[str, Any]]) -> AnalysisResult:
        """
        Evaluate one submitted network.

        A missing, non-list or empty device list short-circuits to a
        zero-score result before any analyzer runs.

        Args:
            network_data: Raw network mapping with ``devices``,
                ``connections`` and optionally ``subnets``

        Returns:
            AnalysisResult with the clamped score and ordered feedback

        Raises:
            EvaluationError: If the network cannot be analyzed, e.g. a
                device record has an unsupported shape
        """
        if not self._has_devices(network_data):
            logger.info("Network has no devices, returning incomplete result")
            return AnalysisResult.incomplete(self.config.max_score)

        try:
            network = Network.from_dict(network_data)
            results = self._calculate_components(network)
        except ScoringError:
            raise
        except Exception as e:
            logger.error(f"Network evaluation failed: {e}", exc_info=True)
            raise EvaluationError(
                "Failed to validate network topology",
                details={'error': str(e)},
            ) from e

        breakdown = ScoreBreakdown.from_scores(
            {score_type: result.score for score_type, result in results.items()}
        )
        score = breakdown.get_total_score(self.config.max_score)
        passed = score >= self.config.pass_threshold

        feedback = []
        for result in results.values():
            feedback.extend(result.feedback)

        logger.info(f"Network scored {score}/{self.config.max_score} ({'passed' if passed else 'failed'})")

        return AnalysisResult(
            score=score,
            passed=passed,
            feedback=tuple(feedback),
            message=PASSED_MESSAGE if passed else FAILED_MESSAGE,
            breakdown=breakdown,
            max_score=self.config.max_score,
        )

    def _calculate_components(self, network: Network) -> Dict[ScoreType, ScoreResult]:
        """Run every component in order; dict order is feedback order."""
        results = {}
        for component in self.components:
            result = component.calculate(network)
            logger.debug(f"{component.score_type.value} score: {result.score}")
            results[component.score_type] = result
        return results

    @staticmethod
    def _has_devices(network_data: Any) -> bool:
        if not isinstance(network_data, dict):
            return False
        devices = network_data.get('devices')
        return isinstance(devices, list) and len(devices) > 0


def evaluate_network(network_data: Optional[Dict[str, Any]], config: Optional[ScoringConfig] = None) -> AnalysisResult:
    """Convenience wrapper: grade one network with a fresh scorer."""
    return NetworkTopologyScorer(config).evaluate(network_data)
