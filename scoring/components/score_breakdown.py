"""
Score Breakdown Data Structure

Holds the per-group sub-scores of one evaluation and provides the
clamped total.
"""

from dataclasses import dataclass
from typing import Dict

from ..core.interfaces import ScoreType
from ..score_helpers import clamp_score


@dataclass(frozen=True)
class ScoreBreakdown:
    """Container for the sub-score of every analyzer group."""

    device_score: int = 0
    connection_score: int = 0
    topology_score: int = 0
    security_score: int = 0
    subnet_score: int = 0

    @classmethod
    def from_scores(cls, scores: Dict[ScoreType, int]) -> 'ScoreBreakdown':
        return cls(**{f"{score_type.value}_score": value for score_type, value in scores.items()})

    @property
    def raw_total(self) -> int:
        """Unclamped sum of every sub-score."""
        return (
            self.device_score +
            self.connection_score +
            self.topology_score +
            self.security_score +
            self.subnet_score
        )

    def get_total_score(self, max_score: int = 100) -> int:
        """
        Calculate the total score.

        Args:
            max_score: Upper bound of the scale

        Returns:
            Sum of sub-scores clamped to [0, max_score]
        """
        return clamp_score(self.raw_total, max_score)

    def get_component_dict(self) -> Dict[str, int]:
        """Get all sub-scores as a dictionary."""
        return {
            'device': self.device_score,
            'connection': self.connection_score,
            'topology': self.topology_score,
            'security': self.security_score,
            'subnet': self.subnet_score,
        }

    def to_details(self) -> Dict[str, int]:
        """Sub-scores keyed the way the HTTP response reports them."""
        return {
            'deviceScore': self.device_score,
            'connectionScore': self.connection_score,
            'topologyScore': self.topology_score,
            'securityScore': self.security_score,
            'subnetScore': self.subnet_score,
        }

    def __str__(self) -> str:
        parts = ", ".join(f"{name}={value}" for name, value in self.get_component_dict().items())
        return f"ScoreBreakdown({parts}, raw_total={self.raw_total})"
