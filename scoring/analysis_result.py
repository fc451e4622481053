"""
Analysis result returned for one network evaluation.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from .components.score_breakdown import ScoreBreakdown

PASSED_MESSAGE = "Excellent network design!"
FAILED_MESSAGE = "Network needs improvement. Review the feedback above."
INCOMPLETE_MESSAGE = "Network topology is incomplete!"
NO_DEVICES_FEEDBACK = "No devices found in network topology"


@dataclass(frozen=True)
class AnalysisResult:
    """
    Outcome of grading one network design.

    ``passed`` is derived from ``score`` and the pass threshold at
    construction time and never set independently.
    """

    score: int
    passed: bool
    feedback: Tuple[str, ...] = ()
    message: str = ""
    breakdown: ScoreBreakdown = field(default_factory=ScoreBreakdown)
    max_score: int = 100

    @classmethod
    def incomplete(cls, max_score: int = 100) -> 'AnalysisResult':
        """Zero-score result for a network without a usable device list."""
        return cls(
            score=0,
            passed=False,
            feedback=(NO_DEVICES_FEEDBACK,),
            message=INCOMPLETE_MESSAGE,
            max_score=max_score,
        )

    @property
    def feedback_text(self) -> str:
        return "\n".join(self.feedback)

    def to_response(self) -> Dict[str, Any]:
        """Convert to the JSON body returned by the HTTP endpoint."""
        return {
            "result": self.feedback_text,
            "score": self.score,
            "maxScore": self.max_score,
            "passed": self.passed,
            "message": self.message,
            "details": self.breakdown.to_details(),
        }

    def __str__(self) -> str:
        status = "PASSED" if self.passed else "FAILED"
        return f"AnalysisResult({status}, score={self.score}/{self.max_score})"
