"""
Core interfaces for the scoring system.

This module defines the abstract base classes and value types that
establish the contract for scoring components.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from network_parser.core.models import Network


class ScoreType(Enum):
    """Analyzer groups contributing to the network score."""
    DEVICE = "device"
    CONNECTION = "connection"
    TOPOLOGY = "topology"
    SECURITY = "security"
    SUBNET = "subnet"


@dataclass(frozen=True)
class ScoreResult:
    """Points and feedback lines produced by one scoring component."""
    score: int = 0
    feedback: Tuple[str, ...] = ()
    details: Dict[str, Any] = field(default_factory=dict)


class ScoreComponent(ABC):
    """Abstract base class for individual scoring components."""

    def __init__(self, config: Optional[Any] = None):
        from ..config import ScoringConfig
        self.config = config or ScoringConfig()

    @property
    @abstractmethod
    def score_type(self) -> ScoreType:
        """The analyzer group this component scores."""
        pass

    @abstractmethod
    def calculate(self, network: Network) -> ScoreResult:
        """Calculate points and feedback for the given network."""
        pass
