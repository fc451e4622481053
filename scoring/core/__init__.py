"""
Core Module for Scoring Package

Contains interfaces, value types and exceptions for the
scoring system architecture.
"""

from .exceptions import (
    ScoringError,
    EvaluationError,
    ConfigurationError
)
from .interfaces import (
    ScoreType,
    ScoreResult,
    ScoreComponent
)

__all__ = [
    'ScoreType',
    'ScoreResult',
    'ScoreComponent',
    'ScoringError',
    'EvaluationError',
    'ConfigurationError',
]
