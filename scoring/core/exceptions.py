"""
Exception classes for the scoring system.

This module defines custom exceptions used throughout the scoring system
to provide clear error handling and debugging information.
"""

from typing import Any, Dict, Optional


class ScoringError(Exception):
    """Base exception for scoring system errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        component: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.component = component

    def __str__(self) -> str:
        base_msg = self.message
        if self.component:
            base_msg = f"[{self.component}] {base_msg}"

        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            base_msg = f"{base_msg} (Details: {details_str})"

        return base_msg


class EvaluationError(ScoringError):
    """Error that occurs while evaluating a network."""

    def __init__(
        self,
        message: str,
        score_type: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, component=score_type, **kwargs)
        self.score_type = score_type


class ConfigurationError(ScoringError):
    """Error in scoring system configuration."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, component=config_key, **kwargs)
        self.config_key = config_key
