"""
Core interfaces for the network parser package.

This module defines the abstract base classes that set the contract
for the device-level analyzers.
"""

from abc import ABC, abstractmethod
from typing import Any, List

from .models import Device


class NetworkAnalyzer(ABC):
    """
    Abstract base class for device-level analyzers.

    Analyzers inspect the canonical device list and return an immutable
    result object describing what they found. They never assign points;
    scoring policy lives in the scoring package.
    """

    @abstractmethod
    def analyze(self, devices: List[Device]) -> Any:
        """
        Analyze the given devices.

        Args:
            devices: Canonical device records

        Returns:
            Analyzer-specific result object
        """
        pass
