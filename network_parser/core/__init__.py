"""
Core components for network topology modeling.

This package provides the canonical records that every analyzer
works on, together with the package exceptions.
"""

from .models import Device, Connection, Subnet, Network
from .exceptions import NetworkParserError, ValidationError, DeviceParseError
from .interfaces import NetworkAnalyzer

__all__ = [
    'Device',
    'Connection',
    'Subnet',
    'Network',
    'NetworkParserError',
    'ValidationError',
    'DeviceParseError',
    'NetworkAnalyzer',
]
