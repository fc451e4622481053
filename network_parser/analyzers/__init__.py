"""
Analyzers package for device, addressing, security and subnet checks.
"""

from .device_analyzer import DeviceAnalyzer, DeviceComposition
from .addressing_analyzer import AddressingAnalyzer, AddressingReport, is_valid_ipv4
from .security_analyzer import SecurityAnalyzer, SecurityPosture
from .subnet_analyzer import SubnetAnalyzer, SubnetCheck, SubnetIssue

__all__ = [
    'DeviceAnalyzer',
    'DeviceComposition',
    'AddressingAnalyzer',
    'AddressingReport',
    'is_valid_ipv4',
    'SecurityAnalyzer',
    'SecurityPosture',
    'SubnetAnalyzer',
    'SubnetCheck',
    'SubnetIssue',
]
