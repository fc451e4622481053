"""
Scoring Components Module

Contains the per-group scoring components and the breakdown
container that combines their results.
"""

from .score_breakdown import ScoreBreakdown
from .device_score import DeviceScore
from .connection_score import ConnectionScore
from .topology_score import TopologyScore
from .security_score import SecurityScore
from .subnet_score import SubnetScore

__all__ = [
    'ScoreBreakdown',
    'DeviceScore',
    'ConnectionScore',
    'TopologyScore',
    'SecurityScore',
    'SubnetScore',
]
