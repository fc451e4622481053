"""
Network Parser Package - Network Topology Parsing and Analysis

Turns a submitted network description (devices, connections, optional
subnets) into canonical records and an undirected graph, and runs the
structural and configuration analyzers over them.

Architecture:
- core/: Canonical models, interfaces, constants and exceptions
- graph/: Graph construction, connectivity and redundancy analysis
- analyzers/: Device composition, addressing, security and subnet checks

Example Usage:
    from network_parser import Network, GraphBuilder, ConnectivityAnalyzer

    network = Network.from_dict(payload["network"])
    built = GraphBuilder().build(network.devices, network.connections)

    connectivity = ConnectivityAnalyzer().analyze(built.graph)
    print(f"Segments: {connectivity.component_count}")
"""

# Core models and interfaces
from .core.models import Device, Connection, Subnet, Network
from .core.interfaces import NetworkAnalyzer
from .core.exceptions import NetworkParserError, ValidationError, DeviceParseError

# Graph construction and structural analysis
from .graph import (
    GraphBuilder, GraphBuildResult,
    ConnectivityAnalyzer, ConnectivityResult,
    RedundancyAnalyzer, RedundancyResult,
)

# Device-level analyzers
from .analyzers import (
    DeviceAnalyzer, DeviceComposition,
    AddressingAnalyzer, AddressingReport, is_valid_ipv4,
    SecurityAnalyzer, SecurityPosture,
    SubnetAnalyzer, SubnetCheck, SubnetIssue,
)

__version__ = "1.0.0"

__all__ = [
    # Core models
    'Device',
    'Connection',
    'Subnet',
    'Network',

    # Interfaces
    'NetworkAnalyzer',

    # Exceptions
    'NetworkParserError',
    'ValidationError',
    'DeviceParseError',

    # Graph
    'GraphBuilder',
    'GraphBuildResult',
    'ConnectivityAnalyzer',
    'ConnectivityResult',
    'RedundancyAnalyzer',
    'RedundancyResult',

    # Analyzers
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

# Module configuration
import logging
logging.getLogger(__name__).addHandler(logging.NullHandler())
