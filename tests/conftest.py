"""Pytest configuration and fixtures."""

import pytest

from scoring import NetworkTopologyScorer, ScoringConfig


@pytest.fixture
def scorer():
    """Scorer with the default grading policy."""
    return NetworkTopologyScorer(ScoringConfig())


@pytest.fixture
def star_network():
    """Router and three hosts hanging off one switch (no redundancy)."""
    return {
        "devices": ["Router", "Switch", "PC1", "PC2"],
        "connections": [["Router", "Switch"], ["Switch", "PC1"], ["Switch", "PC2"]],
    }


@pytest.fixture
def ring_network():
    """Three devices in a ring."""
    return {
        "devices": [
            {"id": "A", "type": "router"},
            {"id": "B", "type": "switch"},
            {"id": "C", "type": "switch"},
        ],
        "connections": [
            {"from": "A", "to": "B"},
            {"from": "B", "to": "C"},
            {"from": "C", "to": "A"},
        ],
    }


@pytest.fixture
def enterprise_network():
    """Well-designed network that earns every group's bonuses."""
    return {
        "devices": [
            {"id": "core1", "type": "Router", "config": {"ip": "10.0.0.1", "vpn": True}},
            {"id": "core2", "type": "Router", "config": {"ip": "10.0.0.2"}},
            {"id": "fw", "type": "Firewall", "config": {"ip": "10.0.0.3", "acl": True}},
            {"id": "dist1", "type": "Switch", "config": {"ip": "10.0.1.1", "vlans": [10, 20]}},
            {"id": "dist2", "type": "Switch", "config": {"ip": "10.0.1.2", "vlans": [30]}},
            {"id": "web", "type": "DMZ Server", "config": {"ip": "172.16.0.10"}},
        ],
        "connections": [
            {"from": "core1", "to": "core2"},
            {"from": "core1", "to": "fw"},
            {"from": "core2", "to": "fw"},
            {"from": "fw", "to": "dist1"},
            {"from": "fw", "to": "dist2"},
            {"from": "dist1", "to": "dist2"},
            {"from": "fw", "to": "web"},
            {"from": "web", "to": "dist1"},
        ],
        "subnets": [
            {"network": "10.0.0.0/24", "mask": "255.255.255.0"},
            {"network": "10.0.1.0/24", "mask": "255.255.255.0"},
            {"network": "172.16.0.0/16", "mask": "255.255.0.0"},
        ],
    }
