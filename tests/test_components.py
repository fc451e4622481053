"""
Unit tests for the scoring components.
"""

from network_parser import Network
from scoring import (
    ScoringConfig,
    ScoreType,
    DeviceScore,
    ConnectionScore,
    TopologyScore,
    SecurityScore,
    SubnetScore,
    ScoreBreakdown,
)
from scoring.score_helpers import clamp_score, summarize_items


def _network(devices, connections=None, subnets=None):
    data = {"devices": devices, "connections": connections or []}
    if subnets is not None:
        data["subnets"] = subnets
    return Network.from_dict(data)


class TestDeviceScore:
    """Test device composition scoring."""

    def test_score_type(self):
        assert DeviceScore().score_type is ScoreType.DEVICE

    def test_router_and_switch(self):
        result = DeviceScore().calculate(_network(["Router", "Switch"]))

        assert result.score == 30
        assert result.feedback == (
            "Router present for network routing",
            "1 switch(es) for local connectivity",
            "Consider adding firewall for network security",
        )

    def test_missing_router_and_switch(self):
        result = DeviceScore().calculate(_network(["PC"]))

        assert result.score == 0
        assert result.feedback[0] == "Missing router - networks need routing capability"
        assert result.feedback[1] == "Missing switch - devices need local network connectivity"

    def test_multiple_routers_bonus(self):
        result = DeviceScore().calculate(_network(["Router A", "Router B"]))

        assert result.score == 25
        assert result.feedback[0] == "2 routers for redundancy (redundancy bonus)"

    def test_switch_points_capped(self):
        devices = [{"id": f"s{i}", "type": "switch"} for i in range(5)]
        result = DeviceScore().calculate(_network(devices))

        assert result.score == 20
        assert "5 switch(es) for local connectivity" in result.feedback

    def test_firewall_and_diversity(self):
        result = DeviceScore().calculate(_network(["Router", "Switch", "Firewall", "Server"]))

        assert result.score == 20 + 10 + 15 + 10
        assert "Firewall(s) present for network security" in result.feedback
        assert result.feedback[-1] == "Diverse network infrastructure (4 device types)"

    def test_details(self):
        result = DeviceScore().calculate(_network(["Router", "Switch", "Switch"]))

        assert result.details == {'routers': 1, 'switches': 2, 'firewalls': 0, 'distinct_types': 2}


class TestConnectionScore:
    """Test connectivity and redundancy scoring."""

    def test_no_connections(self):
        result = ConnectionScore().calculate(_network(["A", "B"]))

        assert result.score == 0
        assert result.feedback == ("No connections found - devices must be connected",)

    def test_connected_path(self):
        result = ConnectionScore().calculate(_network(["A", "B", "C"], [["A", "B"], ["B", "C"]]))

        assert result.score == 25
        assert result.feedback[0] == "All devices are connected in a single network"
        assert result.feedback[1] == "Consider adding redundant connections for better reliability"
        assert result.feedback[2].startswith("Single points of failure: ")

    def test_connected_ring(self, ring_network):
        result = ConnectionScore().calculate(Network.from_dict(ring_network))

        assert result.score == 40
        assert result.feedback == (
            "All devices are connected in a single network",
            "Network has redundant connections for fault tolerance",
        )
        assert result.details['redundant'] is True

    def test_segment_penalty(self):
        result = ConnectionScore().calculate(_network(["A", "B", "C", "D"], [["A", "B"]]))

        assert result.score == 25 - 2 * 10
        assert "Network has 3 disconnected segments" in result.feedback
        assert "Isolated devices: C, D" in result.feedback

    def test_segment_penalty_floor(self):
        devices = [str(i) for i in range(8)]
        result = ConnectionScore().calculate(_network(devices, [["0", "1"]]))

        assert result.score == 0
        assert "Isolated devices: 2, 3, 4, 5, 6 and 1 more" in result.feedback

    def test_invalid_connections_reported(self):
        result = ConnectionScore().calculate(
            _network(["A", "B"], [["A", "B"], ["A", "Z"], {"from": "A"}])
        )

        assert result.feedback[0] == "2 invalid connection(s) found"
        assert result.details['invalid_connections'] == 2
        assert result.score == 25

    def test_only_invalid_connections(self):
        result = ConnectionScore().calculate(_network(["A", "B"], [["X", "Y"]]))

        assert result.feedback[0] == "1 invalid connection(s) found"
        assert "Network has 2 disconnected segments" in result.feedback
        assert result.score == 15


class TestTopologyScore:
    """Test hierarchy, VLAN and addressing scoring."""

    def test_hierarchy(self):
        result = TopologyScore().calculate(_network(["Router", "Switch"]))

        assert result.score == 20
        assert result.feedback == (
            "Proper hierarchical network design (core/distribution/access layers)",
            "No IP addresses configured - addressing check skipped",
        )

    def test_no_hierarchy(self):
        result = TopologyScore().calculate(_network(["Router"]))

        assert result.feedback[0] == "Consider implementing hierarchical network design"
        assert result.score == 0

    def test_vlans_need_at_least_two(self):
        one = TopologyScore().calculate(_network([{"type": "switch", "config": {"vlans": [10]}}]))
        two = TopologyScore().calculate(_network([{"type": "switch", "config": {"vlans": [10, 20]}}]))

        assert one.score == 0
        assert two.score == 10
        assert "2 VLANs configured for network segmentation" in two.feedback

    def test_valid_addressing(self):
        devices = [{"id": "a", "type": "pc", "config": {"ip": "192.168.0.10"}}]
        result = TopologyScore().calculate(_network(devices))

        assert result.score == 15
        assert "Valid IP addressing scheme" in result.feedback

    def test_invalid_addressing(self):
        devices = [
            {"id": "a", "type": "pc", "config": {"ip": "192.168.0.10"}},
            {"id": "b", "type": "pc", "config": {"ip": "192.168.0.300"}},
        ]
        result = TopologyScore().calculate(_network(devices))

        assert result.score == 0
        assert "IP addressing issues detected (1 of 2 invalid: b)" in result.feedback

    def test_non_ascii_digits_are_not_an_address(self):
        devices = [{"id": "r", "type": "router", "config": {"ip": "\uff11\uff10.0.0.1"}}]
        result = TopologyScore().calculate(_network(devices))

        assert result.score == 0
        assert "Valid IP addressing scheme" not in result.feedback
        assert "IP addressing issues detected (1 of 1 invalid: r)" in result.feedback


class TestSecurityScore:
    """Test security feature scoring."""

    def test_no_features(self):
        result = SecurityScore().calculate(_network(["Router"]))

        assert result.score == 0
        assert result.feedback == ()

    def test_all_features(self):
        devices = [
            {"id": "fw", "type": "firewall", "config": {"acl": True, "dmz": True}},
            {"id": "gw", "type": "VPN gateway"},
        ]
        result = SecurityScore().calculate(_network(devices))

        assert result.score == 30
        assert result.feedback == (
            "DMZ configured for public services",
            "Access control lists (ACLs) configured",
            "VPN configured for secure remote access",
        )


class TestSubnetScore:
    """Test subnet declaration scoring."""

    def test_absent_subnets(self):
        result = SubnetScore().calculate(_network(["A"]))

        assert result.score == 0
        assert result.feedback == ("No subnet configuration provided",)

    def test_empty_subnet_list(self):
        result = SubnetScore().calculate(_network(["A"], subnets=[]))

        assert result.feedback == ("No subnet configuration provided",)

    def test_per_subnet_lines(self):
        subnets = [
            {"network": "10.0.0.0/24", "mask": "255.255.255.0"},
            {"network": "10.0.1.0/31"},
            {"network": "not-a-subnet"},
        ]
        result = SubnetScore().calculate(_network(["A"], subnets=subnets))

        assert result.score == 5
        assert result.feedback == (
            "Subnet 1: Valid CIDR notation (10.0.0.0/24)",
            "Subnet 2: Invalid subnet mask (prefix /31 outside /8-/30)",
            "Subnet 3: Invalid CIDR format",
        )

    def test_points_capped(self):
        subnets = [{"network": f"10.0.{i}.0/24"} for i in range(5)]
        result = SubnetScore().calculate(_network(["A"], subnets=subnets))

        assert result.score == 15
        assert len(result.feedback) == 5

    def test_custom_prefix_range_in_feedback(self):
        config = ScoringConfig(min_subnet_prefix=16, max_subnet_prefix=28)
        result = SubnetScore(config).calculate(_network(["A"], subnets=[{"network": "10.0.0.0/8"}]))

        assert result.feedback == ("Subnet 1: Invalid subnet mask (prefix /8 outside /16-/28)",)

    def test_follows_config_updated_after_construction(self):
        config = ScoringConfig()
        component = SubnetScore(config)
        network = _network(["A"], subnets=[{"network": "10.0.0.0/8"}])

        assert component.calculate(network).score == 5

        config.update_settings(min_subnet_prefix=16)
        result = component.calculate(network)

        assert result.score == 0
        assert result.feedback == ("Subnet 1: Invalid subnet mask (prefix /8 outside /16-/30)",)


class TestScoreBreakdown:
    """Test breakdown totals and serialization."""

    def test_from_scores(self):
        breakdown = ScoreBreakdown.from_scores({ScoreType.DEVICE: 40, ScoreType.SUBNET: 5})

        assert breakdown.device_score == 40
        assert breakdown.subnet_score == 5
        assert breakdown.connection_score == 0

    def test_total_is_clamped(self):
        breakdown = ScoreBreakdown(device_score=70, connection_score=40, topology_score=45)

        assert breakdown.raw_total == 155
        assert breakdown.get_total_score(100) == 100

    def test_to_details(self):
        details = ScoreBreakdown(1, 2, 3, 4, 5).to_details()

        assert details == {
            'deviceScore': 1,
            'connectionScore': 2,
            'topologyScore': 3,
            'securityScore': 4,
            'subnetScore': 5,
        }


class TestScoreHelpers:
    """Test shared scoring helpers."""

    def test_clamp_score(self):
        assert clamp_score(150, 100) == 100
        assert clamp_score(-5, 100) == 0
        assert clamp_score(42, 100) == 42

    def test_summarize_items(self):
        assert summarize_items(["a", "b"]) == "a, b"
        assert summarize_items("abcdefg", limit=3) == "a, b, c and 4 more"
        assert summarize_items([]) == ""
