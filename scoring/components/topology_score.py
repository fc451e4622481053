"""
Topology scoring: hierarchical design, VLAN segmentation and IP addressing.
"""

from network_parser.analyzers import AddressingAnalyzer
from network_parser.core.models import Network

from ..core.interfaces import ScoreComponent, ScoreResult, ScoreType
from ..score_helpers import summarize_items


class TopologyScore(ScoreComponent):
    """Scores layered design, VLAN usage and addressing validity."""

    def __init__(self, config=None):
        super().__init__(config)
        self._analyzer = AddressingAnalyzer()

    @property
    def score_type(self) -> ScoreType:
        return ScoreType.TOPOLOGY

    def calculate(self, network: Network) -> ScoreResult:
        report = self._analyzer.analyze(network.devices)
        cfg = self.config
        score = 0
        feedback = []

        if report.has_hierarchy:
            feedback.append("Proper hierarchical network design (core/distribution/access layers)")
            score += cfg.hierarchy_points
        else:
            feedback.append("Consider implementing hierarchical network design")

        if report.vlan_count >= cfg.vlan_min_count:
            feedback.append(f"{report.vlan_count} VLANs configured for network segmentation")
            score += cfg.vlan_points

        if report.addressing_valid:
            feedback.append("Valid IP addressing scheme")
            score += cfg.ip_addressing_points
        elif report.has_addresses:
            invalid = report.total_ip_count - report.valid_ip_count
            feedback.append(
                f"IP addressing issues detected ({invalid} of {report.total_ip_count} invalid: "
                f"{summarize_items(report.invalid_ips, cfg.max_listed_items)})"
            )
        else:
            feedback.append("No IP addresses configured - addressing check skipped")

        return ScoreResult(
            score=score,
            feedback=tuple(feedback),
            details={
                'hierarchy': report.has_hierarchy,
                'vlans': report.vlan_count,
                'valid_ips': report.valid_ip_count,
                'total_ips': report.total_ip_count,
            },
        )
