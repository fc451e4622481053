"""
Security posture scoring.
"""

from network_parser.analyzers import SecurityAnalyzer
from network_parser.core.models import Network

from ..core.interfaces import ScoreComponent, ScoreResult, ScoreType


class SecurityScore(ScoreComponent):
    """Awards points for DMZ, ACL and VPN features; absence is not penalized."""

    def __init__(self, config=None):
        super().__init__(config)
        self._analyzer = SecurityAnalyzer()

    @property
    def score_type(self) -> ScoreType:
        return ScoreType.SECURITY

    def calculate(self, network: Network) -> ScoreResult:
        posture = self._analyzer.analyze(network.devices)
        cfg = self.config
        score = 0
        feedback = []

        if posture.has_dmz:
            feedback.append("DMZ configured for public services")
            score += cfg.dmz_points

        if posture.has_acl:
            feedback.append("Access control lists (ACLs) configured")
            score += cfg.acl_points

        if posture.has_vpn:
            feedback.append("VPN configured for secure remote access")
            score += cfg.vpn_points

        return ScoreResult(
            score=score,
            feedback=tuple(feedback),
            details={'dmz': posture.has_dmz, 'acl': posture.has_acl, 'vpn': posture.has_vpn},
        )
