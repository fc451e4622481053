"""
Device composition scoring.
"""

from network_parser.analyzers import DeviceAnalyzer
from network_parser.core.models import Network

from ..core.interfaces import ScoreComponent, ScoreResult, ScoreType


class DeviceScore(ScoreComponent):
    """
    Scores presence and redundancy of routers, switches and firewalls,
    plus a bonus for device type diversity.
    """

    def __init__(self, config=None):
        super().__init__(config)
        self._analyzer = DeviceAnalyzer()

    @property
    def score_type(self) -> ScoreType:
        return ScoreType.DEVICE

    def calculate(self, network: Network) -> ScoreResult:
        composition = self._analyzer.analyze(network.devices)
        cfg = self.config
        score = 0
        feedback = []

        # Routers
        if composition.router_count == 0:
            feedback.append("Missing router - networks need routing capability")
        elif composition.router_count == 1:
            feedback.append("Router present for network routing")
            score += cfg.single_router_points
        else:
            feedback.append(f"{composition.router_count} routers for redundancy (redundancy bonus)")
            score += cfg.multi_router_points

        # Switches
        if composition.switch_count == 0:
            feedback.append("Missing switch - devices need local network connectivity")
        else:
            feedback.append(f"{composition.switch_count} switch(es) for local connectivity")
            score += min(composition.switch_count * cfg.switch_points, cfg.switch_points_cap)

        # Firewalls are advisory only
        if composition.firewall_count > 0:
            feedback.append("Firewall(s) present for network security")
            score += cfg.firewall_points
        else:
            feedback.append("Consider adding firewall for network security")

        if composition.type_diversity >= cfg.diversity_min_types:
            feedback.append(f"Diverse network infrastructure ({composition.type_diversity} device types)")
            score += cfg.diversity_points

        return ScoreResult(
            score=score,
            feedback=tuple(feedback),
            details={
                'routers': composition.router_count,
                'switches': composition.switch_count,
                'firewalls': composition.firewall_count,
                'distinct_types': composition.type_diversity,
            },
        )
