"""
Subnet declaration scoring.
"""

from network_parser.analyzers import SubnetAnalyzer, SubnetIssue
from network_parser.core.models import Network

from ..core.interfaces import ScoreComponent, ScoreResult, ScoreType


class SubnetScore(ScoreComponent):
    """Scores valid CIDR declarations, one feedback line per subnet."""

    @property
    def score_type(self) -> ScoreType:
        return ScoreType.SUBNET

    def calculate(self, network: Network) -> ScoreResult:
        cfg = self.config

        if not network.subnets:
            return ScoreResult(
                score=0,
                feedback=("No subnet configuration provided",),
                details={'valid_subnets': 0, 'total_subnets': 0},
            )

        analyzer = SubnetAnalyzer(min_prefix=cfg.min_subnet_prefix, max_prefix=cfg.max_subnet_prefix)
        checks = analyzer.analyze(network.subnets)
        feedback = []
        for check in checks:
            label = f"Subnet {check.index + 1}"
            if check.is_valid:
                feedback.append(f"{label}: Valid CIDR notation ({check.network})")
            elif check.issue is SubnetIssue.PREFIX_OUT_OF_RANGE:
                feedback.append(
                    f"{label}: Invalid subnet mask (prefix /{check.prefix} outside "
                    f"/{cfg.min_subnet_prefix}-/{cfg.max_subnet_prefix})"
                )
            else:
                feedback.append(f"{label}: Invalid CIDR format")

        valid = sum(1 for check in checks if check.is_valid)

        return ScoreResult(
            score=min(valid * cfg.subnet_points, cfg.subnet_points_cap),
            feedback=tuple(feedback),
            details={'valid_subnets': valid, 'total_subnets': len(checks)},
        )
