"""
Subnet declaration analyzer.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ..core.models import Subnet

logger = logging.getLogger(__name__)

CIDR_PATTERN = re.compile(r'(\d+\.\d+\.\d+\.\d+)/(\d+)', re.ASCII)

DEFAULT_MIN_PREFIX = 8
DEFAULT_MAX_PREFIX = 30


class SubnetIssue(Enum):
    """Reasons a subnet declaration is rejected."""
    MALFORMED_CIDR = "malformed_cidr"
    PREFIX_OUT_OF_RANGE = "prefix_out_of_range"


@dataclass(frozen=True)
class SubnetCheck:
    """Outcome of validating one subnet declaration."""
    index: int
    network: Optional[str]
    prefix: Optional[int] = None
    issue: Optional[SubnetIssue] = None

    @property
    def is_valid(self) -> bool:
        return self.issue is None


class SubnetAnalyzer:
    """
    Validates CIDR syntax and prefix length of declared subnets.
    """

    def __init__(self, min_prefix: int = DEFAULT_MIN_PREFIX, max_prefix: int = DEFAULT_MAX_PREFIX):
        self.min_prefix = min_prefix
        self.max_prefix = max_prefix

    def check(self, index: int, subnet: Subnet) -> SubnetCheck:
        """Validate a single subnet declaration."""
        match = CIDR_PATTERN.fullmatch(subnet.network) if subnet.network else None
        if not match:
            return SubnetCheck(index=index, network=subnet.network, issue=SubnetIssue.MALFORMED_CIDR)

        prefix = int(match.group(2))
        if not self.min_prefix <= prefix <= self.max_prefix:
            return SubnetCheck(
                index=index,
                network=subnet.network,
                prefix=prefix,
                issue=SubnetIssue.PREFIX_OUT_OF_RANGE,
            )

        return SubnetCheck(index=index, network=subnet.network, prefix=prefix)

    def analyze(self, subnets: Optional[List[Subnet]]) -> List[SubnetCheck]:
        """
        Validate every subnet declaration.

        Args:
            subnets: Declared subnets, or None when absent

        Returns:
            One SubnetCheck per declaration, in declaration order
        """
        checks = [self.check(index, subnet) for index, subnet in enumerate(subnets or [])]
        logger.debug(f"Subnets: {sum(c.is_valid for c in checks)}/{len(checks)} valid")
        return checks
