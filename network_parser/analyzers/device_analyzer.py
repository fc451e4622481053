"""
Device composition analyzer.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Set

from ..core.constants import ROUTER_KEYWORD, SWITCH_KEYWORD, FIREWALL_KEYWORD
from ..core.interfaces import NetworkAnalyzer
from ..core.models import Device

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeviceComposition:
    """Role counts and type diversity of a device list."""
    router_count: int = 0
    switch_count: int = 0
    firewall_count: int = 0
    distinct_types: Set[str] = field(default_factory=frozenset)

    @property
    def type_diversity(self) -> int:
        return len(self.distinct_types)


class DeviceAnalyzer(NetworkAnalyzer):
    """
    Classifies devices by role keyword and measures type diversity.
    """

    def analyze(self, devices: List[Device]) -> DeviceComposition:
        composition = DeviceComposition(
            router_count=sum(1 for d in devices if d.has_role(ROUTER_KEYWORD)),
            switch_count=sum(1 for d in devices if d.has_role(SWITCH_KEYWORD)),
            firewall_count=sum(1 for d in devices if d.has_role(FIREWALL_KEYWORD)),
            distinct_types=frozenset(d.role for d in devices),
        )
        logger.debug(
            f"Composition: {composition.router_count} router(s), "
            f"{composition.switch_count} switch(es), {composition.firewall_count} firewall(s), "
            f"{composition.type_diversity} distinct type(s)"
        )
        return composition
