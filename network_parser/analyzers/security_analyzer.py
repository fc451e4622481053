"""
Security posture analyzer.
"""

from dataclasses import dataclass
from typing import List

from ..core.constants import DMZ_KEYWORD, VPN_KEYWORD, CONFIG_DMZ, CONFIG_ACL, CONFIG_VPN
from ..core.interfaces import NetworkAnalyzer
from ..core.models import Device


@dataclass(frozen=True)
class SecurityPosture:
    """Presence of DMZ, access control and VPN features."""
    has_dmz: bool = False
    has_acl: bool = False
    has_vpn: bool = False


class SecurityAnalyzer(NetworkAnalyzer):
    """
    Looks for DMZ markers, ACL configuration and VPN configuration.
    The three checks are independent of each other.
    """

    def analyze(self, devices: List[Device]) -> SecurityPosture:
        return SecurityPosture(
            has_dmz=any(d.has_role(DMZ_KEYWORD) or d.config_flag(CONFIG_DMZ) for d in devices),
            has_acl=any(d.config_flag(CONFIG_ACL) for d in devices),
            has_vpn=any(d.has_role(VPN_KEYWORD) or d.config_flag(CONFIG_VPN) for d in devices),
        )
