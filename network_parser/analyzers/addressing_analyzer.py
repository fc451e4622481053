"""
Hierarchy and addressing analyzer.

Checks a coarse proxy for layered (core/distribution/access) design,
counts configured VLANs and validates per-device IPv4 addresses.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Any

from ..core.constants import ROUTER_KEYWORD, SWITCH_KEYWORD, CONFIG_IP, CONFIG_VLANS
from ..core.interfaces import NetworkAnalyzer
from ..core.models import Device

logger = logging.getLogger(__name__)

IPV4_PATTERN = re.compile(r'(\d{1,3})\.(\d{1,3})\.(\d{1,3})\.(\d{1,3})', re.ASCII)


def is_valid_ipv4(address: Any) -> bool:
    """Dotted-quad check with every octet in [0, 255]."""
    if not isinstance(address, str):
        return False
    match = IPV4_PATTERN.fullmatch(address)
    if not match:
        return False
    return all(0 <= int(octet) <= 255 for octet in match.groups())


@dataclass(frozen=True)
class AddressingReport:
    """Hierarchy, VLAN and IP addressing facts for a device list."""
    has_hierarchy: bool = False
    vlan_count: int = 0
    valid_ip_count: int = 0
    total_ip_count: int = 0
    invalid_ips: List[str] = field(default_factory=list)

    @property
    def has_addresses(self) -> bool:
        return self.total_ip_count > 0

    @property
    def addressing_valid(self) -> bool:
        return self.total_ip_count > 0 and self.valid_ip_count == self.total_ip_count


class AddressingAnalyzer(NetworkAnalyzer):
    """
    Analyzes hierarchy, VLAN segmentation and IP addressing.
    """

    def analyze(self, devices: List[Device]) -> AddressingReport:
        has_router = any(d.has_role(ROUTER_KEYWORD) for d in devices)
        has_switch = any(d.has_role(SWITCH_KEYWORD) for d in devices)

        vlan_count = 0
        for device in devices:
            vlans = device.config.get(CONFIG_VLANS)
            if isinstance(vlans, (list, tuple)):
                vlan_count += len(vlans)

        valid_ips = 0
        total_ips = 0
        invalid_ips = []
        for device in devices:
            address = device.config.get(CONFIG_IP)
            if not address or not isinstance(address, str):
                continue
            total_ips += 1
            if is_valid_ipv4(address):
                valid_ips += 1
            else:
                invalid_ips.append(device.id)

        logger.debug(f"Addressing: {valid_ips}/{total_ips} valid IPs, {vlan_count} VLAN(s)")

        return AddressingReport(
            has_hierarchy=has_router and has_switch,
            vlan_count=vlan_count,
            valid_ip_count=valid_ips,
            total_ip_count=total_ips,
            invalid_ips=invalid_ips,
        )
