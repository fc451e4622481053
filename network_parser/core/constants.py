"""
Constants for network device classification.

Device types are free text, so roles are recognised by case-insensitive
substring match against these keywords rather than by a strict enum.
"""

ROUTER_KEYWORD = 'router'
SWITCH_KEYWORD = 'switch'
FIREWALL_KEYWORD = 'firewall'
DMZ_KEYWORD = 'dmz'
VPN_KEYWORD = 'vpn'

# Configuration keys read from Device.config
CONFIG_IP = 'ip'
CONFIG_VLANS = 'vlans'
CONFIG_ACL = 'acl'
CONFIG_VPN = 'vpn'
CONFIG_DMZ = 'dmz'

# Synthetic id prefix for structured devices without an explicit id
SYNTHETIC_ID_PREFIX = 'device_'
