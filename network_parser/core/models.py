"""
Core data models for submitted network designs.

Raw payloads allow a device to be either a bare label or a structured
record, and a connection to be either a mapping or a pair. Both shapes are
resolved here, once, so the analyzers only ever see canonical records.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional, List

from .constants import SYNTHETIC_ID_PREFIX
from .exceptions import DeviceParseError


@dataclass
class Device:
    """Represents a device (graph node) in the submitted network."""
    id: str
    type: str = ""
    config: Dict[str, Any] = field(default_factory=dict)

    @property
    def role(self) -> str:
        """Lower-cased type string used for keyword classification."""
        return self.type.lower()

    def has_role(self, keyword: str) -> bool:
        """Case-insensitive containment check against the device type."""
        return keyword in self.role

    def config_flag(self, key: str) -> bool:
        """Truthiness of a configuration entry; absent keys are False."""
        return bool(self.config.get(key))

    @classmethod
    def from_raw(cls, raw: Any, index: int) -> 'Device':
        """
        Build a device from its raw payload representation.

        Args:
            raw: Bare label string or mapping with ``id``/``type``/``config``
            index: Position in the device list, used for the synthetic id

        Returns:
            Canonical Device record

        Raises:
            DeviceParseError: If the record is neither a string nor a mapping
        """
        if isinstance(raw, str):
            return cls(id=raw, type=raw)

        if isinstance(raw, dict):
            device_id = raw.get('id')
            device_type = raw.get('type')
            config = raw.get('config')
            return cls(
                id=str(device_id) if device_id not in (None, "") else f"{SYNTHETIC_ID_PREFIX}{index}",
                type=str(device_type) if device_type is not None else "",
                config=config if isinstance(config, dict) else {},
            )

        raise DeviceParseError(
            f"Unsupported device record at position {index}",
            details={'index': index, 'record_type': type(raw).__name__},
        )

    def __str__(self) -> str:
        return f"{self.id} ({self.type or 'untyped'})"


@dataclass
class Connection:
    """Represents an undirected link between two device identifiers."""
    source: Optional[str]
    target: Optional[str]

    @property
    def endpoints(self) -> tuple:
        return (self.source, self.target)

    def is_valid_for(self, device_ids) -> bool:
        """True when both endpoints name known devices."""
        return (
            self.source is not None and self.target is not None
            and self.source in device_ids and self.target in device_ids
        )

    @classmethod
    def from_raw(cls, raw: Any) -> 'Connection':
        """Build a connection from a ``{"from", "to"}`` mapping or a pair."""
        if isinstance(raw, dict):
            return cls(source=_endpoint(raw.get('from')), target=_endpoint(raw.get('to')))
        if isinstance(raw, (list, tuple)) and len(raw) == 2:
            return cls(source=_endpoint(raw[0]), target=_endpoint(raw[1]))
        return cls(source=None, target=None)

    def __str__(self) -> str:
        return f"{self.source} <-> {self.target}"


def _endpoint(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


@dataclass
class Subnet:
    """Represents a declared subnet."""
    network: Optional[str] = None
    mask: Optional[str] = None

    @classmethod
    def from_raw(cls, raw: Any) -> 'Subnet':
        if not isinstance(raw, dict):
            return cls()
        network = raw.get('network')
        mask = raw.get('mask')
        return cls(
            network=network if isinstance(network, str) else None,
            mask=str(mask) if mask is not None else None,
        )

    def __str__(self) -> str:
        return self.network or "<missing network>"


@dataclass
class Network:
    """Aggregate of devices, connections and optional subnets."""
    devices: List[Device] = field(default_factory=list)
    connections: List[Connection] = field(default_factory=list)
    subnets: Optional[List[Subnet]] = None

    @property
    def device_ids(self) -> List[str]:
        return [device.id for device in self.devices]

    @classmethod
    def from_dict(cls, network_dict: Dict[str, Any]) -> 'Network':
        """
        Resolve a raw network mapping into canonical records.

        Args:
            network_dict: Mapping with ``devices``, ``connections`` and
                optionally ``subnets``

        Returns:
            Network instance

        Raises:
            DeviceParseError: If any device record has an unsupported shape
        """
        raw_devices = network_dict.get('devices') or []
        raw_connections = network_dict.get('connections')
        raw_subnets = network_dict.get('subnets')

        devices = [Device.from_raw(raw, index) for index, raw in enumerate(raw_devices)]
        connections = (
            [Connection.from_raw(raw) for raw in raw_connections]
            if isinstance(raw_connections, (list, tuple)) else []
        )
        subnets = (
            [Subnet.from_raw(raw) for raw in raw_subnets]
            if isinstance(raw_subnets, (list, tuple)) else None
        )

        return cls(devices=devices, connections=connections, subnets=subnets)

    def __str__(self) -> str:
        subnet_count = len(self.subnets) if self.subnets is not None else 0
        return (
            f"Network(devices={len(self.devices)}, "
            f"connections={len(self.connections)}, subnets={subnet_count})"
        )
