"""
Configuration system for network scoring.

This module centralizes every point value and threshold used by the
scoring components, so the grading policy can be tuned in one place.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict

from .core.exceptions import ConfigurationError


@dataclass
class ScoringConfig:
    """
    Point values and thresholds for network topology scoring.

    The defaults reproduce the standard grading policy: a 100 point scale
    with a pass mark of 70.
    """

    # Overall scale
    max_score: int = 100
    pass_threshold: int = 70

    # Connectivity and redundancy
    connectivity_points: int = 25
    segment_penalty: int = 10
    redundancy_points: int = 15

    # Device composition
    single_router_points: int = 20
    multi_router_points: int = 25
    switch_points: int = 10
    switch_points_cap: int = 20
    firewall_points: int = 15
    diversity_min_types: int = 4
    diversity_points: int = 10

    # Hierarchy and addressing
    hierarchy_points: int = 20
    vlan_min_count: int = 2
    vlan_points: int = 10
    ip_addressing_points: int = 15

    # Security posture
    dmz_points: int = 10
    acl_points: int = 10
    vpn_points: int = 10

    # Subnets
    subnet_points: int = 5
    subnet_points_cap: int = 15
    min_subnet_prefix: int = 8
    max_subnet_prefix: int = 30

    # Feedback
    max_listed_items: int = 5

    def update_settings(self, **kwargs) -> None:
        """
        Update multiple scoring settings.

        The update is applied as a whole: if the resulting configuration
        does not validate, every setting keeps its previous value.

        Args:
            **kwargs: Settings to update

        Raises:
            ConfigurationError: If a key is not a known setting or the
                updated configuration is invalid
        """
        known = {f.name for f in fields(self)}
        for key in kwargs:
            if key not in known:
                raise ConfigurationError(f"Unknown scoring setting: {key}", config_key=key)

        previous = {key: getattr(self, key) for key in kwargs}
        for key, value in kwargs.items():
            setattr(self, key, value)
        try:
            self.validate()
        except ConfigurationError:
            for key, value in previous.items():
                setattr(self, key, value)
            raise

    def validate(self) -> None:
        """
        Check the configuration for inconsistent values.

        Raises:
            ConfigurationError: If any value is inconsistent
        """
        errors = []

        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, int) or isinstance(value, bool):
                errors.append(f"{f.name} must be an integer")
            elif value < 0:
                errors.append(f"{f.name} must not be negative")

        if not errors:
            if not 0 <= self.pass_threshold <= self.max_score:
                errors.append("pass_threshold must lie between 0 and max_score")
            if self.min_subnet_prefix > self.max_subnet_prefix:
                errors.append("min_subnet_prefix must not exceed max_subnet_prefix")
            if self.max_subnet_prefix > 32:
                errors.append("max_subnet_prefix must not exceed 32")

        if errors:
            raise ConfigurationError(
                "Invalid scoring configuration",
                details={'errors': errors},
            )

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'ScoringConfig':
        """
        Create a configuration from a mapping of setting overrides.

        Args:
            config_dict: Setting names mapped to values; absent settings
                keep their defaults

        Returns:
            Validated ScoringConfig

        Raises:
            ConfigurationError: If the mapping is not a dict, names an
                unknown setting, or yields an invalid configuration
        """
        if not isinstance(config_dict, dict):
            raise ConfigurationError("Scoring configuration must be a mapping")
        config = cls()
        config.update_settings(**config_dict)
        return config

    def __str__(self) -> str:
        return (
            f"ScoringConfig(max_score={self.max_score}, "
            f"pass_threshold={self.pass_threshold})"
        )
