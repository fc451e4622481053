"""
Custom exceptions for the network parser module.
"""


class NetworkParserError(Exception):
    """Base exception class for network parser errors."""
    pass


class ValidationError(NetworkParserError):
    """Raised when a network description cannot be validated."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.details = details or {}


class DeviceParseError(ValidationError):
    """Raised when a device record has an unsupported shape."""
    pass
