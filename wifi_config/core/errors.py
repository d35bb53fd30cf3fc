"""Domain-specific errors for wifi-config."""

from __future__ import annotations


class WifiConfigError(Exception):
    """Base error for wifi-config."""


class ConfigError(WifiConfigError):
    """Base configuration error."""


class ConfigLoadError(ConfigError):
    """Raised when a configuration file cannot be read."""


class ConfigValidationError(ConfigError):
    """Raised when a configuration file does not conform to schema."""


class BusError(WifiConfigError):
    """Base error for NetworkManager D-Bus calls."""


class BusConnectError(BusError):
    """Raised when the system bus cannot be opened."""


class DeviceEnumerationError(BusError):
    """Raised when NetworkManager cannot list its devices."""


class DevicePropertyError(BusError):
    """Raised when a device's DeviceType cannot be read."""


class ActivationError(BusError):
    """Raised when AddAndActivateConnection is rejected."""

    def __init__(self, detail: str, error_name: str | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.error_name = error_name
