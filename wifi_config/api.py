"""Stable public API for building tooling on top of wifi-config.

This module is the supported integration surface for third-party callers.
Avoid importing from private/internal modules unless intentionally depending on
non-stable internals.
"""

from __future__ import annotations

from wifi_config.core.config import DEFAULT_TIMEOUT_S, Settings, load_settings
from wifi_config.core.errors import (
    ActivationError,
    BusConnectError,
    BusError,
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
    DeviceEnumerationError,
    DevicePropertyError,
    WifiConfigError,
)
from wifi_config.core.model import (
    ActivationRequest,
    BytesSetting,
    ConnectionProfile,
    DeviceHandle,
    NoWifiDeviceFound,
    ProvisionOutcome,
    RemoteCallFailed,
    Setting,
    Succeeded,
    TextSetting,
)
from wifi_config.core.service import WifiProvisioner
from wifi_config.transports.base import NetworkManagerBus
from wifi_config.transports.dbus_system import SystemBusTransport

__all__ = [
    "WifiConfigError",
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "BusError",
    "BusConnectError",
    "DeviceEnumerationError",
    "DevicePropertyError",
    "ActivationError",
    "ActivationRequest",
    "BytesSetting",
    "ConnectionProfile",
    "DeviceHandle",
    "NoWifiDeviceFound",
    "ProvisionOutcome",
    "RemoteCallFailed",
    "Setting",
    "Succeeded",
    "TextSetting",
    "Settings",
    "load_settings",
    "NetworkManagerBus",
    "SystemBusTransport",
    "Client",
]


class Client:
    """Public client for provisioning Wi-Fi through NetworkManager.

    A `Client` wraps device discovery, profile construction, and connection
    activation behind a stable API intended for third-party tools
    (GUI/TUI/services/scripts).
    """

    def __init__(
        self,
        *,
        bus: NetworkManagerBus | None = None,
        timeout_s: float = DEFAULT_TIMEOUT_S,
    ) -> None:
        self._provisioner = WifiProvisioner(bus=bus, timeout_s=timeout_s)

    def find_wifi_device(self) -> DeviceHandle | None:
        return self._provisioner.find_wifi_device()

    def build_profile(self, ssid: str, password: str) -> ConnectionProfile:
        return self._provisioner.build_profile(ssid, password)

    def provision(self, ssid: str, password: str) -> ProvisionOutcome:
        return self._provisioner.provision(ssid, password)
