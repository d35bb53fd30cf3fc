"""Service layer used by the CLI and the public API."""

from __future__ import annotations

import logging

from wifi_config.core.config import DEFAULT_TIMEOUT_S
from wifi_config.core.device_match import find_first_wifi_device
from wifi_config.core.errors import ActivationError
from wifi_config.core.model import (
    ActivationRequest,
    ConnectionProfile,
    DeviceHandle,
    NoWifiDeviceFound,
    ProvisionOutcome,
    RemoteCallFailed,
    Succeeded,
)
from wifi_config.core.profile import build_profile
from wifi_config.transports.base import NetworkManagerBus
from wifi_config.transports.dbus_system import SystemBusTransport

LOGGER = logging.getLogger(__name__)


class WifiProvisioner:
    def __init__(
        self,
        *,
        bus: NetworkManagerBus | None = None,
        timeout_s: float = DEFAULT_TIMEOUT_S,
    ) -> None:
        self.bus = bus or SystemBusTransport(timeout_s=timeout_s)

    def find_wifi_device(self) -> DeviceHandle | None:
        """Return the first Wi-Fi device NetworkManager manages, if any.

        Bus, enumeration, and property-read failures are raised as
        ``BusError`` subclasses.
        """
        return self._scan()[1]

    def _scan(self) -> tuple[int, DeviceHandle | None]:
        paths = self.bus.get_devices()
        LOGGER.debug("NetworkManager reported %d device(s)", len(paths))
        return len(paths), find_first_wifi_device(paths, self.bus.get_device_type)

    def build_profile(self, ssid: str, password: str) -> ConnectionProfile:
        return build_profile(ssid, password)

    def provision(self, ssid: str, password: str) -> ProvisionOutcome:
        scanned, device = self._scan()
        if device is None:
            LOGGER.info("No Wi-Fi device among %d device(s)", scanned)
            return NoWifiDeviceFound(devices_scanned=scanned)

        LOGGER.info("Using Wi-Fi device %s", device.path)
        request = ActivationRequest(
            profile=self.build_profile(ssid, password),
            device_path=device.path,
        )
        try:
            connection, active = self.bus.add_and_activate_connection(request)
        except ActivationError as exc:
            LOGGER.info("AddAndActivateConnection failed for SSID %r: %s", ssid, exc.detail)
            return RemoteCallFailed(detail=exc.detail, error_name=exc.error_name)

        LOGGER.info("Created connection %s, active connection %s", connection, active)
        return Succeeded(
            device_path=device.path,
            connection_path=connection,
            active_connection_path=active,
        )
