"""NetworkManager bus interface."""

from __future__ import annotations

from typing import Protocol

from wifi_config.core.model import ActivationRequest


class NetworkManagerBus(Protocol):
    def get_devices(self) -> list[str]:
        """Return device object paths in the order NetworkManager reports them."""

    def get_device_type(self, path: str) -> int:
        """Return the DeviceType property of one device object."""

    def add_and_activate_connection(self, request: ActivationRequest) -> tuple[str, str]:
        """Create and activate a connection; return (connection, active connection) paths."""
