"""NetworkManager transport over the D-Bus system bus using dbus-python."""

from __future__ import annotations

import logging
from types import ModuleType
from typing import Any

from wifi_config.core.config import DEFAULT_TIMEOUT_S
from wifi_config.core.errors import (
    ActivationError,
    BusConnectError,
    DeviceEnumerationError,
    DevicePropertyError,
)
from wifi_config.core.model import ActivationRequest, BytesSetting, ConnectionProfile, TextSetting

NM_BUS_NAME = "org.freedesktop.NetworkManager"
NM_OBJECT_PATH = "/org/freedesktop/NetworkManager"
NM_INTERFACE = "org.freedesktop.NetworkManager"
NM_DEVICE_INTERFACE = "org.freedesktop.NetworkManager.Device"
LOGGER = logging.getLogger(__name__)


def _import_dbus() -> ModuleType:
    try:
        import dbus  # type: ignore
    except ImportError as exc:  # pragma: no cover - import failure path
        raise BusConnectError(
            "D-Bus transport requires 'dbus-python'. Install dependency and retry."
        ) from exc
    return dbus


def _describe(exc: Exception) -> tuple[str, str | None]:
    get_name = getattr(exc, "get_dbus_name", None)
    get_message = getattr(exc, "get_dbus_message", None)
    name = get_name() if callable(get_name) else None
    message = get_message() if callable(get_message) else None
    return (message or str(exc)), name


class SystemBusTransport:
    def __init__(self, *, timeout_s: float = DEFAULT_TIMEOUT_S) -> None:
        self.timeout_s = timeout_s
        self._dbus: ModuleType | None = None
        self._bus: Any = None

    def _session(self) -> tuple[ModuleType, Any]:
        if self._bus is None:
            dbus = _import_dbus()
            try:
                self._bus = dbus.SystemBus()
            except dbus.exceptions.DBusException as exc:
                message, _ = _describe(exc)
                raise BusConnectError(f"Could not connect to the system bus: {message}") from exc
            self._dbus = dbus
            LOGGER.debug("Connected to the system bus")
        return self._dbus, self._bus

    def _manager(self) -> Any:
        dbus, bus = self._session()
        proxy = bus.get_object(NM_BUS_NAME, NM_OBJECT_PATH)
        return dbus.Interface(proxy, NM_INTERFACE)

    def get_devices(self) -> list[str]:
        dbus, _ = self._session()
        try:
            devices = self._manager().GetDevices(timeout=self.timeout_s)
        except dbus.exceptions.DBusException as exc:
            message, _ = _describe(exc)
            raise DeviceEnumerationError(f"GetDevices failed: {message}") from exc
        return [str(path) for path in devices]

    def get_device_type(self, path: str) -> int:
        dbus, bus = self._session()
        try:
            proxy = bus.get_object(NM_BUS_NAME, path)
            properties = dbus.Interface(proxy, dbus.PROPERTIES_IFACE)
            value = properties.Get(NM_DEVICE_INTERFACE, "DeviceType", timeout=self.timeout_s)
        except dbus.exceptions.DBusException as exc:
            message, _ = _describe(exc)
            raise DevicePropertyError(f"Could not read DeviceType of {path}: {message}") from exc
        return int(value)

    def add_and_activate_connection(self, request: ActivationRequest) -> tuple[str, str]:
        dbus, _ = self._session()
        settings = to_dbus_settings(dbus, request.profile)
        try:
            connection, active = self._manager().AddAndActivateConnection(
                settings,
                dbus.ObjectPath(request.device_path),
                dbus.ObjectPath(request.specific_object),
                timeout=self.timeout_s,
            )
        except dbus.exceptions.DBusException as exc:
            message, name = _describe(exc)
            raise ActivationError(message, error_name=name) from exc
        return str(connection), str(active)


def to_dbus_settings(dbus: ModuleType, profile: ConnectionProfile) -> Any:
    """Convert a profile into the a{sa{sv}} settings dictionary NetworkManager expects."""
    groups = {}
    for group_name, settings in profile.groups.items():
        values = {}
        for key, setting in settings.items():
            if isinstance(setting, BytesSetting):
                values[key] = dbus.ByteArray(setting.value)
            elif isinstance(setting, TextSetting):
                values[key] = dbus.String(setting.value)
            else:
                raise TypeError(f"Unsupported setting type {type(setting).__name__} for {group_name}.{key}")
        groups[group_name] = dbus.Dictionary(values, signature="sv")
    return dbus.Dictionary(groups, signature="sa{sv}")
