"""Core data models used across provisioning, transports, and CLI."""

from __future__ import annotations

from dataclasses import dataclass

NM_DEVICE_TYPE_WIFI = 2
ROOT_OBJECT_PATH = "/"


@dataclass(frozen=True)
class DeviceHandle:
    path: str
    device_type: int

    @property
    def is_wifi(self) -> bool:
        return self.device_type == NM_DEVICE_TYPE_WIFI


@dataclass(frozen=True)
class TextSetting:
    value: str


@dataclass(frozen=True)
class BytesSetting:
    value: bytes


Setting = TextSetting | BytesSetting


@dataclass(frozen=True)
class ConnectionProfile:
    groups: dict[str, dict[str, Setting]]

    def get(self, group: str, key: str) -> Setting | None:
        return self.groups.get(group, {}).get(key)


@dataclass(frozen=True)
class ActivationRequest:
    profile: ConnectionProfile
    device_path: str
    specific_object: str = ROOT_OBJECT_PATH


@dataclass(frozen=True)
class Succeeded:
    device_path: str
    connection_path: str
    active_connection_path: str


@dataclass(frozen=True)
class NoWifiDeviceFound:
    devices_scanned: int


@dataclass(frozen=True)
class RemoteCallFailed:
    detail: str
    error_name: str | None = None


ProvisionOutcome = Succeeded | NoWifiDeviceFound | RemoteCallFailed
