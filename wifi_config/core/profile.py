"""Connection profile construction for WPA-PSK infrastructure networks."""

from __future__ import annotations

from wifi_config.core.model import BytesSetting, ConnectionProfile, TextSetting

WIRELESS_GROUP = "802-11-wireless"
SECURITY_GROUP = "802-11-wireless-security"


def build_profile(ssid: str, password: str) -> ConnectionProfile:
    # NetworkManager types the SSID as a byte array, not a string.
    return ConnectionProfile(
        groups={
            WIRELESS_GROUP: {
                "ssid": BytesSetting(ssid.encode("utf-8")),
                "mode": TextSetting("infrastructure"),
            },
            SECURITY_GROUP: {
                "key-mgmt": TextSetting("wpa-psk"),
                "psk": TextSetting(password),
            },
        }
    )
