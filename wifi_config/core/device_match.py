"""Wi-Fi device selection logic."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from wifi_config.core.model import DeviceHandle


def find_first_wifi_device(
    paths: Iterable[str],
    read_type: Callable[[str], int],
) -> DeviceHandle | None:
    """Return the first device whose DeviceType is Wi-Fi.

    Paths are checked in the order given and reading stops at the first match.
    Errors raised by ``read_type`` propagate and end the scan.
    """
    for path in paths:
        device = DeviceHandle(path=path, device_type=int(read_type(path)))
        if device.is_wifi:
            return device
    return None
