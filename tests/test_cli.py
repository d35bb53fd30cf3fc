from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from wifi_config import cli
from wifi_config.core.config import Settings
from wifi_config.core.errors import BusConnectError, DevicePropertyError
from wifi_config.core.model import NoWifiDeviceFound, RemoteCallFailed, Succeeded


class FakeProvisioner:
    outcome = Succeeded(
        device_path="/org/freedesktop/NetworkManager/Devices/2",
        connection_path="/org/freedesktop/NetworkManager/Settings/1",
        active_connection_path="/org/freedesktop/NetworkManager/ActiveConnection/1",
    )
    calls: list[tuple[str, str]] = []
    timeouts: list[float] = []

    def __init__(self, *, bus=None, timeout_s: float = 10.0) -> None:
        type(self).timeouts.append(timeout_s)

    def provision(self, ssid, password):
        type(self).calls.append((ssid, password))
        return self.outcome


runner = CliRunner()


@pytest.fixture(autouse=True)
def _fake_backend(monkeypatch: pytest.MonkeyPatch) -> None:
    FakeProvisioner.calls = []
    FakeProvisioner.timeouts = []
    monkeypatch.setattr(cli, "WifiProvisioner", FakeProvisioner)
    monkeypatch.setattr(cli, "load_settings", lambda path=None: Settings())
    monkeypatch.setattr(cli, "_configure_logging", lambda level: None)
    monkeypatch.delenv("WIFI_CONFIG_LOG_LEVEL", raising=False)


def test_success_exits_zero() -> None:
    result = runner.invoke(cli.app, ["HomeNet", "supersecret123"])
    assert result.exit_code == 0
    assert "Wi-Fi configuration successfully sent." in result.stdout
    assert FakeProvisioner.calls == [("HomeNet", "supersecret123")]
    assert FakeProvisioner.timeouts == [10.0]


@pytest.mark.parametrize("args", [[], ["HomeNet"], ["HomeNet", "pw", "extra"]])
def test_wrong_argument_count_prints_usage(args: list[str]) -> None:
    result = runner.invoke(cli.app, args)
    assert result.exit_code == 1
    assert "Usage: wifi-config <SSID> <PASSWORD>" in result.stderr
    assert FakeProvisioner.calls == []


def test_no_wifi_device_exit_code(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(FakeProvisioner, "outcome", NoWifiDeviceFound(devices_scanned=2))
    result = runner.invoke(cli.app, ["HomeNet", "pw"])
    assert result.exit_code == cli.EXIT_NO_DEVICE
    assert "Wi-Fi device not found." in result.stderr


def test_activation_failure_exit_code(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        FakeProvisioner,
        "outcome",
        RemoteCallFailed(detail="802-11-wireless-security.psk: property is invalid"),
    )
    result = runner.invoke(cli.app, ["HomeNet", "x"])
    assert result.exit_code == cli.EXIT_ACTIVATION_FAILED
    assert "Failed to configure Wi-Fi: 802-11-wireless-security.psk: property is invalid" in result.stderr


@pytest.mark.parametrize(
    "error",
    [
        BusConnectError("Could not connect to the system bus: permission denied"),
        DevicePropertyError("Could not read DeviceType of /org/freedesktop/NetworkManager/Devices/1: gone"),
    ],
)
def test_bus_errors_are_clean(monkeypatch: pytest.MonkeyPatch, error: Exception) -> None:
    def fail(self, ssid, password):
        raise error

    monkeypatch.setattr(FakeProvisioner, "provision", fail)
    result = runner.invoke(cli.app, ["HomeNet", "pw"])
    assert result.exit_code == 1
    assert f"Error: {error}" in result.stderr
    assert "Traceback" not in result.stdout
    assert "Traceback" not in result.stderr


def test_timeout_option_overrides_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "load_settings", lambda path=None: Settings(timeout_s=4.0))
    runner.invoke(cli.app, ["HomeNet", "pw"])
    runner.invoke(cli.app, ["HomeNet", "pw", "--timeout", "2.5"])
    assert FakeProvisioner.timeouts == [4.0, 2.5]


def test_log_level_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    levels: list[str] = []
    monkeypatch.setattr(cli, "_configure_logging", levels.append)
    monkeypatch.setattr(cli, "load_settings", lambda path=None: Settings(log_level="ERROR"))

    runner.invoke(cli.app, ["HomeNet", "pw"])
    runner.invoke(cli.app, ["HomeNet", "pw"], env={"WIFI_CONFIG_LOG_LEVEL": "INFO"})
    runner.invoke(cli.app, ["HomeNet", "pw", "--log-level", "debug"], env={"WIFI_CONFIG_LOG_LEVEL": "INFO"})
    assert levels == ["ERROR", "INFO", "DEBUG"]


def test_config_errors_are_clean(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    from wifi_config.core.config import load_settings

    monkeypatch.setattr(cli, "load_settings", load_settings)
    result = runner.invoke(cli.app, ["HomeNet", "pw", "--config", str(tmp_path / "missing.yaml")])
    assert result.exit_code == 1
    assert "Error: Could not read config file" in result.stderr
    assert FakeProvisioner.calls == []


@pytest.mark.parametrize("password", ["-Xk9secret", "--not-an-option", "-"])
def test_dash_leading_password_is_passed_through(password: str) -> None:
    result = runner.invoke(cli.app, ["HomeNet", password])
    assert result.exit_code == 0
    assert FakeProvisioner.calls == [("HomeNet", password)]


def test_extra_dash_argument_is_a_usage_error() -> None:
    result = runner.invoke(cli.app, ["HomeNet", "pw", "-x"])
    assert result.exit_code == 1
    assert "Usage: wifi-config <SSID> <PASSWORD>" in result.stderr
    assert FakeProvisioner.calls == []


def test_timeout_below_minimum_rejected() -> None:
    result = runner.invoke(cli.app, ["HomeNet", "pw", "--timeout", "0.05"])
    assert result.exit_code != 0
    assert FakeProvisioner.calls == []
