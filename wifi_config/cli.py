"""Typer CLI entrypoint."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

import typer

from wifi_config.core.config import MIN_TIMEOUT_S, load_settings
from wifi_config.core.errors import WifiConfigError
from wifi_config.core.model import NoWifiDeviceFound, RemoteCallFailed, Succeeded
from wifi_config.core.service import WifiProvisioner

USAGE = "Usage: wifi-config <SSID> <PASSWORD>"
EXIT_ERROR = 1
EXIT_NO_DEVICE = 3
EXIT_ACTIVATION_FAILED = 4

app = typer.Typer(
    help="Configure a WPA-PSK Wi-Fi connection through NetworkManager",
    add_completion=False,
)


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def main(
    ctx: typer.Context,
    ssid: str | None = typer.Argument(None, metavar="SSID", help="Network name"),
    password: str | None = typer.Argument(None, metavar="PASSWORD", help="WPA pre-shared key"),
    config: Path | None = typer.Option(None, "--config", help="Path to a YAML config file"),
    timeout: float | None = typer.Option(
        None, "--timeout", min=MIN_TIMEOUT_S, help="Per-call D-Bus timeout in seconds"
    ),
    log_level: LogLevel | None = typer.Option(
        None, "--log-level", envvar="WIFI_CONFIG_LOG_LEVEL", case_sensitive=False, help="Log level"
    ),
) -> None:
    """Create and activate a WPA-PSK connection on the first Wi-Fi device."""
    if ssid is None or password is None or ctx.args:
        typer.echo(USAGE, err=True)
        raise typer.Exit(code=EXIT_ERROR)

    try:
        settings = load_settings(config)
        _configure_logging(log_level.value if log_level else settings.log_level)
        provisioner = WifiProvisioner(timeout_s=timeout or settings.timeout_s)
        outcome = provisioner.provision(ssid, password)
    except WifiConfigError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=EXIT_ERROR) from None

    if isinstance(outcome, Succeeded):
        typer.echo("Wi-Fi configuration successfully sent.")
        return
    if isinstance(outcome, NoWifiDeviceFound):
        typer.echo("Wi-Fi device not found.", err=True)
        raise typer.Exit(code=EXIT_NO_DEVICE)
    if isinstance(outcome, RemoteCallFailed):
        typer.echo(f"Failed to configure Wi-Fi: {outcome.detail}", err=True)
        raise typer.Exit(code=EXIT_ACTIVATION_FAILED)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
