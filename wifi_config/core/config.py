"""Configuration loading and validation for wifi-config."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator, ValidationError

from wifi_config.core.errors import ConfigLoadError, ConfigValidationError

DEFAULT_TIMEOUT_S = 10.0
MIN_TIMEOUT_S = 0.1
DEFAULT_LOG_LEVEL = "WARNING"
CONFIG_ENV_VAR = "WIFI_CONFIG_FILE"
LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    timeout_s: float = DEFAULT_TIMEOUT_S
    log_level: str = DEFAULT_LOG_LEVEL
    source: Path | None = None


def default_config_path() -> Path:
    xdg_config = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return xdg_config / "wifi-config/config.yaml"


def _parse(path: Path) -> Settings:
    try:
        doc: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigLoadError(f"Could not read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigValidationError(f"Invalid YAML in {path}: {exc}") from exc

    # An empty file means "all defaults".
    doc = {} if doc is None else doc
    schema = json.loads(
        resources.files("wifi_config.schemas").joinpath("config.schema.json").read_text(encoding="utf-8")
    )
    try:
        Draft202012Validator(schema).validate(doc)
    except ValidationError as exc:
        where = f" ({'.'.join(str(p) for p in exc.path)})" if exc.path else ""
        raise ConfigValidationError(f"Schema validation failed for {path}{where}: {exc.message}") from exc

    return Settings(
        timeout_s=float(doc.get("timeout_s", DEFAULT_TIMEOUT_S)),
        log_level=doc.get("log_level", DEFAULT_LOG_LEVEL),
        source=path,
    )


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from ``path``, ``$WIFI_CONFIG_FILE``, or the XDG default.

    An explicitly named file must exist. The XDG default is optional and
    falls back to built-in defaults when absent.
    """
    if path is None and os.environ.get(CONFIG_ENV_VAR):
        path = Path(os.environ[CONFIG_ENV_VAR])
    if path is not None:
        return _parse(path)

    candidate = default_config_path()
    if not candidate.is_file():
        LOGGER.debug("No config file at %s; using defaults", candidate)
        return Settings()
    return _parse(candidate)
