"""Plugin configuration.

Settings come from the environment and from the protoc parameter string
(``--go-jsonpb_opt=gofmt=/usr/local/go/bin/gofmt,format=false``).
Parameters win over environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping

from .errors import ConfigError

ENV_GOFMT = "JSONPB_GOFMT"
ENV_LOG_LEVEL = "JSONPB_LOG_LEVEL"
ENV_DUMP = "JSONPB_DUMP"

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


@dataclass(frozen=True)
class PluginConfig:
    gofmt: str = "gofmt"
    format: bool = True
    allow_multiple_packages: bool = False
    log_level: str = "WARNING"
    dump_path: str | None = None


def _parse_bool(key: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigError(f"parameter {key!r} expects true or false, got {value!r}")


def parse_parameter(parameter: str) -> dict[str, str]:
    """Split a protoc parameter string into key/value pairs.

    A bare key (no ``=``) is treated as ``key=true``.
    """
    options: dict[str, str] = {}
    for item in parameter.split(","):
        item = item.strip()
        if not item:
            continue
        key, sep, value = item.partition("=")
        options[key.strip()] = value.strip() if sep else "true"
    return options


def from_env(environ: Mapping[str, str] | None = None) -> PluginConfig:
    """Build the base config from environment variables."""
    env = os.environ if environ is None else environ
    return PluginConfig(
        gofmt=env.get(ENV_GOFMT) or "gofmt",
        log_level=(env.get(ENV_LOG_LEVEL) or "WARNING").upper(),
        dump_path=env.get(ENV_DUMP) or None,
    )


def apply_parameter(config: PluginConfig, parameter: str) -> PluginConfig:
    """Overlay protoc parameters on top of ``config``."""
    changes: dict[str, object] = {}
    for key, value in parse_parameter(parameter).items():
        if key == "gofmt":
            if not value:
                raise ConfigError("parameter 'gofmt' needs a path")
            changes["gofmt"] = value
        elif key == "format":
            changes["format"] = _parse_bool(key, value)
        elif key == "allow_multiple_packages":
            changes["allow_multiple_packages"] = _parse_bool(key, value)
        else:
            raise ConfigError(f"unknown parameter {key!r}")
    return replace(config, **changes)
