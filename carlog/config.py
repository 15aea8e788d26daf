"""Configuration loading for the carlog web app and CLI."""

import dataclasses
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml
from jsonschema import ValidationError as SchemaError
from jsonschema import validate

from .errors import ConfigError

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Config file keys use camelCase, like the API payloads.
CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "host": {"type": "string", "minLength": 1},
        "port": {"type": "integer", "minimum": 1, "maximum": 65535},
        "debug": {"type": "boolean"},
        "logLevel": {
            "type": "string",
            "enum": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        },
        "apiUrl": {"type": "string", "minLength": 1},
        "timeout": {"type": "number", "exclusiveMinimum": 0},
    },
}

_FILE_KEYS = {
    "host": "host",
    "port": "port",
    "debug": "debug",
    "logLevel": "log_level",
    "apiUrl": "api_url",
    "timeout": "timeout",
}


def _env_bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    raise ConfigError(f"Invalid boolean value: {value!r}")


def _env_number(environ: Mapping[str, str], key: str, cast, default):
    raw = environ.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        raise ConfigError(f"Invalid value for {key}: {raw!r}") from None


@dataclasses.dataclass(frozen=True)
class Config:
    """
    Runtime settings.

    host, port, debug : where and how the Flask app listens
    log_level : root logging level name
    api_url : base URL the CLI client talks to
    timeout : HTTP timeout for the CLI client, in seconds
    """

    host: str = "127.0.0.1"
    port: int = 5001
    debug: bool = False
    log_level: str = "INFO"
    api_url: str = "http://localhost:5001"
    timeout: float = 10.0

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Build a config from CARLOG_* environment variables."""
        if environ is None:
            environ = os.environ
        defaults = cls()
        return cls(
            host=environ.get("CARLOG_HOST") or defaults.host,
            port=_env_number(environ, "CARLOG_PORT", int, defaults.port),
            debug=_env_bool(environ.get("CARLOG_DEBUG"), defaults.debug),
            log_level=(environ.get("CARLOG_LOG_LEVEL") or defaults.log_level).upper(),
            api_url=environ.get("CARLOG_API_URL") or defaults.api_url,
            timeout=_env_number(environ, "CARLOG_TIMEOUT", float, defaults.timeout),
        )


def load_config(
    path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Config:
    """
    Load configuration from the environment, overlaid by a YAML file.

    The file is validated against CONFIG_SCHEMA; any problem reading or
    validating it raises ConfigError.
    """
    config = Config.from_env(environ)
    if path is None:
        return config

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"YAML parse error in {path}: {e}") from e

    try:
        validate(instance=data, schema=CONFIG_SCHEMA)
    except SchemaError as e:
        location = ".".join(str(p) for p in e.path)
        if location:
            raise ConfigError(f"{path}: {e.message} (at {location})") from e
        raise ConfigError(f"{path}: {e.message}") from e

    overrides = {_FILE_KEYS[key]: value for key, value in data.items()}
    return dataclasses.replace(config, **overrides)


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging. Called by entry points only."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
