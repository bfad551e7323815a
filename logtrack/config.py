"""Configuration loading from an optional YAML file and environment variables."""

import logging
import os
import socket
from dataclasses import dataclass, field, fields

import yaml

from logtrack.models import EnvironmentDetail

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    application: str = "application"
    environment: str = "development"
    device_name: str = field(default_factory=socket.gethostname)
    app_location: str = field(default_factory=os.getcwd)
    buffer_size: int = 1000
    min_level: str = "DEBUG"


# env var -> (field, converter)
_ENV_VARS = {
    "LOGTRACK_APPLICATION": ("application", str),
    "LOGTRACK_ENVIRONMENT": ("environment", str),
    "LOGTRACK_DEVICE_NAME": ("device_name", str),
    "LOGTRACK_APP_LOCATION": ("app_location", str),
    "LOGTRACK_BUFFER_SIZE": ("buffer_size", int),
    "LOGTRACK_MIN_LEVEL": ("min_level", str),
}


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    except yaml.YAMLError as e:
        logger.warning("Invalid YAML in %s (%s), using defaults", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Config file %s is not a mapping, using defaults", path)
        return {}
    logger.info("Loaded YAML config from %s", path)
    return data


def load_config(yaml_path: str | None = None) -> Config:
    """Build Config: dataclass defaults, then YAML values, then env vars."""
    known = {f.name: f for f in fields(Config)}
    converters = {name: conv for name, conv in _ENV_VARS.values()}
    values = {}

    for key, val in load_yaml_config(yaml_path).items():
        if key not in known:
            logger.warning("Ignoring unknown config key %r", key)
            continue
        values[key] = val

    for env_name, (name, _) in _ENV_VARS.items():
        if env_name in os.environ:
            values[name] = os.environ[env_name]

    for name, val in list(values.items()):
        try:
            values[name] = converters[name](val)
        except (TypeError, ValueError):
            logger.warning("Invalid value %r for %s, using default", val, name)
            del values[name]

    return Config(**values)


def environment_detail(config: Config) -> EnvironmentDetail:
    return EnvironmentDetail(
        device_name=config.device_name,
        app_name=config.application,
        app_location=config.app_location,
        configured_app_name=config.application,
        configured_environment_name=config.environment,
    )
