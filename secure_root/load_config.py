"""Logic for loading the YAML configuration file."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from secure_root.deep_merge import deep_merge
from secure_root.env_vars import (
    ROS_SECURITY_ENABLE_VAR_NAME,
    ROS_SECURITY_LOOKUP_TYPE_VAR_NAME,
    ROS_SECURITY_NODE_DIRECTORY_VAR_NAME,
    ROS_SECURITY_ROOT_DIRECTORY_VAR_NAME,
    ROS_SECURITY_STRATEGY_VAR_NAME,
)
from secure_root.errors import ConfigFileError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "security": {
        "root_directory": None,
        "node_directory": None,
        "lookup_type": "MATCH_EXACT",
        "enable": False,
        "strategy": "Permissive",
    },
}

# config file key -> environment variable it stands in for
_SECURITY_KEYS = {
    "root_directory": ROS_SECURITY_ROOT_DIRECTORY_VAR_NAME,
    "node_directory": ROS_SECURITY_NODE_DIRECTORY_VAR_NAME,
    "lookup_type": ROS_SECURITY_LOOKUP_TYPE_VAR_NAME,
    "enable": ROS_SECURITY_ENABLE_VAR_NAME,
    "strategy": ROS_SECURITY_STRATEGY_VAR_NAME,
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if not p.exists():
            msg = f"Config file not found: {p}"
            raise ConfigFileError(msg)
        try:
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            msg = f"Config file {p} is not valid YAML: {e}"
            raise ConfigFileError(msg) from e
        if not isinstance(user_config, dict):
            msg = f"Config file {p} must contain a mapping"
            raise ConfigFileError(msg)
        section = user_config.get("security")
        if section is not None and not isinstance(section, dict):
            msg = f"Config file {p}: 'security' must be a mapping"
            raise ConfigFileError(msg)
        logger.debug("Loaded config file %s", p)
        config = deep_merge(config, user_config)
    return config


def config_file_values(config: dict[str, Any]) -> dict[str, str | None]:
    """Translate a loaded config into values keyed by environment variable name."""
    section = config.get("security") or {}
    values: dict[str, str | None] = {}
    for key, var_name in _SECURITY_KEYS.items():
        value = section.get(key)
        if value is None:
            values[var_name] = None
        elif isinstance(value, bool):
            values[var_name] = "true" if value else "false"
        else:
            values[var_name] = str(value)
    return values
