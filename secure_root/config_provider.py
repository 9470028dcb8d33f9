"""Sources of resolver settings, read fresh on every lookup."""

import os
from collections.abc import Mapping
from typing import Protocol

from secure_root.env_vars import (
    ROS_SECURITY_LOOKUP_TYPE_VAR_NAME,
    ROS_SECURITY_NODE_DIRECTORY_VAR_NAME,
    ROS_SECURITY_ROOT_DIRECTORY_VAR_NAME,
)
from secure_root.match_policy import parse_match_policy
from secure_root.resolver_config import ResolverConfig


class ConfigProvider(Protocol):
    """Anything that can produce the current resolver settings."""

    def get(self, key: str) -> str | None:
        """Return the raw value stored under an environment variable name."""
        ...

    def read(self) -> ResolverConfig:
        """Return the settings as of this call."""
        ...


def _config_from(provider: ConfigProvider) -> ResolverConfig:
    return ResolverConfig(
        root_directory=provider.get(ROS_SECURITY_ROOT_DIRECTORY_VAR_NAME) or None,
        node_directory_override=provider.get(ROS_SECURITY_NODE_DIRECTORY_VAR_NAME)
        or None,
        match_policy=parse_match_policy(provider.get(ROS_SECURITY_LOOKUP_TYPE_VAR_NAME)),
    )


class MappingConfigProvider:
    """Reads settings from a plain mapping keyed by environment variable name."""

    def __init__(self, values: Mapping[str, str | None]) -> None:
        """Wrap ``values``; the mapping is consulted on every read."""
        self.values = values

    def get(self, key: str) -> str | None:
        """Return the value for ``key``, treating empty strings as unset."""
        return self.values.get(key) or None

    def read(self) -> ResolverConfig:
        """Build the settings from the wrapped mapping."""
        return _config_from(self)


class EnvironmentConfigProvider(MappingConfigProvider):
    """Reads settings from the process environment."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        """Use ``environ`` instead of ``os.environ`` when given."""
        super().__init__(os.environ if environ is None else environ)


class LayeredConfigProvider:
    """Takes each setting from the first provider that sets it."""

    def __init__(self, *providers: ConfigProvider) -> None:
        """Order ``providers`` from highest to lowest precedence."""
        self.providers = providers

    def get(self, key: str) -> str | None:
        """Return the first non-empty value for ``key``."""
        for provider in self.providers:
            value = provider.get(key)
            if value:
                return value
        return None

    def read(self) -> ResolverConfig:
        """Build the settings from the merged layers."""
        return _config_from(self)
