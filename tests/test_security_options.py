"""Tests for deciding how a node runs given its security settings."""

from pathlib import Path

import pytest
from conftest import NODE_NAME, NODE_NAMESPACE, RESOURCES_DIR_NAME

from secure_root.config_provider import MappingConfigProvider
from secure_root.env_vars import (
    ROS_SECURITY_ENABLE_VAR_NAME,
    ROS_SECURITY_ROOT_DIRECTORY_VAR_NAME,
    ROS_SECURITY_STRATEGY_VAR_NAME,
)
from secure_root.errors import SecurityEnforcementError
from secure_root.identity import Identity
from secure_root.security_options import EnforcementPolicy, get_security_options

IDENTITY = Identity(NODE_NAME, NODE_NAMESPACE)


def test_disabled_by_default(resources_dir: Path) -> None:
    """Verify that security stays off unless enabled explicitly."""
    provider = MappingConfigProvider(
        {ROS_SECURITY_ROOT_DIRECTORY_VAR_NAME: str(resources_dir)}
    )

    options = get_security_options(IDENTITY, provider)

    assert not options.enabled
    assert options.policy is EnforcementPolicy.PERMISSIVE
    assert options.secure_root is None


def test_enable_requires_exact_value() -> None:
    """Verify that only the literal 'true' enables security."""
    provider = MappingConfigProvider({ROS_SECURITY_ENABLE_VAR_NAME: "True"})
    assert not get_security_options(IDENTITY, provider).enabled


def test_enabled_and_found(resources_dir: Path) -> None:
    """Verify that an enabled node gets its secure root."""
    provider = MappingConfigProvider(
        {
            ROS_SECURITY_ENABLE_VAR_NAME: "true",
            ROS_SECURITY_STRATEGY_VAR_NAME: "Enforce",
            ROS_SECURITY_ROOT_DIRECTORY_VAR_NAME: str(resources_dir),
        }
    )

    options = get_security_options(IDENTITY, provider)

    assert options.enabled
    assert options.policy is EnforcementPolicy.ENFORCE
    assert options.secure_root == str(resources_dir / RESOURCES_DIR_NAME / NODE_NAME)


def test_enforced_and_missing() -> None:
    """Verify that enforcement turns a failed lookup into an error."""
    provider = MappingConfigProvider(
        {
            ROS_SECURITY_ENABLE_VAR_NAME: "true",
            ROS_SECURITY_STRATEGY_VAR_NAME: "Enforce",
        }
    )

    with pytest.raises(SecurityEnforcementError) as exc_info:
        get_security_options(IDENTITY, provider)

    assert "ROS_SECURITY_ROOT_DIRECTORY" in exc_info.value.diagnostic


def test_permissive_and_missing(caplog: pytest.LogCaptureFixture) -> None:
    """Verify that a permissive node runs without security material."""
    provider = MappingConfigProvider(
        {
            ROS_SECURITY_ENABLE_VAR_NAME: "true",
            ROS_SECURITY_STRATEGY_VAR_NAME: "Permissive",
        }
    )

    options = get_security_options(IDENTITY, provider)

    assert options.enabled
    assert options.policy is EnforcementPolicy.PERMISSIVE
    assert options.secure_root is None
    assert "running without it" in caplog.text
