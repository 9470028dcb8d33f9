"""Shared fixtures for secure root lookup tests."""

from pathlib import Path

import pytest

from secure_root import error_state
from secure_root.allocator import DefaultAllocator
from secure_root.env_vars import (
    RESOLVER_VAR_NAMES,
    ROS_SECURITY_ENABLE_VAR_NAME,
    ROS_SECURITY_STRATEGY_VAR_NAME,
)

RESOURCES_DIR_NAME = "test_security_directory"
NODE_NAME = "dummy_node"
NODE_NAMESPACE = "/" + RESOURCES_DIR_NAME


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset every security variable and clear the error channel."""
    for var_name in (
        *RESOLVER_VAR_NAMES,
        ROS_SECURITY_ENABLE_VAR_NAME,
        ROS_SECURITY_STRATEGY_VAR_NAME,
    ):
        monkeypatch.delenv(var_name, raising=False)
    error_state.reset_error()


@pytest.fixture
def resources_dir(tmp_path: Path) -> Path:
    """Create ``resources/test_security_directory/dummy_node``."""
    root = tmp_path / "resources"
    (root / RESOURCES_DIR_NAME / NODE_NAME).mkdir(parents=True)
    return root


@pytest.fixture
def allocator() -> DefaultAllocator:
    """Provide the allocator results are produced by and released through."""
    return DefaultAllocator()
