"""Decide how a node runs given its security settings.

Security is switched on with ``ROS_SECURITY_ENABLE=true``. When it is on, the
node's secure root is looked up; ``ROS_SECURITY_STRATEGY=Enforce`` turns a
failed lookup into an error, any other strategy lets the node run without
security material.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from secure_root.allocator import Allocator
from secure_root.config_provider import ConfigProvider
from secure_root.env_vars import (
    ROS_SECURITY_ENABLE_VAR_NAME,
    ROS_SECURITY_STRATEGY_VAR_NAME,
)
from secure_root.errors import SecurityEnforcementError
from secure_root.identity import Identity
from secure_root.resolve_secure_root import resolve_secure_root

logger = logging.getLogger(__name__)

ENABLE_VALUE = "true"
ENFORCE_VALUE = "Enforce"


class EnforcementPolicy(Enum):
    """What happens when security is enabled but no secure root is found."""

    PERMISSIVE = "Permissive"
    ENFORCE = "Enforce"


@dataclass(frozen=True)
class SecurityOptions:
    """Security settings for a single node."""

    enabled: bool
    policy: EnforcementPolicy
    secure_root: str | None = None


def get_security_options(
    identity: Identity,
    provider: ConfigProvider,
    allocator: Allocator | None = None,
) -> SecurityOptions:
    """Read the security settings for ``identity`` and resolve its secure root."""
    enabled = provider.get(ROS_SECURITY_ENABLE_VAR_NAME) == ENABLE_VALUE
    policy = (
        EnforcementPolicy.ENFORCE
        if provider.get(ROS_SECURITY_STRATEGY_VAR_NAME) == ENFORCE_VALUE
        else EnforcementPolicy.PERMISSIVE
    )
    if not enabled:
        return SecurityOptions(enabled=False, policy=policy)

    result = resolve_secure_root(identity, provider.read(), allocator)
    if result.is_found:
        return SecurityOptions(enabled=True, policy=policy, secure_root=result.path)

    if policy is EnforcementPolicy.ENFORCE:
        raise SecurityEnforcementError(result.diagnostic)
    logger.warning(
        "Security is enabled but %s in %s has no secure root, running without it: %s",
        identity.name,
        identity.namespace,
        result.diagnostic,
    )
    return SecurityOptions(enabled=True, policy=policy)
