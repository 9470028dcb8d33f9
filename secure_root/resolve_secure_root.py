"""Locate the directory that holds a node's security material.

A lookup either short-circuits to the node directory override or searches
the root directory: the namespace selects the lookup base, and the node name
is matched against the base's subdirectories. Lookup failures never raise;
they come back as a not-found ``LookupResult`` whose diagnostic names the
setting or filesystem check that failed. Only a malformed identity raises,
and only once the root directory search needs it.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from secure_root import error_state
from secure_root.allocator import Allocator, DefaultAllocator
from secure_root.config_provider import ConfigProvider, EnvironmentConfigProvider
from secure_root.env_vars import (
    ROS_SECURITY_NODE_DIRECTORY_VAR_NAME,
    ROS_SECURITY_ROOT_DIRECTORY_VAR_NAME,
)
from secure_root.find_matching_directory import find_matching_directory
from secure_root.identity import Identity
from secure_root.lookup_base_for import lookup_base_for
from secure_root.lookup_result import LookupErrorKind, LookupResult
from secure_root.resolver_config import ResolverConfig

logger = logging.getLogger(__name__)

DiagnosticSink = Callable[[str], None]


def resolve_secure_root(
    identity: Identity,
    config: ResolverConfig,
    allocator: Allocator | None = None,
    diagnostic_sink: DiagnosticSink | None = None,
) -> LookupResult:
    """Resolve ``identity`` to its secure root directory under ``config``.

    Without an ``allocator`` the result comes from a throwaway
    ``DefaultAllocator`` and is not tracked for release.
    """
    if allocator is None:
        allocator = DefaultAllocator()

    def fail(error: LookupErrorKind, diagnostic: str) -> LookupResult:
        logger.debug(
            "No secure root for %s in %s: %s", identity.name, identity.namespace, diagnostic
        )
        if diagnostic_sink is not None:
            diagnostic_sink(diagnostic)
        return LookupResult.not_found(error, diagnostic)

    override = config.node_directory_override
    if override:
        if not Path(override).is_dir():
            return fail(
                LookupErrorKind.OVERRIDE_INVALID,
                f"{ROS_SECURITY_NODE_DIRECTORY_VAR_NAME} is set to '{override}', "
                "which is not an existing directory",
            )
        logger.info("Using node directory override %s for %s", override, identity.name)
        return _allocate(override, allocator, fail)

    identity.validate()

    if not config.root_directory:
        return fail(
            LookupErrorKind.CONFIGURATION_MISSING,
            f"Neither {ROS_SECURITY_NODE_DIRECTORY_VAR_NAME} nor "
            f"{ROS_SECURITY_ROOT_DIRECTORY_VAR_NAME} is set",
        )

    base = lookup_base_for(config.root_directory, identity)
    if not base.is_dir():
        return fail(
            LookupErrorKind.BASE_NOT_FOUND,
            f"Lookup directory '{base}' for namespace '{identity.namespace}' "
            "does not exist",
        )

    try:
        matched = find_matching_directory(base, identity.name, config.match_policy)
    except OSError as e:
        return fail(
            LookupErrorKind.BASE_NOT_FOUND,
            f"Lookup directory '{base}' could not be read: {e}",
        )
    if matched is None:
        return fail(
            LookupErrorKind.NO_MATCH,
            f"No directory in '{base}' matches node name '{identity.name}' "
            f"({config.match_policy.value})",
        )
    return _allocate(str(base / matched), allocator, fail)


def _allocate(
    path: str,
    allocator: Allocator,
    fail: Callable[[LookupErrorKind, str], LookupResult],
) -> LookupResult:
    try:
        owned = allocator.allocate(path)
    except MemoryError as e:
        return fail(
            LookupErrorKind.ALLOCATION_FAILURE,
            f"Failed to allocate the secure root path '{path}': {e}",
        )
    return LookupResult.found(owned)


def get_secure_root(
    name: str,
    namespace: str,
    allocator: Allocator,
    provider: ConfigProvider | None = None,
) -> str | None:
    """Return the secure root for a node, or None when there is none.

    Settings come from ``provider`` (the process environment by default) and
    are read again on every call. The returned path comes from ``allocator``
    and is released through it. A failure leaves its diagnostic on the
    error channel in ``secure_root.error_state``.
    """
    provider = provider or EnvironmentConfigProvider()
    result = resolve_secure_root(
        Identity(name, namespace),
        provider.read(),
        allocator,
        diagnostic_sink=error_state.set_error,
    )
    return result.path
