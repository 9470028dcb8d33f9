"""Utility for mapping a namespace onto the directory searched for it."""

from pathlib import Path

from secure_root.identity import Identity


def lookup_base_for(root_directory: str, identity: Identity) -> Path:
    """Return the directory whose children are candidate secure roots.

    The root namespace searches ``root_directory`` itself; ``/a/b`` searches
    ``root_directory/a/b``.
    """
    base = Path(root_directory)
    if identity.is_root_namespace:
        return base
    return base.joinpath(*identity.namespace_segments())
