"""Allocators that produce the path strings handed back to callers."""

from collections import Counter
from typing import Protocol

from secure_root.errors import AllocationError


class Allocator(Protocol):
    """Produces owned result strings and takes them back."""

    def allocate(self, path: str) -> str:
        """Return a caller-owned copy of ``path``."""
        ...

    def release(self, path: str) -> None:
        """Give back a string produced by ``allocate``."""
        ...


class DefaultAllocator:
    """Hands out result paths and tracks how many are still held by callers."""

    def __init__(self) -> None:
        """Start with no outstanding allocations."""
        self._held: Counter[str] = Counter()

    def allocate(self, path: str) -> str:
        """Return ``path`` as a str and record it as outstanding."""
        owned = str(path)
        self._held[owned] += 1
        return owned

    def release(self, path: str) -> None:
        """Forget one outstanding allocation of ``path``."""
        if self._held.get(path, 0) <= 0:
            msg = f"Release of a path this allocator did not produce: {path!r}"
            raise AllocationError(msg)
        self._held[path] -= 1
        if not self._held[path]:
            del self._held[path]

    @property
    def outstanding(self) -> int:
        """Number of allocations not yet released."""
        return sum(self._held.values())
