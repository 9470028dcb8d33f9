"""Data models for the outcome of a secure root lookup."""

from dataclasses import dataclass
from enum import Enum


class LookupErrorKind(Enum):
    """Why a lookup produced no directory."""

    CONFIGURATION_MISSING = "configuration_missing"
    OVERRIDE_INVALID = "override_invalid"
    BASE_NOT_FOUND = "base_not_found"
    NO_MATCH = "no_match"
    ALLOCATION_FAILURE = "allocation_failure"


@dataclass(frozen=True)
class LookupResult:
    """Represents the outcome of resolving an identity to a directory."""

    path: str | None
    error: LookupErrorKind | None = None
    diagnostic: str = ""

    @classmethod
    def found(cls, path: str) -> "LookupResult":
        """Build a successful result."""
        return cls(path=path)

    @classmethod
    def not_found(cls, error: LookupErrorKind, diagnostic: str) -> "LookupResult":
        """Build a failed result carrying the reason and an operator message."""
        return cls(path=None, error=error, diagnostic=diagnostic)

    @property
    def is_found(self) -> bool:
        """Return True when a directory was resolved."""
        return self.path is not None
