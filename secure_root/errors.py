"""Exception types raised by the secure root lookup."""


class SecureRootError(Exception):
    """Base class for secure root lookup errors."""


class InvalidIdentityError(SecureRootError, ValueError):
    """Raised when a node name or namespace is malformed."""


class AllocationError(SecureRootError, MemoryError):
    """Raised when an allocator cannot produce or release a path."""


class SecurityEnforcementError(SecureRootError):
    """Raised when security is enforced but no secure root was found."""

    def __init__(self, diagnostic: str) -> None:
        """Store the lookup diagnostic alongside the message."""
        super().__init__(f"Security is enforced but no secure root was found: {diagnostic}")
        self.diagnostic = diagnostic


class ConfigFileError(SecureRootError):
    """Raised when a YAML configuration file cannot be used."""
