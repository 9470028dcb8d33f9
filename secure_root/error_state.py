"""Per-thread "last error" channel for lookup diagnostics.

Mirrors the error reporting of the surrounding middleware: a failing call
stores a message, and the caller reads or resets it afterwards. Callers that
want to tell this call's failure apart from an older one reset first.
"""

import threading

_state = threading.local()


def set_error(message: str) -> None:
    """Store ``message`` as the current thread's last error."""
    _state.message = message


def get_error() -> str:
    """Return the current thread's last error, or an empty string."""
    return getattr(_state, "message", "")


def error_is_set() -> bool:
    """Check if the current thread has an unread error."""
    return bool(get_error())


def reset_error() -> None:
    """Clear the current thread's last error."""
    _state.message = ""
