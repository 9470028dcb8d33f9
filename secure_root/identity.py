"""Data model for the identity a secure root is looked up for."""

from dataclasses import dataclass

from secure_root.errors import InvalidIdentityError

ROOT_NAMESPACE = "/"


@dataclass(frozen=True)
class Identity:
    """A node name together with its hierarchical namespace.

    Construction never fails: a node directory override applies to any
    identity, well-formed or not. ``validate`` is called before the name and
    namespace are used to search the root directory.
    """

    name: str
    namespace: str  # "/" for the root namespace, otherwise "/a/b"

    def validate(self) -> None:
        """Reject empty names and relative namespaces."""
        if not self.name:
            msg = "Node name must not be empty"
            raise InvalidIdentityError(msg)
        if not self.namespace.startswith(ROOT_NAMESPACE):
            msg = f"Node namespace must start with '/': {self.namespace!r}"
            raise InvalidIdentityError(msg)

    @property
    def is_root_namespace(self) -> bool:
        """Return True for identities in the root namespace."""
        return self.namespace == ROOT_NAMESPACE

    def namespace_segments(self) -> list[str]:
        """Split the namespace into path segments, dropping empty ones."""
        return [seg for seg in self.namespace.split("/") if seg]
