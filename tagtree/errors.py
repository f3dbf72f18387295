"""
tagtree exception hierarchy.

All custom exceptions live here to avoid circular imports.
"""


class TagError(Exception):
    """Base class for errors raised by the tag registry."""


class TagCapacityExceeded(TagError):
    """Raised when a registration would exceed the registry capacity.

    Nothing is committed when this is raised.
    """

    def __init__(self, path: str, capacity: int, required: int) -> None:
        """Initialize the error.

        Args:
            path: The path whose registration failed
            capacity: The registry's fixed capacity
            required: Node count the registration would have needed
        """
        self.path = path
        self.capacity = capacity
        self.required = required
        super().__init__(
            f"Cannot register '{path}': needs {required} tags, capacity is {capacity}"
        )


class UnknownTagIdError(TagError, IndexError):
    """Raised when a tag id was not issued by the registry in use."""

    def __init__(self, tag_id: object, size: int) -> None:
        """Initialize the error.

        Args:
            tag_id: The offending id
            size: Number of ids the registry has issued
        """
        self.tag_id = tag_id
        self.size = size
        super().__init__(
            f"Unknown tag id {tag_id!r}: registry has issued ids 0..{size - 1}"
            if size
            else f"Unknown tag id {tag_id!r}: registry is empty"
        )


class InvalidTagPathError(TagError, ValueError):
    """Raised for an empty path or a path with a blank segment."""

    def __init__(self, path: object, reason: str = "") -> None:
        """Initialize the error.

        Args:
            path: The rejected path
            reason: Optional explanation
        """
        self.path = path
        msg = f"Invalid tag path: {path!r}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class RegistryFrozenError(TagError):
    """Raised when registering a new path after the registry was frozen."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Cannot register '{path}': registry is frozen")
