"""Shared configuration for the tag registry."""

# Default number of distinct tags a registry may hold
DEFAULT_CAPACITY = 1024

# Ids must fit in 16 bits
MAX_CAPACITY = 1 << 16

# Separator between path segments (e.g., "Ability.Magic.Fireball")
PATH_SEPARATOR = "."

# Deepest hierarchy the static typed backend supports
MAX_STATIC_DEPTH = 4


def validate_capacity(capacity: int) -> None:
    """Validate a registry capacity.

    Args:
        capacity: Maximum number of tags the registry may ever hold

    Raises:
        ValueError: If capacity is not an int in 1..MAX_CAPACITY
    """
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise ValueError(f"Invalid capacity: {capacity!r}. Expected an integer")
    if not 1 <= capacity <= MAX_CAPACITY:
        raise ValueError(
            f"Invalid capacity: {capacity}. Expected 1..{MAX_CAPACITY} (e.g., 1024)"
        )


def normalize_path(path: str) -> str:
    """Normalize a dotted path for lookup and storage.

    Args:
        path: Dotted path in any case (e.g., "Ability.MAGIC")

    Returns:
        Case-folded path (e.g., "ability.magic")
    """
    return path.casefold()


def split_path(path: str) -> list[str] | None:
    """Split a normalized path into its segments.

    Args:
        path: Normalized dotted path

    Returns:
        List of segments, or None if the path is empty or has a blank segment
    """
    if not path:
        return None
    segments = path.split(PATH_SEPARATOR)
    if any(not segment.strip() for segment in segments):
        return None
    return segments
