"""Static typed tags.

An alternative to TagRegistry for hierarchies known when the code is
written. A tag is the tuple of Python types along its path, and matching
is a prefix comparison on that tuple. There is no registry, no string
hashing and no capacity, but depth is capped at MAX_STATIC_DEPTH.

Example:
    class Ability: ...
    class Magic: ...
    class Fire: ...

    fire = tag(Ability, Magic, Fire)
    fire.matches(tag(Ability, Magic))   # True
    tag(Ability).matches(fire)          # False

    bag = TagBag([fire, tag(Input)])
    bag.any_match(tag(Ability), STATIC_MATCHER)  # True
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from tagtree.config import MAX_STATIC_DEPTH, PATH_SEPARATOR
from tagtree.errors import InvalidTagPathError


@dataclass(frozen=True)
class StaticTag:
    """Hierarchical tag encoded by type identity."""

    types: tuple[type, ...]

    def __post_init__(self) -> None:
        if not 1 <= len(self.types) <= MAX_STATIC_DEPTH:
            raise InvalidTagPathError(
                self.types, f"static tags need 1..{MAX_STATIC_DEPTH} types"
            )
        if not all(isinstance(t, type) for t in self.types):
            raise InvalidTagPathError(self.types, "static tag segments must be types")

    @property
    def path(self) -> str:
        """Dotted path of the type names (for display only)."""
        return PATH_SEPARATOR.join(t.__name__ for t in self.types)

    def matches(self, other: StaticTag) -> bool:
        """True if other is this tag or one of its ancestors."""
        depth = len(other.types)
        if depth > len(self.types):
            return False
        return self.types[:depth] == other.types

    def join(self, child: type) -> StaticTag | None:
        """Return the child tag, or None if this tag is already at max depth."""
        if len(self.types) >= MAX_STATIC_DEPTH:
            return None
        return StaticTag((*self.types, child))

    def parent(self) -> StaticTag | None:
        """Return the parent tag, or None for a root tag."""
        if len(self.types) == 1:
            return None
        return StaticTag(self.types[:-1])

    def __len__(self) -> int:
        return len(self.types)

    def __repr__(self) -> str:
        return f"tag({', '.join(t.__name__ for t in self.types)})"


def tag(*types: type) -> StaticTag:
    """Build a static tag from its path of types, root first."""
    return StaticTag(types)


class StaticMatcher:
    """TagMatcher for static tags, usable with TagBag combinators."""

    def is_match(self, descendant: StaticTag, ancestor: StaticTag) -> bool:
        return descendant.matches(ancestor)

    def check(self, tags: Iterable[StaticTag]) -> None:
        """Static tags carry their own path, so there is nothing to look up."""


STATIC_MATCHER = StaticMatcher()
