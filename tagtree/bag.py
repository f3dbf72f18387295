"""Tag bags and the matching algebra over them."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from typing import Generic, Protocol, TypeVar

T = TypeVar("T", bound=Hashable)
T_contra = TypeVar("T_contra", bound=Hashable, contravariant=True)


class TagMatcher(Protocol[T_contra]):
    """Protocol for anything that can decide the "is-a" relation on tags.

    Implemented by TagRegistry (string paths, precomputed ancestor sets)
    and StaticMatcher (typed static tags).
    """

    def is_match(self, descendant: T_contra, ancestor: T_contra) -> bool:
        """Return True if descendant is ancestor or lies below it.

        Args:
            descendant: The tag being tested
            ancestor: The category it is tested against

        Returns:
            True if ancestor is descendant or one of its ancestors
        """
        ...

    def check(self, tags: Iterable[T_contra]) -> None:
        """Reject tags this matcher cannot interpret.

        Args:
            tags: Tags about to be compared

        Raises:
            TagError: If a tag is unknown to this matcher
        """
        ...


class TagBag(Generic[T]):
    """Small ordered collection of tags.

    Duplicates survive construction but add() refuses them. Membership
    (has, ``in``) is exact; hierarchical queries go through the
    combinators, which need a matcher to interpret the tags.

    Example:
        bag = TagBag([fireball, lightning])
        bag.any_match(magic, registry)          # True
        bag.all_match_from(TagBag([magic]), registry)  # True
    """

    __slots__ = ("_tags",)

    def __init__(self, tags: Iterable[T] = ()) -> None:
        self._tags: list[T] = list(tags)

    @classmethod
    def from_iterable(cls, tags: Iterable[T]) -> TagBag[T]:
        """Build a bag from any iterable of tags, keeping order and duplicates."""
        return cls(tags)

    # -- Membership --

    def has(self, tag: T) -> bool:
        """Return True if this exact tag is in the bag."""
        return tag in self._tags

    def add(self, tag: T) -> bool:
        """Append tag unless it is already present.

        Returns:
            True if the tag was added, False if it was already present
        """
        if tag in self._tags:
            return False
        self._tags.append(tag)
        return True

    def remove(self, tag: T) -> bool:
        """Remove the first occurrence of tag.

        Returns:
            True if something was removed
        """
        try:
            self._tags.remove(tag)
        except ValueError:
            return False
        return True

    def deduplicated(self) -> TagBag[T]:
        """Return a new bag keeping only the first occurrence of each tag."""
        return type(self)(dict.fromkeys(self._tags))

    # -- Combinators --
    # Ids go through matcher.check first, so unknown ids fail on empty bags too.

    def _any(self, tag: T, matcher: TagMatcher[T]) -> bool:
        return any(matcher.is_match(element, tag) for element in self._tags)

    def any_match(self, tag: T, matcher: TagMatcher[T]) -> bool:
        """True if some element of the bag is tag or a descendant of it."""
        matcher.check(self._tags)
        matcher.check((tag,))
        return self._any(tag, matcher)

    def none_match(self, tag: T, matcher: TagMatcher[T]) -> bool:
        """True if no element of the bag matches tag."""
        return not self.any_match(tag, matcher)

    def any_match_from(self, other: Iterable[T], matcher: TagMatcher[T]) -> bool:
        """True if some tag of other is matched by an element of this bag."""
        other = tuple(other)
        matcher.check(self._tags)
        matcher.check(other)
        return any(self._any(tag, matcher) for tag in other)

    def all_match_from(self, other: Iterable[T], matcher: TagMatcher[T]) -> bool:
        """True if every tag of other is matched by an element of this bag.

        Vacuously True when other is empty.
        """
        other = tuple(other)
        matcher.check(self._tags)
        matcher.check(other)
        return all(self._any(tag, matcher) for tag in other)

    def none_match_from(self, other: Iterable[T], matcher: TagMatcher[T]) -> bool:
        """True if no tag of other is matched by an element of this bag."""
        return not self.any_match_from(other, matcher)

    # -- Container protocol --

    def __contains__(self, tag: object) -> bool:
        return tag in self._tags

    def __iter__(self) -> Iterator[T]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TagBag):
            return NotImplemented
        return self._tags == other._tags

    def __repr__(self) -> str:
        return f"TagBag({self._tags!r})"
