"""Tag registry: dotted paths to dense ids with O(1) ancestor matching."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import NewType

from tagtree.ancestors import AncestorSet
from tagtree.bag import TagBag
from tagtree.config import (
    DEFAULT_CAPACITY,
    PATH_SEPARATOR,
    normalize_path,
    split_path,
    validate_capacity,
)
from tagtree.errors import (
    InvalidTagPathError,
    RegistryFrozenError,
    TagCapacityExceeded,
    UnknownTagIdError,
)
from tagtree.logging_config import logger

TagId = NewType("TagId", int)
"""Dense id of a registered tag, assigned in registration order from 0."""


@dataclass(frozen=True)
class TagNode:
    """One registered tag. Owned by the registry at the slot of its id."""

    path: str
    """Normalized full dotted path (e.g., "ability.magic")."""

    parent: TagId | None
    """Immediate parent, None for a root segment."""

    ancestors: AncestorSet
    """Bits for this node and every ancestor up to the root."""


class TagRegistry:
    """Registry of hierarchical tags.

    Registering "Ability.Magic.Fireball" also registers "Ability" and
    "Ability.Magic", each with its own id. Every node keeps a precomputed
    AncestorSet, so is_match is a single bit test at any depth.

    The registry is meant to be filled during setup and then only read.
    Call freeze() to make that phase transition explicit; there is no
    internal locking, so callers sharing a registry across threads must
    finish registering first.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        """Initialize an empty registry.

        Args:
            capacity: Maximum number of tags this registry may ever hold

        Raises:
            ValueError: If capacity is not an int in 1..MAX_CAPACITY
        """
        validate_capacity(capacity)
        self._capacity = capacity
        self._nodes: list[TagNode] = []
        self._ids: dict[str, TagId] = {}
        self._frozen = False

    @property
    def capacity(self) -> int:
        """Maximum number of tags this registry may hold."""
        return self._capacity

    @property
    def frozen(self) -> bool:
        """True once freeze() has been called."""
        return self._frozen

    def freeze(self) -> None:
        """End the setup phase. New paths can no longer be registered."""
        if not self._frozen:
            self._frozen = True
            logger.info(f"Registry frozen with {len(self._nodes)}/{self._capacity} tags")

    # -- Registration and lookup --

    def register(self, path: str) -> TagId:
        """Register a dotted path and all of its missing prefixes.

        Idempotent: registering a known path returns its existing id
        without allocating, even on a frozen registry.

        Args:
            path: Dot-separated, case-insensitive path (e.g., "Ability.Magic")

        Returns:
            The id of the full path

        Raises:
            InvalidTagPathError: If path is empty or has a blank segment
            TagCapacityExceeded: If the new nodes would not fit; nothing is
                registered in that case
            RegistryFrozenError: If path is new and the registry is frozen
        """
        if not isinstance(path, str):
            raise InvalidTagPathError(path, "expected a string")
        normalized = normalize_path(path)
        segments = split_path(normalized)
        if segments is None:
            raise InvalidTagPathError(path, "empty path or blank segment")

        existing = self._ids.get(normalized)
        if existing is not None:
            return existing

        if self._frozen:
            raise RegistryFrozenError(normalized)

        prefixes = [
            PATH_SEPARATOR.join(segments[: depth + 1]) for depth in range(len(segments))
        ]
        missing = [prefix for prefix in prefixes if prefix not in self._ids]
        required = len(self._nodes) + len(missing)
        if required > self._capacity:
            logger.error(
                f"Capacity exceeded registering '{normalized}': "
                f"{required} tags needed, capacity {self._capacity}"
            )
            raise TagCapacityExceeded(normalized, self._capacity, required)

        parent: TagId | None = None
        with logger.indent_block(f"Registering '{normalized}'"):
            for prefix in prefixes:
                tag_id = self._ids.get(prefix)
                if tag_id is None:
                    tag_id = self._create_node(prefix, parent)
                parent = tag_id

        assert parent is not None
        return parent

    def _create_node(self, path: str, parent: TagId | None) -> TagId:
        """Append a node whose ancestor set extends its parent's."""
        tag_id = TagId(len(self._nodes))
        if parent is None:
            ancestors = AncestorSet(self._capacity)
        else:
            ancestors = self._nodes[parent].ancestors.clone()
        ancestors.set(tag_id)

        self._nodes.append(TagNode(path=path, parent=parent, ancestors=ancestors))
        self._ids[path] = tag_id
        logger.debug(f"Created '{path}' -> {tag_id}")
        return tag_id

    def id_of(self, path: str) -> TagId | None:
        """Look up the id of a path.

        Hashes the path, so prefer storing ids at setup time over calling
        this in hot loops.

        Args:
            path: Dotted path in any case

        Returns:
            The id, or None if the path was never registered (or is malformed)
        """
        if not isinstance(path, str):
            return None
        return self._ids.get(normalize_path(path))

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and normalize_path(path) in self._ids

    def __len__(self) -> int:
        return len(self._nodes)

    def items(self) -> Iterator[tuple[str, TagId]]:
        """Yield (path, id) pairs in id order."""
        for index, node in enumerate(self._nodes):
            yield node.path, TagId(index)

    # -- Node inspection --

    def _node(self, tag_id: TagId) -> TagNode:
        if (
            isinstance(tag_id, bool)
            or not isinstance(tag_id, int)
            or not 0 <= tag_id < len(self._nodes)
        ):
            raise UnknownTagIdError(tag_id, len(self._nodes))
        return self._nodes[tag_id]

    def path_of(self, tag_id: TagId) -> str:
        """Return the normalized path of an id.

        Raises:
            UnknownTagIdError: If the id was not issued by this registry
        """
        return self._node(tag_id).path

    def parent_of(self, tag_id: TagId) -> TagId | None:
        """Return the immediate parent of an id, or None for a root.

        Raises:
            UnknownTagIdError: If the id was not issued by this registry
        """
        return self._node(tag_id).parent

    def ancestors_of(self, tag_id: TagId) -> tuple[TagId, ...]:
        """Return the node and its ancestors, root first.

        Raises:
            UnknownTagIdError: If the id was not issued by this registry
        """
        return tuple(TagId(index) for index in self._node(tag_id).ancestors)

    def children_of(self, tag_id: TagId) -> tuple[TagId, ...]:
        """Return the direct children of an id in registration order.

        Raises:
            UnknownTagIdError: If the id was not issued by this registry
        """
        self._node(tag_id)
        return tuple(
            TagId(index) for index, node in enumerate(self._nodes) if node.parent == tag_id
        )

    def roots(self) -> tuple[TagId, ...]:
        """Return all root-segment ids in registration order."""
        return tuple(
            TagId(index) for index, node in enumerate(self._nodes) if node.parent is None
        )

    # -- Matching --

    def is_match(self, descendant: TagId, ancestor: TagId) -> bool:
        """Return True if ancestor is descendant itself or one of its ancestors.

        Matching is a partial order: is_match(child, parent) is True while
        is_match(parent, child) is False.

        Raises:
            UnknownTagIdError: If either id was not issued by this registry
        """
        self._node(ancestor)
        return self._node(descendant).ancestors.test(ancestor)

    def check(self, tags: Iterable[TagId]) -> None:
        """Verify that every id was issued by this registry.

        Raises:
            UnknownTagIdError: On the first id that was not issued here
        """
        for tag_id in tags:
            self._node(tag_id)

    def any_match(self, bag: TagBag[TagId], tag: TagId) -> bool:
        """True if some element of bag matches tag."""
        return bag.any_match(tag, self)

    def none_match(self, bag: TagBag[TagId], tag: TagId) -> bool:
        """True if no element of bag matches tag."""
        return bag.none_match(tag, self)

    def any_match_from(self, bag: TagBag[TagId], other: Iterable[TagId]) -> bool:
        """True if some tag of other is matched by an element of bag."""
        return bag.any_match_from(other, self)

    def all_match_from(self, bag: TagBag[TagId], other: Iterable[TagId]) -> bool:
        """True if every tag of other is matched by an element of bag."""
        return bag.all_match_from(other, self)

    def none_match_from(self, bag: TagBag[TagId], other: Iterable[TagId]) -> bool:
        """True if no tag of other is matched by an element of bag."""
        return bag.none_match_from(other, self)

    def __repr__(self) -> str:
        state = ", frozen" if self._frozen else ""
        return f"TagRegistry({len(self._nodes)}/{self._capacity} tags{state})"
