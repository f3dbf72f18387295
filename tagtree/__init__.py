"""
tagtree - Hierarchical tag registry with constant-time ancestor matching.

This library provides:
- TagRegistry: dotted paths ("Ability.Magic.Fireball") to dense ids, with
  every prefix registered as an implicit ancestor
- TagBag: small ordered bags of tags with any/all/none combinators
- Static typed tags: a registry-free backend for hierarchies known in code
- TagManifest: YAML declaration of the tags to register at setup time

Import patterns:

    # Primary API (recommended)
    from tagtree import TagRegistry, TagBag

    # Full submodule imports (for internal types)
    from tagtree.registry import TagNode
    from tagtree.ancestors import AncestorSet

Example usage:

    from tagtree import TagBag, TagRegistry

    registry = TagRegistry(capacity=64)
    fireball = registry.register("Ability.Magic.Fireball")
    lightning = registry.register("Ability.Magic.Lightning")
    magic = registry.id_of("Ability.Magic")
    registry.freeze()

    registry.is_match(fireball, magic)        # True
    registry.is_match(lightning, fireball)    # False

    bag = TagBag([fireball, lightning])
    bag.any_match(magic, registry)            # True
"""

from tagtree.ancestors import AncestorSet
from tagtree.bag import TagBag, TagMatcher
from tagtree.errors import (
    InvalidTagPathError,
    RegistryFrozenError,
    TagCapacityExceeded,
    TagError,
    UnknownTagIdError,
)
from tagtree.manifest import TagManifest
from tagtree.registry import TagId, TagRegistry
from tagtree.static import STATIC_MATCHER, StaticMatcher, StaticTag, tag

__version__ = "0.1.0"

# Primary public API
__all__ = [
    "AncestorSet",
    "InvalidTagPathError",
    "RegistryFrozenError",
    "STATIC_MATCHER",
    "StaticMatcher",
    "StaticTag",
    "TagBag",
    "TagCapacityExceeded",
    "TagError",
    "TagId",
    "TagManifest",
    "TagMatcher",
    "TagRegistry",
    "UnknownTagIdError",
    "tag",
]
