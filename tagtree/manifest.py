"""
Tag manifests: declarative lists of tags to register at setup time.

A manifest describes what to register, not a saved registry. Ids are
always reassigned by registering the listed paths in order.

Example manifest:

    capacity: 64
    tags:
      - Ability.Magic.Fireball
      - Ability.Magic.Lightning
      - Input.Attack
"""

from __future__ import annotations

from pathlib import Path
from typing import Self

import yaml
from pydantic import BaseModel, Field, StrictInt, field_validator

from tagtree.config import DEFAULT_CAPACITY, MAX_CAPACITY, normalize_path, split_path
from tagtree.registry import TagRegistry


class TagManifest(BaseModel):
    """
    Registry capacity and the tag paths to register.

    Attributes:
        capacity: Maximum number of tags, including implicit prefixes
        tags: Dotted paths, registered in the listed order
    """

    capacity: StrictInt = Field(DEFAULT_CAPACITY, ge=1, le=MAX_CAPACITY)
    tags: list[str] = []

    @field_validator("tags")
    @classmethod
    def _check_paths(cls, tags: list[str]) -> list[str]:
        for path in tags:
            if split_path(normalize_path(path)) is None:
                raise ValueError(f"Invalid tag path: {path!r} (empty path or blank segment)")
        return tags

    @classmethod
    def from_yaml(cls, yaml_text: str) -> Self:
        """
        Load a manifest from YAML text.

        An empty document yields the defaults.

        Raises:
            ValueError: If the document is not a mapping
            pydantic.ValidationError: If a field is invalid
        """
        data = yaml.safe_load(yaml_text)
        return cls._from_data(data)

    @classmethod
    def from_yaml_file(cls, path: str | Path) -> Self:
        """Load a manifest from a YAML file."""
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls._from_data(data)

    @classmethod
    def _from_data(cls, data: object) -> Self:
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(
                f"Tag manifest must be a mapping, got {type(data).__name__}"
            )
        return cls.model_validate(data)

    def build_registry(self, freeze: bool = True) -> TagRegistry:
        """
        Register every listed tag into a new registry.

        Args:
            freeze: Freeze the registry once all tags are registered

        Returns:
            The populated registry

        Raises:
            TagCapacityExceeded: If the tags and their prefixes exceed capacity
        """
        registry = TagRegistry(self.capacity)
        for path in self.tags:
            registry.register(path)
        if freeze:
            registry.freeze()
        return registry
