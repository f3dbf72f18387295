"""
Pytest configuration and fixtures for tagtree tests
"""

import logging
from dataclasses import dataclass

import pytest

from tagtree import TagId, TagRegistry
from tagtree.logging_config import LOGGER_NAME


@dataclass
class GameTags:
    """Ids from the ability/input example hierarchy"""

    registry: TagRegistry
    ability: TagId
    magic: TagId
    fireball: TagId
    lightning: TagId
    input: TagId
    attack: TagId


@pytest.fixture
def registry():
    """Empty registry with a small capacity"""
    return TagRegistry(capacity=16)


@pytest.fixture
def game(registry):
    """Registry holding Ability.Magic.{Fireball,Lightning} and Input.Attack"""
    fireball = registry.register("Ability.Magic.Fireball")
    lightning = registry.register("Ability.Magic.Lightning")
    attack = registry.register("Input.Attack")
    return GameTags(
        registry=registry,
        ability=registry.id_of("Ability"),
        magic=registry.id_of("Ability.Magic"),
        fireball=fireball,
        lightning=lightning,
        input=registry.id_of("Input"),
        attack=attack,
    )


@pytest.fixture
def manifest_file(tmp_path):
    """Manifest on disk declaring the example hierarchy"""
    path = tmp_path / "tags.yaml"
    path.write_text(
        "capacity: 8\n"
        "tags:\n"
        "  - Ability.Magic.Fireball\n"
        "  - Ability.Magic.Lightning\n"
        "  - Input.Attack\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def _restore_tagtree_logger():
    """Undo any setup_logging call made during a test"""
    base_logger = logging.getLogger(LOGGER_NAME)
    handlers = list(base_logger.handlers)
    level = base_logger.level
    yield
    base_logger.handlers = handlers
    base_logger.setLevel(level)
