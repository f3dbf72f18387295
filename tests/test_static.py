"""Tests for the static typed tag backend."""

import pytest

from tagtree import STATIC_MATCHER, InvalidTagPathError, StaticTag, TagBag, tag
from tagtree.config import MAX_STATIC_DEPTH


class Input:
    pass


class Ability:
    pass


class Magic:
    pass


class Fire:
    pass


class Ice:
    pass


class TestStaticTag:
    """Tests for StaticTag."""

    def test_matches_prefix(self) -> None:
        """A tag matches itself and every prefix of its path."""
        ability = tag(Ability)
        magic = tag(Ability, Magic)
        fire = tag(Ability, Magic, Fire)

        assert fire.matches(magic) is True
        assert fire.matches(ability) is True
        assert fire.matches(fire) is True
        assert magic.matches(fire) is False
        assert ability.matches(magic) is False

    def test_siblings_do_not_match(self) -> None:
        """Same parent, different leaf."""
        assert tag(Ability, Magic, Fire).matches(tag(Ability, Magic, Ice)) is False

    def test_same_type_under_different_parent(self) -> None:
        """Identity is the whole path, not the last type."""
        assert tag(Input, Magic).matches(tag(Ability, Magic)) is False

    def test_len_and_path(self) -> None:
        """Depth and display path."""
        fire = tag(Ability, Magic, Fire)

        assert len(tag(Ability)) == 1
        assert len(fire) == 3
        assert fire.path == "Ability.Magic.Fire"
        assert repr(fire) == "tag(Ability, Magic, Fire)"

    def test_join(self) -> None:
        """join appends a child type."""
        joined = tag(Ability, Magic).join(Fire)

        assert joined == tag(Ability, Magic, Fire)
        assert joined.matches(tag(Ability, Magic, Fire)) is True

    def test_join_at_max_depth(self) -> None:
        """join refuses to go past the depth cap."""
        deepest = tag(*[Ability, Magic, Fire, Ice][:MAX_STATIC_DEPTH])

        assert deepest.join(Input) is None

    def test_parent(self) -> None:
        """parent drops the last type; roots have none."""
        assert tag(Ability, Magic, Fire).parent() == tag(Ability, Magic)
        assert tag(Ability).parent() is None

    def test_hashable_and_equal(self) -> None:
        """Tags are values."""
        assert tag(Ability, Magic) == tag(Ability, Magic)
        assert len({tag(Ability), tag(Ability), tag(Input)}) == 2

    def test_empty_tag_rejected(self) -> None:
        """A tag needs at least one type."""
        with pytest.raises(InvalidTagPathError):
            tag()

    def test_too_deep_rejected(self) -> None:
        """Depth is capped."""
        with pytest.raises(InvalidTagPathError):
            StaticTag((Ability,) * (MAX_STATIC_DEPTH + 1))

    def test_non_type_rejected(self) -> None:
        """Segments must be types."""
        with pytest.raises(InvalidTagPathError):
            tag(Ability, "Magic")


class TestStaticBag:
    """TagBag combinators over static tags."""

    def test_bag_queries(self) -> None:
        """Same combinator contract as with a registry."""
        tags = TagBag([tag(Input), tag(Fire)])

        assert tags.any_match(tag(Magic), STATIC_MATCHER) is False
        assert tags.any_match(tag(Fire), STATIC_MATCHER) is True

    def test_example_scenario(self) -> None:
        """Ability bag against magic and input."""
        abilities = TagBag([tag(Ability, Magic, Fire), tag(Ability, Magic, Ice)])

        assert abilities.any_match(tag(Ability, Magic), STATIC_MATCHER) is True
        assert abilities.all_match_from([tag(Ability, Magic)], STATIC_MATCHER) is True
        assert abilities.none_match(tag(Input), STATIC_MATCHER) is True
        assert abilities.none_match_from([tag(Input)], STATIC_MATCHER) is True

    def test_add_dedups_static_tags(self) -> None:
        """Equal static tags count as duplicates."""
        tags = TagBag([tag(Ability, Magic)])

        assert tags.add(tag(Ability, Magic)) is False
        assert tags.remove(tag(Ability, Magic)) is True
        assert len(tags) == 0

    def test_check_accepts_any_static_tags(self) -> None:
        """Static tags need no lookup, so check never fails."""
        assert STATIC_MATCHER.check([tag(Ability), tag(Input, Magic)]) is None
