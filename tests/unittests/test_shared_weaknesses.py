# ABOUTME: Unit tests for shared weakness detection.
# ABOUTME: Tests tallying of weaknesses across roster members.

from typecoverage.analysis.coverage import build_team_profile
from typecoverage.analysis.shared_weaknesses import find_shared_weaknesses


class TestFindSharedWeaknesses:
    """Tests for find_shared_weaknesses function."""

    def test_no_members(self) -> None:
        """No members share nothing."""
        assert find_shared_weaknesses([]) == frozenset()

    def test_single_member_never_shares(self) -> None:
        """One member's weaknesses are never shared."""
        assert find_shared_weaknesses([{"Water", "Rock"}]) == frozenset()

    def test_weakness_of_one_member_excluded(self) -> None:
        """A weakness held by exactly one member does not qualify."""
        shared = find_shared_weaknesses([{"Ice", "Fire"}, {"Ice", "Rock"}, {"Water"}])
        assert shared == {"Ice"}

    def test_weakness_of_three_members_included(self) -> None:
        """A weakness held by all three members qualifies."""
        shared = find_shared_weaknesses([{"Ice"}, {"Ice"}, {"Ice", "Bug"}])
        assert shared == {"Ice"}

    def test_each_member_counted_once(self) -> None:
        """Duplicates inside one member's iterable do not inflate the count."""
        assert find_shared_weaknesses([["Ice", "Ice"], ["Fire"]]) == frozenset()

    def test_grass_and_dragon_share_ice(self) -> None:
        """Two distinct members both weak to Ice flag Ice."""
        profile = build_team_profile([("Grass",), ("Dragon",)])
        assert find_shared_weaknesses(profile.per_member_weaknesses) == {"Ice"}
