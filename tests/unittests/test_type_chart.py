# ABOUTME: Unit tests for the Pokemon type relation chart module.
# ABOUTME: Tests derived weaknesses, resistances, immunities, strengths, and lookups.

import pytest

from typecoverage.utils.type_chart import (
    DEFAULT_CHART,
    NO_EFFECT,
    NOT_VERY_EFFECTIVE,
    SUPER_EFFECTIVE,
    TYPES,
    TypeChart,
    TypeRelations,
)


class TestConstants:
    """Tests for module constants."""

    def test_types_count(self) -> None:
        """There should be exactly 18 types in Gen 6+."""
        assert len(TYPES) == 18

    def test_types_includes_fairy(self) -> None:
        """Fairy type should be included (Gen 6+)."""
        assert "Fairy" in TYPES

    def test_attack_tables_only_reference_known_types(self) -> None:
        """Every table entry names a type from the vocabulary."""
        for table in (SUPER_EFFECTIVE, NOT_VERY_EFFECTIVE, NO_EFFECT):
            for atk_type, targets in table.items():
                assert atk_type in TYPES
                assert set(targets) <= set(TYPES)

    def test_default_chart_covers_vocabulary(self) -> None:
        """The default chart knows every type, in chart order."""
        assert DEFAULT_CHART.types == TYPES
        assert all(DEFAULT_CHART.is_known(t) for t in TYPES)


class TestDefensiveRelations:
    """Tests for relations derived from the attack tables."""

    def test_fire_weaknesses(self) -> None:
        """Fire is weak to Water, Ground, Rock."""
        assert DEFAULT_CHART.weaknesses("Fire") == {"Water", "Ground", "Rock"}

    def test_fire_resistances(self) -> None:
        """Fire resists Fire, Grass, Ice, Bug, Steel, Fairy."""
        assert DEFAULT_CHART.resistances("Fire") == {"Fire", "Grass", "Ice", "Bug", "Steel", "Fairy"}

    def test_ground_immune_to_electric(self) -> None:
        """Ground takes no damage from Electric."""
        assert DEFAULT_CHART.immunities("Ground") == {"Electric"}

    def test_ghost_immunities(self) -> None:
        """Ghost takes no damage from Normal or Fighting."""
        assert DEFAULT_CHART.immunities("Ghost") == {"Normal", "Fighting"}

    def test_steel_immune_to_poison(self) -> None:
        """Steel takes no damage from Poison and resists many types."""
        assert DEFAULT_CHART.immunities("Steel") == {"Poison"}
        assert len(DEFAULT_CHART.resistances("Steel")) == 10

    def test_fairy_immune_to_dragon(self) -> None:
        """Dragon has no effect on Fairy."""
        assert "Dragon" in DEFAULT_CHART.immunities("Fairy")

    def test_normal_has_no_strengths(self) -> None:
        """Normal is not super effective against anything."""
        assert DEFAULT_CHART.strengths("Normal") == frozenset()

    def test_grass_strengths(self) -> None:
        """Grass hits Water, Ground, Rock super effectively."""
        assert DEFAULT_CHART.strengths("Grass") == {"Water", "Ground", "Rock"}

    @pytest.mark.parametrize("type_name", TYPES)
    def test_relation_sets_are_disjoint(self, type_name: str) -> None:
        """A type is never both weak and resistant or immune to the same attacker."""
        relations = DEFAULT_CHART.relations(type_name)
        assert not relations.weaknesses & relations.resistances
        assert not relations.weaknesses & relations.immunities
        assert not relations.resistances & relations.immunities


class TestLookups:
    """Tests for lookup behavior and ordering helpers."""

    def test_unknown_type_has_empty_relations(self) -> None:
        """Unknown types resolve to empty relations instead of raising."""
        assert DEFAULT_CHART.relations("Shadow") == TypeRelations()
        assert DEFAULT_CHART.weaknesses("Shadow") == frozenset()
        assert not DEFAULT_CHART.is_known("Shadow")

    def test_lookup_is_case_sensitive(self) -> None:
        """Only canonical casing is known to the chart."""
        assert not DEFAULT_CHART.is_known("fire")

    def test_ordered_follows_chart_order(self) -> None:
        """Known types come back in chart order without duplicates."""
        assert DEFAULT_CHART.ordered(["Fairy", "Fire", "Normal", "Fire"]) == ["Normal", "Fire", "Fairy"]

    def test_ordered_puts_unknown_last(self) -> None:
        """Unknown names trail the known ones alphabetically."""
        assert DEFAULT_CHART.ordered(["Zeta", "Water", "Alpha"]) == ["Water", "Alpha", "Zeta"]

    def test_chart_is_immutable(self) -> None:
        """The relation mapping cannot be modified."""
        with pytest.raises(TypeError):
            DEFAULT_CHART._relations["Fire"] = TypeRelations()  # type: ignore[index]

    def test_from_relations_defaults_to_key_order(self) -> None:
        """A chart built from relations keeps the mapping's order as vocabulary."""
        chart = TypeChart.from_relations({"B": TypeRelations(), "A": TypeRelations()})
        assert chart.types == ("B", "A")
