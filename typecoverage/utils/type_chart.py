# ABOUTME: Pokemon type relation chart for Gen 6+ (18 types including Fairy).
# ABOUTME: Derives per-type weaknesses, resistances, immunities, and offensive strengths.

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

TYPES: tuple[str, ...] = (
    "Normal",
    "Fire",
    "Water",
    "Electric",
    "Grass",
    "Ice",
    "Fighting",
    "Poison",
    "Ground",
    "Flying",
    "Psychic",
    "Bug",
    "Rock",
    "Ghost",
    "Dragon",
    "Dark",
    "Steel",
    "Fairy",
)

# Attack-side tables: SUPER_EFFECTIVE[attacking_type] = defending types hit for 2x
SUPER_EFFECTIVE: dict[str, tuple[str, ...]] = {
    "Normal": (),
    "Fire": ("Grass", "Ice", "Bug", "Steel"),
    "Water": ("Fire", "Ground", "Rock"),
    "Electric": ("Water", "Flying"),
    "Grass": ("Water", "Ground", "Rock"),
    "Ice": ("Grass", "Ground", "Flying", "Dragon"),
    "Fighting": ("Normal", "Ice", "Rock", "Dark", "Steel"),
    "Poison": ("Grass", "Fairy"),
    "Ground": ("Fire", "Electric", "Poison", "Rock", "Steel"),
    "Flying": ("Grass", "Fighting", "Bug"),
    "Psychic": ("Fighting", "Poison"),
    "Bug": ("Grass", "Psychic", "Dark"),
    "Rock": ("Fire", "Ice", "Flying", "Bug"),
    "Ghost": ("Psychic", "Ghost"),
    "Dragon": ("Dragon",),
    "Dark": ("Psychic", "Ghost"),
    "Steel": ("Ice", "Rock", "Fairy"),
    "Fairy": ("Fighting", "Dragon", "Dark"),
}

NOT_VERY_EFFECTIVE: dict[str, tuple[str, ...]] = {
    "Normal": ("Rock", "Steel"),
    "Fire": ("Fire", "Water", "Rock", "Dragon"),
    "Water": ("Water", "Grass", "Dragon"),
    "Electric": ("Electric", "Grass", "Dragon"),
    "Grass": ("Fire", "Grass", "Poison", "Flying", "Bug", "Dragon", "Steel"),
    "Ice": ("Fire", "Water", "Ice", "Steel"),
    "Fighting": ("Poison", "Flying", "Psychic", "Bug", "Fairy"),
    "Poison": ("Poison", "Ground", "Rock", "Ghost"),
    "Ground": ("Grass", "Bug"),
    "Flying": ("Electric", "Rock", "Steel"),
    "Psychic": ("Psychic", "Steel"),
    "Bug": ("Fire", "Fighting", "Poison", "Flying", "Ghost", "Steel", "Fairy"),
    "Rock": ("Fighting", "Ground", "Steel"),
    "Ghost": ("Dark",),
    "Dragon": ("Steel",),
    "Dark": ("Fighting", "Dark", "Fairy"),
    "Steel": ("Fire", "Water", "Electric", "Steel"),
    "Fairy": ("Fire", "Poison", "Steel"),
}

NO_EFFECT: dict[str, tuple[str, ...]] = {
    "Normal": ("Ghost",),
    "Electric": ("Ground",),
    "Fighting": ("Ghost",),
    "Poison": ("Steel",),
    "Ground": ("Flying",),
    "Psychic": ("Dark",),
    "Ghost": ("Normal",),
    "Dragon": ("Fairy",),
}


@dataclass(frozen=True)
class TypeRelations:
    """Defensive and offensive relations of a single type.

    Attributes:
        weaknesses: Attacking types this type takes super-effective damage from.
        resistances: Attacking types this type takes reduced damage from.
        immunities: Attacking types this type takes no damage from.
        strengths: Defending types this type hits super-effectively.
    """

    weaknesses: frozenset[str] = frozenset()
    resistances: frozenset[str] = frozenset()
    immunities: frozenset[str] = frozenset()
    strengths: frozenset[str] = frozenset()


_NO_RELATIONS = TypeRelations()


@dataclass(frozen=True)
class TypeChart:
    """Immutable lookup of type relations.

    Unknown types are not an error: they resolve to empty relation sets and
    therefore contribute nothing to any aggregate.
    """

    types: tuple[str, ...]
    _relations: Mapping[str, TypeRelations] = field(repr=False, hash=False)

    @classmethod
    def from_relations(cls, relations: Mapping[str, TypeRelations], types: Iterable[str] | None = None) -> "TypeChart":
        """Build a chart from ready-made relation records.

        Args:
            relations: Mapping of type name to its relations.
            types: Vocabulary order. Defaults to the mapping's key order.

        Returns:
            A frozen TypeChart.
        """
        order = tuple(types) if types is not None else tuple(relations)
        return cls(types=order, _relations=MappingProxyType(dict(relations)))

    @classmethod
    def from_attack_tables(
        cls,
        super_effective: Mapping[str, Iterable[str]],
        not_very_effective: Mapping[str, Iterable[str]],
        no_effect: Mapping[str, Iterable[str]],
        types: Iterable[str],
    ) -> "TypeChart":
        """Derive per-type relations from attacking-side effectiveness tables.

        Args:
            super_effective: Attacking type -> defending types hit for 2x.
            not_very_effective: Attacking type -> defending types hit for 0.5x.
            no_effect: Attacking type -> defending types hit for 0x.
            types: The full vocabulary in display order.

        Returns:
            A frozen TypeChart.
        """
        order = tuple(types)
        relations = {}
        for def_type in order:
            relations[def_type] = TypeRelations(
                weaknesses=frozenset(atk for atk in order if def_type in super_effective.get(atk, ())),
                resistances=frozenset(atk for atk in order if def_type in not_very_effective.get(atk, ())),
                immunities=frozenset(atk for atk in order if def_type in no_effect.get(atk, ())),
                strengths=frozenset(super_effective.get(def_type, ())),
            )
        return cls.from_relations(relations, order)

    def relations(self, type_name: str) -> TypeRelations:
        """Return the relations of `type_name`, or empty relations if it is unknown."""
        return self._relations.get(type_name, _NO_RELATIONS)

    def weaknesses(self, type_name: str) -> frozenset[str]:
        return self.relations(type_name).weaknesses

    def resistances(self, type_name: str) -> frozenset[str]:
        return self.relations(type_name).resistances

    def immunities(self, type_name: str) -> frozenset[str]:
        return self.relations(type_name).immunities

    def strengths(self, type_name: str) -> frozenset[str]:
        return self.relations(type_name).strengths

    def is_known(self, type_name: str) -> bool:
        return type_name in self._relations

    def ordered(self, type_names: Iterable[str]) -> list[str]:
        """Return `type_names` in chart order, unknown names last in alphabetical order.

        Args:
            type_names: Any iterable of type names (duplicates are collapsed).

        Returns:
            Deterministically ordered list of distinct names.
        """
        position = {name: i for i, name in enumerate(self.types)}
        unique = set(type_names)
        known = sorted((name for name in unique if name in position), key=position.__getitem__)
        unknown = sorted(name for name in unique if name not in position)
        return known + unknown


DEFAULT_CHART = TypeChart.from_attack_tables(SUPER_EFFECTIVE, NOT_VERY_EFFECTIVE, NO_EFFECT, TYPES)
