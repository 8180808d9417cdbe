# ABOUTME: Team coverage aggregation and weakness adjustment.
# ABOUTME: Folds a roster into team relation sets and derives adjusted weaknesses.

from collections.abc import Iterable, Sequence

from typecoverage.analysis.dataclasses import AdjustedWeaknesses, RosterMember, TeamProfile, TeamRelations
from typecoverage.utils.type_chart import DEFAULT_CHART, TypeChart


def aggregate_relations(types: Iterable[str], chart: TypeChart = DEFAULT_CHART) -> TeamRelations:
    """Union the relations of every type in `types`.

    This is the one place relations are combined; both the real roster and
    every hypothetical team go through it.

    Args:
        types: Type names to combine. Unknown names contribute nothing.
        chart: Type chart to look relations up in.

    Returns:
        TeamRelations with the four unioned sets.
    """
    weaknesses: set[str] = set()
    resistances: set[str] = set()
    immunities: set[str] = set()
    strengths: set[str] = set()

    for type_name in types:
        relations = chart.relations(type_name)
        weaknesses |= relations.weaknesses
        resistances |= relations.resistances
        immunities |= relations.immunities
        strengths |= relations.strengths

    return TeamRelations(
        weaknesses=frozenset(weaknesses),
        resistances=frozenset(resistances),
        immunities=frozenset(immunities),
        strengths=frozenset(strengths),
    )


def build_team_profile(roster: Sequence[RosterMember], chart: TypeChart = DEFAULT_CHART) -> TeamProfile:
    """Fold a roster into team-level relation sets and per-member weaknesses.

    Args:
        roster: Zero to three members, each a sequence of 1-2 type names.
        chart: Type chart to look relations up in.

    Returns:
        TeamProfile. An empty roster yields an all-empty profile.
    """
    team_types = tuple(dict.fromkeys(type_name for member in roster for type_name in member))
    per_member_weaknesses = tuple(aggregate_relations(member, chart).weaknesses for member in roster)

    return TeamProfile(
        team_types=team_types,
        relations=aggregate_relations(team_types, chart),
        per_member_weaknesses=per_member_weaknesses,
    )


def adjust_weaknesses(relations: TeamRelations) -> AdjustedWeaknesses:
    """Remove covered types from the team's weaknesses.

    defensive = weaknesses - (resistances | immunities)
    full = defensive - strengths

    Args:
        relations: Unioned relations of a team.

    Returns:
        AdjustedWeaknesses with both derived sets.
    """
    defensive = relations.weaknesses - (relations.resistances | relations.immunities)
    return AdjustedWeaknesses(defensive=defensive, full=defensive - relations.strengths)


def adjusted_weaknesses_for_types(types: Iterable[str], chart: TypeChart = DEFAULT_CHART) -> AdjustedWeaknesses:
    """Compute adjusted weaknesses for an arbitrary (possibly hypothetical) type set."""
    return adjust_weaknesses(aggregate_relations(types, chart))
