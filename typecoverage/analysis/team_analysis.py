# ABOUTME: Assembles the full roster analysis result record.
# ABOUTME: Runs aggregation, adjustment, recommendations, shared weaknesses, and grading.

import logging
from collections.abc import Sequence

import polars as pl
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from typecoverage.analysis.coverage import adjust_weaknesses, build_team_profile
from typecoverage.analysis.dataclasses import CandidateKind, RecommendationTier, RosterMember
from typecoverage.analysis.grading import FULL_ROSTER_SIZE, Grade, grade_roster
from typecoverage.analysis.recommendations import classify_tiers, recommend_types
from typecoverage.analysis.shared_weaknesses import find_shared_weaknesses
from typecoverage.utils.type_chart import DEFAULT_CHART, TypeChart

logger = logging.getLogger(__name__)

_RESULT_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class RecommendationEntry(BaseModel):
    """A surfaced recommendation as handed to the presentation layer."""

    model_config = _RESULT_CONFIG

    type: str
    kind: CandidateKind
    coverage: int
    weakness_change: int
    tier: RecommendationTier


class AnalysisResult(BaseModel):
    """Result record of one roster analysis.

    Dumps with camelCase keys (`model_dump(by_alias=True)`): teamTypes,
    adjustedWeaknessesDefensive, teamOffensiveStrengths, adjustedWeaknesses,
    recommendedTypes, recommend, roster, sharedWeaknesses, grade.

    Attributes:
        team_types: Distinct roster types in order of first appearance.
        adjusted_weaknesses_defensive: Weaknesses left after resistances and immunities.
        team_offensive_strengths: Types the team hits super-effectively.
        adjusted_weaknesses: Defensive adjusted weaknesses the team also cannot hit back.
        recommended_types: Sorted recommendations, empty when the roster is full.
        recommend: True when the roster still has room and recommendations are surfaced.
        roster: The analyzed roster, echoed back.
        shared_weaknesses: Types two or more members are weak to.
        grade: Team grade, only present for a full roster.
    """

    model_config = _RESULT_CONFIG

    team_types: list[str]
    adjusted_weaknesses_defensive: list[str]
    team_offensive_strengths: list[str]
    adjusted_weaknesses: list[str]
    recommended_types: list[RecommendationEntry]
    recommend: bool
    roster: list[list[str]]
    shared_weaknesses: list[str]
    grade: Grade | None = None


def analyze_team(
    roster: Sequence[RosterMember],
    chart: TypeChart = DEFAULT_CHART,
    include_combos: bool = False,
    strict_shared_weaknesses: bool = False,
) -> AnalysisResult:
    """Analyze a roster's coverage and recommend additions.

    Recommendations are always computed but only surfaced while the roster has
    fewer than three members. The grade is only set for exactly three members.

    Args:
        roster: Zero to three members of already validated, canonical type names.
        chart: Type chart to analyze against.
        include_combos: Also recommend pairs of types.
        strict_shared_weaknesses: Reject candidates sharing any weakness with any member.

    Returns:
        AnalysisResult for the roster.
    """
    profile = build_team_profile(roster, chart)
    adjusted = adjust_weaknesses(profile.relations)
    shared = find_shared_weaknesses(profile.per_member_weaknesses)

    recommendations = recommend_types(
        profile,
        adjusted,
        shared,
        chart,
        include_combos=include_combos,
        strict=strict_shared_weaknesses,
    )

    recommend = len(roster) < FULL_ROSTER_SIZE
    surfaced = recommendations if recommend else []
    tiers = classify_tiers(surfaced, adjusted.full, chart)

    logger.debug(
        "Analyzed %d members: %d adjusted weaknesses, %d recommendations",
        len(roster),
        len(adjusted.full),
        len(recommendations),
    )

    return AnalysisResult(
        team_types=list(profile.team_types),
        adjusted_weaknesses_defensive=chart.ordered(adjusted.defensive),
        team_offensive_strengths=chart.ordered(profile.relations.strengths),
        adjusted_weaknesses=chart.ordered(adjusted.full),
        recommended_types=[
            RecommendationEntry(
                type=rec.identifier,
                kind=rec.kind,
                coverage=rec.coverage,
                weakness_change=rec.weakness_change,
                tier=tiers[rec.identifier],
            )
            for rec in surfaced
        ],
        recommend=recommend,
        roster=[list(member) for member in roster],
        shared_weaknesses=chart.ordered(shared),
        grade=grade_roster(len(roster), len(adjusted.full)),
    )


def recommendations_frame(entries: Sequence[RecommendationEntry]) -> pl.DataFrame:
    """Tabulate recommendations for display or export.

    Args:
        entries: Recommendations from an AnalysisResult.

    Returns:
        DataFrame with columns: type, kind, coverage, weakness_change, tier
        in the given order.
    """
    if not entries:
        return pl.DataFrame(
            schema={
                "type": pl.String,
                "kind": pl.String,
                "coverage": pl.Int64,
                "weakness_change": pl.Int64,
                "tier": pl.String,
            }
        )

    return pl.DataFrame(
        [
            {
                "type": entry.type,
                "kind": str(entry.kind),
                "coverage": entry.coverage,
                "weakness_change": entry.weakness_change,
                "tier": str(entry.tier),
            }
            for entry in entries
        ]
    )
