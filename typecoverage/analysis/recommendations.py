# ABOUTME: Recommendation engine for closing a roster's remaining weaknesses.
# ABOUTME: Generates, scores, filters, and sorts single-type and type-pair candidates.

import logging
from collections.abc import Iterable, Sequence
from itertools import combinations

from typecoverage.analysis.coverage import adjusted_weaknesses_for_types, aggregate_relations
from typecoverage.analysis.dataclasses import (
    AdjustedWeaknesses,
    Candidate,
    Recommendation,
    RecommendationTier,
    TeamProfile,
)
from typecoverage.utils.type_chart import DEFAULT_CHART, TypeChart

logger = logging.getLogger(__name__)


def generate_candidates(
    team_types: Iterable[str],
    chart: TypeChart = DEFAULT_CHART,
    include_combos: bool = False,
) -> list[Candidate]:
    """Build every candidate addition not already on the team.

    Args:
        team_types: Types currently on the roster.
        chart: Type chart providing the vocabulary.
        include_combos: Also emit each unordered pair of off-team types once.

    Returns:
        Single-type candidates in chart order, followed by pair candidates if requested.
    """
    on_team = set(team_types)
    available = [type_name for type_name in chart.types if type_name not in on_team]

    candidates = [Candidate(types=(type_name,)) for type_name in available]
    if include_combos:
        candidates.extend(Candidate(types=pair) for pair in combinations(available, 2))
    return candidates


def candidate_coverage(
    candidate: Candidate,
    adjusted: AdjustedWeaknesses,
    chart: TypeChart = DEFAULT_CHART,
) -> int:
    """Count the fully adjusted weaknesses the candidate hits super effectively."""
    return len(aggregate_relations(candidate.types, chart).strengths & adjusted.full)


def score_candidate(
    candidate: Candidate,
    profile: TeamProfile,
    adjusted: AdjustedWeaknesses,
    chart: TypeChart = DEFAULT_CHART,
) -> Recommendation:
    """Score a candidate against the current fully adjusted weaknesses.

    coverage = |candidate strengths & adjusted.full|
    weakness_change = |full(team + candidate)| - |adjusted.full|

    Args:
        candidate: The type or pair being considered.
        profile: Current team profile.
        adjusted: Current adjusted weaknesses of the team.
        chart: Type chart to look relations up in.

    Returns:
        Recommendation with both scores filled in.
    """
    coverage = candidate_coverage(candidate, adjusted, chart)

    hypothetical = adjusted_weaknesses_for_types((*profile.team_types, *candidate.types), chart)
    weakness_change = len(hypothetical.full) - len(adjusted.full)

    return Recommendation(candidate=candidate, coverage=coverage, weakness_change=weakness_change)


def blocking_weaknesses(
    candidate: Candidate,
    profile: TeamProfile,
    shared_weaknesses: frozenset[str],
    chart: TypeChart = DEFAULT_CHART,
    strict: bool = False,
) -> frozenset[str]:
    """Return the candidate weaknesses that disqualify it.

    By default a candidate is blocked when it is weak to something two or more
    members are already weak to. With `strict`, any overlap with any single
    member's weaknesses blocks it, so no new shared weakness can appear.

    Args:
        candidate: The type or pair being considered.
        profile: Current team profile.
        shared_weaknesses: Types already shared by two or more members.
        chart: Type chart to look relations up in.
        strict: Guard every member weakness instead of only shared ones.

    Returns:
        The offending weakness types (empty if the candidate is acceptable).
    """
    weaknesses = aggregate_relations(candidate.types, chart).weaknesses
    guarded = frozenset().union(*profile.per_member_weaknesses) if strict else shared_weaknesses
    return weaknesses & guarded


def sort_recommendations(recommendations: Iterable[Recommendation]) -> list[Recommendation]:
    """Sort by coverage descending, weakness change ascending, then identifier."""
    return sorted(recommendations, key=lambda rec: (-rec.coverage, rec.weakness_change, rec.identifier))


def recommend_types(
    profile: TeamProfile,
    adjusted: AdjustedWeaknesses,
    shared_weaknesses: frozenset[str],
    chart: TypeChart = DEFAULT_CHART,
    include_combos: bool = False,
    strict: bool = False,
) -> list[Recommendation]:
    """Propose additions that help with the remaining fully adjusted weaknesses.

    Pipeline: generate candidates, drop the ones that cover nothing or deepen a
    shared weakness, score the weakness change of the rest, then sort.

    Args:
        profile: Current team profile.
        adjusted: Current adjusted weaknesses of the team.
        shared_weaknesses: Types already shared by two or more members.
        chart: Type chart to look relations up in.
        include_combos: Also consider pairs of types.
        strict: Reject candidates that share any weakness with any member.

    Returns:
        Sorted list of surviving recommendations.
    """
    candidates = generate_candidates(profile.team_types, chart, include_combos)

    surviving: list[Recommendation] = []
    for candidate in candidates:
        if candidate_coverage(candidate, adjusted, chart) == 0:
            continue

        blocked = blocking_weaknesses(candidate, profile, shared_weaknesses, chart, strict)
        if blocked:
            logger.debug("Rejected %s: weak to %s", candidate.identifier, ", ".join(chart.ordered(blocked)))
            continue

        surviving.append(score_candidate(candidate, profile, adjusted, chart))

    logger.debug("Kept %d of %d candidates", len(surviving), len(candidates))
    return sort_recommendations(surviving)


def classify_tiers(
    recommendations: Sequence[Recommendation],
    full_weaknesses: frozenset[str],
    chart: TypeChart = DEFAULT_CHART,
) -> dict[str, RecommendationTier]:
    """Group recommendations into primary, complementary, and secondary picks.

    Primary picks share the best coverage. Complementary picks hit at least one
    weakness that the primary picks together leave uncovered. Everything else is
    secondary.

    Args:
        recommendations: Recommendations to classify.
        full_weaknesses: The team's fully adjusted weaknesses.
        chart: Type chart to look relations up in.

    Returns:
        Mapping of recommendation identifier to its tier.
    """
    if not recommendations:
        return {}

    best_coverage = max(rec.coverage for rec in recommendations)
    strengths = {rec.identifier: aggregate_relations(rec.candidate.types, chart).strengths for rec in recommendations}

    uncovered = set(full_weaknesses)
    for rec in recommendations:
        if rec.coverage == best_coverage:
            uncovered -= strengths[rec.identifier]

    tiers: dict[str, RecommendationTier] = {}
    for rec in recommendations:
        if rec.coverage == best_coverage:
            tiers[rec.identifier] = RecommendationTier.PRIMARY
        elif strengths[rec.identifier] & uncovered:
            tiers[rec.identifier] = RecommendationTier.COMPLEMENTARY
        else:
            tiers[rec.identifier] = RecommendationTier.SECONDARY
    return tiers
