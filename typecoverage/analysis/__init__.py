# ABOUTME: Analysis package for roster type coverage.
# ABOUTME: Contains aggregation, adjustment, recommendation, shared weakness, and grading logic.

from typecoverage.analysis.coverage import (
    adjust_weaknesses,
    adjusted_weaknesses_for_types,
    aggregate_relations,
    build_team_profile,
)
from typecoverage.analysis.grading import FULL_ROSTER_SIZE, Grade, calculate_grade, grade_roster
from typecoverage.analysis.recommendations import (
    candidate_coverage,
    classify_tiers,
    generate_candidates,
    recommend_types,
    score_candidate,
    sort_recommendations,
)
from typecoverage.analysis.shared_weaknesses import find_shared_weaknesses
from typecoverage.analysis.team_analysis import (
    AnalysisResult,
    RecommendationEntry,
    analyze_team,
    recommendations_frame,
)

__all__ = [
    "FULL_ROSTER_SIZE",
    "AnalysisResult",
    "Grade",
    "RecommendationEntry",
    "adjust_weaknesses",
    "adjusted_weaknesses_for_types",
    "aggregate_relations",
    "analyze_team",
    "build_team_profile",
    "calculate_grade",
    "candidate_coverage",
    "classify_tiers",
    "find_shared_weaknesses",
    "generate_candidates",
    "grade_roster",
    "recommend_types",
    "recommendations_frame",
    "score_candidate",
    "sort_recommendations",
]
