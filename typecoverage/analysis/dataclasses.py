"""ABOUTME: Data classes for roster coverage analysis.
ABOUTME: Contains TeamRelations, TeamProfile, AdjustedWeaknesses, Candidate, and Recommendation."""

from dataclasses import dataclass
from enum import StrEnum

RosterMember = tuple[str, ...]
"""One roster member: an ordered sequence of 1-2 canonical type names."""


@dataclass(frozen=True)
class TeamRelations:
    """Union of the relations of every type in a type set.

    Attributes:
        weaknesses: Union of the per-type weaknesses.
        resistances: Union of the per-type resistances.
        immunities: Union of the per-type immunities.
        strengths: Union of the per-type offensive strengths.
    """

    weaknesses: frozenset[str] = frozenset()
    resistances: frozenset[str] = frozenset()
    immunities: frozenset[str] = frozenset()
    strengths: frozenset[str] = frozenset()


@dataclass(frozen=True)
class TeamProfile:
    """Team-level relation sets plus each member's own weaknesses.

    Attributes:
        team_types: Distinct types on the roster, in order of first appearance.
        relations: Unioned relations over `team_types`.
        per_member_weaknesses: One weakness set per roster member, parallel to the roster.
    """

    team_types: tuple[str, ...] = ()
    relations: TeamRelations = TeamRelations()
    per_member_weaknesses: tuple[frozenset[str], ...] = ()


@dataclass(frozen=True)
class AdjustedWeaknesses:
    """Team weaknesses left after defensive and offensive cancellation.

    Attributes:
        defensive: Team weaknesses not resisted or nullified by any team type.
        full: Defensive weaknesses the team cannot also hit super-effectively.
    """

    defensive: frozenset[str] = frozenset()
    full: frozenset[str] = frozenset()


class CandidateKind(StrEnum):
    """Shape of a recommendation candidate."""

    SINGLE = "single"
    COMBO = "combo"


class RecommendationTier(StrEnum):
    """Display grouping of a recommendation."""

    PRIMARY = "primary"
    COMPLEMENTARY = "complementary"
    SECONDARY = "secondary"


@dataclass(frozen=True)
class Candidate:
    """A type or type pair that could be added to the roster."""

    types: tuple[str, ...]

    @property
    def kind(self) -> CandidateKind:
        return CandidateKind.COMBO if len(self.types) > 1 else CandidateKind.SINGLE

    @property
    def identifier(self) -> str:
        return "/".join(self.types)


@dataclass(frozen=True)
class Recommendation:
    """A scored candidate.

    Attributes:
        candidate: The proposed type or type pair.
        coverage: Number of fully adjusted weaknesses the candidate hits offensively.
        weakness_change: Change in the fully adjusted weakness count if the candidate
            joined the team. Negative is an improvement.
    """

    candidate: Candidate
    coverage: int
    weakness_change: int

    @property
    def identifier(self) -> str:
        return self.candidate.identifier

    @property
    def kind(self) -> CandidateKind:
        return self.candidate.kind
