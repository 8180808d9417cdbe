"""ABOUTME: Parsing and validation of user-entered rosters.
ABOUTME: Canonicalizes type names and rejects unknown types before analysis."""

from collections.abc import Iterable

from typecoverage.analysis.dataclasses import RosterMember
from typecoverage.analysis.grading import FULL_ROSTER_SIZE
from typecoverage.utils.type_chart import DEFAULT_CHART, TypeChart

MAX_MEMBER_TYPES = 2


class RosterError(ValueError):
    """Raised when a roster entry cannot be turned into a valid member."""


class InvalidTypeError(RosterError):
    """Raised when a roster entry names types missing from the chart."""

    def __init__(self, invalid_types: list[str]) -> None:
        self.invalid_types = invalid_types
        super().__init__(f"Invalid types entered: {', '.join(invalid_types)}")


def canonicalize_type(name: str) -> str:
    """Normalize a type name to the chart's casing.

    Examples:
        >>> canonicalize_type("  fIRe ")
        'Fire'
    """
    return name.strip().capitalize()


def parse_member(text: str, chart: TypeChart = DEFAULT_CHART) -> RosterMember:
    """Parse one comma separated roster entry.

    Args:
        text: Entry such as "fire, flying".
        chart: Type chart providing the valid vocabulary.

    Returns:
        Tuple of 1-2 canonical type names.

    Raises:
        InvalidTypeError: If any type is not in the chart.
        RosterError: If the entry is empty, repeats a type, or has too many types.
    """
    types = [canonicalize_type(part) for part in text.split(",")]
    types = [type_name for type_name in types if type_name]

    if not types:
        raise RosterError("Roster entry has no types")

    invalid = [type_name for type_name in types if not chart.is_known(type_name)]
    if invalid:
        raise InvalidTypeError(invalid)

    if len(set(types)) != len(types):
        raise RosterError(f"Roster entry repeats a type: {text.strip()}")

    if len(types) > MAX_MEMBER_TYPES:
        raise RosterError(f"A member can have at most {MAX_MEMBER_TYPES} types, got {len(types)}")

    return tuple(types)


def parse_roster(entries: Iterable[str], chart: TypeChart = DEFAULT_CHART) -> list[RosterMember]:
    """Parse up to three roster entries, skipping blank ones.

    Args:
        entries: Raw entries, one per member.
        chart: Type chart providing the valid vocabulary.

    Returns:
        List of parsed members.

    Raises:
        RosterError: If no entry has types, there are too many members, or any entry is invalid.
    """
    roster = [parse_member(entry, chart) for entry in entries if entry.strip()]

    if not roster:
        raise RosterError("No types entered.")

    if len(roster) > FULL_ROSTER_SIZE:
        raise RosterError(f"A roster can have at most {FULL_ROSTER_SIZE} members, got {len(roster)}")

    return roster
