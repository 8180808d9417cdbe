# ABOUTME: Letter grade for a complete roster.
# ABOUTME: Maps the fully adjusted weakness count onto S/A/B/C/D.

import logging
from enum import StrEnum

logger = logging.getLogger(__name__)

FULL_ROSTER_SIZE = 3


class Grade(StrEnum):
    """Team grade, best to worst."""

    S = "S"
    A = "A"
    B = "B"
    C = "C"
    D = "D"


# Index = number of fully adjusted weaknesses; anything past the end is a D
_GRADE_STEPS: tuple[Grade, ...] = (Grade.S, Grade.A, Grade.B, Grade.C)


def calculate_grade(num_weaknesses: int) -> Grade:
    """Grade a team by its number of fully adjusted weaknesses.

    Args:
        num_weaknesses: Size of the fully adjusted weakness set.

    Returns:
        S for 0, A for 1, B for 2, C for 3, D for 4 or more.

    Raises:
        ValueError: If num_weaknesses is negative.
    """
    if num_weaknesses < 0:
        raise ValueError(f"Weakness count cannot be negative: {num_weaknesses}")

    if num_weaknesses < len(_GRADE_STEPS):
        return _GRADE_STEPS[num_weaknesses]
    return Grade.D


def grade_roster(roster_size: int, num_weaknesses: int) -> Grade | None:
    """Grade the roster if it is complete, otherwise return None."""
    if roster_size != FULL_ROSTER_SIZE:
        return None

    grade = calculate_grade(num_weaknesses)
    logger.debug("Graded full roster with %d adjusted weaknesses as %s", num_weaknesses, grade)
    return grade
