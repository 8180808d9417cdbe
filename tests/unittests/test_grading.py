# ABOUTME: Unit tests for the team grade calculation.
# ABOUTME: Tests grade boundaries and the full-roster requirement.

import pytest

from typecoverage.analysis.grading import FULL_ROSTER_SIZE, Grade, calculate_grade, grade_roster


class TestCalculateGrade:
    """Tests for calculate_grade function."""

    @pytest.mark.parametrize(
        ("num_weaknesses", "expected"),
        [
            (0, Grade.S),
            (1, Grade.A),
            (2, Grade.B),
            (3, Grade.C),
            (4, Grade.D),
            (100, Grade.D),
        ],
    )
    def test_boundaries(self, num_weaknesses: int, expected: Grade) -> None:
        """Each weakness count maps to its fixed grade."""
        assert calculate_grade(num_weaknesses) == expected

    def test_grade_is_plain_string(self) -> None:
        """Grades compare equal to their letters."""
        assert calculate_grade(0) == "S"

    def test_negative_count_rejected(self) -> None:
        """A negative count is a programming error."""
        with pytest.raises(ValueError, match="negative"):
            calculate_grade(-1)


class TestGradeRoster:
    """Tests for grade_roster function."""

    def test_full_roster_graded(self) -> None:
        """A three-member roster gets a grade."""
        assert grade_roster(FULL_ROSTER_SIZE, 2) == Grade.B

    @pytest.mark.parametrize("roster_size", [0, 1, 2])
    def test_incomplete_roster_not_graded(self, roster_size: int) -> None:
        """Incomplete rosters have no grade, not a made-up one."""
        assert grade_roster(roster_size, 0) is None
