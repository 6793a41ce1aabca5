"""Letter grade bands for 0-100 viability scores."""

from dataclasses import dataclass
from enum import Enum


class GradeColor(str, Enum):
    GREEN = "green"
    LIME = "lime"
    YELLOW = "yellow"
    ORANGE = "orange"
    RED = "red"
    GRAY = "gray"


@dataclass(frozen=True)
class LetterGrade:
    letter: str
    color: GradeColor


# Inclusive lower bounds, highest first. First match wins.
GRADE_BANDS: tuple[tuple[float, LetterGrade], ...] = (
    (98, LetterGrade("A+", GradeColor.GREEN)),
    (92, LetterGrade("A", GradeColor.GREEN)),
    (90, LetterGrade("A-", GradeColor.GREEN)),
    (88, LetterGrade("B+", GradeColor.LIME)),
    (82, LetterGrade("B", GradeColor.LIME)),
    (80, LetterGrade("B-", GradeColor.YELLOW)),
    (78, LetterGrade("C+", GradeColor.YELLOW)),
    (72, LetterGrade("C", GradeColor.ORANGE)),
    (70, LetterGrade("C-", GradeColor.ORANGE)),
    (68, LetterGrade("D+", GradeColor.RED)),
    (62, LetterGrade("D", GradeColor.RED)),
    (60, LetterGrade("D-", GradeColor.RED)),
)

FAILING_GRADE = LetterGrade("F", GradeColor.GRAY)


def get_letter_grade(score: float) -> LetterGrade:
    """
    Map a numeric score to its letter grade and color band.

    Total over any number: values above 100 land in A+, values below 60
    (negatives and NaN included) land in F.

    Args:
        score: Overall score, nominally 0-100

    Returns:
        LetterGrade with letter and color
    """
    for threshold, grade in GRADE_BANDS:
        if score >= threshold:
            return grade
    return FAILING_GRADE
