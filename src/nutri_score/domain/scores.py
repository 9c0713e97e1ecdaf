"""Domain models for computed scores."""

from dataclasses import dataclass
from enum import StrEnum


class Grade(StrEnum):
    """Letter grade, A is best."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"


@dataclass(frozen=True)
class ScoreBreakdown:
    """Numeric score with the point counts it was built from."""

    score: int
    negative: int
    energy_points: int
    sugar_points: int
    fat_points: int
    sodium_points: int
    fruit_points: int
    fiber_points: int
    protein_points: int
    fibers_and_proteins_counted: bool = True


@dataclass(frozen=True)
class ScoreResult:
    """Final score and letter grade."""

    breakdown: ScoreBreakdown
    grade: Grade

    @property
    def score(self) -> int:
        return self.breakdown.score
