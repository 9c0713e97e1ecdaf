"""Pydantic models for score request and response payloads."""

from pydantic import BaseModel, Field

from nutri_score.domain.nutrition import DEFAULT_CATEGORY, Category, Nutrition
from nutri_score.domain.scores import Grade, ScoreResult


class NutritionPayload(BaseModel):
    """Nutrition values per 100 g or 100 ml."""

    energy: float = Field(ge=0, allow_inf_nan=False, description="Energy in kJ")
    fat: float = Field(ge=0, allow_inf_nan=False)
    saturated_fat: float = Field(ge=0, allow_inf_nan=False)
    sugar: float = Field(ge=0, allow_inf_nan=False)
    protein: float = Field(ge=0, allow_inf_nan=False)
    salt: float = Field(ge=0, allow_inf_nan=False)
    fiber: float = Field(ge=0, allow_inf_nan=False)

    def to_domain(self) -> Nutrition:
        return Nutrition(
            energy=self.energy,
            fat=self.fat,
            saturated_fat=self.saturated_fat,
            sugar=self.sugar,
            protein=self.protein,
            salt=self.salt,
            fiber=self.fiber,
        )


class ScoreRequest(BaseModel):
    """Product to score."""

    category: Category = DEFAULT_CATEGORY
    nutrition: NutritionPayload
    fruits_percentage: float = Field(ge=0, le=100, allow_inf_nan=False)
    is_water: bool = False


class ScoreResponse(BaseModel):
    """Score, grade and per-nutrient points."""

    grade: Grade
    score: int
    negative: int
    energy_points: int
    sugar_points: int
    fat_points: int
    sodium_points: int
    fruit_points: int
    fiber_points: int
    protein_points: int
    fibers_and_proteins_counted: bool

    @classmethod
    def from_result(cls, result: ScoreResult) -> "ScoreResponse":
        breakdown = result.breakdown
        return cls(
            grade=result.grade,
            score=breakdown.score,
            negative=breakdown.negative,
            energy_points=breakdown.energy_points,
            sugar_points=breakdown.sugar_points,
            fat_points=breakdown.fat_points,
            sodium_points=breakdown.sodium_points,
            fruit_points=breakdown.fruit_points,
            fiber_points=breakdown.fiber_points,
            protein_points=breakdown.protein_points,
            fibers_and_proteins_counted=breakdown.fibers_and_proteins_counted,
        )
