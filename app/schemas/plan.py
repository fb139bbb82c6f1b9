"""
DesiFit API - Generated Plan Schemas.

Typed view of the structured plan returned by the provider. Field names on
the wire are camelCase to match ``PLAN_RESPONSE_SCHEMA``.
"""

from typing import List
from urllib.parse import quote_plus

from pydantic import BaseModel, Field, ConfigDict, computed_field
from pydantic.alias_generators import to_camel


YOUTUBE_SEARCH_URL = "https://www.youtube.com/results?search_query="


class _PlanModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True
    )


class Exercise(_PlanModel):
    """
    One exercise of a body-part workout.

    Sets, reps and rest are opaque text (ranges like "8-12" are common),
    no numeric parsing is done on them.
    """

    name: str = Field(..., min_length=1)
    sets: str = Field(..., min_length=1)
    reps: str = Field(..., min_length=1)
    rest: str = Field(..., min_length=1)
    muscle: str = Field(..., min_length=1, description="Specific target muscle")
    posture_tips: str = Field(..., min_length=1)
    mistakes: str = Field(..., min_length=1)
    youtube_query: str = Field(..., min_length=1)

    @computed_field
    @property
    def youtube_url(self) -> str:
        """YouTube search link for a correct-form video."""
        return YOUTUBE_SEARCH_URL + quote_plus(self.youtube_query)


class WorkoutDay(_PlanModel):
    """Exercises for one body part. ``day`` is a body-part label, not a weekday."""

    day: str = Field(..., min_length=1, description="Body part, e.g. 'Chest Workout'")
    exercises: List[Exercise]


class MealOption(_PlanModel):
    name: str
    description: str


class Meals(_PlanModel):
    breakfast: List[MealOption]
    lunch: List[MealOption]
    snack: List[MealOption]
    dinner: List[MealOption]


class DietPlan(_PlanModel):
    """Daily targets, meal options and nutrition tips."""

    protein_target: str = Field(..., description="Daily protein target, e.g. '150g'")
    calories: str = Field(..., description="Approximate daily calories, e.g. '2200'")
    tips: List[str]
    meals: Meals


class GeneratedPlan(_PlanModel):
    """
    Complete plan built from one provider response.

    Attributes:
        intro: Welcome message tailored to the goal.
        schedule: Workouts grouped by body part.
        diet: Diet plan.
        safety: Safety and warm-up/cool-down tips.
        motivation: Closing motivation line.
    """

    intro: str
    schedule: List[WorkoutDay] = Field(..., min_length=1)
    diet: DietPlan
    safety: List[str]
    motivation: str
