"""DesiFit API - Pydantic Schemas Package."""

from app.schemas.profile import (
    Gender,
    Goal,
    Experience,
    Location,
    TimeAvailable,
    UserProfile,
)
from app.schemas.plan import (
    Exercise,
    WorkoutDay,
    MealOption,
    Meals,
    DietPlan,
    GeneratedPlan,
)
from app.schemas.plan_contract import (
    PLAN_RESPONSE_SCHEMA,
    check_conformance,
)
from app.schemas.progress import (
    WeightEntry,
    WeightLogRequest,
    ChartPoint,
    ChartMarker,
    ChartGeometry,
    ProgressResponse,
    WeightLogResponse,
    WeightDeleteResponse,
)

__all__ = [
    # Profile
    "Gender",
    "Goal",
    "Experience",
    "Location",
    "TimeAvailable",
    "UserProfile",
    # Plan
    "Exercise",
    "WorkoutDay",
    "MealOption",
    "Meals",
    "DietPlan",
    "GeneratedPlan",
    "PLAN_RESPONSE_SCHEMA",
    "check_conformance",
    # Progress
    "WeightEntry",
    "WeightLogRequest",
    "ChartPoint",
    "ChartMarker",
    "ChartGeometry",
    "ProgressResponse",
    "WeightLogResponse",
    "WeightDeleteResponse",
]
