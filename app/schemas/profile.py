"""
DesiFit API - User Profile Schemas.

Pydantic schema for the intake profile sent with a plan request.
"""

from enum import Enum

from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel


class Gender(str, Enum):
    """Gender options offered by the intake form."""
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class Goal(str, Enum):
    """Fitness goal."""
    FAT_LOSS = "Fat Loss"
    MUSCLE_GAIN = "Muscle Gain"
    STRENGTH = "Strength"
    GENERAL_FITNESS = "General Fitness"


class Experience(str, Enum):
    """Training experience tier."""
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class Location(str, Enum):
    """Where the user trains."""
    HOME = "Home"
    GYM = "Gym"


class TimeAvailable(str, Enum):
    """Session length buckets."""
    SHORT = "20-30 min"
    MEDIUM = "45 min"
    LONG = "60+ min"


class UserProfile(BaseModel):
    """
    Body metrics and goals collected by the onboarding wizard.

    Immutable once submitted. Accepts camelCase (``timeAvailable``) on the
    wire and snake_case in Python.

    Attributes:
        age: Age in years.
        gender: Gender.
        height: Height in cm.
        weight: Weight in kg.
        goal: Fitness goal.
        experience: Experience tier, selects the structural rules of the plan.
        location: Home or Gym.
        time_available: Session length bucket.
        injuries: Free text, may be empty.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "age": 25,
                "gender": "Male",
                "height": 175,
                "weight": 70,
                "goal": "Muscle Gain",
                "experience": "Intermediate",
                "location": "Gym",
                "timeAvailable": "45 min",
                "injuries": ""
            }
        }
    )

    age: int = Field(..., gt=0, description="Age in years")
    gender: Gender = Field(..., description="Male/Female/Other")
    height: int = Field(..., gt=0, description="Height in cm")
    weight: int = Field(..., gt=0, description="Weight in kg")
    goal: Goal = Field(..., description="Fat Loss/Muscle Gain/Strength/General Fitness")
    experience: Experience = Field(..., description="Beginner/Intermediate/Advanced")
    location: Location = Field(..., description="Home/Gym")
    time_available: TimeAvailable = Field(..., description="20-30 min/45 min/60+ min")
    injuries: str = Field(default="", description="Injuries or limitations, may be empty")
