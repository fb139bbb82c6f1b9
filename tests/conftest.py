import copy
import os
from datetime import date
from typing import Any, Dict, List, Optional

import pytest

# Keep the app off disk and away from a real Gemini key during tests
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["GEMINI_API_KEY"] = ""
os.environ["ENV"] = "test"

from app.schemas.profile import UserProfile  # noqa: E402
from app.services.store import MemoryStore  # noqa: E402
from app.services.weight_log import WeightLog  # noqa: E402


SAMPLE_EXERCISE = {
    "name": "Barbell Bench Press",
    "sets": "3-4",
    "reps": "8-12",
    "rest": "60s",
    "muscle": "Chest",
    "postureTips": "Chest up rakho like a soldier, shoulder blades squeezed.",
    "mistakes": "Elbows ko zyada flare mat karo.",
    "youtubeQuery": "Bench Press correct form",
}

SAMPLE_PLAN: Dict[str, Any] = {
    "intro": "Chalo bhai, muscle gain mission shuru!",
    "schedule": [
        {
            "day": "Chest Workout",
            "exercises": [
                SAMPLE_EXERCISE,
                {**SAMPLE_EXERCISE, "name": "Incline Dumbbell Press", "youtubeQuery": "Incline DB press form"},
            ],
        },
        {
            "day": "Back Workout",
            "exercises": [
                {**SAMPLE_EXERCISE, "name": "Lat Pulldown", "muscle": "Lats", "youtubeQuery": "Lat pulldown form"},
            ],
        },
    ],
    "diet": {
        "proteinTarget": "140g",
        "calories": "2600",
        "tips": ["Paani zyada piyo", "Protein har meal mein"],
        "meals": {
            "breakfast": [{"name": "Paneer Paratha", "description": "2 parathas with curd"}],
            "lunch": [{"name": "Dal Chawal", "description": "Dal, rice, salad"}],
            "snack": [{"name": "Boiled Eggs", "description": "4 eggs with black pepper"}],
            "dinner": [{"name": "Chicken Curry", "description": "Chicken with 2 roti"}],
        },
    },
    "safety": ["5 min warm-up zaroor karo", "Ego lifting mat karo"],
    "motivation": "Consistency hi asli gains hai!",
}


class FakePlanProvider:
    """Deterministic plan provider returning canned text or raising."""

    def __init__(self, text: Optional[str] = None, error: Optional[Exception] = None):
        self.text = text
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    async def generate(self, prompt, system_instruction, response_schema):
        self.calls.append({
            "prompt": prompt,
            "system_instruction": system_instruction,
            "response_schema": response_schema,
        })
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture()
def sample_plan() -> Dict[str, Any]:
    return copy.deepcopy(SAMPLE_PLAN)


@pytest.fixture()
def profile() -> UserProfile:
    return UserProfile(
        age=25,
        gender="Male",
        height=175,
        weight=70,
        goal="Muscle Gain",
        experience="Intermediate",
        location="Gym",
        time_available="45 min",
        injuries="",
    )


@pytest.fixture()
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture()
def weight_log(store: MemoryStore) -> WeightLog:
    log = WeightLog(store)
    log.load()
    return log


@pytest.fixture()
def days():
    """Consecutive calendar days starting 2025-01-01."""
    return [date(2025, 1, day) for day in range(1, 11)]


@pytest.fixture()
def make_provider():
    return FakePlanProvider
