"""
DesiFit API - Plan Prompts.

Fixed instruction blocks sent with every plan request: the coach persona and
the experience-tier structural rules. Neither is user-editable.
"""

from dataclasses import dataclass
from typing import Dict

from app.schemas.profile import Experience, UserProfile


@dataclass(frozen=True)
class ExperienceRule:
    """Structural rules for one experience tier."""
    exercises: str
    style: str
    sets: str
    reps: str
    rest: str
    focus: str

    def render(self, tier: Experience) -> str:
        return (
            f"- {tier.value}: {self.exercises} exercises. {self.style}. "
            f"Sets: {self.sets}, Reps: {self.reps}, Rest: {self.rest}. Focus: {self.focus}."
        )


EXPERIENCE_RULES: Dict[Experience, ExperienceRule] = {
    Experience.BEGINNER: ExperienceRule(
        exercises="3-4 basic",
        style="Mostly bodyweight/dumbbells",
        sets="3",
        reps="10-12",
        rest="45-60s",
        focus="Form"
    ),
    Experience.INTERMEDIATE: ExperienceRule(
        exercises="4-5",
        style="Compound + Isolation",
        sets="3-4",
        reps="8-12",
        rest="60s",
        focus="Growth"
    ),
    Experience.ADVANCED: ExperienceRule(
        exercises="5-6",
        style="Heavy Compound + Advanced",
        sets="4",
        reps="6-12",
        rest="60-90s",
        focus="Intensity"
    ),
}

BODY_PARTS = ("Chest", "Back", "Biceps", "Triceps", "Shoulder", "Legs", "Core")


def build_system_instruction(profile: UserProfile) -> str:
    """
    Persona and structural rules for the plan generator.

    Args:
        profile: Profile whose experience tier is named in the rules.

    Returns:
        str: System instruction text.
    """
    rules = "\n".join(
        rule.render(tier) for tier, rule in EXPERIENCE_RULES.items()
    )
    return f"""You are "DesiFit Coach", a friendly, motivating, and professional Indian Gym Trainer.
You speak in a mix of English and Hindi (Hinglish) to connect with Indian users.

Your task is to generate a PERSONALIZED workout and diet plan based on the user's details.

IMPORTANT: WORKOUT ORGANIZATION
- Do NOT create a weekly schedule (e.g., "Monday", "Tuesday").
- Organize the workout plan by BODY PARTS: {", ".join(BODY_PARTS)}.
- For each body part, provide exercises strictly matching the user's Experience Level ({profile.experience.value}).

EXPERIENCE LEVEL RULES:
{rules}

DIET RULES:
- Simple Indian home-cooked meals (Roti, Dal, Sabzi, Paneer, Chicken, Eggs, etc.).
- Match the user's goal ({profile.goal.value}).

FORMAT EXERCISE DETAILS:
- Posture Tips: Provide detailed, specific visual cues in Hinglish (e.g., "Chest up rakho like a soldier", "Back ekdum seedha", "Core tight rakho").
- Common Mistakes: Describe specific errors with visual descriptions in Hinglish (e.g., "Don't round your back like a turtle", "Elbows ko zyada flare mat karo").
- Provide a YouTube search query for correct form.
"""


def build_user_prompt(profile: UserProfile) -> str:
    """Render the profile into the plan request prompt."""
    injuries = profile.injuries.strip() or "None"
    return f"""Create a detailed Body-Part wise workout and diet plan for this user:
- Profile: {profile.age}y {profile.gender.value}, {profile.height}cm, {profile.weight}kg
- Goal: {profile.goal.value}
- Level: {profile.experience.value}
- Location: {profile.location.value}
- Time: {profile.time_available.value}
- Injuries: {injuries}

Structure the 'schedule' as a list of Body Parts (e.g., 'Chest', 'Back').
"""
