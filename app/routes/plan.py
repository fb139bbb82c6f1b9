# app/routes/plan.py
"""DesiFit API - Plan Routes."""

from fastapi import APIRouter, Depends

from app.dependencies import get_planner
from app.schemas.plan import GeneratedPlan
from app.schemas.profile import UserProfile
from app.services.planner import PlanGenerator

router = APIRouter()


@router.post("/generate", response_model=GeneratedPlan)
async def generate_plan(
    profile: UserProfile,
    planner: PlanGenerator = Depends(get_planner)
):
    """
    Generate a body-part workout and diet plan for the submitted profile.

    Failures are turned into one generic message by the app's
    DesiFitException handler.
    """
    return await planner.request_plan(profile)
