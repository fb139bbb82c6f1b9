# app/services/planner.py
"""
DesiFit Plan Generator.

Turns a user profile into a validated GeneratedPlan through a swappable
plan provider (Gemini by default).

Usage:
    planner = get_plan_generator()
    plan = await planner.request_plan(profile)
"""

import json
import logging
from typing import Any, Dict, Optional, Protocol

from pydantic import ValidationError as PydanticValidationError

from app.schemas.plan import GeneratedPlan
from app.schemas.plan_contract import PLAN_RESPONSE_SCHEMA, check_conformance
from app.schemas.profile import UserProfile
from app.services.prompts import build_system_instruction, build_user_prompt
from app.utils.errors import DesiFitException, ProviderError

logger = logging.getLogger(__name__)

# Cap on schema violations copied into the error detail
MAX_REPORTED_VIOLATIONS = 10


class PlanProvider(Protocol):
    """
    Structured-output provider boundary.

    Returns JSON text conforming to ``response_schema`` (or nothing), or
    raises. Output is never assumed deterministic.
    """

    async def generate(
        self,
        prompt: str,
        system_instruction: str,
        response_schema: Dict[str, Any]
    ) -> Optional[str]:
        ...


def parse_plan(text: Optional[str]) -> GeneratedPlan:
    """
    Build a GeneratedPlan from raw provider output.

    Raises:
        ProviderError: Empty body, invalid JSON, or schema violations.
    """
    if not text or not text.strip():
        raise ProviderError("No response from AI")

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise ProviderError("Malformed response from AI", detail=str(e)) from e

    violations = check_conformance(payload, PLAN_RESPONSE_SCHEMA)
    if violations:
        raise ProviderError(
            "Response does not match plan schema",
            detail="; ".join(violations[:MAX_REPORTED_VIOLATIONS])
        )

    try:
        return GeneratedPlan.model_validate(payload)
    except PydanticValidationError as e:
        raise ProviderError("Response does not match plan schema", detail=str(e)) from e


class PlanGenerator:
    """
    Single best-effort plan request per call.

    No retry, no caching, no deduplication of concurrent calls; callers
    keep their own busy flag while a request is pending.
    """

    def __init__(self, provider: PlanProvider):
        self.provider = provider

    async def request_plan(self, profile: UserProfile) -> GeneratedPlan:
        """
        Generate a plan for ``profile``.

        Raises:
            ConfigurationError: Provider credential missing.
            ProviderError: Provider failure or non-conforming response.
        """
        system_instruction = build_system_instruction(profile)
        prompt = build_user_prompt(profile)

        logger.info(
            f"Requesting plan: goal={profile.goal.value}, "
            f"level={profile.experience.value}, location={profile.location.value}"
        )
        try:
            text = await self.provider.generate(prompt, system_instruction, PLAN_RESPONSE_SCHEMA)
        except DesiFitException:
            raise
        except Exception as e:
            logger.error(f"Plan provider error: {str(e)}")
            raise ProviderError(detail=str(e)) from e

        try:
            plan = parse_plan(text)
        except ProviderError as e:
            logger.error(f"{e.message}: {e.detail}")
            raise

        logger.info(f"Plan generated with {len(plan.schedule)} body-part workouts")
        return plan


_plan_generator: Optional[PlanGenerator] = None


def get_plan_generator() -> PlanGenerator:
    """Get or create the global plan generator backed by Gemini."""
    global _plan_generator
    if _plan_generator is None:
        from app.services.gemini import GeminiService
        _plan_generator = PlanGenerator(GeminiService())
    return _plan_generator
