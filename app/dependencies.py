"""
DesiFit API - FastAPI Dependencies.

Dependency injection helpers for routes. Tests override these through
``app.dependency_overrides``.
"""

import logging
from typing import Optional

from settings import settings
from app.services.planner import PlanGenerator, get_plan_generator
from app.services.store import build_store
from app.services.weight_log import WeightLog

logger = logging.getLogger(__name__)

_weight_log: Optional[WeightLog] = None


def get_weight_log() -> WeightLog:
    """
    Get the process-wide weight log.

    Created and loaded on first use; the app lifespan calls this at startup
    so the history is read exactly once.

    Returns:
        WeightLog: Shared weight log.
    """
    global _weight_log
    if _weight_log is None:
        log = WeightLog(build_store(settings), key=settings.WEIGHT_HISTORY_KEY)
        entries = log.load()
        logger.info(f"Weight history loaded: {len(entries)} entries")
        _weight_log = log
    return _weight_log


def get_planner() -> PlanGenerator:
    """
    Get the plan generator.

    Returns:
        PlanGenerator: Gemini-backed plan generator.
    """
    return get_plan_generator()
