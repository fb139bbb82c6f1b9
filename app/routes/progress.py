# app/routes/progress.py
"""
DesiFit API - Progress Tracker Routes.

Weight logging with chart geometry and progress insight.

Handlers are plain functions: the weight log does blocking store I/O
(file or Redis), so FastAPI runs them in its threadpool instead of on the
event loop.
"""

from datetime import date
from typing import List

from fastapi import APIRouter, Depends

from app.dependencies import get_weight_log
from app.schemas.progress import (
    ProgressResponse,
    WeightDeleteResponse,
    WeightEntry,
    WeightLogRequest,
    WeightLogResponse,
)
from app.services.progress import derive_chart, describe_placeholder, describe_trend
from app.services.weight_log import WeightLog

router = APIRouter()


def _progress_state(log: WeightLog) -> dict:
    entries = log.entries
    return {
        "entries": list(entries),
        "chart": derive_chart(entries),
        "insight": describe_trend(entries),
        "placeholder": describe_placeholder(entries),
    }


@router.get("/weight", response_model=ProgressResponse)
def get_progress(log: WeightLog = Depends(get_weight_log)):
    """Get weight history with chart geometry and insight."""
    return _progress_state(log)


@router.post("/weight", response_model=WeightLogResponse)
def log_weight(
    request: WeightLogRequest,
    log: WeightLog = Depends(get_weight_log)
):
    """
    Log a weight for a day (today by default).

    Out-of-range weights leave the history unchanged and come back with
    ``accepted: false`` rather than an error.
    """
    if request.date is None:
        accepted = log.log_today(request.weight)
    else:
        accepted = log.upsert(request.date, request.weight)
    return {**_progress_state(log), "accepted": accepted}


@router.delete("/weight/{day}", response_model=WeightDeleteResponse)
def delete_weight(day: date, log: WeightLog = Depends(get_weight_log)):
    """Delete the entry for a day. Deleting a missing day is a no-op."""
    deleted = log.delete(day)
    return {**_progress_state(log), "deleted": deleted}


@router.get("/weight/history", response_model=List[WeightEntry])
def get_history(log: WeightLog = Depends(get_weight_log)):
    """Get weight history, newest first."""
    return log.history()
