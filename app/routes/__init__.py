"""DesiFit API - Routes Package."""

from app.routes import (
    plan,
    progress,
)

__all__ = [
    "plan",
    "progress",
]
