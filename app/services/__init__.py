"""DesiFit API - Services Package."""

from .store import KeyValueStore, MemoryStore, JsonFileStore, RedisStore, build_store
from .weight_log import WeightLog, validate_weight
from .progress import derive_chart, describe_trend, describe_placeholder
from .planner import PlanGenerator, PlanProvider, get_plan_generator, parse_plan

__all__ = [
    "KeyValueStore",
    "MemoryStore",
    "JsonFileStore",
    "RedisStore",
    "build_store",
    "WeightLog",
    "validate_weight",
    "derive_chart",
    "describe_trend",
    "describe_placeholder",
    "PlanGenerator",
    "PlanProvider",
    "get_plan_generator",
    "parse_plan",
]
