"""
DesiFit API - Plan Response Contract.

Data-driven description of the structured output requested from the plan
provider. The same dict is sent to Gemini as ``response_schema`` and used by
``check_conformance`` to validate what comes back, so a drop-in provider only
has to honour this one description.
"""

from typing import Any, Dict, List, Optional


def _string(description: Optional[str] = None) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "STRING"}
    if description:
        schema["description"] = description
    return schema


def _string_list(description: Optional[str] = None) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "ARRAY", "items": {"type": "STRING"}}
    if description:
        schema["description"] = description
    return schema


MEAL_OPTION_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "name": _string(),
        "description": _string(),
    },
    "required": ["name", "description"],
}

EXERCISE_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "name": _string(),
        "sets": _string(),
        "reps": _string(),
        "rest": _string(),
        "muscle": _string("Specific target muscle"),
        "postureTips": _string("Detailed visual cues for correct form in Hinglish."),
        "mistakes": _string("Common errors with visual descriptions in Hinglish."),
        "youtubeQuery": _string("Search query for YouTube, e.g., 'Bench Press correct form'"),
    },
    "required": [
        "name", "sets", "reps", "rest", "muscle",
        "postureTips", "mistakes", "youtubeQuery",
    ],
}

WORKOUT_DAY_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "day": _string("Body Part Name (e.g., 'Chest Workout')"),
        "exercises": {"type": "ARRAY", "items": EXERCISE_SCHEMA},
    },
    "required": ["day", "exercises"],
}

DIET_PLAN_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "proteinTarget": _string("Daily protein target in grams"),
        "calories": _string("Approximate daily calorie target"),
        "tips": _string_list(),
        "meals": {
            "type": "OBJECT",
            "properties": {
                meal: {"type": "ARRAY", "items": MEAL_OPTION_SCHEMA}
                for meal in ("breakfast", "lunch", "snack", "dinner")
            },
            "required": ["breakfast", "lunch", "snack", "dinner"],
        },
    },
    "required": ["proteinTarget", "calories", "tips", "meals"],
}

PLAN_RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "intro": _string("A short, high-energy Hinglish welcome message tailored to their goal."),
        "schedule": {"type": "ARRAY", "items": WORKOUT_DAY_SCHEMA},
        "diet": DIET_PLAN_SCHEMA,
        "safety": _string_list("Safety rules and warm-up/cool-down advice in Hinglish"),
        "motivation": _string("A final closing motivation punchline in Hinglish."),
    },
    "required": ["intro", "schedule", "diet", "safety", "motivation"],
}


_PY_TYPES = {
    "STRING": (str,),
    "OBJECT": (dict,),
    "ARRAY": (list,),
    "BOOLEAN": (bool,),
    "INTEGER": (int,),
    "NUMBER": (int, float),
}


def check_conformance(value: Any, schema: Dict[str, Any], path: str = "$") -> List[str]:
    """
    Validate a decoded JSON value against a schema description.

    Args:
        value: Decoded JSON value.
        schema: Schema dict in the ``PLAN_RESPONSE_SCHEMA`` format.
        path: Dotted path of ``value``, used in messages.

    Returns:
        List[str]: One message per violation; empty when the value conforms.
    """
    kind = schema.get("type", "").upper()
    expected = _PY_TYPES.get(kind)
    if expected is None:
        return [f"{path}: unsupported schema type {schema.get('type')!r}"]

    # bool is an int subclass; keep it out of numeric slots
    if isinstance(value, bool) and kind != "BOOLEAN":
        return [f"{path}: expected {kind.lower()}, got boolean"]
    if not isinstance(value, expected):
        return [f"{path}: expected {kind.lower()}, got {type(value).__name__}"]

    violations: List[str] = []
    if kind == "OBJECT":
        properties = schema.get("properties", {})
        for name in schema.get("required", []):
            if name not in value or value[name] is None:
                violations.append(f"{path}.{name}: missing required field")
        for name, sub_schema in properties.items():
            if value.get(name) is not None:
                violations.extend(check_conformance(value[name], sub_schema, f"{path}.{name}"))
    elif kind == "ARRAY" and "items" in schema:
        for index, item in enumerate(value):
            violations.extend(check_conformance(item, schema["items"], f"{path}[{index}]"))
    return violations
