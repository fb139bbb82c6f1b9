"""
DesiFit API - Progress Chart and Insight.

Pure functions from a weight history to chart geometry and a progress
message. No state, so they are tested without any rendering surface.
"""

from typing import Optional, Sequence

from app.schemas.progress import ChartGeometry, ChartMarker, ChartPoint, WeightEntry


CHART_WIDTH = 800
CHART_HEIGHT = 250
CHART_PADDING = 40
# kg added below the minimum and above the maximum weight
SCALE_PADDING_KG = 2

START_LOGGING_MESSAGE = "Start logging your weight weekly to see your progress graph!"
NO_DATA_MESSAGE = "No data yet. Log your weight to start tracking!"
FIRST_ENTRY_MESSAGE = "First entry logged. Keep going!"


def derive_chart(entries: Sequence[WeightEntry]) -> Optional[ChartGeometry]:
    """
    Map a weight history to plot coordinates.

    Entries are spaced evenly by index, not by date distance. Heavier
    weights sit higher on the canvas (smaller y).

    Args:
        entries: Weight entries in ascending date order.

    Returns:
        Optional[ChartGeometry]: None when there are fewer than 2 entries.
    """
    if len(entries) < 2:
        return None

    weights = [entry.weight for entry in entries]
    min_weight = min(weights) - SCALE_PADDING_KG
    max_weight = max(weights) + SCALE_PADDING_KG
    weight_range = (max_weight - min_weight) or 1

    plot_width = CHART_WIDTH - 2 * CHART_PADDING
    plot_height = CHART_HEIGHT - 2 * CHART_PADDING
    last_index = len(entries) - 1

    markers = []
    for index, entry in enumerate(entries):
        x = CHART_PADDING + (index / last_index) * plot_width
        normalized = (entry.weight - min_weight) / weight_range
        y = CHART_HEIGHT - CHART_PADDING - normalized * plot_height
        markers.append(ChartMarker(x=x, y=y, weight=entry.weight, date=entry.date))

    return ChartGeometry(
        width=CHART_WIDTH,
        height=CHART_HEIGHT,
        padding=CHART_PADDING,
        points=[ChartPoint(x=m.x, y=m.y) for m in markers],
        markers=markers
    )


def describe_placeholder(entries: Sequence[WeightEntry]) -> Optional[str]:
    """
    Text shown instead of the chart for 0 or 1 entries, else None.

    A single entry is shown as its value ("72.4 kg") on one line and the
    encouragement on the next.
    """
    if not entries:
        return NO_DATA_MESSAGE
    if len(entries) == 1:
        return f"{entries[0].weight:g} kg\n{FIRST_ENTRY_MESSAGE}"
    return None


def describe_trend(entries: Sequence[WeightEntry]) -> str:
    """
    Progress message comparing the first and last logged weights.

    This looks at the endpoints only, not a fitted slope.
    """
    if len(entries) < 2:
        return START_LOGGING_MESSAGE

    diff = entries[-1].weight - entries[0].weight
    if diff < 0:
        return f"Great job! You've lost {abs(diff):.1f}kg since starting."
    if diff > 0:
        return f"Gaining mass! You're up {diff:.1f}kg. Ensure it's muscle!"
    return "You are maintaining your weight perfectly."
