"""
DesiFit API - Progress Tracker Schemas.

Pydantic schemas for weight logging, chart geometry and progress insight.
"""

import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, ConfigDict, computed_field


class WeightEntry(BaseModel):
    """
    One body-weight sample.

    Attributes:
        date: Calendar day, serialized as YYYY-MM-DD.
        weight: Weight in kg.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {"date": "2025-01-15", "weight": 72.5}
        }
    )

    date: datetime.date
    weight: float = Field(..., gt=0, allow_inf_nan=False, description="Weight in kg")


class WeightLogRequest(BaseModel):
    """
    Schema for logging a weight.

    Range checks happen in the weight log, where out-of-range values are
    dropped without an error.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"weight": 72.5}
        }
    )

    weight: float = Field(..., description="Weight in kg")
    date: Optional[datetime.date] = Field(None, description="Defaults to today (server local time)")


class ChartPoint(BaseModel):
    """Vertex of the progress line, in logical canvas units."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class ChartMarker(ChartPoint):
    """Hoverable point marker with its tooltip data."""

    weight: float
    date: datetime.date

    @computed_field
    @property
    def label(self) -> str:
        """Month-day tooltip label, e.g. '01-15'."""
        return self.date.isoformat()[5:]


class ChartGeometry(BaseModel):
    """
    Plot coordinates for the weight progress chart.

    Attributes:
        width: Logical canvas width.
        height: Logical canvas height.
        padding: Inset margin on all sides.
        points: Line vertices in date order.
        markers: One marker per entry.
    """

    model_config = ConfigDict(frozen=True)

    width: float
    height: float
    padding: float
    points: List[ChartPoint]
    markers: List[ChartMarker]

    @computed_field
    @property
    def polyline(self) -> str:
        """Vertices as an SVG ``points`` attribute: 'x,y x,y ...'."""
        return " ".join(f"{p.x:g},{p.y:g}" for p in self.points)

    @computed_field
    @property
    def area(self) -> str:
        """Polygon closing the line down to the canvas bottom edge."""
        left = f"{self.padding:g},{self.height:g}"
        right = f"{self.width - self.padding:g},{self.height:g}"
        return f"{left} {self.polyline} {right}"


class ProgressResponse(BaseModel):
    """Weight log state with everything the tracker widget renders."""

    entries: List[WeightEntry]
    chart: Optional[ChartGeometry] = None
    insight: str
    placeholder: Optional[str] = None


class WeightLogResponse(ProgressResponse):
    accepted: bool


class WeightDeleteResponse(ProgressResponse):
    deleted: bool
