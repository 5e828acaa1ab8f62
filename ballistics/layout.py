"""
Chart bounds and reference lines shared by every animation frame.

Both are computed once per run. Recomputing them per frame would make the
axes jitter as the active path grows.
"""

from dataclasses import dataclass
from typing import List

MIN_X_EXTENT = 25000.0  # m
MIN_Y_EXTENT = 800.0  # m
REFERENCE_LINE_HEIGHT = 0.8  # fraction of y_max


@dataclass(frozen=True)
class ChartLayout:
    """Axis bounds in meters (the x axis is drawn in kilometers)."""

    x_max: float
    y_max: float

    @property
    def x_max_km(self) -> float:
        return self.x_max / 1000.0


@dataclass(frozen=True)
class ReferenceLine:
    """Vertical marker at a fixed horizontal distance."""

    label: str
    x: float  # m
    color: str
    width: float = 4.0

    def segment(self, layout: ChartLayout):
        """Endpoints in chart units (km, m)."""
        top = layout.y_max * REFERENCE_LINE_HEIGHT
        return [(self.x / 1000.0, 0.0), (self.x / 1000.0, top)]


def compute_chart_layout(summary, operational_range: float, actual_distance: float) -> ChartLayout:
    """
    Axis bounds from the theoretical range, the operational range and the
    target distance, with fixed margins.
    """
    theoretical = summary.theoretical_range
    max_distance = max(actual_distance, theoretical, operational_range)

    if theoretical < max_distance:
        x_max = max(theoretical * 2.5, MIN_X_EXTENT)
    else:
        x_max = max(max_distance * 1.1, MIN_X_EXTENT)
    y_max = max(summary.max_height * 1.5, MIN_Y_EXTENT)

    return ChartLayout(x_max=x_max, y_max=y_max)


def build_reference_lines(scenario, summary, analysis) -> List[ReferenceLine]:
    """Operational range, computed theoretical range and target distance."""
    weapon = scenario.weapon
    return [
        ReferenceLine(
            label=f"{weapon.name} Max Range ({weapon.max_range_operational / 1000.0:.0f}km)",
            x=weapon.max_range_operational,
            color="green",
        ),
        ReferenceLine(
            label=f"Theoretical Range ({summary.theoretical_range / 1000.0:.1f}km)",
            x=summary.theoretical_range,
            color="orange",
            width=3.0,
        ),
        ReferenceLine(
            label=scenario.target_label,
            x=analysis.actual_distance,
            color="red",
        ),
    ]
