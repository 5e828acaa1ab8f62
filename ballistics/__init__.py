"""
Ballistics Module

Physics, trajectory sampling and the shared chart/report content used by
the range proof renderer.

Example usage:
    from ballistics import haversine_distance, projectile_trajectory, sample_dense

    summary = projectile_trajectory(690.0, 45.0, 9.81)
    dense = sample_dense(summary.flight_time, 690.0, 45.0, 9.81, resolution=450)
"""

from .physics import (
    EARTH_RADIUS,
    RangeAnalysis,
    TrajectorySummary,
    analyze_range,
    haversine_distance,
    projectile_trajectory,
)
from .sampler import (
    TRAIL_LENGTH,
    active_progress,
    animation_indices,
    sample_animation,
    sample_dense,
    trail_window,
)
from .layout import ChartLayout, ReferenceLine, build_reference_lines, compute_chart_layout
from .report import (
    LegendEntry,
    banner_title,
    build_legend_entries,
    build_proof_lines,
    verdict_lines,
)

__all__ = [
    "EARTH_RADIUS",
    "RangeAnalysis",
    "TrajectorySummary",
    "analyze_range",
    "haversine_distance",
    "projectile_trajectory",
    "TRAIL_LENGTH",
    "active_progress",
    "animation_indices",
    "sample_animation",
    "sample_dense",
    "trail_window",
    "ChartLayout",
    "ReferenceLine",
    "build_reference_lines",
    "compute_chart_layout",
    "LegendEntry",
    "banner_title",
    "build_legend_entries",
    "build_proof_lines",
    "verdict_lines",
]
