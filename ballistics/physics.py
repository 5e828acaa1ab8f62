"""
Closed-form ballistic and geodesic helpers.

Everything here is a pure function of its arguments: great-circle distance
on a spherical Earth, the drag-free projectile summary, and the comparison of
a required distance against a weapon's operational range.
"""

import math
from dataclasses import dataclass

EARTH_RADIUS = 6371000.0  # m, mean Earth radius


@dataclass(frozen=True)
class TrajectorySummary:
    """Drag-free projectile results."""

    flight_time: float  # s
    max_height: float  # m
    theoretical_range: float  # m


@dataclass(frozen=True)
class RangeAnalysis:
    """Required distance compared with the weapon's operational range."""

    actual_distance: float  # m
    operational_range: float  # m
    shortfall: float  # m, positive when the target is out of reach
    multiplier: float  # actual / operational
    violation_pct: float  # shortfall as a percentage of operational range

    @property
    def is_possible(self) -> bool:
        return self.shortfall <= 0.0


def haversine_distance(point_a, point_b) -> float:
    """
    Great-circle distance between two points (anything with ``latitude`` and
    ``longitude`` attributes, in degrees).

    Returns:
        Surface distance in meters

    Raises:
        ValueError: If any coordinate is NaN or infinite
    """
    lat1, lon1 = point_a.latitude, point_a.longitude
    lat2, lon2 = point_b.latitude, point_b.longitude
    if not all(math.isfinite(v) for v in (lat1, lon1, lat2, lon2)):
        raise ValueError(
            f"Coordinates must be finite, got ({lat1}, {lon1}) -> ({lat2}, {lon2})"
        )

    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2.0) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2.0) ** 2
    )
    c = 2.0 * math.atan2(math.sqrt(a), math.sqrt(1.0 - a))

    return EARTH_RADIUS * c


def check_launch_domain(speed: float, angle_deg: float, g: float):
    """Raise ValueError unless speed > 0, g > 0 and angle is inside (0, 90)."""
    if not (speed > 0):
        raise ValueError(f"speed must be > 0, got {speed}")
    if not (0.0 < angle_deg < 90.0):
        raise ValueError(f"angle must be inside (0, 90) degrees, got {angle_deg}")
    if not (g > 0):
        raise ValueError(f"gravity must be > 0, got {g}")


def projectile_trajectory(speed: float, angle_deg: float, g: float) -> TrajectorySummary:
    """
    Flight time, apex height and range of a drag-free projectile launched
    from ground level.

    Args:
        speed: Initial speed (m/s)
        angle_deg: Launch angle above horizontal (degrees)
        g: Gravitational acceleration (m/s^2)
    """
    check_launch_domain(speed, angle_deg, g)
    theta = math.radians(angle_deg)

    flight_time = 2.0 * speed * math.sin(theta) / g
    theoretical_range = speed ** 2 * math.sin(2.0 * theta) / g
    max_height = speed ** 2 * math.sin(theta) ** 2 / (2.0 * g)

    return TrajectorySummary(
        flight_time=flight_time,
        max_height=max_height,
        theoretical_range=theoretical_range,
    )


def analyze_range(actual_distance: float, operational_range: float) -> RangeAnalysis:
    """Compare the required distance with the operational range."""
    if not (operational_range > 0):
        raise ValueError(f"operational_range must be > 0, got {operational_range}")

    shortfall = actual_distance - operational_range
    return RangeAnalysis(
        actual_distance=actual_distance,
        operational_range=operational_range,
        shortfall=shortfall,
        multiplier=actual_distance / operational_range,
        violation_pct=shortfall / operational_range * 100.0,
    )
