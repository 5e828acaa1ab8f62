"""
Tests for ballistics.physics - great-circle distance, projectile summary and
range analysis.
"""
import math

import pytest


def _haversine_asin(lat1, lon1, lat2, lon2):
    """Independent evaluation using the arcsin form of the haversine."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlam = math.radians(lon2 - lon1)
    h = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlam / 2) ** 2
    return 2 * 6371000.0 * math.asin(math.sqrt(h))


class TestHaversineDistance:
    """Tests for haversine_distance()."""

    def test_coincident_points(self):
        from ballistics import haversine_distance
        from proof_config import GeoPoint

        p = GeoPoint(14.3559, 103.2586)
        assert haversine_distance(p, p) == 0.0

    @pytest.mark.parametrize(
        "a,b",
        [
            ((14.3559, 103.2586), (15.1198505, 104.3200196)),
            ((0.0, 0.0), (0.0, 90.0)),
            ((-33.9, 151.2), (51.5, -0.1)),
            ((89.9, 10.0), (-89.9, -170.0)),
        ],
    )
    def test_symmetric(self, a, b):
        """distance(A, B) == distance(B, A)."""
        from ballistics import haversine_distance
        from proof_config import GeoPoint

        pa, pb = GeoPoint(*a), GeoPoint(*b)
        assert haversine_distance(pa, pb) == pytest.approx(haversine_distance(pb, pa), rel=1e-12)

    def test_reference_coordinates(self, reference_config):
        """Reference points are about 142.3 km apart, far beyond 15 km."""
        from ballistics import haversine_distance

        scenario = reference_config.scenario
        d = haversine_distance(scenario.launch, scenario.target)

        expected = _haversine_asin(14.3559, 103.2586, 15.1198505, 104.3200196)
        assert d == pytest.approx(expected, rel=1e-9)
        assert d == pytest.approx(142281.68, rel=1e-6)
        assert d > scenario.weapon.max_range_operational

    def test_quarter_meridian(self):
        """Equator to pole is a quarter of the circumference."""
        from ballistics import EARTH_RADIUS, haversine_distance
        from proof_config import GeoPoint

        d = haversine_distance(GeoPoint(0.0, 0.0), GeoPoint(90.0, 0.0))
        assert d == pytest.approx(math.pi * EARTH_RADIUS / 2, rel=1e-12)

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_rejected(self, bad):
        from ballistics import haversine_distance
        from proof_config import GeoPoint

        with pytest.raises(ValueError, match="finite"):
            haversine_distance(GeoPoint(bad, 0.0), GeoPoint(1.0, 1.0))


class TestProjectileTrajectory:
    """Tests for projectile_trajectory()."""

    def test_reference_values(self):
        """690 m/s at 45 degrees."""
        from ballistics import projectile_trajectory

        summary = projectile_trajectory(690.0, 45.0, 9.81)

        assert summary.flight_time == pytest.approx(99.4707, rel=1e-5)
        assert summary.theoretical_range == pytest.approx(48532.11, rel=1e-6)
        assert summary.max_height == pytest.approx(12133.03, rel=1e-6)

    def test_range_consistent_with_flight_time(self):
        """Range equals horizontal speed times flight time."""
        from ballistics import projectile_trajectory

        summary = projectile_trajectory(300.0, 30.0, 9.81)
        vx = 300.0 * math.cos(math.radians(30.0))

        assert summary.theoretical_range == pytest.approx(vx * summary.flight_time, rel=1e-12)

    @pytest.mark.parametrize(
        "speed,angle,g",
        [(0.0, 45.0, 9.81), (-1.0, 45.0, 9.81), (100.0, 0.0, 9.81), (100.0, 90.0, 9.81), (100.0, 45.0, 0.0)],
    )
    def test_invalid_domain(self, speed, angle, g):
        from ballistics import projectile_trajectory

        with pytest.raises(ValueError):
            projectile_trajectory(speed, angle, g)


class TestAnalyzeRange:
    """Tests for analyze_range()."""

    def test_out_of_range(self):
        from ballistics import analyze_range

        analysis = analyze_range(142281.68, 15000.0)

        assert analysis.shortfall == pytest.approx(127281.68)
        assert analysis.multiplier == pytest.approx(9.4854, rel=1e-4)
        assert analysis.violation_pct == pytest.approx(848.54, rel=1e-4)
        assert not analysis.is_possible

    def test_zero_distance_is_possible(self):
        from ballistics import analyze_range

        analysis = analyze_range(0.0, 15000.0)

        assert analysis.shortfall == -15000.0
        assert analysis.is_possible

    def test_exactly_at_range_is_possible(self):
        from ballistics import analyze_range

        assert analyze_range(15000.0, 15000.0).is_possible

    def test_operational_range_must_be_positive(self):
        from ballistics import analyze_range

        with pytest.raises(ValueError):
            analyze_range(1000.0, 0.0)
