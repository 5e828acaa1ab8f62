"""
Text content for the legend panel and the proof panel.

Both are built once from the scenario and its analysis; the renderers only
lay them out.
"""

from dataclasses import dataclass
from typing import List

from .physics import EARTH_RADIUS

BOLD_SCALE = 1.5


@dataclass(frozen=True)
class LegendEntry:
    """One line of the side panel. ``size`` is the nominal pixel height."""

    text: str
    size: float
    color: str
    bold: bool = False

    @property
    def rendered_size(self) -> float:
        """Pixel height actually drawn (bold lines are enlarged)."""
        return self.size * BOLD_SCALE if self.bold else self.size


def verdict_lines(analysis) -> List[str]:
    """Verdict block shared by the proof panel and the console summary."""
    if analysis.is_possible:
        return [
            "[POSSIBLE] CLAIM STATUS: THEORETICALLY POSSIBLE",
            "[COMPLETE] SCIENTIFIC PROOF: COMPLETE",
            "[CONCLUSION] ATTACK WITHIN THEORETICAL RANGE",
        ]
    return [
        "[IMPOSSIBLE] CLAIM STATUS: PHYSICALLY IMPOSSIBLE",
        "[COMPLETE] SCIENTIFIC PROOF: COMPLETE",
        "[CONCLUSION] ATTACK IMPOSSIBLE FROM THIS DISTANCE",
    ]


def build_legend_entries(scenario, summary, analysis) -> List[LegendEntry]:
    """Side-panel lines for the animated frames."""
    weapon = scenario.weapon
    launch, target = scenario.launch, scenario.target
    distance_km = analysis.actual_distance / 1000.0
    shortfall_km = analysis.shortfall / 1000.0
    operational_km = weapon.max_range_operational / 1000.0
    v0 = scenario.speed

    if analysis.is_possible:
        reach = LegendEntry(f"Target within range ({analysis.multiplier:.1f}×)", 18, "green", True)
        factor = LegendEntry(f"Range Factor = {analysis.multiplier:.1f}× (reachable)", 20, "green", True)
    else:
        reach = LegendEntry(f"Target {analysis.multiplier:.1f}× TOO FAR!", 18, "magenta", True)
        factor = LegendEntry(f"Impossibility Factor = {analysis.multiplier:.1f}× TOO FAR", 20, "red", True)

    header = f"{launch.name}-{target.name} {weapon.name} ANALYSIS".upper()

    return [
        LegendEntry(header, 14, "black", True),
        LegendEntry(f"Max Range: {operational_km:.0f}km", 18, "blue"),
        LegendEntry(f"Distance: {distance_km:.1f}km", 18, "black"),
        LegendEntry(f"Shortfall: {shortfall_km:.1f}km", 18, "red"),
        reach,
        LegendEntry(f"Physics violation: {analysis.violation_pct:.0f}%", 18, "red"),
        LegendEntry("WHY MAX RANGE ≠ ACTUAL DISTANCE:", 14, "black", True),
        LegendEntry(
            f"• {weapon.name} max range: {operational_km:.0f}km (ballistic limit)", 18, "blue"
        ),
        LegendEntry(f"• Required distance: {distance_km:.1f}km (GPS measured)", 18, "blue"),
        LegendEntry("• Physics: Projectiles follow parabolic paths", 18, "blue"),
        LegendEntry("• Earth curvature & air resistance ignored", 18, "blue"),
        LegendEntry(f"• Gap: {shortfall_km:.1f}km cannot be bridged by any rocket", 18, "red"),
        LegendEntry("MATHEMATICAL CALCULATIONS:", 14, "black", True),
        LegendEntry("#" * 46, 18, "black"),
        LegendEntry("1) Haversine Distance Formula:", 14, "blue", True),
        LegendEntry("d = 2R · arcsin(√(sin²(Δφ/2) + cos(φ₁)cos(φ₂)sin²(Δλ/2)))", 18, "blue"),
        LegendEntry(
            f"Given: φ₁={launch.latitude:.4f}°, λ₁={launch.longitude:.4f}°, "
            f"φ₂={target.latitude:.7f}°, λ₂={target.longitude:.7f}°",
            18,
            "blue",
        ),
        LegendEntry(
            f"Δφ = {target.latitude - launch.latitude:.4f}°, "
            f"Δλ = {target.longitude - launch.longitude:.4f}°, "
            f"R = {EARTH_RADIUS / 1000.0:,.0f}km",
            18,
            "blue",
        ),
        LegendEntry(f"∴ d = {distance_km:.1f}km (GPS verified)", 14, "blue", True),
        LegendEntry("2) Projectile Range Formula:", 14, "blue", True),
        LegendEntry("R = (v₀² · sin(2θ)) / g", 18, "blue"),
        LegendEntry("CONSTANT DEFINITIONS:", 14, "black", True),
        LegendEntry(f"• v₀ = {v0:.0f} m/s (Initial muzzle velocity)", 18, "blue"),
        LegendEntry(f"• θ = {scenario.angle:.0f}° (Launch angle)", 18, "blue"),
        LegendEntry(f"• g = {scenario.gravity} m/s² (Gravitational acceleration)", 18, "blue"),
        LegendEntry("• R = 6,371 km (Earth's mean radius for Haversine)", 18, "blue"),
        LegendEntry("Then:", 14, "black", True),
        LegendEntry(
            f"R = ({v0:.0f}² · sin({2 * scenario.angle:.0f}°)) / {scenario.gravity}", 18, "blue"
        ),
        LegendEntry(f"R = {summary.theoretical_range / 1000.0:.1f}km", 18, "blue"),
        LegendEntry("3) Impossibility Analysis:", 14, "red", True),
        LegendEntry(
            f"Required Distance / Max Range = {distance_km:.1f}km / {operational_km:.0f}km",
            18,
            "red",
        ),
        factor,
    ]


def build_proof_lines(scenario, summary, analysis) -> List[str]:
    """Lines of the static proof panel, in reading order."""
    weapon = scenario.weapon
    launch, target = scenario.launch, scenario.target
    distance_km = analysis.actual_distance / 1000.0
    shortfall_km = analysis.shortfall / 1000.0
    operational_km = weapon.max_range_operational / 1000.0

    if analysis.is_possible:
        closing = [
            "The laws of physics, published specifications, and",
            "precise geographic measurements show that the target",
            f"lies within the {weapon.name}'s theoretical reach.",
        ]
    else:
        closing = [
            "The laws of physics, verified military specifications, and",
            "precise geographic measurements DEFINITIVELY PROVE that",
            f"{launch.name}'s {weapon.name} rockets CANNOT reach {target.name}.",
        ]

    return [
        f"ANALYSIS: {weapon.name} from {launch.name.upper()} vs {target.name.upper()} ATTACK CLAIM",
        "=" * 64,
        "",
        f"OFFICIAL {weapon.name} ROCKET SPECIFICATIONS:",
        f"* Rocket Caliber: {weapon.caliber_mm:.0f}mm",
        f"* Total Rocket Mass: {weapon.rocket_mass:.1f} kg",
        f"* Warhead Mass: {weapon.warhead_mass:.1f} kg HE-FRAG",
        f"* Rocket Length: {weapon.rocket_length:.2f} meters",
        f"* Maximum Range (45 deg optimal): {weapon.max_range_45deg / 1000.0:.0f} km",
        f"* Operational Range (typical): {operational_km:.0f} km",
        "",
        "GEOGRAPHIC DISTANCE VERIFICATION:",
        f"* Launch Coordinates: {launch.latitude:.6f}N, {launch.longitude:.6f}E ({launch.name})",
        f"* Target Coordinates: {target.latitude:.6f}N, {target.longitude:.6f}E ({target.name})",
        f"* Haversine Distance: {distance_km:.3f} km",
        "* GPS Verification: CONFIRMED",
        "",
        "BALLISTIC PHYSICS CALCULATIONS:",
        "* Theoretical Max Range Formula: R = (v0^2 x sin(2*theta)) / g",
        f"* Initial Velocity: {scenario.speed:.1f} m/s",
        f"* Launch Angle: {scenario.angle:.0f} degrees",
        f"* Calculated Range: {summary.theoretical_range / 1000.0:.3f} km",
        f"* Flight Time: {summary.flight_time:.1f} seconds",
        f"* Maximum Height: {summary.max_height:.0f} meters",
        "",
        "RANGE ANALYSIS - MATHEMATICAL EVIDENCE:",
        f"* Required Distance: {distance_km:.1f} km",
        f"* Maximum {weapon.name} Range: {operational_km:.0f} km",
        f"* Range Deficit: {shortfall_km:.1f} km",
        f"* Range Factor: {analysis.multiplier:.1f}x the maximum range",
        f"* Physics Violation: {analysis.violation_pct:.0f}% beyond maximum capability",
        "",
        "EXPERT CONCLUSIONS:",
        f"[VERIFIED] {weapon.name} specifications checked against published data",
        "[VERIFIED] Geographic coordinates checked via satellite data",
        "[VERIFIED] Physics calculations follow standard ballistic equations",
        f"[VERIFIED] Range deficit: {shortfall_km:.1f} km beyond rocket capability",
        "",
        "FINAL VERDICT:",
        *verdict_lines(analysis),
        "",
        *closing,
    ]


def banner_title(scenario, analysis) -> str:
    """Title drawn in the proof panel's banner."""
    weapon = scenario.weapon
    launch, target = scenario.launch.name.upper(), scenario.target.name.upper()
    if analysis.is_possible:
        return f"RANGE PROOF: {launch} {weapon.name} CAN REACH {target}"
    return f"IMPOSSIBILITY PROOF: {launch} {weapon.name} CANNOT ATTACK {target}"
