#!/usr/bin/env python3
"""
Range Proof Configuration System

This module parametrizes the scenario (launch site, target, weapon, ballistic
inputs) and the rendering settings (canvas, frame rate, output paths), so the
whole pipeline can be driven from a YAML file instead of magic numbers.

Usage:
    from proof_config import RangeProofConfig, load_config

    # Load from YAML file
    config = load_config("configs/bm21_reference.yaml")

    # Or create programmatically
    config = RangeProofConfig.for_bm21_reference()
"""

import math
from dataclasses import dataclass, field, asdict, replace
from pathlib import Path
from typing import Any, Dict, List

import yaml


@dataclass(frozen=True)
class GeoPoint:
    """A named geographic point (degrees)."""

    latitude: float
    longitude: float
    name: str = ""

    def is_finite(self) -> bool:
        return math.isfinite(self.latitude) and math.isfinite(self.longitude)


@dataclass(frozen=True)
class WeaponSpecs:
    """Published spec sheet of the weapon under analysis."""

    name: str = "BM-21"
    caliber_mm: float = 122.0
    rocket_mass: float = 66.0  # kg
    warhead_mass: float = 18.4  # kg HE-FRAG
    rocket_length: float = 2.87  # m
    max_range_45deg: float = 20000.0  # m
    max_range_operational: float = 15000.0  # m - threshold the verdict uses


@dataclass(frozen=True)
class ScenarioConfig:
    """
    Scenario parameters, fixed for the whole run.

    The launch angle must lie strictly inside (0, 90) degrees, and speed and
    gravity must be positive. See RangeProofConfig.validate().
    """

    launch: GeoPoint = field(
        default_factory=lambda: GeoPoint(14.3559, 103.2586, "Cambodia")
    )
    target: GeoPoint = field(
        default_factory=lambda: GeoPoint(15.1198505, 104.3200196, "Thailand")
    )
    target_label: str = "PTT Gas station in Thailand"
    weapon: WeaponSpecs = field(default_factory=WeaponSpecs)

    # Ballistics
    speed: float = 690.0  # m/s muzzle velocity
    angle: float = 45.0  # degrees
    gravity: float = 9.81  # m/s^2


@dataclass(frozen=True)
class RenderConfig:
    """Canvas, timing and output settings."""

    width: int = 1920
    height: int = 1080
    dpi: int = 100
    chart_width: int = 1350  # pixels given to the chart, rest is the legend

    fps: int = 15
    video_duration: int = 15  # seconds of animation
    hold_seconds: int = 3  # seconds the proof panel stays on screen

    frames_dir: str = "frames"
    output_path: str = "bm21_impossibility_proof.mp4"
    clear_frames: bool = True  # remove stale frames from previous runs

    title: str = "BM-21 CAMBODIA-THAILAND: Range Analysis"


@dataclass(frozen=True)
class RangeProofConfig:
    """Complete pipeline configuration"""

    scenario: ScenarioConfig = field(default_factory=ScenarioConfig)
    render: RenderConfig = field(default_factory=RenderConfig)

    @property
    def total_frames(self) -> int:
        """Number of animated chart frames."""
        return self.render.fps * self.render.video_duration

    @property
    def hold_frames(self) -> int:
        """Number of repeated proof-panel frames."""
        return self.render.fps * self.render.hold_seconds

    @property
    def trajectory_resolution(self) -> int:
        """Dense trajectory sample count (twice the animation frame count)."""
        return self.total_frames * 2

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return asdict(self)

    def save(self, path: str):
        """Save configuration to YAML file"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    @classmethod
    def load(cls, path: str) -> "RangeProofConfig":
        """Load configuration from YAML file"""
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}

        return cls(
            scenario=cls._load_scenario(data.get("scenario", {})),
            render=RenderConfig(**data.get("render", {})),
        )

    @classmethod
    def _load_scenario(cls, scenario_data: Dict[str, Any]) -> ScenarioConfig:
        """Build a ScenarioConfig, converting nested mappings to dataclasses."""
        scenario_data = dict(scenario_data)  # Copy to avoid mutation

        for key in ("launch", "target"):
            if key in scenario_data:
                scenario_data[key] = GeoPoint(**scenario_data[key])
        if "weapon" in scenario_data:
            scenario_data["weapon"] = WeaponSpecs(**scenario_data["weapon"])

        return ScenarioConfig(**scenario_data)

    @classmethod
    def for_bm21_reference(cls) -> "RangeProofConfig":
        """
        Reference scenario: BM-21 Grad launched from Cambodia at a target in
        Thailand, 690 m/s at the 45 degree optimal angle.
        """
        return cls(scenario=ScenarioConfig(), render=RenderConfig())

    def with_overrides(self, **render_overrides) -> "RangeProofConfig":
        """Return a copy with some render settings replaced."""
        overrides = {k: v for k, v in render_overrides.items() if v is not None}
        return replace(self, render=replace(self.render, **overrides))

    def validate(self) -> List[str]:
        """Validate configuration and return list of warnings/errors"""
        issues = []
        scenario = self.scenario
        render = self.render

        for label, point in (("launch", scenario.launch), ("target", scenario.target)):
            if not point.is_finite():
                issues.append(f"CRITICAL: scenario.{label} coordinates must be finite")
            elif not -90.0 <= point.latitude <= 90.0:
                issues.append(
                    f"CRITICAL: scenario.{label}.latitude={point.latitude} outside [-90, 90]"
                )

        if not (scenario.speed > 0):
            issues.append(f"CRITICAL: scenario.speed={scenario.speed} must be > 0")
        if not (0.0 < scenario.angle < 90.0):
            issues.append(
                f"CRITICAL: scenario.angle={scenario.angle} must be inside (0, 90) degrees"
            )
        if not (scenario.gravity > 0):
            issues.append(f"CRITICAL: scenario.gravity={scenario.gravity} must be > 0")
        if not (scenario.weapon.max_range_operational > 0):
            issues.append("CRITICAL: weapon.max_range_operational must be > 0")

        if render.width <= 0 or render.height <= 0:
            issues.append(
                f"CRITICAL: render size {render.width}x{render.height} must be positive"
            )
        if not (0 < render.chart_width < render.width):
            issues.append(
                f"CRITICAL: render.chart_width={render.chart_width} must be inside "
                f"(0, {render.width})"
            )
        if render.fps <= 0:
            issues.append(f"CRITICAL: render.fps={render.fps} must be > 0")
        if render.video_duration < 0 or render.hold_seconds < 0:
            issues.append("CRITICAL: render durations must not be negative")

        if self.total_frames + self.hold_frames == 0:
            issues.append("WARNING: configuration produces an empty video")
        if render.chart_width < 0.5 * render.width:
            issues.append(
                f"WARNING: chart_width={render.chart_width} leaves the chart "
                f"narrower than the legend panel"
            )

        return issues


def load_config(path: str) -> RangeProofConfig:
    """Convenience function to load configuration"""
    return RangeProofConfig.load(path)


def create_default_configs():
    """Create default configuration files for the reference scenario"""

    configs_dir = Path("configs")
    configs_dir.mkdir(exist_ok=True)

    config = RangeProofConfig.for_bm21_reference()
    config.save(configs_dir / "bm21_reference.yaml")

    # Short preview
    preview = replace(
        config,
        render=replace(
            config.render,
            video_duration=2,
            hold_seconds=1,
            output_path="bm21_preview.mp4",
            frames_dir="frames_preview",
        ),
    )
    preview.save(configs_dir / "preview.yaml")

    print(f"Created configuration files in {configs_dir}/")


if __name__ == "__main__":
    create_default_configs()

    config = RangeProofConfig.for_bm21_reference()
    issues = config.validate()

    print("\nConfiguration validation:")
    if issues:
        for issue in issues:
            print(f"  {issue}")
    else:
        print("  All checks passed")
