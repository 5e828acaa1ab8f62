#!/usr/bin/env python3
"""
Range proof video renderer.

Computes the great-circle distance between a launch site and a target, the
drag-free trajectory of the weapon, and renders the comparison as an animated
chart followed by a held proof panel, encoded into a single video.

Usage:
    # Reference scenario with default settings
    python render_proof_video.py

    # From a YAML config, short preview
    python render_proof_video.py --config configs/bm21_reference.yaml --duration 2 --hold-seconds 1
"""

import argparse
import logging
import sys
import time
from dataclasses import dataclass
from typing import List

import numpy as np

from ballistics import (
    ChartLayout,
    LegendEntry,
    RangeAnalysis,
    ReferenceLine,
    TrajectorySummary,
    analyze_range,
    banner_title,
    build_legend_entries,
    build_proof_lines,
    build_reference_lines,
    compute_chart_layout,
    haversine_distance,
    projectile_trajectory,
    sample_animation,
    sample_dense,
)
from proof_config import RangeProofConfig, load_config
from rendering import (
    AssemblyReport,
    FrameCompositor,
    FrameStore,
    VideoAssembler,
    render_proof_panel,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProofInputs:
    """Everything computed once and shared read-only by all frames."""

    summary: TrajectorySummary
    analysis: RangeAnalysis
    layout: ChartLayout
    dense: np.ndarray
    animation_points: np.ndarray
    reference_lines: List[ReferenceLine]
    legend_entries: List[LegendEntry]
    proof_lines: List[str]


def check_config(config: RangeProofConfig):
    """Log warnings and raise ValueError on any critical issue."""
    issues = config.validate()
    critical = [issue for issue in issues if issue.startswith("CRITICAL")]
    for issue in issues:
        if issue not in critical:
            logger.warning(issue)
    if critical:
        raise ValueError("Invalid configuration:\n  " + "\n  ".join(critical))


def prepare_inputs(config: RangeProofConfig) -> ProofInputs:
    """Physics, sampling, layout and text content for a scenario."""
    scenario = config.scenario

    actual_distance = haversine_distance(scenario.launch, scenario.target)
    summary = projectile_trajectory(scenario.speed, scenario.angle, scenario.gravity)
    analysis = analyze_range(actual_distance, scenario.weapon.max_range_operational)

    dense = sample_dense(
        summary.flight_time,
        scenario.speed,
        scenario.angle,
        scenario.gravity,
        config.trajectory_resolution,
    )
    animation_points = sample_animation(dense, config.total_frames)

    return ProofInputs(
        summary=summary,
        analysis=analysis,
        layout=compute_chart_layout(
            summary, scenario.weapon.max_range_operational, actual_distance
        ),
        dense=dense,
        animation_points=animation_points,
        reference_lines=build_reference_lines(scenario, summary, analysis),
        legend_entries=build_legend_entries(scenario, summary, analysis),
        proof_lines=build_proof_lines(scenario, summary, analysis),
    )


def make_compositor(config: RangeProofConfig, inputs: ProofInputs) -> FrameCompositor:
    return FrameCompositor(
        config.render,
        inputs.dense,
        inputs.animation_points,
        inputs.layout,
        inputs.reference_lines,
        inputs.legend_entries,
    )


def render_animation(config: RangeProofConfig, inputs: ProofInputs, store: FrameStore) -> int:
    """Render every animation frame into the store. Returns the frame count."""
    compositor = make_compositor(config, inputs)
    start = time.time()
    for i in range(compositor.total_frames):
        store.append(compositor.render_frame(i))
        if (i + 1) % max(1, config.render.fps) == 0:
            logger.info(f"  Rendered {i + 1}/{compositor.total_frames} frames")
    if compositor.total_frames:
        logger.info(
            f"Rendered {compositor.total_frames} animation frames in {time.time() - start:.1f}s"
        )
    return compositor.total_frames


def render_proof_frames(config: RangeProofConfig, inputs: ProofInputs, store: FrameStore) -> int:
    """Render the proof panel once and store it ``hold_frames`` times."""
    panel = render_proof_panel(
        inputs.proof_lines,
        banner_title(config.scenario, inputs.analysis),
        config.render.width,
        config.render.height,
    )
    for _ in range(config.hold_frames):
        store.append(panel)
    return config.hold_frames


def run_pipeline(config: RangeProofConfig) -> AssemblyReport:
    """Validate, render all frames, and encode the video."""
    check_config(config)
    render = config.render

    inputs = prepare_inputs(config)
    analysis = inputs.analysis
    logger.info(
        f"Distance {analysis.actual_distance / 1000.0:.3f} km, "
        f"theoretical range {inputs.summary.theoretical_range / 1000.0:.3f} km, "
        f"shortfall {analysis.shortfall / 1000.0:.1f} km "
        f"({'possible' if analysis.is_possible else 'impossible'})"
    )

    store = FrameStore(render.frames_dir)
    store.prepare(clear=render.clear_frames)

    animation_frames = render_animation(config, inputs, store)
    hold_frames = render_proof_frames(config, inputs, store)

    assembler = VideoAssembler(render.output_path, render.fps, (render.width, render.height))
    return assembler.assemble(store, animation_frames, hold_frames)


def main():
    parser = argparse.ArgumentParser(
        description="Render a ballistic range proof video",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Reference scenario
    python render_proof_video.py

    # Custom config, keep frames from earlier runs
    python render_proof_video.py --config my_scenario.yaml --keep-frames
        """,
    )
    parser.add_argument("--config", type=str, help="Config YAML path (default: reference scenario)")
    parser.add_argument("--output", type=str, help="Output video path")
    parser.add_argument("--frames-dir", type=str, help="Directory for intermediate frames")
    parser.add_argument("--fps", type=int, help="Frame rate")
    parser.add_argument("--duration", type=int, help="Animation length (seconds)")
    parser.add_argument("--hold-seconds", type=int, help="How long the proof panel is held")
    parser.add_argument(
        "--keep-frames",
        action="store_true",
        help="Do not clear frames left over from a previous run",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else RangeProofConfig.for_bm21_reference()
        config = config.with_overrides(
            output_path=args.output,
            frames_dir=args.frames_dir,
            fps=args.fps,
            video_duration=args.duration,
            hold_seconds=args.hold_seconds,
            clear_frames=False if args.keep_frames else None,
        )
        report = run_pipeline(config)
    except (OSError, ValueError, RuntimeError) as e:
        logger.error(f"Rendering failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Video saved as: {report.output_path}")


if __name__ == "__main__":
    main()
