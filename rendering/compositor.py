"""
Animated chart frames: trajectory chart on the left, text legend on the right.

Each frame is a pure function of the shared, read-only inputs (dense
trajectory, per-frame marker positions, chart layout, legend entries) and the
frame index. Only the active path, the marker and the ghost trail change
between frames.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

import cv2
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from ballistics.layout import ChartLayout, ReferenceLine
from ballistics.report import LegendEntry
from ballistics.sampler import active_progress, trail_window

LEGEND_BACKGROUND = "#f0f0ff"
LEGEND_MARGIN = 15  # px
LEGEND_BASE_OFFSET = 38  # px from the top of the legend region
LEGEND_LINE_HEIGHT = 30  # px


@dataclass(frozen=True)
class FrameState:
    """Geometry that varies from frame to frame (chart units: km, m)."""

    index: int
    active_path: np.ndarray
    marker: Optional[Tuple[float, float]]
    trail: Optional[np.ndarray]  # None while frame index <= trail length - 1


def _to_chart_units(points: np.ndarray) -> np.ndarray:
    """Meters -> (km, m)."""
    if len(points) == 0:
        return np.empty((0, 2))
    return np.column_stack([points[:, 0] / 1000.0, points[:, 1]])


class FrameCompositor:
    """
    Renders animation frames as BGR rasters.

    Args:
        render: RenderConfig (canvas size, dpi, chart width, title)
        dense: Dense trajectory sample, shape (N, 2), meters
        animation_points: Per-frame marker positions, shape (total_frames, 2)
        layout: Shared chart bounds
        reference_lines: Static vertical reference markers
        legend_entries: Side-panel text, identical in every frame
    """

    def __init__(
        self,
        render,
        dense: np.ndarray,
        animation_points: np.ndarray,
        layout: ChartLayout,
        reference_lines: List[ReferenceLine],
        legend_entries: List[LegendEntry],
    ):
        self.render = render
        self.dense = dense
        self.animation_points = animation_points
        self.layout = layout
        self.reference_lines = list(reference_lines)
        self.legend_entries = list(legend_entries)

        self._dense_km = _to_chart_units(dense)
        self._animation_km = _to_chart_units(animation_points)

        # Axis limits of the most recent render, for stability checks
        self.last_limits: Optional[Tuple[Tuple[float, float], Tuple[float, float]]] = None

    @property
    def total_frames(self) -> int:
        return len(self.animation_points)

    def frame_state(self, index: int) -> FrameState:
        """Active path, marker and ghost trail for one frame."""
        if not 0 <= index < self.total_frames:
            raise IndexError(f"frame index {index} outside [0, {self.total_frames})")

        progress = active_progress(index, self.total_frames, len(self.dense))
        marker = tuple(self._animation_km[index])
        trail = trail_window(self._animation_km, index) if index > 5 else None

        return FrameState(
            index=index,
            active_path=self._dense_km[:progress],
            marker=marker,
            trail=trail,
        )

    def _chart_axes(self, fig):
        """Left region, leaving room for caption and axis labels."""
        w, h = self.render.width, self.render.height
        s = h / 1080.0
        left, bottom = (105 + 60) * s, (90 + 60) * s
        right, top = self.render.chart_width - 60 * s, h - (60 + 80) * s
        return fig.add_axes(
            [left / w, bottom / h, (right - left) / w, (top - bottom) / h]
        )

    def _legend_axes(self, fig):
        w, h = self.render.width, self.render.height
        x0 = self.render.chart_width + LEGEND_MARGIN
        ax = fig.add_axes(
            [
                x0 / w,
                LEGEND_MARGIN / h,
                (w - x0 - LEGEND_MARGIN) / w,
                (h - 2 * LEGEND_MARGIN) / h,
            ]
        )
        ax.set_facecolor(LEGEND_BACKGROUND)
        ax.set_xticks([])
        ax.set_yticks([])
        for spine in ax.spines.values():
            spine.set_visible(False)
        return ax

    def _px_to_pt(self, px: float) -> float:
        return px * 72.0 / self.render.dpi

    def draw_chart(self, ax, state: FrameState):
        """Axes, static series, active path, marker and trail."""
        ax.set_title(
            self.render.title,
            fontsize=self._px_to_pt(60),
            fontweight="bold",
            color="red",
            pad=20,
        )
        ax.set_xlim(0.0, self.layout.x_max_km)
        ax.set_ylim(0.0, self.layout.y_max)
        ax.set_xlabel("Distance (kilometers)", fontsize=self._px_to_pt(42))
        ax.set_ylabel("Height (meters)", fontsize=self._px_to_pt(42))
        ax.tick_params(labelsize=self._px_to_pt(18))
        ax.grid(True, alpha=0.3)

        ax.plot(
            self._dense_km[:, 0],
            self._dense_km[:, 1],
            color="blue",
            alpha=0.3,
            linewidth=2,
            label="Full Trajectory Path",
        )
        ax.plot(
            state.active_path[:, 0],
            state.active_path[:, 1],
            color="blue",
            linewidth=6,
            label="Active Trajectory",
        )

        for line in self.reference_lines:
            (x0, y0), (x1, y1) = line.segment(self.layout)
            ax.plot([x0, x1], [y0, y1], color=line.color, linewidth=line.width, label=line.label)

        if state.marker is not None:
            ax.plot(
                [state.marker[0]],
                [state.marker[1]],
                "o",
                color="red",
                markersize=12,
                label="Rocket Position",
            )
        if state.trail is not None:
            ax.plot(state.trail[:, 0], state.trail[:, 1], color="red", alpha=0.6, linewidth=3)

        ax.legend(
            loc="upper right",
            fontsize=self._px_to_pt(28),
            facecolor="white",
            framealpha=0.8,
            edgecolor="black",
        )

    def draw_legend(self, ax):
        """Static text panel: one left-aligned line per entry."""
        region_width = self.render.width - self.render.chart_width - 2 * LEGEND_MARGIN
        region_height = self.render.height - 2 * LEGEND_MARGIN
        for idx, entry in enumerate(self.legend_entries):
            y_px = LEGEND_BASE_OFFSET + idx * LEGEND_LINE_HEIGHT
            ax.text(
                LEGEND_MARGIN / region_width,
                1.0 - y_px / region_height,
                entry.text,
                transform=ax.transAxes,
                ha="left",
                va="baseline",
                fontsize=self._px_to_pt(entry.rendered_size),
                fontweight="bold" if entry.bold else "normal",
                color=entry.color,
                clip_on=True,
            )

    def render_frame(self, index: int) -> np.ndarray:
        """Render one frame and return it as a (height, width, 3) BGR array."""
        state = self.frame_state(index)
        fig = plt.figure(
            figsize=(self.render.width / self.render.dpi, self.render.height / self.render.dpi),
            dpi=self.render.dpi,
        )
        try:
            fig.set_facecolor("white")
            chart_ax = self._chart_axes(fig)
            self.draw_chart(chart_ax, state)
            self.draw_legend(self._legend_axes(fig))

            self.last_limits = (chart_ax.get_xlim(), chart_ax.get_ylim())

            fig.canvas.draw()
            rgba = np.asarray(fig.canvas.buffer_rgba())
            frame = cv2.cvtColor(rgba, cv2.COLOR_RGBA2BGR)
            size = (self.render.width, self.render.height)
            if (frame.shape[1], frame.shape[0]) != size:
                frame = cv2.resize(frame, size, interpolation=cv2.INTER_AREA)
            return frame
        finally:
            plt.close(fig)
