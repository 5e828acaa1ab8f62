"""
Trajectory discretization for the animation.

The dense sample drives the drawn paths; the coarse per-frame sample drives
the marker and its ghost trail. Frames pick dense points by a nearest-below
index mapping, never by interpolation, so every marker position is a member
of the dense sequence.
"""

import math

import numpy as np

from .physics import check_launch_domain

TRAIL_LENGTH = 6


def sample_dense(
    flight_time: float, speed: float, angle_deg: float, g: float, resolution: int
) -> np.ndarray:
    """
    Sample the trajectory uniformly in time from 0 to flight_time inclusive.

    Args:
        flight_time: Total flight time (s)
        speed: Initial speed (m/s)
        angle_deg: Launch angle (degrees)
        g: Gravitational acceleration (m/s^2)
        resolution: Number of samples

    Returns:
        Read-only array of shape (resolution, 2): horizontal distance and
        height in meters. Heights are clamped to >= 0.
    """
    check_launch_domain(speed, angle_deg, g)
    if resolution < 0:
        raise ValueError(f"resolution must be >= 0, got {resolution}")

    theta = math.radians(angle_deg)
    if resolution > 1:
        t = flight_time * np.arange(resolution) / (resolution - 1)
    else:
        t = np.zeros(resolution)

    x = speed * math.cos(theta) * t
    y = np.maximum(speed * math.sin(theta) * t - 0.5 * g * t ** 2, 0.0)

    points = np.column_stack([x, y]) if resolution else np.empty((0, 2))
    points.setflags(write=False)
    return points


def animation_indices(dense_length: int, total_frames: int) -> np.ndarray:
    """Dense-sequence index used by each animation frame."""
    if total_frames <= 0 or dense_length <= 0:
        return np.empty(0, dtype=int)
    frames = np.arange(total_frames)
    return np.minimum(frames * dense_length // total_frames, dense_length - 1)


def sample_animation(dense: np.ndarray, total_frames: int) -> np.ndarray:
    """
    Pick one dense point per animation frame.

    Frame ``i`` uses ``dense[min(i * len(dense) // total_frames, len(dense) - 1)]``.
    Trailing frames may repeat the final dense point.
    """
    indices = animation_indices(len(dense), total_frames)
    points = dense[indices] if len(indices) else np.empty((0, 2))
    points.setflags(write=False)
    return points


def active_progress(frame_index: int, total_frames: int, dense_length: int) -> int:
    """
    Length of the dense prefix drawn as the active path at a frame:
    floor((frame_index + 1) / total_frames * dense_length), in integer math.
    """
    progress = (frame_index + 1) * dense_length // total_frames
    return min(progress, dense_length)


def trail_window(points: np.ndarray, frame_index: int, length: int = TRAIL_LENGTH) -> np.ndarray:
    """Marker positions ``frame_index - length + 1 ..= frame_index``."""
    start = max(0, frame_index - length + 1)
    return points[start:frame_index + 1]
