"""
Rendering Module

Turns the precomputed trajectory, layout and report content into raster
frames and assembles them into a video.

Example usage:
    from rendering import FrameCompositor, FrameStore, VideoAssembler, render_proof_panel

    store = FrameStore("frames")
    store.prepare(clear=True)
    for i in range(compositor.total_frames):
        store.append(compositor.render_frame(i))
"""

from .compositor import FrameCompositor, FrameState
from .frame_store import FrameStore, FrameStoreError
from .proof_panel import LineStyle, STYLE_RULES, render_proof_panel, split_columns, style_for
from .video import AssemblyReport, VideoAssembler, VideoAssemblyError, open_video_writer

__all__ = [
    "FrameCompositor",
    "FrameState",
    "FrameStore",
    "FrameStoreError",
    "LineStyle",
    "STYLE_RULES",
    "render_proof_panel",
    "split_columns",
    "style_for",
    "AssemblyReport",
    "VideoAssembler",
    "VideoAssemblyError",
    "open_video_writer",
]
