"""
Pytest fixtures for range proof tests.
"""
import pytest
import tempfile
from dataclasses import replace

import matplotlib

matplotlib.use("Agg")


@pytest.fixture
def reference_config():
    """The reference BM-21 scenario at full resolution."""
    from proof_config import RangeProofConfig

    return RangeProofConfig.for_bm21_reference()


@pytest.fixture
def small_config(tmp_path, reference_config):
    """Reference scenario on a small, short canvas writing into tmp_path."""
    render = replace(
        reference_config.render,
        width=640,
        height=360,
        chart_width=448,
        fps=4,
        video_duration=3,
        hold_seconds=1,
        frames_dir=str(tmp_path / "frames"),
        output_path=str(tmp_path / "proof.mp4"),
    )
    return replace(reference_config, render=render)


@pytest.fixture
def reference_inputs(reference_config):
    """Shared physics, samples and text for the reference scenario."""
    from render_proof_video import prepare_inputs

    return prepare_inputs(reference_config)


@pytest.fixture
def small_inputs(small_config):
    from render_proof_video import prepare_inputs

    return prepare_inputs(small_config)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir
