"""
Frame sequence -> video file.

Frames are read back strictly by ascending number: first the animation
frames, then the held proof-panel frames. Frames that fail to decode are
skipped and counted rather than aborting the run.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, Tuple

import cv2

logger = logging.getLogger(__name__)

DEFAULT_CODECS = ("mp4v", "avc1", "MJPG")


class VideoAssemblyError(RuntimeError):
    """The output stream could not be opened."""


@dataclass(frozen=True)
class AssemblyReport:
    output_path: Path
    written: int
    skipped: int

    @property
    def expected(self) -> int:
        return self.written + self.skipped


def open_video_writer(
    path: Path, fps: float, frame_size: Tuple[int, int], codecs: Sequence[str] = DEFAULT_CODECS
) -> cv2.VideoWriter:
    """Open a video writer, trying codecs in order of preference.

    Args:
        path: Output video file path
        fps: Frames per second
        frame_size: (width, height)
        codecs: FourCC codes to try

    Returns:
        Opened VideoWriter

    Raises:
        VideoAssemblyError: If no codec works
    """
    for codec_name in codecs:
        fourcc = cv2.VideoWriter_fourcc(*codec_name)
        writer = cv2.VideoWriter(str(path), fourcc, float(fps), frame_size, True)

        if writer.isOpened():
            logger.info(f"Video writer opened: {path.name} with {codec_name} codec")
            return writer

        writer.release()
        logger.debug(f"Codec {codec_name} failed for {path.name}, trying next...")

    raise VideoAssemblyError(
        f"Failed to open video writer for {path}. Tried codecs: {list(codecs)}. "
        f"Check that ffmpeg or system codecs are installed."
    )


class VideoAssembler:
    """
    Encodes a FrameStore's sequence into a single video at a fixed rate.

    Args:
        output_path: Destination video file
        fps: Output frame rate
        frame_size: (width, height) of the stream
        codecs: FourCC codes to try, in order
    """

    def __init__(self, output_path, fps: int, frame_size: Tuple[int, int], codecs=DEFAULT_CODECS):
        self.output_path = Path(output_path)
        self.fps = fps
        self.frame_size = tuple(frame_size)
        self.codecs = tuple(codecs)

    def assemble(self, store, animation_frames: int, hold_frames: int) -> AssemblyReport:
        """
        Read frames ``0 .. animation_frames + hold_frames - 1`` from the store
        and write them to the output stream.

        Returns:
            AssemblyReport with written and skipped counts
        """
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        writer = open_video_writer(self.output_path, self.fps, self.frame_size, self.codecs)

        written = 0
        skipped = 0
        try:
            for index in range(animation_frames + hold_frames):
                image = store.read(index)
                if image is None:
                    skipped += 1
                    logger.debug(f"Skipping undecodable frame {index}")
                    continue

                if (image.shape[1], image.shape[0]) != self.frame_size:
                    image = cv2.resize(image, self.frame_size, interpolation=cv2.INTER_AREA)
                writer.write(image)
                written += 1
        finally:
            writer.release()

        if skipped:
            logger.warning(
                f"Skipped {skipped} of {animation_frames + hold_frames} frames that "
                f"could not be decoded; {self.output_path.name} is shorter than planned"
            )
        logger.info(f"Wrote {written} frames to {self.output_path}")

        return AssemblyReport(output_path=self.output_path, written=written, skipped=skipped)
