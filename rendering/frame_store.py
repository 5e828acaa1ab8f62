"""
Numbered PNG frame sequence on disk.

Frames are written once, in order, as ``frame_00000.png``, ``frame_00001.png``
and so on, then read back once by the video assembler.
"""

import logging
from pathlib import Path
from typing import Optional

import cv2
import numpy as np

logger = logging.getLogger(__name__)


class FrameStoreError(OSError):
    """A frame could not be written."""


class FrameStore:
    """
    Append-only store of rasters under sequential zero-padded filenames.

    Args:
        directory: Frame directory (created on prepare())
        prefix: Filename prefix
        digits: Zero-padding width of the frame number
        extension: Image format, lossless by default
    """

    def __init__(self, directory, prefix: str = "frame_", digits: int = 5, extension: str = ".png"):
        self.directory = Path(directory)
        self.prefix = prefix
        self.digits = digits
        self.extension = extension
        self._next_index = 0

    def __len__(self) -> int:
        return self._next_index

    def path_for(self, index: int) -> Path:
        return self.directory / f"{self.prefix}{index:0{self.digits}d}{self.extension}"

    def stale_frames(self):
        """Frame files already present in the directory."""
        if not self.directory.exists():
            return []
        return sorted(self.directory.glob(f"{self.prefix}*{self.extension}"))

    def prepare(self, clear: bool = True):
        """
        Create the frame directory (idempotent).

        Args:
            clear: Remove frames left over from a previous run. Without this,
                old frames with higher numbers can end up in the new video.
        """
        self.directory.mkdir(parents=True, exist_ok=True)
        stale = self.stale_frames()
        if clear:
            for path in stale:
                path.unlink()
            if stale:
                logger.info(f"Removed {len(stale)} stale frames from {self.directory}")
        elif stale:
            logger.warning(
                f"{len(stale)} frames already present in {self.directory}; "
                f"they may be mixed into the output"
            )
        self._next_index = 0

    def append(self, image: np.ndarray) -> int:
        """Write the next frame and return its index."""
        index = self._next_index
        path = self.path_for(index)
        try:
            written = cv2.imwrite(str(path), image)
        except cv2.error as e:
            raise FrameStoreError(f"Failed to write frame {index} to {path}: {e}") from e
        if not written:
            raise FrameStoreError(f"Failed to write frame {index} to {path}")
        self._next_index += 1
        return index

    def read(self, index: int) -> Optional[np.ndarray]:
        """Decoded frame, or None if it is missing or cannot be decoded."""
        return cv2.imread(str(self.path_for(index)), cv2.IMREAD_COLOR)
