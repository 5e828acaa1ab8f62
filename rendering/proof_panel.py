"""
Static two-column proof panel drawn with OpenCV primitives.

Line styles come from an ordered list of (predicate, style) rules; the first
matching rule wins, so overlapping keywords resolve by position in the list.
"""

from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

import cv2
import numpy as np

# BGR
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (0, 0, 200)
GREEN = (0, 150, 0)
DARK_RED = (0, 0, 139)
GRAY = (100, 100, 100)
DIVIDER_GRAY = (150, 150, 150)

BANNER_HEIGHT = 90
FIRST_ROW_Y = 135
ROW_STEP = 35
BOTTOM_MARGIN = 50
COLUMN_INSET = 30
FONT = cv2.FONT_HERSHEY_SIMPLEX


@dataclass(frozen=True)
class LineStyle:
    name: str
    color: Tuple[int, int, int]
    scale: float
    thickness: int = 2


PANIC = LineStyle("panic", RED, 0.8)
DONE = LineStyle("complete", GREEN, 0.8)
HEADING = LineStyle("heading", DARK_RED, 0.7)
SEPARATOR = LineStyle("separator", GRAY, 0.6)
BULLET = LineStyle("bullet", BLACK, 0.6)
DEFAULT = LineStyle("default", BLACK, 0.7)


def _is_separator(text: str) -> bool:
    stripped = text.strip()
    return bool(stripped) and set(stripped) <= {"=", "═"}


STYLE_RULES: List[Tuple[Callable[[str], bool], LineStyle]] = [
    (lambda t: t.startswith("🚫") or "IMPOSSIBLE" in t or "FALSE" in t, PANIC),
    (lambda t: t.startswith("🔬") or "COMPLETE" in t, DONE),
    (lambda t: "SPECIFICATIONS" in t or "VERIFICATION" in t, HEADING),
    (_is_separator, SEPARATOR),
    (lambda t: t.startswith("•") or t.startswith("* "), BULLET),
]


def style_for(text: str) -> LineStyle:
    """First matching rule wins; unmatched lines get the default style."""
    for predicate, style in STYLE_RULES:
        if predicate(text):
            return style
    return DEFAULT


def split_columns(lines: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Left gets the first ``len // 2`` lines, right gets the rest."""
    mid = len(lines) // 2
    return list(lines[:mid]), list(lines[mid:])


def visible_rows(line_count: int, height: int) -> int:
    """Rows that fit above the bottom margin; later rows are truncated."""
    limit = height - BOTTOM_MARGIN
    rows = 0
    while rows < line_count and FIRST_ROW_Y + rows * ROW_STEP <= limit:
        rows += 1
    return rows


def _draw_column(canvas: np.ndarray, lines: Sequence[str], x: int):
    height = canvas.shape[0]
    for row, text in enumerate(lines[: visible_rows(len(lines), height)]):
        if not text:
            continue
        style = style_for(text)
        cv2.putText(
            canvas,
            text,
            (x, FIRST_ROW_Y + row * ROW_STEP),
            FONT,
            style.scale,
            style.color,
            style.thickness,
            cv2.LINE_8,
        )


def render_proof_panel(lines: Sequence[str], title: str, width: int, height: int) -> np.ndarray:
    """
    Draw the proof panel.

    Args:
        lines: Panel text in reading order (split into two columns)
        title: Banner title
        width: Canvas width (px)
        height: Canvas height (px)

    Returns:
        (height, width, 3) uint8 BGR image
    """
    canvas = np.full((height, width, 3), 255, dtype=np.uint8)

    cv2.rectangle(canvas, (0, 0), (width, BANNER_HEIGHT), RED, -1)
    cv2.putText(canvas, title, (45, 60), FONT, 1.5, WHITE, 4, cv2.LINE_8)

    center_x = width // 2
    cv2.line(canvas, (center_x, 100), (center_x, height - BOTTOM_MARGIN), DIVIDER_GRAY, 3)

    left, right = split_columns(lines)
    _draw_column(canvas, left, COLUMN_INSET)
    _draw_column(canvas, right, center_x + COLUMN_INSET)

    return canvas
