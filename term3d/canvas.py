#
# PROJECT: term3d
# MODULE: term3d/canvas.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 4.4
# LOG_REF: 2026-10-19
#

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .camera import Display

BACKGROUND_DEPTH = float('-inf')
BACKGROUND_VALUE = (1.0, 1.0, 1.0)  # white


@dataclass(frozen=True)
class Depthpixel:
    """Depth and shading triple of one cell."""
    depth: float
    value: Tuple[float, float, float]


BACKGROUND = Depthpixel(BACKGROUND_DEPTH, BACKGROUND_VALUE)


class FrameBuffer:
    """
    Depth buffer plus shading values for one frame.

    Merge rule: a candidate replaces the stored cell only when its depth
    is strictly greater (max-depth-wins, first writer keeps ties). A NaN
    depth compares false and therefore never lands in the buffer.
    """
    __slots__ = ('display', 'depth', 'value')

    def __init__(self, display: Display):
        self.display = display
        self.depth = np.full(display.shape, BACKGROUND_DEPTH, dtype=np.float64)
        self.value = np.empty(display.shape + (3,), dtype=np.float64)
        self.value[...] = BACKGROUND_VALUE

    @property
    def width(self):
        return self.display.width

    @property
    def height(self):
        return self.display.height

    def __getitem__(self, cell) -> Depthpixel:
        row, col = cell
        v = self.value[row, col]
        return Depthpixel(float(self.depth[row, col]), (float(v[0]), float(v[1]), float(v[2])))

    def __repr__(self):
        return f"FrameBuffer({self.width}x{self.height})"

    def merge(self, row: int, col: int, pixel: Depthpixel) -> bool:
        """Offer one candidate for one cell; returns True if it was kept."""
        if pixel.depth > self.depth[row, col]:
            self.depth[row, col] = pixel.depth
            self.value[row, col] = pixel.value
            return True
        return False

    def merge_array(self, depth, value) -> int:
        """
        Offer a whole grid of candidates at once.

        depth has shape (height, width), value (height, width, 3). Returns
        the number of cells that changed.
        """
        wins = depth > self.depth
        self.depth[wins] = depth[wins]
        self.value[wins] = value[wins]
        return int(np.count_nonzero(wins))

    def covered(self):
        """Boolean mask of cells that hold a surface."""
        return self.depth > BACKGROUND_DEPTH
