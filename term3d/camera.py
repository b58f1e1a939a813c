#
# PROJECT: term3d
# MODULE: term3d/camera.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 4.2
# LOG_REF: 2026-10-19
#

from dataclasses import dataclass

import numpy as np

# Terminal character cells are roughly 1.9 times taller than they are wide.
FONT_ASPECT_RATIO = 1.9


@dataclass(frozen=True)
class Display:
    """Output raster size in cells (terminal) or pixels (file)."""
    width: int = 180
    height: int = 70

    def __post_init__(self):
        if int(self.width) <= 0 or int(self.height) <= 0:
            raise ValueError(f"display must be at least 1x1, got {self.width}x{self.height}")
        object.__setattr__(self, 'width', int(self.width))
        object.__setattr__(self, 'height', int(self.height))

    @property
    def shape(self):
        """(rows, columns), the layout of the frame buffer arrays."""
        return (self.height, self.width)


class Camera:
    """
    Fixed orthographic camera over the mesh's x-y plane.

    Maps a raster cell (row, column) to the world-space sample point used
    by the rasterizer. Rows run along world x (the OBJ "up" axis) and are
    stretched by aspect_ratio so that tall terminal cells do not squash
    the model. The camera never rotates; animation turns the geometry.
    """
    __slots__ = ('shift_x', 'shift_y', 'zoom', 'aspect_ratio')

    def __init__(self, shift_x: float = -39.0, shift_y: float = -80.0,
                 zoom: float = 1.8, aspect_ratio: float = 1.0):
        self.shift_x = float(shift_x)   # Row offset, in cells
        self.shift_y = float(shift_y)   # Column offset, in cells
        self.zoom = float(zoom)         # World units per cell
        self.aspect_ratio = float(aspect_ratio)

    def __repr__(self):
        return (f"Camera(shift_x={self.shift_x}, shift_y={self.shift_y}, "
                f"zoom={self.zoom}, aspect_ratio={self.aspect_ratio})")

    def __eq__(self, other):
        if isinstance(other, Camera):
            return all(getattr(self, a) == getattr(other, a) for a in self.__slots__)
        return NotImplemented

    def with_aspect_ratio(self, aspect_ratio: float) -> 'Camera':
        return Camera(self.shift_x, self.shift_y, self.zoom, aspect_ratio)

    def to_world(self, row: int, col: int):
        """World-space (x, y) sample point of one raster cell."""
        wx = (row + self.shift_x) * self.zoom * self.aspect_ratio
        wy = (col + self.shift_y) * self.zoom
        return wx, wy

    def world_grid(self, display: Display):
        """
        World-space sample points of every cell of `display`.

        Returns (wx, wy), two float arrays of shape display.shape, holding
        exactly the values to_world() gives for each (row, column).
        """
        rows = np.arange(display.height, dtype=np.float64)
        cols = np.arange(display.width, dtype=np.float64)
        wx = (rows + self.shift_x) * self.zoom * self.aspect_ratio
        wy = (cols + self.shift_y) * self.zoom
        return np.broadcast_to(wx[:, None], display.shape), np.broadcast_to(wy[None, :], display.shape)
