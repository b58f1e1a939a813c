#
# PROJECT: term3d
# MODULE: term3d/renderer.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 4.5
# LOG_REF: 2026-10-19
#

import logging
import time

from .camera import Camera, Display
from .canvas import FrameBuffer
from .config import RenderConfig
from .rasterizer import fill_triangle, fill_triangle_per_cell

logger = logging.getLogger(__name__)


def render_frame(triangles, angle: float, display: Display, camera: Camera,
                 vectorized: bool = True) -> FrameBuffer:
    """
    Rasterize every triangle, rotated by `angle` about x, into a fresh buffer.

    Triangles are merged in list order; on equal depth the earlier one stays.
    """
    canv = FrameBuffer(display)
    if vectorized:
        wx, wy = camera.world_grid(display)
    for tri in triangles:
        rotated = tri.rotate_x(angle)
        if vectorized:
            fill_triangle(canv, rotated, wx, wy)
        else:
            fill_triangle_per_cell(canv, rotated, camera)
    return canv


class Renderer:
    """
    Render loop.

    Setup happens in __init__ (camera, display and frame count come from
    the config). Each frame rotates the mesh by angle_step * frame_index,
    renders into a new buffer and hands that buffer to exactly one sink.
    Frames share nothing but the growing angle.
    """

    def __init__(self, config: RenderConfig):
        self.config = config

    def render(self, triangles, frame_index: int = 0) -> FrameBuffer:
        config = self.config
        return render_frame(triangles, config.angle(frame_index),
                            config.display, config.camera, config.vectorized)

    def frames(self, triangles):
        """Yield (frame_index, angle, buffer) for every configured frame."""
        triangles = list(triangles)
        for i in range(self.config.frames):
            start = time.perf_counter()
            canv = self.render(triangles, i)
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Frame %d/%d at %.2f rad: %d cells covered in %.1f ms",
                             i + 1, self.config.frames, self.config.angle(i),
                             int(canv.covered().sum()), (time.perf_counter() - start) * 1000)
            yield i, self.config.angle(i), canv

    def run(self, triangles, sink) -> int:
        """Render all frames into `sink`; returns the number emitted."""
        emitted = 0
        for _i, _angle, canv in self.frames(triangles):
            sink.emit(canv, self.config.display)
            emitted += 1
        return emitted
