#
# PROJECT: term3d
# MODULE: term3d/sinks.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 6
# LOG_REF: 2026-10-19
#

"""
Output sinks: where a finished frame buffer goes.

Every sink implements emit(canvas, display). The render loop knows
nothing else about them.
"""

import logging
import sys
from abc import ABC, abstractmethod

from .camera import Display
from .canvas import FrameBuffer
from .color import (BLOCK, CLEAR_SCREEN, DEFAULT_DARKEN, Color, paint,
                    shade_to_rgb, value_to_rgb)

logger = logging.getLogger(__name__)


class FrameSink(ABC):
    """Accepts completed frame buffers, one call per frame."""

    @abstractmethod
    def emit(self, canvas: FrameBuffer, display: Display):
        ...


def format_terminal_frame(canvas: FrameBuffer, darken: float = DEFAULT_DARKEN) -> str:
    """One colored block glyph per cell, one text line per buffer row."""
    rgb = shade_to_rgb(canvas.value, darken).tolist()
    lines = []
    for row in rgb:
        lines.append("".join(paint(BLOCK, px) for px in row))
    return "\n".join(lines) + "\n"


def format_ppm(display: Display, canvas: FrameBuffer) -> str:
    """Plain-text PPM (P3) image of the buffer's shading values."""
    # https://en.wikipedia.org/wiki/Netpbm
    out = ["P3", f"{display.width} {display.height}", "255 #max value for each color"]
    for row in value_to_rgb(canvas.value).tolist():
        out.append("".join(f"{r} {g} {b}   " for r, g, b in row))
    return "\n".join(out) + "\n"


def flatten_buffer_to_color_frame(canvas: FrameBuffer, darken: float = DEFAULT_DARKEN):
    """Terminal colors of every cell as '#RRGGBB' strings, row by row."""
    return [[Color(*px).to_web_colors() for px in row]
            for row in shade_to_rgb(canvas.value, darken).tolist()]


class TerminalSink(FrameSink):
    """Paints frames to a text stream with 24-bit color escapes."""

    def __init__(self, stream=None, darken: float = DEFAULT_DARKEN, clear_screen: bool = False):
        self.stream = stream if stream is not None else sys.stdout
        self.darken = darken
        self.clear_screen = clear_screen

    def emit(self, canvas: FrameBuffer, display: Display):
        if self.clear_screen:
            self.stream.write(CLEAR_SCREEN)
        self.stream.write(format_terminal_frame(canvas, self.darken))
        self.stream.flush()


class PpmFileSink(FrameSink):
    """
    Writes each frame to the same PPM file.

    Every emit() overwrites the file, so an animation leaves only its
    last frame behind.
    """

    def __init__(self, path="sample_output.ppm"):
        self.path = path
        self.frames_written = 0

    def emit(self, canvas: FrameBuffer, display: Display):
        with open(self.path, 'w') as f:
            f.write(format_ppm(display, canvas))
        self.frames_written += 1
        logger.debug("Wrote frame %d to %s", self.frames_written, self.path)


class ColorFrameSink(FrameSink):
    """Keeps every frame as a grid of web colors, for embedding elsewhere."""

    def __init__(self, darken: float = DEFAULT_DARKEN):
        self.darken = darken
        self.frames = []

    def emit(self, canvas: FrameBuffer, display: Display):
        self.frames.append(flatten_buffer_to_color_frame(canvas, self.darken))
