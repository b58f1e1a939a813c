#
# PROJECT: term3d
# MODULE: term3d/color.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 6.3
# LOG_REF: 2026-10-19
#

from typing import NamedTuple

import numpy as np

ESC = "\033["
RESET = ESC + "0m"
CLEAR_SCREEN = ESC + "2J" + ESC + "H"
BLOCK = "█"

# Brightness of the terminal faux-colors.
DEFAULT_DARKEN = 0.4

STEEL_BLUE = (70, 130, 180)


class Color(NamedTuple):
    r: int
    g: int
    b: int

    def to_web_colors(self) -> str:
        """'#RRGGBB' form, upper-case hex."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


def to_u8_array(x):
    """
    Saturating float -> 0..255 conversion, returned as uint8.

    Truncates toward zero, clamps out-of-range values to the nearest end
    and maps NaN to 0.
    """
    x = np.nan_to_num(np.asarray(x, dtype=np.float64), nan=0.0, posinf=255.0, neginf=0.0)
    return np.clip(np.trunc(x), 0.0, 255.0).astype(np.uint8)


def shade_to_rgb(value, darken: float = DEFAULT_DARKEN):
    """
    Terminal mapping of shading values: (1 - v) * 256 * darken per channel.

    White background (v = 1) comes out black; the darken factor keeps the
    normal-derived faux-colors from washing out.
    """
    return to_u8_array((1.0 - np.asarray(value, dtype=np.float64)) * 256.0 * darken)


def value_to_rgb(value):
    """File mapping of shading values: v * 256 per channel."""
    return to_u8_array(np.asarray(value, dtype=np.float64) * 256.0)


def paint(text: str, rgb) -> str:
    """Wrap text in a 24-bit foreground color escape."""
    r, g, b = rgb
    return f"{ESC}38;2;{r};{g};{b}m{text}{RESET}"
