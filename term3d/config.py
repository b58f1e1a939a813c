#
# PROJECT: term3d
# MODULE: term3d/config.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 10
# LOG_REF: 2026-10-19
#

from dataclasses import dataclass, field

from .camera import FONT_ASPECT_RATIO, Camera, Display
from .color import DEFAULT_DARKEN

ANIMATION_FRAMES = 60


@dataclass
class RenderConfig:
    """Configuration for the rendering pipeline."""
    camera: Camera = field(default_factory=Camera)
    display: Display = field(default_factory=Display)
    frames: int = 1
    angle_step: float = 0.1     # Radians about x added per frame
    to_file: bool = False
    output_path: str = "sample_output.ppm"
    clear_screen: bool = False
    darken: float = DEFAULT_DARKEN
    vectorized: bool = True     # False walks every cell in pure Python

    def __post_init__(self):
        if self.frames < 1:
            raise ValueError(f"frames must be at least 1, got {self.frames}")

    def angle(self, frame_index: int) -> float:
        return self.angle_step * frame_index

    @classmethod
    def for_mode(cls, to_file: bool, **overrides) -> 'RenderConfig':
        """
        Default config for file or terminal output.

        Terminal cells are taller than wide, so terminal mode stretches the
        camera's row axis by FONT_ASPECT_RATIO; files use square pixels.
        Terminal animations clear the screen before each frame unless
        clear_screen is passed.
        """
        camera = overrides.pop('camera', None) or Camera()
        aspect = 1.0 if to_file else FONT_ASPECT_RATIO
        overrides.setdefault('clear_screen', not to_file and overrides.get('frames', 1) > 1)
        return cls(camera=camera.with_aspect_ratio(aspect), to_file=to_file, **overrides)
