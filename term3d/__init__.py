#
# PROJECT: term3d
# MODULE: term3d/__init__.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 2
# LOG_REF: 2026-10-19
#

from .math_utils import Vec3
from .errors import Term3DError, MalformedGeometryError, MeshLoadError
from .mesh import Triangle, Mesh, load_mesh
from .camera import Camera, Display
from .canvas import Depthpixel, FrameBuffer, BACKGROUND
from .rasterizer import clockwise, pixel_in_triangle, barycentric, tri_interpolate
from .config import RenderConfig
from .renderer import Renderer, render_frame
from .sinks import FrameSink, TerminalSink, PpmFileSink, ColorFrameSink
