#
# PROJECT: term3d
# MODULE: term3d/cli.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 6.5
# LOG_REF: 2026-10-19
#

import argparse
import logging
import sys
import time

from .color import STEEL_BLUE, paint
from .config import ANIMATION_FRAMES, RenderConfig
from .errors import Term3DError
from .logging_config import setup_logging
from .mesh import load_mesh
from .renderer import Renderer
from .sinks import PpmFileSink, TerminalSink

logger = logging.getLogger(__name__)

MODES = ("terminal", "to_file")


def _positive_int(text):
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def parse_args(argv=None):
    """CLI argument parser: output mode first, then the model path."""
    epilog = """\
examples:
  %(prog)s                                  Built-in cube in the terminal
  %(prog)s terminal model.obj               Preview an OBJ file in the terminal
  %(prog)s to_file model.obj                Write sample_output.ppm
  %(prog)s terminal model.obj --animate     Spin the model for 60 frames
  %(prog)s to_file model.obj -o spin.ppm    Write to another file
"""
    parser = argparse.ArgumentParser(
        prog="term3d",
        description="Preview a triangle mesh in the terminal or as a PPM image",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("mode", nargs='?', default="terminal",
                        help="'to_file' writes a PPM image, anything else prints "
                             "to the terminal (default: terminal)")
    parser.add_argument("model", nargs='?', help="Path to .obj file (default: built-in cube)")
    parser.add_argument("--frames", type=_positive_int, default=1,
                        help="Number of frames, each turned 0.1 rad further (default: 1)")
    parser.add_argument("--animate", action="store_true",
                        help=f"Render {ANIMATION_FRAMES} frames")
    parser.add_argument("-o", "--output", default="sample_output.ppm",
                        help="PPM file written in to_file mode (default: sample_output.ppm)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log per-frame details")
    parser.add_argument("--log-file", metavar="PATH",
                        help="Also write log records to PATH")
    args = parser.parse_args(argv)

    # 'term3d model.obj' reads better than 'term3d terminal model.obj'
    if args.model is None and args.mode not in MODES:
        args.model, args.mode = args.mode, "terminal"
    return args


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    frames = ANIMATION_FRAMES if args.animate else args.frames
    config = RenderConfig.for_mode(
        args.mode == "to_file",
        frames=frames,
        output_path=args.output,
    )

    start = time.perf_counter()
    try:
        name = args.model or "<built-in cube>"
        logger.info("Previewing 3D file %s", name if config.to_file else paint(name, STEEL_BLUE))
        mesh = load_mesh(args.model)
        logger.info("Number of triangles: %d", len(mesh))

        if config.to_file:
            sink = PpmFileSink(config.output_path)
        else:
            sink = TerminalSink(sys.stdout, darken=config.darken,
                                clear_screen=config.clear_screen)
        Renderer(config).run(mesh.triangles, sink)
    except (Term3DError, OSError) as e:
        logger.error("%s", e)
        return 1

    elapsed = time.perf_counter() - start
    logger.info("Elapsed: %.2fs", elapsed)
    logger.info("time per triangle: %.2fms", elapsed * 1000 / len(mesh))
    if config.to_file:
        logger.info("Wrote %s", config.output_path)
    return 0
