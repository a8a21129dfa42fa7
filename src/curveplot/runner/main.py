"""
main.py - Command line entry point.

Renders the control-point demo scene to a PNG (batch mode, Agg backend) or
opens it in the interactive editor.

    curveplot --kind cubic --output cubic.png --arc-length 12
    curveplot --interactive
"""

from __future__ import annotations

__all__ = ["build_parser", "main"]

import argparse
import logging
from pathlib import Path
from typing import List, Optional

import matplotlib

from curveplot.curves.interpolators import InterpolatorKind
from curveplot.plotting.config import CanvasConfig
from curveplot.plotting.graphing_canvas import GraphingCanvas
from curveplot.runner.interactive import CurveEditor, CurveEditorState, editor_renderers
from curveplot.utils.logging_utils import configure_logging

KIND_NAMES = {kind.name.lower(): kind for kind in InterpolatorKind}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="curveplot",
        description="Plot control-point driven curves to a PNG or interactively.",
    )
    parser.add_argument("--kind", choices=sorted(KIND_NAMES), default="line_segments",
                        help="Interpolator used for the curve (default: line_segments).")
    parser.add_argument("--output", type=Path, default=Path("curve.png"),
                        help="PNG written in batch mode (default: curve.png).")
    parser.add_argument("--interactive", action="store_true",
                        help="Open the live editor instead of writing a file.")
    parser.add_argument("--arc-length", type=int, default=0, metavar="N",
                        help="Draw N markers equally spaced by arc length (N >= 2).")
    parser.add_argument("--size", type=float, default=400.0,
                        help="Square canvas size in logical pixels (default: 400).")
    parser.add_argument("--density", type=float, default=1.0,
                        help="Device pixels per logical pixel (default: 1).")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-dir", type=Path, default=None,
                        help="Also write a rotating log file into this directory.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    log_path = configure_logging(level=getattr(logging, args.log_level), log_dir=args.log_dir)
    logger = logging.getLogger("curveplot.runner")
    if log_path is not None:
        logger.info(f"Logs written to: {log_path}")

    if not args.interactive:
        matplotlib.use("Agg")

    graphing = None
    try:
        config = CanvasConfig(size_px=(args.size, args.size), pixel_density=args.density)
        state = CurveEditorState(kind=KIND_NAMES[args.kind])
        graphing = GraphingCanvas.root(config)
        logger.info(f"Scene: {state.kind.name.lower()} through {state.point_count} points, "
                    f"canvas {config.size_px} at density {config.pixel_density:g}")

        if args.interactive:
            CurveEditor(graphing, state, args.arc_length).show()
        else:
            graphing.renderers = editor_renderers(state, args.arc_length)
            args.output.parent.mkdir(parents=True, exist_ok=True)
            graphing.save(args.output)
    except ValueError as e:
        # GeometryError and invalid configuration values are both ValueErrors.
        logger.error(f"{type(e).__name__}: {e}")
        return 1
    finally:
        if graphing is not None:
            graphing.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
