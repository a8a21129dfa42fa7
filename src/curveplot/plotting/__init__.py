"""
Matplotlib drawing layer: configuration, drawing surface, renderers and the
graphing canvas.
"""

from .config import PlotStyle, AxisSettings, CanvasConfig, DEFAULT_VIEWPORT
from .mpl_canvas import MplCanvas, FIGURE_DPI
from .renderers import (
    CanvasRenderer, color_for_index,
    step_plotter, function_renderer, implicit_function_renderer,
    parametric_renderer, arc_length_marker_renderer,
    control_points_renderer, tangent_handles_renderer, viewport_line_renderer,
)
from .graphing_canvas import GraphingCanvas, major_tick_positions

__all__ = [
    "PlotStyle", "AxisSettings", "CanvasConfig", "DEFAULT_VIEWPORT",
    "MplCanvas", "FIGURE_DPI",
    "CanvasRenderer", "color_for_index",
    "step_plotter", "function_renderer", "implicit_function_renderer",
    "parametric_renderer", "arc_length_marker_renderer",
    "control_points_renderer", "tangent_handles_renderer", "viewport_line_renderer",
    "GraphingCanvas", "major_tick_positions",
]
