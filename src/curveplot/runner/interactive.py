"""
interactive.py
--------------

Live control-point editor.

Key map:
  - ``1``-``4``: make that control point follow the pointer;
  - ``0``:       release the active point;
  - ``l`` / ``q`` / ``c`` / ``h``: line segments, quadratic, cubic, Hermite.

``CurveEditorState`` holds the editable data and is free of Matplotlib so it
can be driven directly. ``CurveEditor`` wires it to figure events and redraws
the ``GraphingCanvas`` on a timer.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_POINTS", "CurveEditorState", "editor_renderers", "editor_rc_keymaps", "CurveEditor",
]

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

import matplotlib.pyplot as plt

from curveplot.curves.arc_length import ArcLengthParameterization
from curveplot.curves.interpolators import InterpolatorKind, ParametricEquation, make_interpolator
from curveplot.geometry.vec2 import Vec2
from curveplot.plotting.config import PlotStyle
from curveplot.plotting.graphing_canvas import GraphingCanvas
from curveplot.plotting.renderers import (
    CanvasRenderer, arc_length_marker_renderer, control_points_renderer,
    parametric_renderer, tangent_handles_renderer,
)

logger = logging.getLogger(__name__)

DEFAULT_POINTS = (
    Vec2(-1.0, -1.0),
    Vec2(-0.75, 1.0),
    Vec2(0.75, -0.5),
    Vec2(1.25, 0.75),
)
CHAIN_POINT_COUNT = 4
CURVE_STYLE = PlotStyle(color="black", thickness=3.0)

# Matplotlib default key bindings that collide with the editor's.
_RC_KEYMAPS = (
    "keymap.quit", "keymap.xscale", "keymap.yscale", "keymap.home", "keymap.back",
)


# ---------------------------------------------------------------------------
# State
# ---------------------------------------------------------------------------
@dataclass
class CurveEditorState:
    """Control points, the selected point and the interpolator kind.

    ``active_index`` is ``-1`` when no point follows the pointer.
    """
    points: List[Vec2] = field(default_factory=lambda: list(DEFAULT_POINTS))
    active_index: int = -1
    kind: InterpolatorKind = InterpolatorKind.LINE_SEGMENTS

    @property
    def point_count(self) -> int:
        return self.kind.point_count or CHAIN_POINT_COUNT

    @property
    def active_points(self) -> List[Vec2]:
        return self.points[:self.point_count]

    def handle_key(self, key: Optional[str]) -> bool:
        """Apply one key press. Returns ``True`` if the state changed."""
        if not key:
            return False
        if key.isdecimal():
            index = int(key)
            if 0 <= index <= len(self.points):
                self.active_index = index - 1
                return True
            return False
        kind = InterpolatorKind.from_key(key)
        if kind is None:
            return False
        self.kind = kind
        return True

    def handle_move(self, position: Vec2) -> bool:
        """Move the active point to ``position``; no-op when none is active."""
        if self.active_index < 0:
            return False
        self.points[self.active_index] = position
        return True

    def interpolator(self) -> ParametricEquation:
        return make_interpolator(self.kind, self.active_points)

    def step_count(self) -> int:
        """Plot steps: one per chain segment, 100 per segment for smooth curves."""
        per_segment = 1 if self.kind is InterpolatorKind.LINE_SEGMENTS else 100
        return per_segment * (self.point_count - 1)


def editor_renderers(state: CurveEditorState, arc_length_markers: int = 0) -> List[CanvasRenderer]:
    """Renderers for one frame of ``state``: curve, Hermite handles, markers, points."""
    curve = state.interpolator()
    renderers = [parametric_renderer(curve, state.step_count(), CURVE_STYLE)]
    if state.kind is InterpolatorKind.HERMITE:
        renderers.append(tangent_handles_renderer(state.points[:4]))
    if arc_length_markers >= 2:
        renderers.append(arc_length_marker_renderer(
            ArcLengthParameterization(curve), arc_length_markers))
    renderers.append(control_points_renderer(state.active_points))
    return renderers


def editor_rc_keymaps() -> dict:
    """rcParams keymaps with the editor keys removed, in either case."""
    editor_keys = {kind.key for kind in InterpolatorKind}
    return {name: [k for k in plt.rcParams[name] if k.lower() not in editor_keys]
            for name in _RC_KEYMAPS}


# ---------------------------------------------------------------------------
# Matplotlib binding
# ---------------------------------------------------------------------------
class CurveEditor:
    """Drives a ``GraphingCanvas`` from pointer and keyboard events.

    Example:
        >>> editor = CurveEditor(GraphingCanvas.root())
        >>> editor.show()
    """

    def __init__(self, graphing: GraphingCanvas,
                 state: Optional[CurveEditorState] = None,
                 arc_length_markers: int = 0) -> None:
        self.graphing = graphing
        self.state = state if state is not None else CurveEditorState()
        self.arc_length_markers = arc_length_markers

        fig_canvas = graphing.canvas.fig.canvas
        self._cids = [
            fig_canvas.mpl_connect("motion_notify_event", self.on_move),
            fig_canvas.mpl_connect("key_press_event", self.on_key),
        ]
        self.timer = fig_canvas.new_timer(interval=max(1, round(graphing.canvas.config.tick_ms)))
        self.timer.add_callback(self.tick)
        self.frames = 0

    def on_move(self, event: Any) -> None:
        if event.x is None or event.y is None:
            return
        bbox = self.graphing.canvas.fig.bbox
        normalized = Vec2(event.x / bbox.width, event.y / bbox.height)
        self.state.handle_move(self.graphing.pointer_to_world(normalized))

    def on_key(self, event: Any) -> None:
        if self.state.handle_key(event.key):
            logger.debug(f"Key {event.key!r}: kind={self.state.kind.name} "
                         f"active={self.state.active_index}")

    def tick(self) -> None:
        """Render one frame."""
        self.graphing.renderers = editor_renderers(self.state, self.arc_length_markers)
        self.graphing.render()
        self.graphing.canvas.fig.canvas.draw_idle()
        self.frames += 1

    def start(self) -> None:
        self.tick()
        self.timer.start()

    def stop(self) -> None:
        self.timer.stop()
        fig_canvas = self.graphing.canvas.fig.canvas
        for cid in self._cids:
            fig_canvas.mpl_disconnect(cid)
        self._cids = []

    def show(self) -> None:
        """Start the render loop and block in the GUI main loop."""
        keymaps = editor_rc_keymaps()
        logger.info("Keys: 1-4 select a point, 0 releases it, l/q/c/h switch the curve")
        with plt.rc_context(keymaps):
            self.start()
            plt.show()
        self.stop()
