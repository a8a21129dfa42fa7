"""
test_graphing_canvas.py
-----------------------
Tests for plotting/graphing_canvas.py
"""

import numpy as np
import pytest

from curveplot.geometry import Rect, Vec2
from curveplot.plotting import CanvasConfig, GraphingCanvas, major_tick_positions


@pytest.fixture
def graphing():
    g = GraphingCanvas.root(CanvasConfig(size_px=(200, 200)))
    yield g
    g.close()


# ---------------------------------------------------------------------------
# 1. Tick positions
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("minimum, interval, step, expected", [
    (-2, 4, 1, [-2, -1, 0, 1, 2]),
    (-2.5, 5, 1, [-2, -1, 0, 1, 2]),
    (-1, 2, 0.5, [-1, -0.5, 0, 0.5, 1]),
    (0.1, 0.5, 1, []),
    (3, 10, 5, [5, 10]),
    (-2, 4, 0, []),
    (-2, 4, -1, []),
])
def test_major_tick_positions(minimum, interval, step, expected):
    """Ticks sit on multiples of the step inside the interval."""
    assert major_tick_positions(minimum, interval, step) == pytest.approx(expected)


# ---------------------------------------------------------------------------
# 2. Layout and settings
# ---------------------------------------------------------------------------

def test_root_layout(graphing):
    """Root canvas insets the region and starts with no renderers."""
    assert graphing.canvas_rect == Rect.create(5, 5, 190, 190)
    assert graphing.viewport == Rect.create(-2, -2, 4, 4)
    assert graphing.renderers == []
    assert graphing.border_thickness == 1.0


def test_partial_axis_settings(graphing):
    """Partial updates keep the other fields."""
    graphing.set_axis_settings_x(color="red", major_step=0.5)
    assert graphing.axis_settings_x.color == "red"
    assert graphing.axis_settings_x.major_step == 0.5
    assert graphing.axis_settings_x.minor_divisions == 4
    assert graphing.axis_settings_y.color == "black"
    with pytest.raises(ValueError):
        graphing.set_axis_settings_y(thickness=-1)


def test_pointer_to_world(graphing):
    """Pointer positions map through the inset region."""
    assert graphing.pointer_to_world(Vec2(0.5, 0.5)).is_close(Vec2(0, 0))
    assert graphing.pointer_to_world(Vec2(5 / 200, 195 / 200)).is_close(Vec2(-2, 2))


# ---------------------------------------------------------------------------
# 3. Rendering
# ---------------------------------------------------------------------------

def test_render_calls_renderers_in_order(graphing):
    """Renderers run in list order, then the extra callback."""
    calls = []
    graphing.renderers = [
        lambda canvas, viewport: calls.append(("a", viewport)),
        lambda canvas, viewport: calls.append(("b", viewport)),
    ]
    graphing.render(lambda canvas, viewport: calls.append(("extra", viewport)))
    assert [name for name, _ in calls] == ["a", "b", "extra"]
    assert all(viewport == graphing.viewport for _, viewport in calls)


def test_axes_without_ticks_draw_two_lines(graphing):
    """Disabled ticks leave only the axis lines."""
    graphing.set_axis_settings_x(major_step=0, minor_divisions=0)
    graphing.set_axis_settings_y(major_step=0, minor_divisions=0)
    graphing.render()
    assert len(graphing.canvas.ax.lines) == 2


def test_hidden_axes_draw_nothing(graphing):
    """Hidden axes draw no lines."""
    graphing.set_axis_settings_x(visible=False)
    graphing.set_axis_settings_y(visible=False)
    graphing.render()
    assert len(graphing.canvas.ax.lines) == 0
    # clear, background, border
    assert len(graphing.canvas.ax.patches) == 3


def test_tick_count(graphing):
    """Major and minor tick counts for the default viewport."""
    graphing.set_axis_settings_y(visible=False)
    graphing.render()
    # axis + 4 major ticks (none at the origin) + 5 x 3 minor ticks
    assert len(graphing.canvas.ax.lines) == 1 + 4 + 15


def test_render_is_repeatable(graphing):
    """Rendering twice does not accumulate artists."""
    graphing.render()
    first = len(graphing.canvas.ax.lines)
    graphing.render()
    assert len(graphing.canvas.ax.lines) == first


def test_render_pixels(graphing):
    """Background, margin and x axis land on the expected pixels."""
    graphing.render()
    img = graphing.canvas.to_rgba()
    grey = round(0.7 * 255)
    assert np.all(np.abs(img[30, 30, :3].astype(int) - grey) <= 1)   # background
    assert np.array_equal(img[1, 1], [255, 255, 255, 255])             # outside the region
    assert np.all(img[100, 30, :3] < 60)                                # x axis at world y = 0


def test_save(graphing, tmp_path):
    out = tmp_path / "plot.png"
    graphing.save(out)
    assert out.exists()


def test_renderers_are_clipped_to_canvas_region(graphing):
    """Renderer output stays inside the inset region; the margin keeps its colour."""
    graphing.renderers = [lambda canvas, viewport: canvas.draw_circle(Vec2(0, 0), 10, "red")]
    graphing.render()
    img = graphing.canvas.to_rgba()
    assert np.array_equal(img[100, 100], [255, 0, 0, 255])
    assert np.array_equal(img[1, 1], [255, 255, 255, 255])
    assert np.array_equal(img[198, 100], [255, 255, 255, 255])
