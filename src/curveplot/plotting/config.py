"""
config.py
---------

Validated, immutable configuration for the plotting layer.

All numeric fields are checked in ``__post_init__``: non-real values raise
``TypeError``, out-of-range values raise ``ValueError``. Colors accept any
Matplotlib color spec (CSS4 names, hex strings, RGB(A) tuples).
"""

from __future__ import annotations

__all__ = ["PlotStyle", "AxisSettings", "CanvasConfig", "DEFAULT_VIEWPORT"]

from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Optional, Tuple

from matplotlib import colors as mcolors

from curveplot.geometry.rect import Rect
from curveplot.geometry.vec2 import Vec2

ColorSpec = Any

DEFAULT_VIEWPORT = Rect.create_ranges((-2.0, 2.0), (-2.0, 2.0))


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------
def _coerce_real(obj: object, name: str, minimum: float = 0.0,
                 strict: bool = False) -> None:
    """Coerce ``obj.name`` to float and check it against ``minimum``."""
    value = getattr(obj, name)
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"{name} must be a real number, got {value!r} of type {type(value).__name__}")
    value = float(value)
    if value < minimum or (strict and value == minimum):
        bound = ">" if strict else ">="
        raise ValueError(f"{name} must be {bound} {minimum}, got {value!r}")
    object.__setattr__(obj, name, value)


def _check_color(value: ColorSpec, name: str) -> None:
    if not mcolors.is_color_like(value):
        raise ValueError(f"{name} is not a valid Matplotlib color: {value!r}")


# ---------------------------------------------------------------------------
# Styles
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class PlotStyle:
    """Stroke style of a plotted path.

    Attributes:
        color:        Stroke color.
        thickness:    Line width in logical pixels.
        dash_pattern: Optional on/off lengths in logical pixels.
    """
    color: ColorSpec = "black"
    thickness: float = 3.0
    dash_pattern: Optional[Tuple[float, ...]] = None

    def __post_init__(self) -> None:
        _check_color(self.color, "color")
        _coerce_real(self, "thickness", strict=True)
        if self.dash_pattern is not None:
            pattern = tuple(float(v) for v in self.dash_pattern)
            if not pattern or any(v <= 0 for v in pattern):
                raise ValueError(f"dash_pattern must hold positive lengths, got {self.dash_pattern!r}")
            object.__setattr__(self, "dash_pattern", pattern)


@dataclass(frozen=True)
class AxisSettings:
    """Appearance of one coordinate axis and its ticks.

    ``major_step <= 0`` disables ticks; ``minor_divisions`` splits every major
    interval into that many minor ticks (0 disables them).
    """
    visible: bool = True
    major_step: float = 1.0
    minor_divisions: int = 4
    color: ColorSpec = "black"
    thickness: float = 2.0

    def __post_init__(self) -> None:
        _check_color(self.color, "color")
        _coerce_real(self, "major_step", minimum=float("-inf"))
        _coerce_real(self, "thickness", strict=True)
        if isinstance(self.minor_divisions, bool) or not isinstance(self.minor_divisions, int):
            raise TypeError(f"minor_divisions must be an int, got {self.minor_divisions!r}")
        if self.minor_divisions < 0:
            raise ValueError(f"minor_divisions must be >= 0, got {self.minor_divisions}")


@dataclass(frozen=True)
class CanvasConfig:
    """Drawing-surface configuration.

    Attributes:
        size_px:          Canvas size in logical pixels (width, height).
        pixel_density:    Device pixels per logical pixel.
        viewport:         Initial world-space viewport.
        inset:            Margin (logical pixels) between canvas edge and plot region.
        background_color: Fill of the plot region.
        border_color:     Stroke of the plot-region border.
        border_thickness: Border width in logical pixels (0 disables it).
        tick_ms:          Redraw interval of interactive sessions.
    """
    size_px: Tuple[float, float] = (400.0, 400.0)
    pixel_density: float = 1.0
    viewport: Rect = DEFAULT_VIEWPORT
    inset: float = 5.0
    background_color: ColorSpec = (0.7, 0.7, 0.7)
    border_color: ColorSpec = "black"
    border_thickness: float = 1.0
    tick_ms: float = field(default=1000.0 / 60.0)

    def __post_init__(self) -> None:
        width, height = self.size_px
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, Real) or value <= 0:
                raise ValueError(f"size_px {name} must be a positive number, got {value!r}")
        object.__setattr__(self, "size_px", (float(width), float(height)))
        _coerce_real(self, "pixel_density", strict=True)
        _coerce_real(self, "inset")
        _coerce_real(self, "border_thickness")
        _coerce_real(self, "tick_ms", strict=True)
        if not isinstance(self.viewport, Rect):
            raise TypeError(f"viewport must be a Rect, got {type(self.viewport).__name__}")
        _check_color(self.background_color, "background_color")
        _check_color(self.border_color, "border_color")

    @property
    def size(self) -> Vec2:
        return Vec2(*self.size_px)
