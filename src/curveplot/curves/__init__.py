"""
Curve evaluation: interpolators, arc-length reparameterization, derivatives
and sampling.
"""

from .interpolators import (
    ParametricEquation, SubRange, InterpolatorKind,
    QUADRATIC_BASIS, CUBIC_BASIS, HERMITE_BASIS,
    remap_parameter_to_sub_range,
    line_segment_interpolator, line_segments_interpolator,
    quadratic_interpolator, cubic_interpolator, hermite_interpolator,
    make_interpolator,
)
from .arc_length import (
    DEFAULT_ARC_LENGTH_STEPS, build_arc_length_table, parameter_for_arc_length,
    ArcLengthParameterization,
)
from .derivative import (
    ExplicitFunction, ImplicitFunction,
    explicit_numeric_derivative, implicit_numeric_derivative,
    derivative, parametric_derivative,
)
from .sampling import (
    sample_explicit, sample_parametric, implicit_sign_changes, y_on_line, viewport_line,
)

__all__ = [
    "ParametricEquation", "SubRange", "InterpolatorKind",
    "QUADRATIC_BASIS", "CUBIC_BASIS", "HERMITE_BASIS",
    "remap_parameter_to_sub_range",
    "line_segment_interpolator", "line_segments_interpolator",
    "quadratic_interpolator", "cubic_interpolator", "hermite_interpolator",
    "make_interpolator",
    "DEFAULT_ARC_LENGTH_STEPS", "build_arc_length_table", "parameter_for_arc_length",
    "ArcLengthParameterization",
    "ExplicitFunction", "ImplicitFunction",
    "explicit_numeric_derivative", "implicit_numeric_derivative",
    "derivative", "parametric_derivative",
    "sample_explicit", "sample_parametric", "implicit_sign_changes",
    "y_on_line", "viewport_line",
]
