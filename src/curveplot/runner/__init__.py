from .interactive import (
    DEFAULT_POINTS, CurveEditorState, CurveEditor, editor_renderers, editor_rc_keymaps,
)
from .main import build_parser, main


__all__ = [
    "DEFAULT_POINTS",
    "CurveEditorState",
    "CurveEditor",
    "editor_renderers",
    "editor_rc_keymaps",
    "build_parser",
    "main",
]
