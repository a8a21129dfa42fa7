from .logging_utils import configure_logging, ColorFormatter


__all__ = [
    "configure_logging",
    "ColorFormatter",
]
