"""Top-level package for the string art toolkit.

This package places pins on regular polygons, generates the strings that
approximate quadratic Bezier envelopes, and draws or exports the result.
"""

from .config import ConfigurationError, StringArtConfig
from .geometry import Segment, PinGrid, Pattern, XY, build_pin_grid, generate_segments, generate_pattern
from .rendering import PatternRenderer, RenderOptions
from .controller import StringArtController

__all__ = [
    "ConfigurationError",
    "StringArtConfig",
    "Segment",
    "PinGrid",
    "Pattern",
    "XY",
    "build_pin_grid",
    "generate_segments",
    "generate_pattern",
    "PatternRenderer",
    "RenderOptions",
    "StringArtController",
]
