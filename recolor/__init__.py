from ._cli import RecolorArgs, main, run
from ._config import (
    RecolorConfig,
    build_config,
    dump_style_file,
    load_style_file,
)
from ._errors import ConfigurationError, RecolorWarning
from ._render import OverlayRenderer, render_line
from ._spans import Span, SpanExtractor, extract_spans
from ._styles import DEFAULT_PALETTE, Style, parse_assignments, parse_style

__version__ = "0.1.0"

__all__ = [
    "RecolorArgs",
    "main",
    "run",
    "RecolorConfig",
    "build_config",
    "dump_style_file",
    "load_style_file",
    "ConfigurationError",
    "RecolorWarning",
    "OverlayRenderer",
    "render_line",
    "Span",
    "SpanExtractor",
    "extract_spans",
    "DEFAULT_PALETTE",
    "Style",
    "parse_assignments",
    "parse_style",
]
