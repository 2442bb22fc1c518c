"""Renderers that turn progress reports into visible indicators."""

from .base import Renderer
from .binding import RendererBinding
from .cli import CliProgress
from .null import NullRenderer
from .style import Style


__all__ = [
    "Renderer",
    "RendererBinding",
    "CliProgress",
    "NullRenderer",
    "Style",
]
