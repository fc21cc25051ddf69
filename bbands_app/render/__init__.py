"""Rendering of band rows onto a host drawing context"""

from .context import DrawCommand, DrawingContext2D, RecordingContext
from .paths import RenderPathBuilder

__all__ = [
    "DrawCommand",
    "DrawingContext2D",
    "RecordingContext",
    "RenderPathBuilder",
]
