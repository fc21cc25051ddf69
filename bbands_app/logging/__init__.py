"""
Logging configuration and utilities for the band overlay.
"""
from .config import add_component, configure_logging, get_logger, get_render_logger

__all__ = ["add_component", "configure_logging", "get_logger", "get_render_logger"]
