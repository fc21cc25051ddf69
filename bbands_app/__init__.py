"""
BBands App - Bollinger Bands Overlay Engine

A charting plugin that computes rolling mean / standard deviation bands over
a price series and renders them as lines and a filled band on a host
chart's 2D drawing surface.
"""

__version__ = "0.1.0"
__author__ = "BBands Team"
