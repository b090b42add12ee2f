#!/usr/bin/env python3
"""
Graph rendering: DOT export and Graphviz rasterization.
"""

from .dot_renderer import DotRenderer, RenderResult, to_dot, format_edge_listing

__all__ = [
    'DotRenderer',
    'RenderResult',
    'to_dot',
    'format_edge_listing'
]
