"""Visualization layer - flamegraph page generation."""

from .page import generate_page, render_page

__all__ = [
    "generate_page",
    "render_page",
]
