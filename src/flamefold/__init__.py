"""
flamefold - collapsed stacks to flamegraph call trees

Folds ``frame1;frame2;...;frameN <count>`` lines into a cumulative call
tree in a single pass and renders it as d3-flame-graph JSON or as a
self-contained HTML page.
"""

__version__ = "0.1.0"

from .collapse import StackTree, TreeBuilder, build_tree, collapse_to_json, tree_to_json
from .visualization import generate_page, render_page

__all__ = [
    "collapse_to_json",  # Main entry point
    "build_tree",
    "tree_to_json",
    "TreeBuilder",
    "StackTree",
    "generate_page",
    "render_page",
]
