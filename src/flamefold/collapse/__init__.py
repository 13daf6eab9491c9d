"""Collapsed-stack conversion: parse, build the call tree, serialize to JSON."""

from typing import Iterable

from .builder import TreeBuilder, build_tree
from .models import Node, StackRecord, StackTree
from .parser import iter_records, parse_line, sort_lines
from .serializer import tree_to_dict, tree_to_json


def collapse_to_json(lines: Iterable[str], skip_comments: bool = True) -> str:
    """Turn prefix-grouped collapsed stacks into d3-flame-graph JSON.

    >>> collapse_to_json(["solo 5"])
    '{"name":"","value":5,"children":[{"name":"solo","value":5,"children":[]}]}'
    """
    return tree_to_json(build_tree(lines, skip_comments=skip_comments))


__all__ = [
    "collapse_to_json",
    "build_tree",
    "TreeBuilder",
    "Node",
    "StackRecord",
    "StackTree",
    "iter_records",
    "parse_line",
    "sort_lines",
    "tree_to_dict",
    "tree_to_json",
]
