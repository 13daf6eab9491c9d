"""Render a ``StackTree`` in the d3-flame-graph JSON shape.

Structure::

    {"name": "", "value": 9, "children": [
        {"name": "a", "value": 8, "children": [...]},
        ...
    ]}

Children keep their first-seen order.  Output is compact and keeps
non-ASCII frame names verbatim.
"""

import json
from typing import Any, Dict

from ..exceptions import SerializationError
from .models import ROOT, StackTree


def tree_to_dict(tree: StackTree) -> Dict[str, Any]:
    """Convert the arena into nested ``{name, value, children}`` dicts.

    Built iteratively so deep stacks do not hit the interpreter's
    recursion limit here.
    """
    root = tree.node(ROOT)
    out: Dict[str, Any] = {"name": root.name, "value": root.value, "children": []}
    pending = [(root, out)]
    while pending:
        node, rendered = pending.pop()
        for index in node.children:
            child = tree.node(index)
            child_out = {"name": child.name, "value": child.value, "children": []}
            rendered["children"].append(child_out)
            pending.append((child, child_out))
    return out


def tree_to_json(tree: StackTree) -> str:
    """Serialize the tree to a JSON string.

    Raises:
        SerializationError: the tree holds text that cannot be encoded as
            UTF-8, or is nested deeper than the JSON encoder supports.
    """
    try:
        text = json.dumps(tree_to_dict(tree), ensure_ascii=False, separators=(",", ":"))
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise SerializationError(f"frame name is not valid UTF-8 text: {e.reason}") from e
    except RecursionError as e:
        raise SerializationError("stack tree is nested too deeply to encode") from e
    return text
