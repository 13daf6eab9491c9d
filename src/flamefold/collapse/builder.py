"""Build a call tree from prefix-grouped collapsed stacks in one pass.

The builder never looks a frame up by name.  It keeps the path of node
indices from the root to the last frame it positioned and compares each
incoming frame against that path by depth.  Because input records that
share a prefix arrive consecutively, the shared part of the path is already
in place and only the diverging tail has to be created, giving linear time
in the total number of frames.

Input that is not grouped by prefix is not rejected; a frame name that
reappears after its subtree was left simply gets a second sibling node.
Use :func:`flamefold.collapse.parser.sort_lines` before building when the
source order is unknown.
"""

from typing import Iterable

from ..logging_config import get_logger
from .models import ROOT, StackRecord, StackTree
from .parser import iter_records

logger = get_logger(__name__)


class TreeBuilder:
    """Fold ``StackRecord`` objects into a ``StackTree``.

    Values are cumulative: each record's count is added to every node on
    its root-to-leaf path, so the root holds the grand total.
    """

    def __init__(self) -> None:
        self.tree = StackTree()
        self._path: list[int] = [ROOT]
        self._records = 0

    def add(self, record: StackRecord) -> None:
        tree = self.tree
        path = self._path

        depth = 0
        for name in record.frames:
            depth += 1
            if depth >= len(path) or tree.node(path[depth]).name != name:
                # diverged from the previous record at this depth
                del path[depth:]
                path.append(tree.add_child(path[-1], name))

        # shallower than the previous record: drop its leftover tail
        if len(path) > depth + 1:
            del path[depth + 1 :]

        for index in path:
            tree.add_value(index, record.count)

        self._records += 1

    def build(self, records: Iterable[StackRecord]) -> StackTree:
        for record in records:
            self.add(record)
        logger.debug(
            "Built stack tree: %d records, %d nodes, %d samples",
            self._records,
            len(self.tree),
            self.tree.total,
        )
        return self.tree


def build_tree(lines: Iterable[str], skip_comments: bool = True) -> StackTree:
    """Parse collapsed-stack lines and build their call tree.

    *lines* must already be grouped by shared frame prefix.
    """
    return TreeBuilder().build(iter_records(lines, skip_comments=skip_comments))
