"""Parse collapsed-stack lines (``frame1;frame2;...;frameN <count>``).

Parsing is lenient: a missing or unparsable count becomes ``1`` and an
empty frame path becomes a record with no frames.  Nothing here raises.
"""

from typing import Iterable, Iterator

from .models import StackRecord

DEFAULT_COUNT = 1


def parse_count(token: str) -> int:
    """Parse a base-10 non-negative count, falling back to ``DEFAULT_COUNT``."""
    if not token.isdigit() or not token.isascii():
        return DEFAULT_COUNT
    return int(token)


def parse_line(line: str) -> StackRecord:
    """Split one line into its frame path and trailing count.

    The frame path ends at the first space; the next whitespace-separated
    token is the count.

    >>> parse_line("main;work 3")
    StackRecord(frames=('main', 'work'), count=3)
    >>> parse_line("x")
    StackRecord(frames=('x',), count=1)
    """
    line = line.rstrip("\r\n")
    path, _, rest = line.partition(" ")
    tokens = rest.split()
    count = parse_count(tokens[0]) if tokens else DEFAULT_COUNT
    frames = tuple(path.split(";")) if path else ()
    return StackRecord(frames=frames, count=count)


def iter_records(lines: Iterable[str], skip_comments: bool = True) -> Iterator[StackRecord]:
    """Yield a ``StackRecord`` per input line.

    Leading whitespace is significant: a line such as ``" 5"`` has an empty
    frame path, and blank or empty-path lines become zero-frame records whose
    count lands on the root.  Lines starting with ``#`` are skipped when
    *skip_comments* is set.
    """
    for line in lines:
        if skip_comments and line.lstrip().startswith("#"):
            continue
        yield parse_line(line.rstrip())


def sort_lines(lines: Iterable[str]) -> list[str]:
    """Sort lines by frame path so records sharing a prefix are adjacent.

    The builder relies on this grouping but never establishes it itself;
    callers reading unsorted profiler output should pass lines through here
    first.

    Lines are compared frame by frame rather than as raw strings: plain
    string order puts ``a-b`` between ``a`` and ``a;b``, which would split
    the ``a`` subtree.
    """
    return sorted(lines, key=lambda line: parse_line(line.rstrip()).frames)
