"""Text rendering of a stack as a tree.

Example output for a root R with children X (which has child Z) and Y:

    R
    ├─ X
    │  └─ Z
    └─ Y
"""

from collections.abc import Callable, Iterator

from branchstack.core.stack.graph import DependencyGraph

MID_CONNECTOR = "├─"
LAST_CONNECTOR = "└─"
MID_PREFIX = "│  "
LAST_PREFIX = "   "

CURRENT_MARKER = " (current)"


def format_label(branch: str, *, is_current: bool, summary: str | None) -> str:
    label = branch + (CURRENT_MARKER if is_current else "")
    if summary:
        label += f"  {summary}"
    return label


def iter_tree_lines(
    graph: DependencyGraph,
    root: str,
    *,
    current: str | None,
    get_summary: Callable[[str], str | None],
) -> Iterator[str]:
    """Yield one rendered line per branch, root first, in pre-order."""
    # (branch, prefix, connector); the root has no connector
    work: list[tuple[str, str, str | None]] = [(root, "", None)]

    while work:
        branch, prefix, connector = work.pop()
        label = format_label(branch, is_current=branch == current, summary=get_summary(branch))
        if connector is None:
            yield label
            child_prefix = ""
        else:
            yield f"{prefix}{connector} {label}"
            child_prefix = prefix + (MID_PREFIX if connector == MID_CONNECTOR else LAST_PREFIX)

        children = graph.children_of(branch)
        last = len(children) - 1
        for index in range(last, -1, -1):
            child_connector = LAST_CONNECTOR if index == last else MID_CONNECTOR
            work.append((children[index], child_prefix, child_connector))


def iter_stack_tree(
    graph: DependencyGraph,
    current: str,
    get_summary: Callable[[str], str | None],
) -> Iterator[str]:
    """Yield the lines of the whole tree containing `current`.

    The tree is rooted at the topmost ancestor of `current`, which need not
    be trunk.

    Raises:
        CorruptStackError: If the walk to the root revisits a branch
    """
    root = graph.find_root(current)
    yield from iter_tree_lines(graph, root, current=current, get_summary=get_summary)
