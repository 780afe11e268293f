"""Parent -> children index built from persisted parent links.

The graph is rebuilt on every command from a single link query and never
persisted. Children keep the order in which the store enumerated them.
"""

import logging
from collections.abc import Callable, Iterable

from branchstack.core.errors import CorruptStackError
from branchstack.core.stack.parent_links import ParentLinkStore, parse_link_key

logger = logging.getLogger(__name__)


def walk_to_root(branch: str, get_parent: Callable[[str], str | None]) -> list[str]:
    """Follow parent links upward from `branch` until a branch has no link.

    Returns:
        The chain starting at `branch` and ending at the root (inclusive)

    Raises:
        CorruptStackError: If a branch is visited twice
    """
    chain = [branch]
    seen = {branch}
    parent = get_parent(branch)
    while parent is not None:
        if parent in seen:
            raise CorruptStackError(chain[chain.index(parent) :] + [parent])
        chain.append(parent)
        seen.add(parent)
        parent = get_parent(parent)
    return chain


class DependencyGraph:
    """In-memory view of the stack forest.

    Construct with build() (from the link store) or from_link_lines() (from
    raw `git config --get-regexp` output).
    """

    def __init__(self, parents: dict[str, str], children: dict[str, list[str]]) -> None:
        self._parents = parents
        self._children = children

    @classmethod
    def build(cls, store: ParentLinkStore) -> "DependencyGraph":
        return cls.from_link_lines(store.list_link_lines())

    @classmethod
    def from_link_lines(cls, lines: Iterable[str]) -> "DependencyGraph":
        """Invert "<key> <parent>" lines into a parent -> children index.

        Lines that do not split into exactly two tokens, or whose key is not a
        stack-parent key, are skipped. A repeated key keeps its last value,
        matching what `git config --get` returns.

        Raises:
            CorruptStackError: If the links form a cycle
        """
        parents: dict[str, str] = {}
        children: dict[str, list[str]] = {}

        for line in lines:
            parts = line.split()
            if len(parts) != 2:
                continue
            key, parent = parts
            child = parse_link_key(key)
            if child is None:
                continue

            previous = parents.get(child)
            if previous is not None:
                children[previous].remove(child)
            parents[child] = parent
            children.setdefault(parent, []).append(child)

        _check_acyclic(parents)
        logger.debug("Built dependency graph: %d links, %d parents", len(parents), len(children))
        return cls(parents, children)

    def children_of(self, branch: str) -> list[str]:
        return list(self._children.get(branch, []))

    def parent_of(self, branch: str) -> str | None:
        return self._parents.get(branch)

    def find_root(self, branch: str) -> str:
        """Topmost ancestor of `branch`: the first branch with no link."""
        return walk_to_root(branch, self.parent_of)[-1]

    def as_mapping(self) -> dict[str, list[str]]:
        """Copy of the parent -> children index (empty parents omitted)."""
        return {parent: list(kids) for parent, kids in self._children.items() if kids}

    def __len__(self) -> int:
        return len(self._parents)


def _check_acyclic(parents: dict[str, str]) -> None:
    """Raise CorruptStackError if following parents from any branch loops."""
    verified: set[str] = set()
    for start in parents:
        path: list[str] = []
        on_path: set[str] = set()
        node = start
        while node in parents and node not in verified:
            if node in on_path:
                raise CorruptStackError(path[path.index(node) :] + [node])
            path.append(node)
            on_path.add(node)
            node = parents[node]
        verified.update(path)
