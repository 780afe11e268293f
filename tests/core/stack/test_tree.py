"""Tests for stack tree rendering."""

import pytest

from branchstack.core.errors import CorruptStackError
from branchstack.core.stack.graph import DependencyGraph
from branchstack.core.stack.tree import format_label, iter_stack_tree, iter_tree_lines


def _no_summary(branch: str) -> str | None:
    return None


def _graph(*links: tuple[str, str]) -> DependencyGraph:
    return DependencyGraph.from_link_lines(
        f"branch.{child}.stack-parent {parent}" for child, parent in links
    )


def test_nested_and_sibling_connectors() -> None:
    graph = _graph(("X", "R"), ("Y", "R"), ("Z", "X"))

    lines = list(iter_tree_lines(graph, "R", current=None, get_summary=_no_summary))

    assert lines == [
        "R",
        "├─ X",
        "│  └─ Z",
        "└─ Y",
    ]


def test_last_sibling_children_get_blank_prefix() -> None:
    graph = _graph(("a", "main"), ("b", "main"), ("b1", "b"), ("b2", "b1"))

    lines = list(iter_tree_lines(graph, "main", current=None, get_summary=_no_summary))

    assert lines == [
        "main",
        "├─ a",
        "└─ b",
        "   └─ b1",
        "      └─ b2",
    ]


def test_labels_include_current_marker_and_summary() -> None:
    graph = _graph(("feat", "main"))
    summaries = {"main": "abc1234 Initial commit", "feat": "def5678 Add feature"}

    lines = list(iter_tree_lines(graph, "main", current="feat", get_summary=summaries.get))

    assert lines == [
        "main  abc1234 Initial commit",
        "└─ feat (current)  def5678 Add feature",
    ]


def test_format_label_without_summary() -> None:
    assert format_label("feat", is_current=False, summary=None) == "feat"
    assert format_label("feat", is_current=True, summary="") == "feat (current)"


def test_lines_are_produced_lazily() -> None:
    graph = _graph(("a", "main"))
    calls: list[str] = []

    def summary(branch: str) -> str | None:
        calls.append(branch)
        return None

    lines = iter_tree_lines(graph, "main", current=None, get_summary=summary)
    assert calls == []

    assert next(lines) == "main"
    assert calls == ["main"]


def test_stack_tree_starts_at_topmost_ancestor() -> None:
    graph = _graph(("a", "main"), ("b", "a"), ("other", "main"))

    lines = list(iter_stack_tree(graph, "b", _no_summary))

    assert lines == [
        "main",
        "├─ a",
        "│  └─ b (current)",
        "└─ other",
    ]


def test_unlinked_branch_renders_alone() -> None:
    graph = _graph(("a", "main"))

    assert list(iter_stack_tree(graph, "lonely", _no_summary)) == ["lonely (current)"]


def test_cyclic_walk_to_root_raises() -> None:
    class LoopingGraph(DependencyGraph):
        def parent_of(self, branch: str) -> str | None:
            return {"a": "b", "b": "a"}.get(branch)

    with pytest.raises(CorruptStackError):
        list(iter_stack_tree(LoopingGraph({}, {}), "a", _no_summary))
