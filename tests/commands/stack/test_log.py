"""Tests for `stack log`."""

from click.testing import CliRunner

from branchstack.cli.cli import cli
from branchstack.core.context import StackContext
from branchstack.core.git.fake import FakeGit


def test_log_renders_tree_from_topmost_ancestor() -> None:
    git = FakeGit(
        current_branch="Z",
        branches=["R", "X", "Y", "Z"],
        config={
            "branch.X.stack-parent": "R",
            "branch.Y.stack-parent": "R",
            "branch.Z.stack-parent": "X",
        },
    )
    ctx = StackContext.for_test(git=git)

    result = CliRunner().invoke(cli, ["log"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "R",
        "├─ X",
        "│  └─ Z (current)",
        "└─ Y",
    ]


def test_log_shows_commit_summaries() -> None:
    git = FakeGit(
        current_branch="main",
        branches=["main", "feat"],
        config={"branch.feat.stack-parent": "main"},
        commit_summaries={"main": "1a2b3c4 Initial", "feat": "5d6e7f8 Add feat"},
    )
    ctx = StackContext.for_test(git=git)

    result = CliRunner().invoke(cli, ["log"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "main (current)  1a2b3c4 Initial",
        "└─ feat  5d6e7f8 Add feat",
    ]


def test_log_without_links_shows_current_branch() -> None:
    ctx = StackContext.for_test(git=FakeGit(current_branch="main"))

    result = CliRunner().invoke(cli, ["log"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["main (current)"]
