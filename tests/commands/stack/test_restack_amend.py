"""Tests for `stack restack` and `stack amend`."""

from click.testing import CliRunner

from branchstack.cli.cli import cli
from branchstack.core.context import StackContext
from branchstack.core.errors import ExternalCommandError
from branchstack.core.git.fake import FakeGit

LINKS = {
    "branch.a.stack-parent": "main",
    "branch.b.stack-parent": "a",
    "branch.c.stack-parent": "b",
}


def test_restack_rebases_descendants_and_returns() -> None:
    git = FakeGit(current_branch="a", branches=["main", "a", "b", "c"], config=LINKS)
    ctx = StackContext.for_test(git=git)

    result = CliRunner().invoke(cli, ["restack"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert git.rebase_calls == [("b", "a"), ("c", "b")]
    assert git.current_branch == "a"
    assert ctx.feedback.info_messages[:3] == [
        "Restacking children of a...",
        "   -> Rebase b onto a",
        "   -> Rebase c onto b",
    ]


def test_restack_leaf_does_nothing() -> None:
    git = FakeGit(current_branch="c", branches=["main", "a", "b", "c"], config=LINKS)
    ctx = StackContext.for_test(git=git)

    result = CliRunner().invoke(cli, ["restack"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert git.rebase_calls == []
    assert git.checked_out_branches == []


def test_restack_twice_in_a_row() -> None:
    git = FakeGit(current_branch="a", branches=["main", "a", "b", "c"], config=LINKS)
    runner = CliRunner()

    first = runner.invoke(cli, ["restack"], obj=StackContext.for_test(git=git))
    second = runner.invoke(cli, ["restack"], obj=StackContext.for_test(git=git))

    assert first.exit_code == 0
    assert second.exit_code == 0
    assert git.rebase_calls == [("b", "a"), ("c", "b")] * 2


def test_restack_conflict_reports_branch_and_progress() -> None:
    conflict = ExternalCommandError(
        operation="rebase onto 'b'",
        command=["git", "rebase", "b"],
        exit_code=1,
        stderr="CONFLICT (content): Merge conflict in app.py",
    )
    git = FakeGit(
        current_branch="a",
        branches=["main", "a", "b", "c"],
        config=LINKS,
        rebase_raises={"c": conflict},
    )
    ctx = StackContext.for_test(git=git)

    result = CliRunner().invoke(cli, ["restack"], obj=ctx)

    assert result.exit_code == 1
    assert "Error: Restack stopped while rebasing 'c' onto 'b'" in result.output
    assert "Already rebased: b" in result.output
    assert git.current_branch == "c"


def test_restack_conflict_error_line_is_last_and_single() -> None:
    conflict = ExternalCommandError(
        operation="rebase onto 'b'",
        command=["git", "rebase", "b"],
        exit_code=1,
        stderr="CONFLICT (content): Merge conflict in app.py",
    )
    git = FakeGit(
        current_branch="a",
        branches=["main", "a", "b", "c"],
        config=LINKS,
        rebase_raises={"c": conflict},
    )
    ctx = StackContext.for_test(git=git)

    result = CliRunner().invoke(cli, ["restack"], obj=ctx)

    lines = result.output.rstrip().splitlines()
    assert lines[-1] == "Error: Restack stopped while rebasing 'c' onto 'b'"
    assert [line for line in lines if line.startswith("Error:")] == [lines[-1]]
    assert "stderr: CONFLICT (content): Merge conflict in app.py" in lines[:-1]


def test_restack_with_cyclic_links_fails() -> None:
    git = FakeGit(
        current_branch="a",
        branches=["a", "b"],
        config={"branch.a.stack-parent": "b", "branch.b.stack-parent": "a"},
    )
    ctx = StackContext.for_test(git=git)

    result = CliRunner().invoke(cli, ["restack"], obj=ctx)

    assert result.exit_code == 1
    assert "Parent links form a cycle" in result.output
    assert git.rebase_calls == []


def test_amend_then_restack() -> None:
    git = FakeGit(current_branch="a", branches=["main", "a", "b", "c"], config=LINKS)
    ctx = StackContext.for_test(git=git)

    result = CliRunner().invoke(cli, ["amend"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert git.amend_calls == ["a"]
    assert git.rebase_calls == [("b", "a"), ("c", "b")]
    assert git.current_branch == "a"


def test_amend_failure_skips_restack() -> None:
    git = FakeGit(
        current_branch="a",
        branches=["main", "a", "b"],
        config=LINKS,
        amend_raises=ExternalCommandError(
            operation="amend last commit",
            command=["git", "commit", "--amend", "--no-edit"],
            exit_code=1,
        ),
    )
    ctx = StackContext.for_test(git=git)

    result = CliRunner().invoke(cli, ["amend"], obj=ctx)

    assert result.exit_code == 1
    assert "Failed to amend last commit" in result.output
    assert git.rebase_calls == []
