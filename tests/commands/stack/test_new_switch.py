"""Tests for `stack new` and `stack switch`."""

from click.testing import CliRunner

from branchstack.cli.cli import cli
from branchstack.core.context import StackContext
from branchstack.core.git.fake import FakeGit


def test_new_creates_branch_and_records_parent() -> None:
    git = FakeGit(current_branch="main")
    ctx = StackContext.for_test(git=git)

    result = CliRunner().invoke(cli, ["new", "feat-1"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert git.created_branches == ["feat-1"]
    assert git.current_branch == "feat-1"
    assert git.config == {"branch.feat-1.stack-parent": "main"}
    assert ctx.feedback.info_messages == ["Creating branch 'feat-1' tracking parent 'main'"]


def test_new_stacks_on_feature_branch() -> None:
    git = FakeGit(current_branch="feat-1", branches=["main"])
    ctx = StackContext.for_test(git=git)

    result = CliRunner().invoke(cli, ["new", "feat-2"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert git.config["branch.feat-2.stack-parent"] == "feat-1"


def test_new_rejects_existing_branch() -> None:
    git = FakeGit(current_branch="main", branches=["feat-1"])
    ctx = StackContext.for_test(git=git)

    result = CliRunner().invoke(cli, ["new", "feat-1"], obj=ctx)

    assert result.exit_code == 1
    assert "Branch 'feat-1' already exists" in result.output
    assert git.config == {}


def test_new_requires_a_name() -> None:
    ctx = StackContext.for_test(git=FakeGit(current_branch="main"))

    result = CliRunner().invoke(cli, ["new"], obj=ctx)

    assert result.exit_code != 0
    assert "Missing argument" in result.output


def test_new_on_detached_head_fails() -> None:
    git = FakeGit(current_branch=None, branches=["main"])
    ctx = StackContext.for_test(git=git)

    result = CliRunner().invoke(cli, ["new", "feat-1"], obj=ctx)

    assert result.exit_code == 1
    assert "Error: Not on a branch (detached HEAD)" in result.output
    assert git.created_branches == []


def test_switch_checks_out_branch() -> None:
    git = FakeGit(current_branch="main", branches=["feat-1"])
    ctx = StackContext.for_test(git=git)

    result = CliRunner().invoke(cli, ["switch", "feat-1"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert git.current_branch == "feat-1"


def test_switch_unknown_branch_shows_git_diagnostics() -> None:
    git = FakeGit(current_branch="main")
    ctx = StackContext.for_test(git=git)

    result = CliRunner().invoke(cli, ["switch", "nope"], obj=ctx)

    assert result.exit_code == 1
    assert "Error: Failed to checkout branch 'nope'" in result.output
    assert "did not match any file(s) known to git" in result.output
    assert git.current_branch == "main"
