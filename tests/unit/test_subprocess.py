"""Tests for run_subprocess_with_context error enrichment."""

import subprocess
from unittest.mock import patch

import pytest

from branchstack.core.errors import ExternalCommandError
from branchstack.core.subprocess import run_subprocess_with_context


def test_success_returns_completed_process() -> None:
    completed = subprocess.CompletedProcess(args=["git", "status"], returncode=0, stdout="ok")
    with patch("branchstack.core.subprocess.subprocess.run", return_value=completed) as mock_run:
        result = run_subprocess_with_context(["git", "status"], operation_context="get status")

    assert result is completed
    mock_run.assert_called_once_with(
        ["git", "status"],
        cwd=None,
        capture_output=True,
        text=True,
        encoding="utf-8",
        check=True,
    )


def test_called_process_error_is_enriched() -> None:
    failure = subprocess.CalledProcessError(
        returncode=128,
        cmd=["git", "checkout", "nope"],
        output="",
        stderr="error: pathspec 'nope' did not match any file(s) known to git\n",
    )
    with patch("branchstack.core.subprocess.subprocess.run", side_effect=failure):
        with pytest.raises(ExternalCommandError) as exc_info:
            run_subprocess_with_context(
                ["git", "checkout", "nope"], operation_context="checkout branch 'nope'"
            )

    error = exc_info.value
    assert error.exit_code == 128
    assert error.command == ["git", "checkout", "nope"]
    assert str(error) == "Failed to checkout branch 'nope'"
    assert error.details == [
        "Command: git checkout nope",
        "Exit code: 128",
        "stderr: error: pathspec 'nope' did not match any file(s) known to git",
    ]
    assert isinstance(error.__cause__, subprocess.CalledProcessError)


def test_bytes_output_is_decoded() -> None:
    failure = subprocess.CalledProcessError(
        returncode=1, cmd=["gh"], output=b"out", stderr=b"bad token"
    )
    with patch("branchstack.core.subprocess.subprocess.run", side_effect=failure):
        with pytest.raises(ExternalCommandError) as exc_info:
            run_subprocess_with_context(["gh"], operation_context="call gh")

    assert exc_info.value.stdout == "out"
    assert exc_info.value.stderr == "bad token"


def test_missing_binary() -> None:
    with patch(
        "branchstack.core.subprocess.subprocess.run", side_effect=FileNotFoundError("gh")
    ):
        with pytest.raises(ExternalCommandError) as exc_info:
            run_subprocess_with_context(["gh", "pr", "view"], operation_context="view PR")

    assert exc_info.value.exit_code is None
    assert str(exc_info.value) == "Command not found while trying to view PR: gh"
    assert exc_info.value.details == ["Full command: gh pr view"]
