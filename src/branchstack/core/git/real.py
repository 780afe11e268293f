"""Production Git implementation using subprocess.

This module provides the real Git implementation that executes actual git
commands via subprocess.
"""

import subprocess
from pathlib import Path

from branchstack.core.errors import ExternalCommandError
from branchstack.core.git.abc import Git
from branchstack.core.subprocess import run_subprocess_with_context

# ============================================================================
# Production Implementation
# ============================================================================


class RealGit(Git):
    """Production implementation using subprocess.

    All git operations execute actual git commands via subprocess.
    """

    def get_current_branch(self, cwd: Path) -> str | None:
        """Get the currently checked-out branch."""
        result = subprocess.run(
            ["git", "rev-parse", "--abbrev-ref", "HEAD"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None

        branch = result.stdout.strip()
        if branch == "HEAD":
            return None

        return branch

    def branch_exists(self, cwd: Path, branch: str) -> bool:
        """Check whether a local branch exists."""
        result = subprocess.run(
            ["git", "show-ref", "--verify", "--quiet", f"refs/heads/{branch}"],
            cwd=cwd,
            capture_output=True,
            check=False,
        )
        return result.returncode == 0

    def is_ancestor(self, cwd: Path, ancestor: str, descendant: str) -> bool:
        """Check ancestry with git merge-base --is-ancestor.

        Exit code 0 means ancestor, 1 means not; anything else (unknown ref)
        is treated as not an ancestor.
        """
        result = subprocess.run(
            ["git", "merge-base", "--is-ancestor", ancestor, descendant],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        return result.returncode == 0

    def get_commit_message(self, cwd: Path, ref: str) -> str | None:
        """Get the full message of the commit at `ref`."""
        result = subprocess.run(
            ["git", "log", "-1", "--format=%B", ref],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None

        return result.stdout.strip()

    def get_commit_summary(self, cwd: Path, ref: str) -> str | None:
        """Get "<short sha> <subject>" for the commit at `ref`."""
        result = subprocess.run(
            ["git", "log", "-1", "--format=%h %s", ref],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None

        summary = result.stdout.strip()
        return summary or None

    def get_config_value(self, cwd: Path, key: str) -> str | None:
        """Read a git config value.

        git config exits 1 when the key is unset; that is reported as None.
        """
        result = subprocess.run(
            ["git", "config", "--get", key],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None

        return result.stdout.strip()

    def set_config_value(self, cwd: Path, key: str, value: str) -> None:
        """Write a git config value."""
        run_subprocess_with_context(
            ["git", "config", key, value],
            operation_context=f"set git config '{key}'",
            cwd=cwd,
        )

    def unset_config_value(self, cwd: Path, key: str) -> None:
        """Remove a git config value."""
        run_subprocess_with_context(
            ["git", "config", "--unset", key],
            operation_context=f"unset git config '{key}'",
            cwd=cwd,
        )

    def get_config_regexp(self, cwd: Path, pattern: str) -> list[str]:
        """List config entries matching `pattern`.

        Exit code 1 means no match and yields an empty list; any other
        failure is raised.
        """
        cmd = ["git", "config", "--get-regexp", pattern]
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode == 1:
            return []
        if result.returncode != 0:
            raise ExternalCommandError(
                operation=f"list git config entries matching '{pattern}'",
                command=cmd,
                exit_code=result.returncode,
                stdout=result.stdout,
                stderr=result.stderr,
            )
        return [line for line in result.stdout.splitlines() if line.strip()]

    def checkout_branch(self, cwd: Path, branch: str) -> None:
        """Checkout a branch in the given directory."""
        run_subprocess_with_context(
            ["git", "checkout", branch],
            operation_context=f"checkout branch '{branch}'",
            cwd=cwd,
        )

    def create_and_checkout_branch(self, cwd: Path, branch: str) -> None:
        """Create a branch at HEAD and check it out."""
        run_subprocess_with_context(
            ["git", "checkout", "-b", branch],
            operation_context=f"create branch '{branch}'",
            cwd=cwd,
        )

    def delete_branch(self, cwd: Path, branch: str, *, force: bool) -> None:
        """Delete a local branch."""
        flag = "-D" if force else "-d"
        run_subprocess_with_context(
            ["git", "branch", flag, branch],
            operation_context=f"delete branch '{branch}'",
            cwd=cwd,
        )

    def rebase(self, cwd: Path, onto: str) -> None:
        """Rebase the checked-out branch onto `onto`."""
        run_subprocess_with_context(
            ["git", "rebase", onto],
            operation_context=f"rebase onto '{onto}'",
            cwd=cwd,
        )

    def merge_squash(self, cwd: Path, branch: str) -> None:
        """Stage `branch` as a squashed merge."""
        run_subprocess_with_context(
            ["git", "merge", "--squash", branch],
            operation_context=f"squash-merge branch '{branch}'",
            cwd=cwd,
        )

    def commit(self, cwd: Path, message: str) -> None:
        """Commit staged changes."""
        run_subprocess_with_context(
            ["git", "commit", "-m", message],
            operation_context="commit squashed changes",
            cwd=cwd,
        )

    def amend_commit(self, cwd: Path) -> None:
        """Amend the last commit without editing its message."""
        run_subprocess_with_context(
            ["git", "commit", "--amend", "--no-edit"],
            operation_context="amend last commit",
            cwd=cwd,
        )

    def pull_branch(self, cwd: Path, remote: str, branch: str, *, ff_only: bool) -> None:
        """Pull a specific branch from a remote."""
        cmd = ["git", "pull"]
        if ff_only:
            cmd.append("--ff-only")
        cmd.extend([remote, branch])

        run_subprocess_with_context(
            cmd,
            operation_context=f"pull branch '{branch}' from remote '{remote}'",
            cwd=cwd,
        )

    def push_branch(
        self, cwd: Path, remote: str, branch: str, *, force_with_lease: bool
    ) -> None:
        """Push a branch to a remote."""
        cmd = ["git", "push", remote, branch]
        if force_with_lease:
            cmd.append("--force-with-lease")

        run_subprocess_with_context(
            cmd,
            operation_context=f"push branch '{branch}' to remote '{remote}'",
            cwd=cwd,
        )

    def delete_remote_branch(self, cwd: Path, remote: str, branch: str) -> None:
        """Delete a branch on a remote."""
        run_subprocess_with_context(
            ["git", "push", remote, "--delete", branch],
            operation_context=f"delete branch '{branch}' on remote '{remote}'",
            cwd=cwd,
        )
