"""Production implementation of GitHub operations."""

import subprocess
from pathlib import Path

from branchstack.core.github.abc import GitHub
from branchstack.core.subprocess import run_subprocess_with_context


class RealGitHub(GitHub):
    """Production implementation using gh CLI.

    All GitHub operations execute actual gh commands via subprocess.
    """

    def pr_exists(self, repo_root: Path, branch: str) -> bool:
        """Check for a PR with gh pr view.

        Note: a non-zero exit covers both "no PR" and "gh cannot answer";
        submit then falls through to create_pr, which reports the real error.
        """
        try:
            result = subprocess.run(
                ["gh", "pr", "view", branch, "--json", "number"],
                cwd=repo_root,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError:
            return False
        return result.returncode == 0

    def update_pr_base(self, repo_root: Path, branch: str, base: str) -> None:
        """Update base branch of the PR for `branch`."""
        run_subprocess_with_context(
            ["gh", "pr", "edit", branch, "--base", base],
            operation_context=f"update PR base for '{branch}' to '{base}'",
            cwd=repo_root,
        )

    def create_pr(self, repo_root: Path, branch: str, title: str, body: str, base: str) -> str:
        """Create a pull request using gh CLI."""
        cmd = [
            "gh",
            "pr",
            "create",
            "--base",
            base,
            "--head",
            branch,
            "--title",
            title,
            "--body",
            body,
        ]

        result = run_subprocess_with_context(
            cmd,
            operation_context=f"create pull request for branch '{branch}'",
            cwd=repo_root,
        )

        # gh prints the PR URL as the last line of stdout
        lines = result.stdout.strip().splitlines()
        return lines[-1] if lines else ""
