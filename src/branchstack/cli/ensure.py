"""Precondition checks for CLI commands.

Failures print a red "Error:" line to stderr and exit with status 1, the
same shape main() gives StackError failures.
"""

from typing import TYPE_CHECKING

import click

from branchstack.cli.output import user_output
from branchstack.core.errors import NotFoundError

if TYPE_CHECKING:
    from branchstack.core.context import StackContext


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)

    @staticmethod
    def current_branch(ctx: "StackContext") -> str:
        """Return the checked-out branch.

        Raises:
            NotFoundError: On detached HEAD
        """
        branch = ctx.git.get_current_branch(ctx.cwd)
        if branch is None:
            raise NotFoundError("Not on a branch (detached HEAD)")
        return branch
