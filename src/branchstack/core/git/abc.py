"""High-level git operations interface.

This module provides a clean abstraction over git subprocess calls, making the
codebase more testable and maintainable.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using subprocess
- FakeGit: In-memory implementation for tests
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Git(ABC):
    """Abstract interface for git operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.

    Mutating operations raise ExternalCommandError on failure. Query
    operations return None/False/empty for "not there" instead of raising.
    """

    # Branch queries

    @abstractmethod
    def get_current_branch(self, cwd: Path) -> str | None:
        """Get the currently checked-out branch (None when HEAD is detached)."""
        ...

    @abstractmethod
    def branch_exists(self, cwd: Path, branch: str) -> bool:
        """Check whether a local branch exists."""
        ...

    @abstractmethod
    def is_ancestor(self, cwd: Path, ancestor: str, descendant: str) -> bool:
        """Check whether `ancestor` is reachable from `descendant`.

        Returns False when either ref is unknown.
        """
        ...

    @abstractmethod
    def get_commit_message(self, cwd: Path, ref: str) -> str | None:
        """Get the full message of the commit at `ref`."""
        ...

    @abstractmethod
    def get_commit_summary(self, cwd: Path, ref: str) -> str | None:
        """Get a one-line summary ("<short sha> <subject>") of the commit at `ref`."""
        ...

    # Config

    @abstractmethod
    def get_config_value(self, cwd: Path, key: str) -> str | None:
        """Read a single git config value (None when unset)."""
        ...

    @abstractmethod
    def set_config_value(self, cwd: Path, key: str, value: str) -> None:
        """Write a git config value."""
        ...

    @abstractmethod
    def unset_config_value(self, cwd: Path, key: str) -> None:
        """Remove a git config value."""
        ...

    @abstractmethod
    def get_config_regexp(self, cwd: Path, pattern: str) -> list[str]:
        """List "<key> <value>" lines whose key matches `pattern`.

        Returns an empty list when nothing matches.
        """
        ...

    # Branch mutations

    @abstractmethod
    def checkout_branch(self, cwd: Path, branch: str) -> None:
        """Checkout a branch in the given directory."""
        ...

    @abstractmethod
    def create_and_checkout_branch(self, cwd: Path, branch: str) -> None:
        """Create a branch at HEAD and check it out (git checkout -b)."""
        ...

    @abstractmethod
    def delete_branch(self, cwd: Path, branch: str, *, force: bool) -> None:
        """Delete a local branch.

        Args:
            cwd: Working directory to run command in
            branch: Name of the branch to delete
            force: Use -D (force delete) instead of -d
        """
        ...

    @abstractmethod
    def rebase(self, cwd: Path, onto: str) -> None:
        """Rebase the checked-out branch onto `onto`."""
        ...

    @abstractmethod
    def merge_squash(self, cwd: Path, branch: str) -> None:
        """Stage the changes of `branch` as a squashed merge (no commit)."""
        ...

    @abstractmethod
    def commit(self, cwd: Path, message: str) -> None:
        """Commit staged changes with `message`."""
        ...

    @abstractmethod
    def amend_commit(self, cwd: Path) -> None:
        """Amend the last commit, keeping its message."""
        ...

    # Remote operations

    @abstractmethod
    def pull_branch(self, cwd: Path, remote: str, branch: str, *, ff_only: bool) -> None:
        """Pull a specific branch from a remote."""
        ...

    @abstractmethod
    def push_branch(
        self, cwd: Path, remote: str, branch: str, *, force_with_lease: bool
    ) -> None:
        """Push a branch to a remote."""
        ...

    @abstractmethod
    def delete_remote_branch(self, cwd: Path, remote: str, branch: str) -> None:
        """Delete a branch on a remote."""
        ...
