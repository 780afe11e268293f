"""Abstract base class for GitHub operations."""

from abc import ABC, abstractmethod
from pathlib import Path


class GitHub(ABC):
    """Abstract interface for GitHub operations.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def pr_exists(self, repo_root: Path, branch: str) -> bool:
        """Check whether a pull request exists for `branch`.

        Returns False when gh reports no PR (or cannot answer).
        """
        ...

    @abstractmethod
    def update_pr_base(self, repo_root: Path, branch: str, base: str) -> None:
        """Point the pull request for `branch` at a new base branch.

        Raises:
            ExternalCommandError: If gh fails
        """
        ...

    @abstractmethod
    def create_pr(self, repo_root: Path, branch: str, title: str, body: str, base: str) -> str:
        """Create a pull request from `branch` into `base`.

        Args:
            repo_root: Repository root directory
            branch: Source branch for the PR
            title: PR title
            body: PR body (markdown, may be empty)
            base: Target base branch

        Returns:
            URL of the created PR as printed by gh

        Raises:
            ExternalCommandError: If gh fails
        """
        ...
