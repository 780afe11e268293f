"""Fake GitHub operations for testing.

FakeGitHub is an in-memory implementation that accepts pre-configured state
in its constructor. Construct instances directly with keyword arguments.
"""

from pathlib import Path

from branchstack.core.github.abc import GitHub


class FakeGitHub(GitHub):
    """In-memory fake implementation of GitHub operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults (empty dicts).
    """

    def __init__(
        self,
        *,
        prs: dict[str, str] | None = None,
        create_pr_raises: Exception | None = None,
        update_pr_base_raises: Exception | None = None,
    ) -> None:
        """Create FakeGitHub with pre-configured state.

        Args:
            prs: Mapping of branch name -> current PR base branch
            create_pr_raises: Exception to raise when create_pr() is called
            update_pr_base_raises: Exception to raise when update_pr_base() is called
        """
        self._prs = dict(prs) if prs is not None else {}
        self._create_pr_raises = create_pr_raises
        self._update_pr_base_raises = update_pr_base_raises
        self._created_prs: list[tuple[str, str, str, str]] = []
        self._updated_bases: list[tuple[str, str]] = []

    def pr_exists(self, repo_root: Path, branch: str) -> bool:
        return branch in self._prs

    def update_pr_base(self, repo_root: Path, branch: str, base: str) -> None:
        if self._update_pr_base_raises is not None:
            raise self._update_pr_base_raises
        self._prs[branch] = base
        self._updated_bases.append((branch, base))

    def create_pr(self, repo_root: Path, branch: str, title: str, body: str, base: str) -> str:
        if self._create_pr_raises is not None:
            raise self._create_pr_raises
        self._prs[branch] = base
        self._created_prs.append((branch, title, body, base))
        return f"https://github.com/owner/repo/pull/{len(self._created_prs)}"

    @property
    def created_prs(self) -> list[tuple[str, str, str, str]]:
        """Read-only access to created PRs as (branch, title, body, base)."""
        return self._created_prs

    @property
    def updated_bases(self) -> list[tuple[str, str]]:
        """Read-only access to base updates as (branch, base)."""
        return self._updated_bases
