"""Fake Git implementation for testing.

FakeGit is an in-memory implementation that accepts pre-configured state
in its constructor. Construct instances directly with keyword arguments.
"""

import re
from pathlib import Path

from branchstack.core.errors import ExternalCommandError
from branchstack.core.git.abc import Git


def _git_error(
    operation: str, cmd: list[str], stderr: str, exit_code: int = 1
) -> ExternalCommandError:
    return ExternalCommandError(
        operation=operation,
        command=cmd,
        exit_code=exit_code,
        stderr=stderr,
    )


class FakeGit(Git):
    """In-memory fake implementation of git operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults (empty collections).

    Mutations are tracked in call lists exposed as read-only properties so tests
    can assert on exactly what the code under test asked git to do.
    """

    def __init__(
        self,
        *,
        current_branch: str | None = None,
        branches: list[str] | None = None,
        config: dict[str, str] | None = None,
        commit_messages: dict[str, str] | None = None,
        commit_summaries: dict[str, str] | None = None,
        ancestors: dict[str, set[str]] | None = None,
        checkout_raises: dict[str, Exception] | None = None,
        rebase_raises: dict[str, Exception] | None = None,
        merge_raises: dict[str, Exception] | None = None,
        commit_raises: Exception | None = None,
        amend_raises: Exception | None = None,
        pull_raises: Exception | None = None,
        push_raises: dict[str, Exception] | None = None,
        delete_remote_raises: dict[str, Exception] | None = None,
        unset_config_raises: dict[str, Exception] | None = None,
        set_config_raises: dict[str, Exception] | None = None,
    ) -> None:
        """Create FakeGit with pre-configured state.

        Args:
            current_branch: Branch checked out initially (None = detached HEAD)
            branches: Local branch names; the current branch is added if missing
            config: Initial git config entries, enumerated in insertion order
            commit_messages: Mapping of ref -> full commit message
            commit_summaries: Mapping of ref -> one-line summary
            ancestors: Mapping of descendant ref -> refs that are its ancestors
                (e.g. {"origin/main": {"feat-1"}} marks feat-1 as merged)
            checkout_raises: Branch -> exception raised when checking it out
            rebase_raises: Branch -> exception raised when rebasing it
            merge_raises: Branch -> exception raised when squash-merging it
            commit_raises: Exception raised by commit()
            amend_raises: Exception raised by amend_commit()
            pull_raises: Exception raised by pull_branch()
            push_raises: Branch -> exception raised when pushing it
            delete_remote_raises: Branch -> exception raised on remote delete
            unset_config_raises: Config key -> exception raised on unset
            set_config_raises: Config key -> exception raised on set
        """
        self._current_branch = current_branch
        self._branches = list(branches) if branches is not None else []
        if current_branch is not None and current_branch not in self._branches:
            self._branches.append(current_branch)
        self._config = dict(config) if config is not None else {}
        self._commit_messages = commit_messages if commit_messages is not None else {}
        self._commit_summaries = commit_summaries if commit_summaries is not None else {}
        self._ancestors = ancestors if ancestors is not None else {}
        self._checkout_raises = checkout_raises if checkout_raises is not None else {}
        self._rebase_raises = rebase_raises if rebase_raises is not None else {}
        self._merge_raises = merge_raises if merge_raises is not None else {}
        self._commit_raises = commit_raises
        self._amend_raises = amend_raises
        self._pull_raises = pull_raises
        self._push_raises = push_raises if push_raises is not None else {}
        self._delete_remote_raises = (
            delete_remote_raises if delete_remote_raises is not None else {}
        )
        self._unset_config_raises = unset_config_raises if unset_config_raises is not None else {}
        self._set_config_raises = set_config_raises if set_config_raises is not None else {}

        self._checked_out_branches: list[str] = []
        self._created_branches: list[str] = []
        self._deleted_branches: list[str] = []
        self._rebase_calls: list[tuple[str, str]] = []
        self._squash_merges: list[tuple[str, str]] = []
        self._commits: list[tuple[str, str]] = []
        self._amend_calls: list[str] = []
        self._pulled_branches: list[tuple[str, str, bool]] = []
        self._pushed_branches: list[tuple[str, str, bool]] = []
        self._deleted_remote_branches: list[tuple[str, str]] = []
        self._unset_config_keys: list[str] = []

    # Queries

    def get_current_branch(self, cwd: Path) -> str | None:
        return self._current_branch

    def branch_exists(self, cwd: Path, branch: str) -> bool:
        return branch in self._branches

    def is_ancestor(self, cwd: Path, ancestor: str, descendant: str) -> bool:
        return ancestor in self._ancestors.get(descendant, set())

    def get_commit_message(self, cwd: Path, ref: str) -> str | None:
        return self._commit_messages.get(ref)

    def get_commit_summary(self, cwd: Path, ref: str) -> str | None:
        return self._commit_summaries.get(ref)

    def get_config_value(self, cwd: Path, key: str) -> str | None:
        return self._config.get(key)

    def set_config_value(self, cwd: Path, key: str, value: str) -> None:
        if key in self._set_config_raises:
            raise self._set_config_raises[key]
        self._config[key] = value

    def unset_config_value(self, cwd: Path, key: str) -> None:
        if key in self._unset_config_raises:
            raise self._unset_config_raises[key]
        if key not in self._config:
            raise _git_error(
                f"unset git config '{key}'", ["git", "config", "--unset", key], "", exit_code=5
            )
        del self._config[key]
        self._unset_config_keys.append(key)

    def get_config_regexp(self, cwd: Path, pattern: str) -> list[str]:
        regex = re.compile(pattern)
        return [f"{key} {value}" for key, value in self._config.items() if regex.search(key)]

    # Mutations

    def checkout_branch(self, cwd: Path, branch: str) -> None:
        if branch in self._checkout_raises:
            raise self._checkout_raises[branch]
        if branch not in self._branches:
            raise _git_error(
                f"checkout branch '{branch}'",
                ["git", "checkout", branch],
                f"error: pathspec '{branch}' did not match any file(s) known to git",
            )
        self._current_branch = branch
        self._checked_out_branches.append(branch)

    def create_and_checkout_branch(self, cwd: Path, branch: str) -> None:
        if branch in self._branches:
            raise _git_error(
                f"create branch '{branch}'",
                ["git", "checkout", "-b", branch],
                f"fatal: a branch named '{branch}' already exists",
                exit_code=128,
            )
        self._branches.append(branch)
        self._created_branches.append(branch)
        self._current_branch = branch

    def delete_branch(self, cwd: Path, branch: str, *, force: bool) -> None:
        if branch not in self._branches:
            raise _git_error(
                f"delete branch '{branch}'",
                ["git", "branch", "-D" if force else "-d", branch],
                f"error: branch '{branch}' not found.",
            )
        self._branches.remove(branch)
        self._deleted_branches.append(branch)
        # git drops the branch's whole config section along with the branch
        section = f"branch.{branch}."
        for key in [k for k in self._config if k.startswith(section)]:
            del self._config[key]

    def rebase(self, cwd: Path, onto: str) -> None:
        branch = self._current_branch or "HEAD"
        if branch in self._rebase_raises:
            raise self._rebase_raises[branch]
        self._rebase_calls.append((branch, onto))

    def merge_squash(self, cwd: Path, branch: str) -> None:
        if branch in self._merge_raises:
            raise self._merge_raises[branch]
        self._squash_merges.append((self._current_branch or "HEAD", branch))

    def commit(self, cwd: Path, message: str) -> None:
        if self._commit_raises is not None:
            raise self._commit_raises
        self._commits.append((self._current_branch or "HEAD", message))

    def amend_commit(self, cwd: Path) -> None:
        if self._amend_raises is not None:
            raise self._amend_raises
        self._amend_calls.append(self._current_branch or "HEAD")

    def pull_branch(self, cwd: Path, remote: str, branch: str, *, ff_only: bool) -> None:
        if self._pull_raises is not None:
            raise self._pull_raises
        self._pulled_branches.append((remote, branch, ff_only))

    def push_branch(
        self, cwd: Path, remote: str, branch: str, *, force_with_lease: bool
    ) -> None:
        if branch in self._push_raises:
            raise self._push_raises[branch]
        self._pushed_branches.append((remote, branch, force_with_lease))

    def delete_remote_branch(self, cwd: Path, remote: str, branch: str) -> None:
        if branch in self._delete_remote_raises:
            raise self._delete_remote_raises[branch]
        self._deleted_remote_branches.append((remote, branch))

    # Read-only state for assertions

    @property
    def current_branch(self) -> str | None:
        return self._current_branch

    @property
    def branches(self) -> list[str]:
        return list(self._branches)

    @property
    def config(self) -> dict[str, str]:
        return dict(self._config)

    @property
    def checked_out_branches(self) -> list[str]:
        return self._checked_out_branches

    @property
    def created_branches(self) -> list[str]:
        return self._created_branches

    @property
    def deleted_branches(self) -> list[str]:
        return self._deleted_branches

    @property
    def rebase_calls(self) -> list[tuple[str, str]]:
        """(branch, onto) pairs in call order."""
        return self._rebase_calls

    @property
    def squash_merges(self) -> list[tuple[str, str]]:
        """(target, merged branch) pairs in call order."""
        return self._squash_merges

    @property
    def commits(self) -> list[tuple[str, str]]:
        """(branch, message) pairs in call order."""
        return self._commits

    @property
    def amend_calls(self) -> list[str]:
        return self._amend_calls

    @property
    def pulled_branches(self) -> list[tuple[str, str, bool]]:
        return self._pulled_branches

    @property
    def pushed_branches(self) -> list[tuple[str, str, bool]]:
        return self._pushed_branches

    @property
    def deleted_remote_branches(self) -> list[tuple[str, str]]:
        return self._deleted_remote_branches

    @property
    def unset_config_keys(self) -> list[str]:
        return self._unset_config_keys
