"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

import click

from branchstack.cli.output import user_output
from branchstack.core.config_store import ConfigStore, GlobalConfig, RealConfigStore
from branchstack.core.git.abc import Git
from branchstack.core.git.real import RealGit
from branchstack.core.github.abc import GitHub
from branchstack.core.github.real import RealGitHub
from branchstack.core.stack.parent_links import ParentLinkStore
from branchstack.core.user_feedback import InteractiveFeedback, SuppressedFeedback, UserFeedback


@dataclass(frozen=True)
class StackContext:
    """Immutable context holding all dependencies for stack operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    git: Git
    github: GitHub
    config_store: ConfigStore
    feedback: UserFeedback
    cwd: Path  # Current working directory at CLI invocation
    config: GlobalConfig

    @property
    def links(self) -> ParentLinkStore:
        return ParentLinkStore(self.git, self.cwd)

    @property
    def trunk(self) -> str:
        return self.config.trunk_branch

    @staticmethod
    def for_test(
        git: Git | None = None,
        github: GitHub | None = None,
        config_store: ConfigStore | None = None,
        feedback: UserFeedback | None = None,
        cwd: Path | None = None,
        config: GlobalConfig | None = None,
    ) -> "StackContext":
        """Create test context with optional pre-configured fakes.

        Any dependency left as None gets an empty fake; config defaults to
        GlobalConfig() and the config store is seeded with it.

        Example:
            >>> git = FakeGit(current_branch="feat-1", branches=["main"])
            >>> ctx = StackContext.for_test(git=git)
        """
        from tests.fakes.user_feedback import FakeUserFeedback

        from branchstack.core.config_store import FakeConfigStore
        from branchstack.core.git.fake import FakeGit
        from branchstack.core.github.fake import FakeGitHub

        if git is None:
            git = FakeGit()

        if github is None:
            github = FakeGitHub()

        if feedback is None:
            feedback = FakeUserFeedback()

        if config is None:
            config = GlobalConfig()

        if config_store is None:
            config_store = FakeConfigStore(config=config)

        return StackContext(
            git=git,
            github=github,
            config_store=config_store,
            feedback=feedback,
            cwd=cwd or Path("/test/repo"),
            config=config,
        )


def safe_cwd() -> tuple[Path | None, str | None]:
    """Get current working directory, detecting if it no longer exists.

    Returns:
        (Path, None) on success, (None, error_message) if the directory is gone
    """
    try:
        cwd_path = Path.cwd()
        return (cwd_path, None)
    except (FileNotFoundError, OSError):
        return (None, "Current working directory no longer exists")


def create_context(*, quiet: bool) -> StackContext:
    """Create production context with real implementations.

    Args:
        quiet: If True, use SuppressedFeedback so progress notices are hidden

    Raises:
        ConfigError: If the global config file is malformed
    """
    cwd_result, error_msg = safe_cwd()
    if cwd_result is None:
        assert error_msg is not None
        user_output(click.style("Error: ", fg="red") + error_msg)
        raise SystemExit(1)

    config_store = RealConfigStore()
    config = config_store.load_or_default()

    feedback: UserFeedback
    if quiet:
        feedback = SuppressedFeedback()
    else:
        feedback = InteractiveFeedback()

    return StackContext(
        git=RealGit(),
        github=RealGitHub(),
        config_store=config_store,
        feedback=feedback,
        cwd=cwd_result,
        config=config,
    )
