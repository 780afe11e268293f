"""User-facing diagnostic output with mode awareness."""

from abc import ABC, abstractmethod

import click

from branchstack.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing diagnostic output that's mode-aware.

    This abstraction eliminates the need to thread 'quiet' booleans through
    function signatures. Stack operations call ctx.feedback methods which
    handle output suppression based on the current mode.

    Two modes:
    - Interactive: Show all diagnostics (info, success, warnings)
    - Quiet: Suppress info and success; warnings still appear

    Usage:
        ctx.feedback.info("   -> Rebase feat-2 onto feat-1")
        ctx.feedback.success("✓ Restack complete")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message (suppressed in quiet mode)."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message (suppressed in quiet mode)."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show warning message (always shown)."""


class InteractiveFeedback(UserFeedback):
    """Feedback shown in interactive mode (all messages)."""

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green"))

    def warning(self, message: str) -> None:
        user_output(click.style(message, fg="yellow"))


class SuppressedFeedback(UserFeedback):
    """Feedback for --quiet mode (only warnings shown)."""

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        user_output(click.style(message, fg="yellow"))
