"""Rebase propagation through the descendants of a branch."""

import logging
from pathlib import Path

from branchstack.core.errors import ExternalCommandError, RestackInterruptedError
from branchstack.core.git.abc import Git
from branchstack.core.stack.graph import DependencyGraph
from branchstack.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)


class RebasePropagator:
    """Rebases every descendant of a branch onto its (possibly updated) parent.

    The walk is pre-order depth-first: a child's whole subtree is rebased
    before its next sibling. Leaves the last rebased branch checked out;
    callers return to the starting branch themselves.
    """

    def __init__(
        self, git: Git, cwd: Path, graph: DependencyGraph, feedback: UserFeedback
    ) -> None:
        self._git = git
        self._cwd = cwd
        self._graph = graph
        self._feedback = feedback

    def propagate(self, start: str) -> list[str]:
        """Rebase all descendants of `start`.

        Returns:
            Branches rebased, in the order they were processed

        Raises:
            RestackInterruptedError: On the first failed checkout or rebase.
                Nothing already rebased is undone.
        """
        rebased: list[str] = []
        # (child, parent) pairs; pushed in reverse so the first child pops first
        work: list[tuple[str, str]] = [
            (child, start) for child in reversed(self._graph.children_of(start))
        ]

        while work:
            branch, onto = work.pop()
            self._feedback.info(f"   -> Rebase {branch} onto {onto}")
            try:
                self._git.checkout_branch(self._cwd, branch)
                self._git.rebase(self._cwd, onto)
            except ExternalCommandError as e:
                raise RestackInterruptedError(
                    branch=branch, onto=onto, rebased=rebased, cause=e
                ) from e

            rebased.append(branch)
            logger.debug("Rebased %s onto %s", branch, onto)
            work.extend((child, branch) for child in reversed(self._graph.children_of(branch)))

        return rebased


def restack_from(
    git: Git, cwd: Path, graph: DependencyGraph, feedback: UserFeedback, start: str
) -> list[str]:
    """Propagate from `start`, then check `start` out again.

    The starting branch is restored only on success; after an interruption
    git is left on the branch whose rebase stopped.
    """
    rebased = RebasePropagator(git, cwd, graph, feedback).propagate(start)
    if rebased:
        git.checkout_branch(cwd, start)
    return rebased
