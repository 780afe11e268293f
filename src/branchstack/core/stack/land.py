"""Land-order computation and the landing sequence itself.

Planning walks parent links upward from the current branch and keeps only
branches that still need landing. Execution squash-merges them into trunk,
nearest-to-trunk first, and cleans up behind each one.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from branchstack.core.config_store import GlobalConfig
from branchstack.core.errors import CorruptStackError, ExternalCommandError, PartialLandError
from branchstack.core.git.abc import Git
from branchstack.core.stack.graph import DependencyGraph
from branchstack.core.stack.parent_links import ParentLinkStore
from branchstack.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LandResult:
    """Outcome of a completed land.

    Attributes:
        landed: Branches merged into trunk, in landing order
        relinked: Surviving children re-pointed at trunk
        warnings: Best-effort cleanup failures (never fatal)
    """

    landed: list[str] = field(default_factory=list)
    relinked: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


class LandPlanner:
    """Computes which branches to land, and in what order."""

    def __init__(self, git: Git, cwd: Path, graph: DependencyGraph, remote: str) -> None:
        self._git = git
        self._cwd = cwd
        self._graph = graph
        self._remote = remote

    def is_merged(self, branch: str, trunk: str) -> bool:
        """True when the branch tip is already contained in <remote>/<trunk>."""
        return self._git.is_ancestor(self._cwd, branch, f"{self._remote}/{trunk}")

    def _is_candidate(self, branch: str, trunk: str) -> bool:
        if not self._git.branch_exists(self._cwd, branch):
            logger.debug("Skipping %s: branch does not exist", branch)
            return False
        if self.is_merged(branch, trunk):
            logger.debug("Skipping %s: already merged into %s/%s", branch, self._remote, trunk)
            return False
        return True

    def plan(self, current: str, trunk: str) -> list[str]:
        """Branches to land, nearest-to-trunk first.

        Trunk itself is never part of the plan. Merged or missing ancestors
        are skipped but do not stop the walk.

        Raises:
            CorruptStackError: If the upward walk revisits a branch
        """
        if current == trunk:
            return []

        collected: list[str] = []
        if self._is_candidate(current, trunk):
            collected.append(current)

        visited = [current]
        position = current
        while True:
            parent = self._graph.parent_of(position)
            if parent is None or parent == trunk:
                break
            if parent in visited:
                raise CorruptStackError(visited[visited.index(parent) :] + [parent])
            visited.append(parent)
            if self._is_candidate(parent, trunk):
                collected.append(parent)
            position = parent

        collected.reverse()
        logger.debug("Land plan for %s: %s", current, collected)
        return collected


def land_stack(
    git: Git,
    cwd: Path,
    graph: DependencyGraph,
    plan: list[str],
    *,
    config: GlobalConfig,
    feedback: UserFeedback,
) -> LandResult:
    """Squash-merge each planned branch into trunk, then push trunk.

    Nothing is rolled back on failure. Remote deletion, link removal and
    re-linking of orphaned children are best effort and end up in
    LandResult.warnings.

    Raises:
        PartialLandError: If checkout, pull, merge, commit, local delete or
            the final push fails
    """
    trunk = config.trunk_branch
    remote = config.remote
    links = ParentLinkStore(git, cwd)
    landed: list[str] = []
    warnings: list[str] = []

    def fail(branch: str, e: ExternalCommandError) -> PartialLandError:
        return PartialLandError(branch=branch, landed=landed, cause=e)

    def warn(message: str) -> None:
        warnings.append(message)
        feedback.warning(f"⚠ {message}")

    feedback.info(f"Updating {trunk} from {remote}...")
    try:
        git.checkout_branch(cwd, trunk)
        git.pull_branch(cwd, remote, trunk, ff_only=True)
    except ExternalCommandError as e:
        raise fail(trunk, e) from e

    for branch in plan:
        feedback.info(f"   -> Land {branch} into {trunk}")
        try:
            git.merge_squash(cwd, branch)
            message = git.get_commit_message(cwd, branch) or f"Land {branch}"
            git.commit(cwd, message)
            git.delete_branch(cwd, branch, force=True)
        except ExternalCommandError as e:
            raise fail(branch, e) from e
        landed.append(branch)

        if config.delete_remote_branches:
            try:
                git.delete_remote_branch(cwd, remote, branch)
            except ExternalCommandError as e:
                logger.debug("Remote delete of %s failed: %s", branch, e)
                warn(f"Could not delete {remote}/{branch}: {e}")

        # Deleting the branch normally drops its link along with it
        try:
            if links.get_parent(branch) is not None:
                links.unset_parent(branch)
        except ExternalCommandError as e:
            warn(f"Could not remove parent link of {branch}: {e}")

    relinked = _relink_orphans(links, graph, landed, trunk, warn)

    feedback.info(f"Pushing {trunk} to {remote}...")
    try:
        git.push_branch(cwd, remote, trunk, force_with_lease=False)
    except ExternalCommandError as e:
        raise fail(trunk, e) from e

    return LandResult(landed=landed, relinked=relinked, warnings=warnings)


def _relink_orphans(
    links: ParentLinkStore,
    graph: DependencyGraph,
    landed: list[str],
    trunk: str,
    warn: Callable[[str], None],
) -> list[str]:
    """Point surviving children of landed branches at trunk."""
    landed_set = set(landed)
    relinked: list[str] = []
    for branch in landed:
        for child in graph.children_of(branch):
            if child in landed_set:
                continue
            try:
                links.set_parent(child, trunk)
            except ExternalCommandError as e:
                warn(f"Could not re-link {child} onto {trunk}: {e}")
                continue
            relinked.append(child)
    return relinked