"""Persisted parent links, stored in git config.

Each stacked branch records its parent under ``branch.<child>.stack-parent``.
Trunk and other root branches carry no link.
"""

import logging
import re
from pathlib import Path

from branchstack.core.git.abc import Git

logger = logging.getLogger(__name__)

LINK_NAMESPACE = "branch"
LINK_SUFFIX = "stack-parent"

# Pattern handed to `git config --get-regexp`
LINK_KEY_PATTERN = rf"{LINK_NAMESPACE}\..*\.{LINK_SUFFIX}"

_LINK_KEY_RE = re.compile(rf"^{LINK_NAMESPACE}\.(?P<child>.+)\.{LINK_SUFFIX}$")


def link_key(branch: str) -> str:
    """Config key holding the parent of `branch`."""
    return f"{LINK_NAMESPACE}.{branch}.{LINK_SUFFIX}"


def parse_link_key(key: str) -> str | None:
    """Extract the child branch from a link key, or None if it isn't one."""
    match = _LINK_KEY_RE.match(key)
    if match is None:
        return None
    return match.group("child")


class ParentLinkStore:
    """Reads and writes one parent reference per branch via git config."""

    def __init__(self, git: Git, cwd: Path) -> None:
        self._git = git
        self._cwd = cwd

    def get_parent(self, branch: str) -> str | None:
        return self._git.get_config_value(self._cwd, link_key(branch))

    def set_parent(self, branch: str, parent: str) -> None:
        logger.debug("Linking %s -> %s", branch, parent)
        self._git.set_config_value(self._cwd, link_key(branch), parent)

    def unset_parent(self, branch: str) -> None:
        logger.debug("Unlinking %s", branch)
        self._git.unset_config_value(self._cwd, link_key(branch))

    def list_link_lines(self) -> list[str]:
        """Raw "<key> <parent>" lines for every stored link, in store order."""
        return self._git.get_config_regexp(self._cwd, LINK_KEY_PATTERN)
