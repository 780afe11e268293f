"""Git operations subpackage.

This subpackage provides abstractions over git operations with support for
testing via fakes.
"""

from branchstack.core.git.abc import Git
from branchstack.core.git.fake import FakeGit
from branchstack.core.git.real import RealGit

__all__ = [
    "Git",
    "RealGit",
    "FakeGit",
]
