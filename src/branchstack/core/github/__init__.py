"""GitHub operations subpackage (gh CLI gateway)."""

from branchstack.core.github.abc import GitHub
from branchstack.core.github.fake import FakeGitHub
from branchstack.core.github.real import RealGitHub

__all__ = ["GitHub", "RealGitHub", "FakeGitHub"]
