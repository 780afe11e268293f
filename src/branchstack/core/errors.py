"""Error taxonomy for stack operations.

Every failure that reaches the CLI boundary is a StackError. Subclasses let
callers tell "nothing to do" apart from a failed git command without
matching on message text.

The message of a StackError is always one line. Anything longer (command
output, progress made before the failure, recovery hints) goes in
`details`, which the CLI writes to stderr ahead of the "Error:" line.
"""

from collections.abc import Sequence


class StackError(Exception):
    """Base class for all branchstack failures."""

    def __init__(self, message: str, details: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.details = list(details)


class UsageError(StackError):
    """Invalid arguments or an operation requested in the wrong state."""


class NotFoundError(StackError):
    """A branch, link, or other required object does not exist."""


class NothingToDoError(StackError):
    """The requested operation has no work to perform."""


class ConfigError(StackError):
    """The configuration file is malformed or holds an invalid value."""


class CorruptStackError(StackError):
    """Parent links form a cycle, so the stack cannot be walked."""

    def __init__(self, cycle: Sequence[str]) -> None:
        self.cycle = list(cycle)
        path = " -> ".join(self.cycle)
        super().__init__(
            f"Parent links form a cycle: {path}",
            ["Fix one link with: git config branch.<name>.stack-parent <parent>"],
        )


class ExternalCommandError(StackError):
    """An external command (git, gh) exited non-zero or could not be started."""

    def __init__(
        self,
        *,
        operation: str,
        command: Sequence[str],
        exit_code: int | None,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        self.operation = operation
        self.command = list(command)
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr

        cmd_str = " ".join(str(arg) for arg in self.command)
        if exit_code is None:
            message = f"Command not found while trying to {operation}: {self.command[0]}"
            details = [f"Full command: {cmd_str}"]
        else:
            message = f"Failed to {operation}"
            details = [f"Command: {cmd_str}", f"Exit code: {exit_code}"]
            if stdout.strip():
                details.append(f"stdout: {stdout.strip()}")
            if stderr.strip():
                details.append(f"stderr: {stderr.strip()}")
        super().__init__(message, details)


class RestackInterruptedError(StackError):
    """A rebase or checkout failed partway through restacking."""

    def __init__(
        self,
        *,
        branch: str,
        onto: str,
        rebased: Sequence[str],
        cause: ExternalCommandError,
    ) -> None:
        self.branch = branch
        self.onto = onto
        self.rebased = list(rebased)
        self.cause = cause
        done = ", ".join(self.rebased) if self.rebased else "none"
        super().__init__(
            f"Restack stopped while rebasing '{branch}' onto '{onto}'",
            [
                str(cause),
                *cause.details,
                f"Already rebased: {done}",
                "Resolve the rebase in git (git rebase --continue or --abort), "
                "then run 'stack restack' again.",
            ],
        )


class PartialLandError(StackError):
    """Landing stopped after some branches were already merged into trunk."""

    def __init__(
        self,
        *,
        branch: str,
        landed: Sequence[str],
        cause: ExternalCommandError,
    ) -> None:
        self.branch = branch
        self.landed = list(landed)
        self.cause = cause
        done = ", ".join(self.landed) if self.landed else "none"
        super().__init__(
            f"Landing stopped at '{branch}'",
            [str(cause), *cause.details, f"Already landed: {done}"],
        )
