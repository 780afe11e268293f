"""Subprocess execution with rich error context.

Wraps subprocess.run() so every git/gh failure surfaces as an
ExternalCommandError carrying the operation, command line, exit code, and
captured output.
"""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from branchstack.core.errors import ExternalCommandError

logger = logging.getLogger(__name__)


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
    capture_output: bool = True,
    text: bool = True,
    encoding: str = "utf-8",
    check: bool = True,
    **kwargs: Any,
) -> subprocess.CompletedProcess[str]:
    """Execute subprocess with enriched error reporting for the gateway layer.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of operation
        cwd: Working directory for command execution
        capture_output: Whether to capture stdout/stderr (default: True)
        text: Whether to decode output as text (default: True)
        encoding: Text encoding to use (default: "utf-8")
        check: Whether to raise on non-zero exit (default: True)
        **kwargs: Additional arguments passed to subprocess.run()

    Returns:
        CompletedProcess instance from subprocess.run()

    Raises:
        ExternalCommandError: If the command fails or its binary is not found
    """
    logger.debug("Running %s (cwd=%s)", " ".join(cmd), cwd)
    try:
        return subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=capture_output,
            text=text,
            encoding=encoding,
            check=check,
            **kwargs,
        )
    except subprocess.CalledProcessError as e:
        raise ExternalCommandError(
            operation=operation_context,
            command=cmd,
            exit_code=e.returncode,
            stdout=_decode(e.stdout),
            stderr=_decode(e.stderr),
        ) from e
    except FileNotFoundError as e:
        raise ExternalCommandError(
            operation=operation_context,
            command=cmd,
            exit_code=None,
        ) from e


def _decode(output: str | bytes | None) -> str:
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode("utf-8", errors="replace")
    return output
