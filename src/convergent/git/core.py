"""Core git command execution utilities.

This module provides low-level utilities for executing git commands via subprocess.
It handles command execution, output capture, and error handling for git operations.
"""

import logging
import os
import re
import subprocess

logger = logging.getLogger("convergent.git.core")


class GitCommandError(Exception):
    """Raised when a git command exits with non-zero status.

    This exception is raised when any git subprocess command fails,
    carrying the stderr output as the error message.
    """


def sanitize(message: str, path: str) -> str:
    """Replace every occurrence of an absolute path in a message with ".".

    Args:
        message (str): Text that may mention the path, typically git stderr.
        path (str): The path to hide.

    Returns:
        str: The message with the path replaced.
    """
    if not path:
        return message
    return re.sub(re.escape(path), ".", message)


def execute(cmd: list[str], cwd: str | None = None) -> str:
    """Execute a git command and return its stdout.

    Automatically prepends "git" if not already present, so both
    ``execute(["status"])`` and ``execute(["git", "status"])`` work.

    Args:
        cmd (list[str]): The command to execute. The "git" prefix is optional
            and will be auto-prepended if missing (e.g., ["status"] or ["git", "status"]).
        cwd (str | None): Directory to run the command in. Defaults to the
            current working directory.

    Returns:
        str: The stripped stdout output from the command.

    Raises:
        GitCommandError: If the command exits with a non-zero return code.
    """
    if cmd[0] != "git":
        cmd = ["git"] + cmd
    logger.debug(f"Executing: {cmd} (cwd={cwd})")
    result = subprocess.run(cmd, capture_output=True, text=True, cwd=cwd)
    if result.returncode != 0:
        raise GitCommandError(result.stderr.strip())
    return result.stdout.strip()


def is_repository(path: str) -> bool:
    """Check whether a directory is inside a git work tree.

    Args:
        path (str): Directory to check.

    Returns:
        bool: True if ``git rev-parse --git-dir`` succeeds in path. False if
            path is not an existing directory.

    Raises:
        FileNotFoundError: If the git binary cannot be found.
    """
    if not os.path.isdir(path):
        return False
    try:
        execute(["rev-parse", "--git-dir"], cwd=path)
    except GitCommandError:
        return False
    return True
