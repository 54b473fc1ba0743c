"""Git branch utilities.

This module provides high-level utilities for working with git branches:
querying the current branch and creating the timestamped branch each
Convergent run works on.
"""

import logging
import os
from datetime import datetime

from convergent.git.core import GitCommandError, execute, is_repository, sanitize

logger = logging.getLogger("convergent.git.branch")

DEFAULT_PREFIX = "convergent/run-"


class NotAGitRepositoryError(GitCommandError):
    """Raised when a branch operation targets a directory outside any git repository."""


class BranchExistsError(GitCommandError):
    """Raised when the branch to create already exists."""


def current(cwd: str | None = None) -> str:
    """Get the name of the current git branch.

    Args:
        cwd (str | None): Repository directory. Defaults to the current directory.

    Returns:
        str: The current branch name, or "HEAD" if in detached HEAD state.

    Raises:
        GitCommandError: If the git command fails.
    """
    return execute(["rev-parse", "--abbrev-ref", "HEAD"], cwd=cwd)


def run_branch_name(timestamp: datetime | None = None, prefix: str = DEFAULT_PREFIX) -> str:
    """Build a run branch name such as ``convergent/run-20240115090503``."""
    timestamp = timestamp or datetime.now()
    return f"{prefix}{timestamp.strftime('%Y%m%d%H%M%S')}"


def create_run_branch(
    project_root: str,
    timestamp: datetime | None = None,
    prefix: str | None = None,
) -> str:
    """Create and check out a timestamped run branch.

    Runs ``git checkout -b <prefix><YYYYMMDDhhmmss>`` in project_root. Error
    messages never contain the absolute project_root path; it is replaced
    with ".".

    Args:
        project_root (str): Directory of the repository to branch.
        timestamp (datetime | None): Time encoded in the branch name. Defaults
            to now.
        prefix (str | None): Branch name prefix. Defaults to "convergent/run-".

    Returns:
        str: The name of the branch that was created.

    Raises:
        NotAGitRepositoryError: If project_root is not inside a git repository.
        BranchExistsError: If the branch already exists.
        GitCommandError: If git fails for any other reason.
        FileNotFoundError: If the git binary cannot be found.

    Example:
        >>> create_run_branch(".", datetime(2024, 1, 15, 9, 5, 3))
        'convergent/run-20240115090503'
    """
    branch_name = run_branch_name(timestamp, DEFAULT_PREFIX if prefix is None else prefix)
    root = os.path.realpath(project_root)
    if not is_repository(root):
        raise NotAGitRepositoryError("Not a git repository")
    try:
        execute(["checkout", "-b", branch_name], cwd=root)
    except GitCommandError as e:
        message = str(e)
        if "already exists" in message:
            raise BranchExistsError(f"Branch '{branch_name}' already exists") from e
        raise GitCommandError(sanitize(message, root) or "Failed to create branch") from e
    logger.info(f"Created branch {branch_name}")
    return branch_name
