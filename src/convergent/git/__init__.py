"""Git integration for Convergent.

This module provides git utilities including command execution and branch
operations.

Exports:
    GitCommandError: Exception raised when a git command fails.
    NotAGitRepositoryError: Raised when the target directory is not a repository.
    BranchExistsError: Raised when the run branch already exists.
    execute: Execute an arbitrary git command and return stdout.
    is_repository: Check whether a directory is inside a git repository.
    current: Get the name of the current git branch.
    create_run_branch: Create and check out a timestamped run branch.
"""

from convergent.git.branch import BranchExistsError, NotAGitRepositoryError, create_run_branch, current
from convergent.git.core import GitCommandError, execute, is_repository

__all__ = [
    "BranchExistsError",
    "GitCommandError",
    "NotAGitRepositoryError",
    "create_run_branch",
    "current",
    "execute",
    "is_repository",
]
