"""Shared pytest fixtures.

Keeps CONVERGENT_* variables from the developer's environment out of tests and
provides throwaway git repositories for the git and CLI tests.
"""

import os
import subprocess
import tempfile

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove Convergent settings from the environment for the duration of a test."""
    for name in ("CONVERGENT_BRANCH_PREFIX", "CONVERGENT_LOG_LEVEL"):
        # setenv first so teardown also removes values loaded from .env files
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Change into an empty temporary directory.

    Returns:
        Path: The temporary directory.
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def git_repo():
    """Create a temporary git repository with an initial commit.

    Sets up a minimal git repository with user config and an initial commit
    containing init.txt. Changes cwd to the repo directory during the test.

    Yields:
        str: Resolved absolute path to the temporary git repository.

    Note:
        Automatically restores the original working directory after the test.
    """
    repo_dir = os.path.realpath(tempfile.mkdtemp())
    subprocess.run(["git", "init", repo_dir], capture_output=True, check=True)
    subprocess.run(
        ["git", "-C", repo_dir, "config", "user.name", "Test"],
        capture_output=True,
        check=True,
    )
    subprocess.run(
        ["git", "-C", repo_dir, "config", "user.email", "test@test.com"],
        capture_output=True,
        check=True,
    )
    init_file = os.path.join(repo_dir, "init.txt")
    with open(init_file, "w") as f:
        f.write("init\n")
    subprocess.run(["git", "-C", repo_dir, "add", "."], capture_output=True, check=True)
    subprocess.run(
        ["git", "-C", repo_dir, "commit", "-m", "init"],
        capture_output=True,
        check=True,
    )
    original_dir = os.getcwd()
    os.chdir(repo_dir)
    yield repo_dir
    os.chdir(original_dir)
