"""Environment-driven settings.

Settings are read from the process environment after loading an optional
``.env`` file. Variables already set in the environment take precedence over
the file.

Environment variables:
    CONVERGENT_BRANCH_PREFIX: Prefix for run branch names (default: convergent/run-).
    CONVERGENT_LOG_LEVEL: Logging level name for the CLI (default: WARNING).
"""

import logging
import os
from dataclasses import dataclass

import dotenv

from convergent.git.branch import DEFAULT_PREFIX

logger = logging.getLogger("convergent.config")


@dataclass(frozen=True)
class Settings:
    branch_prefix: str = DEFAULT_PREFIX
    log_level: str = "WARNING"


def load_settings(env_file: str | None = None) -> Settings:
    """Load settings from the environment and an optional .env file.

    Args:
        env_file: Path to a dotenv file. When None, python-dotenv searches
            for a ``.env`` file from the current directory upwards.

    Returns:
        Settings: The resolved settings.
    """
    dotenv.load_dotenv(env_file or dotenv.find_dotenv(usecwd=True))
    log_level = os.environ.get("CONVERGENT_LOG_LEVEL", "WARNING").upper()
    if log_level not in logging.getLevelNamesMapping():
        logger.warning(f"Unknown CONVERGENT_LOG_LEVEL {log_level!r}, using WARNING")
        log_level = "WARNING"
    return Settings(
        branch_prefix=os.environ.get("CONVERGENT_BRANCH_PREFIX", DEFAULT_PREFIX),
        log_level=log_level,
    )
