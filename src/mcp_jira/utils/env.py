"""Environment variable utility functions for MCP Jira."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger("mcp-jira.utils.env")

DEFAULT_ENV_FILE = ".env"


def getenv(
    env: Mapping[str, str | None], env_var_name: str, default: str | None = None
) -> str | None:
    """Retrieve the value of a setting.

    The explicit `env` mapping wins over the process environment. Empty strings
    count as unset so that `JIRA_URL=` in a seed file does not satisfy a
    required setting.

    Args:
        env: Overrides (e.g. command line values) keyed by variable name.
        env_var_name: The name of the environment variable to retrieve.
        default: Value returned when neither source has a non-empty value.

    Returns:
        The value of the setting if found, otherwise `default`.
    """
    value = env.get(env_var_name)
    if not value:
        value = os.getenv(env_var_name)
    return value or default


def is_env_ssl_verify(
    env: Mapping[str, str | None], env_var_name: str, default: str = "true"
) -> bool:
    """Check SSL verification setting with secure defaults.

    Defaults to true unless explicitly set to false values.

    Args:
        env: Overrides keyed by variable name.
        env_var_name: Name of the environment variable to check
        default: Default value if environment variable is not set

    Returns:
        True unless explicitly set to false values
    """
    value = getenv(env, env_var_name, default) or default
    return value.lower() not in ("false", "0", "no")


def env_file_candidates(file_path: str = DEFAULT_ENV_FILE) -> list[Path]:
    """List the locations searched for a seed file, in lookup order.

    The name as given, then relative to the working directory, the project root
    (the directory holding `src/`) and the parent of the working directory.
    """
    project_root = Path(__file__).resolve().parents[3]
    cwd = Path.cwd()
    candidates = [
        Path(file_path),
        cwd / file_path,
        project_root / file_path,
        cwd.parent / file_path,
    ]
    unique: list[Path] = []
    for candidate in candidates:
        if candidate not in unique:
            unique.append(candidate)
    return unique


def load_env_file(file_path: str = DEFAULT_ENV_FILE) -> Path | None:
    """Seed the process environment from a KEY=VALUE file.

    Only variables that are not already set are filled in. A missing file is
    not an error.

    Args:
        file_path: File name or path of the seed file.

    Returns:
        The path that was loaded, or None when no candidate exists.
    """
    for candidate in env_file_candidates(file_path):
        if candidate.is_file():
            logger.debug(f"Loading environment from file: {candidate}")
            load_dotenv(candidate, override=False)
            return candidate

    logger.debug(f"No environment file named '{file_path}' found, skipping")
    return None
