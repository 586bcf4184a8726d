"""Environment variable loading from `.env` files.

Applications that configure the client through `load_settings()` can call
`load_env()` first so that `DATADOG_APP_KEY` and friends may live in a
`.env` file next to the project:

    from src.common.env import load_env
    from src.common.config import load_settings

    load_env()
    settings = load_settings()

The search order is the current working directory, then the project root
(the nearest parent holding `pyproject.toml` or `.git`). Variables already
set in the shell win over `.env` values unless `override=True`.
"""

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv as _load_dotenv

logger = logging.getLogger(__name__)

_env_loaded = False


def find_project_root(start_path: Optional[Path] = None) -> Optional[Path]:
    """Find the project root by looking for pyproject.toml or .git."""
    current = start_path or Path.cwd()

    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").exists():
            return parent
        if (parent / ".git").exists():
            return parent

    return None


def find_env_file(filename: str = ".env") -> Optional[Path]:
    """Return the first `filename` found in the cwd or project root."""
    cwd_env = Path.cwd() / filename
    if cwd_env.exists():
        return cwd_env

    project_root = find_project_root()
    if project_root:
        root_env = project_root / filename
        if root_env.exists():
            return root_env

    return None


def load_env(env_file: Optional[str] = None, override: bool = False) -> bool:
    """Load environment variables from a `.env` file.

    Args:
        env_file: Explicit path. If None, searches standard locations.
        override: If True, `.env` values replace existing variables.

    Returns:
        True if a file was found and loaded, False otherwise.
    """
    global _env_loaded

    dotenv_path = Path(env_file) if env_file else find_env_file()
    if dotenv_path is None or not dotenv_path.exists():
        logger.debug("No .env file found, using environment variables only")
        return False

    logger.debug("Loading environment", extra={"dotenv_path": str(dotenv_path)})
    _load_dotenv(dotenv_path=dotenv_path, override=override)
    _env_loaded = True
    return True


def is_loaded() -> bool:
    """Check whether `load_env()` has loaded a file."""
    return _env_loaded
