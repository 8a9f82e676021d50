"""
Dotenv loading for a detected environment.

For an environment named ``staging`` the files ``.env.staging`` and ``.env``
are read, in that order. Variables already present in the process are never
overwritten, so the precedence is: process > ``.env.<name>`` > ``.env``.
"""

from __future__ import annotations

from pathlib import Path
from urllib.parse import quote

from dotenv import load_dotenv

from appenv.logging import get_logger
from appenv.runtime.env import Environment

logger = get_logger(__name__)

DOTENV_FILENAME = ".env"


def dotenv_paths(environment: Environment, directory: Path | None = None) -> list[Path]:
    root = Path.cwd() if directory is None else Path(directory)
    paths = []
    if environment.name:
        paths.append(root / f"{DOTENV_FILENAME}.{quote(environment.name, safe='')}")
    paths.append(root / DOTENV_FILENAME)
    return paths


def load_dotenv_files(environment: Environment, *, directory: Path | None = None) -> list[Path]:
    """Load the dotenv files for ``environment`` and return the ones that existed."""
    loaded: list[Path] = []
    for path in dotenv_paths(environment, directory):
        if not path.is_file():
            continue
        load_dotenv(dotenv_path=path, override=False)
        logger.debug("Loaded %s", path)
        loaded.append(path)
    return loaded
