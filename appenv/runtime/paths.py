from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import quote

from platformdirs import PlatformDirs

from appenv.runtime.env import Environment

ROOT_VAR = "APPENV_DIR"


@dataclass(frozen=True)
class AppPaths:
    config_dir: Path
    state_dir: Path
    cache_dir: Path
    log_dir: Path

    def all(self) -> tuple[Path, ...]:
        return (self.config_dir, self.state_dir, self.cache_dir, self.log_dir)

    def ensure(self) -> "AppPaths":
        for path in self.all():
            path.mkdir(parents=True, exist_ok=True)
        return self


def env_dirname(environment: Environment) -> str:
    """
    The environment name as a single, safe path component.

    Separators and other reserved characters are percent-encoded, so any
    custom name stays below the root. "." and ".." are encoded too, and the
    empty name maps to "default".
    """
    if not environment.name:
        return "default"
    encoded = quote(environment.name, safe="")
    if encoded in (".", ".."):
        encoded = encoded.replace(".", "%2E")
    return encoded


def resolve_app_paths(
    app_name: str,
    environment: Environment,
    *,
    root_override: Path | None = None,
    root_var: str = ROOT_VAR,
    create: bool = False,
) -> AppPaths:
    """
    Resolve the per-environment directories for ``app_name``.

    Each environment gets its own subdirectory so production and development
    never share state. ``root_override`` (or the ``APPENV_DIR`` variable)
    replaces the platform locations with a single tree, which is handy in
    tests.
    """
    env_dir = env_dirname(environment)

    root = root_override
    if root is None:
        root_str = (os.getenv(root_var) or "").strip()
        root = Path(root_str).expanduser() if root_str else None

    if root is not None:
        base = Path(root) / env_dir
        paths = AppPaths(
            config_dir=base / "config",
            state_dir=base / "state",
            cache_dir=base / "cache",
            log_dir=base / "logs",
        )
    else:
        dirs = PlatformDirs(appname=app_name, appauthor=False)
        paths = AppPaths(
            config_dir=dirs.user_config_path / env_dir,
            state_dir=dirs.user_state_path / env_dir,
            cache_dir=dirs.user_cache_path / env_dir,
            log_dir=dirs.user_log_path / env_dir,
        )

    return paths.ensure() if create else paths
