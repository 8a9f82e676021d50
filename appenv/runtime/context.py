from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from appenv.runtime.command import CommandInput
from appenv.runtime.dotenv_files import load_dotenv_files
from appenv.runtime.env import ENV_VAR, Environment, canonical_name
from appenv.runtime.paths import ROOT_VAR, AppPaths, resolve_app_paths

APP_NAME = "appenv"


@dataclass(frozen=True)
class RuntimeContext:
    environment: Environment
    paths: AppPaths
    app_name: str = APP_NAME

    # Dotenv files that were actually read, in load order
    dotenv_files: tuple[Path, ...] = field(default_factory=tuple)

    # Env var names (host can change if desired)
    env_var: str = ENV_VAR
    root_var: str = ROOT_VAR


def get_runtime_context(
    *,
    app_name: str = APP_NAME,
    arguments: Sequence[str] | None = None,
    environment: Environment | str | None = None,
    load_dotenv: bool = True,
    dotenv_dir: Path | None = None,
    root_override: Path | None = None,
    env_var: str = ENV_VAR,
    root_var: str = ROOT_VAR,
) -> RuntimeContext:
    if isinstance(environment, Environment):
        resolved_env = environment
    elif environment is not None:
        # An explicit name wins over --env, which is still stripped.
        command_input = CommandInput.from_arguments(sys.argv if arguments is None else arguments)
        command_input.parse_option("env", short="e")
        resolved_env = Environment(canonical_name(environment), command_input.all_arguments())
    else:
        resolved_env = Environment.detect(arguments, env_var=env_var)

    loaded: Sequence[Path] = ()
    if load_dotenv:
        loaded = load_dotenv_files(resolved_env, directory=dotenv_dir)

    paths = resolve_app_paths(
        app_name,
        resolved_env,
        root_override=root_override,
        root_var=root_var,
    )

    return RuntimeContext(
        environment=resolved_env,
        paths=paths,
        app_name=app_name,
        dotenv_files=tuple(loaded),
        env_var=env_var,
        root_var=root_var,
    )
