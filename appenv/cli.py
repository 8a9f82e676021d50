from __future__ import annotations

import argparse
import sys
from pathlib import Path

from appenv.logging import get_logger, resolve_log_level, setup_logging
from appenv.runtime.context import APP_NAME, get_runtime_context
from appenv.runtime.env import Environment

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="appenv", description="Runtime environment inspection")
    subparsers = parser.add_subparsers(dest="command", required=True)

    show = subparsers.add_parser(
        "show",
        help="Detect the environment from --env/-e or APP_ENV and print it",
    )
    show.add_argument("--app-name", default=APP_NAME, help="Application name used for directories")
    show.add_argument("--root", help="Put all directories under this root instead of platform defaults")
    show.add_argument("--dotenv-dir", help="Directory holding .env files (default: current directory)")
    show.add_argument("--no-dotenv", action="store_true", help="Do not load .env files")

    get_cmd = subparsers.add_parser("get", help="Print a process environment variable")
    get_cmd.add_argument("key", help="Variable name")

    return parser


def _run_show(args: argparse.Namespace, rest: list[str]) -> int:
    context = get_runtime_context(
        app_name=args.app_name,
        arguments=[args.app_name, *rest],
        load_dotenv=not args.no_dotenv,
        dotenv_dir=Path(args.dotenv_dir) if args.dotenv_dir else None,
        root_override=Path(args.root).expanduser() if args.root else None,
    )
    env = context.environment

    setup_logging(resolve_log_level(env))
    for path in context.dotenv_files:
        logger.info("dotenv: %s", path)

    print(f"environment: {env.name}")
    print(f"release: {str(env.is_release).lower()}")
    print(f"arguments: {' '.join(env.command_input.arguments)}")
    print(f"config_dir: {context.paths.config_dir}")
    print(f"state_dir: {context.paths.state_dir}")
    print(f"cache_dir: {context.paths.cache_dir}")
    print(f"log_dir: {context.paths.log_dir}")
    return 0


def _run_get(args: argparse.Namespace) -> int:
    value = Environment.get(args.key)
    if value is None:
        print(f"error: {args.key} is not set", file=sys.stderr)
        return 1
    print(value)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args, rest = parser.parse_known_args(argv)
    if rest and args.command != "show":
        parser.error(f"unrecognized arguments: {' '.join(rest)}")

    try:
        if args.command == "show":
            return _run_show(args, rest)
        if args.command == "get":
            return _run_get(args)
    except Exception as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    parser.print_help()
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
