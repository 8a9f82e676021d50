from __future__ import annotations

import sys

from appenv import Environment, get_runtime_context
from appenv.logging import resolve_log_level, setup_logging

# Try:
#   python examples/detect_basic.py --env production --port 8080
#   APP_ENV=staging python examples/detect_basic.py


def main() -> int:
    context = get_runtime_context(arguments=sys.argv)
    env = context.environment
    setup_logging(resolve_log_level(env))

    if env == Environment.production():
        print("Running in production")
    else:
        print(f"Running in {env.name!r}")

    print(f"release build: {env.is_release}")
    print(f"remaining arguments: {env.command_input.arguments}")
    print(f"DB_PASSWORD set: {Environment.get('DB_PASSWORD') is not None}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
