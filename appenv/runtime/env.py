from __future__ import annotations

import os
import sys
from typing import Optional, Sequence

from appenv.logging import get_logger
from appenv.runtime.command import CommandInput
from appenv.runtime.process import Process

ENV_VAR = "APP_ENV"

PRODUCTION = "production"
DEVELOPMENT = "development"
TESTING = "testing"

# Fixed when the interpreter starts; `python -O` turns it on.
IS_RELEASE: bool = not __debug__

_ALIASES = {
    "prod": PRODUCTION,
    "production": PRODUCTION,
    "dev": DEVELOPMENT,
    "development": DEVELOPMENT,
    "test": TESTING,
    "testing": TESTING,
}

logger = get_logger(__name__)


def canonical_name(value: Optional[str]) -> str:
    """
    Map a raw environment string to its canonical name.

    Matching is case-sensitive. None means "not given" and selects
    development; any other unrecognised string (including "") is returned
    as-is and becomes a custom environment.
    """
    if value is None:
        return DEVELOPMENT
    return _ALIASES.get(value, value)


class Environment:
    """
    The environment the application is running in, e.g. production or
    development.

        env = Environment.detect()
        if env == Environment.production():
            ...

    Two environments are equal when their names are equal; the argument
    vector plays no part in comparison.
    """

    __slots__ = ("_name", "arguments")

    def __init__(self, name: str, arguments: Sequence[str] | None = None) -> None:
        self._name = name
        self.arguments: list[str] = list(sys.argv if arguments is None else arguments)

    # -- detection --------------------------------------------------------

    @classmethod
    def detect(
        cls,
        arguments: Sequence[str] | None = None,
        *,
        env_var: str = ENV_VAR,
        process: Process | None = None,
    ) -> "Environment":
        """Detect the environment from an argument vector (default ``sys.argv``)."""
        command_input = CommandInput.from_arguments(sys.argv if arguments is None else arguments)
        return cls.detect_from(command_input, env_var=env_var, process=process)

    @classmethod
    def detect_from(
        cls,
        command_input: CommandInput,
        *,
        env_var: str = ENV_VAR,
        process: Process | None = None,
    ) -> "Environment":
        """
        Detect the environment from ``command_input``, consuming the
        ``--env`` / ``-e`` option from it.

        Raises ParseError when the option is malformed.
        """
        value = command_input.parse_option(
            "env", short="e", help="Change the application's environment"
        )
        source = "--env"
        if value is None:
            value = (process or cls.process()).get(env_var)
            source = env_var
        if value is None:
            source = "default"

        env = cls(canonical_name(value))
        env.command_input = command_input
        logger.debug("Detected environment %r (from %s)", env.name, source)
        return env

    # -- presets ----------------------------------------------------------

    @classmethod
    def production(cls, arguments: Sequence[str] | None = None) -> "Environment":
        """An environment for deploying the application to consumers."""
        return cls(PRODUCTION, arguments)

    @classmethod
    def development(cls, arguments: Sequence[str] | None = None) -> "Environment":
        """An environment for developing the application."""
        return cls(DEVELOPMENT, arguments)

    @classmethod
    def testing(cls, arguments: Sequence[str] | None = None) -> "Environment":
        """An environment for testing the application."""
        return cls(TESTING, arguments)

    @classmethod
    def custom(cls, name: str, arguments: Sequence[str] | None = None) -> "Environment":
        """Create a custom environment; any name, including "", is accepted."""
        return cls(name, arguments)

    # -- process environment ----------------------------------------------

    @staticmethod
    def get(key: str) -> Optional[str]:
        """Get a key from the process environment."""
        return os.environ.get(key)

    @staticmethod
    def process() -> Process:
        """The current process environment, as a read-only Process."""
        return Process()

    # -- properties -------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_release(self) -> bool:
        """
        True when the interpreter runs in optimised mode (``python -O``).

        This is not based on the environment name, so
        ``Environment.production().is_release`` is usually False. That lets
        production behaviour be exercised while debug checks stay enabled.
        """
        return IS_RELEASE

    @property
    def command_input(self) -> CommandInput:
        return CommandInput.from_arguments(self.arguments)

    @command_input.setter
    def command_input(self, value: CommandInput) -> None:
        self.arguments = value.all_arguments()

    # -- value semantics --------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Environment):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return f"Environment(name={self._name!r}, arguments={self.arguments!r})"

    def __str__(self) -> str:
        return self._name
