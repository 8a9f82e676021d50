from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import Sequence

from appenv.errors import ParseError


class _RaisingParser(argparse.ArgumentParser):
    # argparse exits the interpreter on bad input; callers want an exception.
    def error(self, message: str):  # type: ignore[override]
        raise ParseError(message)


@dataclass
class CommandInput:
    """
    An argument vector split into the executable path and the tokens that
    have not been consumed yet.
    """

    executable_path: list[str] = field(default_factory=list)
    arguments: list[str] = field(default_factory=list)

    @classmethod
    def from_arguments(cls, argv: Sequence[str]) -> "CommandInput":
        argv = list(argv)
        return cls(executable_path=argv[:1], arguments=argv[1:])

    def all_arguments(self) -> list[str]:
        return self.executable_path + self.arguments

    def parse_option(
        self,
        name: str,
        short: str | None = None,
        help: str | None = None,
    ) -> str | None:
        """
        Consume ``--name <value>`` (or ``-short <value>``) from the pending
        tokens and return its value, or None when the option is absent.

        Only the exact tokens ``--name``, ``--name=<value>`` and ``-short``
        match; ``-short<value>`` and ``-short=<value>`` are left alone. Tokens
        after ``--`` are never inspected. The remaining tokens keep their
        relative order. A repeated option yields its last value.
        """
        parser = _RaisingParser(add_help=False, allow_abbrev=False)
        flags = [f"--{name}"]
        if short:
            flags.append(f"-{short}")
        parser.add_argument(*flags, dest="value", help=help)

        head, tail = list(self.arguments), []
        if "--" in head:
            cut = head.index("--")
            head, tail = head[:cut], head[cut:]

        # argparse would read "-env" as "-e" with value "nv"; hide such tokens.
        hidden: dict[str, str] = {}
        masked = []
        for index, token in enumerate(head):
            if short and token.startswith(f"-{short}") and token != f"-{short}" and not token.startswith("--"):
                marker = f"\x00{index}"
                hidden[marker] = token
                token = marker
            masked.append(token)

        namespace, remaining = parser.parse_known_args(masked)
        if namespace.value in hidden:
            raise ParseError(f"argument {'/'.join(flags)}: expected one argument")

        self.arguments = [hidden.get(token, token) for token in remaining] + tail
        return namespace.value
