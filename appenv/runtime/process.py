from __future__ import annotations

import os
from typing import Mapping


class Process:
    """Read-only view of a process environment table."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get(self, name: str, default: str | None = None) -> str | None:
        return self._environ.get(name, default)

    def __contains__(self, name: object) -> bool:
        return name in self._environ

    def __repr__(self) -> str:
        source = "os.environ" if self._environ is os.environ else "mapping"
        return f"Process({source})"
