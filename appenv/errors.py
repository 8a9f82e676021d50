from __future__ import annotations


class AppEnvError(Exception):
    """Base class for errors raised by appenv."""


class ParseError(AppEnvError, ValueError):
    """Malformed command-line option or option value."""
