from appenv.errors import AppEnvError, ParseError
from appenv.runtime.command import CommandInput
from appenv.runtime.context import RuntimeContext, get_runtime_context
from appenv.runtime.env import ENV_VAR, IS_RELEASE, Environment
from appenv.runtime.process import Process

__all__ = [
    "AppEnvError",
    "CommandInput",
    "ENV_VAR",
    "Environment",
    "IS_RELEASE",
    "ParseError",
    "Process",
    "RuntimeContext",
    "get_runtime_context",
]
