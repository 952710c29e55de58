"""Typed environment-variable bindings.

Re-exports public symbols so callers can write::

    from py_getenv import Kind, Registry, Var

and provides a function-based interface over one process-wide default
registry, for programs that don't want to pass a registry around::

    import py_getenv

    port = py_getenv.Var(py_getenv.Kind.INT, 8080)
    py_getenv.register("PORT", "port to listen on", port)
    py_getenv.parse()

Tests should prefer their own ``Registry`` instances, or call
``reset()`` between cases.
"""

from collections.abc import Mapping

from py_getenv.env import Environment
from py_getenv.errors import (
    GetenvError,
    InvalidEnvironmentVariableError,
    NameAlreadyRegisteredError,
    NameInvalidError,
    RequiredMissingError,
    TargetAlreadyBoundError,
    ValueInvalidError,
)
from py_getenv.kinds import ConversionError, Kind, Var
from py_getenv.logging import LogEntry, Logger, LogLevel
from py_getenv.registry import (
    Binding,
    CheckFunc,
    ParseFunc,
    Registry,
    UsageFunc,
    default_check_func,
    default_parse_func,
)
from py_getenv.usage import format_usage

_default = Registry()


def default_registry() -> Registry:
    """Return the process-wide default registry."""
    return _default


def register(
    name: str,
    description: str,
    target: Var,
    *,
    required: bool = False,
    parse_fn: ParseFunc | None = None,
    check_fn: CheckFunc | None = None,
) -> Binding:
    """Register a binding in the default registry (see ``Registry.register``)."""
    return _default.register(
        name, description, target, required=required, parse_fn=parse_fn, check_fn=check_fn
    )


def parse(env: Environment | Mapping[str, str] | None = None) -> None:
    """Parse the default registry (see ``Registry.parse``)."""
    _default.parse(env)


def usage(visitor: UsageFunc) -> None:
    """Enumerate the default registry in name order (see ``Registry.usage``)."""
    _default.usage(visitor)


def reset() -> None:
    """Replace the default registry with a fresh, empty one."""
    global _default  # noqa: PLW0603
    _default = Registry()


__all__ = [
    "Binding",
    "CheckFunc",
    "ConversionError",
    "Environment",
    "GetenvError",
    "InvalidEnvironmentVariableError",
    "Kind",
    "LogEntry",
    "LogLevel",
    "Logger",
    "NameAlreadyRegisteredError",
    "NameInvalidError",
    "ParseFunc",
    "Registry",
    "RequiredMissingError",
    "TargetAlreadyBoundError",
    "UsageFunc",
    "ValueInvalidError",
    "Var",
    "default_check_func",
    "default_parse_func",
    "default_registry",
    "format_usage",
    "parse",
    "register",
    "reset",
    "usage",
]
