"""Binding registry and the parse/validate engine.

Configuration through environment variables happens in two phases:

1. **Register** — during start-up the program declares each variable it
   understands: a name, a description for help text, a ``Var`` to write
   into, whether it is required, and optionally custom conversion and
   validation strategies.  Registration checks the name and target but
   never reads the environment.
2. **Parse** — once everything is registered, ``parse()`` snapshots the
   environment and, for each binding whose variable is set, converts the
   text into the target and then validates it.

Parsing is fail-fast and not transactional.  The first failure aborts
the pass; targets already written earlier in the pass keep their new
values.  Calling ``parse()`` again after fixing the environment simply
re-applies every variable.

The registry also exports usage metadata (name, description, default
and required flag) in name order, for help screens.
"""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TypeAlias

from py_getenv.env import Environment
from py_getenv.errors import (
    InvalidEnvironmentVariableError,
    NameAlreadyRegisteredError,
    NameInvalidError,
    RequiredMissingError,
    TargetAlreadyBoundError,
    ValueInvalidError,
)
from py_getenv.kinds import Kind, Var
from py_getenv.logging import Logger, LogLevel

ParseFunc: TypeAlias = Callable[[Var, str, str], None]
CheckFunc: TypeAlias = Callable[[Var, str], None]
UsageFunc: TypeAlias = Callable[[str, str, str | bool | int | float, bool], None]

_NAME_PATTERN = re.compile(r"[A-Za-z_][0-9A-Za-z_]*")


def default_parse_func(target: Var, name: str, value: str) -> None:  # noqa: ARG001
    """Convert *value* with the target kind's built-in converter."""
    target.set_from(value)


def default_check_func(target: Var, name: str) -> None:  # noqa: ARG001
    """Accept any converted value."""


def check_name(name: str) -> None:
    """Raise NameInvalidError unless *name* is ``[A-Za-z_][0-9A-Za-z_]*``."""
    if not isinstance(name, str) or _NAME_PATTERN.fullmatch(name) is None:
        raise NameInvalidError(name)


def check_target(target: object) -> Var:
    """Return *target* if it is a Var holding a legal value for its kind.

    Raises:
        ValueInvalidError: For anything else: None, plain values,
            collections, or a Var whose value does not fit its kind.

    """
    if not isinstance(target, Var):
        raise ValueInvalidError(f"got {type(target).__name__}")
    if not isinstance(target.kind, Kind) or not target.kind.accepts(target.value):
        raise ValueInvalidError(f"{target!r} holds an illegal value")
    return target


@dataclass(frozen=True)
class Binding:
    """One registered environment variable.

    ``default`` is a snapshot of the target's value at registration;
    it is reported in usage output and never re-read.
    """

    name: str
    description: str
    target: Var
    default: str | bool | int | float
    required: bool
    parse_fn: ParseFunc
    check_fn: CheckFunc

    @property
    def kind(self) -> Kind:
        """Return the kind of the bound target."""
        return self.target.kind


class Registry:
    """A set of bindings keyed by variable name.

    Each name maps to exactly one binding, and each ``Var`` may be bound
    only once.  The registry is not thread-safe: register everything
    and call ``parse()`` before other threads start reading targets.
    """

    def __init__(self, logger: Logger | None = None) -> None:
        """Create an empty registry.

        Args:
            logger: Audit log to record events in (a new one if omitted).

        """
        self._bindings: dict[str, Binding] = {}
        self._logger = logger if logger is not None else Logger()

    @property
    def logger(self) -> Logger:
        """Return the registry's audit log."""
        return self._logger

    def register(
        self,
        name: str,
        description: str,
        target: Var,
        *,
        required: bool = False,
        parse_fn: ParseFunc | None = None,
        check_fn: CheckFunc | None = None,
    ) -> Binding:
        """Bind environment variable *name* to *target*.

        Args:
            name: The environment variable name.
            description: Free-form text for usage output.
            target: The cell that parsing writes into.
            required: If True, parsing fails when the variable is unset.
            parse_fn: Conversion strategy (the kind's converter if omitted).
            check_fn: Validation strategy (accept-all if omitted).

        Returns:
            The new binding.

        Raises:
            NameInvalidError: If *name* fails the identifier grammar.
            ValueInvalidError: If *target* is not a legal Var.
            NameAlreadyRegisteredError: If *name* is already bound.
            TargetAlreadyBoundError: If *target* is bound under any name.

        """
        check_name(name)
        check_target(target)
        if name in self._bindings:
            raise NameAlreadyRegisteredError(name)
        for existing in self._bindings.values():
            if existing.target is target:
                raise TargetAlreadyBoundError(existing.name)

        binding = Binding(
            name=name,
            description=description,
            target=target,
            default=target.value,
            required=required,
            parse_fn=parse_fn if parse_fn is not None else default_parse_func,
            check_fn=check_fn if check_fn is not None else default_check_func,
        )
        self._bindings[name] = binding
        self._logger.log(LogLevel.INFO, f"registered {name}", source="registry", variable=name)
        return binding

    def get(self, name: str) -> Binding | None:
        """Return the binding for *name*, or None if not registered."""
        return self._bindings.get(name)

    def bindings(self) -> list[Binding]:
        """Return all bindings sorted by name."""
        return [self._bindings[name] for name in sorted(self._bindings)]

    def usage(self, visitor: UsageFunc) -> None:
        """Call ``visitor(name, description, default, required)`` per binding.

        Bindings are visited in ascending lexicographic order by name so
        that help output is reproducible.
        """
        for binding in self.bindings():
            visitor(binding.name, binding.description, binding.default, binding.required)

    def parse(self, env: Environment | Mapping[str, str] | None = None) -> None:
        """Read, convert, and validate every registered variable.

        Args:
            env: Where to read variables from.  Defaults to a snapshot of
                the process environment taken now.

        Raises:
            RequiredMissingError: If a required variable is unset or blank.
            InvalidEnvironmentVariableError: If a conversion or check
                strategy rejects a value.  Targets written before the
                failure are not rolled back.

        """
        if env is None:
            env = Environment.from_process()
        elif not isinstance(env, Environment):
            env = Environment(initial=env)

        for binding in self.bindings():
            name = binding.name
            value = env.lookup(name)
            if not value:
                if binding.required:
                    raise RequiredMissingError(name)
                continue

            try:
                binding.parse_fn(binding.target, name, value)
            except ValueError as e:
                raise InvalidEnvironmentVariableError(name, value, str(e)) from e
            try:
                binding.check_fn(binding.target, name)
            except ValueError as e:
                raise InvalidEnvironmentVariableError(name, value, str(e)) from e

            self._logger.log(
                LogLevel.DEBUG, f"{name} set from environment", source="parse", variable=name
            )

        self._logger.log(LogLevel.INFO, f"parsed {len(self._bindings)} variables", source="parse")

    def reset(self) -> None:
        """Discard every binding and clear the audit log."""
        self._bindings.clear()
        self._logger.clear()

    def __contains__(self, name: object) -> bool:
        """Return True if *name* is registered."""
        return name in self._bindings

    def __len__(self) -> int:
        """Return the number of bindings."""
        return len(self._bindings)
